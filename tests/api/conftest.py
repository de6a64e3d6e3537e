"""API test fixtures — FastAPI app with the lexeme pipeline overridden.

Invariants:
    - get_assembler overridden per test; lifespan (WordNet load, real HTTP) never runs
    - App exceptions are not re-raised into the test so 500 responses can be asserted

Design Decisions:
    - httpx.AsyncClient + ASGITransport: same async client stack as production code
    - make_client lets a test choose its own lexicon / relation source
"""

import pytest
from httpx import ASGITransport, AsyncClient

from leximap.api.dependencies import build_assembler, get_assembler
from leximap.main import app
from tests.fakes import BANK_ENTRIES, BANK_RELATIONS, FakeLexicon, FakeRelationSource


@pytest.fixture
async def make_client():
    clients = []

    async def _make(lexicon=None, relations=None) -> AsyncClient:
        assembler = build_assembler(
            lexicon if lexicon is not None else FakeLexicon({"bank": BANK_ENTRIES}),
            relations if relations is not None else FakeRelationSource({"bank": BANK_RELATIONS}),
        )
        app.dependency_overrides[get_assembler] = lambda: assembler
        client = AsyncClient(
            transport=ASGITransport(app=app, raise_app_exceptions=False),
            base_url="http://test",
        )
        clients.append(client)
        return client

    yield _make

    for c in clients:
        await c.aclose()
    app.dependency_overrides.clear()


@pytest.fixture
async def client(make_client):
    return await make_client()
