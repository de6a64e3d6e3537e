"""LexiMap API — FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map LexiMapError / anything else → {"error": ...} JSON
    - CORS open to any origin by default (configurable via settings)
    - Lexicon and relation client created once in the lifespan, closed on shutdown

Design Decisions:
    - Lifespan over @app.on_event: FastAPI recommended pattern, cleaner cleanup
    - Pipeline stored on app.state and reached through get_assembler, so tests
      override one dependency instead of patching globals
"""

import asyncio
import logging
from contextlib import asynccontextmanager

import httpx
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from leximap.api.dependencies import build_assembler
from leximap.api.error_handlers import register_error_handlers
from leximap.api.routes import health, lexeme
from leximap.config import API_VERSION, get_settings
from leximap.infrastructure.observability import setup_logging
from leximap.infrastructure.relation_client import RelationClient
from leximap.infrastructure.wordnet_lexicon import WordNetLexicon

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)

    lexicon = WordNetLexicon(auto_download=settings.wordnet_auto_download)
    await asyncio.to_thread(lexicon.ensure_loaded)

    async with httpx.AsyncClient(
        timeout=settings.relation_timeout_seconds,
    ) as http_client:
        relations = RelationClient(
            http_client,
            settings.relation_base_url,
            settings.relation_timeout_seconds,
        )
        app.state.assembler = build_assembler(lexicon, relations)
        logger.info("LexiMap API started")
        yield
    logger.info("LexiMap API shutting down")


app = FastAPI(title="LexiMap API", version=API_VERSION, lifespan=lifespan)

settings = get_settings()
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(health.router)
app.include_router(lexeme.router)

register_error_handlers(app)
