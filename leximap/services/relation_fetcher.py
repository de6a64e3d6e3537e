"""Relation Fetcher — synonyms and antonyms fetched concurrently.

Invariants:
    - Both relation kinds requested concurrently; result waits for both
    - Never raises: each list independently degrades to [] (RelationSource contract)
    - Output order: (synonyms, antonyms)
"""

import asyncio

from leximap.core.boundary_protocols import RelationSource
from leximap.core.domain_types import RelationKind


class RelationFetcher:

    def __init__(self, source: RelationSource):
        self.source = source

    async def fetch(self, word: str) -> tuple[list[str], list[str]]:
        synonyms, antonyms = await asyncio.gather(
            self.source.fetch(word, RelationKind.SYNONYM),
            self.source.fetch(word, RelationKind.ANTONYM),
        )
        return synonyms, antonyms
