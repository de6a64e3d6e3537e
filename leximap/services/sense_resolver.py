"""Sense Resolver — awaits the lexicon, then resolves senses in the pure core.

Invariants:
    - Returned tuple is never empty (fallback sense on no entries)
    - Lexicon failures propagate unchanged
"""

import logging

from leximap.core.boundary_protocols import Lexicon
from leximap.core.domain_types import Sense
from leximap.core.resolve_senses import resolve_senses

logger = logging.getLogger(__name__)


class SenseResolver:

    def __init__(self, lexicon: Lexicon):
        self.lexicon = lexicon

    async def resolve(self, word: str) -> tuple[Sense, ...]:
        entries = await self.lexicon.lookup(word)
        senses = resolve_senses(word, entries)
        logger.debug(
            "Resolved senses",
            extra={"word": word, "sense_count": len(senses)},
        )
        return senses
