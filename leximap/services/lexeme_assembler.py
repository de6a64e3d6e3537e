"""Lexeme Assembler — one request word in, one Lexeme record out.

Invariants:
    - Word normalized (None → "", str(), lowercase) before anything else
    - Empty normalized word → MissingWordError, no collaborator is called
    - Sense resolution and relation fetch run concurrently; both finish before merge
    - Resolver failures propagate; relation failures were already absorbed below

Design Decisions:
    - Resolver and fetcher injected: no module-level lexicon singleton, tests
      substitute fakes through the FastAPI dependency
"""

import asyncio
import logging

from leximap.core.assemble_lexeme import build_lexeme, normalize_word
from leximap.core.domain_types import Lexeme
from leximap.core.errors import ErrorContext, MissingWordError
from leximap.services.relation_fetcher import RelationFetcher
from leximap.services.sense_resolver import SenseResolver

logger = logging.getLogger(__name__)


class LexemeAssembler:
    """Builds a Lexeme from a raw request word."""

    def __init__(self, resolver: SenseResolver, fetcher: RelationFetcher):
        self.resolver = resolver
        self.fetcher = fetcher

    async def assemble(self, raw_word: object) -> Lexeme:
        word = normalize_word(raw_word)
        if not word:
            raise MissingWordError(ErrorContext(word=word))

        senses, (synonyms, antonyms) = await asyncio.gather(
            self.resolver.resolve(word),
            self.fetcher.fetch(word),
        )
        logger.info(
            "Lexeme assembled",
            extra={"word": word, "sense_count": len(senses)},
        )
        return build_lexeme(word, senses, synonyms, antonyms)
