"""Boundary Protocols — contracts between the lexeme pipeline and its collaborators.

Invariants:
    - Core NEVER imports from shell — dependency arrows point inward only
    - Lexicon and relation source accessed through Protocol types
    - Implementations provided by the shell via constructor injection

Design Decisions:
    - Protocol over ABC: structural subtyping, tests pass plain fakes
    - Async in Protocol: implementations do IO (thread offload, HTTP)
    - RelationSource.fetch never raises: failure is an empty list
"""

from collections.abc import Sequence
from typing import Protocol

from leximap.core.domain_types import LexicalEntry, RelationKind


class Lexicon(Protocol):
    """Local lexical database — implemented by infrastructure/wordnet_lexicon.py."""
    async def lookup(self, word: str) -> Sequence[LexicalEntry]: ...


class RelationSource(Protocol):
    """External word-relations service — implemented by infrastructure/relation_client.py."""
    async def fetch(self, word: str, kind: RelationKind) -> list[str]: ...
