"""Domain Types — immutable records for one lexeme lookup.

Invariants:
    - Sense.id is positional ("s0", "s1", ...) within its Lexeme
    - Sense.categories holds 0-3 labels, rule-table order, no duplicates
    - Lexeme.senses is never empty (fallback sense when the lexicon has nothing)
    - Lexeme.synonyms / antonyms are lowercase, non-empty strings in upstream order
    - Nothing here is mutated after construction

Design Decisions:
    - Frozen dataclasses with tuple fields: built once per request, discarded after
      the response is serialized; no shared state between requests
    - str Enums: serialize to JSON without custom encoders
    - LexicalEntry carries WordNet metadata (pos, offset) that the response drops;
      sense ids are NOT derived from it (see DESIGN.md, positional ids)
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import NewType


# ─── Identity / Value Types ──────────────────────────────────────

SenseId = NewType("SenseId", str)   # "s<n>"
Confidence = NewType("Confidence", float)

RESOLVED_CONFIDENCE = Confidence(0.9)
FALLBACK_CONFIDENCE = Confidence(0.0)

LANGUAGE = "en"
MAX_CATEGORIES = 3


# ─── Enums ───────────────────────────────────────────────────────

class Category(str, Enum):
    """Coarse semantic domains a gloss can be tagged with."""
    PHYSICAL = "Physical"
    MENTAL = "Mental"
    FINANCE = "Finance"
    PLACE = "Place"
    SOUND = "Sound"
    VALUE = "Value"
    ACTION = "Action"


class RelationKind(str, Enum):
    """Relation-service query parameter for each relation kind."""
    SYNONYM = "rel_syn"
    ANTONYM = "rel_ant"


# ─── Records ─────────────────────────────────────────────────────

@dataclass(frozen=True)
class LexicalEntry:
    """One raw lexical-database row, before normalization."""
    gloss: str
    lemma: str | None = None
    pos: str | None = None
    synset_offset: int | None = None


@dataclass(frozen=True)
class Sense:
    id: SenseId
    gloss: str
    categories: tuple[str, ...] = ()
    conf: Confidence = RESOLVED_CONFIDENCE


@dataclass(frozen=True)
class Lexeme:
    id: str
    senses: tuple[Sense, ...]
    synonyms: tuple[str, ...] = ()
    antonyms: tuple[str, ...] = ()
    language: str = field(default=LANGUAGE)
