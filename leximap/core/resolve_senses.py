"""Sense Resolution — dedupe, number and classify raw lexical entries.

Invariants:
    - Glosses are whitespace-collapsed and trimmed before comparison
    - Empty or already-seen glosses emit no sense
    - Ids are s<n>, n = senses emitted so far (post-dedup position, zero-based)
    - Output is never empty: zero emitted senses → one fallback sense (s0, conf 0)

Design Decisions:
    - Pure function over an already-fetched entry sequence; the awaitable
      lookup lives in services/sense_resolver.py
    - Ids are positional, not derived from WordNet offsets: they are not stable
      across upstream data changes (known limitation, see DESIGN.md)
"""

import re
from collections.abc import Iterable

from leximap.core.categorize import categorize_gloss
from leximap.core.domain_types import (
    FALLBACK_CONFIDENCE,
    RESOLVED_CONFIDENCE,
    LexicalEntry,
    Sense,
    SenseId,
)

_WHITESPACE_RE = re.compile(r"\s+")


def normalize_gloss(gloss: object) -> str:
    """Collapse whitespace runs to single spaces and trim. None → ""."""
    if gloss is None:
        return ""
    return _WHITESPACE_RE.sub(" ", str(gloss)).strip()


def sense_id(index: int) -> SenseId:
    return SenseId(f"s{index}")


def fallback_sense(word: str) -> Sense:
    """Synthetic sense for a word the lexicon does not know."""
    return Sense(
        id=sense_id(0),
        gloss=f"No definition found for “{word}”",
        categories=(),
        conf=FALLBACK_CONFIDENCE,
    )


def resolve_senses(word: str, entries: Iterable[LexicalEntry]) -> tuple[Sense, ...]:
    """Turn raw lexicon entries into an ordered, deduplicated, non-empty sense tuple."""
    seen: set[str] = set()
    senses: list[Sense] = []
    for entry in entries:
        gloss = normalize_gloss(entry.gloss)
        if not gloss or gloss in seen:
            continue
        seen.add(gloss)
        senses.append(Sense(
            id=sense_id(len(senses)),
            gloss=gloss,
            categories=categorize_gloss(gloss),
            conf=RESOLVED_CONFIDENCE,
        ))
    if not senses:
        return (fallback_sense(word),)
    return tuple(senses)
