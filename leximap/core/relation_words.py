"""Relation Payload Parsing — extract lowercase words from a relation-service body.

Invariants:
    - Only a JSON array is accepted; anything else raises ValueError
    - Each item's "word" is used if it is a string, else treated as ""
    - Words are lowercased; empty results are dropped; order is preserved

Design Decisions:
    - Raises on malformed top-level shape so the relation client can absorb
      "any decode failure" in one place
    - Non-object items are skipped like objects without a word
"""

from typing import Any


def parse_relation_words(payload: Any) -> list[str]:
    """Return lowercase, non-empty words from a decoded JSON array payload."""
    if not isinstance(payload, list):
        raise ValueError(f"expected JSON array, got {type(payload).__name__}")
    words: list[str] = []
    for item in payload:
        raw = item.get("word") if isinstance(item, dict) else None
        word = raw.lower() if isinstance(raw, str) else ""
        if word:
            words.append(word)
    return words
