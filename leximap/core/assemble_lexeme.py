"""Lexeme Assembly — query-word normalization and the final record merge.

Invariants:
    - normalize_word: None → "", anything else coerced with str(), then lowercased
    - No stripping: only a truly empty result is a validation failure
    - build_lexeme copies inputs into tuples; language is always "en"
"""

from leximap.core.domain_types import LANGUAGE, Lexeme, Sense


def normalize_word(raw: object) -> str:
    if raw is None:
        return ""
    return str(raw).lower()


def build_lexeme(
    word: str,
    senses: tuple[Sense, ...],
    synonyms: list[str] | tuple[str, ...],
    antonyms: list[str] | tuple[str, ...],
) -> Lexeme:
    """Merge resolved senses and relation words into one Lexeme."""
    return Lexeme(
        id=word,
        language=LANGUAGE,
        senses=tuple(senses),
        synonyms=tuple(synonyms),
        antonyms=tuple(antonyms),
    )
