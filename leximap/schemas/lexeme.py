"""Lexeme Schemas — response models for GET /lexeme/{word}.

Invariants:
    - Field names and order match the public JSON contract:
      {id, language, senses: [{id, gloss, categories, conf}], synonyms, antonyms}
    - Built from core records via from_attributes (tuples serialize as arrays)
"""

from pydantic import BaseModel, ConfigDict


class SenseResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    gloss: str
    categories: list[str]
    conf: float


class LexemeResponse(BaseModel):
    """Lexeme record as returned to clients."""
    model_config = ConfigDict(from_attributes=True)

    id: str
    language: str
    senses: list[SenseResponse]
    synonyms: list[str]
    antonyms: list[str]


class ErrorResponse(BaseModel):
    error: str
