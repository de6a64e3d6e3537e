"""Lexeme Routes — GET /lexeme/{word}.

Invariants:
    - 200 → LexemeResponse
    - Empty word segment (/lexeme/ or /lexeme) → 400 {"error": "Missing word"}
    - Any other failure → 500 {"error": "Server error"} (global handler)

Design Decisions:
    - The empty-segment routes still call the assembler so the validation
      rule lives in one place (LexemeAssembler)
"""

from fastapi import APIRouter, Depends

from leximap.api.dependencies import get_assembler
from leximap.schemas.lexeme import ErrorResponse, LexemeResponse
from leximap.services.lexeme_assembler import LexemeAssembler

router = APIRouter(prefix="/lexeme", tags=["lexeme"])

_ERROR_RESPONSES = {
    400: {"model": ErrorResponse},
    500: {"model": ErrorResponse},
}


@router.get("", include_in_schema=False)
@router.get("/", response_model=LexemeResponse, responses=_ERROR_RESPONSES)
async def get_lexeme_missing_word(
    assembler: LexemeAssembler = Depends(get_assembler),
):
    """Lookup without a word — always a validation failure."""
    lexeme = await assembler.assemble("")
    return LexemeResponse.model_validate(lexeme)


@router.get("/{word}", response_model=LexemeResponse, responses=_ERROR_RESPONSES)
async def get_lexeme(
    word: str,
    assembler: LexemeAssembler = Depends(get_assembler),
):
    """Assemble senses, synonyms and antonyms for one word."""
    lexeme = await assembler.assemble(word)
    return LexemeResponse.model_validate(lexeme)
