"""Lexeme Assembler tests — normalization, validation, merge.

Invariants:
    - Empty word → MissingWordError before any collaborator call
    - Word lowercased before lookup and used as lexeme id
    - Resolver failure propagates; relation lists pass through verbatim
"""

import pytest

from leximap.api.dependencies import build_assembler
from leximap.core.errors import MissingWordError
from tests.fakes import BANK_ENTRIES, BANK_RELATIONS, FakeLexicon, FakeRelationSource


@pytest.fixture
def lexicon():
    return FakeLexicon({"bank": BANK_ENTRIES})


@pytest.fixture
def relations():
    return FakeRelationSource({"bank": BANK_RELATIONS})


@pytest.fixture
def assembler(lexicon, relations):
    return build_assembler(lexicon, relations)


async def test_assembles_bank(assembler):
    lexeme = await assembler.assemble("Bank")

    assert lexeme.id == "bank"
    assert lexeme.language == "en"
    assert len(lexeme.senses) == 3
    assert lexeme.synonyms == ("trust", "depository", "bank building")
    assert lexeme.antonyms == ()


async def test_lookup_uses_lowercased_word(assembler, lexicon, relations):
    await assembler.assemble("BANK")
    assert lexicon.calls == ["bank"]
    assert {w for w, _ in relations.calls} == {"bank"}


@pytest.mark.parametrize("raw", ["", None])
async def test_empty_word_rejected(assembler, lexicon, relations, raw):
    with pytest.raises(MissingWordError):
        await assembler.assemble(raw)
    assert lexicon.calls == []
    assert relations.calls == []


async def test_unknown_word_fallback_with_relations(relations):
    assembler = build_assembler(FakeLexicon(), relations)
    lexeme = await assembler.assemble("xyzzyqq")

    assert len(lexeme.senses) == 1
    assert lexeme.senses[0].conf == 0
    assert lexeme.synonyms == ()


async def test_resolver_failure_propagates(relations):
    assembler = build_assembler(FakeLexicon({"bank": OSError("disk")}), relations)
    with pytest.raises(OSError):
        await assembler.assemble("bank")


async def test_identical_requests_identical_records(assembler):
    assert await assembler.assemble("bank") == await assembler.assemble("bank")
