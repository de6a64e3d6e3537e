"""WordNet Lexicon tests against nltk's real WordNetCorpusReader.

A small corpus is generated per module with byte-exact synset offsets, so the
reader seeks into its shared data-file handles exactly as it does against the
installed WordNet database.

Tests cover:
    - Many concurrent lookups each get their own synset, never a neighbour's
    - Inflected forms ("word00042s") do not resolve to the base lemma
    - Multi-lemma synsets report the lemma that was queried
    - Examples survive the data-file round trip into the gloss
"""

import asyncio
import warnings

import nltk.data
import pytest
from nltk.corpus.reader.wordnet import WordNetCorpusReader

from leximap.infrastructure.wordnet_lexicon import WordNetLexicon
from leximap.services.sense_resolver import SenseResolver

WORD_COUNT = 2000
_HEADER = "  1 This software and database is being provided  WordNet 3.0 Copyright\n"


def _word(i: int) -> str:
    return f"word{i:05d}"


def _noun_synsets() -> list[tuple[list[str], str]]:
    synsets = [
        ([_word(i)], f"definition number {i} " + "padding text " * 30)
        for i in range(WORD_COUNT)
    ]
    synsets.append((["ice_cream", "icecream"], 'frozen dessert; "she ate the ice cream"'))
    return synsets


def _write_corpus(root) -> None:
    (root / "lexnames").write_text("".join(f"{i:02d}\tlex{i}\t1\n" for i in range(4)))
    for name in ("adj", "adv", "verb"):
        (root / f"data.{name}").write_text(_HEADER)
        (root / f"index.{name}").write_text("  1 license\n")
    for name in ("noun", "adj", "adv", "verb"):
        (root / f"{name}.exc").write_text("")

    offset = len(_HEADER.encode())
    lines, index = [], {}
    for lemmas, gloss in _noun_synsets():
        words = " ".join(f"{lemma} 0" for lemma in lemmas)
        line = f"{offset:08d} 03 n {len(lemmas):02x} {words} 000 | {gloss}  \n"
        lines.append(line)
        for lemma in lemmas:
            index.setdefault(lemma, []).append(offset)
        offset += len(line.encode())

    (root / "data.noun").write_text(_HEADER + "".join(lines))
    index_lines = [
        f"{lemma} n {len(offs)} 0 {len(offs)} 0 {' '.join(f'{o:08d}' for o in offs)}  \n"
        for lemma, offs in sorted(index.items())
    ]
    (root / "index.noun").write_text("  1 license\n" + "".join(index_lines))


@pytest.fixture(scope="module")
def corpus_reader(tmp_path_factory):
    root = tmp_path_factory.mktemp("wordnet")
    _write_corpus(root)
    # Authorize the generated corpus root for nltk's data-path sandbox
    with pytest.MonkeyPatch.context() as data_mp:
        data_mp.setattr(nltk.data, "path", [str(root), *nltk.data.path])
        # No index.sense in the generated corpus: skip the cross-version sense map
        with pytest.MonkeyPatch.context() as mp:
            mp.setattr(WordNetCorpusReader, "map_wn", lambda self, version="wordnet": None)
            with warnings.catch_warnings():
                warnings.simplefilter("ignore", UserWarning)
                reader = WordNetCorpusReader(str(root), None)
        yield reader


@pytest.fixture
def lexicon(corpus_reader):
    return WordNetLexicon(corpus_reader, auto_download=False)


def test_single_lookup(lexicon):
    entries = lexicon.lookup_sync("word00042")
    assert len(entries) == 1
    assert entries[0].gloss.startswith("definition number 42 ")
    assert entries[0].lemma == "word00042"
    assert entries[0].pos == "n"


async def test_concurrent_lookups_each_get_their_own_synset(lexicon):
    words = [_word(i) for i in range(WORD_COUNT)]
    results = await asyncio.gather(
        *(lexicon.lookup(w) for w in words), return_exceptions=True,
    )

    failures = [r for r in results if isinstance(r, Exception)]
    assert failures == []
    for i, entries in enumerate(results):
        assert len(entries) == 1
        assert entries[0].gloss.startswith(f"definition number {i} ")


def test_inflected_form_is_not_its_base_lemma(corpus_reader, lexicon):
    assert corpus_reader.synsets("word00042s") != []
    assert lexicon.lookup_sync("word00042s") == []


async def test_inflected_form_resolves_to_fallback(lexicon):
    senses = await SenseResolver(lexicon).resolve("word00042s")
    assert len(senses) == 1
    assert senses[0].conf == 0.0
    assert "word00042s" in senses[0].gloss


def test_multiword_lemma_reports_queried_name(lexicon):
    entries = lexicon.lookup_sync("icecream")
    assert [e.lemma for e in entries] == ["icecream"]
    assert lexicon.lookup_sync("ice cream")[0].lemma == "ice_cream"


def test_examples_are_quoted_in_gloss(lexicon):
    entries = lexicon.lookup_sync("ice cream")
    assert entries[0].gloss == 'frozen dessert; "she ate the ice cream"'
