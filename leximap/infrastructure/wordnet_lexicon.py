"""WordNet Lexicon — local lexical database backed by nltk's WordNet reader.

Invariants:
    - lookup() returns one LexicalEntry per synset, WordNet order, all parts of speech
    - Only synsets listing the queried word itself as a lemma are returned
      ("banks" does not resolve to the senses of "bank")
    - Entry gloss mirrors the WordNet data-file gloss: definition, then each
      usage example quoted, joined with "; "
    - lookup() never blocks the event loop (reader runs in a worker thread)
    - At most one thread touches the reader at a time
    - Reader errors propagate to the caller (request boundary → 500)

Design Decisions:
    - asyncio.to_thread over a callback API: one awaitable suspension point
    - threading.Lock around every reader call: nltk's reader shares one open
      data-file handle per part of speech (seek + readline)
    - Corpus loaded eagerly in the lifespan (ensure_loaded), not on first request
    - Reader injectable: tests pass a fake exposing synsets(word)
    - Multi-word queries use WordNet's underscore lemma form ("ice cream" → "ice_cream")
"""

import asyncio
import logging
import threading
from typing import Any

import nltk
from nltk.corpus import wordnet

from leximap.core.domain_types import LexicalEntry
from leximap.core.errors import ErrorContext, LexiconUnavailableError

logger = logging.getLogger(__name__)

_CORPORA = ("wordnet", "omw-1.4")


def format_gloss(definition: str, examples: list[str]) -> str:
    """Compose a data-file style gloss: definition; "example"; "example"."""
    parts = [definition] + [f'"{ex}"' for ex in examples]
    return "; ".join(p for p in parts if p)


def lemma_key(word: str) -> str:
    """Underscore, lowercase form used to compare a query with lemma names."""
    return word.replace(" ", "_").lower()


class WordNetLexicon:
    """Async wrapper over a WordNet corpus reader."""

    def __init__(self, reader: Any = None, auto_download: bool = True):
        self._reader = reader if reader is not None else wordnet
        self._auto_download = auto_download
        self._lock = threading.Lock()

    def ensure_loaded(self) -> None:
        """Force corpus load; download it first if allowed and missing."""
        try:
            with self._lock:
                self._reader.synsets("test")
        except LookupError as e:
            if not self._auto_download:
                raise LexiconUnavailableError(
                    "WordNet corpus not installed",
                    ErrorContext(debug_info={"reason": str(e)}),
                ) from e
            logger.info("WordNet corpus missing, downloading")
            for corpus in _CORPORA:
                nltk.download(corpus, quiet=True)
            try:
                with self._lock:
                    self._reader.synsets("test")
            except LookupError as retry_error:
                raise LexiconUnavailableError(
                    "WordNet download failed",
                    ErrorContext(debug_info={"reason": str(retry_error)}),
                ) from retry_error

    def lookup_sync(self, word: str) -> list[LexicalEntry]:
        key = lemma_key(word)
        entries = []
        with self._lock:
            for synset in self._reader.synsets(key):
                matched = [n for n in synset.lemma_names() if n.lower() == key]
                if not matched:
                    continue
                entries.append(LexicalEntry(
                    gloss=format_gloss(synset.definition(), list(synset.examples())),
                    lemma=matched[0],
                    pos=synset.pos(),
                    synset_offset=synset.offset(),
                ))
        return entries

    async def lookup(self, word: str) -> list[LexicalEntry]:
        return await asyncio.to_thread(self.lookup_sync, word)
