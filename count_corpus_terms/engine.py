from __future__ import annotations

import threading
from typing import List, Optional

from .chinese import process_chinese
from .counters import Term, TermAccumulator
from .english import process_english
from .options import Options, resolve_options
from .stemming import Stemmer, default_stemmer


class WordFreq:
    """
    Term frequency counter over English and Chinese text.

    Counts accumulate across process() calls until empty(). A single lock
    serializes process() and empty(); list() hands out a copy of the last
    ranked result.
    """

    def __init__(self, options: Optional[Options] = None, *, stemmer: Optional[Stemmer] = None):
        self.options = resolve_options(options)
        self._stemmer = stemmer or default_stemmer()
        self._terms = TermAccumulator()
        self._list: List[Term] = []
        self._lock = threading.Lock()

    def process(self, text: str) -> List[Term]:
        ops = self.options
        with self._lock:
            for lang in ops.languages:
                if lang == "english":
                    self._terms.push_all(process_english(text, ops.stop_words, self._stemmer))
                elif lang == "chinese":
                    self._terms.push_all(
                        process_chinese(text, ops.stop_words, ops.max_phrase_length, ops.no_filter_substring)
                    )
            self._list = self._terms.finalize(ops.minimum_count)
            return list(self._list)

    def list(self) -> List[Term]:
        return list(self._list)

    def empty(self) -> None:
        with self._lock:
            self._terms.reset()
            self._list = []


def new(options: Optional[Options] = None, *, stemmer: Optional[Stemmer] = None) -> WordFreq:
    return WordFreq(options, stemmer=stemmer)
