from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from typing import Dict, Iterable, List, Optional, Tuple

from .stemming import Stemmer, default_stemmer

logger = logging.getLogger(__name__)

_RE_SPLIT = re.compile(r"[^A-Za-zéÉ'’_\-0-9@.]+")
_RE_MULTI_STOP = re.compile(r"\.+")
_RE_TRAILING_STOP = re.compile(r"^(.{3,})\.$")
# can't -> can, doesn't -> doesn
_RE_NEGATION = re.compile(r"(?<=[nN])['’][tT]$")
_RE_SUFFIX = re.compile(r"['’](s|ll|d|ve)?$", re.I)
_RE_NOT_A_WORD = re.compile(r"^[0-9.@\-]+$")


@dataclass
class StemCluster:
    word: str
    count: int = 0

    def add(self, word: str) -> None:
        self.count += 1
        # booking -> book
        if len(word) < len(self.word):
            self.word = word
        # Book -> book
        elif len(word) == len(self.word) and word != self.word:
            self.word = word.lower()


def split_words(text: str) -> List[str]:
    return [w for w in _RE_SPLIT.split(text) if w]


def normalize_word(word: str) -> str:
    """Normalize punctuation of one raw token (periods, negation, possessives)."""
    w = _RE_MULTI_STOP.sub(".", word)
    w = _RE_TRAILING_STOP.sub(r"\1", w)
    w = _RE_NEGATION.sub("", w)
    w = _RE_SUFFIX.sub("", w)
    return w


def is_candidate(word: str) -> bool:
    if len(word) <= 2:
        return False
    return not _RE_NOT_A_WORD.match(word)


def process_english(
    text: str,
    stop_words: Iterable[str],
    stemmer: Optional[Stemmer] = None,
) -> List[Tuple[str, int]]:
    """
    Count English words by stem.

    Each stem is reported once, under the shortest surface form seen for it
    (lowercased when two forms of that length differ). Stop words match exactly,
    case included. A token the stemmer rejects is skipped.
    """
    stemmer = stemmer or default_stemmer()
    stops = frozenset(stop_words)
    stems: Dict[str, StemCluster] = {}

    for raw in split_words(text):
        word = normalize_word(raw)
        if not is_candidate(word):
            continue
        if word in stops:
            continue

        try:
            key = stemmer(word.lower())
        except Exception as e:
            logger.debug("stemmer failed on %r: %s", word, e)
            continue

        cluster = stems.get(key)
        if cluster is None:
            cluster = stems[key] = StemCluster(word)
        cluster.add(word)

    return [(c.word, c.count) for c in stems.values()]
