from __future__ import annotations

import re
from collections import Counter
from typing import Iterable, Iterator, List, Tuple

# Han: CJK Unified Ideographs + Extension A. Planes beyond the BMP are not matched.
_CJK = "\u4e00-\u9fff\u3400-\u4dbf"
_RE_NON_CJK = re.compile(f"[^{_CJK}]+")
_RE_CJK_ONLY = re.compile(f"[{_CJK}]+")
_RE_SEPARATORS = re.compile(r"\n+")

SEPARATOR = "\n"


def iter_substrings(s: str, max_length: int) -> Iterator[str]:
    """
    Yield, for every offset, the substrings starting there from the longest
    allowed length down to 1.
    """
    n = len(s)
    for start in range(n):
        longest = min(max_length, n - start)
        for length in range(longest, 0, -1):
            yield s[start:start + length]


def split_chunks(text: str, stop_words: Iterable[str]) -> List[str]:
    """Reduce text to runs of Han characters, cut after every Han stop word."""
    text = _RE_NON_CJK.sub(SEPARATOR, text)
    for stop_word in stop_words:
        if not _RE_CJK_ONLY.fullmatch(stop_word):
            continue
        text = text.replace(stop_word, stop_word + SEPARATOR)
    return [c for c in _RE_SEPARATORS.split(text) if len(c) > 1]


def count_phrases(chunks: Iterable[str], max_length: int) -> Counter:
    pending: Counter = Counter()
    for chunk in chunks:
        pending.update(s for s in iter_substrings(chunk, max_length) if len(s) > 1)
    return pending


def filter_substrings(pending: Counter, max_length: int) -> Counter:
    """
    Drop every substring whose count equals the count of a phrase containing it.

    Removals are collected against the unfiltered counts and applied at the end,
    so the result does not depend on iteration order.
    """
    doomed = set()
    for term, count in pending.items():
        for sub in iter_substrings(term, max_length):
            if sub != term and pending.get(sub) == count:
                doomed.add(sub)
    return Counter({t: c for t, c in pending.items() if t not in doomed})


def process_chinese(
    text: str,
    stop_words: Iterable[str],
    max_phrase_length: int,
    no_filter_substring: bool = False,
) -> List[Tuple[str, int]]:
    """Count every Han n-gram of 2..max_phrase_length characters."""
    pending = count_phrases(split_chunks(text, stop_words), max_phrase_length)
    if not no_filter_substring:
        pending = filter_substrings(pending, max_phrase_length)
    return list(pending.items())
