from __future__ import annotations

from collections import Counter
from dataclasses import dataclass
from typing import Iterable, List, Tuple


@dataclass(frozen=True)
class Term:
    text: str
    count: int


def rank_key(t: Term) -> Tuple[int, str]:
    return (-t.count, t.text)


def rank_terms(terms: Iterable[Term]) -> List[Term]:
    """Count descending, then term ascending."""
    return sorted(terms, key=rank_key)


class TermAccumulator:
    """Running term -> count totals shared by all language pipelines."""

    def __init__(self) -> None:
        self._counts: Counter = Counter()

    def push(self, term: str, delta: int) -> None:
        self._counts[term] += delta

    def push_all(self, pairs: Iterable[Tuple[str, int]]) -> None:
        for term, delta in pairs:
            self.push(term, delta)

    def finalize(self, minimum_count: int) -> List[Term]:
        return rank_terms(
            Term(t, c) for t, c in self._counts.items() if c >= minimum_count
        )

    def reset(self) -> None:
        self._counts = Counter()
