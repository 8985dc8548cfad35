from __future__ import annotations

from typing import Protocol

from nltk.stem import PorterStemmer as _NltkPorterStemmer


class Stemmer(Protocol):
    """stem(lowercase_word) -> stem key. Must be deterministic and side-effect free."""

    def __call__(self, word: str) -> str: ...


class PorterStemmer:
    """Porter affix stripping backed by NLTK. Needs no downloaded corpora."""

    def __init__(self) -> None:
        self._stemmer = _NltkPorterStemmer()

    def __call__(self, word: str) -> str:
        return self._stemmer.stem(word)


def identity_stemmer(word: str) -> str:
    return word


def default_stemmer() -> Stemmer:
    return PorterStemmer()
