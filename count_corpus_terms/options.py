from __future__ import annotations

import logging
from dataclasses import dataclass, field, replace
from typing import Iterable, Tuple

from .stopwords import DEFAULT_STOP_WORD_SETS, STOP_WORD_SETS, merge_stop_words

logger = logging.getLogger(__name__)

LANGUAGES: Tuple[str, ...] = ("chinese", "english")

DEFAULT_MINIMUM_COUNT = 2
DEFAULT_MAX_PHRASE_LENGTH = 8


@dataclass(frozen=True)
class Options:
    languages: Tuple[str, ...] = LANGUAGES
    stop_word_sets: Tuple[str, ...] = DEFAULT_STOP_WORD_SETS
    stop_words: Tuple[str, ...] = ()
    minimum_count: int = DEFAULT_MINIMUM_COUNT
    max_phrase_length: int = DEFAULT_MAX_PHRASE_LENGTH
    no_filter_substring: bool = False
    # set by resolve_options once stop_words already holds the expanded sets
    resolved: bool = field(default=False, repr=False, compare=False)


def _known(names: Iterable[str], known, what: str) -> Tuple[str, ...]:
    out = []
    for name in names:
        if name not in known:
            logger.warning("unknown %s %r ignored", what, name)
            continue
        out.append(name)
    return tuple(out)


def resolve_options(options: Options | None = None) -> Options:
    """
    Fill defaults and expand stop word sets into stop_words.

    Non-positive numbers fall back to their defaults, unknown names are dropped.
    The returned stop_words holds the user words followed by every word of the
    selected sets. Resolving an already resolved Options returns it unchanged.
    """
    options = options or Options()
    if options.resolved:
        return options

    minimum_count = options.minimum_count
    if not minimum_count or minimum_count <= 0:
        minimum_count = DEFAULT_MINIMUM_COUNT
    max_phrase_length = options.max_phrase_length
    if not max_phrase_length or max_phrase_length <= 0:
        max_phrase_length = DEFAULT_MAX_PHRASE_LENGTH

    languages = LANGUAGES if options.languages is None else _known(options.languages, LANGUAGES, "language")
    sets = (
        DEFAULT_STOP_WORD_SETS
        if options.stop_word_sets is None
        else _known(options.stop_word_sets, STOP_WORD_SETS, "stop word set")
    )
    user_words = () if options.stop_words is None else tuple(options.stop_words)

    return replace(
        options,
        languages=languages,
        stop_word_sets=sets,
        stop_words=merge_stop_words(user_words, sets),
        minimum_count=minimum_count,
        max_phrase_length=max_phrase_length,
        no_filter_substring=bool(options.no_filter_substring),
        resolved=True,
    )
