from __future__ import annotations

import logging
from pathlib import Path
from typing import Dict, Iterable, List, Tuple

logger = logging.getLogger(__name__)

# Kana entries sit outside the Han ranges, so the Chinese pipeline never uses
# them as cut points.
STOP_WORD_SETS: Dict[str, Tuple[str, ...]] = {
    "cjk": (
        "を",  # wo
        "です",  # desu
        "する",  # suru
        "の",  # no
        "れら",  # rera
    ),
    "english1": (
        "i", "a", "about", "an", "and", "are", "as", "at",
        "be", "been", "by", "com", "for", "from", "how", "in",
        "is", "it", "not", "of", "on", "or", "that",
        "the", "this", "to", "was", "what", "when", "where", "which",
        "who", "will", "with", "www", "the",
    ),
    "english2": (
        "we", "us", "our", "ours",
        "they", "them", "their", "he", "him", "his",
        "she", "her", "hers", "it", "its", "you", "yours", "your",
        "has", "have", "would", "could", "should", "shall",
        "can", "may", "if", "then", "else", "but",
        "there", "these", "those",
    ),
}

DEFAULT_STOP_WORD_SETS: Tuple[str, ...] = ("cjk", "english1", "english2")


def stop_words_from_sets(sets: Iterable[str]) -> List[str]:
    """Expand set names into one word list, in set order. Unknown names are skipped."""
    words: List[str] = []
    for name in sets:
        table = STOP_WORD_SETS.get(name)
        if table is None:
            logger.warning("unknown stop word set %r ignored", name)
            continue
        words.extend(table)
    return words


def merge_stop_words(user_words: Iterable[str], sets: Iterable[str]) -> Tuple[str, ...]:
    """User words first, then the expanded sets."""
    return tuple(user_words) + tuple(stop_words_from_sets(sets))


def load_stop_word_list(path: str | Path) -> List[str]:
    """Load stop words from a text file (one per line, # comments)."""
    p = Path(path)
    items: List[str] = []
    for line in p.read_text(encoding="utf-8").splitlines():
        s = line.strip()
        if not s or s.startswith("#"):
            continue
        items.append(s)
    return items
