from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Dict, List, Optional, TypedDict

import yaml

from .options import Options
from .stopwords import load_stop_word_list

logger = logging.getLogger(__name__)


class GroupDef(TypedDict):
    files: list[str]


class Config(TypedDict, total=False):
    # One of these may be provided in YAML; internally we normalize to "groups".
    group: Dict[str, Any]
    groups: Dict[str, GroupDef]

    out_dir: str

    languages: List[str]
    stop_word_sets: List[str]
    stop_words: List[str]
    stop_words_file: Optional[str]
    minimum_count: int
    max_phrase_length: int
    no_filter_substring: bool


_LIST_KEYS = ("languages", "stop_word_sets", "stop_words")
_INT_KEYS = ("minimum_count", "max_phrase_length")


def normalize_groups(cfg: dict) -> dict:
    """
    Normalize single-group sugar 'group' into 'groups'.
    After normalization, cfg['groups'] must exist and be a mapping.
    """
    if "groups" in cfg and cfg["groups"] is not None:
        return cfg

    if "group" in cfg and cfg["group"]:
        g = cfg["group"]
        if not isinstance(g, dict):
            raise ValueError("'group' must be a mapping.")
        name = g.get("name", "text")
        files = g.get("files")

        if not files:
            raise ValueError("'group.files' is required.")
        if not isinstance(files, list) or not all(isinstance(x, str) for x in files):
            raise ValueError("'group.files' must be list[str].")

        cfg["groups"] = {name: {"files": files}}
        return cfg

    raise ValueError("Config must define 'groups' or 'group'.")


def _validate_groups(groups: Any) -> None:
    if not isinstance(groups, dict):
        raise ValueError("Config 'groups' must be a mapping.")
    for k, v in groups.items():
        if not isinstance(k, str) or not k:
            raise ValueError("Group name must be a non-empty string.")
        if not isinstance(v, dict) or "files" not in v:
            raise ValueError(f"Group '{k}' must have 'files' list.")
        files = v["files"]
        if not isinstance(files, list) or not all(isinstance(x, str) for x in files):
            raise ValueError(f"Group '{k}' must have 'files' as list[str].")


def _validate_options(cfg: dict) -> None:
    for key in _LIST_KEYS:
        v = cfg.get(key)
        if v is not None and (not isinstance(v, list) or not all(isinstance(x, str) for x in v)):
            raise ValueError(f"'{key}' must be list[str].")
    for key in _INT_KEYS:
        v = cfg.get(key)
        # bool is an int subclass; reject it explicitly
        if v is not None and (isinstance(v, bool) or not isinstance(v, int)):
            raise ValueError(f"'{key}' must be an integer.")
    v = cfg.get("no_filter_substring")
    if v is not None and not isinstance(v, bool):
        raise ValueError("'no_filter_substring' must be true or false.")
    v = cfg.get("stop_words_file")
    if v is not None and (not isinstance(v, str) or not v.strip()):
        raise ValueError("'stop_words_file' must be a non-empty string path.")


def load_config(path: Path) -> Config:
    if not path.exists():
        raise FileNotFoundError(f"Config not found: {path}")
    if path.suffix.lower() not in {".yml", ".yaml"}:
        raise ValueError("Config file must be YAML (.yml / .yaml)")

    text = path.read_text(encoding="utf-8")
    config_data = yaml.safe_load(text) or {}
    if not isinstance(config_data, dict):
        raise ValueError("Top-level YAML must be a mapping.")

    config_data = normalize_groups(config_data)
    _validate_groups(config_data["groups"])
    _validate_options(config_data)

    return config_data  # type: ignore[return-value]


def options_from_config(cfg: Config, base_dir: Optional[Path] = None) -> Options:
    """
    Build engine Options from a loaded config.

    A relative 'stop_words_file' is resolved against base_dir; its words come
    after the inline 'stop_words'.
    """
    stop_words = list(cfg.get("stop_words") or [])
    sw_file = cfg.get("stop_words_file")
    if sw_file:
        p = Path(sw_file)
        if not p.is_absolute() and base_dir is not None:
            p = base_dir / p
        stop_words.extend(load_stop_word_list(p))
        logger.info("loaded stop words from %s", p)

    defaults = Options()
    languages = cfg.get("languages")
    sets = cfg.get("stop_word_sets")
    return Options(
        languages=defaults.languages if languages is None else tuple(languages),
        stop_word_sets=defaults.stop_word_sets if sets is None else tuple(sets),
        stop_words=tuple(stop_words),
        minimum_count=cfg.get("minimum_count", defaults.minimum_count),
        max_phrase_length=cfg.get("max_phrase_length", defaults.max_phrase_length),
        no_filter_substring=cfg.get("no_filter_substring", defaults.no_filter_substring),
    )
