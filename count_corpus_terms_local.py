#!/usr/bin/env python3
from __future__ import annotations
from pathlib import Path
from typing import Dict, List, Optional

import sys
ROOT = Path(__file__).resolve().parent
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from count_corpus_terms.config import load_config, options_from_config
from count_corpus_terms.counters import Term
from count_corpus_terms.engine import WordFreq
from count_corpus_terms.io_utils import expand_globs, read_concat, save_terms_csv, write_summary
from count_corpus_terms.options import Options


def render_options(ops: Options) -> List[str]:
    return [
        "=== Options ===",
        f"languages: {', '.join(ops.languages)}",
        f"stop_word_sets: {', '.join(ops.stop_word_sets)}",
        f"stop_words: {len(ops.stop_words)}",
        f"minimum_count: {ops.minimum_count}",
        f"max_phrase_length: {ops.max_phrase_length}",
        f"no_filter_substring: {ops.no_filter_substring}",
    ]


def main(config_path: Optional[Path] = None) -> int:
    script_dir = Path(__file__).resolve().parent
    if config_path is None:
        config_path = script_dir / "groups.config.yml"

    if not config_path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    cfg = load_config(config_path)
    base_dir = config_path.resolve().parent

    out_dir = Path(cfg.get("out_dir", "output"))
    if not out_dir.is_absolute():
        out_dir = base_dir / out_dir
    out_dir.mkdir(parents=True, exist_ok=True)

    options = options_from_config(cfg, base_dir)

    # per-group counts are emptied between groups; the ALL engine keeps accumulating
    engine = WordFreq(options)
    all_engine = WordFreq(options)
    group_terms: Dict[str, List[Term]] = {}

    for gname, gdef in cfg["groups"].items():
        files = expand_globs(gdef["files"], base_dir)
        if not files:
            print(f"[WARN] group '{gname}' matched no files; skipping")
            continue
        text = read_concat(files)
        print(f"[Processing] {gname}: {len(text):,} chars / {len(files)} files")
        engine.empty()
        terms = engine.process(text)
        all_engine.process(text)
        group_terms[gname] = terms
        save_terms_csv(out_dir / f"term_frequency_{gname}.csv", terms)

    if len(group_terms) >= 2:
        all_terms = all_engine.list()
        group_terms["ALL"] = all_terms
        save_terms_csv(out_dir / "term_frequency_ALL.csv", all_terms)

    lines = ["=== Summary ==="]
    for k in sorted(group_terms.keys()):
        terms = group_terms[k]
        lines.append(f"{k}: unique_terms={len(terms)} total_count={sum(t.count for t in terms)}")
    lines.append("")
    lines.extend(render_options(engine.options))
    write_summary(out_dir / "summary.txt", lines)

    print("[Done] Saved to", out_dir)
    return 0


if __name__ == "__main__":
    raise SystemExit(main(Path(sys.argv[1]) if len(sys.argv) > 1 else None))
