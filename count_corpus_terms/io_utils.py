from __future__ import annotations
from pathlib import Path
from typing import Iterable, List
import csv, glob, sys

from .counters import Term

def expand_globs(patterns: List[str], base_dir: Path | None = None) -> List[Path]:
    files = []
    for pat in patterns:
        if base_dir is not None and not Path(pat).is_absolute():
            pat = str(base_dir / pat)
        files.extend(Path(p) for p in glob.glob(pat, recursive=True))
    return sorted({p.resolve() for p in files if p.is_file()})

def read_concat(paths: List[Path]) -> str:
    chunks: List[str] = []
    for p in paths:
        try:
            chunks.append(p.read_text(encoding="utf-8"))
        except (OSError, UnicodeDecodeError) as e:
            print(f"[WARN] failed to read {p}: {e}", file=sys.stderr)
    return "\n".join(chunks)

def save_terms_csv(path: Path, terms: Iterable[Term]):
    path.parent.mkdir(parents=True, exist_ok=True)
    with path.open("w", encoding="utf-8", newline="") as f:
        w = csv.writer(f)
        w.writerow(["term", "count"])
        for t in terms:
            w.writerow([t.text, t.count])

def write_summary(path: Path, lines: list[str]):
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text("\n".join(lines), encoding="utf-8")
