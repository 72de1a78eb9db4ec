"""
I/O utilities for batch runs.

Responsibilities:
- write_csv:     flatten per-line results into a tidy CSV (one row per line).
- write_manifest: JSON record of a batch run (flags, corpus report, summary).
- timestamp_id:   UTC run id used in report file names.
- git_commit_or_unknown: short HEAD hash stored in the manifest.

Notes:
- Expressions like "-a+b" or "+1" start with a character spreadsheet apps
  read as a formula, so such cells are prefixed with an apostrophe.
"""

from __future__ import annotations

from pathlib import Path
from typing import Dict, List
import csv
import json
import subprocess
import datetime as dt

_FORMULA_TRIGGERS = ("=", "+", "-", "@")

CSV_FIELDS = ["line_no", "expression", "verdict", "expected", "agrees", "time_ms"]


def _excel_safe(cell: str) -> str:
    """
    Prefix with an apostrophe so spreadsheet apps treat it as text.
    Example: "-a+b" -> "'-a+b"
    """
    return "'" + cell if cell.startswith(_FORMULA_TRIGGERS) else cell


def write_csv(results: List[Dict], path: str) -> str:
    """
    Serialize a batch of results to CSV.

    Schema (columns):
      line_no, expression, verdict, expected, agrees, time_ms

    Unlabelled runs leave `expected` and `agrees` empty.
    Returns the path written (string).
    """
    p = Path(path)
    p.parent.mkdir(parents=True, exist_ok=True)

    with p.open("w", newline="", encoding="utf-8") as f:
        w = csv.DictWriter(f, fieldnames=CSV_FIELDS)
        w.writeheader()

        for r in results:
            w.writerow({
                "line_no": r.get("line_no", ""),
                "expression": _excel_safe(r["expression"]),
                "verdict": r["verdict"],
                "expected": r.get("expected") or "",
                "agrees": "" if r.get("agrees") is None else r["agrees"],
                "time_ms": round(float(r["time_ms"]), 4),
            })

    return str(p)


def write_manifest(manifest: Dict, path: str) -> str:
    """
    Dump the record of one check_expr batch run as indented UTF-8 JSON.

    check_expr fills in: run_id, git_commit, config (parsed CLI flags),
    corpus (validate_corpus report) and summary (summarize output).
    Non-ASCII characters in expressions are written as-is.
    """
    p = Path(path)
    p.parent.mkdir(parents=True, exist_ok=True)
    p.write_text(json.dumps(manifest, indent=2, ensure_ascii=False) + "\n", encoding="utf-8")
    return str(p)


def timestamp_id(now: dt.datetime | None = None) -> str:
    """Run id used in report file names: UTC time as YYYYMMDDTHHMMSSZ."""
    now = now or dt.datetime.now(dt.timezone.utc)
    return now.astimezone(dt.timezone.utc).strftime("%Y%m%dT%H%M%SZ")


def git_commit_or_unknown(cwd: str | None = None) -> str:
    """Short HEAD hash of the checkout a run came from, or 'unknown' outside git."""
    try:
        out = subprocess.run(
            ["git", "rev-parse", "--short", "HEAD"],
            cwd=cwd, capture_output=True, text=True, check=True,
        )
    except (OSError, subprocess.CalledProcessError):
        return "unknown"
    return out.stdout.strip() or "unknown"
