# apps/cli/check_expr.py
"""
CLI entry point for the expression checker.

Single-line mode (default):
  Reads one line from stdin and prints "correct" or "incorrect".
  The exit status is 0 in every case, including an empty stdin.

Batch mode (--in FILE):
  1) Validates the corpus file (prints counts + SHA, label consistency).
  2) Checks every line with a live progress indicator and writes:
       - CSV:  per-line verdicts (+ expected label / agreement if labelled)
       - JSON: manifest with config, corpus hash, summary, git commit
"""

from __future__ import annotations

import argparse
import random
import sys
import time
from pathlib import Path
from typing import Dict, List

from tqdm import tqdm

from packages.datasets import validate_corpus, load_corpus, pretty_summary
from packages.expr import check_line
from packages.expr.verdict import INCORRECT
from packages.harness import run_case, summarize
from packages.harness.io import write_csv, write_manifest, timestamp_id, git_commit_or_unknown


def _non_negative_int(value: str) -> int:
    n = int(value)
    if n < 0:
        raise argparse.ArgumentTypeError(f"must be >= 0, got {n}")
    return n


def _check_stdin() -> int:
    try:
        line = sys.stdin.readline()
    except (OSError, UnicodeDecodeError):
        print(INCORRECT)
        return 0
    print(check_line(line))
    return 0


def _run_corpus(args: argparse.Namespace) -> int:
    # 1) Validate the corpus and print a one-liner summary
    rep = validate_corpus(args.inp)
    print(pretty_summary(rep))
    for issue in rep["issues"]:
        sys.stderr.write(f"  - {issue}\n")
    if not rep["exists"]:
        return 1

    try:
        expressions, labels = load_corpus(args.inp)
    except ValueError as e:
        sys.stderr.write(f"{e}\n")
        return 1

    # 2) Choose cases (deterministic sample by seed), keeping file order
    indices = list(range(len(expressions)))
    if args.sample and args.sample < len(indices):
        rng = random.Random(args.seed)
        indices = sorted(rng.sample(indices, args.sample))
    total = len(indices)

    # 3) Progress mode
    mode = args.progress
    if mode == "auto":
        mode = "bar" if sys.stderr.isatty() else "plain"

    iterator = tqdm(indices, ncols=80, desc="Checking", unit="line") if mode == "bar" else indices

    results: List[Dict] = []
    start = time.time()
    last_print = 0.0
    for idx, case in enumerate(iterator, 1):
        results.append(run_case(
            expressions[case],
            expected=None if labels is None else labels[case],
            line_no=case + 1,
        ))

        if mode == "plain":
            now = time.time()
            if (now - last_print >= 1.0) or (idx == total):
                elapsed = now - start
                rate = (idx / elapsed) if elapsed > 0 else 0.0
                remaining = (total - idx) / rate if rate > 0 else 0.0
                pct = 100.0 * idx / max(1, total)
                sys.stderr.write(
                    f"\r[{idx}/{total}] {pct:5.1f}% | elapsed {elapsed:6.1f}s | ETA {remaining:5.1f}s"
                )
                sys.stderr.flush()
                last_print = now

    if mode == "plain":
        sys.stderr.write("\n")
        sys.stderr.flush()

    summary = summarize(results)
    line = f"cases={summary['num_cases']} | correct={summary['correct']} | incorrect={summary['incorrect']}"
    if summary["labelled"]:
        line += f" | agree={summary['agreeing']}/{summary['labelled']}"
    print(line)
    if summary["mismatched_lines"]:
        shown = summary["mismatched_lines"][:10]
        sys.stderr.write(f"label mismatches on case(s): {shown}\n")

    # 4) Write outputs (CSV + manifest)
    run_id = timestamp_id()
    outdir = Path(args.outdir)
    outdir.mkdir(parents=True, exist_ok=True)

    csv_path = outdir / f"check_{run_id}.csv"
    manifest_path = outdir / f"check_{run_id}_manifest.json"

    write_csv(results, str(csv_path))
    write_manifest({
        "run_id": run_id,
        "git_commit": git_commit_or_unknown(),
        "config": vars(args),
        "corpus": rep,
        "summary": summary,
    }, str(manifest_path))

    print(f"Wrote: {csv_path}")
    print(f"Wrote: {manifest_path}")
    return 0


def main(argv: List[str] | None = None) -> int:
    ap = argparse.ArgumentParser(description="exprcheck — validate arithmetic expressions")
    ap.add_argument("--in", dest="inp",
                    help="corpus file to check line by line (default: one line from stdin)")
    ap.add_argument("--sample", type=_non_negative_int,
                    help="check only a subset of lines (deterministic by seed)")
    ap.add_argument("--seed", type=int, default=123, help="RNG seed for --sample")
    ap.add_argument("--outdir", default="reports", help="directory for output files")
    ap.add_argument(
        "--progress",
        choices=["auto", "bar", "plain", "off"],
        default="auto",
        help="Show run progress (auto=bar on a terminal, else plain text)."
    )
    args = ap.parse_args(argv)

    if args.inp is None:
        return _check_stdin()
    return _run_corpus(args)


if __name__ == "__main__":
    sys.exit(main())
