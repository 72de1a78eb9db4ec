"""
Batch harness primitives for expression corpora.

- run_case:  validate a single expression line, optionally against a label.
- run_batch: validate many lines in sequence (optionally a sample prefix).
- summarize: aggregate counts for a finished batch.

These functions are intentionally UI-agnostic so they can be reused by
a CLI app, a notebook, or future services without changes.
"""

from __future__ import annotations
import time
from typing import Dict, List, Sequence
from packages.expr import check_line
from packages.expr.verdict import CORRECT


def run_case(
        expression: str,
        *,
        expected: str | None = None,
        line_no: int | None = None,
) -> Dict:
    """
    Validate one expression line.

    Args:
        expression: the raw line (a trailing newline is tolerated)
        expected:   "correct"/"incorrect" label, or None when unlabelled
        line_no:    1-based position in the source file, for reporting

    Returns:
        dict with keys:
            line_no, expression, valid (bool), verdict (str),
            expected (str | None), agrees (bool | None), time_ms (float)
    """
    t0 = time.perf_counter_ns()
    v = check_line(expression)
    dt = (time.perf_counter_ns() - t0) / 1_000_000.0

    return {
        "line_no": line_no,
        "expression": expression.rstrip("\r\n"),
        "valid": v == CORRECT,
        "verdict": v,
        "expected": expected,
        "agrees": None if expected is None else (v == expected),
        "time_ms": dt,
    }


def run_batch(
        expressions: Sequence[str],
        *,
        expected: Sequence[str] | None = None,
        sample: int | None = None,
) -> List[Dict]:
    """
    Run many cases back-to-back. If 'sample' is provided, only the first K
    lines are used to speed up quick checks.
    """
    if expected is not None and len(expected) != len(expressions):
        raise ValueError(
            f"got {len(expected)} labels for {len(expressions)} expressions")

    pool = list(range(len(expressions)))
    if sample is not None:
        pool = pool[:sample]

    out: List[Dict] = []
    for idx in pool:
        label = None if expected is None else expected[idx]
        out.append(run_case(expressions[idx], expected=label, line_no=idx + 1))
    return out


def summarize(results: Sequence[Dict]) -> Dict:
    """Counts of correct/incorrect verdicts and, for labelled runs, agreement."""
    labelled = [r for r in results if r.get("expected") is not None]
    return {
        "num_cases": len(results),
        "correct": sum(1 for r in results if r["valid"]),
        "incorrect": sum(1 for r in results if not r["valid"]),
        "labelled": len(labelled),
        "agreeing": sum(1 for r in labelled if r["agrees"]),
        "mismatched_lines": [r["line_no"] for r in labelled if not r["agrees"]],
    }
