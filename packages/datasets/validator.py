"""
Corpus validator for exprcheck.

What this module does:
- Validate an expression corpus file used for batch runs and regression checks.
- A corpus line is either a bare expression or "expression<TAB>label" with
  label in {correct, incorrect}. Blank lines are skipped.
- Detect duplicates, over-long lines and label-format problems; compute
  SHA-256 of the raw file.
- Return a machine-readable dict (for manifests) and provide a pretty one-line summary.

Typical use:
    from packages.datasets import validate_corpus, pretty_summary
    rep = validate_corpus("corpora/golden.tsv")
    print(pretty_summary(rep))
"""

from __future__ import annotations

from dataclasses import dataclass, asdict
from pathlib import Path
from typing import Dict, List, Optional, Tuple
import hashlib

from packages.expr import MAX_EXPR_LEN
from packages.expr.verdict import CORRECT, INCORRECT
from .io import read_lines

LABELS = (CORRECT, INCORRECT)


# -----------------------------
# Dataclasses for structured reports
# -----------------------------

@dataclass
class CorpusReport:
    """Validation result for one corpus file."""
    path: str            # file path (as given)
    exists: bool         # did the file exist on disk?
    sha256: str          # SHA-256 of raw file bytes (empty string if missing)
    count: int           # number of cases (non-blank lines)
    unique_count: int    # distinct expressions
    labelled: int        # cases carrying a label
    too_long: int        # cases longer than MAX_EXPR_LEN (would be truncated)
    passed: bool
    issues: List[str]    # human-friendly list of problems (if any)


# -----------------------------
# Helpers
# -----------------------------

def _sha256_file(path: Path) -> str:
    """Compute SHA-256 of a file's raw bytes."""
    h = hashlib.sha256()
    with path.open("rb") as f:
        for chunk in iter(lambda: f.read(8192), b""):
            h.update(chunk)
    return h.hexdigest()


def _split_label(line: str) -> Tuple[str, Optional[str]]:
    """
    "a+b\\tcorrect" -> ("a+b", "correct"); "a+b" -> ("a+b", None).

    Only the field after the LAST tab is considered, and only if it is a
    known label; otherwise the whole line is the expression (tabs are
    legal whitespace inside expressions).
    """
    expr, sep, tail = line.rpartition("\t")
    if sep and tail.strip() in LABELS:
        return expr, tail.strip()
    return line, None


def _parse(path: Path) -> List[Tuple[str, Optional[str]]]:
    return [_split_label(ln) for ln in read_lines(path) if ln.strip()]


# -----------------------------
# Public API
# -----------------------------

def load_corpus(path: str) -> Tuple[List[str], Optional[List[str]]]:
    """
    Load a corpus file into (expressions, labels).

    `labels` is None for an unlabelled corpus. Raises ValueError when the
    file mixes labelled and unlabelled lines.
    """
    cases = _parse(Path(path))
    exprs = [e for e, _ in cases]
    labels = [lab for _, lab in cases]

    n_labelled = sum(1 for lab in labels if lab is not None)
    if n_labelled == 0:
        return exprs, None
    if n_labelled != len(labels):
        raise ValueError(f"{path}: {len(labels) - n_labelled} line(s) lack a label")
    return exprs, labels  # type: ignore[return-value]


def validate_corpus(path: str) -> Dict:
    """
    Validate a corpus file.

    Returns
    -------
    Dict
        A JSON-serializable dictionary (see CorpusReport schema) with counts,
        SHA-256, duplicate/length diagnostics, a strict `passed` flag
        (non-empty, consistent labels, nothing over-long) and `issues`.
    """
    p = Path(path)
    if not p.exists():
        rep = CorpusReport(path, False, "", 0, 0, 0, 0, False,
                           [f"corpus file not found: {path}"])
        return asdict(rep)

    cases = _parse(p)
    issues: List[str] = []

    count = len(cases)
    unique_count = len({e for e, _ in cases})
    labelled = sum(1 for _, lab in cases if lab is not None)
    too_long = sum(1 for e, _ in cases if len(e) > MAX_EXPR_LEN)

    if count == 0:
        issues.append("corpus contains 0 cases")
    if 0 < labelled < count:
        issues.append(f"{count - labelled} of {count} line(s) lack a label")
    if too_long:
        issues.append(f"{too_long} case(s) longer than {MAX_EXPR_LEN} characters")
    if unique_count != count:
        issues.append("corpus contains duplicate expressions")

    # Duplicates are reported but do not fail the corpus
    passed = count > 0 and labelled in (0, count) and too_long == 0

    rep = CorpusReport(
        path=str(p),
        exists=True,
        sha256=_sha256_file(p),
        count=count,
        unique_count=unique_count,
        labelled=labelled,
        too_long=too_long,
        passed=passed,
        issues=issues,
    )
    return asdict(rep)


def pretty_summary(report: Dict) -> str:
    """
    Produce a compact, human-friendly one-liner for console/docs.

    Example:
        corpus=golden.tsv | cases=42 (uniq=42, labelled=42, sha=abc123...) | OK
    """
    status = "OK" if report["passed"] else "FAIL"
    sha = (report.get("sha256") or "")[:12]
    name = Path(report["path"]).name
    return (
        f"corpus={name} | cases={report['count']} (uniq={report['unique_count']}, "
        f"labelled={report['labelled']}, sha={sha}) | {status}"
    )
