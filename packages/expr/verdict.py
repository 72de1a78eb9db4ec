"""
Line-level wrapper around the validator, shared by the CLI and batch runs.

A line is handled the way a fixed input buffer would see it: at most
MAX_EXPR_LEN characters plus the line terminator are read, the text ends at
the newline or at the first NUL character, and the rest goes to the
validator unchanged.
"""

from __future__ import annotations

from .validator import is_valid_expression

MAX_EXPR_LEN = 1024
BUFFER_SIZE = MAX_EXPR_LEN + 2  # expression + '\n' + terminator

CORRECT = "correct"
INCORRECT = "incorrect"


def verdict(ok: bool) -> str:
    return CORRECT if ok else INCORRECT


def check_line(line: str | None) -> str:
    """
    Validate one raw input line and return "correct" or "incorrect".

    `None` or "" stands for a failed read / end of input and is reported as
    "incorrect", the same as any malformed expression.
    """
    if not line:
        return INCORRECT

    line = line[: BUFFER_SIZE - 1]
    # The expression ends at the newline or at an embedded NUL, whichever comes first
    for term in ("\n", "\0"):
        k = line.find(term)
        if k != -1:
            line = line[:k]

    return verdict(is_valid_expression(line))
