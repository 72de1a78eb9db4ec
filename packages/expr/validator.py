"""
Syntactic validation of arithmetic expressions.

Grammar accepted (informally):
  - operands  : a single lowercase letter a–z, or a run of digits 0–9
  - binary ops: + - * / %
  - unary ops : + -  (chainable, e.g. "--a", "+-+a")
  - grouping  : ( ... ), nested arbitrarily
  - whitespace: ignored anywhere between tokens

The check is a two-state scanner plus a running parenthesis counter:

  EXPECT_OPERAND  --digit run / letter-->  EXPECT_OPERATOR
  EXPECT_OPERAND  --'(' / unary sign---->  EXPECT_OPERAND
  EXPECT_OPERATOR --binary operator----->  EXPECT_OPERAND
  EXPECT_OPERATOR --')'----------------->  EXPECT_OPERATOR

Any other character in either state rejects the input at once. The input is
accepted iff the scan ends in EXPECT_OPERATOR with every parenthesis closed.

Only a yes/no verdict is produced; the kind and position of a violation are
not reported.
"""

from __future__ import annotations

import string
from enum import Enum

# C-locale character classes; str.isdigit()/isspace() would also admit
# Unicode digits and spaces.
DIGITS = frozenset(string.digits)
VARIABLES = frozenset(string.ascii_lowercase)
WHITESPACE = frozenset(string.whitespace)
BINARY_OPERATORS = frozenset("+-*/%")
UNARY_SIGNS = frozenset("+-")


class State(Enum):
    EXPECT_OPERAND = "operand"    # number, variable, unary sign or '('
    EXPECT_OPERATOR = "operator"  # binary operator or ')'


def is_digit(ch: str) -> bool:
    return ch in DIGITS


def is_variable(ch: str) -> bool:
    return ch in VARIABLES


def is_whitespace(ch: str) -> bool:
    return ch in WHITESPACE


def is_binary_operator(ch: str) -> bool:
    return ch in BINARY_OPERATORS


def is_unary_sign(ch: str) -> bool:
    return ch in UNARY_SIGNS


def is_valid_expression(expr: str) -> bool:
    """
    Return True if `expr` is a well-formed arithmetic expression.

    Examples:
      is_valid_expression("(a+b)*c")    -> True
      is_valid_expression("a++b")       -> True   (binary '+', then unary '+')
      is_valid_expression("7a")         -> False  (two operands, no operator)
      is_valid_expression("((a+b)")     -> False  (unbalanced)
      is_valid_expression("   ")        -> False  (no operand at all)
    """
    state = State.EXPECT_OPERAND
    balance = 0

    i = 0
    n = len(expr)
    while i < n:
        ch = expr[i]

        if is_whitespace(ch):
            i += 1
            continue

        if state is State.EXPECT_OPERAND:
            if is_digit(ch):
                # A maximal digit run is one operand
                while i + 1 < n and is_digit(expr[i + 1]):
                    i += 1
                state = State.EXPECT_OPERATOR
            elif is_variable(ch):
                state = State.EXPECT_OPERATOR
            elif ch == "(":
                balance += 1
            elif is_unary_sign(ch):
                pass  # still expecting the operand the sign applies to
            else:
                return False
        else:
            if is_binary_operator(ch):
                state = State.EXPECT_OPERAND
            elif ch == ")":
                balance -= 1
            else:
                # Two operands with nothing between them, e.g. "7a", "(a)(b)"
                return False

        # A ')' ahead of its '(' can never be repaired later in the line
        if balance < 0:
            return False

        i += 1

    return balance == 0 and state is State.EXPECT_OPERATOR
