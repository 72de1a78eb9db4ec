import random

import pytest
from packages.expr import State, is_valid_expression, check_line, verdict, MAX_EXPR_LEN


# --- golden cases ---
@pytest.mark.parametrize("expr,expected", [
    ("a+b*c", True),
    ("(a+b)*c", True),
    ("a+1", True),
    ("123+45", True),
    ("123", True),
    ("x", True),
    ("a++b", True),
    ("a+-b", True),
    ("--a", True),
    ("+-+a", True),
    ("+ -+- a", True),
    ("-(a)", True),
    ("((a))", True),
    ("(a+b)%(c-d)/e", True),
    ("  a  *  ( b - 7 )  ", True),
    ("a\t+\tb", True),
    ("1 2", False),        # digit run ends at whitespace
    ("a+", False),
    ("a+-", False),
    ("", False),
    ("7a", False),
    ("ab", False),
    ("a1", False),
    ("(a+b)(c-d)", False),
    ("((a+b)", False),
    (")a+b(", False),
    (")(", False),
    ("a)(b+c)", False),
    ("()", False),
    ("*a", False),
    ("a**b", False),
    ("A+b", False),        # uppercase is not a variable
    ("a^b", False),
    ("1.5", False),
    ("a+(", False),
])
def test_golden(expr, expected):
    assert is_valid_expression(expr) is expected


@pytest.mark.parametrize("blank", ["", " ", "\t", "   \t  ", "\r", "\v\f"])
def test_whitespace_only_is_invalid(blank):
    assert is_valid_expression(blank) is False


def test_unicode_digits_and_letters_rejected():
    assert is_valid_expression("\u0663") is False  # ARABIC-INDIC DIGIT THREE
    assert is_valid_expression("\u00e9") is False  # e with acute
    assert is_valid_expression("a+\u00a0b") is False  # no-break space


def test_long_chains():
    assert is_valid_expression("-" * 5000 + "a") is True
    assert is_valid_expression("(" * 3000 + "a" + ")" * 3000) is True
    assert is_valid_expression("(" * 3000 + "a" + ")" * 2999) is False
    assert is_valid_expression("9" * 10000) is True


def test_input_not_mutated():
    s = "(a + b) * 3"
    is_valid_expression(s)
    assert s == "(a + b) * 3"


def test_state_has_two_members():
    assert {s for s in State} == {State.EXPECT_OPERAND, State.EXPECT_OPERATOR}


def _balanced_prefixes(s: str) -> bool:
    depth = 0
    for ch in s:
        depth += ch == "("
        depth -= ch == ")"
        if depth < 0:
            return False
    return depth == 0


def test_random_accepted_strings_are_balanced():
    rng = random.Random(7)
    alphabet = "ab19()+-*/% "
    accepted = 0
    for _ in range(20000):
        s = "".join(rng.choice(alphabet) for _ in range(rng.randint(0, 12)))
        if is_valid_expression(s):
            accepted += 1
            assert _balanced_prefixes(s), s
            assert s.rstrip()[-1] not in "+-*/%(", s
    assert accepted > 0


# --- line wrapper ---
def test_verdict_strings():
    assert verdict(True) == "correct"
    assert verdict(False) == "incorrect"


@pytest.mark.parametrize("line,expected", [
    ("a+b\n", "correct"),
    ("a+b", "correct"),
    ("a+\n", "incorrect"),
    ("\n", "incorrect"),
    ("", "incorrect"),
    (None, "incorrect"),
    ("(a)\r\n", "correct"),   # '\r' is whitespace
])
def test_check_line(line, expected):
    assert check_line(line) == expected


def test_check_line_caps_at_buffer():
    # MAX_EXPR_LEN + 1 characters fit the buffer; the rest is never seen
    fits = "a" + "+a" * (MAX_EXPR_LEN // 2)
    assert len(fits) == MAX_EXPR_LEN + 1
    assert check_line(fits + "+\n") == "correct"
    assert check_line(fits[:-1] + "+\n") == "incorrect"


def test_check_line_stops_at_nul():
    assert check_line("a\x00garbage\n") == "correct"
    assert check_line("a+\x00b\n") == "incorrect"
    assert check_line("\x00a\n") == "incorrect"
