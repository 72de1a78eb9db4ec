"""
Phrase search with flexible separators.

A phrase matches at position i of the text when its characters line up with
the text starting at i, except that separators are elastic: any run of
separators in the phrase matches any non-empty run of separators in the text
("a  b" matches "a\tb" and "a \r\n b", but "ab" does not match "a b").

Nothing after the phrase is checked, so partial words match too: the phrase
"hell" matches inside "hello".
"""

from __future__ import annotations

from typing import List

SEPARATORS = frozenset(" \t\n\r")


def is_separator(ch: str) -> bool:
    return ch in SEPARATORS


def match_at(text: str, pos: int, phrase: str) -> bool:
    """Return True if `phrase` matches `text` starting at index `pos`."""
    t = pos
    p = 0
    n_text = len(text)
    n_phrase = len(phrase)

    while p < n_phrase:
        if t >= n_text:
            return False

        if is_separator(phrase[p]):
            if not is_separator(text[t]):
                return False
            # collapse both separator runs
            while p < n_phrase and is_separator(phrase[p]):
                p += 1
            while t < n_text and is_separator(text[t]):
                t += 1
        else:
            if phrase[p] != text[t]:
                return False
            p += 1
            t += 1

    return True


def find_matches(text: str, phrase: str) -> List[int]:
    """All start positions where `phrase` matches (overlaps allowed)."""
    if not phrase:
        return []
    return [i for i in range(len(text)) if match_at(text, i, phrase)]


def mark_matches(text: str, phrase: str) -> str:
    """Return `text` with '@' inserted in front of every match."""
    starts = set(find_matches(text, phrase))
    out: List[str] = []
    for i, ch in enumerate(text):
        if i in starts:
            out.append("@")
        out.append(ch)
    return "".join(out)
