from __future__ import annotations

from typing import Tuple

# Input buffer sizes, terminator included.
MAX_PHRASE_LEN = 105
MAX_TEXT_LEN = 2005


def split_input(raw: str) -> Tuple[str, str]:
    """
    Split raw file content into (phrase, text).

    The phrase is the first line, read through a buffer of MAX_PHRASE_LEN - 1
    characters: a longer first line is cut there and its tail becomes part of
    the text. The phrase loses its line ending ('\\n' and anything after the
    first '\\r'). The text keeps at most MAX_TEXT_LEN - 1 characters.
    """
    if not raw:
        return "", ""

    head = raw[: MAX_PHRASE_LEN - 1]
    nl = head.find("\n")
    cut = nl + 1 if nl != -1 else len(head)

    phrase = head[:cut]
    for term in ("\n", "\r"):
        k = phrase.find(term)
        if k != -1:
            phrase = phrase[:k]

    text = raw[cut:][: MAX_TEXT_LEN - 1]
    return phrase, text
