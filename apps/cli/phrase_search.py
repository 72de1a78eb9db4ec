# apps/cli/phrase_search.py
"""
Mark every occurrence of a phrase in a text.

Input file: the phrase on the first line, the text after it.
Output file: the text with '@' in front of every match.

Text is read and written with the same encoding (cp1251 by default) and
without newline translation. Bytes the codec does not define (0x98 in
cp1251) are carried through as surrogates, so the output reproduces the
text byte for byte apart from the inserted markers. An empty input gives an empty output file.
"""

from __future__ import annotations

import argparse
import sys
from typing import List

from packages.datasets.io import read_text, write_text
from packages.phrase import mark_matches, split_input


def main(argv: List[str] | None = None) -> int:
    ap = argparse.ArgumentParser(description="exprcheck — phrase search with flexible separators")
    ap.add_argument("--in", dest="inp", default="input.txt", help="phrase + text file")
    ap.add_argument("--out", dest="out", default="output.txt", help="marked-up text file")
    ap.add_argument("--encoding", default="cp1251", help="encoding of both files")
    args = ap.parse_args(argv)

    try:
        raw = read_text(args.inp, encoding=args.encoding, errors="surrogateescape")
    except (OSError, UnicodeDecodeError) as e:
        sys.stderr.write(f"{args.inp}: {e}\n")
        return 1

    phrase, text = split_input(raw)

    try:
        write_text(mark_matches(text, phrase), args.out, encoding=args.encoding,
                   errors="surrogateescape")
    except (OSError, UnicodeEncodeError) as e:
        sys.stderr.write(f"{args.out}: {e}\n")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
