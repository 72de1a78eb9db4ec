# apps/cli/journal.py
"""
Busiest-interval report for a turnstile journal.

Reads the journal from --in, writes "<max people>\\nHH:MM HH:MM\\n" to --out.
Exits with status 1 if the input cannot be read or is malformed (no output
file is written in that case).
"""

from __future__ import annotations

import argparse
import sys
from typing import List

from packages.datasets.io import read_text, write_text
from packages.journal import JournalFormatError, busiest_interval, parse_journal, render_result


def main(argv: List[str] | None = None) -> int:
    ap = argparse.ArgumentParser(description="exprcheck — busiest interval in a turnstile journal")
    ap.add_argument("--in", dest="inp", default="input.txt", help="journal file")
    ap.add_argument("--out", dest="out", default="output.txt", help="report file")
    args = ap.parse_args(argv)

    try:
        visits = parse_journal(read_text(args.inp))
    except (OSError, UnicodeDecodeError, JournalFormatError) as e:
        sys.stderr.write(f"{args.inp}: {e}\n")
        return 1

    try:
        write_text(render_result(busiest_interval(visits)), args.out)
    except OSError as e:
        sys.stderr.write(f"{args.out}: {e}\n")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
