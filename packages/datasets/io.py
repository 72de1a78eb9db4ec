from __future__ import annotations
from pathlib import Path
from typing import Iterable, List


def read_text(p: Path | str, encoding: str = "utf-8", errors: str = "strict") -> str:
    """
    Read a whole text file without newline translation ('\\r' is kept).
    Raises FileNotFoundError if the path doesn't exist.

    Pass errors="surrogateescape" to carry bytes the codec does not define
    through to write_text unchanged.
    """
    p = Path(p)
    if not p.exists():
        raise FileNotFoundError(p)
    with p.open("r", encoding=encoding, errors=errors, newline="") as f:
        return f.read()


def write_text(text: str, p: Path | str, encoding: str = "utf-8", errors: str = "strict") -> str:
    """
    Write text verbatim (no newline translation). Returns the string path written.
    """
    p = Path(p)
    p.parent.mkdir(parents=True, exist_ok=True)
    with p.open("w", encoding=encoding, errors=errors, newline="") as f:
        f.write(text)
    return str(p)


def read_lines(p: Path | str, encoding: str = "utf-8") -> List[str]:
    """
    Read a text file into a list of lines, stripping trailing CR/LF.

    Only '\\n' ends a line; '\\v' and '\\f' are whitespace inside an
    expression, so str.splitlines() is not used here.
    """
    text = read_text(p, encoding=encoding)
    if not text:
        return []
    lines = text.split("\n")
    if lines[-1] == "":
        lines.pop()
    return [ln.rstrip("\r") for ln in lines]


def write_lines(lines: Iterable[str], p: Path | str, encoding: str = "utf-8") -> str:
    """
    Write lines to a text file, ensuring a trailing newline.
    Returns the string path written.
    """
    return write_text("\n".join(lines) + "\n", p, encoding=encoding)
