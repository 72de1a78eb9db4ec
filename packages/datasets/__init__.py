from .validator import validate_corpus, load_corpus, pretty_summary
from .io import read_lines, write_lines

__all__ = ["validate_corpus", "load_corpus", "pretty_summary", "read_lines", "write_lines"]
