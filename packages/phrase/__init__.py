from .matcher import is_separator, match_at, find_matches, mark_matches
from .io import MAX_PHRASE_LEN, MAX_TEXT_LEN, split_input

__all__ = ["is_separator", "match_at", "find_matches", "mark_matches", "split_input",
           "MAX_PHRASE_LEN", "MAX_TEXT_LEN"]
