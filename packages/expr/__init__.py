from .validator import State, is_valid_expression
from .verdict import MAX_EXPR_LEN, check_line, verdict

__all__ = ["State", "is_valid_expression", "check_line", "verdict", "MAX_EXPR_LEN"]
