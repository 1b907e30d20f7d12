"""Lispy Core — reader and evaluator for integer S-expressions."""

from .errors import LispyDepthError, LispyError, LispyReadError, LispySyntaxError
from .evaluator import apply_operator, evaluate, evaluate_text
from .grammar import parse
from .reader import read, read_text
from .repl import LispyRepl
from .values import (
    LError,
    LNumber,
    LSExpr,
    LSymbol,
    Value,
)

__all__ = [
    "evaluate",
    "evaluate_text",
    "apply_operator",
    "parse",
    "read",
    "read_text",
    "LispyRepl",
    "LError",
    "LNumber",
    "LSExpr",
    "LSymbol",
    "Value",
    "LispyError",
    "LispyDepthError",
    "LispyReadError",
    "LispySyntaxError",
]
