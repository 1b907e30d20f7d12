"""Evaluator: reduces S-expressions to a number or an error."""

from __future__ import annotations

import logging
from typing import Callable

from .values import (
    ERR_BAD_OP,
    ERR_DIV_ZERO,
    ERR_NO_SYMBOL,
    ERR_NON_NUMBER,
    LError,
    LNumber,
    LSExpr,
    LSymbol,
    Value,
    wrap_int,
)

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Operators
# ---------------------------------------------------------------------------

def _trunc_div(x: int, y: int) -> int:
    """Integer division rounding toward zero (Python's // floors)."""
    q = abs(x) // abs(y)
    return -q if (x < 0) != (y < 0) else q


OPERATORS: dict[str, Callable[[int, int], int]] = {
    "+": lambda x, y: x + y,
    "-": lambda x, y: x - y,
    "*": lambda x, y: x * y,
    "/": _trunc_div,
}


def apply_operator(operands: list[Value], op: str) -> Value:
    """Fold *operands* left to right with *op*.

    *operands* is consumed: on return the list is empty.
    Results wrap to the signed 64-bit range after every step.
    """
    if not all(isinstance(a, LNumber) for a in operands):
        operands.clear()
        return LError(ERR_NON_NUMBER)

    fn = OPERATORS.get(op)
    if fn is None:
        operands.clear()
        return LError(ERR_BAD_OP)

    x = operands.pop(0)

    # Unary minus
    if op == "-" and not operands:
        return LNumber(wrap_int(-x.value))

    acc = x.value
    while operands:
        y = operands.pop(0)
        if op == "/" and y.value == 0:
            operands.clear()
            return LError(ERR_DIV_ZERO)
        acc = wrap_int(fn(acc, y.value))

    return LNumber(acc)


# ---------------------------------------------------------------------------
# Public entry point
# ---------------------------------------------------------------------------

def evaluate(v: Value) -> Value:
    """Reduce *v*.  Anything but an S-expression is returned unchanged."""
    if isinstance(v, LSExpr):
        return _eval_sexpr(v)
    return v


def _eval_sexpr(v: LSExpr) -> Value:
    # Children first, in place, strictly left to right
    for i, cell in enumerate(v.cells):
        v.cells[i] = evaluate(cell)

    for i, cell in enumerate(v.cells):
        if isinstance(cell, LError):
            return v.take(i)

    if len(v) == 0:
        return v

    if len(v) == 1:
        return v.take(0)

    head = v.pop(0)
    if not isinstance(head, LSymbol):
        logger.debug("head %s is not a symbol", head)
        v.cells.clear()
        return LError(ERR_NO_SYMBOL)

    return apply_operator(v.cells, head.name)


def evaluate_text(text: str) -> Value:
    """Parse, read and evaluate *text* in one call."""
    from .reader import read_text
    result = evaluate(read_text(text))
    logger.debug("%r => %s", text, result)
    return result
