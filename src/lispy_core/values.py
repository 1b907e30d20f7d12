"""Value types for Lispy: numbers, errors, symbols and S-expressions."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Union


# ---------------------------------------------------------------------------
# Error messages
# ---------------------------------------------------------------------------

ERR_INVALID_NUMBER = "invalid number"
ERR_NON_NUMBER = "Cannot operate on non-number"
ERR_NO_SYMBOL = "S-expression does not start with a symbol!"
ERR_DIV_ZERO = "Division by zero!"
ERR_BAD_OP = "Invalid Operator!"


# ---------------------------------------------------------------------------
# Signed 64-bit integer range
# ---------------------------------------------------------------------------

INT_BITS = 64
INT_MIN = -(2 ** (INT_BITS - 1))
INT_MAX = 2 ** (INT_BITS - 1) - 1


def in_range(n: int) -> bool:
    return INT_MIN <= n <= INT_MAX


def wrap_int(n: int) -> int:
    """Fold *n* into the signed 64-bit range (two's complement)."""
    n &= (1 << INT_BITS) - 1
    if n > INT_MAX:
        n -= 1 << INT_BITS
    return n


# ---------------------------------------------------------------------------
# Value types
# ---------------------------------------------------------------------------

@dataclass(slots=True)
class LNumber:
    value: int

    def __str__(self) -> str:
        return str(self.value)


@dataclass(slots=True)
class LError:
    message: str

    def __str__(self) -> str:
        return f"Error: {self.message}"


@dataclass(slots=True)
class LSymbol:
    name: str

    def __str__(self) -> str:
        return self.name


@dataclass(slots=True)
class LSExpr:
    """A parenthesized group.  Owns its cells; no cell is shared."""

    cells: list[Value] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.cells)

    def __str__(self) -> str:
        return "(" + " ".join(str(c) for c in self.cells) + ")"

    def add(self, v: Value) -> LSExpr:
        self.cells.append(v)
        return self

    def pop(self, i: int) -> Value:
        """Remove cell *i* and return it; the expression shrinks by one."""
        return self.cells.pop(i)

    def take(self, i: int) -> Value:
        """Return cell *i* and drop every other cell."""
        v = self.cells.pop(i)
        self.cells.clear()
        return v


Value = Union[LNumber, LError, LSymbol, LSExpr]
