"""Reader layer: converts a lark syntax tree into Lispy values."""

from __future__ import annotations

import logging

from lark import Token, Tree

from .errors import LispyReadError
from .grammar import ROOT, parse
from .values import ERR_INVALID_NUMBER, LError, LNumber, LSExpr, LSymbol, Value, in_range

logger = logging.getLogger(__name__)

Node = Tree | Token

_PARENS = ("(", ")")


# ---------------------------------------------------------------------------
# Node accessors
# ---------------------------------------------------------------------------

def node_tag(node: Node) -> str:
    """Classification tag: the rule name of a Tree, the type of a Token."""
    if isinstance(node, Token):
        return node.type
    return str(node.data)


def node_text(node: Node) -> str | None:
    """Text content of a leaf: the token itself or a rule's single token."""
    if isinstance(node, Token):
        return str(node)
    if len(node.children) == 1 and isinstance(node.children[0], Token):
        return str(node.children[0])
    return None


def _is_skipped(node: Node) -> bool:
    if not isinstance(node, Token):
        return False
    if node.value in _PARENS:
        return True
    tag = node.type.lower()
    return "regex" in tag or tag == "ws"


# ---------------------------------------------------------------------------
# Literals
# ---------------------------------------------------------------------------

def read_number(text: str | None) -> Value:
    """Base-10 integer literal → LNumber, or LError when out of range."""
    try:
        x = int(text, 10)
    except (TypeError, ValueError):
        return LError(ERR_INVALID_NUMBER)
    if not in_range(x):
        logger.debug("number literal %s out of range", text)
        return LError(ERR_INVALID_NUMBER)
    return LNumber(x)


# ---------------------------------------------------------------------------
# read
# ---------------------------------------------------------------------------

def read(node: Node) -> Value:
    """Convert one syntax tree node (and its children) to a Value."""
    tag = node_tag(node)
    kind = tag.lower()

    if "number" in kind:
        return read_number(node_text(node))

    if "symbol" in kind:
        text = node_text(node)
        if text is None:
            raise LispyReadError(f"symbol node without text: {node!r}")
        return LSymbol(text)

    if isinstance(node, Tree) and (tag == ROOT or "sexpr" in kind):
        expr = LSExpr()
        for child in node.children:
            if _is_skipped(child):
                continue
            expr.add(read(child))
        return expr

    raise LispyReadError(f"cannot read node tagged {tag!r}")


def read_text(text: str) -> Value:
    """Parse *text* and read the resulting tree."""
    return read(parse(text))
