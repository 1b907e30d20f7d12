"""Grammar binding: raw text → lark syntax tree.

The tree keeps parenthesis tokens so the reader sees every node the
grammar produced::

    Tree('lispy', [Tree('sexpr', [Token('LPAR', '('),
                                  Tree('symbol', [Token('SYMBOL', '+')]),
                                  Tree('number', [Token('NUMBER', '1')]),
                                  Token('RPAR', ')')])])
"""

from __future__ import annotations

import logging
from functools import lru_cache

from lark import Lark, Tree
from lark.exceptions import (
    UnexpectedCharacters,
    UnexpectedEOF,
    UnexpectedInput,
    UnexpectedToken,
)

from .errors import LispySyntaxError

logger = logging.getLogger(__name__)


ROOT = "lispy"

GRAMMAR = r"""
    lispy: expr*

    ?expr: number | symbol | sexpr

    number: NUMBER
    symbol: SYMBOL
    sexpr: "(" expr* ")"

    NUMBER: /-?[0-9]+/
    SYMBOL: "+" | "-" | "*" | "/"

    %import common.WS
    %ignore WS
"""


@lru_cache(maxsize=None)
def get_parser() -> Lark:
    """Build the LALR parser once per process."""
    return Lark(GRAMMAR, start=ROOT, parser="lalr", keep_all_tokens=True)


def parse(text: str) -> Tree:
    """Parse *text* into a tree rooted at a ``lispy`` node.

    Raises LispySyntaxError when the text is not in the language.
    """
    try:
        tree = get_parser().parse(text)
    except UnexpectedInput as exc:
        message = _describe(exc)
        column = getattr(exc, "column", None)
        if not isinstance(column, int) or column < 1:
            column = None
        logger.debug("parse failed for %r: %s", text, message)
        raise LispySyntaxError(message, text, column) from exc
    logger.debug("parsed %r", text)
    return tree


def _describe(exc: UnexpectedInput) -> str:
    if isinstance(exc, UnexpectedCharacters):
        return f"unexpected character {exc.char!r}"
    if isinstance(exc, UnexpectedEOF):
        return "unexpected end of input"
    if isinstance(exc, UnexpectedToken):
        if exc.token.type == "$END":
            return "unexpected end of input"
        return f"unexpected {exc.token.value!r}"
    return "invalid input"
