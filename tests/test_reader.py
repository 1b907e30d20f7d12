"""Tests for the Reader layer."""

import pytest
from lark import Token, Tree

from lispy_core.errors import LispyReadError
from lispy_core.grammar import parse
from lispy_core.reader import node_tag, node_text, read, read_number, read_text
from lispy_core.values import LError, LNumber, LSExpr, LSymbol


# ---------------------------------------------------------------------------
# Node accessors
# ---------------------------------------------------------------------------

def test_node_tag_tree_and_token():
    assert node_tag(Tree("sexpr", [])) == "sexpr"
    assert node_tag(Token("NUMBER", "1")) == "NUMBER"


def test_node_text():
    assert node_text(Token("NUMBER", "12")) == "12"
    assert node_text(Tree("number", [Token("NUMBER", "12")])) == "12"
    assert node_text(Tree("sexpr", [])) is None


# ---------------------------------------------------------------------------
# read_number
# ---------------------------------------------------------------------------

def test_read_number_plain():
    assert read_number("36") == LNumber(36)


def test_read_number_negative():
    assert read_number("-5") == LNumber(-5)


def test_read_number_limits():
    assert read_number("9223372036854775807") == LNumber(9223372036854775807)
    assert read_number("-9223372036854775808") == LNumber(-9223372036854775808)


def test_read_number_overflow():
    assert read_number("9223372036854775808") == LError("invalid number")
    assert read_number("-9223372036854775809") == LError("invalid number")


def test_read_number_garbage():
    assert read_number("abc") == LError("invalid number")
    assert read_number(None) == LError("invalid number")


# ---------------------------------------------------------------------------
# read
# ---------------------------------------------------------------------------

def test_read_root_is_sexpr():
    assert read(parse("5")) == LSExpr([LNumber(5)])


def test_read_empty_input():
    assert read(parse("")) == LSExpr()


def test_read_nested():
    v = read_text("(+ 1 (* 2 3))")
    assert v == LSExpr([
        LSExpr([
            LSymbol("+"),
            LNumber(1),
            LSExpr([LSymbol("*"), LNumber(2), LNumber(3)]),
        ])
    ])


def test_read_empty_parens():
    assert read_text("()") == LSExpr([LSExpr()])


def test_read_out_of_range_literal():
    v = read_text("(+ 1 99999999999999999999)")
    assert v.cells[0].cells[2] == LError("invalid number")


def test_read_bare_number_token():
    assert read(Token("NUMBER", "42")) == LNumber(42)


def test_read_symbol_is_not_validated():
    node = Tree("symbol", [Token("SYMBOL", "%")])
    assert read(node) == LSymbol("%")


def test_read_skips_parens_and_passthrough_nodes():
    node = Tree("sexpr", [
        Token("LPAR", "("),
        Token("WS", " "),
        Tree("number", [Token("NUMBER", "1")]),
        Token("regex", ""),
        Token("RPAR", ")"),
    ])
    assert read(node) == LSExpr([LNumber(1)])


def test_read_preserves_order():
    v = read_text("(- 10 4 1)")
    assert v.cells[0].cells == [LSymbol("-"), LNumber(10), LNumber(4), LNumber(1)]


def test_read_unknown_node_raises():
    with pytest.raises(LispyReadError):
        read(Tree("bogus", []))


def test_read_symbol_without_text_raises():
    with pytest.raises(LispyReadError):
        read(Tree("symbol", []))
