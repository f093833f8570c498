"""Tests for the input vocabulary."""

from pocket_calc.symbols import (
    OPERATOR_ALIASES,
    OPERATOR_GLYPHS,
    Control,
    Operator,
    Precedence,
    SymbolKind,
    classify,
    normalize_operator,
)


def test_every_alias_maps_to_one_canonical_glyph():
    for alias, op in OPERATOR_ALIASES.items():
        assert alias not in OPERATOR_GLYPHS
        assert normalize_operator(alias) is op
        assert classify(alias) == (SymbolKind.OPERATOR, op.glyph)
    assert normalize_operator("*") is Operator.MUL
    assert normalize_operator("x") is Operator.MUL
    assert normalize_operator("/") is Operator.DIV


def test_canonical_glyphs_normalize_to_themselves():
    for op in Operator:
        assert normalize_operator(op.glyph) is op
    assert normalize_operator("%") is None


def test_precedence_tiers():
    assert Operator.MUL.precedence is Precedence.HIGH
    assert Operator.DIV.precedence is Precedence.HIGH
    assert Operator.ADD.precedence is Precedence.LOW
    assert Operator.SUB.precedence is Precedence.LOW


def test_classify():
    assert classify("7").kind is SymbolKind.DIGIT
    assert classify(".").kind is SymbolKind.POINT
    assert classify("=") == (SymbolKind.CONTROL, Control.EVALUATE.value)
    assert classify("Enter").value == Control.EVALUATE.value
    assert classify("Backspace").value == Control.BACKSPACE.value
    assert classify("Escape").value == Control.CLEAR.value
    assert classify("X").kind is SymbolKind.UNKNOWN
    assert classify("12").kind is SymbolKind.UNKNOWN
