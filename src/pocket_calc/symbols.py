"""
Shared input vocabulary: operators, aliases, control keys and symbol classes.

Every raw symbol coming from a keypad or keyboard passes through `classify()`
exactly once; operator aliases are folded to their canonical glyph there, so
nothing downstream ever sees an alias.
"""

from enum import Enum
from typing import Dict, FrozenSet, NamedTuple, Optional

DIGITS: FrozenSet[str] = frozenset("0123456789")
POINT = "."


class Precedence(int, Enum):
    LOW = 1
    HIGH = 2


class Operator(str, Enum):
    """The four arithmetic operators, valued by their canonical glyph."""

    ADD = "+"
    SUB = "-"
    MUL = "×"
    DIV = "÷"

    @property
    def glyph(self) -> str:
        return self.value

    @property
    def precedence(self) -> Precedence:
        if self in (Operator.MUL, Operator.DIV):
            return Precedence.HIGH
        return Precedence.LOW


OPERATOR_GLYPHS: FrozenSet[str] = frozenset(op.value for op in Operator)

# Accepted spellings that are not canonical glyphs.
OPERATOR_ALIASES: Dict[str, Operator] = {
    "*": Operator.MUL,
    "x": Operator.MUL,
    "/": Operator.DIV,
    "−": Operator.SUB,  # typographic minus sign
}


class Control(str, Enum):
    EVALUATE = "evaluate"
    BACKSPACE = "backspace"
    CLEAR = "clear"


CONTROL_KEYS: Dict[str, Control] = {
    "=": Control.EVALUATE,
    "Enter": Control.EVALUATE,
    "Backspace": Control.BACKSPACE,
    "Escape": Control.CLEAR,
    "C": Control.CLEAR,
}


class SymbolKind(str, Enum):
    DIGIT = "digit"
    POINT = "point"
    OPERATOR = "operator"
    CONTROL = "control"
    UNKNOWN = "unknown"


class Symbol(NamedTuple):
    """A classified input symbol; `value` is already normalized."""

    kind: SymbolKind
    value: str


def normalize_operator(symbol: str) -> Optional[Operator]:
    """Map a canonical glyph or an alias to its Operator, or None."""
    if symbol in OPERATOR_ALIASES:
        return OPERATOR_ALIASES[symbol]
    if symbol in OPERATOR_GLYPHS:
        return Operator(symbol)
    return None


def is_operator_glyph(char: str) -> bool:
    return char in OPERATOR_GLYPHS


def classify(symbol: str) -> Symbol:
    if symbol in DIGITS:
        return Symbol(SymbolKind.DIGIT, symbol)
    if symbol == POINT:
        return Symbol(SymbolKind.POINT, symbol)
    op = normalize_operator(symbol)
    if op is not None:
        return Symbol(SymbolKind.OPERATOR, op.glyph)
    if symbol in CONTROL_KEYS:
        return Symbol(SymbolKind.CONTROL, CONTROL_KEYS[symbol].value)
    return Symbol(SymbolKind.UNKNOWN, symbol)


__all__ = [
    "CONTROL_KEYS",
    "Control",
    "DIGITS",
    "OPERATOR_ALIASES",
    "OPERATOR_GLYPHS",
    "Operator",
    "POINT",
    "Precedence",
    "Symbol",
    "SymbolKind",
    "classify",
    "is_operator_glyph",
    "normalize_operator",
]
