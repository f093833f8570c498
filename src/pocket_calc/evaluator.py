"""
=============================================================================
MODULE NAME: evaluator.py
=============================================================================

INPUT:
- A finished buffer string, e.g. "2+3×4".

OUTPUT:
- A single `decimal.Decimal`, or one of the `pocket_calc.errors` failures.

NOTES:
- Stateless: the same string always yields the same value or the same failure.
- Two precedence tiers. Each reduction step takes the first × or ÷ scanning
  left to right; only when none remain does it take the leftmost + or -.
- Arithmetic runs in a local decimal context so 0.1+0.2 is exactly 0.3.
=============================================================================
"""

from __future__ import annotations

import decimal
from dataclasses import dataclass
from decimal import Decimal
from typing import Callable, Dict, List, Optional, Tuple, Union

from .config import DEFAULT_CONFIG, CalculatorConfig
from .errors import (
    CalculatorError,
    DivisionByZero,
    InvalidExpression,
    MalformedExpression,
    UnknownOperator,
)
from .symbols import DIGITS, POINT, Operator, Precedence, is_operator_glyph

NUMBER = "number"
OPERATOR = "operator"


@dataclass(frozen=True, slots=True)
class Token:
    """One lexical unit of an expression, with its offset in the source."""

    kind: str
    text: str
    position: int

    @property
    def number(self) -> Decimal:
        return Decimal(self.text)

    @property
    def operator(self) -> Operator:
        return Operator(self.text)


def tokenize(expression: str) -> List[Token]:
    """
    Split an expression into number and operator tokens.

    A number is a maximal run of digits and points holding at most one point.
    An operator is one canonical glyph. Aliases are not accepted here; they
    never reach the buffer.

    Raises:
        InvalidExpression: On empty input, a stray character, or a run with
            no digits or more than one point
    """
    tokens: List[Token] = []
    i = 0
    n = len(expression)
    while i < n:
        ch = expression[i]
        if ch in DIGITS or ch == POINT:
            start = i
            while i < n and (expression[i] in DIGITS or expression[i] == POINT):
                i += 1
            run = expression[start:i]
            if run.count(POINT) > 1:
                raise InvalidExpression(f"Number {run!r} at offset {start} has more than one decimal point")
            if run == POINT:
                raise InvalidExpression(f"Bare decimal point at offset {start}")
            tokens.append(Token(NUMBER, run, start))
            continue
        if is_operator_glyph(ch):
            tokens.append(Token(OPERATOR, ch, i))
            i += 1
            continue
        raise InvalidExpression(f"Unexpected character {ch!r} at offset {i}")

    if not tokens:
        raise InvalidExpression("Empty expression")
    return tokens


def split_tokens(tokens: List[Token]) -> Tuple[List[Decimal], List[Operator]]:
    numbers: List[Decimal] = []
    operators: List[Operator] = []
    for tok in tokens:
        if tok.kind == NUMBER:
            numbers.append(tok.number)
        elif tok.kind == OPERATOR:
            operators.append(tok.operator)
        else:
            raise InvalidExpression(f"Unrecognized token {tok.text!r}")
    if not numbers:
        raise InvalidExpression("Expression has no numbers")
    return numbers, operators


def _divide(ctx: decimal.Context, left: Decimal, right: Decimal) -> Decimal:
    if right.is_zero():
        raise DivisionByZero(f"Cannot divide {left} by zero")
    return ctx.divide(left, right)


_OPERATIONS: Dict[Operator, Callable[[decimal.Context, Decimal, Decimal], Decimal]] = {
    Operator.ADD: lambda ctx, a, b: ctx.add(a, b),
    Operator.SUB: lambda ctx, a, b: ctx.subtract(a, b),
    Operator.MUL: lambda ctx, a, b: ctx.multiply(a, b),
    Operator.DIV: _divide,
}


def apply_operator(
    op: Union[Operator, str],
    left: Decimal,
    right: Decimal,
    context: Optional[decimal.Context] = None,
) -> Decimal:
    """
    Apply one binary operator.

    Raises:
        UnknownOperator: If `op` is not one of the four operators
        DivisionByZero: If dividing by an exact zero
        InvalidExpression: If the decimal context signals overflow or similar
    """
    try:
        operator = Operator(op)
    except ValueError:
        raise UnknownOperator(f"Unknown operator: {op!r}") from None
    ctx = context or DEFAULT_CONFIG.decimal_context()
    try:
        return _OPERATIONS[operator](ctx, left, right)
    except decimal.DecimalException as exc:
        raise InvalidExpression(f"Arithmetic failed for {left} {operator.glyph} {right}: {exc!r}") from exc


def next_operator_index(operators: List[Operator]) -> int:
    for idx, op in enumerate(operators):
        if op.precedence is Precedence.HIGH:
            return idx
    return 0


def reduce_expression(numbers: List[Decimal], operators: List[Operator], context: decimal.Context) -> Decimal:
    numbers = list(numbers)
    operators = list(operators)
    while operators:
        idx = next_operator_index(operators)
        op = operators.pop(idx)
        if idx + 1 >= len(numbers):
            raise MalformedExpression(f"Operator {op.glyph!r} is missing an operand")
        left = numbers.pop(idx)
        right = numbers.pop(idx)
        numbers.insert(idx, apply_operator(op, left, right, context))

    if len(numbers) != 1:
        raise MalformedExpression(f"Expected one value after reduction, found {len(numbers)}")
    return numbers[0]


def evaluate(expression: str, config: Optional[CalculatorConfig] = None) -> Decimal:
    """
    Evaluate a buffer string to a Decimal.

    Args:
        expression: Text made of digits, "." and the glyphs + - × ÷
        config: Supplies decimal precision and rounding

    Returns:
        The exact (up to configured precision) decimal result

    Raises:
        CalculatorError: One of its subclasses describing the failure
    """
    cfg = config or DEFAULT_CONFIG
    numbers, operators = split_tokens(tokenize(expression))
    return reduce_expression(numbers, operators, cfg.decimal_context())


def format_result(value: Decimal) -> str:
    """Render a result as plain decimal text without exponent or trailing zeros."""
    if value.is_zero():
        return "0"
    text = format(value, "f")
    if POINT in text:
        text = text.rstrip("0").rstrip(POINT)
    return text


def try_evaluate(
    expression: str, config: Optional[CalculatorConfig] = None
) -> Tuple[Optional[str], Optional[CalculatorError]]:
    """Evaluate and format, returning (text, None) or (None, error)."""
    try:
        return format_result(evaluate(expression, config)), None
    except CalculatorError as exc:
        return None, exc


__all__ = [
    "Token",
    "apply_operator",
    "evaluate",
    "format_result",
    "next_operator_index",
    "reduce_expression",
    "split_tokens",
    "tokenize",
    "try_evaluate",
]
