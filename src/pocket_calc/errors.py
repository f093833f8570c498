"""Typed evaluation failures."""


class CalculatorError(Exception):
    """Base class for every failure the evaluator can raise."""

    kind = "calculator_error"


class InvalidExpression(CalculatorError):
    kind = "invalid_expression"


class MalformedExpression(CalculatorError):
    kind = "malformed_expression"


class UnknownOperator(CalculatorError):
    kind = "unknown_operator"


class DivisionByZero(CalculatorError, ZeroDivisionError):
    kind = "division_by_zero"


__all__ = [
    "CalculatorError",
    "DivisionByZero",
    "InvalidExpression",
    "MalformedExpression",
    "UnknownOperator",
]
