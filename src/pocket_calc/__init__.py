"""
Pocket calculator core: an input buffer state machine and a decimal evaluator.
"""

from .config import CalculatorConfig
from .editor import BufferEditor
from .errors import (
    CalculatorError,
    DivisionByZero,
    InvalidExpression,
    MalformedExpression,
    UnknownOperator,
)
from .evaluator import evaluate, format_result, tokenize
from .symbols import Operator, classify, normalize_operator

__version__ = "0.1.0"

__all__ = [
    "BufferEditor",
    "CalculatorConfig",
    "CalculatorError",
    "DivisionByZero",
    "InvalidExpression",
    "MalformedExpression",
    "Operator",
    "UnknownOperator",
    "classify",
    "evaluate",
    "format_result",
    "normalize_operator",
    "tokenize",
]
