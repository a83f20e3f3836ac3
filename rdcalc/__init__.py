"""rdcalc: arithmetic expression evaluation without an external parser.

Parses and evaluates + - * /, unary minus, parentheses and decimal literals
in a single recursive-descent pass. Failures raise a typed EvaluationError
subclass; there is never a partial result.

Usage:
    from rdcalc import evaluate
    evaluate("0.0003101 - 34 * (4 + 5) / 23")   # -13.30403...

    python -m rdcalc eval "2 + 3 * 4"
    python -m rdcalc demo
"""

from rdcalc.evaluator import evaluate
from rdcalc.models import (
    DivisionByZeroError,
    ErrorKind,
    EvaluationError,
    MalformedNumberError,
    NestingTooDeepError,
    UnbalancedParenthesesError,
    UnexpectedCharacterError,
)

__all__ = [
    "evaluate",
    "ErrorKind",
    "EvaluationError",
    "MalformedNumberError",
    "UnbalancedParenthesesError",
    "DivisionByZeroError",
    "UnexpectedCharacterError",
    "NestingTooDeepError",
]
