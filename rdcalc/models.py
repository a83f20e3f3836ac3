"""Data models for the rdcalc evaluator.

ErrorKind enum, the EvaluationError family, DemoCase, DemoResult: the typed
structures that flow through grammar → evaluator → CLI.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional


class ErrorKind(str, Enum):
    """Ways an evaluation can fail."""

    MALFORMED_NUMBER = "malformed-number"
    UNBALANCED_PARENTHESES = "unbalanced-parentheses"
    DIVISION_BY_ZERO = "division-by-zero"
    UNEXPECTED_CHARACTER = "unexpected-character"
    NESTING_TOO_DEEP = "nesting-too-deep"


class EvaluationError(ValueError):
    """Base class for every failure raised by evaluate().

    Only the subclasses are raised; each one sets kind.

    Attributes:
        kind: Which ErrorKind this is.
        position: Cursor index where the failure was detected.
        expression: The full input text being evaluated.
    """

    kind: ErrorKind

    def __init__(self, message: str, position: int = 0, expression: str = "") -> None:
        super().__init__(message)
        self.message = message
        self.position = position
        self.expression = expression

    def caret(self) -> str:
        """Render the input with a ^ marker under the failing position."""
        return f"{self.expression}\n{' ' * self.position}^"

    def __str__(self) -> str:
        return f"{self.message} (at position {self.position})"


class MalformedNumberError(EvaluationError):
    """A number was expected but no digit could be consumed."""

    kind = ErrorKind.MALFORMED_NUMBER


class UnbalancedParenthesesError(EvaluationError):
    """An opening parenthesis was never closed, or a closing one never opened."""

    kind = ErrorKind.UNBALANCED_PARENTHESES


class DivisionByZeroError(EvaluationError, ZeroDivisionError):
    """The right operand of / evaluated to exactly zero."""

    kind = ErrorKind.DIVISION_BY_ZERO


class UnexpectedCharacterError(EvaluationError):
    """A character outside the input alphabet, or trailing input."""

    kind = ErrorKind.UNEXPECTED_CHARACTER


class NestingTooDeepError(EvaluationError):
    """Parenthesis nesting exceeded the configured maximum depth."""

    kind = ErrorKind.NESTING_TOO_DEEP


@dataclass(frozen=True)
class DemoCase:
    """A fixed expression with its expected (rounded) answer."""

    expression: str
    expected: float


@dataclass
class DemoResult:
    """Outcome of evaluating one DemoCase."""

    case: DemoCase
    value: Optional[float] = None
    error: Optional[EvaluationError] = None
    tolerance: float = 1e-4

    @property
    def verdict(self) -> str:
        if self.error is not None:
            return "error"
        if self.value is None:
            return "fail"
        expected = self.case.expected
        if abs(self.value - expected) <= self.tolerance * max(abs(expected), 1e-12):
            return "pass"
        return "fail"
