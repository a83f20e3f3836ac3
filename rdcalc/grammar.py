"""Fused recursive-descent parser and evaluator.

Three mutually recursive levels, loosest to tightest:

    expression : term (('+' | '-') term)*
    term       : factor (('*' | '/') factor)*
    factor     : '-'? ( '(' expression ')' | number )

Each level reads through the cursor on the owning Parser and returns the
computed value directly. No syntax tree is built.
"""

from __future__ import annotations

from rdcalc.config import DEFAULT_MAX_DEPTH
from rdcalc.models import (
    DivisionByZeroError,
    NestingTooDeepError,
    UnbalancedParenthesesError,
    UnexpectedCharacterError,
)
from rdcalc.scanner import ALPHABET, is_space, parse_number


class Parser:
    """Parse state for one evaluation: the input, a cursor and the paren depth.

    A Parser is single-use and owned by the call that created it. The cursor
    only moves forward.
    """

    def __init__(self, text: str, max_depth: int = DEFAULT_MAX_DEPTH) -> None:
        self.text = text
        self.pos = 0
        self.depth = 0
        self.max_depth = max_depth

    def peek(self) -> str:
        """Next unconsumed character, or '' at end of input."""
        if self.pos < len(self.text):
            return self.text[self.pos]
        return ""

    def at_end(self) -> bool:
        return self.pos >= len(self.text)

    def skip_spaces(self) -> None:
        while self.pos < len(self.text) and is_space(self.text[self.pos]):
            self.pos += 1

    def parse_expression(self) -> float:
        """Fold a run of terms joined by + and -.

        Stops on the first character that is not + or -, including ')' and
        end of input, and leaves it for the caller.
        """
        value = self.parse_term()
        while True:
            self.skip_spaces()
            op = self.peek()
            if op != "+" and op != "-":
                return value
            self.pos += 1

            rhs = self.parse_term()
            if op == "+":
                value = value + rhs
            else:
                value = value - rhs

    def parse_term(self) -> float:
        """Fold a run of factors joined by * and /."""
        value = self.parse_factor()
        while True:
            self.skip_spaces()
            op = self.peek()
            if op != "*" and op != "/":
                return value
            op_pos = self.pos
            self.pos += 1

            rhs = self.parse_factor()
            if op == "*":
                value = value * rhs
            else:
                if rhs == 0:
                    raise DivisionByZeroError("division by zero", op_pos, self.text)
                value = value / rhs

    def parse_factor(self) -> float:
        """A number or a parenthesised expression, with an optional unary minus."""
        self.skip_spaces()

        negative = False
        if self.peek() == "-":
            negative = True
            self.pos += 1

        if self.peek() == "(":
            open_pos = self.pos
            if self.depth >= self.max_depth:
                raise NestingTooDeepError(
                    f"parentheses nested deeper than {self.max_depth}", open_pos, self.text,
                )
            self.pos += 1
            self.depth += 1

            value = self.parse_expression()
            c = self.peek()
            if c != ")":
                if c and c not in ALPHABET:
                    raise self._unexpected()
                raise UnbalancedParenthesesError(
                    f"'(' at position {open_pos} is never closed", self.pos, self.text,
                )
            self.pos += 1
            self.depth -= 1
            return -value if negative else value

        c = self.peek()
        if c and c not in ALPHABET:
            raise self._unexpected()

        value, self.pos = parse_number(self.text, self.pos)
        return -value if negative else value

    def _unexpected(self) -> UnexpectedCharacterError:
        c = self.peek()
        return UnexpectedCharacterError(f"unexpected character {c!r}", self.pos, self.text)
