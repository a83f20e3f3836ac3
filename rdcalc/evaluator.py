"""Public entry point: evaluate an arithmetic expression string.

Data flow per call:
1. Resolve settings (explicit arguments win over the environment)
2. Create a fresh Parser over the whole input
3. Run the expression level from position 0
4. Check paren depth is back to zero
5. Check nothing but spaces is left over (unless trailing input is allowed)
"""

from __future__ import annotations

import logging
from typing import Optional

from rdcalc.config import load_settings
from rdcalc.grammar import Parser
from rdcalc.models import (
    EvaluationError,
    NestingTooDeepError,
    UnbalancedParenthesesError,
    UnexpectedCharacterError,
)

logger = logging.getLogger(__name__)


def evaluate(
    expression: str,
    *,
    max_depth: Optional[int] = None,
    allow_trailing: Optional[bool] = None,
) -> float:
    """Evaluate an arithmetic expression and return its value.

    Supports + - * /, unary minus, parentheses and decimal literals.
    Spaces are ignored between tokens.

    Args:
        expression: The text to evaluate.
        max_depth: Maximum parenthesis nesting. Defaults to RDCALC_MAX_DEPTH.
        allow_trailing: Ignore unconsumed input after a complete expression
            instead of failing. Defaults to RDCALC_ALLOW_TRAILING. A stray
            ')' is rejected either way.

    Returns:
        The value as a float.

    Raises:
        EvaluationError: One of its subclasses, naming the kind of failure
            and the position it was detected at.
    """
    if max_depth is None or allow_trailing is None:
        settings = load_settings()
        if max_depth is None:
            max_depth = settings.max_depth
        if allow_trailing is None:
            allow_trailing = settings.allow_trailing

    logger.debug("Evaluating %r (max_depth=%d, allow_trailing=%s)", expression, max_depth, allow_trailing)

    parser = Parser(expression, max_depth=max_depth)
    try:
        try:
            value = parser.parse_expression()
        except RecursionError:
            raise NestingTooDeepError(
                f"parentheses nested deeper than the interpreter stack allows (depth {parser.depth})",
                parser.pos, expression,
            ) from None

        if parser.depth != 0:
            raise UnbalancedParenthesesError(
                f"{parser.depth} unclosed '('", parser.pos, expression,
            )

        parser.skip_spaces()
        if not parser.at_end():
            c = parser.peek()
            if c == ")":
                raise UnbalancedParenthesesError("')' without matching '('", parser.pos, expression)
            if not allow_trailing:
                raise UnexpectedCharacterError(
                    f"unexpected trailing input {expression[parser.pos:]!r}", parser.pos, expression,
                )
            logger.debug("Ignoring trailing input %r", expression[parser.pos:])
    except EvaluationError as e:
        logger.debug("Evaluation failed: %s at %d", e.kind.value, e.position)
        raise

    logger.debug("Result %r", value)
    return float(value)
