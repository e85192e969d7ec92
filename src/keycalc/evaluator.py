"""
=============================================================================
MODULE NAME: evaluator.py
=============================================================================

INPUT FILES:
- None. Operates on space-separated expression text such as "2 + 3 * 4".

OUTPUT FILES:
- None.

NOTES:
- Infix text is converted to postfix with the shunting-yard algorithm and
  reduced on a stack; no eval() or dynamic code execution.
- ``*`` and ``/`` bind tighter than ``+`` and ``-``; equal precedence is
  left-associative.
- ``compute`` raises structured errors, ``evaluate`` never raises and returns
  display text (a canonical number or an error label).
=============================================================================
"""

from __future__ import annotations

import logging
import math
import operator
from typing import Callable, Dict, List, Tuple

from .errors import DivideByZeroError, EvaluationError
from .formatter import format_number
from .tokens import is_number, is_operator

logger = logging.getLogger(__name__)

ERROR = "Error"
DIVIDE_BY_ZERO = "Error: divide by zero"


def _divide(a: float, b: float) -> float:
    if b == 0:
        raise DivideByZeroError(f"division of {format_number(a)} by zero")
    return a / b


# Operator symbol -> (precedence, function)
BINARY_OPERATORS: Dict[str, Tuple[int, Callable[[float, float], float]]] = {
    "+": (1, operator.add),
    "-": (1, operator.sub),
    "*": (2, operator.mul),
    "/": (2, _divide),
}


def parse(text: str) -> List[str]:
    """
    Split expression text into tokens and check its shape.

    A well-formed expression alternates number and operator tokens and both
    starts and ends with a number.

    Raises:
        EvaluationError: If the text is empty or malformed
    """
    tokens = text.split()
    if not tokens:
        raise EvaluationError("Empty expression")

    for index, token in enumerate(tokens):
        expect_number = index % 2 == 0
        if expect_number and not is_number(token):
            raise EvaluationError(f"Expected a number at position {index}, got {token!r}")
        if not expect_number and not is_operator(token):
            raise EvaluationError(f"Expected an operator at position {index}, got {token!r}")

    if is_operator(tokens[-1]):
        raise EvaluationError(f"Expression cannot end with an operator: {text!r}")
    return tokens


def to_postfix(tokens: List[str]) -> List[str]:
    """Reorder infix tokens into postfix (RPN) order."""
    output: List[str] = []
    stack: List[str] = []
    for token in tokens:
        if is_number(token):
            output.append(token)
            continue
        precedence = BINARY_OPERATORS[token][0]
        while stack and BINARY_OPERATORS[stack[-1]][0] >= precedence:
            output.append(stack.pop())
        stack.append(token)
    output.extend(reversed(stack))
    return output


def compute(text: str) -> float:
    """
    Evaluate expression text to a finite float.

    Raises:
        DivideByZeroError: If any division has a zero divisor
        EvaluationError: If the text is malformed or the result is not finite
    """
    # parse() guarantees alternating operands and operators, so every
    # operator finds two operands and exactly one value remains.
    stack: List[float] = []
    for token in to_postfix(parse(text)):
        if is_number(token):
            stack.append(float(token))
            continue
        right = stack.pop()
        left = stack.pop()
        stack.append(BINARY_OPERATORS[token][1](left, right))

    value = stack[0]
    if not math.isfinite(value):
        raise EvaluationError(f"Result is not finite: {value}")
    return value


def evaluate(text: str) -> str:
    """Evaluate expression text to display text; never raises."""
    try:
        return format_number(compute(text))
    except DivideByZeroError as exc:
        logger.debug("Division by zero in %r: %s", text, exc)
        return DIVIDE_BY_ZERO
    except EvaluationError as exc:
        logger.debug("Evaluation failed for %r: %s", text, exc)
        if "/ 0" in text:
            return DIVIDE_BY_ZERO
        return ERROR
