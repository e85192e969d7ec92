"""
Tokenized expression engine.

Turns a stream of key labels into a token list that is re-evaluated after
every key, so hosts can show a live result next to the expression.
"""

from __future__ import annotations

import logging
from typing import Iterable, List

from .calc_types import DisplayState, Mode
from .errors import InvalidKeyError
from .evaluator import evaluate
from .formatter import final_accumulator, join_tokens
from .tokens import (
    CLEAR_KEY,
    EVALUATE_KEY,
    KEYS,
    ends_with_number,
    is_digit,
    is_operator,
    strip_leading_zeros,
)

logger = logging.getLogger(__name__)


class Calculator:
    """Calculator engine managing the token list and display text."""

    def __init__(self) -> None:
        """Initialize calculator with an empty expression."""
        self.reset()

    def reset(self) -> None:
        """Reset calculator to initial state."""
        self._tokens: List[str] = []
        self.accumulator = ""
        self.result = ""
        self.mode = Mode.ENTERING

    @property
    def tokens(self) -> List[str]:
        """Copy of the current token list."""
        return list(self._tokens)

    @property
    def state(self) -> DisplayState:
        return DisplayState(
            accumulator=self.accumulator,
            result=self.result,
            tokens=tuple(self._tokens),
            mode=self.mode,
        )

    def press(self, key: str) -> DisplayState:
        """
        Handle a single key press.

        Args:
            key: One of "0"-"9", "+", "-", "*", "/", "C", "="

        Returns:
            Display state after the key has been applied

        Raises:
            InvalidKeyError: If the label is not a keypad key
        """
        if key not in KEYS:
            raise InvalidKeyError(key)

        if key == CLEAR_KEY:
            self.clear()
            return self.state
        if key == EVALUATE_KEY:
            self._final_evaluate()
            return self.state

        # A new entry right after "=" starts a fresh expression
        if self.mode is Mode.EVALUATED:
            self.reset()

        if is_digit(key):
            self._append_digit(key)
        else:
            self._append_operator(key)

        self.accumulator = join_tokens(self._tokens)
        self._live_evaluate()
        logger.debug("Key %r -> tokens=%s result=%r", key, self._tokens, self.result)
        return self.state

    def press_many(self, keys: Iterable[str]) -> DisplayState:
        """Press each key in order and return the final state."""
        state = self.state
        for key in keys:
            state = self.press(key)
        return state

    def clear(self) -> DisplayState:
        self.reset()
        logger.debug("Cleared")
        return self.state

    def _append_digit(self, digit: str) -> None:
        if not ends_with_number(self._tokens):
            self._tokens.append(digit)
        else:
            self._tokens[-1] = strip_leading_zeros(self._tokens[-1] + digit)

    def _append_operator(self, op: str) -> None:
        if not self._tokens:
            # Leading minus reads as "0 - ..."
            if op == "-":
                self._tokens.extend(["0", "-"])
            else:
                logger.debug("Ignored leading operator %r", op)
            return
        if is_operator(self._tokens[-1]):
            self._tokens[-1] = op
        else:
            self._tokens.append(op)

    def _live_evaluate(self) -> None:
        if not ends_with_number(self._tokens):
            self.result = ""
            return
        self.result = evaluate(join_tokens(self._tokens))

    def _final_evaluate(self) -> None:
        if not ends_with_number(self._tokens):
            logger.debug("Nothing to evaluate")
            return
        result = evaluate(join_tokens(self._tokens))
        self.accumulator = final_accumulator(self._tokens, result)
        self.result = result
        self.mode = Mode.EVALUATED
