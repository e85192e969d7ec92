"""Exception types raised by keycalc.

Only key validation and the structured ``compute`` path raise these; the
display path (``evaluate``) converts every evaluation failure into a label.
"""


class KeycalcError(Exception):
    """Base class for keycalc errors."""


class InvalidKeyError(KeycalcError, ValueError):
    """A key label outside the keypad alphabet was pressed."""

    def __init__(self, key: str) -> None:
        super().__init__(f"Unknown key: {key!r}")
        self.key = key


class EvaluationError(KeycalcError):
    """The expression could not be parsed or reduced to a finite number."""


class DivideByZeroError(EvaluationError, ZeroDivisionError):
    """A division step had a zero divisor."""
