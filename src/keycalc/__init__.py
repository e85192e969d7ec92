"""Keypad calculator engine with live evaluation."""

from .calc_types import DisplayState, Mode
from .engine import Calculator
from .errors import DivideByZeroError, EvaluationError, InvalidKeyError, KeycalcError
from .evaluator import compute, evaluate
from .formatter import format_number

__all__ = [
    "Calculator",
    "DisplayState",
    "Mode",
    "KeycalcError",
    "InvalidKeyError",
    "EvaluationError",
    "DivideByZeroError",
    "compute",
    "evaluate",
    "format_number",
]

__version__ = "0.1.0"
