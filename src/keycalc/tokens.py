import re
from typing import Dict, List, Sequence

DIGITS = "0123456789"
OPERATORS = ("+", "-", "*", "/")
CLEAR_KEY = "C"
EVALUATE_KEY = "="

KEYS = frozenset(DIGITS) | frozenset(OPERATORS) | {CLEAR_KEY, EVALUATE_KEY}

# Rows of the four-column keypad, top to bottom.
KEYPAD_LAYOUT: List[List[str]] = [
    ["7", "8", "9", "/"],
    ["4", "5", "6", "*"],
    ["1", "2", "3", "-"],
    ["C", "0", "=", "+"],
]

_LEADING_ZEROS = re.compile(r"^0+")


def is_digit(key: str) -> bool:
    return len(key) == 1 and key in DIGITS


def is_operator(token: str) -> bool:
    return token in OPERATORS


def is_number(token: str) -> bool:
    return bool(token) and token.isascii() and token.isdigit()


def strip_leading_zeros(numeral: str) -> str:
    """Drop leading zeros from a numeral; an all-zero numeral becomes "0"."""
    if len(numeral) > 1 and numeral.startswith("0"):
        return _LEADING_ZEROS.sub("", numeral) or "0"
    return numeral


def ends_with_number(tokens: Sequence[str]) -> bool:
    return bool(tokens) and not is_operator(tokens[-1])


def keypad() -> Dict[str, List[List[str]]]:
    return {"rows": [row[:] for row in KEYPAD_LAYOUT]}
