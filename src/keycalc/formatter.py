"""Render token lists and numeric results as display text."""

from typing import Sequence

FRACTION_DIGITS = 10


def format_number(value: float, fraction_digits: int = FRACTION_DIGITS) -> str:
    """
    Format a number as a canonical decimal string.

    The value is rendered with a fixed number of fractional digits, then
    trailing zeros and a dangling decimal point are removed.

    Args:
        value: Finite number to format
        fraction_digits: Digits kept after the decimal point before trimming

    Returns:
        Canonical decimal text, e.g. 14.0 -> "14", 14.23 -> "14.23"
    """
    text = f"{value:.{fraction_digits}f}"
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    # Tiny negatives round to "-0.000..."
    if text == "-0":
        text = "0"
    return text


def join_tokens(tokens: Sequence[str]) -> str:
    return " ".join(tokens)


def final_accumulator(tokens: Sequence[str], result: str) -> str:
    """Expression text frozen together with its result: "2 + 3 = 5"."""
    return f"{join_tokens(tokens)} = {result}"
