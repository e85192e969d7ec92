import pytest

from keycalc.formatter import final_accumulator, format_number, join_tokens
from keycalc.tokens import strip_leading_zeros


@pytest.mark.parametrize(
    "value, expected",
    [
        (14.0, "14"),
        (14.23, "14.23"),
        (2.5, "2.5"),
        (0.0, "0"),
        (-0.0, "0"),
        (-3.0, "-3"),
        (1 / 3, "0.3333333333"),
        (1e-12, "0"),
        (-1e-12, "0"),
        (100.0, "100"),
    ],
)
def test_format_number(value, expected):
    assert format_number(value) == expected


def test_format_number_is_idempotent():
    for text in ["14", "14.23", "0.3333333333", "-7.5", "1000"]:
        assert format_number(float(text)) == text


def test_format_number_custom_precision():
    assert format_number(2 / 3, fraction_digits=3) == "0.667"


def test_join_and_final_accumulator():
    tokens = ["2", "+", "3"]
    assert join_tokens(tokens) == "2 + 3"
    assert final_accumulator(tokens, "5") == "2 + 3 = 5"


@pytest.mark.parametrize(
    "numeral, expected",
    [("0", "0"), ("00", "0"), ("012", "12"), ("0012", "12"), ("120", "120"), ("7", "7")],
)
def test_strip_leading_zeros(numeral, expected):
    assert strip_leading_zeros(numeral) == expected
