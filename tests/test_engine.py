"""Tests for the key-press engine."""

import pytest

from keycalc import Calculator, InvalidKeyError, Mode


def press(keys: str) -> Calculator:
    calc = Calculator()
    calc.press_many(keys)
    return calc


def test_digits_after_operator_start_new_number():
    calc = press("12+34")
    assert calc.tokens == ["12", "+", "34"]
    assert calc.accumulator == "12 + 34"
    assert calc.result == "46"


def test_leading_zero_collapse():
    assert press("0012").tokens == ["12"]
    assert press("0").tokens == ["0"]
    assert press("000").tokens == ["0"]
    assert press("5+007").tokens == ["5", "+", "7"]


def test_zero_inside_number_is_kept():
    assert press("105").tokens == ["105"]


def test_operator_replacement():
    calc = press("3+*")
    assert calc.tokens == ["3", "*"]
    assert calc.accumulator == "3 *"


def test_leading_minus_seeds_zero():
    calc = press("-")
    assert calc.tokens == ["0", "-"]
    assert calc.accumulator == "0 -"
    assert calc.result == ""

    calc.press_many("5")
    assert calc.result == "-5"


@pytest.mark.parametrize("op", ["+", "*", "/"])
def test_other_leading_operators_ignored(op):
    calc = press(op)
    assert calc.tokens == []
    assert calc.accumulator == ""
    assert calc.result == ""


def test_leading_minus_then_other_operator_replaces_minus():
    assert press("-+").tokens == ["0", "+"]


def test_live_evaluation_follows_precedence():
    calc = press("2+3*4")
    assert calc.result == "14"
    assert calc.mode is Mode.ENTERING
    assert "=" not in calc.accumulator


def test_trailing_operator_gives_empty_result():
    calc = press("2+3")
    assert calc.result == "5"
    calc.press("*")
    assert calc.result == ""
    assert calc.accumulator == "2 + 3 *"


def test_final_evaluation_freezes_accumulator():
    state = press("2+3").press("=")
    assert state.accumulator == "2 + 3 = 5"
    assert state.result == "5"
    assert state.mode is Mode.EVALUATED


def test_evaluate_is_noop_when_nothing_to_evaluate():
    assert press("=").accumulator == ""
    calc = press("4*=")
    assert calc.accumulator == "4 *"
    assert calc.result == ""
    assert calc.mode is Mode.ENTERING


def test_restart_after_evaluation_on_digit():
    calc = press("2+3=")
    assert calc.accumulator == "2 + 3 = 5"
    state = calc.press("7")
    assert state.tokens == ("7",)
    assert state.accumulator == "7"
    assert state.result == "7"
    assert state.mode is Mode.ENTERING


def test_restart_after_evaluation_on_operator():
    # The old result is not carried over
    calc = press("2+3=")
    calc.press("*")
    assert calc.tokens == []
    assert calc.accumulator == ""

    calc = press("2+3=")
    calc.press("-")
    assert calc.tokens == ["0", "-"]


def test_repeated_evaluate_keeps_result():
    calc = press("9/3==")
    assert calc.accumulator == "9 / 3 = 3"
    assert calc.result == "3"


def test_clear_resets_from_any_state():
    for keys in ["", "12+", "2+3=", "5/0", "-"]:
        state = press(keys).press("C")
        assert state.accumulator == ""
        assert state.result == ""
        assert state.tokens == ()
        assert state.mode is Mode.ENTERING


def test_divide_by_zero_live_and_final():
    calc = press("5/0")
    assert calc.result == "Error: divide by zero"
    state = calc.press("=")
    assert state.accumulator == "5 / 0 = Error: divide by zero"
    assert state.is_error


def test_decimal_results():
    assert press("10/4").result == "2.5"
    assert press("1/3").result == "0.3333333333"
    assert press("2/3").result == "0.6666666667"


def test_invalid_key_leaves_state_untouched():
    calc = press("1+2")
    with pytest.raises(InvalidKeyError):
        calc.press(".")
    with pytest.raises(ValueError):
        calc.press("12")
    assert calc.tokens == ["1", "+", "2"]
    assert calc.result == "3"


def test_token_invariants_hold_over_random_sequences():
    """No two operators in a row; only the synthetic leading "0 -" starts with 0 then op."""
    import random

    rnd = random.Random(7)
    keys = list("0123456789+-*/=C")
    for _ in range(200):
        calc = Calculator()
        for _ in range(30):
            calc.press(rnd.choice(keys))
            tokens = calc.tokens
            for a, b in zip(tokens, tokens[1:]):
                assert not (a in "+-*/" and b in "+-*/")
            if tokens:
                assert tokens[0] not in "+-*/"
            for tok in tokens:
                if tok not in "+-*/":
                    assert tok == "0" or not tok.startswith("0")


def test_state_snapshot_is_detached():
    calc = press("1+")
    state = calc.state
    calc.press("2")
    assert state.tokens == ("1", "+")
    assert calc.state.tokens == ("1", "+", "2")
