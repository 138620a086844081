import pytest

from padcalc.expression import (
    CalculatorError,
    ExpressionSyntaxError,
    MathError,
    NumberOverflowError,
    apply_operator,
    evaluate,
    evaluate_postfix,
    format_result,
    infix_to_postfix,
    is_digit,
    is_operator,
    precedence_greater,
    validate,
)


@pytest.mark.parametrize("ch", list("0123456789"))
def test_is_digit_accepts_digits(ch):
    assert is_digit(ch) is True


@pytest.mark.parametrize("ch", [".", "a", "+", "", "12", " "])
def test_is_digit_rejects_others(ch):
    assert is_digit(ch) is False


@pytest.mark.parametrize("ch", list("+-*/^"))
def test_is_operator_accepts_operators(ch):
    assert is_operator(ch) is True


@pytest.mark.parametrize("ch", ["=", "5", ".", "", "+-"])
def test_is_operator_rejects_others(ch):
    assert is_operator(ch) is False


@pytest.mark.parametrize(
    "first, second, expected",
    [
        ("^", "+", True),
        ("^", "^", True),
        ("*", "/", True),
        ("*", "^", False),
        ("+", "-", True),
        ("+", "*", False),
        ("-", "^", False),
    ],
)
def test_precedence_greater(first, second, expected):
    assert precedence_greater(first, second) is expected


def test_postfix_respects_precedence():
    assert infix_to_postfix("2+3*4") == [2.0, 3.0, 4.0, "*", "+"]
    assert infix_to_postfix("2*3+4") == [2.0, 3.0, "*", 4.0, "+"]


def test_postfix_leading_minus_and_sign_after_operator():
    assert infix_to_postfix("-5*-3") == [-5.0, -3.0, "*"]


def test_postfix_plus_after_operator_is_ignored():
    assert infix_to_postfix("5-+3") == [5.0, 3.0, "-"]


def test_postfix_decimal_numbers():
    assert infix_to_postfix("1.5+.25") == [1.5, 0.25, "+"]


def test_postfix_skips_unknown_characters():
    assert infix_to_postfix("2G+3") == infix_to_postfix("2+3")


def test_evaluate_postfix_simple():
    assert evaluate_postfix([2.0, 3.0, "+"]) == 2.0 + 3.0


def test_evaluate_postfix_underflow():
    with pytest.raises(ExpressionSyntaxError):
        evaluate_postfix([5.0, "+"])


def test_evaluate_postfix_empty():
    with pytest.raises(ExpressionSyntaxError):
        evaluate_postfix([])


@pytest.mark.parametrize("op", list("+-*^"))
def test_apply_operator_matches_postfix(op):
    assert apply_operator(op, 2.0, 3.0) == evaluate_postfix([2.0, 3.0, op])


def test_apply_operator_division_by_zero():
    with pytest.raises(MathError):
        apply_operator("/", 1.0, 0.0)


def test_apply_operator_complex_power():
    with pytest.raises(MathError):
        apply_operator("^", -8.0, 1.0 / 3.0)


def test_apply_operator_overflow():
    with pytest.raises(MathError):
        apply_operator("^", 9999.0, 9999.0)


def test_apply_operator_unknown():
    with pytest.raises(ValueError):
        apply_operator("%", 1.0, 2.0)


def test_evaluate_commutes():
    assert evaluate("2+3*4") == evaluate("3*4+2")


def test_evaluate_power_is_left_associative():
    assert evaluate("2^3^2") == evaluate("8^2")


def test_evaluate_subtraction_is_left_associative():
    assert evaluate("10-4-3") == evaluate("6-3")


def test_evaluate_division_is_left_associative():
    assert evaluate("8/4/2") == evaluate("2/2")


def test_evaluate_signs():
    assert evaluate("-5*-3") == evaluate("5*3")
    assert evaluate("5--3") == evaluate("5+3")
    assert evaluate("-7") == -7.0


def test_evaluate_single_number():
    assert evaluate("42") == 42.0


@pytest.mark.parametrize("expression", ["*", "+", "5**2", "5*/2", "5^*2", "5+", "1.2.3", ""])
def test_validate_syntax_errors(expression):
    with pytest.raises(ExpressionSyntaxError):
        validate(expression)


def test_validate_math_error():
    with pytest.raises(MathError):
        validate("5/0")


def test_validate_overflow():
    with pytest.raises(NumberOverflowError):
        validate("12345+1")


def test_validate_accepts_dots_split_by_operator():
    validate("1.2+3.4")
    assert evaluate("1.2+3.4") == evaluate("3.4+1.2")


def test_errors_share_base_class():
    with pytest.raises(CalculatorError):
        evaluate("5/0")
    with pytest.raises(CalculatorError):
        evaluate("9999^9999")


def test_error_messages():
    assert str(ExpressionSyntaxError()) == "SYNTAX ERROR"
    assert str(MathError()) == "MATH ERROR"


def test_format_result_pinned():
    assert format_result(2.5) == "2.5000"
    assert format_result(0.5) == ".5000"


def test_format_result_negative():
    assert format_result(-2.5) == "-" + format_result(2.5)


def test_format_result_precision():
    assert format_result(3.25, 2) == "3.25"
    assert format_result(7.0, 0) == "7"


def test_format_result_truncates():
    assert format_result(1.23456) == format_result(1.2345)


def test_format_result_negative_afterpoint():
    with pytest.raises(ValueError):
        format_result(1.0, -1)