"""Parsing, checking and evaluating calculator expressions."""

from __future__ import annotations

import math
import operator
import re
import struct
from typing import Callable, Iterable, Union

Token = Union[float, str]

OPERATORS = frozenset("+-*/^")
_HIGH_PRECEDENCE = frozenset("*/")
_NON_ADDITIVE = frozenset("^*/")

_LEXEME = re.compile(r"[0-9.]+|.", re.DOTALL)
_NUMBER_PREFIX = re.compile(r"[0-9]*(?:\.[0-9]*)?")
_LONG_NUMBER = re.compile(r"[0-9]{5}")

_OPERATIONS: dict[str, Callable[[float, float], float]] = {
    "+": operator.add,
    "-": operator.sub,
    "*": operator.mul,
    "/": operator.truediv,
    "^": math.pow,
}


class CalculatorError(Exception):
    """Base class for errors the calculator reports to the user."""

    default_message = "ERROR"

    def __init__(self, message: str | None = None) -> None:
        super().__init__(message or self.default_message)


class ExpressionSyntaxError(CalculatorError):
    """The expression is malformed."""

    default_message = "SYNTAX ERROR"


class MathError(CalculatorError):
    """The expression cannot be computed (division by zero and the like)."""

    default_message = "MATH ERROR"


class NumberOverflowError(CalculatorError):
    """A number in the expression or its result is too large."""

    default_message = "OVERFLOW"


def is_digit(ch: str) -> bool:
    """True for a single ASCII decimal digit."""
    return len(ch) == 1 and "0" <= ch <= "9"


def is_operator(ch: str) -> bool:
    """True for one of the binary operators ``+ - * / ^``."""
    return len(ch) == 1 and ch in OPERATORS


def precedence_greater(first: str, second: str) -> bool:
    """True when operator ``first`` on the stack must be emitted before ``second``."""
    if first == "^":
        return True
    if first in _HIGH_PRECEDENCE:
        return second != "^"
    return second not in _NON_ADDITIVE


def _parse_number(run: str) -> float:
    text = _NUMBER_PREFIX.match(run).group()
    if not any(is_digit(ch) for ch in text):
        return 0.0
    return float(text)


def infix_to_postfix(expression: str) -> list[Token]:
    """Convert an infix expression into postfix order.

    Numbers become floats and operators stay as one-character strings.
    A leading ``-`` negates the first number; a ``+`` or ``-`` directly after
    another operator acts as a sign on the following number.
    """
    output: list[Token] = []
    pending: list[str] = []
    negate_first = expression.startswith("-")
    negate_next = False
    start = 1 if negate_first else 0

    for match in _LEXEME.finditer(expression, start):
        piece = match.group()
        if is_digit(piece[0]) or piece[0] == ".":
            value = _parse_number(piece)
            if negate_first:
                value = -value
                negate_first = False
            if negate_next:
                value = -value
                negate_next = False
            output.append(value)
        elif is_operator(piece):
            position = match.start()
            previous = expression[position - 1] if position else ""
            if is_operator(previous):
                if piece == "+":
                    continue
                if piece == "-":
                    negate_next = True
                    continue
            while pending and precedence_greater(pending[-1], piece):
                output.append(pending.pop())
            pending.append(piece)

    output.extend(reversed(pending))
    return output


def apply_operator(op: str, left: float, right: float) -> float:
    """Apply binary operator ``op`` to ``left`` and ``right``."""
    try:
        operation = _OPERATIONS[op]
    except KeyError:
        raise ValueError(f"unknown operator: {op!r}") from None
    try:
        result = operation(left, right)
    except (ZeroDivisionError, ValueError, OverflowError) as exc:
        raise MathError() from exc
    if not math.isfinite(result):
        raise MathError()
    return result


def evaluate_postfix(tokens: Iterable[Token]) -> float:
    """Evaluate a postfix token sequence and return its value."""
    stack: list[float] = []
    for item in tokens:
        if isinstance(item, str):
            if len(stack) < 2:
                raise ExpressionSyntaxError()
            right = stack.pop()
            left = stack.pop()
            stack.append(apply_operator(item, left, right))
        else:
            stack.append(float(item))
    if not stack:
        raise ExpressionSyntaxError()
    return stack[-1]


def _digits_without_operator(segment: str) -> bool:
    return not any(is_operator(ch) for ch in segment) and any(
        is_digit(ch) for ch in segment
    )


def validate(expression: str) -> None:
    """Check an expression the way the keypad calculator does before evaluating.

    Raises ExpressionSyntaxError, MathError or NumberOverflowError on the
    first problem found; an empty expression is a syntax error.
    """
    if not expression:
        raise ExpressionSyntaxError()
    if len(expression) == 1 and is_operator(expression):
        raise ExpressionSyntaxError()

    last = expression[-1]
    for index, (ch, nxt) in enumerate(zip(expression, expression[1:])):
        if ch in _NON_ADDITIVE and nxt in _NON_ADDITIVE:
            raise ExpressionSyntaxError()
        elif ch == ".":
            second_dot = expression.find(".", index + 1)
            if second_dot != -1 and _digits_without_operator(
                expression[index + 1 : second_dot]
            ):
                raise ExpressionSyntaxError()
        elif is_operator(last):
            raise ExpressionSyntaxError()
        elif ch == "/" and nxt == "0":
            raise MathError()

    if _LONG_NUMBER.search(expression):
        raise NumberOverflowError()


def evaluate(expression: str) -> float:
    """Validate and evaluate an infix expression."""
    validate(expression)
    return evaluate_postfix(infix_to_postfix(expression))


def _to_float32(value: float) -> float:
    try:
        return struct.unpack("f", struct.pack("f", value))[0]
    except OverflowError as exc:
        raise NumberOverflowError() from exc


def format_result(value: float, afterpoint: int = 4) -> str:
    """Render a result as the calculator display shows it.

    The value is handled in single precision, the fraction is truncated to
    ``afterpoint`` digits, and a zero integer part is left out (``.5000``).
    """
    if afterpoint < 0:
        raise ValueError("afterpoint must not be negative")
    if not math.isfinite(value):
        raise NumberOverflowError()

    sign = "-" if value < 0 else ""
    magnitude = _to_float32(abs(value))
    whole = int(magnitude)
    fraction = _to_float32(magnitude - _to_float32(float(whole)))

    text = str(whole) if whole else ""
    if afterpoint:
        scaled = int(_to_float32(fraction * 10.0**afterpoint))
        digits = str(scaled) if scaled else ""
        text += "." + digits.rjust(afterpoint, "0")
    return sign + text