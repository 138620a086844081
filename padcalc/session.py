"""The keypad calculator: key handling, editing, evaluation and display."""

from __future__ import annotations

import sys
from typing import Iterator, TextIO

from padcalc.expression import (
    CalculatorError,
    NumberOverflowError,
    evaluate_postfix,
    format_result,
    infix_to_postfix,
    is_operator,
    validate,
)
from padcalc.keypad import KEYS, Keypad
from padcalc.lcd import COLUMNS, DISPLAY_ON_CURSOR_ON, Lcd

_BUFFER_SIZE = 16
_NUL = "\0"
_CLEAR_ALL = " "
_BACKSPACE = "C"
_RIGHT = ">"
_LEFT = "<"
_EQUALS = "="
_MENU = "M"
_CONTROL_KEYS = frozenset({_CLEAR_ALL, _MENU, _RIGHT, _LEFT, _EQUALS, "G", _BACKSPACE})
_AFTERPOINT = 4


class _Buffer:
    """Fixed-size NUL-terminated character buffer edited by the keypad."""

    def __init__(self) -> None:
        self.cells = [_NUL] * _BUFFER_SIZE

    def __getitem__(self, index: int) -> str:
        return self.cells[index] if 0 <= index < _BUFFER_SIZE else _NUL

    def __setitem__(self, index: int, value: str) -> None:
        if 0 <= index < _BUFFER_SIZE:
            self.cells[index] = value

    def reset(self) -> None:
        self.cells = [_NUL] * _BUFFER_SIZE

    def text(self) -> str:
        return "".join(self.cells).split(_NUL, 1)[0]

    def delete_after_first_nul(self) -> None:
        """Join the string after the first NUL onto the string before it."""
        start = self.text()
        tail = "".join(self.cells[len(start) + 1 :]).split(_NUL, 1)[0]
        joined = start + tail
        self.cells[: len(joined)] = list(joined)
        self[len(joined)] = _NUL


class CalculatorSession:
    """One keypad calculator bound to a display and a keypad."""

    def __init__(self, lcd: Lcd | None = None, keypad: Keypad | None = None) -> None:
        self.lcd = lcd if lcd is not None else Lcd()
        self.keypad = keypad if keypad is not None else Keypad()
        self.last_result = ""

    def run_once(self) -> bool:
        """Read one expression up to '=' and show its result.

        Returns True after a result or the menu key, False for an empty
        expression or after an error has been acknowledged with AC.
        """
        lcd = self.lcd
        buffer = _Buffer()
        count = 0
        moved_left = False

        lcd.send_command(DISPLAY_ON_CURSOR_ON)
        lcd.set_position(1, 1)
        while True:
            key = self.keypad.wait_key()
            if key not in _CONTROL_KEYS:
                if count == 0 and is_operator(key):
                    lcd.clear()
                    carried = self.last_result[: _BUFFER_SIZE - 1]
                    buffer.reset()
                    for index, ch in enumerate(carried):
                        buffer[index] = ch
                    count = len(carried)
                    lcd.send_string(self.last_result)
                elif count == 0:
                    lcd.clear()
                    buffer.reset()
                lcd.send_data(key)
                buffer[count] = key
                count += 1
                moved_left = False
                if count > _BUFFER_SIZE - 1:
                    count = 0
            elif key == _CLEAR_ALL:
                lcd.clear()
                count = 0
                buffer.reset()
            elif key == _RIGHT:
                if moved_left and (buffer[count + 1] != _NUL or buffer[count] != _NUL):
                    count += 1
                    lcd.set_position(1, count + 1)
            elif key == _LEFT:
                if count > 0:
                    count -= 1
                    lcd.set_position(1, count + 1)
                moved_left = True
            elif key == _BACKSPACE:
                if count > 0:
                    count -= 1
                    if buffer[count + 1] == _NUL:
                        lcd.set_position(1, count + 1)
                        lcd.send_data(0)
                        buffer[count] = _NUL
                        lcd.set_position(1, count + 1)
                    else:
                        lcd.send_data(0)
                        buffer[count + 1] = _NUL
                        buffer.delete_after_first_nul()
                        lcd.clear()
                        lcd.send_string(buffer.text())
                        lcd.set_position(1, count + 1)
            elif key == _MENU:
                return True
            if key == _EQUALS:
                break

        expression = buffer.text()
        if not expression:
            return False
        try:
            validate(expression)
            value = evaluate_postfix(infix_to_postfix(expression))
            shown = format_result(value, _AFTERPOINT)
        except CalculatorError as exc:
            self._show_error(exc)
            return False

        self.last_result = shown
        lcd.set_position(2, 1)
        lcd.send_string("result= ")
        lcd.set_position(2, 9)
        lcd.send_string(shown)
        return True

    def run(self) -> None:
        """Keep calculating until the keypad has no more keys."""
        while True:
            try:
                self.run_once()
            except EOFError:
                return

    def _show_error(self, error: CalculatorError) -> None:
        message = "    OVERFLOW" if isinstance(error, NumberOverflowError) else str(error)
        self.lcd.clear()
        self.lcd.set_position(1, 1)
        self.lcd.send_string(message)
        self.lcd.set_position(2, 1)
        self.lcd.send_string("PRESS AC")
        while self.keypad.wait_key() != _CLEAR_ALL:
            pass
        self.lcd.clear()


def _render(lcd: Lcd) -> str:
    border = "+" + "-" * COLUMNS + "+"
    return "\n".join([border, f"|{lcd.line(1)}|", f"|{lcd.line(2)}|", border])


def _stdin_chunks(lcd: Lcd, stream: TextIO, out: TextIO) -> Iterator[str]:
    while True:
        out.write(_render(lcd) + "\n")
        out.flush()
        line = stream.readline()
        if not line:
            return
        yield "".join(ch for ch in line.rstrip("\r\n") if ch in KEYS)


def main(argv: list[str] | None = None) -> int:
    """Run the calculator on keys from ``argv`` or, without arguments, from stdin."""
    args = sys.argv[1:] if argv is None else list(argv)
    lcd = Lcd()
    source = iter(args) if args else _stdin_chunks(lcd, sys.stdin, sys.stdout)
    session = CalculatorSession(lcd, Keypad(source))
    try:
        session.run()
    except ValueError as exc:
        print(exc, file=sys.stderr)
        return 2
    print(_render(lcd))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())