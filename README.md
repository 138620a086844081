# padcalc

A small arithmetic calculator that behaves like a pocket calculator built
from a 4x6 keypad and a 16x2 character display. You type an expression one
key at a time and press `=`. The result appears on the second line of the
display with four digits after the point. The package also has a few
bit-manipulation helpers.

## Installing

```
pip install .
```

To run the tests as well:

```
pip install ".[test]"
pytest
```

## The calculator

```
padcalc
```

With no arguments the command shows the display and then reads a line of
keys from standard input. It shows the display again after each line.
Characters that are not keypad keys are dropped from each line. The session
ends at end of input, and the command then prints the display one last time.

Key presses can also be given as arguments:

```
padcalc "12+3*4="
```

If an argument holds a character that is not a keypad key, the command
prints an error and exits with status 2.

The keys use the keypad's own labels:

| Key | Meaning |
| --- | --- |
| `0`-`9`, `.` | digits and the decimal point |
| `+ - * / ^` | operators (`^` is power and binds tightest) |
| `=` | evaluate the expression |
| space | AC: clear everything |
| `C` | delete a character at the cursor |
| `<` `>` | move the cursor |
| `M` | abandon the current entry |
| `G` | ignored |

If a new entry starts with an operator, it continues from the last result
shown.

Errors are shown on the display, followed by `PRESS AC`, and the calculator
then waits for the space key:

- `SYNTAX ERROR` for a malformed expression.
- `MATH ERROR` for division by a literal zero, or for a result that cannot be
  computed.
- `OVERFLOW` for a run of five or more digits, or for a result too large to
  show.

## Using it from Python

You can use the evaluator on its own:

```python
from padcalc.expression import evaluate, format_result

value = evaluate("2+3*4")      # 14.0
format_result(value, 4)        # "14.0000"
```

`evaluate` checks the expression with `validate` first. It raises
`ExpressionSyntaxError`, `MathError` or `NumberOverflowError`, all subclasses
of `CalculatorError`.

The lower-level steps are also available:

- `infix_to_postfix` turns an expression into a list of floats and operator
  characters.
- `evaluate_postfix` computes the value of such a list.
- `apply_operator` applies a single operator.

`format_result` truncates the value to single precision and leaves out a zero
integer part, so `0.5` is shown as `.5000`.

The display and keypad are plain objects as well:

- `padcalc.lcd.Lcd` simulates the display. It takes commands with
  `send_command` and characters with `send_data` or `send_string`. `line`
  returns the 16 visible characters of row 1 or 2, and `transfers` records
  every byte sent.
- `padcalc.keypad.Keypad` takes key presses from `press`, or from an iterable
  of strings passed to its constructor. `get_pressed` returns the next queued
  key or `None`. `wait_key` raises `EOFError` once no more keys can come.
  `padcalc.keypad.key_at` gives the key at a matrix position.
- `padcalc.session.CalculatorSession` ties the two together.
  - `run_once` handles one entry. It returns `True` after a result or the `M`
    key. It returns `False` for an empty entry or after an error.
  - `run` keeps going until the keys run out.

## Bit helpers

```
padcalc-bits [NUMBER]
```

This command prints:

- bit 2 of 5;
- the sum of the numbers 1 to 10;
- how many bits are set in NUMBER, taken as a 32-bit two's complement value;
- the byte 13 with its bits reversed.

If NUMBER is not given, the command asks for it on standard input.

The same helpers are in `padcalc.bits`: `get_bit`, `set_bit`, `clear_bit`,
`toggle_bit`, `count_ones` and `reverse_byte`.

## What it does not do

The display and keypad are simulations in memory. The package does not drive
a real LCD or keypad, and it has no graphical screen. Its only interface is
the text rendering of the two display lines in the terminal.