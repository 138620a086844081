"""A simulated 16x2 character LCD driven by controller commands and data bytes."""

from __future__ import annotations

FOUR_BITS = 0x28
EIGHT_BITS = 0x38
DISPLAY_ON_CURSOR_OFF = 0x0C
DISPLAY_ON_CURSOR_ON = 0x0E
DISPLAY_OFF_CURSOR_OFF = 0x08
CLEAR = 0x01
ENTRY_MODE = 0x06
HOME = 0x02
CGRAM = 0x40
SET_CURSOR = 0x80
FUNCTION_RESET = 0x30
SHIFT_RIGHT = 0x1C
SHIFT_LEFT = 0x18

ROWS = 2
COLUMNS = 16
_LINE_LENGTH = 40
_ROW2_OFFSET = 0x40
_CGRAM_SIZE = 64
_SPACE = 0x20


def _byte(value: int, what: str) -> int:
    if not isinstance(value, int) or not 0 <= value <= 0xFF:
        raise ValueError(f"{what} must be a byte, got {value!r}")
    return value


def _glyph(code: int) -> str:
    return chr(code) if 0x20 <= code < 0x7F else " "


class Lcd:
    """Character display with two 40-byte lines of which 16 columns are visible.

    Every byte sent is recorded in ``transfers`` as ``("command", byte)`` or
    ``("data", byte)``.  Construction runs the 4-bit initialisation sequence.
    """

    def __init__(self) -> None:
        self._ddram = [bytearray([_SPACE] * _LINE_LENGTH) for _ in range(ROWS)]
        self._cgram = bytearray(_CGRAM_SIZE)
        self._row = 0
        self._col = 0
        self._cgram_address = 0
        self._writing_cgram = False
        self._shift = 0
        self._increment = True
        self._shift_on_write = False
        self.display_on = False
        self.cursor_on = False
        self.blink = False
        self.eight_bit = True
        self.two_lines = False
        self.transfers: list[tuple[str, int]] = []

        for command in (HOME, FOUR_BITS, DISPLAY_ON_CURSOR_OFF):
            self.send_command(command)
        self.clear()
        self.send_command(ENTRY_MODE)

    @property
    def cursor(self) -> tuple[int, int]:
        """The cursor as a 1-based (row, column) DDRAM position."""
        return self._row + 1, self._col + 1

    @property
    def cgram(self) -> bytes:
        """Contents of the character-generator RAM."""
        return bytes(self._cgram)

    def send_command(self, command: int) -> None:
        """Send one instruction byte to the controller."""
        command = _byte(command, "command")
        self.transfers.append(("command", command))
        self._execute(command)

    def send_data(self, data: int | str) -> None:
        """Write one character (a byte or a one-character string) at the address counter."""
        if isinstance(data, str):
            if len(data) != 1:
                raise ValueError(f"expected a single character, got {data!r}")
            data = ord(data)
        code = _byte(data, "data")
        self.transfers.append(("data", code))
        if self._writing_cgram:
            self._cgram[self._cgram_address] = code
            self._cgram_address = (self._cgram_address + 1) % _CGRAM_SIZE
            return
        self._ddram[self._row][self._col] = code
        self._move(1 if self._increment else -1)
        if self._shift_on_write:
            self._shift = (self._shift + (1 if self._increment else -1)) % _LINE_LENGTH

    def send_string(self, text: str) -> None:
        """Write each character of ``text`` up to the first NUL."""
        for ch in text:
            if ch == "\0":
                break
            self.send_data(ch)

    def set_position(self, row: int, col: int) -> None:
        """Move the cursor to a 1-based position; invalid positions go to the first cell."""
        if not (1 <= row <= ROWS and 1 <= col <= COLUMNS):
            address = SET_CURSOR
        elif row == 1:
            address = SET_CURSOR + col - 1
        else:
            address = SET_CURSOR + _ROW2_OFFSET + col - 1
        self.send_command(address)

    def clear(self) -> None:
        """Blank the display and return the cursor home."""
        self.send_command(CLEAR)

    def line(self, row: int) -> str:
        """Return the 16 visible characters of display row 1 or 2."""
        if row not in (1, 2):
            raise ValueError(f"row must be 1 or 2, got {row!r}")
        data = self._ddram[row - 1]
        return "".join(
            _glyph(data[(self._shift + i) % _LINE_LENGTH]) for i in range(COLUMNS)
        )

    def _move(self, step: int) -> None:
        self._col += step
        if self._col >= _LINE_LENGTH:
            self._col = 0
            self._row ^= 1
        elif self._col < 0:
            self._col = _LINE_LENGTH - 1
            self._row ^= 1

    def _execute(self, command: int) -> None:
        if command & 0x80:
            address = command & 0x7F
            self._writing_cgram = False
            self._row = 1 if address >= _ROW2_OFFSET else 0
            self._col = (address & 0x3F) % _LINE_LENGTH
        elif command & 0x40:
            self._writing_cgram = True
            self._cgram_address = command & 0x3F
        elif command & 0x20:
            self.eight_bit = bool(command & 0x10)
            self.two_lines = bool(command & 0x08)
        elif command & 0x10:
            right = bool(command & 0x04)
            if command & 0x08:
                self._shift = (self._shift + (-1 if right else 1)) % _LINE_LENGTH
            else:
                self._move(1 if right else -1)
        elif command & 0x08:
            self.display_on = bool(command & 0x04)
            self.cursor_on = bool(command & 0x02)
            self.blink = bool(command & 0x01)
        elif command & 0x04:
            self._increment = bool(command & 0x02)
            self._shift_on_write = bool(command & 0x01)
        elif command & 0x02:
            self._row = self._col = 0
            self._shift = 0
            self._writing_cgram = False
        elif command & 0x01:
            for line in self._ddram:
                line[:] = bytes([_SPACE] * _LINE_LENGTH)
            self._row = self._col = 0
            self._shift = 0
            self._increment = True
            self._writing_cgram = False