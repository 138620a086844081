"""Small bit-manipulation helpers and a demonstration command."""

from __future__ import annotations

import sys

_WORD_MASK = 0xFFFFFFFF
_BYTE_MASK = 0xFF
_DEMO_VALUE = 5
_DEMO_BIT = 2
_DEMO_ARRAY = tuple(range(1, 11))
_DEMO_BYTE = 13


def get_bit(value: int, bit: int) -> int:
    """Return bit number ``bit`` of ``value`` (0 or 1)."""
    return (value >> bit) & 1


def set_bit(value: int, bit: int) -> int:
    """Return ``value`` with bit number ``bit`` set."""
    return value | (1 << bit)


def clear_bit(value: int, bit: int) -> int:
    """Return ``value`` with bit number ``bit`` cleared."""
    return value & ~(1 << bit)


def toggle_bit(value: int, bit: int) -> int:
    """Return ``value`` with bit number ``bit`` flipped."""
    return value ^ (1 << bit)


def count_ones(num: int) -> int:
    """Count the set bits in the 32-bit two's complement form of ``num``."""
    return bin(num & _WORD_MASK).count("1")


def reverse_byte(num: int) -> int:
    """Reverse the order of the low eight bits of ``num``."""
    return int(format(num & _BYTE_MASK, "08b")[::-1], 2)


def main(argv: list[str] | None = None) -> int:
    """Print bit facts; the number to inspect comes from ``argv`` or stdin."""
    args = sys.argv[1:] if argv is None else list(argv)

    print(f"bit value is {get_bit(_DEMO_VALUE, _DEMO_BIT)}")
    print(f"sum of array equal {sum(_DEMO_ARRAY)}")

    if args:
        raw = args[0]
    else:
        print("please enter number")
        try:
            raw = input()
        except EOFError:
            print("no number given", file=sys.stderr)
            return 1

    try:
        num = int(raw.strip())
    except ValueError:
        print(f"not a number: {raw!r}", file=sys.stderr)
        return 1

    print(f"number of ones in number {num} is {count_ones(num)}")

    reversed_value = reverse_byte(_DEMO_BYTE)
    bits = "".join(str(get_bit(reversed_value, i)) for i in range(7, -1, -1))
    print(f"reversed binary is {bits}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())