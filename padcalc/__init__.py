"""Keypad-driven arithmetic calculator with a simulated character display and bit helpers."""

__version__ = "0.1.0"
__all__ = ["bits", "expression", "lcd", "keypad", "session"]