"""
Keyboard layout tables.

Each layout is an ordered tuple of rows; each row lists the keys of one
physical keyboard row from left to right. Two characters are adjacent when
their positions in the same row differ by exactly one.

The tables are process-wide constants wrapped in MappingProxyType so they
cannot be modified at runtime.
"""

from enum import Enum
from types import MappingProxyType
from typing import Mapping

from passcheck.errors import KeyboardLayoutError, SymbolLayoutError


class KeyboardLayout(str, Enum):
    """Supported physical keyboard layouts."""

    QWERTY = "QWERTY"
    AZERTY = "AZERTY"
    QWERTZ = "QWERTZ"
    DVORAK = "DVORAK"
    COLEMAK = "COLEMAK"

    @classmethod
    def parse(cls, value: "str | KeyboardLayout") -> "KeyboardLayout":
        """
        Resolve a layout name case-insensitively.

        Raises:
            KeyboardLayoutError: If the name is not a supported layout
        """
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().upper())
        except ValueError:
            raise KeyboardLayoutError(layout=str(value)) from None


KEYBOARD_ROWS: Mapping[KeyboardLayout, tuple[str, ...]] = MappingProxyType({
    KeyboardLayout.QWERTY: ("qwertyuiop", "asdfghjkl", "zxcvbnm"),
    KeyboardLayout.AZERTY: ("azertyuiop", "qsdfghjklm", "wxcvbn"),
    KeyboardLayout.QWERTZ: ("qwertzuiop", "asdfghjkl", "yxcvbnm"),
    KeyboardLayout.DVORAK: ("pyfgcrl", "aoeuidhtns", "qjkxbmwvz"),
    KeyboardLayout.COLEMAK: ("qwfpgjluy", "arstdhneio", "zxcvbkm"),
})

# Shifted number row. Only measured for QWERTY.
SYMBOL_ROWS: Mapping[KeyboardLayout, tuple[str, ...]] = MappingProxyType({
    KeyboardLayout.QWERTY: ("~!@#$%^&*()_+",),
})


def letter_rows(layout: "str | KeyboardLayout") -> tuple[str, ...]:
    """Return the letter rows for a layout."""
    return KEYBOARD_ROWS[KeyboardLayout.parse(layout)]


def symbol_rows(layout: "str | KeyboardLayout") -> tuple[str, ...]:
    """
    Return the symbol rows for a layout.

    Raises:
        SymbolLayoutError: If the layout has no symbol row defined
    """
    resolved = KeyboardLayout.parse(layout)
    rows = SYMBOL_ROWS.get(resolved)
    if rows is None:
        raise SymbolLayoutError(layout=resolved.value)
    return rows
