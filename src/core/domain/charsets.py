"""Built-in character classes.

The four class tables and the similar-character set are process-wide
constants. Order matters: the charset builder concatenates classes in the
order of `CANONICAL_ORDER`.
"""

from __future__ import annotations

from enum import Enum
from types import MappingProxyType


LOWER_CHARS = "abcdefghijklmnopqrstuvwxyz"
UPPER_CHARS = "ABCDEFGHIJKLMNOPQRSTUVWXYZ"
DIGIT_CHARS = "0123456789"
SYMBOL_CHARS = "!@#$%^&*()-_=+[]{};:,.<>?/|"

# 0/O, 1/l/I, 5/S
SIMILAR_CHARS = "0O1lI5S"


class CharacterClass(str, Enum):
    """Built-in character classes selectable from the CLI."""

    LOWER = "lower"
    UPPER = "upper"
    DIGITS = "digits"
    SYMBOLS = "symbols"

    @property
    def chars(self) -> str:
        """Literal, ordered characters of this class."""

        return CLASS_CHARS[self]


CLASS_CHARS = MappingProxyType(
    {
        CharacterClass.LOWER: LOWER_CHARS,
        CharacterClass.UPPER: UPPER_CHARS,
        CharacterClass.DIGITS: DIGIT_CHARS,
        CharacterClass.SYMBOLS: SYMBOL_CHARS,
    }
)

CANONICAL_ORDER: tuple[CharacterClass, ...] = (
    CharacterClass.LOWER,
    CharacterClass.UPPER,
    CharacterClass.DIGITS,
    CharacterClass.SYMBOLS,
)

ALL_CHARS = "".join(CLASS_CHARS[c] for c in CANONICAL_ORDER)
