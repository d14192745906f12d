"""
Character classes — ASCII classification tables.

Every byte belongs to exactly one class. The tables mirror the C locale's
isalpha / isspace / ispunct sets; anything outside them is OTHER and is
never altered.
"""

import re

from camelcaser.ir.enums import CharClass

LETTERS = frozenset(range(ord("A"), ord("Z") + 1)) | frozenset(range(ord("a"), ord("z") + 1))
WHITESPACE = frozenset(b" \t\n\v\f\r")
PUNCTUATION = (
    frozenset(range(0x21, 0x30))
    | frozenset(range(0x3A, 0x41))
    | frozenset(range(0x5B, 0x61))
    | frozenset(range(0x7B, 0x7F))
)

# byte value -> class, built once
_TABLE: tuple[CharClass, ...] = tuple(
    CharClass.LETTER if b in LETTERS
    else CharClass.WHITESPACE if b in WHITESPACE
    else CharClass.PUNCTUATION if b in PUNCTUATION
    else CharClass.OTHER
    for b in range(256)
)

_CASE_OFFSET = ord("a") - ord("A")


def classify(byte: int) -> CharClass:
    """Return the class of a single byte value."""
    return _TABLE[byte]


def is_letter(byte: int) -> bool:
    return byte in LETTERS


def is_upper(byte: int) -> bool:
    return ord("A") <= byte <= ord("Z")


def is_lower(byte: int) -> bool:
    return ord("a") <= byte <= ord("z")


def to_upper(byte: int) -> int:
    """Uppercase an ASCII lowercase letter; any other byte is returned as-is."""
    return byte - _CASE_OFFSET if is_lower(byte) else byte


def to_lower(byte: int) -> int:
    """Lowercase an ASCII uppercase letter; any other byte is returned as-is."""
    return byte + _CASE_OFFSET if is_upper(byte) else byte


# =============================================================================
# Patterns
# =============================================================================

WHITESPACE_BYTES = bytes(sorted(WHITESPACE))
PUNCTUATION_BYTES = bytes(sorted(PUNCTUATION))

# A single sentence delimiter
PUNCTUATION_PATTERN = re.compile(b"[" + re.escape(PUNCTUATION_BYTES) + b"]")

# A maximal run of non-whitespace bytes
WORD_PATTERN = re.compile(b"[^" + re.escape(WHITESPACE_BYTES) + b"]+")
