"""
IR Enums — Classes, case labels and status codes.

No stringly-typed constants scattered across passes.
"""

from enum import Enum


# ============================================================================
# Bytes and words
# ============================================================================

class CharClass(str, Enum):
    """Context-free classification of a single input byte."""

    LETTER = "letter"            # A-Z, a-z
    WHITESPACE = "whitespace"    # space, \t \n \v \f \r
    PUNCTUATION = "punctuation"  # ASCII ispunct set, sentence delimiter
    OTHER = "other"              # digits, control bytes, bytes >= 0x80


class WordCase(str, Enum):
    """
    Case of a word, judged on its letter bytes only.

    - UPPER: every letter is uppercase
    - LOWER: every letter is lowercase
    - MIXED: both cases present
    - NONE: no letters at all (trivially both UPPER and LOWER)
    """

    UPPER = "upper"
    LOWER = "lower"
    MIXED = "mixed"
    NONE = "none"

    @property
    def is_upper(self) -> bool:
        return self in (WordCase.UPPER, WordCase.NONE)

    @property
    def is_lower(self) -> bool:
        return self in (WordCase.LOWER, WordCase.NONE)


class InputKind(str, Enum):
    """What the caller handed in; tokens are returned in the same kind."""

    BYTES = "bytes"
    TEXT = "text"


# ============================================================================
# Diagnostics & Status
# ============================================================================

class DiagnosticLevel(str, Enum):
    """Diagnostic severity levels."""

    ERROR = "error"
    WARNING = "warning"
    INFO = "info"


class TransformStatus(str, Enum):
    """Overall transformation status."""

    SUCCESS = "success"
    PARTIAL = "partial"
    ERROR = "error"
