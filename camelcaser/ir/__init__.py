"""
IR — Intermediate Representation

Sentences, words and their camel-cased tokens, plus trace and diagnostics.
"""

from camelcaser.ir.enums import (
    CharClass,
    DiagnosticLevel,
    InputKind,
    TransformStatus,
    WordCase,
)
from camelcaser.ir.schema import (
    Diagnostic,
    Sentence,
    TraceEntry,
    TransformResult,
    Word,
)

__all__ = [
    # Enums
    "CharClass",
    "WordCase",
    "InputKind",
    "DiagnosticLevel",
    "TransformStatus",
    # Models
    "Sentence",
    "Word",
    "TraceEntry",
    "Diagnostic",
    "TransformResult",
]
