"""
IR Schema — Pydantic models for the intermediate representation.

Byte fields are base64 encoded in JSON so that arbitrary input bytes
survive serialization unchanged.
"""

from __future__ import annotations

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from camelcaser.ir.enums import (
    DiagnosticLevel,
    InputKind,
    TransformStatus,
    WordCase,
)

IR_VERSION = "0.1.0"


class _BytesModel(BaseModel):
    model_config = ConfigDict(ser_json_bytes="base64", val_json_bytes="base64")


class Word(_BytesModel):
    """A whitespace-delimited run of bytes within a sentence."""

    id: str = Field(..., description="Unique word identifier")
    sentence_id: str = Field(..., description="Parent sentence")
    index: int = Field(..., ge=0, description="Position within the sentence")
    start_byte: int = Field(..., description="Offset in the prepared input")
    end_byte: int = Field(..., description="Offset end")
    raw: bytes = Field(..., description="Original bytes of the word")
    case: WordCase = Field(..., description="Case class judged on letter bytes")
    cased: Optional[bytes] = Field(
        default=None,
        description="Word after camel-casing (set by p30_camel_case)",
    )


class Sentence(_BytesModel):
    """A punctuation-delimited run of input that contains at least one word."""

    id: str = Field(..., description="Unique sentence identifier")
    start_byte: int = Field(..., description="Offset in the prepared input")
    end_byte: int = Field(..., description="Offset end (delimiter excluded)")
    raw: bytes = Field(..., description="Original bytes, whitespace included")
    terminated: bool = Field(
        default=True,
        description="False when the sentence was closed by end of input",
    )
    words: list[Word] = Field(default_factory=list)
    token: Optional[bytes] = Field(
        default=None,
        description="camelCased output token (set by p30_camel_case)",
    )


class TraceEntry(BaseModel):
    """A single transformation trace entry."""

    id: str
    timestamp: datetime
    pass_name: str
    action: str
    before: Optional[str] = None
    after: Optional[str] = None
    affected_ids: list[str] = Field(default_factory=list)


class Diagnostic(BaseModel):
    """A diagnostic message."""

    id: str
    level: DiagnosticLevel
    code: str
    message: str
    source: str
    affected_ids: list[str] = Field(default_factory=list)


class TransformResult(_BytesModel):
    """The complete output of a camel-casing transformation."""

    version: str = Field(default=IR_VERSION, description="IR schema version")
    request_id: str = Field(..., description="Unique transformation ID")
    timestamp: datetime = Field(..., description="When transformation occurred")
    processing_duration_ms: float = Field(default=0.0)

    input_kind: InputKind = Field(default=InputKind.BYTES)
    input_bytes: int = Field(default=0, description="Length of the prepared input")
    sentences: list[Sentence] = Field(default_factory=list)

    trace: list[TraceEntry] = Field(default_factory=list)
    diagnostics: list[Diagnostic] = Field(default_factory=list)
    status: TransformStatus = Field(default=TransformStatus.SUCCESS)

    @property
    def tokens(self) -> list[bytes]:
        """Output tokens in sentence order."""
        return [s.token for s in self.sentences if s.token is not None]
