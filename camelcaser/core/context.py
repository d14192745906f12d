"""
TransformContext — Mutable state passed between pipeline passes.

Each pass reads prior artifacts and mutates only its allowed fields.
"""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Optional, Union
from uuid import uuid4

from camelcaser.ir.enums import InputKind, TransformStatus
from camelcaser.ir.schema import (
    Diagnostic,
    Sentence,
    TraceEntry,
    TransformResult,
)

RawInput = Union[bytes, bytearray, memoryview, str]


@dataclass
class TransformRequest:
    """Input to the transformation pipeline."""

    data: RawInput
    request_id: Optional[str] = None
    metadata: dict[str, Any] = field(default_factory=dict)

    def __post_init__(self) -> None:
        if self.request_id is None:
            self.request_id = str(uuid4())


@dataclass
class TransformContext:
    """
    Mutable context passed through pipeline passes.

    Each pass may read all fields but should only mutate
    the fields it is responsible for.
    """

    # Input
    request: TransformRequest
    raw_input: RawInput
    input_kind: InputKind = InputKind.BYTES
    data: bytes = b""  # set by p00_prepare

    # Populated by p10_segment, extended by p20/p30
    sentences: list[Sentence] = field(default_factory=list)

    # Trace and diagnostics
    trace: list[TraceEntry] = field(default_factory=list)
    diagnostics: list[Diagnostic] = field(default_factory=list)

    status: TransformStatus = TransformStatus.SUCCESS

    # Internal
    start_time: datetime = field(default_factory=datetime.now)

    @classmethod
    def from_request(cls, request: TransformRequest) -> "TransformContext":
        """Create a context from a transform request."""
        return cls(
            request=request,
            raw_input=request.data,
        )

    @property
    def words(self) -> list:
        """All words across sentences, in input order."""
        return [w for s in self.sentences for w in s.words]

    @property
    def tokens(self) -> list[bytes]:
        """Tokens built so far, in sentence order."""
        return [s.token for s in self.sentences if s.token is not None]

    def discard_partial(self) -> None:
        """Drop everything built from the input after a failed pass."""
        self.sentences.clear()

    def add_trace(self, pass_name: str, action: str, **kwargs: Any) -> None:
        """Add a trace entry."""
        self.trace.append(
            TraceEntry(
                id=str(uuid4()),
                timestamp=datetime.now(),
                pass_name=pass_name,
                action=action,
                before=kwargs.get("before"),
                after=kwargs.get("after"),
                affected_ids=kwargs.get("affected_ids", []),
            )
        )

    def add_diagnostic(
        self,
        level: str,
        code: str,
        message: str,
        source: str,
        affected_ids: Optional[list[str]] = None,
    ) -> None:
        """Add a diagnostic message."""
        from camelcaser.ir.enums import DiagnosticLevel

        self.diagnostics.append(
            Diagnostic(
                id=str(uuid4()),
                level=DiagnosticLevel(level),
                code=code,
                message=message,
                source=source,
                affected_ids=affected_ids or [],
            )
        )

    def to_result(self) -> TransformResult:
        """Convert context to final TransformResult."""
        duration_ms = (datetime.now() - self.start_time).total_seconds() * 1000
        return TransformResult(
            request_id=self.request.request_id or str(uuid4()),
            timestamp=self.start_time,
            processing_duration_ms=duration_ms,
            input_kind=self.input_kind,
            input_bytes=len(self.data),
            sentences=self.sentences,
            trace=self.trace,
            diagnostics=self.diagnostics,
            status=self.status,
        )
