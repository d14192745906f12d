"""
Errors — Exception hierarchy for camelcaser.

    CamelCaserError
    ├── InputError - input is neither bytes-like, str, nor None
    ├── TransformError - a pipeline pass failed, nothing was returned
    └── ReleasedError - a released token sequence was used

Absent input is not an error: ``camel_caser(None)`` returns ``None``.
"""

from typing import Any, Optional


class CamelCaserError(Exception):
    """
    Base exception for all camelcaser errors.

    Attributes:
        code: Stable, string-based error code for programmatic handling.
        details: Structured context for debugging and logging.
    """

    def __init__(
        self,
        message: str,
        code: str = "INTERNAL_ERROR",
        details: Optional[dict[str, Any]] = None,
    ):
        super().__init__(message)
        self.code = code
        self.details = details or {}

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.args[0]!r}, code={self.code!r})"


class InputError(CamelCaserError, TypeError):
    """Input has a type the transformer cannot read."""

    def __init__(
        self,
        message: str,
        code: str = "INVALID_INPUT",
        details: Optional[dict[str, Any]] = None,
    ):
        super().__init__(message, code, details)


class TransformError(CamelCaserError, RuntimeError):
    """
    The transformation failed part way.

    Partially built sentences are discarded before this is raised.
    """

    def __init__(
        self,
        message: str,
        code: str = "TRANSFORM_FAILED",
        details: Optional[dict[str, Any]] = None,
    ):
        super().__init__(message, code, details)


class ReleasedError(CamelCaserError, RuntimeError):
    """A token sequence was used after release or after its tokens were taken."""

    def __init__(
        self,
        message: str = "Token sequence has been released",
        code: str = "SEQUENCE_RELEASED",
        details: Optional[dict[str, Any]] = None,
    ):
        super().__init__(message, code, details)
