"""
Channel-Aware Structured Logging for camelcaser.

Provides semantic logging channels with level-based filtering:
- PIPELINE: pass start/end, timing, packaging
- SEGMENT: sentence and word segmentation
- CASE: camel-casing decisions
- SYSTEM: errors, warnings, status

Log Levels:
- SILENT (0): No logging
- INFO (1): Key milestones only
- VERBOSE (2): Detailed operations
- DEBUG (3): Everything

Configuration via environment:
- CAMELCASER_LOG_LEVEL: Global level (silent/info/verbose/debug)
- CAMELCASER_LOG_FORMAT: Output format (console/json)
- CAMELCASER_LOG_CHANNELS: Comma-separated channel filter (all if not set)
"""

import logging
import os
import sys
from contextvars import ContextVar
from datetime import datetime
from enum import Enum, IntEnum
from typing import Any, Optional, Union

import structlog


# =============================================================================
# Enums
# =============================================================================

class LogLevel(IntEnum):
    """Log verbosity levels."""
    SILENT = 0
    INFO = 1
    VERBOSE = 2
    DEBUG = 3

    @classmethod
    def from_string(cls, s: str) -> "LogLevel":
        """Parse log level from string."""
        mapping = {
            "silent": cls.SILENT,
            "info": cls.INFO,
            "verbose": cls.VERBOSE,
            "debug": cls.DEBUG,
            # stdlib compatibility
            "warning": cls.INFO,
            "error": cls.INFO,
        }
        return mapping.get(s.lower(), cls.INFO)


class LogChannel(str, Enum):
    """Semantic log channels."""
    PIPELINE = "PIPELINE"   # Pass orchestration
    SEGMENT = "SEGMENT"     # Sentence/word splitting
    CASE = "CASE"           # Re-casing
    SYSTEM = "SYSTEM"       # Errors, warnings, status

    @classmethod
    def all(cls) -> list["LogChannel"]:
        """Return all channels."""
        return list(cls)

    @classmethod
    def from_string(cls, s: str) -> Optional["LogChannel"]:
        """Parse channel from string."""
        try:
            return cls(s.upper())
        except ValueError:
            return None


# =============================================================================
# Configuration
# =============================================================================

# Request-scoped fields merged into every event
_request_context: ContextVar[dict] = ContextVar("camelcaser_log_context", default={})

_config = {
    "level": LogLevel.INFO,
    "format": "console",
    "channels": set(LogChannel.all()),
    "configured": False,
}


def _parse_channels(raw: list[Union[LogChannel, str]]) -> list[LogChannel]:
    parsed: list[LogChannel] = []
    for ch in raw:
        if isinstance(ch, LogChannel):
            parsed.append(ch)
            continue
        channel = LogChannel.from_string(ch.strip())
        if channel:
            parsed.append(channel)
    return parsed


def configure_logging(
    level: Union[LogLevel, str, None] = None,
    format: Optional[str] = None,
    channels: Optional[list[Union[LogChannel, str]]] = None,
    force: bool = False,
) -> None:
    """
    Configure the logging system.

    Args:
        level: Log level (LogLevel enum or string)
        format: Output format ("console" or "json")
        channels: List of channels to enable (all if None)
        force: Force reconfiguration if already configured
    """
    if _config["configured"] and not force:
        return

    if level is None:
        level = LogLevel.from_string(os.environ.get("CAMELCASER_LOG_LEVEL", "info"))
    elif isinstance(level, str):
        level = LogLevel.from_string(level)

    if format is None:
        format = os.environ.get("CAMELCASER_LOG_FORMAT", "console")

    if channels is None:
        channels_str = os.environ.get("CAMELCASER_LOG_CHANNELS", "")
        parsed = _parse_channels(channels_str.split(",")) if channels_str else []
        channels = parsed or LogChannel.all()
    else:
        channels = _parse_channels(channels)

    _config["level"] = level
    _config["format"] = format
    _config["channels"] = set(channels)

    stdlib_level = {
        LogLevel.SILENT: logging.CRITICAL + 10,  # Above critical = nothing
        LogLevel.INFO: logging.INFO,
        LogLevel.VERBOSE: logging.DEBUG,
        LogLevel.DEBUG: logging.DEBUG,
    }.get(level, logging.INFO)

    # stderr keeps stdout free for CLI output
    logging.basicConfig(
        format="%(message)s",
        stream=sys.stderr,
        level=stdlib_level,
        force=True,
    )

    shared_processors = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
    ]

    if format == "json":
        processors = shared_processors + [
            structlog.processors.format_exc_info,
            structlog.processors.JSONRenderer(),
        ]
    else:
        processors = shared_processors + [
            structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty()),
        ]

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    _config["configured"] = True


_ENV_VARS = ("CAMELCASER_LOG_LEVEL", "CAMELCASER_LOG_FORMAT", "CAMELCASER_LOG_CHANNELS")


def _logging_active() -> bool:
    """
    Whether log events are emitted at all.

    Nothing is logged until configure_logging() runs, either explicitly (the
    CLI does) or on first use when a CAMELCASER_LOG_* variable is set. A host
    application importing the library keeps its own logging setup.
    """
    if not _config["configured"]:
        if not any(os.environ.get(name) for name in _ENV_VARS):
            return False
        configure_logging()
    return _config["level"] != LogLevel.SILENT


# =============================================================================
# Channel Logger
# =============================================================================

class ChannelLogger:
    """
    A logger bound to a specific channel.

    - info(): Key milestones (level >= INFO)
    - verbose(): Detailed operations (level >= VERBOSE)
    - debug(): Everything (level >= DEBUG)
    - error(), warning(): Always logged once configured, unless SILENT
    """

    def __init__(
        self,
        channel: LogChannel,
        name: Optional[str] = None,
        pass_name: Optional[str] = None,
    ):
        self.channel = channel
        self.name = name or f"camelcaser.{channel.value.lower()}"
        self.pass_name = pass_name
        self._logger = structlog.get_logger(self.name)

    def _should_log(self, msg_level: LogLevel) -> bool:
        if not _logging_active():
            return False
        if self.channel not in _config["channels"]:
            return False
        return _config["level"] >= msg_level

    def _make_event(self, **kwargs: Any) -> dict:
        data = {
            "channel": self.channel.value,
            **kwargs,
        }
        if self.pass_name:
            data["pass"] = self.pass_name

        ctx = _request_context.get()
        if ctx:
            data.update(ctx)

        return data

    def info(self, event: str, **kwargs: Any) -> None:
        """Log at INFO level (key milestones)."""
        if not self._should_log(LogLevel.INFO):
            return
        self._logger.info(event, **self._make_event(**kwargs))

    def verbose(self, event: str, **kwargs: Any) -> None:
        """Log at VERBOSE level (detailed operations)."""
        if not self._should_log(LogLevel.VERBOSE):
            return
        self._logger.debug(event, **self._make_event(verbosity="verbose", **kwargs))

    def debug(self, event: str, **kwargs: Any) -> None:
        """Log at DEBUG level (everything)."""
        if not self._should_log(LogLevel.DEBUG):
            return
        self._logger.debug(event, **self._make_event(verbosity="debug", **kwargs))

    def error(self, event: str, **kwargs: Any) -> None:
        if not _logging_active():
            return
        self._logger.error(event, **self._make_event(**kwargs))

    def warning(self, event: str, **kwargs: Any) -> None:
        if not _logging_active():
            return
        self._logger.warning(event, **self._make_event(**kwargs))


# =============================================================================
# Logger Factory Functions
# =============================================================================

def get_logger(channel: Union[LogChannel, str] = LogChannel.SYSTEM) -> ChannelLogger:
    """Get a channel-specific logger."""
    if isinstance(channel, str):
        channel = LogChannel.from_string(channel) or LogChannel.SYSTEM

    return ChannelLogger(channel=channel)


# Pass prefix -> channel
_PASS_CHANNELS = {
    "p00": LogChannel.PIPELINE,
    "p10": LogChannel.SEGMENT,
    "p20": LogChannel.SEGMENT,
    "p30": LogChannel.CASE,
    "p80": LogChannel.PIPELINE,
}


def get_pass_logger(pass_name: str, channel: Optional[LogChannel] = None) -> ChannelLogger:
    """
    Get a logger for a specific pipeline pass.

    Args:
        pass_name: The pass name (e.g., "p10_segment")
        channel: The log channel (auto-detected from the pass prefix if None)
    """
    if channel is None:
        channel = _PASS_CHANNELS.get(pass_name[:3], LogChannel.PIPELINE)

    return ChannelLogger(
        channel=channel,
        name=f"camelcaser.{pass_name}",
        pass_name=pass_name,
    )


# =============================================================================
# Request Context Management
# =============================================================================

def bind_request_context(**kwargs: Any) -> None:
    """Bind context that will be included in all log messages."""
    ctx = _request_context.get().copy()
    ctx.update(kwargs)
    _request_context.set(ctx)


def clear_request_context() -> None:
    """Clear the request context."""
    _request_context.set({})


# =============================================================================
# TransformLogger
# =============================================================================

class TransformLogger:
    """
    Request-scoped logger used by the engine.

    Binds the request ID for every message logged during a transform.
    """

    def __init__(self, request_id: str):
        self.request_id = request_id
        self._pipeline_log = get_logger(LogChannel.PIPELINE)
        self._start_time = datetime.now()
        self._pass_times: dict[str, float] = {}

        bind_request_context(request_id=request_id)

    def pass_start(self, pass_name: str) -> None:
        self._pass_times[pass_name] = datetime.now().timestamp()
        self._pipeline_log.verbose("pass_started", pass_name=pass_name)

    def pass_end(self, pass_name: str, **metrics: Any) -> None:
        """Log the end of a pipeline pass with timing."""
        start = self._pass_times.get(pass_name, datetime.now().timestamp())
        duration_ms = (datetime.now().timestamp() - start) * 1000

        self._pipeline_log.verbose(
            "pass_completed",
            pass_name=pass_name,
            duration_ms=round(duration_ms, 2),
            **metrics,
        )

    def pass_error(self, pass_name: str, error: Exception) -> None:
        self._pipeline_log.error(
            "pass_failed",
            pass_name=pass_name,
            error=str(error),
            error_type=type(error).__name__,
        )

    def transform_complete(self, status: str, **metrics: Any) -> None:
        """Log transformation completion with summary, then drop the request context."""
        total_ms = (datetime.now() - self._start_time).total_seconds() * 1000

        self._pipeline_log.verbose(
            "transform_complete",
            status=status,
            total_duration_ms=round(total_ms, 2),
            **metrics,
        )

        clear_request_context()


def get_current_config() -> dict:
    """Get the current logging configuration (for testing/debugging)."""
    return {
        "level": _config["level"].name,
        "format": _config["format"],
        "channels": sorted(ch.value for ch in _config["channels"]),
    }
