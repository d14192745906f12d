"""
Pass 00 — Input Preparation

Turns the caller's input into the byte string every later pass reads:
- str input is encoded as UTF-8 and remembered as TEXT
- bytes-like input is copied as-is
- input ends at the first NUL byte, like a C string
"""

from camelcaser.core.context import TransformContext
from camelcaser.core.errors import InputError
from camelcaser.core.logging import get_pass_logger
from camelcaser.ir.enums import InputKind

PASS_NAME = "p00_prepare"
log = get_pass_logger(PASS_NAME)

END_MARKER = 0x00


def to_bytes(raw) -> tuple[bytes, InputKind]:
    """
    Convert supported input types to bytes.

    Raises:
        InputError: If raw is not str or bytes-like
    """
    if isinstance(raw, str):
        return raw.encode("utf-8", "surrogatepass"), InputKind.TEXT
    if isinstance(raw, (bytes, bytearray, memoryview)):
        return bytes(raw), InputKind.BYTES
    raise InputError(
        f"Expected bytes, str or None, got {type(raw).__name__}",
        details={"type": type(raw).__name__},
    )


def prepare(ctx: TransformContext) -> TransformContext:
    """
    Prepare raw input for segmentation.

    Sets ctx.data and ctx.input_kind.
    """
    data, kind = to_bytes(ctx.raw_input)
    raw_len = len(data)

    end = data.find(bytes([END_MARKER]))
    if end != -1:
        data = data[:end]
        ctx.add_diagnostic(
            level="info",
            code="INPUT_TRUNCATED",
            message=f"Input ends at NUL byte offset {end}; {raw_len - end} bytes ignored",
            source=PASS_NAME,
        )
        log.verbose("input_truncated", offset=end, ignored_bytes=raw_len - end)

    ctx.data = data
    ctx.input_kind = kind

    log.verbose("prepared", input_kind=kind.value, input_bytes=len(data))

    ctx.add_trace(
        pass_name=PASS_NAME,
        action="prepared_input",
        before=f"{raw_len} bytes ({kind.value})",
        after=f"{len(data)} bytes",
    )

    return ctx
