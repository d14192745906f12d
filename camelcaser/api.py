"""
Public API — camel_caser() and destroy().

camel_caser() runs the default pipeline and hands the caller an owned
CamelCased sequence; destroy() releases it.
"""

from typing import Optional

from camelcaser.core.context import RawInput, TransformRequest
from camelcaser.core.engine import Engine, Pipeline, get_engine
from camelcaser.core.errors import TransformError
from camelcaser.ir.enums import DiagnosticLevel, InputKind, TransformStatus
from camelcaser.ir.schema import TransformResult
from camelcaser.output.owned import CamelCased
from camelcaser.passes import camel_case, package, prepare, segment, tokenize
from camelcaser.passes.p00_prepare import to_bytes

DEFAULT_PIPELINE_ID = "default"


def setup_default_pipeline(engine: Engine) -> None:
    """Register the default camel-casing pipeline."""
    default_pipeline = Pipeline(
        id=DEFAULT_PIPELINE_ID,
        name="Default camelCase Pipeline",
        passes=[
            prepare,
            segment,
            tokenize,
            camel_case,
            package,
        ],
    )
    engine.register_pipeline(default_pipeline)


def _default_engine() -> Engine:
    engine = get_engine()
    if DEFAULT_PIPELINE_ID not in engine.list_pipelines():
        setup_default_pipeline(engine)
    return engine


def run(data: RawInput, pipeline_id: str = DEFAULT_PIPELINE_ID) -> TransformResult:
    """Run a pipeline and return the full TransformResult (IR, trace, diagnostics)."""
    return _default_engine().transform(TransformRequest(data=data), pipeline_id)


def result_tokens(result: TransformResult) -> list:
    """Tokens of a result, decoded back to str when the input was text."""
    tokens = result.tokens
    if result.input_kind == InputKind.TEXT:
        return [t.decode("utf-8", "surrogatepass") for t in tokens]
    return tokens


def camel_caser(data: Optional[RawInput]) -> Optional[CamelCased]:
    """
    Convert input into one camelCase token per sentence.

    Args:
        data: bytes-like or str input, or None

    Returns:
        None for None input, otherwise an owned CamelCased sequence
        (empty when the input holds no words). Tokens are bytes for
        bytes input and str for str input.

    Raises:
        InputError: If data is not bytes-like, str, or None
        TransformError: If a pipeline pass failed; nothing is returned
    """
    if data is None:
        return None

    # Fail on bad types here rather than inside the pipeline
    to_bytes(data)

    result = run(data)
    if result.status == TransformStatus.ERROR:
        errors = [d for d in result.diagnostics if d.level == DiagnosticLevel.ERROR]
        first = errors[0] if errors else None
        raise TransformError(
            first.message if first else "Transformation failed",
            code=first.code if first else "TRANSFORM_FAILED",
            details={"request_id": result.request_id},
        )

    return CamelCased(result_tokens(result), request_id=result.request_id)


def destroy(sequence: Optional[CamelCased]) -> None:
    """
    Release a sequence returned by camel_caser().

    None is accepted and ignored.
    """
    if sequence is None:
        return
    sequence.release()
