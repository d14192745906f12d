"""
Engine — Pipeline orchestration.

The engine selects a pipeline, runs passes in order,
handles pass failures, and packages output.

The engine is NOT where casing logic lives.
"""

from dataclasses import dataclass
from typing import Callable, Optional

from camelcaser.core.context import TransformContext, TransformRequest
from camelcaser.ir.enums import TransformStatus
from camelcaser.ir.schema import TransformResult


# Type alias for a pass function
PassFn = Callable[[TransformContext], TransformContext]


@dataclass
class Pipeline:
    """A named sequence of passes."""

    id: str
    name: str
    passes: list[PassFn]


class Engine:
    """
    Pipeline orchestrator.

    Runs passes in order, handles errors, and packages results.
    A failed pass leaves no partial sentences in the result.
    """

    def __init__(self) -> None:
        self._pipelines: dict[str, Pipeline] = {}

    def register_pipeline(self, pipeline: Pipeline) -> None:
        """Register a pipeline by ID."""
        self._pipelines[pipeline.id] = pipeline

    def list_pipelines(self) -> list[str]:
        """List registered pipeline IDs."""
        return list(self._pipelines.keys())

    def transform(
        self,
        request: TransformRequest,
        pipeline_id: Optional[str] = None,
    ) -> TransformResult:
        """
        Run a transformation.

        Args:
            request: The transformation request
            pipeline_id: Which pipeline to use (default: 'default')

        Returns:
            TransformResult with sentences, trace, and diagnostics
        """
        pipeline_id = pipeline_id or "default"

        if pipeline_id not in self._pipelines:
            ctx = TransformContext.from_request(request)
            ctx.status = TransformStatus.ERROR
            ctx.add_diagnostic(
                level="error",
                code="PIPELINE_NOT_FOUND",
                message=f"Pipeline '{pipeline_id}' not registered",
                source="engine",
            )
            return ctx.to_result()

        pipeline = self._pipelines[pipeline_id]
        ctx = TransformContext.from_request(request)

        from camelcaser.core.logging import TransformLogger
        tlog = TransformLogger(request.request_id)

        for pass_fn in pipeline.passes:
            pass_name = pass_fn.__name__
            try:
                tlog.pass_start(pass_name)
                ctx = pass_fn(ctx)
                tlog.pass_end(pass_name)
            except Exception as e:
                tlog.pass_error(pass_name, e)
                ctx.discard_partial()
                ctx.status = TransformStatus.ERROR
                ctx.add_diagnostic(
                    level="error",
                    code="PASS_ERROR",
                    message=f"Pass '{pass_name}' failed: {e}",
                    source="engine",
                )
                ctx.add_trace(
                    pass_name=pass_name,
                    action="error",
                )
                break

        tlog.transform_complete(
            status=ctx.status.value,
            input_bytes=len(ctx.data),
            sentences=len(ctx.sentences),
            diagnostics=len(ctx.diagnostics),
        )

        return ctx.to_result()


# Global engine instance
_engine: Optional[Engine] = None


def get_engine() -> Engine:
    """Get or create the global engine instance."""
    global _engine
    if _engine is None:
        _engine = Engine()
    return _engine

