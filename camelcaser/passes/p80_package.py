"""
Pass 80 — Packaging

Validates the built tokens and sets the final status.
"""

from typing import Optional

from camelcaser.core.context import TransformContext
from camelcaser.core.contracts import Validator
from camelcaser.core.logging import get_pass_logger
from camelcaser.ir.enums import TransformStatus

PASS_NAME = "p80_package"
log = get_pass_logger(PASS_NAME)


def package(
    ctx: TransformContext,
    validators: Optional[list[Validator]] = None,
) -> TransformContext:
    """
    Package the final output.

    This pass:
    - Checks every sentence received a token
    - Runs the output validators
    - Downgrades status to PARTIAL on any failure
    """
    from camelcaser.validate import default_validators

    errors: list[str] = []

    missing = [s.id for s in ctx.sentences if s.token is None]
    if missing:
        errors.append(f"Sentences without token: {', '.join(missing)}")

    for validator in validators if validators is not None else default_validators():
        for message in validator.validate(ctx):
            errors.append(f"[{validator.name}] {message}")

    if errors:
        for error in errors:
            log.warning("validation_error", error=error)
            ctx.add_diagnostic(
                level="error",
                code="VALIDATION_FAILED",
                message=error,
                source=PASS_NAME,
            )
        if ctx.status == TransformStatus.SUCCESS:
            ctx.status = TransformStatus.PARTIAL

    log.verbose(
        "packaged",
        status=ctx.status.value,
        sentences=len(ctx.sentences),
        diagnostics=len(ctx.diagnostics),
        validation_errors=len(errors),
    )

    ctx.add_trace(
        pass_name=PASS_NAME,
        action="packaged",
        after=f"status={ctx.status.value}, errors={len(errors)}",
    )

    return ctx
