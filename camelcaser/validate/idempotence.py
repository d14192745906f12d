"""
Idempotence Validator — Checks tokens are stable under re-casing.
"""

from camelcaser.core.context import TransformContext
from camelcaser.core.contracts import Validator
from camelcaser.passes.p30_camel_case import camel_case_word


class IdempotenceValidator(Validator):
    """
    Validates that transformation is idempotent.

    A token fed back as a single-word sentence must come out unchanged,
    since casing is only ever forced, never toggled.
    """

    @property
    def name(self) -> str:
        return "idempotence"

    def validate(self, ctx: TransformContext) -> list[str]:
        errors: list[str] = []

        for sentence in ctx.sentences:
            if sentence.token is None:
                continue
            if camel_case_word(sentence.token, first=True) != sentence.token:
                errors.append(f"{sentence.id}: token changes when re-cased")

        return errors
