"""
Preservation Validator — Checks no input byte was lost, added or reordered.
"""

from camelcaser.charclass import WORD_PATTERN
from camelcaser.core.context import TransformContext
from camelcaser.core.contracts import Validator


class PreservationValidator(Validator):
    """
    Validates that each token is its sentence minus whitespace.

    Comparison ignores ASCII case, the only thing camel-casing may change.
    """

    @property
    def name(self) -> str:
        return "preservation"

    def validate(self, ctx: TransformContext) -> list[str]:
        errors: list[str] = []

        for sentence in ctx.sentences:
            if sentence.token is None:
                continue
            expected = b"".join(WORD_PATTERN.findall(sentence.raw))
            if sentence.token.lower() != expected.lower():
                errors.append(
                    f"{sentence.id}: token does not match sentence content "
                    f"({len(sentence.token)} vs {len(expected)} bytes)"
                )

        return errors
