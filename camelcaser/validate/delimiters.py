"""
Delimiter Validator — Checks tokens carry no delimiter bytes.
"""

from camelcaser.charclass import classify
from camelcaser.core.context import TransformContext
from camelcaser.core.contracts import Validator
from camelcaser.ir.enums import CharClass

DELIMITER_CLASSES = (CharClass.WHITESPACE, CharClass.PUNCTUATION)


class DelimiterValidator(Validator):
    """Validates that no token contains a whitespace or punctuation byte."""

    @property
    def name(self) -> str:
        return "delimiters"

    def validate(self, ctx: TransformContext) -> list[str]:
        errors: list[str] = []

        for sentence in ctx.sentences:
            if sentence.token is None:
                continue
            for offset, byte in enumerate(sentence.token):
                if classify(byte) in DELIMITER_CLASSES:
                    errors.append(
                        f"{sentence.id}: delimiter byte 0x{byte:02x} at token offset {offset}"
                    )
                    break

        return errors
