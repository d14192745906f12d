"""Validate — Output checks run by the packaging pass."""

from camelcaser.validate.delimiters import DelimiterValidator
from camelcaser.validate.idempotence import IdempotenceValidator
from camelcaser.validate.preservation import PreservationValidator


def default_validators() -> list:
    """Validators run on every transform."""
    return [
        DelimiterValidator(),
        PreservationValidator(),
        IdempotenceValidator(),
    ]


__all__ = [
    "DelimiterValidator",
    "IdempotenceValidator",
    "PreservationValidator",
    "default_validators",
]
