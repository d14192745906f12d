"""
Contracts — Interfaces for pipeline components.
"""

from abc import ABC, abstractmethod

from camelcaser.core.context import TransformContext


class Validator(ABC):
    """Abstract base for validators."""

    @property
    @abstractmethod
    def name(self) -> str:
        """Validator name for diagnostics."""
        ...

    @abstractmethod
    def validate(self, ctx: TransformContext) -> list[str]:
        """
        Validate the context.

        Returns:
            List of error messages (empty if valid)
        """
        ...
