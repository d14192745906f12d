"""Output — Owned token sequences handed to callers."""

from camelcaser.output.owned import CamelCased

__all__ = ["CamelCased"]
