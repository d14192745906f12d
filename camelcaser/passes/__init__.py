"""Passes — Pipeline stages for camel-casing."""

from camelcaser.passes.p00_prepare import prepare
from camelcaser.passes.p10_segment import segment
from camelcaser.passes.p20_tokenize import tokenize
from camelcaser.passes.p30_camel_case import camel_case
from camelcaser.passes.p80_package import package

__all__ = [
    "prepare",
    "segment",
    "tokenize",
    "camel_case",
    "package",
]
