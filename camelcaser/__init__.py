"""
camelcaser — Sentence camel-casing transformer

Turns an arbitrary byte string into one camelCase token per sentence.
Sentences end at ASCII punctuation, words are separated by ASCII whitespace,
and every byte that is not a delimiter is carried through untouched apart
from the case of each word's leading letter.
"""

__version__ = "0.1.0"
__ir_version__ = "0.1.0"

from camelcaser.api import camel_caser, destroy  # noqa: E402
from camelcaser.core.errors import (  # noqa: E402
    CamelCaserError,
    InputError,
    ReleasedError,
    TransformError,
)
from camelcaser.output.owned import CamelCased  # noqa: E402

__all__ = [
    "camel_caser",
    "destroy",
    "CamelCased",
    "CamelCaserError",
    "InputError",
    "ReleasedError",
    "TransformError",
]
