"""Convert identifiers and phrases between casing conventions.

The package splits arbitrary strings into word tokens, handling separators,
camelCase humps, acronyms and embedded digits, and renders them as
lower camelCase, dot.case or kebab-case.
"""

from __future__ import annotations

from .config import CaseStyle
from .errors import InvalidInputError
from .naming import convert, describe, to_camel_case, to_dot_case, to_kebab_case
from .schema import CaseVariant, ConversionResult
from .tokens import tokenize

__all__ = [
    "CaseStyle",
    "CaseVariant",
    "ConversionResult",
    "InvalidInputError",
    "convert",
    "describe",
    "to_camel_case",
    "to_dot_case",
    "to_kebab_case",
    "tokenize",
]

__version__ = "0.1.0"
