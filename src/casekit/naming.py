"""Case conversion helpers for identifiers and free-form phrases."""

from __future__ import annotations

from typing import Any

from .config import CaseStyle
from .errors import InvalidInputError
from .schema import CaseVariant, ConversionResult
from .tokens import tokenize

__all__ = ["convert", "describe", "to_camel_case", "to_dot_case", "to_kebab_case"]


def _require_text(operation: str, value: Any) -> str:
    if not isinstance(value, str):
        raise InvalidInputError.for_value(operation, value)
    return value


def _kebab_words(text: str) -> list[str]:
    return text.split()


def to_camel_case(value: str) -> str:
    """Return ``value`` in lower camelCase.

    >>> to_camel_case("  multiple---separators_here ")
    'multipleSeparatorsHere'
    >>> to_camel_case("XMLHttpRequest")
    'xmlHttpRequest'
    >>> to_camel_case("item 42 count")
    'item42Count'
    """

    text = _require_text("to_camel_case", value)
    return CaseStyle.for_variant(CaseVariant.CAMEL).render(tokenize(text))


def to_dot_case(value: str) -> str:
    """Return ``value`` as lowercase tokens joined with ``.``.

    >>> to_dot_case("XMLHttpRequest")
    'xml.http.request'
    """

    text = _require_text("to_dot_case", value)
    return CaseStyle.for_variant(CaseVariant.DOT).render(tokenize(text))


def to_kebab_case(value: str) -> str:
    """Lowercase ``value`` and join its whitespace separated words with ``-``.

    Only whitespace separates words here; punctuation and camelCase humps are
    kept as they are.
    """

    text = _require_text("to_kebab_case", value)
    return "-".join(_kebab_words(text)).lower()


_CONVERTERS = {
    CaseVariant.CAMEL: to_camel_case,
    CaseVariant.DOT: to_dot_case,
    CaseVariant.KEBAB: to_kebab_case,
}


def convert(value: str, variant: CaseVariant | str) -> str:
    """Convert ``value`` to ``variant``, given as a :class:`CaseVariant` or its name."""

    _require_text("convert", value)
    return _CONVERTERS[CaseVariant(variant)](value)


def describe(value: str, variant: CaseVariant | str) -> ConversionResult:
    """Convert ``value`` and report the words the output was built from."""

    text = _require_text("describe", value)
    variant = CaseVariant(variant)
    if variant is CaseVariant.KEBAB:
        tokens = _kebab_words(text)
    else:
        tokens = tokenize(text)
    return ConversionResult(
        source=text,
        variant=variant,
        tokens=tokens,
        output=_CONVERTERS[variant](text),
    )
