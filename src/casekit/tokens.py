"""Split identifiers and phrases into word tokens."""

from __future__ import annotations

import logging
import re

__all__ = [
    "has_separators",
    "is_numeric_token",
    "split_on_boundaries",
    "split_on_separators",
    "tokenize",
]


LOGGER = logging.getLogger(__name__)

_SEPARATOR_RUN = re.compile(r"[^A-Za-z0-9]+")
_NUMERIC = re.compile(r"[0-9]+")

# Alternatives are tried in order at every position; order decides where
# acronym and word boundaries fall.
_BOUNDARY_TOKEN = re.compile(
    r"[A-Z]+(?=[A-Z][a-z])"  # acronym directly before a capitalised word
    r"|[A-Z]?[a-z]+"  # plain or capitalised word
    r"|[A-Z]+"  # trailing acronym
    r"|[0-9]+"
)


def has_separators(text: str) -> bool:
    """Return ``True`` when ``text`` holds any non ASCII alphanumeric character."""

    return _SEPARATOR_RUN.search(text) is not None


def is_numeric_token(token: str) -> bool:
    return _NUMERIC.fullmatch(token) is not None


def split_on_separators(text: str) -> list[str]:
    """Split ``text`` on every run of separator characters, dropping empty pieces."""

    return [part for part in _SEPARATOR_RUN.split(text) if part]


def split_on_boundaries(text: str) -> list[str]:
    """Partition an alphanumeric run at camelCase, acronym and digit boundaries.

    ``"XMLHttpRequest"`` becomes ``["XML", "Http", "Request"]`` and
    ``"item42Count"`` becomes ``["item", "42", "Count"]``. If no alternative
    matches at some position the rest of ``text`` is kept as a single token.
    """

    tokens: list[str] = []
    position = 0
    while position < len(text):
        match = _BOUNDARY_TOKEN.match(text, position)
        if match is None:
            tokens.append(text[position:])
            break
        tokens.append(match.group(0))
        position = match.end()
    return tokens


def tokenize(text: str) -> list[str]:
    """Return the word tokens of ``text`` with their original casing.

    Leading and trailing whitespace is ignored. When ``text`` contains any
    separator it is split on separators only; otherwise the boundary scan is
    used. The two strategies never mix within one call, so ``"userId_2"``
    yields ``["userId", "2"]``.
    """

    trimmed = text.strip()
    if not trimmed:
        return []

    if has_separators(trimmed):
        LOGGER.debug("splitting %r on separators", trimmed)
        return split_on_separators(trimmed)

    LOGGER.debug("splitting %r on case boundaries", trimmed)
    return split_on_boundaries(trimmed)
