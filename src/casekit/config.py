"""Rendering rules for the token based casing conventions."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Literal, Mapping, Sequence

from .schema import CaseVariant
from .tokens import is_numeric_token

TokenRule = Literal["lower", "capitalize"]


def _lower(token: str) -> str:
    return token.lower()


def _capitalize(token: str) -> str:
    if is_numeric_token(token):
        return token
    return token[:1].upper() + token[1:].lower()


_RULES: Mapping[str, Callable[[str], str]] = {
    "lower": _lower,
    "capitalize": _capitalize,
}


@dataclass(frozen=True, slots=True)
class CaseStyle:
    """How a token sequence is cased and joined.

    Attributes
    ----------
    joiner:
        String placed between rendered tokens.
    first:
        Rule applied to the first token.
    rest:
        Rule applied to every subsequent token. ``"capitalize"`` uppercases the
        first character and lowercases the remainder, leaving digit-only tokens
        untouched.
    """

    joiner: str
    first: TokenRule = "lower"
    rest: TokenRule = "lower"

    @classmethod
    def for_variant(cls, variant: CaseVariant | str) -> "CaseStyle":
        """Return the style registered for ``variant``.

        Kebab case works on whitespace separated words rather than tokens and
        therefore has no :class:`CaseStyle`.
        """

        variant = CaseVariant(variant)
        try:
            return _STYLES[variant]
        except KeyError as exc:
            raise ValueError(f"no token style for variant '{variant.value}'") from exc

    def render(self, tokens: Sequence[str]) -> str:
        """Join ``tokens`` according to this style. An empty sequence renders as ``""``."""

        if not tokens:
            return ""

        first, *rest = tokens
        rendered = [_RULES[self.first](first)]
        rendered.extend(_RULES[self.rest](token) for token in rest)
        return self.joiner.join(rendered)


_STYLES: Mapping[CaseVariant, CaseStyle] = {
    CaseVariant.CAMEL: CaseStyle(joiner="", first="lower", rest="capitalize"),
    CaseVariant.DOT: CaseStyle(joiner=".", first="lower", rest="lower"),
}


__all__ = ["CaseStyle", "TokenRule"]
