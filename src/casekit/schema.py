"""Public data types describing conversions."""

from __future__ import annotations

from enum import Enum
from typing import List

from pydantic import BaseModel, ConfigDict, Field


class CaseVariant(str, Enum):
    """Target casing conventions supported by :func:`casekit.naming.convert`."""

    CAMEL = "camel"
    DOT = "dot"
    KEBAB = "kebab"


class ConversionResult(BaseModel):
    """Outcome of a single conversion, including the tokens it was built from."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    source: str = Field(..., description="Input string exactly as supplied by the caller.")
    variant: CaseVariant = Field(..., description="Casing convention the input was rendered into.")
    tokens: List[str] = Field(default_factory=list, description="Words extracted from the input before rendering.")
    output: str = Field(..., description="Rendered string.")


__all__ = ["CaseVariant", "ConversionResult"]
