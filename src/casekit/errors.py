"""Exception types raised by the casekit converters."""

from __future__ import annotations

from typing import Any


class InvalidInputError(TypeError):
    """Raised when a converter receives something other than a string."""

    def __init__(self, message: str) -> None:
        super().__init__(message)

    @classmethod
    def for_value(cls, operation: str, value: Any) -> "InvalidInputError":
        """Build the error reported by ``operation`` for the rejected ``value``."""

        if value is None:
            return cls(f"{operation}: input must be a string, received None")
        return cls(f"{operation}: expected str but received {type(value).__name__}")
