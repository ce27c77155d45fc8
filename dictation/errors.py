"""Errors raised at the boundary of the comparison core."""
from __future__ import annotations

from typing import Any


class InvalidInput(TypeError):
    """Raised when a caller passes something other than text to the core."""


def ensure_text(value: Any, name: str) -> str:
    """Return ``value`` unchanged if it is a string, else raise InvalidInput.

    Args:
        value: The value supplied by the caller
        name: Argument name used in the error message

    Returns:
        The validated string
    """
    if not isinstance(value, str):
        raise InvalidInput(f"{name} must be str, got {type(value).__name__}")
    return value
