from __future__ import annotations

from typing import Any

from ..core.exceptions import ValidationError


def require_present(value: Any, message: str) -> str:
    """Return ``value`` as a string, or raise if it is missing or blank.

    Booleans and numeric zero count as missing. Other numbers are stringified.
    The value itself is not trimmed: emails and PINs are kept as submitted.
    """
    if value is None or isinstance(value, bool):
        raise ValidationError(message)
    if isinstance(value, (int, float)) and not value:
        raise ValidationError(message)
    text = value if isinstance(value, str) else str(value)
    if not text.strip():
        raise ValidationError(message)
    return text
