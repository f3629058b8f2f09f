from __future__ import annotations

from ..core.exceptions import ValidationError


def require_non_empty(value: str, field_name: str) -> str:
    if not value or not value.strip():
        raise ValidationError(f"{field_name} must not be empty")
    return value.strip()


def keep_if_blank(value: str | None, current: str) -> str:
    """Return the stripped value, or the current one when the input is blank."""
    if value is None or not value.strip():
        return current
    return value.strip()
