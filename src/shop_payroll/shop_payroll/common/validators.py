from __future__ import annotations

from typing import Any, Optional

from ..core.exceptions import ValidationError


def require_non_empty(value: str, field_name: str) -> str:
    if not value or not str(value).strip():
        raise ValidationError(f"{field_name} is required")
    return str(value).strip()


def require_min_length(value: str, field_name: str, min_len: int) -> str:
    if not isinstance(value, str) or len(value) < min_len:
        raise ValidationError(f"{field_name} must be at least {min_len} characters")
    return value


def require_int(value: Any, field_name: str) -> int:
    try:
        return int(value)
    except (TypeError, ValueError):
        raise ValidationError(f"{field_name} must be an integer")


def optional_rate(value: Any, field_name: str) -> Optional[float]:
    """Parse an optional non-negative money rate. None and '' mean unset."""
    if value is None or (isinstance(value, str) and not value.strip()):
        return None
    try:
        rate = float(value)
    except (TypeError, ValueError):
        raise ValidationError(f"{field_name} must be a number")
    if rate < 0:
        raise ValidationError(f"{field_name} must not be negative")
    return rate


def require_amount(value: Any, field_name: str) -> float:
    amount = optional_rate(value, field_name)
    if amount is None:
        raise ValidationError(f"{field_name} is required")
    return amount


def optional_str(value: Any, field_name: str) -> Optional[str]:
    """Stripped text or None. Non-string JSON values are rejected."""
    if value is None:
        return None
    if not isinstance(value, str):
        raise ValidationError(f"{field_name} must be a string")
    return value.strip() or None
