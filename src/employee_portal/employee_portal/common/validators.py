from __future__ import annotations

from enum import Enum
from typing import Iterable, Optional, Type, TypeVar

from ..core.exceptions import ValidationError
from .datetime_utils import is_year_month, parse_iso_date

E = TypeVar("E", bound=Enum)


def require_str(value, field_name: str) -> str:
    # JSON bodies can carry numbers, lists or objects where text is expected
    if not isinstance(value, str):
        raise ValidationError(f"{field_name} must be a string")
    return value


def require_non_empty(value: str, field_name: str) -> str:
    if value is None or value == "":
        raise ValidationError(f"{field_name} is required")
    value = require_str(value, field_name).strip()
    if not value:
        raise ValidationError(f"{field_name} is required")
    return value


def require_min_length(value: str, field_name: str, min_len: int) -> str:
    if value is None:
        raise ValidationError(f"{field_name} must be at least {min_len} characters")
    if len(require_str(value, field_name)) < min_len:
        raise ValidationError(f"{field_name} must be at least {min_len} characters")
    return value


def require_iso_date(value: str, field_name: str) -> str:
    """Zero-padded YYYY-MM-DD only, so stored dates compare and prefix-match as text."""
    value = require_non_empty(value, field_name)
    try:
        parse_iso_date(value)
    except ValueError:
        raise ValidationError(f"{field_name} must be a YYYY-MM-DD date")
    return value


def require_year_month(value: str, field_name: str = "month") -> str:
    if not is_year_month(value):
        raise ValidationError(f"{field_name} must be in YYYY-MM format")
    return value


def require_choice(
    value: str,
    enum_cls: Type[E],
    field_name: str,
    *,
    allowed: Optional[Iterable[E]] = None,
    message: Optional[str] = None,
) -> E:
    """Map `value` onto a member of `enum_cls`, optionally limited to `allowed`."""
    members = list(allowed) if allowed is not None else list(enum_cls)
    for member in members:
        if isinstance(value, str) and member.value == value:
            return member
    if message:
        raise ValidationError(message)
    raise ValidationError(f"{field_name} must be one of: {', '.join(m.value for m in members)}")
