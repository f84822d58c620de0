# /bookstore/services/catalog_helpers/validation.py

from typing import Optional

from ..catalog_errors import ValidationError


def require_text(value: Optional[str], field_label: str, max_length: int) -> str:
    """Rejects a missing, blank or over-long mandatory text value."""
    if value is None or not value.strip():
        raise ValidationError(f"{field_label} is required")
    return check_length(value, field_label, max_length)


def optional_text(value: Optional[str], field_label: str, max_length: int) -> Optional[str]:
    """Blank optional values are stored as NULL."""
    if value is None or not value.strip():
        return None
    return check_length(value, field_label, max_length)


def check_length(value: str, field_label: str, max_length: int) -> str:
    if len(value) > max_length:
        raise ValidationError(f"{field_label} must be at most {max_length} characters")
    return value
