from __future__ import annotations

from ..core.exceptions import ValidationError


def require_in_range(value: float, field_name: str, *, minimum: float, maximum: float) -> float:
    if value < minimum or value > maximum:
        message = f"{field_name} must be between {minimum:g} and {maximum:g}"
        raise ValidationError(message, field_errors={field_name: message})
    return value
