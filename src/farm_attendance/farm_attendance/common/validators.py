from __future__ import annotations

import math
import re
from numbers import Real
from typing import Optional

from ..core.exceptions import ValidationError


def require_non_empty(value: Optional[str], field_name: str, message: str) -> str:
    if value is None or not str(value).strip():
        raise ValidationError(message, field_name)
    return str(value).strip()


def require_length(value: str, field_name: str, min_len: int, max_len: int, message: str) -> str:
    if len(value) < min_len or len(value) > max_len:
        raise ValidationError(message, field_name)
    return value


def require_number(value, field_name: str, label: str) -> float:
    # bool is an int subclass, a checkbox value is not an hour count
    if isinstance(value, bool) or not isinstance(value, Real) or not math.isfinite(value):
        raise ValidationError(f"{label} must be a number", field_name)
    return float(value)


def require_range(
    value: float,
    field_name: str,
    *,
    minimum: float,
    maximum: float,
    below_message: str,
    above_message: str,
) -> float:
    if value < minimum:
        raise ValidationError(below_message, field_name)
    if value > maximum:
        raise ValidationError(above_message, field_name)
    return value


def require_pattern(value: str, field_name: str, pattern: str, message: str) -> str:
    if not isinstance(value, str) or not re.fullmatch(pattern, value):
        raise ValidationError(message, field_name)
    return value
