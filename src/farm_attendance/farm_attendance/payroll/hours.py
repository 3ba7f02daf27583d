from __future__ import annotations

from datetime import datetime

from ..core.exceptions import ValidationError


def shift_hours(check_in: datetime, check_out: datetime, break_minutes: int = 0) -> float:
    """Worked hours of one shift: (out - in) - break, 2 decimals, not below 0."""
    if check_out <= check_in:
        raise ValidationError("Clock out time must be after clock in time", "check_out")
    minutes = (check_out - check_in).total_seconds() / 60
    minutes -= int(break_minutes or 0)
    return round(max(minutes, 0) / 60, 2)
