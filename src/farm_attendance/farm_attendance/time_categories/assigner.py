from __future__ import annotations

from typing import Iterable, Optional

from .model import TimeCategory


def assign_category(hours: float, categories: Iterable[TimeCategory]) -> Optional[TimeCategory]:
    """Pick the active category whose range contains ``hours``.

    Ranges are ``[min_hours, max_hours)``. When a malformed set has several
    containing ranges, the highest ``min_hours`` wins; an exact tie on
    ``min_hours`` goes to the lowest id (compared as strings).
    """
    candidates = [c for c in categories if c.is_active and c.contains(hours)]
    if not candidates:
        return None

    best_min = max(c.min_hours for c in candidates)
    return min((c for c in candidates if c.min_hours == best_min), key=lambda c: str(c.id))
