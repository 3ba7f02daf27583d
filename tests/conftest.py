from __future__ import annotations

import pytest

from src.farm_attendance.farm_attendance.time_categories.model import TimeCategory


@pytest.fixture
def make_category():
    counter = {"n": 0}

    def _make(min_hours, max_hours=None, *, id=None, name=None, pay_multiplier=1.0, is_active=True):
        counter["n"] += 1
        n = counter["n"]
        return TimeCategory(
            id=id or f"cat-{n}",
            name=name or f"Category {n}",
            min_hours=min_hours,
            max_hours=max_hours,
            pay_multiplier=pay_multiplier,
            is_active=is_active,
        )

    return _make
