from __future__ import annotations

import threading
import uuid
from dataclasses import replace
from typing import Any, Optional, Sequence

from ..common.datetime_utils import now_local
from .model import TimeCategory
from .repository import TimeCategoryRepository


class InMemoryTimeCategoryRepository(TimeCategoryRepository):
    """Dict-backed store for scripts and wiring without a database."""

    def __init__(self, categories: Sequence[TimeCategory] = ()):
        self._lock = threading.Lock()
        self._items: dict[str, TimeCategory] = {c.id: c for c in categories}

    def list_all(self, *, is_active: Optional[bool] = None, search: Optional[str] = None) -> Sequence[TimeCategory]:
        with self._lock:
            items = list(self._items.values())
        if is_active is not None:
            items = [c for c in items if c.is_active == is_active]
        if search:
            needle = search.lower()
            items = [c for c in items if needle in c.name.lower()]
        return sorted(items, key=lambda c: c.min_hours)

    def get_by_id(self, category_id: str) -> Optional[TimeCategory]:
        with self._lock:
            return self._items.get(category_id)

    def get_by_name(self, name: str) -> Optional[TimeCategory]:
        wanted = name.strip().lower()
        with self._lock:
            return next((c for c in self._items.values() if c.name.lower() == wanted), None)

    def create(
        self,
        *,
        name: str,
        min_hours: float,
        max_hours: Optional[float],
        pay_multiplier: float,
        color: str,
    ) -> TimeCategory:
        now = now_local()
        category = TimeCategory(
            id=str(uuid.uuid4()),
            name=name,
            min_hours=min_hours,
            max_hours=max_hours,
            pay_multiplier=pay_multiplier,
            color=color,
            is_active=True,
            created_at=now,
            updated_at=now,
        )
        with self._lock:
            self._items[category.id] = category
        return category

    def update(self, category_id: str, changes: dict[str, Any]) -> Optional[TimeCategory]:
        with self._lock:
            current = self._items.get(category_id)
            if not current:
                return None
            updated = replace(current, **changes, updated_at=now_local())
            self._items[category_id] = updated
            return updated
