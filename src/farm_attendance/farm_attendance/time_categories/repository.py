from __future__ import annotations

from typing import Any, Optional, Protocol, Sequence

from .model import TimeCategory


class TimeCategoryRepository(Protocol):
    """Repository interface for TimeCategory.

    The service layer depends on this port; storage (SQL, HTTP, ...) lives
    outside the package. Implementations assign ``id`` and both timestamps,
    and must serialize writes so a conflict check and the following write
    see the same data.
    """

    def list_all(self, *, is_active: Optional[bool] = None, search: Optional[str] = None) -> Sequence[TimeCategory]:
        """Categories ordered by ``min_hours`` ascending."""
        raise NotImplementedError

    def get_by_id(self, category_id: str) -> Optional[TimeCategory]:
        raise NotImplementedError

    def get_by_name(self, name: str) -> Optional[TimeCategory]:
        """Case-insensitive lookup on the trimmed name."""
        raise NotImplementedError

    def create(
        self,
        *,
        name: str,
        min_hours: float,
        max_hours: Optional[float],
        pay_multiplier: float,
        color: str,
    ) -> TimeCategory:
        raise NotImplementedError

    def update(self, category_id: str, changes: dict[str, Any]) -> Optional[TimeCategory]:
        raise NotImplementedError
