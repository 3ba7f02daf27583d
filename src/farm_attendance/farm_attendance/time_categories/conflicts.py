from __future__ import annotations

from typing import Iterable, Optional, Sequence, Union

from ..core.constants import OVERLAP_REASON
from ..core.exceptions import ConflictError
from .model import CategoryConflict, CreateTimeCategoryData, HourRange, TimeCategory

RangeLike = Union[TimeCategory, CreateTimeCategoryData, HourRange]


def _upper(item: RangeLike) -> float:
    return float("inf") if item.max_hours is None else item.max_hours


def has_overlap(first: RangeLike, second: RangeLike) -> bool:
    """Half-open interval intersection: [a1, b1) and [a2, b2) overlap iff a1 < b2 and a2 < b1."""
    return first.min_hours < _upper(second) and second.min_hours < _upper(first)


def detect_conflicts(categories: Sequence[TimeCategory]) -> list[CategoryConflict]:
    """Every unordered pair of active categories whose hour ranges overlap.

    Pairs keep input order (earlier category first) and each pair appears once.
    Pairwise O(n^2); category sets are administrator-sized.
    """
    active = [c for c in categories if c.is_active]
    conflicts: list[CategoryConflict] = []

    for i, first in enumerate(active):
        for second in active[i + 1 :]:
            if has_overlap(first, second):
                conflicts.append(CategoryConflict(category1=first, category2=second, reason=OVERLAP_REASON))

    return conflicts


def validate_no_conflicts(
    candidate: RangeLike,
    existing_categories: Iterable[TimeCategory],
    exclude_id: Optional[str] = None,
) -> None:
    """Gate before persisting a create/update.

    Raises ``ConflictError`` for the first active category (other than
    ``exclude_id``) whose range overlaps the candidate's.
    """
    for existing in existing_categories:
        if not existing.is_active or (exclude_id is not None and existing.id == exclude_id):
            continue
        if has_overlap(candidate, existing):
            raise ConflictError(
                f'Category conflicts with existing category "{existing.name}". Hour ranges overlap.',
                conflicting_category_id=existing.id,
            )
