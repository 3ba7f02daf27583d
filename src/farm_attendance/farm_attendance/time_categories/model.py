from __future__ import annotations

from dataclasses import dataclass, field, fields
from datetime import datetime
from typing import Any, Mapping, Optional


@dataclass(frozen=True)
class TimeCategory:
    """Thực thể miền (domain): a worked-hours range mapped to a pay multiplier.

    The range is half-open: ``[min_hours, max_hours)``, or ``[min_hours, +inf)``
    when ``max_hours`` is None.
    """

    id: str
    name: str
    min_hours: float
    max_hours: Optional[float] = None
    pay_multiplier: float = 1.0
    color: str = "#007bff"
    is_active: bool = True
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    @property
    def upper_bound(self) -> float:
        return float("inf") if self.max_hours is None else self.max_hours

    def contains(self, hours: float) -> bool:
        return self.min_hours <= hours < self.upper_bound


@dataclass(frozen=True)
class CreateTimeCategoryData:
    name: Optional[str]
    min_hours: Optional[float]
    max_hours: Optional[float] = None
    pay_multiplier: Optional[float] = None
    color: Optional[str] = None

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "CreateTimeCategoryData":
        return cls(
            name=data.get("name"),
            min_hours=data.get("min_hours"),
            max_hours=data.get("max_hours"),
            pay_multiplier=data.get("pay_multiplier"),
            color=data.get("color"),
        )


UNSET: Any = object()

# None on these fields keeps the stored value
KEEP_WHEN_NONE = frozenset({"pay_multiplier", "color"})


@dataclass(frozen=True)
class UpdateTimeCategoryData:
    """Partial update. Fields left at ``UNSET`` are not part of the update.

    ``max_hours=None`` is a real value: it removes the upper bound.
    ``pay_multiplier=None`` and ``color=None`` mean "leave unchanged".
    """

    name: Any = UNSET
    min_hours: Any = UNSET
    max_hours: Any = UNSET
    pay_multiplier: Any = UNSET
    color: Any = UNSET
    is_active: Any = UNSET

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "UpdateTimeCategoryData":
        known = {f.name for f in fields(cls)}
        return cls(**{k: v for k, v in data.items() if k in known})

    def has(self, name: str) -> bool:
        value = getattr(self, name)
        if value is None and name in KEEP_WHEN_NONE:
            return False
        return value is not UNSET

    def present(self) -> dict[str, Any]:
        return {f.name: getattr(self, f.name) for f in fields(self) if self.has(f.name)}

    def is_empty(self) -> bool:
        return not self.present()


@dataclass(frozen=True)
class HourRange:
    min_hours: float
    max_hours: Optional[float] = None


@dataclass(frozen=True)
class CategoryConflict:
    category1: TimeCategory
    category2: TimeCategory
    reason: str


@dataclass(frozen=True)
class ConfigurationReport:
    is_valid: bool
    errors: list[str] = field(default_factory=list)
