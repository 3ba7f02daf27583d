from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping, Optional

from .core.constants import DEFAULT_CATEGORY_COLOR, DEFAULT_PAY_MULTIPLIER
from .payroll.calculator.category_calculator import CategoryPayCalculator
from .payroll.service import ShiftPayService
from .time_categories.memory_repository import InMemoryTimeCategoryRepository
from .time_categories.repository import TimeCategoryRepository
from .time_categories.service import TimeCategoryService


@dataclass(frozen=True)
class Container:
    categories_repo: TimeCategoryRepository

    time_category_service: TimeCategoryService
    shift_pay_service: ShiftPayService


def build_container(
    *,
    settings: Optional[Mapping[str, Any]] = None,
    categories_repo: Optional[TimeCategoryRepository] = None,
) -> Container:
    settings = settings or {}
    categories_repo = categories_repo or InMemoryTimeCategoryRepository()

    time_category_service = TimeCategoryService(
        categories_repo,
        default_color=str(settings.get("DEFAULT_CATEGORY_COLOR", DEFAULT_CATEGORY_COLOR)),
        default_pay_multiplier=float(settings.get("DEFAULT_PAY_MULTIPLIER", DEFAULT_PAY_MULTIPLIER)),
    )
    shift_pay_service = ShiftPayService(categories_repo, calculator=CategoryPayCalculator())

    return Container(
        categories_repo=categories_repo,
        time_category_service=time_category_service,
        shift_pay_service=shift_pay_service,
    )
