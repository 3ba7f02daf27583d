from __future__ import annotations

from typing import Iterable, Optional

from ...core.constants import DEFAULT_PAY_MULTIPLIER
from ...time_categories.assigner import assign_category
from ...time_categories.model import TimeCategory
from .base import PayCalculator


def multiplier_for(category: Optional[TimeCategory]) -> float:
    return DEFAULT_PAY_MULTIPLIER if category is None else category.pay_multiplier


class CategoryPayCalculator(PayCalculator):
    """Category rule: hours * base_rate * multiplier of the assigned category (1.0 when none).

    No validation and no rounding; callers pass non-negative numbers.
    """

    def calculate_pay(self, hours: float, base_rate: float, categories: Iterable[TimeCategory]) -> float:
        category = assign_category(hours, categories)
        return hours * base_rate * multiplier_for(category)


def calculate_pay(hours: float, base_rate: float, categories: Iterable[TimeCategory]) -> float:
    return CategoryPayCalculator().calculate_pay(hours, base_rate, categories)
