from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from ..time_categories.assigner import assign_category
from ..time_categories.model import TimeCategory
from ..time_categories.repository import TimeCategoryRepository
from .calculator.base import PayCalculator
from .calculator.category_calculator import CategoryPayCalculator, multiplier_for
from .hours import shift_hours

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ShiftPay:
    """Pay for one shift.

    ``category`` and ``multiplier`` come from category assignment; ``amount``
    comes from the configured calculator and only equals
    ``hours * base_rate * multiplier`` with ``CategoryPayCalculator``.
    """

    hours: float
    base_rate: float
    category: Optional[TimeCategory]
    multiplier: float
    amount: float


class ShiftPayService:
    """Pay for a single completed shift against the currently active categories."""

    def __init__(
        self,
        categories: TimeCategoryRepository,
        *,
        calculator: Optional[PayCalculator] = None,
    ):
        self._categories = categories
        self._calculator = calculator or CategoryPayCalculator()

    def pay_for_hours(self, hours: float, base_rate: float) -> ShiftPay:
        active = self._categories.list_all(is_active=True)
        category = assign_category(hours, active)
        amount = self._calculator.calculate_pay(hours, base_rate, active)
        logger.debug("Shift pay hours=%s rate=%s category=%s amount=%s", hours, base_rate, category.name if category else None, amount)
        return ShiftPay(
            hours=hours,
            base_rate=base_rate,
            category=category,
            multiplier=multiplier_for(category),
            amount=amount,
        )

    def pay_for_shift(self, check_in: datetime, check_out: datetime, base_rate: float, *, break_minutes: int = 0) -> ShiftPay:
        return self.pay_for_hours(shift_hours(check_in, check_out, break_minutes), base_rate)
