from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Iterable

from ...time_categories.model import TimeCategory


class PayCalculator(ABC):
    """Calculator interface (Strategy Pattern for payroll)."""

    @abstractmethod
    def calculate_pay(self, hours: float, base_rate: float, categories: Iterable[TimeCategory]) -> float:
        raise NotImplementedError
