from __future__ import annotations

from .model import CreateTimeCategoryData

# Seed data for the admin form. Ranges are half-open and contiguous.
SUGGESTED_CATEGORIES: tuple[CreateTimeCategoryData, ...] = (
    CreateTimeCategoryData(name="Quarter Day", min_hours=2, max_hours=4, pay_multiplier=1.0, color="#28a745"),
    CreateTimeCategoryData(name="Half Day", min_hours=4, max_hours=8, pay_multiplier=1.0, color="#17a2b8"),
    CreateTimeCategoryData(name="Full Day", min_hours=8, max_hours=10, pay_multiplier=1.0, color="#007bff"),
    CreateTimeCategoryData(name="Overtime", min_hours=10, max_hours=12, pay_multiplier=1.5, color="#fd7e14"),
    CreateTimeCategoryData(name="Double Time", min_hours=12, pay_multiplier=2.0, color="#dc3545"),
)


def get_suggested_categories() -> list[CreateTimeCategoryData]:
    return list(SUGGESTED_CATEGORIES)
