"""Example: category rules and shift pay through the service layer.

Run from the repository root: ``APP_ENV=development python -m examples.example_usage``.
"""

from datetime import datetime

from src.farm_attendance.farm_attendance.main import bootstrap


def main():
    container = bootstrap()
    categories = container.time_category_service

    if not categories.active_categories():
        categories.seed_default_categories()

    for c in categories.active_categories():
        upper = f"{c.max_hours:g}" if c.max_hours is not None else "..."
        print(f"{c.name:<12} [{c.min_hours:g}, {upper})  x{c.pay_multiplier:g}")

    print(categories.check_configuration())

    pay = container.shift_pay_service.pay_for_shift(
        datetime(2026, 3, 2, 6, 0),
        datetime(2026, 3, 2, 17, 30),
        base_rate=20,
        break_minutes=30,
    )
    print(f"{pay.hours}h -> {pay.category.name if pay.category else '-'} = {pay.amount:.2f}")


if __name__ == "__main__":
    main()
