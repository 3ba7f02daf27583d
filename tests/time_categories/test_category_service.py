from __future__ import annotations

import logging
from dataclasses import replace
from typing import Any, Optional

import pytest

from src.farm_attendance.farm_attendance.core.exceptions import (
    CategoryNotFoundError,
    ConflictError,
    DuplicateCategoryError,
    ValidationError,
)
from src.farm_attendance.farm_attendance.time_categories.model import TimeCategory, UpdateTimeCategoryData
from src.farm_attendance.farm_attendance.time_categories.service import TimeCategoryService


class FakeCategoriesRepo:
    def __init__(self, categories=()):
        self._next_id = 1
        self._items: dict[str, TimeCategory] = {c.id: c for c in categories}
        self.created: list[dict] = []
        self.updated: list[tuple[str, dict]] = []

    def list_all(self, *, is_active: Optional[bool] = None, search: Optional[str] = None):
        items = list(self._items.values())
        if is_active is not None:
            items = [c for c in items if c.is_active == is_active]
        if search:
            items = [c for c in items if search.lower() in c.name.lower()]
        return sorted(items, key=lambda c: c.min_hours)

    def get_by_id(self, category_id: str):
        return self._items.get(category_id)

    def get_by_name(self, name: str):
        return next((c for c in self._items.values() if c.name.lower() == name.strip().lower()), None)

    def create(self, *, name, min_hours, max_hours, pay_multiplier, color):
        self.created.append(
            {"name": name, "min_hours": min_hours, "max_hours": max_hours, "pay_multiplier": pay_multiplier, "color": color}
        )
        cid = f"new-{self._next_id}"
        self._next_id += 1
        category = TimeCategory(
            id=cid, name=name, min_hours=min_hours, max_hours=max_hours, pay_multiplier=pay_multiplier, color=color
        )
        self._items[cid] = category
        return category

    def update(self, category_id: str, changes: dict[str, Any]):
        self.updated.append((category_id, dict(changes)))
        current = self._items.get(category_id)
        if not current:
            return None
        self._items[category_id] = replace(current, **changes)
        return self._items[category_id]


@pytest.fixture
def standard_set(make_category):
    return [
        make_category(4, 8, id="half", name="Half Day"),
        make_category(8, 10, id="full", name="Full Day"),
        make_category(10, id="ot", name="Overtime", pay_multiplier=1.5),
    ]


def test_create_applies_defaults_and_trims_name():
    repo = FakeCategoriesRepo()
    svc = TimeCategoryService(repo)

    category = svc.create({"name": "  Half Day  ", "min_hours": 4, "max_hours": 8})

    assert category.name == "Half Day"
    assert repo.created == [
        {"name": "Half Day", "min_hours": 4, "max_hours": 8, "pay_multiplier": 1.0, "color": "#007bff"}
    ]


def test_create_uses_configured_defaults():
    repo = FakeCategoriesRepo()
    svc = TimeCategoryService(repo, default_color="#333", default_pay_multiplier=1.25)

    category = svc.create({"name": "Night", "min_hours": 0, "max_hours": 4})

    assert category.color == "#333"
    assert category.pay_multiplier == 1.25


def test_create_keeps_explicit_zero_multiplier():
    svc = TimeCategoryService(FakeCategoriesRepo())

    category = svc.create({"name": "Unpaid", "min_hours": 0, "max_hours": 1, "pay_multiplier": 0})

    assert category.pay_multiplier == 0


def test_create_rejects_invalid_data_before_touching_repo():
    repo = FakeCategoriesRepo()
    svc = TimeCategoryService(repo)

    with pytest.raises(ValidationError) as exc:
        svc.create({"name": "Full Day", "min_hours": 8, "max_hours": 8})

    assert exc.value.field == "max_hours"
    assert repo.created == []


def test_create_rejects_duplicate_name_case_insensitive(standard_set):
    svc = TimeCategoryService(FakeCategoriesRepo(standard_set))

    with pytest.raises(DuplicateCategoryError):
        svc.create({"name": "full day", "min_hours": 12})


def test_create_rejects_overlap_with_active_category(standard_set):
    repo = FakeCategoriesRepo(standard_set)
    svc = TimeCategoryService(repo)

    with pytest.raises(ConflictError) as exc:
        svc.create({"name": "Long Day", "min_hours": 9, "max_hours": 11})

    assert exc.value.conflicting_category_id == "full"
    assert repo.created == []


def test_create_ignores_inactive_overlap(make_category):
    repo = FakeCategoriesRepo([make_category(4, 8, id="old", is_active=False)])
    svc = TimeCategoryService(repo)

    category = svc.create({"name": "Half Day", "min_hours": 4, "max_hours": 8})

    assert category.id.startswith("new-")


def test_update_same_range_does_not_conflict_with_itself(standard_set):
    repo = FakeCategoriesRepo(standard_set)
    svc = TimeCategoryService(repo)

    updated = svc.update("full", {"min_hours": 8, "max_hours": 10, "pay_multiplier": 1.1})

    assert updated.pay_multiplier == 1.1
    assert repo.updated == [("full", {"min_hours": 8, "max_hours": 10, "pay_multiplier": 1.1})]


def test_update_range_into_neighbour_conflicts(standard_set):
    svc = TimeCategoryService(FakeCategoriesRepo(standard_set))

    with pytest.raises(ConflictError) as exc:
        svc.update("full", {"max_hours": 11})

    assert exc.value.conflicting_category_id == "ot"


def test_update_checks_merged_range(standard_set):
    svc = TimeCategoryService(FakeCategoriesRepo(standard_set))

    with pytest.raises(ValidationError) as exc:
        svc.update("full", {"min_hours": 10})

    assert exc.value.field == "max_hours"


def test_update_can_clear_upper_bound(make_category):
    repo = FakeCategoriesRepo([make_category(8, 10, id="full", name="Full Day")])
    svc = TimeCategoryService(repo)

    updated = svc.update("full", UpdateTimeCategoryData(max_hours=None))

    assert updated.max_hours is None


def test_update_unknown_category():
    svc = TimeCategoryService(FakeCategoriesRepo())

    with pytest.raises(CategoryNotFoundError):
        svc.update("missing", {"name": "Anything"})


def test_empty_update_returns_existing_unchanged(standard_set):
    repo = FakeCategoriesRepo(standard_set)
    svc = TimeCategoryService(repo)

    assert svc.update("half", {}) is standard_set[0]
    assert repo.updated == []


def test_rename_to_existing_name_is_rejected(standard_set):
    svc = TimeCategoryService(FakeCategoriesRepo(standard_set))

    with pytest.raises(DuplicateCategoryError):
        svc.update("half", {"name": "Overtime"})


def test_rename_changing_only_case_is_allowed(standard_set):
    svc = TimeCategoryService(FakeCategoriesRepo(standard_set))

    assert svc.update("half", {"name": "HALF DAY"}).name == "HALF DAY"


def test_reactivation_is_conflict_checked(make_category):
    repo = FakeCategoriesRepo(
        [make_category(4, 8, id="half", name="Half Day"), make_category(6, 9, id="old", name="Old", is_active=False)]
    )
    svc = TimeCategoryService(repo)

    with pytest.raises(ConflictError):
        svc.update("old", {"is_active": True})


def test_deactivate(standard_set):
    repo = FakeCategoriesRepo(standard_set)
    svc = TimeCategoryService(repo)

    category = svc.deactivate("ot")

    assert category.is_active is False
    assert [c.id for c in svc.active_categories()] == ["half", "full"]


def test_get_unknown_raises():
    with pytest.raises(CategoryNotFoundError):
        TimeCategoryService(FakeCategoriesRepo()).get("nope")


def test_list_categories_filters(standard_set):
    svc = TimeCategoryService(FakeCategoriesRepo(standard_set))

    assert [c.id for c in svc.list_categories(search="day")] == ["half", "full"]


def test_category_for_hours_uses_active_categories(standard_set):
    svc = TimeCategoryService(FakeCategoriesRepo(standard_set))

    assert svc.category_for_hours(8).id == "full"
    assert svc.category_for_hours(12).id == "ot"
    assert svc.category_for_hours(2) is None


def test_seed_default_categories_into_empty_store():
    repo = FakeCategoriesRepo()
    svc = TimeCategoryService(repo)

    created = svc.seed_default_categories()

    assert [c.name for c in created] == ["Quarter Day", "Half Day", "Full Day", "Overtime", "Double Time"]
    assert svc.detect_conflicts() == []


def test_seed_skips_existing_and_conflicting(make_category, caplog):
    repo = FakeCategoriesRepo([make_category(7, 9, id="custom", name="Custom Shift")])
    svc = TimeCategoryService(repo)

    with caplog.at_level(logging.WARNING):
        created = svc.seed_default_categories()

    assert [c.name for c in created] == ["Quarter Day", "Overtime", "Double Time"]
    assert "Half Day" in caplog.text
    assert "Full Day" in caplog.text

    assert svc.seed_default_categories() == []


def test_check_configuration_empty():
    report = TimeCategoryService(FakeCategoriesRepo()).check_configuration()

    assert report.is_valid is False
    assert report.errors == ["No active time categories configured"]


def test_check_configuration_valid(standard_set):
    report = TimeCategoryService(FakeCategoriesRepo(standard_set)).check_configuration()

    assert report.is_valid is True
    assert report.errors == []


def test_check_configuration_reports_conflicts_and_gaps(make_category):
    repo = FakeCategoriesRepo(
        [
            make_category(2, 3.5, name="Quarter Day"),
            make_category(4, 8, name="Half Day"),
            make_category(6, 10, name="Long Half"),
        ]
    )

    report = TimeCategoryService(repo).check_configuration()

    assert report.is_valid is False
    assert report.errors == [
        'Conflict between "Half Day" and "Long Half": Overlapping hour ranges',
        'Gap in coverage between "Quarter Day" (max: 3.5h) and "Half Day" (min: 4h)',
    ]


@pytest.mark.parametrize("field", ["color", "pay_multiplier"])
def test_update_with_none_keeps_stored_value(make_category, field):
    stored = replace(make_category(8, 10, id="full", name="Full Day", pay_multiplier=1.2), color="#abc")
    repo = FakeCategoriesRepo([stored])
    svc = TimeCategoryService(repo)

    updated = svc.update("full", {field: None})

    assert updated.color == "#abc"
    assert updated.pay_multiplier == 1.2
    assert repo.updated == []


def test_update_with_none_color_still_applies_other_fields(make_category):
    repo = FakeCategoriesRepo([make_category(8, 10, id="full", name="Full Day")])
    svc = TimeCategoryService(repo)

    updated = svc.update("full", {"color": None, "pay_multiplier": 1.5})

    assert updated.color == "#007bff"
    assert updated.pay_multiplier == 1.5
    assert repo.updated == [("full", {"pay_multiplier": 1.5})]
