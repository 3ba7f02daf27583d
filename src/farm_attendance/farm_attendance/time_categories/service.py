from __future__ import annotations

import logging
from typing import Any, Mapping, Optional, Sequence, Union

from ..core.constants import DEFAULT_CATEGORY_COLOR, DEFAULT_PAY_MULTIPLIER
from ..core.exceptions import CategoryNotFoundError, ConflictError, DuplicateCategoryError, ValidationError
from .assigner import assign_category
from .conflicts import detect_conflicts, validate_no_conflicts
from .model import CategoryConflict, ConfigurationReport, CreateTimeCategoryData, HourRange, TimeCategory, UpdateTimeCategoryData
from .repository import TimeCategoryRepository
from .suggestions import get_suggested_categories
from .validator import TimeCategoryValidator

logger = logging.getLogger(__name__)


class TimeCategoryService:
    """Use case: manage time categories (admin).

    Every write goes validate -> duplicate name -> conflict gate -> repository.
    """

    def __init__(
        self,
        categories: TimeCategoryRepository,
        *,
        default_color: str = DEFAULT_CATEGORY_COLOR,
        default_pay_multiplier: float = DEFAULT_PAY_MULTIPLIER,
    ):
        self._categories = categories
        self._default_color = default_color
        self._default_pay_multiplier = float(default_pay_multiplier)

    def create(self, data: Union[CreateTimeCategoryData, Mapping[str, Any]]) -> TimeCategory:
        if not isinstance(data, CreateTimeCategoryData):
            data = CreateTimeCategoryData.from_mapping(data)
        TimeCategoryValidator.validate_create(data)

        name = str(data.name).strip()
        if self._categories.get_by_name(name):
            raise DuplicateCategoryError(name)

        validate_no_conflicts(data, self._categories.list_all(is_active=True))

        category = self._categories.create(
            name=name,
            min_hours=data.min_hours,
            max_hours=data.max_hours,
            pay_multiplier=self._default_pay_multiplier if data.pay_multiplier is None else data.pay_multiplier,
            color=data.color or self._default_color,
        )
        logger.info("Created time category %s (%s)", category.name, category.id)
        return category

    def update(self, category_id: str, data: Union[UpdateTimeCategoryData, Mapping[str, Any]]) -> TimeCategory:
        if not isinstance(data, UpdateTimeCategoryData):
            data = UpdateTimeCategoryData.from_mapping(data)
        TimeCategoryValidator.validate_update(data)

        existing = self._categories.get_by_id(category_id)
        if not existing:
            raise CategoryNotFoundError(category_id)

        if data.is_empty():
            return existing

        changes = data.present()

        if "name" in changes:
            changes["name"] = str(changes["name"]).strip()
            same_name = self._categories.get_by_name(changes["name"])
            if same_name and same_name.id != existing.id:
                raise DuplicateCategoryError(changes["name"])

        bounds_changed = "min_hours" in changes or "max_hours" in changes
        merged = HourRange(
            min_hours=changes.get("min_hours", existing.min_hours),
            max_hours=changes["max_hours"] if "max_hours" in changes else existing.max_hours,
        )
        if bounds_changed and merged.max_hours is not None and merged.max_hours <= merged.min_hours:
            raise ValidationError("Maximum hours must be greater than minimum hours", "max_hours")

        reactivated = changes.get("is_active") is True and not existing.is_active
        will_be_active = changes.get("is_active", existing.is_active)
        if will_be_active and (bounds_changed or reactivated):
            validate_no_conflicts(merged, self._categories.list_all(is_active=True), exclude_id=existing.id)

        updated = self._categories.update(existing.id, changes)
        if not updated:
            raise CategoryNotFoundError(category_id)

        logger.info("Updated time category %s fields=%s", updated.id, sorted(changes))
        return updated

    def deactivate(self, category_id: str) -> TimeCategory:
        return self.update(category_id, UpdateTimeCategoryData(is_active=False))

    def get(self, category_id: str) -> TimeCategory:
        category = self._categories.get_by_id(category_id)
        if not category:
            raise CategoryNotFoundError(category_id)
        return category

    def list_categories(self, *, is_active: Optional[bool] = None, search: Optional[str] = None) -> Sequence[TimeCategory]:
        return self._categories.list_all(is_active=is_active, search=search)

    def active_categories(self) -> Sequence[TimeCategory]:
        return self._categories.list_all(is_active=True)

    def category_for_hours(self, hours: float) -> Optional[TimeCategory]:
        category = assign_category(hours, self.active_categories())
        logger.debug("Hours %s -> category %s", hours, category.name if category else None)
        return category

    def detect_conflicts(self) -> list[CategoryConflict]:
        return detect_conflicts(self.active_categories())

    def seed_default_categories(self) -> list[TimeCategory]:
        """Create the suggested categories that are missing.

        Suggestions that fail validation or overlap an existing category are
        skipped with a warning.
        """
        created: list[TimeCategory] = []
        for suggestion in get_suggested_categories():
            if self._categories.get_by_name(suggestion.name):
                continue
            try:
                created.append(self.create(suggestion))
            except (ValidationError, ConflictError, DuplicateCategoryError) as e:
                logger.warning("Skipped default category %r: %s", suggestion.name, e)
        return created

    def check_configuration(self) -> ConfigurationReport:
        categories = self.active_categories()
        if not categories:
            return ConfigurationReport(is_valid=False, errors=["No active time categories configured"])

        errors = [
            f'Conflict between "{c.category1.name}" and "{c.category2.name}": {c.reason}'
            for c in detect_conflicts(categories)
        ]

        ordered = sorted(categories, key=lambda c: c.min_hours)
        for current, nxt in zip(ordered, ordered[1:]):
            if current.max_hours is not None and current.max_hours < nxt.min_hours:
                errors.append(
                    f'Gap in coverage between "{current.name}" (max: {current.max_hours:g}h) '
                    f'and "{nxt.name}" (min: {nxt.min_hours:g}h)'
                )

        return ConfigurationReport(is_valid=not errors, errors=errors)
