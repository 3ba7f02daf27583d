from __future__ import annotations

from typing import Any, Mapping, Optional, Union

from ..common.validators import require_length, require_non_empty, require_number, require_pattern, require_range
from ..core.constants import HEX_COLOR_PATTERN, MAX_PAY_MULTIPLIER, MAX_SHIFT_HOURS, NAME_MAX_LENGTH, NAME_MIN_LENGTH
from ..core.exceptions import ValidationError
from .model import CreateTimeCategoryData, UpdateTimeCategoryData


class TimeCategoryValidator:
    """Static field checks for category definitions.

    Pure: no I/O, no defaulting. Rules run in a fixed order and the first
    violation is raised as ``ValidationError`` carrying the field name.
    """

    @classmethod
    def validate_create(cls, data: Union[CreateTimeCategoryData, Mapping[str, Any]]) -> None:
        if not isinstance(data, CreateTimeCategoryData):
            data = CreateTimeCategoryData.from_mapping(data)

        cls._check_name(data.name)

        if data.min_hours is None:
            raise ValidationError("Minimum hours is required", "min_hours")
        min_hours = cls._check_min_hours(data.min_hours)

        if data.max_hours is not None:
            cls._check_max_hours(data.max_hours, min_hours)

        if data.pay_multiplier is not None:
            cls._check_pay_multiplier(data.pay_multiplier)

        if data.color is not None:
            cls._check_color(data.color)

    @classmethod
    def validate_update(cls, data: Union[UpdateTimeCategoryData, Mapping[str, Any]]) -> None:
        """Validate only the fields present in a partial update."""
        if not isinstance(data, UpdateTimeCategoryData):
            data = UpdateTimeCategoryData.from_mapping(data)

        if data.has("name"):
            cls._check_name(data.name)

        min_hours = None
        if data.has("min_hours"):
            if data.min_hours is None:
                raise ValidationError("Minimum hours is required", "min_hours")
            min_hours = cls._check_min_hours(data.min_hours)

        if data.has("max_hours") and data.max_hours is not None:
            cls._check_max_hours(data.max_hours, min_hours)

        if data.has("pay_multiplier"):
            cls._check_pay_multiplier(data.pay_multiplier)

        if data.has("color"):
            cls._check_color(data.color)

        if data.has("is_active") and not isinstance(data.is_active, bool):
            raise ValidationError("Active flag must be true or false", "is_active")

    @staticmethod
    def _check_name(name: Optional[str]) -> str:
        name = require_non_empty(name, "name", "Category name is required")
        return require_length(
            name,
            "name",
            NAME_MIN_LENGTH,
            NAME_MAX_LENGTH,
            f"Category name must be {NAME_MIN_LENGTH}-{NAME_MAX_LENGTH} characters",
        )

    @staticmethod
    def _check_min_hours(value) -> float:
        value = require_number(value, "min_hours", "Minimum hours")
        return require_range(
            value,
            "min_hours",
            minimum=0,
            maximum=MAX_SHIFT_HOURS,
            below_message="Minimum hours cannot be negative",
            above_message=f"Minimum hours cannot exceed {MAX_SHIFT_HOURS}",
        )

    @staticmethod
    def _check_max_hours(value, min_hours: Optional[float]) -> float:
        value = require_number(value, "max_hours", "Maximum hours")
        require_range(
            value,
            "max_hours",
            minimum=0,
            maximum=MAX_SHIFT_HOURS,
            below_message="Maximum hours cannot be negative",
            above_message=f"Maximum hours cannot exceed {MAX_SHIFT_HOURS}",
        )
        if min_hours is not None and value <= min_hours:
            raise ValidationError("Maximum hours must be greater than minimum hours", "max_hours")
        return value

    @staticmethod
    def _check_pay_multiplier(value) -> float:
        value = require_number(value, "pay_multiplier", "Pay multiplier")
        return require_range(
            value,
            "pay_multiplier",
            minimum=0,
            maximum=MAX_PAY_MULTIPLIER,
            below_message="Pay multiplier cannot be negative",
            above_message=f"Pay multiplier cannot exceed {MAX_PAY_MULTIPLIER}",
        )

    @staticmethod
    def _check_color(value: str) -> str:
        return require_pattern(value, "color", HEX_COLOR_PATTERN, "Invalid color format. Use hex format like #FF0000")


def validate_create(data: Union[CreateTimeCategoryData, Mapping[str, Any]]) -> None:
    TimeCategoryValidator.validate_create(data)


def validate_update(data: Union[UpdateTimeCategoryData, Mapping[str, Any]]) -> None:
    TimeCategoryValidator.validate_update(data)
