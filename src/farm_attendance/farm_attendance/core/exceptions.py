from __future__ import annotations

from typing import Optional


class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when a single field violates a static constraint."""

    def __init__(self, message: str, field: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.field = field


class ConflictError(DomainError):
    """Raised when a category's hour range overlaps an active category."""

    def __init__(self, message: str, conflicting_category_id: str):
        super().__init__(message)
        self.message = message
        self.conflicting_category_id = conflicting_category_id


class CategoryNotFoundError(DomainError):
    """Raised when a time category id does not exist."""

    def __init__(self, identifier: str):
        super().__init__(f"Time category not found: {identifier}")
        self.identifier = identifier


class DuplicateCategoryError(DomainError):
    """Raised when another category already uses the same name."""

    def __init__(self, name: str):
        super().__init__(f"Time category with name '{name}' already exists")
        self.name = name
