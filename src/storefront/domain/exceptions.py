"""Domain-level exceptions.

All fatal errors are expressed as subclasses of DomainException so the
CLI layer can catch them uniformly and display user-friendly messages.

Business-rule violations on line items are *not* exceptions: they are
collected as ``ValidationError`` records (see ``model/validation.py``)
and only wrapped in ``OrderValidationError`` when a commit is blocked.
"""

from __future__ import annotations


class DomainException(Exception):
    """Base class for all domain errors."""


class InvalidValueError(DomainException):
    """A value object was constructed with an invalid value."""


class ConfigurationError(DomainException):
    """Something required to compute a result is not configured.

    Raised for a purchasable without any price, an unknown store, or a
    category ID that does not resolve.
    """


class EntityNotFoundError(DomainException):
    """A requested entity does not exist."""


class IllegalStateError(DomainException):
    """The operation is not allowed in the aggregate's current state."""


class PurchasableUnavailableError(DomainException):
    """The purchasable cannot be added to an order right now."""


class OrderValidationError(DomainException):
    """A line-item change or order completion was blocked by rule violations."""

    def __init__(self, message: str, errors: list, notices: list | None = None) -> None:
        super().__init__(message)
        self.errors = list(errors)
        self.notices = list(notices or [])

    def __str__(self) -> str:
        lines = [super().__str__()]
        lines.extend(f"  - {error.message}" for error in self.errors)
        return "\n".join(lines)
