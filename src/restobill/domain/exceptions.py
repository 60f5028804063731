"""Domain-level exceptions.

All business rule violations are expressed as subclasses of DomainException
so the CLI layer can catch them uniformly and display user-friendly messages.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from restobill.application.dto import ReceiptDTO


class DomainException(Exception):
    """Base class for all domain errors."""


class ValidationError(DomainException):
    """A business rule or invariant was violated."""


class EntityNotFoundError(DomainException):
    """A requested entity does not exist."""


# --- Menu ---------------------------------------------------------------------


class UnknownItemError(EntityNotFoundError):
    """The item code is not on the menu."""


class ItemUnavailableError(ValidationError):
    """The menu item is currently marked unavailable."""


# --- Orders -------------------------------------------------------------------


class InvalidQuantityError(ValidationError):
    """A quantity that must be positive was zero or negative."""


class OrderFullError(ValidationError):
    """The order already holds the maximum number of distinct lines."""


class OrderClosedError(ValidationError):
    """The order has been billed and can no longer change."""


class OrderNotFoundError(EntityNotFoundError):
    """No order exists with the given KOT."""


class LineNotFoundError(EntityNotFoundError):
    """The order has no line for the given item code."""


class EmptyOrderError(ValidationError):
    """An order without lines cannot be billed."""


class CapacityExceededError(ValidationError):
    """A session-wide limit (orders, menu size) has been reached."""


# --- Tables -------------------------------------------------------------------


class InvalidTableError(ValidationError):
    """Table number outside the configured range."""


class TableOccupiedError(ValidationError):
    """The table is already held by another active order."""


# --- Receipts -----------------------------------------------------------------


class ReceiptPersistError(DomainException):
    """The receipt file could not be written.

    The order is closed regardless; ``receipt`` carries what was billed so
    the caller can still show it.
    """

    def __init__(self, message: str, receipt: ReceiptDTO) -> None:
        super().__init__(message)
        self.receipt = receipt
