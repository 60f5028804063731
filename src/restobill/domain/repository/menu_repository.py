"""Abstract repository for the MenuItem aggregate.

Defined in the domain layer so the domain never depends on
infrastructure. The concrete in-memory catalog lives in the
infrastructure layer.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from restobill.domain.model.menu import Category, MenuItem


class MenuRepository(ABC):

    @abstractmethod
    def get_by_code(self, code: str) -> MenuItem | None:
        """Return a menu item by its exact code, or None if not found."""

    @abstractmethod
    def list_all(self) -> list[MenuItem]:
        """Return every menu item in catalog order."""

    @abstractmethod
    def save(self, item: MenuItem) -> None:
        """Add a new menu item or persist changes to an existing one."""

    def list_by_category(self, category: Category) -> list[MenuItem]:
        return [item for item in self.list_all() if item.category is category]
