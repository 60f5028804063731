"""In-memory implementation of MenuRepository.

The catalog lives for the life of the process; items keep the order they
were added in, which is the order the menu is printed in.
"""

from __future__ import annotations

from restobill.domain.exceptions import CapacityExceededError, ValidationError
from restobill.domain.model.menu import MAX_MENU_ITEMS, MenuItem
from restobill.domain.repository.menu_repository import MenuRepository


class InMemoryMenuRepository(MenuRepository):

    def __init__(
        self,
        items: list[MenuItem] | None = None,
        capacity: int = MAX_MENU_ITEMS,
    ) -> None:
        self._capacity = capacity
        self._store: dict[str, MenuItem] = {}
        for item in items or []:
            self.save(item)

    # --- MenuRepository interface ---------------------------------------------

    def get_by_code(self, code: str) -> MenuItem | None:
        return self._store.get(code)

    def list_all(self) -> list[MenuItem]:
        return list(self._store.values())

    def save(self, item: MenuItem) -> None:
        existing = self._store.get(item.code)
        if existing is not None and existing is not item:
            raise ValidationError(f"Menu code '{item.code}' is already in use")
        if existing is None and len(self._store) >= self._capacity:
            raise CapacityExceededError(
                f"Menu is full ({self._capacity} items); cannot add '{item.code}'"
            )
        self._store[item.code] = item
