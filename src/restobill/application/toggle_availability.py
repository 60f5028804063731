"""Application service: Toggle Availability use case.

Marks a dish in or out of stock.  Lines already placed on orders are
not touched; only later adds see the new flag.
"""

from __future__ import annotations

import logging

from restobill.application.dto import MenuItemDTO
from restobill.application.order_view import menu_item_to_dto
from restobill.domain.exceptions import UnknownItemError
from restobill.domain.repository.menu_repository import MenuRepository

logger = logging.getLogger(__name__)


class ToggleAvailabilityHandler:

    def __init__(self, menu_repo: MenuRepository) -> None:
        self._menu_repo = menu_repo

    def handle(self, code: str) -> MenuItemDTO:
        item = self._menu_repo.get_by_code(code)
        if item is None:
            raise UnknownItemError(f"Unknown item code: '{code}'")

        available = item.toggle_availability()
        self._menu_repo.save(item)
        logger.info("%s (%s) is now %s", item.name, item.code, "available" if available else "unavailable")
        return menu_item_to_dto(item)
