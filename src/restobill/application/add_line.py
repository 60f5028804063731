"""Application service: Add Line use case.

Resolves the item code against the menu (it must exist and be available
right now) and lets the Order aggregate merge or append the line.
"""

from __future__ import annotations

import logging

from restobill.domain.exceptions import (
    ItemUnavailableError,
    OrderNotFoundError,
    UnknownItemError,
)
from restobill.domain.model.value_objects import Quantity
from restobill.domain.repository.menu_repository import MenuRepository
from restobill.domain.repository.order_repository import OrderRepository

logger = logging.getLogger(__name__)


class AddLineHandler:

    def __init__(
        self,
        order_repo: OrderRepository,
        menu_repo: MenuRepository,
    ) -> None:
        self._order_repo = order_repo
        self._menu_repo = menu_repo

    def handle(self, order_id: int, code: str, quantity: int) -> int:
        """Add ``quantity`` of ``code`` to the order.

        Returns the line's quantity after the add (larger than
        ``quantity`` when it merged into an existing line).
        """
        order = self._order_repo.get_by_id(order_id)
        if order is None:
            raise OrderNotFoundError(f"Order #{order_id} not found")
        order.ensure_active()

        qty = Quantity(quantity)

        item = self._menu_repo.get_by_code(code)
        if item is None:
            raise UnknownItemError(f"Unknown item code: '{code}'")
        if not item.available:
            raise ItemUnavailableError(f"{item.name} ({item.code}) is currently unavailable")

        order.add_line(item.code, qty)
        self._order_repo.save(order)

        line = order.find_line(item.code)
        logger.info("Order #%s: added %s x %s", order_id, qty, item.code)
        return line.quantity.value  # type: ignore[union-attr]
