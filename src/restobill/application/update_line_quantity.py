"""Application service: Update Line Quantity use case.

A new quantity of zero or less removes the line, exactly as the
Remove Line use case would.
"""

from __future__ import annotations

import logging

from restobill.domain.exceptions import OrderNotFoundError
from restobill.domain.repository.order_repository import OrderRepository

logger = logging.getLogger(__name__)


class UpdateLineQuantityHandler:

    def __init__(self, order_repo: OrderRepository) -> None:
        self._order_repo = order_repo

    def handle(self, order_id: int, code: str, new_quantity: int) -> None:
        order = self._order_repo.get_by_id(order_id)
        if order is None:
            raise OrderNotFoundError(f"Order #{order_id} not found")

        order.set_line_quantity(code, new_quantity)
        self._order_repo.save(order)

        if new_quantity <= 0:
            logger.info("Order #%s: removed %s (quantity %s)", order_id, code, new_quantity)
        else:
            logger.info("Order #%s: %s quantity set to %s", order_id, code, new_quantity)
