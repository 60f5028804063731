"""Application service: Remove Line use case."""

from __future__ import annotations

import logging

from restobill.domain.exceptions import OrderNotFoundError
from restobill.domain.repository.order_repository import OrderRepository

logger = logging.getLogger(__name__)


class RemoveLineHandler:

    def __init__(self, order_repo: OrderRepository) -> None:
        self._order_repo = order_repo

    def handle(self, order_id: int, code: str) -> None:
        order = self._order_repo.get_by_id(order_id)
        if order is None:
            raise OrderNotFoundError(f"Order #{order_id} not found")

        order.remove_line(code)
        self._order_repo.save(order)
        logger.info("Order #%s: removed %s", order_id, code)
