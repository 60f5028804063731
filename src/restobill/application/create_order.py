"""Application service: Create Order use case.

Opens a new KOT.  For dine-in orders the table is checked before the
order is stored and reserved right after it receives its id, so a
failed create never leaves a table held or an id consumed.
"""

from __future__ import annotations

import logging
from datetime import datetime
from typing import Callable

from restobill.application.dto import OrderSummaryDTO
from restobill.application.order_view import order_to_summary
from restobill.domain.exceptions import CapacityExceededError
from restobill.domain.model.order import MAX_ORDERS_PER_SESSION, Order, OrderKind
from restobill.domain.model.table import TableRegistry
from restobill.domain.repository.order_repository import OrderRepository

logger = logging.getLogger(__name__)

Clock = Callable[[], datetime]


def local_now() -> datetime:
    return datetime.now().astimezone()


class CreateOrderHandler:

    def __init__(
        self,
        order_repo: OrderRepository,
        tables: TableRegistry,
        clock: Clock = local_now,
        max_orders: int = MAX_ORDERS_PER_SESSION,
    ) -> None:
        self._order_repo = order_repo
        self._tables = tables
        self._clock = clock
        self._max_orders = max_orders

    def handle(self, kind: OrderKind, table_number: int | None = None) -> OrderSummaryDTO:
        """Create a new active order.

        Steps:
        1. Enforce the per-session order cap.
        2. Validate the table (dine-in only) before anything is stored.
        3. Persist the order, which assigns its KOT.
        4. Reserve the table against that KOT.
        """
        if self._order_repo.count() >= self._max_orders:
            raise CapacityExceededError(
                f"Order limit reached ({self._max_orders} orders this session)"
            )

        order = Order.create(
            kind=kind,
            opened_at=self._clock(),
            table_number=table_number,
            max_tables=self._tables.max_tables,
        )
        if order.table_number is not None:
            self._tables.ensure_free(order.table_number)

        self._order_repo.save(order)
        if order.table_number is not None:
            self._tables.reserve(order.table_number, order.id)  # type: ignore[arg-type]

        logger.info(
            "Created order #%s (%s%s)",
            order.id,
            order.kind.label,
            f", table {order.table_number}" if order.table_number is not None else "",
        )
        return order_to_summary(order)
