"""Application service: Bill Order use case (close a KOT).

Orchestrates the bill calculator, the receipt renderer and the receipt
store, then closes the order and frees its table.

The in-memory closure is the source of truth: if the receipt file cannot
be written the order is still closed and the table still released, and
the failure is reported afterwards as ReceiptPersistError.
"""

from __future__ import annotations

import logging

from restobill.application.dto import ReceiptDTO
from restobill.application.order_view import bill_to_dto
from restobill.application.receipt_renderer import render_receipt
from restobill.domain.exceptions import (
    EmptyOrderError,
    OrderNotFoundError,
    ReceiptPersistError,
)
from restobill.domain.model.table import TableRegistry
from restobill.domain.repository.menu_repository import MenuRepository
from restobill.domain.repository.order_repository import OrderRepository
from restobill.domain.repository.receipt_store import ReceiptStore
from restobill.domain.service.bill_calculator import BillCalculator

logger = logging.getLogger(__name__)


class BillOrderHandler:

    def __init__(
        self,
        order_repo: OrderRepository,
        menu_repo: MenuRepository,
        tables: TableRegistry,
        receipt_store: ReceiptStore,
    ) -> None:
        self._order_repo = order_repo
        self._menu_repo = menu_repo
        self._tables = tables
        self._receipt_store = receipt_store

    def handle(self, order_id: int) -> ReceiptDTO:
        order = self._order_repo.get_by_id(order_id)
        if order is None:
            raise OrderNotFoundError(f"Order #{order_id} not found")
        order.ensure_active()
        if not order.lines:
            raise EmptyOrderError(f"Order #{order_id} has no items")

        bill = BillCalculator(self._menu_repo).calculate(order)
        text = render_receipt(order, bill, self._menu_repo)

        path = None
        persist_error: OSError | None = None
        try:
            path = self._receipt_store.save(order_id, text)
        except OSError as exc:
            logger.error("Could not write receipt for order #%s: %s", order_id, exc)
            persist_error = exc

        order.close()
        if order.table_number is not None:
            self._tables.release(order.table_number)
        self._order_repo.save(order)
        logger.info("Billed order #%s, total %s", order_id, bill.total)

        receipt = ReceiptDTO(order_id=order_id, text=text, bill=bill_to_dto(bill), path=path)
        if persist_error is not None:
            raise ReceiptPersistError(
                f"Failed to write receipt for order #{order_id}: {persist_error}",
                receipt=receipt,
            ) from persist_error
        return receipt
