"""Composition root — wires concrete implementations to domain interfaces.

This is the only place in the codebase that knows about *all* layers.
Every other module depends only on abstractions.  All session state
hangs off one ``Restaurant`` value, so independent instances never share
orders, tables or menu flags.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from restobill.application.add_line import AddLineHandler
from restobill.application.bill_order import BillOrderHandler
from restobill.application.create_order import Clock, CreateOrderHandler, local_now
from restobill.application.list_active_orders import ListActiveOrdersHandler
from restobill.application.remove_line import RemoveLineHandler
from restobill.application.show_menu import ShowMenuHandler
from restobill.application.show_order import ShowOrderHandler
from restobill.application.show_tables import ShowTablesHandler
from restobill.application.toggle_availability import ToggleAvailabilityHandler
from restobill.application.update_line_quantity import UpdateLineQuantityHandler
from restobill.domain.model.table import TableRegistry
from restobill.domain.repository.menu_repository import MenuRepository
from restobill.domain.repository.order_repository import OrderRepository
from restobill.domain.repository.receipt_store import ReceiptStore
from restobill.infrastructure.menu_seed import default_menu_items
from restobill.infrastructure.persistence.in_memory_menu_repository import (
    InMemoryMenuRepository,
)
from restobill.infrastructure.persistence.in_memory_order_repository import (
    InMemoryOrderRepository,
)
from restobill.infrastructure.receipt.file_receipt_store import FileReceiptStore


@dataclass
class Restaurant:
    menu_repo: MenuRepository
    order_repo: OrderRepository
    tables: TableRegistry
    receipt_store: ReceiptStore
    clock: Clock = local_now

    # --- Use cases ------------------------------------------------------------

    def show_menu(self) -> ShowMenuHandler:
        return ShowMenuHandler(self.menu_repo)

    def toggle_availability(self) -> ToggleAvailabilityHandler:
        return ToggleAvailabilityHandler(self.menu_repo)

    def create_order(self) -> CreateOrderHandler:
        return CreateOrderHandler(self.order_repo, self.tables, clock=self.clock)

    def add_line(self) -> AddLineHandler:
        return AddLineHandler(self.order_repo, self.menu_repo)

    def remove_line(self) -> RemoveLineHandler:
        return RemoveLineHandler(self.order_repo)

    def update_line_quantity(self) -> UpdateLineQuantityHandler:
        return UpdateLineQuantityHandler(self.order_repo)

    def show_order(self) -> ShowOrderHandler:
        return ShowOrderHandler(self.order_repo, self.menu_repo)

    def list_active_orders(self) -> ListActiveOrdersHandler:
        return ListActiveOrdersHandler(self.order_repo)

    def show_tables(self) -> ShowTablesHandler:
        return ShowTablesHandler(self.tables, self.order_repo)

    def bill_order(self) -> BillOrderHandler:
        return BillOrderHandler(
            order_repo=self.order_repo,
            menu_repo=self.menu_repo,
            tables=self.tables,
            receipt_store=self.receipt_store,
        )


def build_restaurant(
    receipt_dir: Path | None = None,
    clock: Clock = local_now,
) -> Restaurant:
    """A fresh session: default menu, no orders, every table free.

    Receipts go to ``receipt_dir``, or the current working directory.
    """
    return Restaurant(
        menu_repo=InMemoryMenuRepository(default_menu_items()),
        order_repo=InMemoryOrderRepository(),
        tables=TableRegistry(),
        receipt_store=FileReceiptStore(receipt_dir if receipt_dir is not None else Path.cwd()),
        clock=clock,
    )
