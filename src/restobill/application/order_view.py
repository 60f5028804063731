"""Mapping from domain objects to DTOs, shared by the query handlers."""

from __future__ import annotations

from datetime import datetime

from restobill.application.dto import (
    BillDTO,
    MenuItemDTO,
    OrderDTO,
    OrderLineDTO,
    OrderSummaryDTO,
)
from restobill.domain.model.bill import Bill
from restobill.domain.model.menu import MenuItem
from restobill.domain.model.order import Order
from restobill.domain.repository.menu_repository import MenuRepository


def format_timestamp(moment: datetime) -> str:
    """ctime layout in the order's own (local) zone: 'Mon Oct 19 12:30:00 2026'."""
    return moment.ctime()


def menu_item_to_dto(item: MenuItem) -> MenuItemDTO:
    return MenuItemDTO(
        code=item.code,
        name=item.name,
        category=item.category.label,
        price=str(item.price),
        available=item.available,
    )


def bill_to_dto(bill: Bill) -> BillDTO:
    return BillDTO(
        subtotal=str(bill.subtotal),
        gst=str(bill.gst),
        service=str(bill.service),
        discount=str(bill.discount),
        total=str(bill.total),
        discount_percent=bill.discount_percent,
    )


def order_to_summary(order: Order) -> OrderSummaryDTO:
    return OrderSummaryDTO(
        id=order.id,  # type: ignore[arg-type]
        kind=order.kind.label,
        table_number=order.table_number,
        status=order.status.value,
        line_count=order.line_count,
        opened_at=format_timestamp(order.opened_at),
    )


def order_to_dto(order: Order, bill: Bill, menu_repo: MenuRepository) -> OrderDTO:
    lines: list[OrderLineDTO] = []
    for line in order.lines:
        item = menu_repo.get_by_code(line.code)
        if item is None:
            continue
        lines.append(
            OrderLineDTO(
                code=item.code,
                name=item.name,
                quantity=line.quantity.value,
                amount=str(item.price * line.quantity.value),
            )
        )
    return OrderDTO(
        id=order.id,  # type: ignore[arg-type]
        kind=order.kind.label,
        table_number=order.table_number,
        status=order.status.value,
        opened_at=format_timestamp(order.opened_at),
        lines=lines,
        bill=bill_to_dto(bill),
    )
