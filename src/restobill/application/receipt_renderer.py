"""Receipt rendering — the fixed-layout text printed and saved on billing.

Layout (40 columns wide)::

    ========================================
                   BILL / RECEIPT
    KOT: 9001
    Type: Dine-In
    Table: 5
    Date/Time: Mon Oct 19 12:30:00 2026
    ----------------------------------------
    Code   Item                      Qty    Amount
    ----------------------------------------
    M01    Butter Chicken            2      640.00
    ----------------------------------------
    Subtotal:          640.00
    GST (5% on food):   32.00
    Service:            64.00
    Discount:            0.00
    TOTAL:             736.00
    ========================================

The same text goes to the screen and to the receipt file.
"""

from __future__ import annotations

from restobill.application.order_view import format_timestamp
from restobill.domain.model.bill import Bill
from restobill.domain.model.order import Order
from restobill.domain.model.value_objects import Money
from restobill.domain.repository.menu_repository import MenuRepository

RULE_WIDTH = 40
BANNER = "=" * RULE_WIDTH
SEPARATOR = "-" * RULE_WIDTH
TITLE = " " * 15 + "BILL / RECEIPT"

CODE_WIDTH = 6
NAME_WIDTH = 25
QTY_WIDTH = 6
AMOUNT_WIDTH = 8
LABEL_WIDTH = 17


def _ascii(text: str) -> str:
    return text.encode("ascii", errors="replace").decode("ascii")


def _item_row(code: str, name: str, qty: str, amount: str) -> str:
    return (
        f"{code:<{CODE_WIDTH}} {name[:NAME_WIDTH]:<{NAME_WIDTH}} "
        f"{qty:<{QTY_WIDTH}} {amount:<{AMOUNT_WIDTH}}"
    )


def _total_row(label: str, amount: Money) -> str:
    return f"{label:<{LABEL_WIDTH}}{amount.amount:>{AMOUNT_WIDTH}.2f}"


def discount_label(bill: Bill) -> str:
    if bill.has_discount:
        return f"Discount ({bill.discount_percent}%):"
    return "Discount:"


def render_receipt(order: Order, bill: Bill, menu_repo: MenuRepository) -> str:
    lines = [
        BANNER,
        TITLE,
        f"KOT: {order.id}",
        f"Type: {order.kind.label}",
    ]
    if order.is_dine_in:
        lines.append(f"Table: {order.table_number}")
    lines += [
        f"Date/Time: {format_timestamp(order.opened_at)}",
        SEPARATOR,
        _item_row("Code", "Item", "Qty", "Amount"),
        SEPARATOR,
    ]

    for line in order.lines:
        item = menu_repo.get_by_code(line.code)
        if item is None:
            continue
        amount = item.price * line.quantity.value
        lines.append(
            _item_row(item.code, item.name, str(line.quantity), f"{amount.amount:.2f}")
        )

    lines += [
        SEPARATOR,
        _total_row("Subtotal:", bill.subtotal),
        _total_row("GST (5% on food):", bill.gst),
        _total_row("Service:", bill.service),
        _total_row(discount_label(bill), bill.discount),
        _total_row("TOTAL:", bill.total),
        BANNER,
    ]
    return _ascii("\n".join(lines) + "\n")
