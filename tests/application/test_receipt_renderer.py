"""Tests for the receipt text layout."""

from restobill.application.receipt_renderer import render_receipt
from restobill.domain.model.order import Order, OrderKind
from restobill.domain.model.value_objects import Quantity
from restobill.domain.service.bill_calculator import BillCalculator
from restobill.infrastructure.menu_seed import default_menu_items
from restobill.infrastructure.persistence.in_memory_menu_repository import (
    InMemoryMenuRepository,
)
from tests.fakes import FIXED_TIME


def _render(kind: OrderKind, table: int | None, *lines: tuple[str, int]) -> str:
    menu = InMemoryMenuRepository(default_menu_items())
    order = Order.create(kind, FIXED_TIME, table_number=table)
    order.id = 9001
    for code, qty in lines:
        order.add_line(code, Quantity(qty))
    bill = BillCalculator(menu).calculate(order)
    return render_receipt(order, bill, menu)


def _row(code: str, name: str, qty: str, amount: str) -> str:
    return f"{code.ljust(6)} {name.ljust(25)} {qty.ljust(6)} {amount.ljust(8)}"


class TestReceiptLayout:

    def test_dine_in_with_discount(self):
        text = _render(OrderKind.DINE_IN, 5, ("M01", 2), ("B02", 1), ("D02", 1))

        expected = "\n".join([
            "=" * 40,
            "               BILL / RECEIPT",
            "KOT: 9001",
            "Type: Dine-In",
            "Table: 5",
            "Date/Time: Mon Oct 19 12:30:00 2026",
            "-" * 40,
            _row("Code", "Item", "Qty", "Amount"),
            "-" * 40,
            _row("M01", "Butter Chicken", "2", "640.00"),
            _row("B02", "Cold Coffee", "1", "120.00"),
            _row("D02", "Brownie with Ice Cream", "1", "210.00"),
            "-" * 40,
            "Subtotal:          970.00",
            "GST (5% on food):   42.50",
            "Service:            97.00",
            "Discount (10%):    110.95",
            "TOTAL:             998.55",
            "=" * 40,
        ]) + "\n"
        assert text == expected

    def test_takeaway_has_no_table_and_plain_discount_label(self):
        text = _render(OrderKind.TAKEAWAY, None, ("B01", 2), ("S05", 1))
        lines = text.splitlines()
        assert "Type: Takeaway" in lines
        assert not any(line.startswith("Table:") for line in lines)
        assert "Discount:            0.00" in lines
        assert "TOTAL:             216.50" in lines

    def test_fifteen_percent_label(self):
        text = _render(OrderKind.DINE_IN, 1, ("M06", 4), ("B04", 1))
        assert "Discount (15%):    303.00" in text.splitlines()

    def test_long_names_truncated_to_column(self):
        text = _render(OrderKind.TAKEAWAY, None, ("M03", 1))
        assert _row("M03", "Hyderabadi Chicken Biryan", "1", "280.00") in text.splitlines()

    def test_rendering_is_repeatable_and_ascii(self):
        first = _render(OrderKind.DINE_IN, 3, ("S01", 1), ("M09", 2))
        second = _render(OrderKind.DINE_IN, 3, ("S01", 1), ("M09", 2))
        assert first == second
        first.encode("ascii")
        assert "\r" not in first
