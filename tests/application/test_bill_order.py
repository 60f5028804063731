"""Integration tests for the BillOrder use case (closing a KOT)."""

import pytest

from restobill.domain.exceptions import (
    EmptyOrderError,
    OrderClosedError,
    OrderNotFoundError,
    ReceiptPersistError,
)
from restobill.domain.model.order import OrderKind, OrderStatus
from tests.fakes import FailingReceiptStore, FakeReceiptStore, make_restaurant


def _order_with(restaurant, kind, table, *lines):
    order_id = restaurant.create_order().handle(kind, table).id
    for code, qty in lines:
        restaurant.add_line().handle(order_id, code, qty)
    return order_id


class TestBillOrderHappyPath:

    def test_returns_bill_and_receipt(self):
        store = FakeReceiptStore()
        restaurant = make_restaurant(store)
        order_id = _order_with(restaurant, OrderKind.TAKEAWAY, None, ("B01", 2), ("S05", 1))

        receipt = restaurant.bill_order().handle(order_id)

        assert receipt.order_id == order_id
        assert receipt.bill.total == "216.50"
        assert receipt.bill.discount_percent == 0
        assert str(receipt.path) == f"receipt_{order_id}.txt"
        assert store.saved[order_id] == receipt.text

    def test_closes_order(self):
        restaurant = make_restaurant()
        order_id = _order_with(restaurant, OrderKind.TAKEAWAY, None, ("S01", 1))
        restaurant.bill_order().handle(order_id)
        assert restaurant.order_repo.get_by_id(order_id).status == OrderStatus.CLOSED

    def test_tier_one_bill_after_adding_dessert(self):
        restaurant = make_restaurant()
        order_id = _order_with(
            restaurant, OrderKind.DINE_IN, 5, ("M01", 2), ("B02", 1), ("D02", 1)
        )
        receipt = restaurant.bill_order().handle(order_id)
        assert receipt.bill.discount == "110.95"
        assert receipt.bill.total == "998.55"
        assert "Discount (10%):    110.95" in receipt.text


class TestTableLifecycle:

    def test_table_freed_on_billing_and_reusable(self):
        restaurant = make_restaurant()
        first = _order_with(restaurant, OrderKind.DINE_IN, 7, ("S01", 1))
        assert restaurant.tables.occupant(7) == first

        restaurant.bill_order().handle(first)
        assert restaurant.tables.occupant(7) is None

        second = restaurant.create_order().handle(OrderKind.DINE_IN, 7).id
        assert second == first + 1
        assert restaurant.tables.occupant(7) == second


class TestBillOrderValidation:

    def test_unknown_order_rejected(self):
        restaurant = make_restaurant()
        with pytest.raises(OrderNotFoundError):
            restaurant.bill_order().handle(9999)

    def test_empty_order_rejected_and_left_open(self):
        restaurant = make_restaurant()
        order_id = _order_with(restaurant, OrderKind.DINE_IN, 2)
        with pytest.raises(EmptyOrderError, match="has no items"):
            restaurant.bill_order().handle(order_id)
        assert restaurant.order_repo.get_by_id(order_id).is_active
        assert restaurant.tables.occupant(2) == order_id

    def test_billing_twice_rejected(self):
        store = FakeReceiptStore()
        restaurant = make_restaurant(store)
        order_id = _order_with(restaurant, OrderKind.TAKEAWAY, None, ("S01", 1))
        restaurant.bill_order().handle(order_id)
        with pytest.raises(OrderClosedError):
            restaurant.bill_order().handle(order_id)
        assert list(store.saved) == [order_id]


class TestReceiptPersistFailure:

    def test_order_still_closed_and_table_released(self):
        restaurant = make_restaurant(FailingReceiptStore())
        order_id = _order_with(restaurant, OrderKind.DINE_IN, 9, ("M03", 1))

        with pytest.raises(ReceiptPersistError, match="Failed to write receipt") as excinfo:
            restaurant.bill_order().handle(order_id)

        assert restaurant.order_repo.get_by_id(order_id).status == OrderStatus.CLOSED
        assert restaurant.tables.occupant(9) is None
        receipt = excinfo.value.receipt
        assert receipt.path is None
        assert receipt.order_id == order_id
        assert "KOT: " + str(order_id) in receipt.text
