"""Tests for the read-side use cases and availability toggling."""

import pytest

from restobill.domain.exceptions import OrderNotFoundError, UnknownItemError
from restobill.domain.model.order import OrderKind
from tests.fakes import make_restaurant


class TestShowMenu:

    def test_sections_in_category_order(self):
        sections = make_restaurant().show_menu().handle()
        assert [s.category for s in sections] == ["Starters", "Main Course", "Beverages", "Desserts"]
        assert [i.code for i in sections[0].items] == [f"S0{n}" for n in range(1, 8)]
        assert sections[2].items[3].price == "80.00"

    def test_lookup(self):
        item = make_restaurant().show_menu().lookup("S01")
        assert item.name == "Garlic Bread"
        assert item.price == "120.00"
        assert item.category == "Starters"

    def test_lookup_unknown(self):
        with pytest.raises(UnknownItemError):
            make_restaurant().show_menu().lookup("Q01")


class TestToggleAvailability:

    def test_flips_and_returns_new_state(self):
        restaurant = make_restaurant()
        assert restaurant.toggle_availability().handle("D05").available is False
        assert restaurant.show_menu().lookup("D05").available is False
        assert restaurant.toggle_availability().handle("D05").available is True

    def test_unknown_code(self):
        with pytest.raises(UnknownItemError, match="'Q01'"):
            make_restaurant().toggle_availability().handle("Q01")


class TestListActiveOrders:

    def test_only_active_in_creation_order(self):
        restaurant = make_restaurant()
        create = restaurant.create_order()
        first = create.handle(OrderKind.DINE_IN, 1).id
        second = create.handle(OrderKind.TAKEAWAY).id
        third = create.handle(OrderKind.DINE_IN, 2).id
        restaurant.add_line().handle(second, "S01", 1)
        restaurant.bill_order().handle(second)

        active = restaurant.list_active_orders().handle()
        assert [o.id for o in active] == [first, third]
        assert active[0].kind == "Dine-In"
        assert active[0].table_number == 1

    def test_empty(self):
        assert make_restaurant().list_active_orders().handle() == []


class TestShowTables:

    def test_reports_order_and_line_count(self):
        restaurant = make_restaurant()
        order_id = restaurant.create_order().handle(OrderKind.DINE_IN, 4).id
        restaurant.add_line().handle(order_id, "S01", 2)
        restaurant.add_line().handle(order_id, "B01", 1)

        slots = restaurant.show_tables().handle()
        assert len(slots) == 50
        assert slots[3].order_id == order_id
        assert slots[3].line_count == 2
        assert slots[0].is_free
        assert slots[0].line_count == 0


class TestShowOrder:

    def test_lines_and_running_bill(self):
        restaurant = make_restaurant()
        order_id = restaurant.create_order().handle(OrderKind.DINE_IN, 5).id
        restaurant.add_line().handle(order_id, "M01", 2)
        restaurant.add_line().handle(order_id, "B02", 1)

        dto = restaurant.show_order().handle(order_id)

        assert dto.status == "ACTIVE"
        assert dto.line_count == 2
        assert [(l.code, l.name, l.quantity, l.amount) for l in dto.lines] == [
            ("M01", "Butter Chicken", 2, "640.00"),
            ("B02", "Cold Coffee", 1, "120.00"),
        ]
        assert dto.bill.total == "868.00"
        assert restaurant.order_repo.get_by_id(order_id).is_active

    def test_unknown_order(self):
        with pytest.raises(OrderNotFoundError):
            make_restaurant().show_order().handle(1)
