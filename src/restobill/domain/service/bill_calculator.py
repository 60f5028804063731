"""Domain service: Bill Calculation.

Turns an order into its charges using the *current* menu: a price change
made while the order is open shows up on the bill.  Lines whose code no
longer resolves on the menu are skipped.

Charges are applied in a fixed order:

  subtotal -> GST on food -> service (dine-in) -> tier discount -> total

The discount is taken off the tax- and service-inclusive amount, so the
tier thresholds compare against that figure.
"""

from __future__ import annotations

from decimal import Decimal

from restobill.domain.model.bill import Bill
from restobill.domain.model.order import Order
from restobill.domain.model.value_objects import Money
from restobill.domain.repository.menu_repository import MenuRepository

# ---------------------------------------------------------------------------
# Rates and thresholds
# ---------------------------------------------------------------------------
GST_RATE_FOOD = Decimal("0.05")
SERVICE_RATE = Decimal("0.10")
DISCOUNT_TIER1_THRESHOLD = Money(Decimal("1000.00"))
DISCOUNT_TIER1_RATE = Decimal("0.10")
DISCOUNT_TIER2_THRESHOLD = Money(Decimal("2000.00"))
DISCOUNT_TIER2_RATE = Decimal("0.15")
NO_DISCOUNT = Decimal("0")


def discount_rate_for(pre_discount: Money) -> Decimal:
    """Tier rate for a pre-discount amount; thresholds are strict."""
    if pre_discount > DISCOUNT_TIER2_THRESHOLD:
        return DISCOUNT_TIER2_RATE
    if pre_discount > DISCOUNT_TIER1_THRESHOLD:
        return DISCOUNT_TIER1_RATE
    return NO_DISCOUNT


class BillCalculator:

    def __init__(self, menu_repo: MenuRepository) -> None:
        self._menu_repo = menu_repo

    def calculate(self, order: Order) -> Bill:
        subtotal = Money.zero()
        food_subtotal = Money.zero()

        for line in order.lines:
            item = self._menu_repo.get_by_code(line.code)
            if item is None:
                continue
            amount = item.price * line.quantity.value
            subtotal = subtotal + amount
            if not item.is_beverage:
                food_subtotal = food_subtotal + amount

        gst = food_subtotal.apply_rate(GST_RATE_FOOD)
        service = subtotal.apply_rate(SERVICE_RATE) if order.is_dine_in else Money.zero()
        pre_discount = subtotal + gst + service

        rate = discount_rate_for(pre_discount)
        discount = pre_discount.apply_rate(rate)

        return Bill(
            subtotal=subtotal,
            gst=gst,
            service=service,
            discount=discount,
            total=pre_discount - discount,
            discount_rate=rate,
        )
