"""Bill — the derived charges for one order.  Never stored."""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal

from restobill.domain.model.value_objects import Money


@dataclass(frozen=True)
class Bill:
    subtotal: Money
    gst: Money
    service: Money
    discount: Money
    total: Money
    discount_rate: Decimal = Decimal("0")

    @property
    def pre_discount(self) -> Money:
        return self.subtotal + self.gst + self.service

    @property
    def discount_percent(self) -> int:
        """Applied discount as a whole percentage, e.g. 10."""
        return int(self.discount_rate * 100)

    @property
    def has_discount(self) -> bool:
        return self.discount_rate > 0
