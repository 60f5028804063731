"""Data Transfer Objects — plain containers that cross layer boundaries.

DTOs carry data between the CLI and application layers without
exposing domain internals to the outside world.  Money values are
pre-formatted with two decimals.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class MenuItemDTO:
    code: str
    name: str
    category: str
    price: str
    available: bool


@dataclass(frozen=True)
class MenuSectionDTO:
    """Output: one category heading and its items, in menu order."""

    category: str
    items: list[MenuItemDTO]


@dataclass(frozen=True)
class BillDTO:
    subtotal: str
    gst: str
    service: str
    discount: str
    total: str
    discount_percent: int  # 0 when no tier applies


@dataclass(frozen=True)
class OrderLineDTO:
    """Output: a single line as displayed to the operator."""

    code: str
    name: str
    quantity: int
    amount: str


@dataclass(frozen=True)
class OrderSummaryDTO:
    """Output: the header of an order, without its lines."""

    id: int
    kind: str
    table_number: int | None
    status: str
    line_count: int
    opened_at: str


@dataclass(frozen=True)
class OrderDTO:
    """Output: a complete order with its running bill."""

    id: int
    kind: str
    table_number: int | None
    status: str
    opened_at: str
    lines: list[OrderLineDTO]
    bill: BillDTO

    @property
    def line_count(self) -> int:
        return len(self.lines)


@dataclass(frozen=True)
class TableStatusDTO:
    number: int
    order_id: int | None
    line_count: int

    @property
    def is_free(self) -> bool:
        return self.order_id is None


@dataclass(frozen=True)
class ReceiptDTO:
    """Output: a billed order's receipt and where it was saved.

    ``path`` is None when the receipt file could not be written.
    """

    order_id: int
    text: str
    bill: BillDTO
    path: Path | None
