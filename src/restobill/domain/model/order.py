"""Order aggregate — the core of the domain.

The Order is an aggregate root that owns its lines.
All business invariants are enforced here.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum

from restobill.domain.exceptions import (
    LineNotFoundError,
    OrderClosedError,
    OrderFullError,
)
from restobill.domain.model.table import MAX_TABLES, validate_table_number
from restobill.domain.model.value_objects import Quantity


class OrderKind(Enum):
    DINE_IN = "Dine-In"
    TAKEAWAY = "Takeaway"

    @property
    def label(self) -> str:
        return self.value


class OrderStatus(Enum):
    ACTIVE = "ACTIVE"
    CLOSED = "CLOSED"


@dataclass
class OrderLine:
    """One menu code on an order and how many of it were asked for.

    Only the code is stored; name, price and category are looked up on
    the menu when the order is shown or billed.
    """

    code: str
    quantity: Quantity


# ---------------------------------------------------------------------------
# Constants for business rules
# ---------------------------------------------------------------------------
MAX_ITEMS_PER_ORDER = 60
MAX_ORDERS_PER_SESSION = 500
FIRST_ORDER_ID = 9001


@dataclass
class Order:
    """Aggregate root for restaurant orders (one KOT each).

    Use the ``Order.create()`` factory for new orders — it enforces all
    business rules.  The ``id`` stays ``None`` until the repository
    assigns the next KOT on first save.
    """

    id: int | None
    kind: OrderKind
    table_number: int | None
    opened_at: datetime
    lines: list[OrderLine] = field(default_factory=list)
    status: OrderStatus = OrderStatus.ACTIVE
    max_lines: int = MAX_ITEMS_PER_ORDER

    # --- Factory (used for NEW orders only) -----------------------------------

    @staticmethod
    def create(
        kind: OrderKind,
        opened_at: datetime,
        table_number: int | None = None,
        max_lines: int = MAX_ITEMS_PER_ORDER,
        max_tables: int = MAX_TABLES,
    ) -> Order:
        """Create a new active order.

        Dine-in orders must name a table in range; takeaway orders never
        carry one, whatever the caller passed. ``max_tables`` is the size of
        the floor the table must fit on.
        """
        if kind is OrderKind.DINE_IN:
            validate_table_number(table_number, max_tables)
        else:
            table_number = None
        return Order(
            id=None,
            kind=kind,
            table_number=table_number,
            opened_at=opened_at,
            max_lines=max_lines,
        )

    # --- Line mutations -------------------------------------------------------

    def add_line(self, code: str, quantity: Quantity) -> None:
        """Add ``quantity`` of ``code``, merging into an existing line.

        Appending a new distinct code fails once the order already holds
        ``max_lines`` lines; merging never does.
        """
        self.ensure_active()
        line = self.find_line(code)
        if line is not None:
            line.quantity = line.quantity + quantity
            return
        if len(self.lines) >= self.max_lines:
            raise OrderFullError(
                f"Order #{self.id} already has {self.max_lines} items"
            )
        self.lines.append(OrderLine(code=code, quantity=quantity))

    def remove_line(self, code: str) -> None:
        self.ensure_active()
        line = self._require_line(code)
        self.lines.remove(line)

    def set_line_quantity(self, code: str, new_quantity: int) -> None:
        """Replace a line's quantity in place; zero or less removes it."""
        self.ensure_active()
        line = self._require_line(code)
        if new_quantity <= 0:
            self.lines.remove(line)
            return
        line.quantity = Quantity(new_quantity)

    # --- State transitions ----------------------------------------------------

    def close(self) -> None:
        """Transition ACTIVE -> CLOSED.

        The bill must already have been produced (coordinated by the
        application handler); releasing the table is the caller's job too.
        """
        if self.status is OrderStatus.CLOSED:
            raise OrderClosedError(f"Order #{self.id} is already closed")
        self.status = OrderStatus.CLOSED

    def ensure_active(self) -> None:
        if self.status is not OrderStatus.ACTIVE:
            raise OrderClosedError(
                f"Order #{self.id} is closed and cannot be modified"
            )

    # --- Computed properties --------------------------------------------------

    @property
    def is_active(self) -> bool:
        return self.status is OrderStatus.ACTIVE

    @property
    def is_dine_in(self) -> bool:
        return self.kind is OrderKind.DINE_IN

    @property
    def line_count(self) -> int:
        return len(self.lines)

    def find_line(self, code: str) -> OrderLine | None:
        for line in self.lines:
            if line.code == code:
                return line
        return None

    # --- Internal helpers -----------------------------------------------------

    def _require_line(self, code: str) -> OrderLine:
        line = self.find_line(code)
        if line is None:
            raise LineNotFoundError(f"Item '{code}' is not on order #{self.id}")
        return line

