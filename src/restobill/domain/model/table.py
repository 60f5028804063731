"""TableRegistry aggregate — which dine-in table is held by which order.

Invariant: at any moment no two active orders share a table.  A table is
reserved when a dine-in order is created and released when it is billed.
"""

from __future__ import annotations

from dataclasses import dataclass

from restobill.domain.exceptions import InvalidTableError, TableOccupiedError

MAX_TABLES = 50


def validate_table_number(table_number: int | None, max_tables: int = MAX_TABLES) -> int:
    if (
        table_number is None
        or isinstance(table_number, bool)
        or not isinstance(table_number, int)
        or not 1 <= table_number <= max_tables
    ):
        raise InvalidTableError(
            f"Table number must be between 1 and {max_tables}, got {table_number}"
        )
    return table_number


@dataclass(frozen=True)
class TableSlot:
    """Snapshot of one table: free, or held by ``order_id``."""

    number: int
    order_id: int | None

    @property
    def is_free(self) -> bool:
        return self.order_id is None


class TableRegistry:

    def __init__(self, max_tables: int = MAX_TABLES) -> None:
        self._max_tables = max_tables
        self._occupants: dict[int, int] = {}

    @property
    def max_tables(self) -> int:
        return self._max_tables

    def ensure_free(self, table_number: int) -> None:
        """Raise unless ``table_number`` is in range and not reserved."""
        validate_table_number(table_number, self._max_tables)
        holder = self._occupants.get(table_number)
        if holder is not None:
            raise TableOccupiedError(
                f"Table {table_number} is occupied by order #{holder}"
            )

    def reserve(self, table_number: int, order_id: int) -> None:
        self.ensure_free(table_number)
        self._occupants[table_number] = order_id

    def release(self, table_number: int) -> None:
        """Free a table; releasing a free table does nothing."""
        validate_table_number(table_number, self._max_tables)
        self._occupants.pop(table_number, None)

    def occupant(self, table_number: int) -> int | None:
        validate_table_number(table_number, self._max_tables)
        return self._occupants.get(table_number)

    def status(self) -> list[TableSlot]:
        return [
            TableSlot(number=n, order_id=self._occupants.get(n))
            for n in range(1, self._max_tables + 1)
        ]
