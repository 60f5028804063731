"""In-memory implementation of OrderRepository.

Orders only live for the session.  KOTs start at ``FIRST_ORDER_ID`` and
are handed out once each; closed orders stay in the store so their ids
are never reused.
"""

from __future__ import annotations

from restobill.domain.model.order import FIRST_ORDER_ID, Order
from restobill.domain.repository.order_repository import OrderRepository


class InMemoryOrderRepository(OrderRepository):

    def __init__(self, first_id: int = FIRST_ORDER_ID) -> None:
        self._store: dict[int, Order] = {}
        self._next_id = first_id

    # --- OrderRepository interface --------------------------------------------

    def next_id(self) -> int:
        return self._next_id

    def get_by_id(self, order_id: int) -> Order | None:
        return self._store.get(order_id)

    def list_all(self) -> list[Order]:
        # dicts keep insertion order, and ids are assigned in that order
        return list(self._store.values())

    def save(self, order: Order) -> None:
        if order.id is None:
            order.id = self._next_id
            self._next_id += 1
        self._store[order.id] = order
