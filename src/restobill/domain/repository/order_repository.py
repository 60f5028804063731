"""Abstract repository for Order aggregate."""

from __future__ import annotations

from abc import ABC, abstractmethod

from restobill.domain.model.order import Order


class OrderRepository(ABC):

    @abstractmethod
    def next_id(self) -> int:
        """Return the KOT the next new order will receive."""

    @abstractmethod
    def get_by_id(self, order_id: int) -> Order | None:
        """Return an order by its KOT, or None if not found."""

    @abstractmethod
    def list_all(self) -> list[Order]:
        """Return every order of the session in creation order."""

    @abstractmethod
    def save(self, order: Order) -> None:
        """Persist a new or updated order; new orders get the next KOT."""

    def list_active(self) -> list[Order]:
        return [order for order in self.list_all() if order.is_active]

    def count(self) -> int:
        return len(self.list_all())
