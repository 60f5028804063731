"""Application service: List Active Orders use case (query)."""

from __future__ import annotations

from restobill.application.dto import OrderSummaryDTO
from restobill.application.order_view import order_to_summary
from restobill.domain.repository.order_repository import OrderRepository


class ListActiveOrdersHandler:

    def __init__(self, order_repo: OrderRepository) -> None:
        self._order_repo = order_repo

    def handle(self) -> list[OrderSummaryDTO]:
        """Active orders, oldest first."""
        return [order_to_summary(order) for order in self._order_repo.list_active()]
