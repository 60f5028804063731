"""Application service: Show Order use case (query).

Shows the lines and the running bill; nothing is closed or saved.
"""

from __future__ import annotations

from restobill.application.dto import OrderDTO
from restobill.application.order_view import order_to_dto
from restobill.domain.exceptions import OrderNotFoundError
from restobill.domain.repository.menu_repository import MenuRepository
from restobill.domain.repository.order_repository import OrderRepository
from restobill.domain.service.bill_calculator import BillCalculator


class ShowOrderHandler:

    def __init__(
        self,
        order_repo: OrderRepository,
        menu_repo: MenuRepository,
    ) -> None:
        self._order_repo = order_repo
        self._menu_repo = menu_repo

    def handle(self, order_id: int) -> OrderDTO:
        order = self._order_repo.get_by_id(order_id)
        if order is None:
            raise OrderNotFoundError(f"Order #{order_id} not found")
        bill = BillCalculator(self._menu_repo).calculate(order)
        return order_to_dto(order, bill, self._menu_repo)
