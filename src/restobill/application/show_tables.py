"""Application service: Show Table Status use case (query)."""

from __future__ import annotations

from restobill.application.dto import TableStatusDTO
from restobill.domain.model.table import TableRegistry
from restobill.domain.repository.order_repository import OrderRepository


class ShowTablesHandler:

    def __init__(self, tables: TableRegistry, order_repo: OrderRepository) -> None:
        self._tables = tables
        self._order_repo = order_repo

    def handle(self) -> list[TableStatusDTO]:
        result: list[TableStatusDTO] = []
        for slot in self._tables.status():
            line_count = 0
            if slot.order_id is not None:
                order = self._order_repo.get_by_id(slot.order_id)
                line_count = order.line_count if order is not None else 0
            result.append(
                TableStatusDTO(number=slot.number, order_id=slot.order_id, line_count=line_count)
            )
        return result
