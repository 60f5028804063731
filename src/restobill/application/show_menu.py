"""Application service: Show Menu use case (query)."""

from __future__ import annotations

from restobill.application.dto import MenuItemDTO, MenuSectionDTO
from restobill.application.order_view import menu_item_to_dto
from restobill.domain.exceptions import UnknownItemError
from restobill.domain.model.menu import Category
from restobill.domain.repository.menu_repository import MenuRepository


class ShowMenuHandler:

    def __init__(self, menu_repo: MenuRepository) -> None:
        self._menu_repo = menu_repo

    def handle(self) -> list[MenuSectionDTO]:
        """The full menu, one section per category in category order."""
        return [
            MenuSectionDTO(
                category=category.label,
                items=[menu_item_to_dto(i) for i in self._menu_repo.list_by_category(category)],
            )
            for category in Category
        ]

    def lookup(self, code: str) -> MenuItemDTO:
        item = self._menu_repo.get_by_code(code)
        if item is None:
            raise UnknownItemError(f"Unknown item code: '{code}'")
        return menu_item_to_dto(item)
