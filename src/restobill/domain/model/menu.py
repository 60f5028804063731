"""Menu aggregate — the dishes and drinks the kitchen can take orders for.

Menu items live independently of orders. An order line refers to an item
only by its code; prices and categories are read from the menu whenever a
bill is calculated.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from restobill.domain.exceptions import ValidationError
from restobill.domain.model.value_objects import Money

MAX_MENU_ITEMS = 80
MAX_CODE_LENGTH = 5


class Category(Enum):
    STARTER = "Starters"
    MAIN_COURSE = "Main Course"
    BEVERAGE = "Beverages"
    DESSERT = "Desserts"

    @property
    def label(self) -> str:
        return self.value


@dataclass
class MenuItem:
    """A single entry on the menu.

    Invariants:
    - ``code`` is 1-5 alphanumeric characters
    - ``category`` never changes after creation
    - flipping ``available`` does not touch lines already on an order
    """

    code: str
    name: str
    category: Category
    price: Money
    available: bool = True

    def __post_init__(self) -> None:
        if not self.code or len(self.code) > MAX_CODE_LENGTH or not self.code.isalnum():
            raise ValidationError(
                f"Menu code must be 1-{MAX_CODE_LENGTH} alphanumeric characters, "
                f"got {self.code!r}"
            )
        if not self.name or not self.name.strip():
            raise ValidationError("Menu item name is required")
        if not isinstance(self.category, Category):
            raise ValidationError(f"Unknown category: {self.category!r}")

    @property
    def is_beverage(self) -> bool:
        return self.category is Category.BEVERAGE

    def toggle_availability(self) -> bool:
        """Flip availability and return the new value."""
        self.available = not self.available
        return self.available
