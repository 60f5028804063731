"""The house menu loaded at startup."""

from __future__ import annotations

from restobill.domain.model.menu import Category, MenuItem
from restobill.domain.model.value_objects import Money

S = Category.STARTER
M = Category.MAIN_COURSE
B = Category.BEVERAGE
D = Category.DESSERT

DEFAULT_MENU: list[tuple[str, str, Category, str]] = [
    ("S01", "Garlic Bread", S, "120.00"),
    ("S02", "Veg Spring Roll", S, "140.00"),
    ("S03", "Chicken Tikka", S, "260.00"),
    ("S04", "Paneer Tikka", S, "220.00"),
    ("S05", "French Fries", S, "130.00"),
    ("S06", "Chicken Wings", S, "290.00"),
    ("S07", "Masala Papad", S, "60.00"),

    ("M01", "Butter Chicken", M, "320.00"),
    ("M02", "Paneer Butter Masala", M, "300.00"),
    ("M03", "Hyderabadi Chicken Biryani", M, "280.00"),
    ("M04", "Veg Biryani", M, "240.00"),
    ("M05", "Margherita Pizza", M, "350.00"),
    ("M06", "Farmhouse Pizza", M, "420.00"),
    ("M07", "Grilled Fish", M, "380.00"),
    ("M08", "Chicken Fried Rice", M, "220.00"),
    ("M09", "Mixed Veg Curry + Roti", M, "180.00"),

    ("B01", "Masala Chai", B, "40.00"),
    ("B02", "Cold Coffee", B, "120.00"),
    ("B03", "Mango Lassi", B, "110.00"),
    ("B04", "Soft Drink (500ml)", B, "80.00"),
    ("B05", "Lemonade", B, "85.00"),
    ("B06", "Mineral Water (1L)", B, "50.00"),

    ("D01", "Gulab Jamun (2 pcs)", D, "90.00"),
    ("D02", "Brownie with Ice Cream", D, "210.00"),
    ("D03", "Rasmalai (2 pcs)", D, "130.00"),
    ("D04", "Fruit Salad", D, "150.00"),
    ("D05", "Kulfi", D, "110.00"),
    ("D06", "Ice Cream Scoop", D, "70.00"),
    ("D07", "Jalebi (2 pcs)", D, "95.00"),
]


def default_menu_items() -> list[MenuItem]:
    """Fresh MenuItem objects for the default menu, all available."""
    return [
        MenuItem(code=code, name=name, category=category, price=Money.of(price))
        for code, name, category, price in DEFAULT_MENU
    ]
