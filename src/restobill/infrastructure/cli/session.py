"""Interactive, menu-driven session for the till operator.

Every domain error is reported as a one-line diagnostic and the session
carries on; only option 8 (or end of input) ends it.
"""

from __future__ import annotations

import click

from restobill.application.dto import (
    MenuSectionDTO,
    OrderDTO,
    ReceiptDTO,
)
from restobill.domain.exceptions import (
    DomainException,
    OrderFullError,
    ReceiptPersistError,
)
from restobill.domain.model.order import OrderKind
from restobill.infrastructure.bootstrap import Restaurant

MAIN_MENU = """
====== Restaurant Management System ======
1. View Full Menu
2. Create New Order (Dine-in / Takeaway)
3. Modify Existing Order (Add / Remove / Update qty)
4. Generate Bill & Close Order (KOT -> Receipt)
5. List Active Orders
6. Table Status
7. Toggle Item Availability (Admin)
8. Exit"""

MODIFY_MENU = """
Modify Order KOT {kot}
1. Add Item
2. Remove Item
3. Update Item Quantity
4. Show Order Details
5. Back"""


def _error(exc: DomainException) -> None:
    click.echo(f"Error: {exc}")


def _prompt_code(text: str) -> str:
    return click.prompt(text, type=str).strip()


# --- Display ------------------------------------------------------------------


def display_menu(sections: list[MenuSectionDTO]) -> None:
    click.echo()
    click.echo("========== MENU ==========")
    for section in sections:
        click.echo(f"{section.category}:")
        click.echo(f"{'Code':<5} | {'Name':<26} | {'Price':>7} | Avail")
        click.echo("-" * 52)
        for item in section.items:
            click.echo(
                f"{item.code:<5} | {item.name:<26} | {item.price:>7} | "
                f"{'Yes' if item.available else 'No'}"
            )
        click.echo()
    click.echo("==========================")


def display_order(dto: OrderDTO) -> None:
    table = dto.table_number if dto.table_number is not None else "-"
    click.echo()
    click.echo(
        f"Order KOT: {dto.id} | Type: {dto.kind} | Table: {table} | "
        f"Items: {dto.line_count} | Status: {dto.status}"
    )
    if not dto.lines:
        click.echo("No items.")
        return
    click.echo(f"{'Code':<6} {'Item':<25} {'Qty':<6} {'Amount':>8}")
    for line in dto.lines:
        click.echo(f"{line.code:<6} {line.name[:25]:<25} {line.quantity:<6} {line.amount:>8}")
    bill = dto.bill
    click.echo(
        f"Subtotal: {bill.subtotal} | GST: {bill.gst} | Service: {bill.service} | "
        f"Discount: {bill.discount} | Total: {bill.total}"
    )


def display_receipt(receipt: ReceiptDTO) -> None:
    click.echo()
    click.echo(receipt.text, nl=False)
    if receipt.path is not None:
        click.echo(f"Receipt saved to: {receipt.path}")


# --- Options ------------------------------------------------------------------


def view_menu(restaurant: Restaurant) -> None:
    display_menu(restaurant.show_menu().handle())


def create_order(restaurant: Restaurant) -> None:
    choice = click.prompt("Dine-In (1) or Takeaway (0)?", type=click.IntRange(0, 1))
    kind = OrderKind.DINE_IN if choice == 1 else OrderKind.TAKEAWAY
    table_number = None
    if kind is OrderKind.DINE_IN:
        table_number = click.prompt(
            f"Enter table number (1..{restaurant.tables.max_tables})", type=int
        )

    try:
        summary = restaurant.create_order().handle(kind, table_number)
    except DomainException as exc:
        _error(exc)
        return
    click.echo(f"Created Order KOT: {summary.id}")

    view_menu(restaurant)
    add_line = restaurant.add_line()
    while True:
        code = _prompt_code("Enter item code to add (or 0 to finish)")
        if code == "0":
            break
        quantity = click.prompt("Enter quantity", type=int)
        try:
            add_line.handle(summary.id, code, quantity)
        except OrderFullError as exc:
            _error(exc)
            break
        except DomainException as exc:
            _error(exc)
            continue
        click.echo("Added.")

    click.echo(f"Order saved. KOT: {summary.id}")


def modify_order(restaurant: Restaurant) -> None:
    kot = click.prompt("Enter KOT (order id) to modify", type=int)
    try:
        dto = restaurant.show_order().handle(kot)
    except DomainException as exc:
        _error(exc)
        return
    if dto.status != "ACTIVE":
        click.echo(f"Order #{kot} is already closed.")
        return

    while True:
        click.echo(MODIFY_MENU.format(kot=kot))
        choice = click.prompt("Choice", type=int)
        try:
            if choice == 1:
                view_menu(restaurant)
                code = _prompt_code("Item code to add")
                quantity = click.prompt("Quantity", type=int)
                restaurant.add_line().handle(kot, code, quantity)
                click.echo("Added.")
            elif choice == 2:
                code = _prompt_code("Enter item code to remove")
                restaurant.remove_line().handle(kot, code)
                click.echo("Removed.")
            elif choice == 3:
                code = _prompt_code("Enter item code to update")
                quantity = click.prompt("Enter new quantity (0 to remove)", type=int)
                restaurant.update_line_quantity().handle(kot, code, quantity)
                click.echo("Updated.")
            elif choice == 4:
                display_order(restaurant.show_order().handle(kot))
            elif choice == 5:
                return
            else:
                click.echo("Invalid choice.")
        except DomainException as exc:
            _error(exc)


def bill_order(restaurant: Restaurant) -> None:
    kot = click.prompt("Enter KOT (order id) to bill", type=int)
    try:
        receipt = restaurant.bill_order().handle(kot)
    except ReceiptPersistError as exc:
        display_receipt(exc.receipt)
        _error(exc)
        click.echo(f"Order #{kot} closed; receipt file was not saved.")
        return
    except DomainException as exc:
        _error(exc)
        return
    display_receipt(receipt)


def list_active_orders(restaurant: Restaurant) -> None:
    orders = restaurant.list_active_orders().handle()
    click.echo()
    click.echo("Active Orders:")
    if not orders:
        click.echo("No active orders.")
        return
    click.echo(f"{'KOT':<5} | {'Type':<8} | {'Table':<5} | {'Items':<5} | Time")
    click.echo("-" * 54)
    for o in orders:
        table = o.table_number if o.table_number is not None else "-"
        click.echo(
            f"{o.id:<5} | {o.kind:<8} | {table:<5} | {o.line_count:<5} | {o.opened_at}"
        )


def table_status(restaurant: Restaurant) -> None:
    slots = restaurant.show_tables().handle()
    click.echo()
    click.echo(f"Table Status (1..{len(slots)}):")
    for slot in slots:
        if slot.is_free:
            click.echo(f"Table {slot.number:2d}: Free")
        else:
            click.echo(
                f"Table {slot.number:2d}: Occupied (KOT {slot.order_id}, items {slot.line_count})"
            )


def toggle_availability(restaurant: Restaurant) -> None:
    view_menu(restaurant)
    code = _prompt_code("Enter item code to toggle availability")
    try:
        item = restaurant.toggle_availability().handle(code)
    except DomainException as exc:
        _error(exc)
        return
    click.echo(f"{item.name} now {'Available' if item.available else 'Unavailable'}")


OPTIONS = {
    1: view_menu,
    2: create_order,
    3: modify_order,
    4: bill_order,
    5: list_active_orders,
    6: table_status,
    7: toggle_availability,
}
EXIT_OPTION = 8


def run_session(restaurant: Restaurant) -> None:
    """Loop over the main menu until the operator exits."""
    while True:
        click.echo(MAIN_MENU)
        choice = click.prompt("Choose option", type=int)
        if choice == EXIT_OPTION:
            click.echo("Exiting...")
            return
        action = OPTIONS.get(choice)
        if action is None:
            click.echo("Invalid option.")
            continue
        action(restaurant)
