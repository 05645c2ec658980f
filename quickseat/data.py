"""Static menu catalog and seed orders built from the editable constants."""

from __future__ import annotations

from datetime import time

from quickseat.constant import MENU_CATALOG, SEED_ORDERS
from quickseat.models import CartLine, MenuCategory, MenuItem, Order, OrderStatus, SubCategory


def _menu_item(raw: dict) -> MenuItem:
    return MenuItem(
        item_id=str(raw["id"]),
        name=str(raw["name"]),
        price=int(raw["price"]),
        image=str(raw["image"]),
        available=bool(raw["available"]),
        prep_time=int(raw["prep_time"]),
        is_veg=bool(raw["is_veg"]),
        description=str(raw["description"]),
    )


MENU: tuple[MenuCategory, ...] = tuple(
    MenuCategory(
        name=category["name"],
        icon=category["icon"],
        subcategories=tuple(
            SubCategory(name=sub["name"], items=tuple(_menu_item(raw) for raw in sub["items"]))
            for sub in category["subcategories"]
        ),
    )
    for category in MENU_CATALOG
)

MENU_ITEMS_BY_ID: dict[str, MenuItem] = {
    item.item_id: item for category in MENU for item in category.items()
}


def menu_item(item_id: str) -> MenuItem:
    """Look up a catalog item; unknown ids are a seed-data bug."""
    try:
        return MENU_ITEMS_BY_ID[item_id]
    except KeyError:
        raise KeyError(f"Unknown menu item id: {item_id}") from None


def category_by_name(name: str) -> MenuCategory | None:
    for category in MENU:
        if category.name == name:
            return category
    return None


def _parse_time(value: str) -> time:
    hour, minute = value.split(":")
    return time(int(hour), int(minute))


def seed_orders() -> list[Order]:
    """Build a fresh list of the demo kitchen orders."""
    return [
        Order(
            order_id=raw["id"],
            customer_name=raw["customer_name"],
            seat_id=raw["seat_id"],
            lines=tuple(CartLine(menu_item(item_id), quantity) for item_id, quantity in raw["lines"]),
            status=OrderStatus(raw["status"]),
            placed_at=_parse_time(raw["time"]),
        )
        for raw in SEED_ORDERS
    ]
