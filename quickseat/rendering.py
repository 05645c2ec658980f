"""Rendering helpers and per-status presentation tables."""

from __future__ import annotations

from datetime import time
from enum import Enum

from rich.text import Text

from quickseat.config import CURRENCY_SYMBOL
from quickseat.models import MenuItem, OrderStatus, Seat, SeatStatus, TableType


def _require_all(table: dict, enum_cls: type[Enum], table_name: str) -> None:
    missing = [member.name for member in enum_cls if member not in table]
    if missing:
        raise RuntimeError(f"{table_name} is missing entries for: {', '.join(missing)}")


SEAT_STATUS_LABELS: dict[SeatStatus, str] = {
    SeatStatus.AVAILABLE: "Available",
    SeatStatus.RESERVED: "Reserved",
    SeatStatus.OCCUPIED: "Occupied",
    SeatStatus.SELECTED: "Selected",
}

SEAT_STATUS_STYLES: dict[SeatStatus, str] = {
    SeatStatus.AVAILABLE: "bold #0b1f0f on #5fbf72",
    SeatStatus.RESERVED: "bold #1f1a00 on #e0b83a",
    SeatStatus.OCCUPIED: "bold #ffffff on #b23a48",
    SeatStatus.SELECTED: "bold #ffffff on #e8772e",
}

# Order the booking legend lists statuses in.
SEAT_LEGEND: tuple[SeatStatus, ...] = (
    SeatStatus.AVAILABLE,
    SeatStatus.SELECTED,
    SeatStatus.RESERVED,
    SeatStatus.OCCUPIED,
)

ORDER_STATUS_LABELS: dict[OrderStatus, str] = {
    OrderStatus.PENDING: "pending",
    OrderStatus.COOK_NOW: "🔥 Cook Now",
    OrderStatus.PREPARING: "preparing",
    OrderStatus.READY: "ready",
    OrderStatus.SERVED: "served",
}

ORDER_STATUS_STYLES: dict[OrderStatus, str] = {
    OrderStatus.PENDING: "bold #e0b83a",
    OrderStatus.COOK_NOW: "bold #f08a3c",
    OrderStatus.PREPARING: "bold #5b9bf0",
    OrderStatus.READY: "bold #5fbf72",
    OrderStatus.SERVED: "dim",
}

TABLE_TYPE_LABELS: dict[TableType, str] = {
    TableType.PAIR: "table for 2",
    TableType.QUAD: "table for 4",
    TableType.SIX: "table for 6",
    TableType.BOOTH: "booth",
}

_require_all(SEAT_STATUS_LABELS, SeatStatus, "SEAT_STATUS_LABELS")
_require_all(SEAT_STATUS_STYLES, SeatStatus, "SEAT_STATUS_STYLES")
_require_all(ORDER_STATUS_LABELS, OrderStatus, "ORDER_STATUS_LABELS")
_require_all(ORDER_STATUS_STYLES, OrderStatus, "ORDER_STATUS_STYLES")
_require_all(TABLE_TYPE_LABELS, TableType, "TABLE_TYPE_LABELS")


def format_price(amount: int, grouped: bool = False) -> str:
    if grouped:
        return f"{CURRENCY_SYMBOL}{amount:,}"
    return f"{CURRENCY_SYMBOL}{amount}"


def format_clock(value: time) -> str:
    """Render a time as e.g. 12:30 PM."""
    hour = value.hour % 12 or 12
    suffix = "AM" if value.hour < 12 else "PM"
    return f"{hour}:{value.minute:02d} {suffix}"


def format_seat_cell(seat: Seat, is_cursor: bool = False) -> Text:
    """Render one floor-plan tile: seat id and capacity."""
    text = Text()
    left, right = ("▶", "◀") if is_cursor else (" ", " ")
    text.append(left, style="bold")
    text.append(f" {seat.seat_id:<3} {seat.capacity}p ", style=SEAT_STATUS_STYLES[seat.status])
    text.append(right, style="bold")
    return text


def format_seat_legend() -> Text:
    text = Text()
    for idx, status in enumerate(SEAT_LEGEND):
        if idx > 0:
            text.append("   ")
        text.append("  ", style=SEAT_STATUS_STYLES[status])
        text.append(f" {SEAT_STATUS_LABELS[status]}")
    return text


def format_order_status(status: OrderStatus) -> Text:
    return Text(f"[{ORDER_STATUS_LABELS[status]}]", style=ORDER_STATUS_STYLES[status])


def format_veg_badge(is_veg: bool) -> Text:
    if is_veg:
        return Text("VEG", style="bold #f0fff0 on #2e8b3a")
    return Text("NON-VEG", style="bold #fff0f0 on #b23a48")


def format_menu_item(item: MenuItem, quantity: int = 0, is_cursor: bool = False) -> Text:
    """Render a menu card as two lines: name/price/quantity, then details."""
    text = Text()
    pointer = "➤ " if is_cursor else "  "
    name_style = "bold" if item.available else "dim strike"
    text.append(pointer)
    text.append_text(format_veg_badge(item.is_veg))
    text.append(" ")
    text.append(item.name, style=name_style)
    text.append(f"  {format_price(item.price)}", style="bold #e8772e")
    if quantity:
        text.append(f"  × {quantity}", style="bold #5fbf72")
    if not item.available:
        text.append("  Unavailable", style="bold #ffb3b3")
    text.append(f"\n    {item.description} · {item.prep_time} min", style="dim")
    return text
