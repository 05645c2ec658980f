"""Domain models for QuickSeat."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import time
from enum import Enum


class SeatStatus(Enum):
    AVAILABLE = "available"
    RESERVED = "reserved"
    OCCUPIED = "occupied"
    SELECTED = "selected"


class TableType(Enum):
    PAIR = "table-2"
    QUAD = "table-4"
    SIX = "table-6"
    BOOTH = "booth"


class OrderStatus(Enum):
    """Kitchen progression, declared in the order orders move through it."""

    PENDING = "pending"
    COOK_NOW = "cook-now"
    PREPARING = "preparing"
    READY = "ready"
    SERVED = "served"


@dataclass(frozen=True)
class Seat:
    """A bookable table on the floor plan."""

    seat_id: str
    row: str
    number: int
    capacity: int
    table_type: TableType
    status: SeatStatus

    @property
    def is_locked(self) -> bool:
        """Reserved and occupied seats ignore selection."""
        return self.status in {SeatStatus.RESERVED, SeatStatus.OCCUPIED}


@dataclass(frozen=True)
class MenuItem:
    """A catalog dish."""

    item_id: str
    name: str
    price: int
    image: str
    available: bool
    prep_time: int
    is_veg: bool
    description: str

    def __post_init__(self) -> None:
        if self.price < 0:
            raise ValueError(f"price must be non-negative, got {self.price} for {self.item_id}")


@dataclass(frozen=True)
class SubCategory:
    name: str
    items: tuple[MenuItem, ...]


@dataclass(frozen=True)
class MenuCategory:
    name: str
    icon: str
    subcategories: tuple[SubCategory, ...]

    def items(self, subcategory: str | None = None) -> list[MenuItem]:
        """Flatten items, optionally restricted to one subcategory."""
        return [
            item
            for sub in self.subcategories
            if subcategory is None or sub.name == subcategory
            for item in sub.items
        ]


@dataclass(frozen=True)
class CartLine:
    """One menu item and how many of it are ordered."""

    item: MenuItem
    quantity: int

    def __post_init__(self) -> None:
        if self.quantity < 1:
            raise ValueError(f"quantity must be at least 1, got {self.quantity}")

    @property
    def item_id(self) -> str:
        return self.item.item_id

    @property
    def line_total(self) -> int:
        return self.item.price * self.quantity


@dataclass(frozen=True)
class Order:
    """A kitchen order shown on the admin dashboard."""

    order_id: str
    customer_name: str
    seat_id: str
    lines: tuple[CartLine, ...]
    status: OrderStatus
    placed_at: time
