"""Session cart shared by the menu, cart and nav bar views."""

from __future__ import annotations

from dataclasses import replace
from typing import Callable, Iterable

from quickseat.config import TAX_RATE_PERCENT
from quickseat.debug_log import log_debug
from quickseat.models import CartLine, MenuItem

CartListener = Callable[[], None]


def cart_item_count(lines: Iterable[CartLine]) -> int:
    """Sum of quantities across all lines."""
    return sum(line.quantity for line in lines)


def cart_total(lines: Iterable[CartLine]) -> int:
    """Sum of price x quantity across all lines."""
    return sum(line.line_total for line in lines)


def tax_for(subtotal: int) -> int:
    """Tax on a subtotal, rounded half up to whole currency units."""
    return (subtotal * TAX_RATE_PERCENT + 50) // 100


def grand_total(subtotal: int) -> int:
    return subtotal + tax_for(subtotal)


class CartStore:
    """
    Ordered collection of cart lines with at most one line per item id.

    Views read through `lines`, `item_count` and `total` and register a
    callback with `subscribe` to redraw after each mutation.
    """

    def __init__(self) -> None:
        self._lines: list[CartLine] = []
        self._listeners: list[CartListener] = []

    @property
    def lines(self) -> tuple[CartLine, ...]:
        return tuple(self._lines)

    @property
    def item_count(self) -> int:
        return cart_item_count(self._lines)

    @property
    def total(self) -> int:
        return cart_total(self._lines)

    def is_empty(self) -> bool:
        return not self._lines

    def quantity_of(self, item_id: str) -> int:
        idx = self._index_of(item_id)
        if idx is None:
            return 0
        return self._lines[idx].quantity

    def subscribe(self, listener: CartListener) -> Callable[[], None]:
        """Register a change callback and return a function that removes it."""
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def add_item(self, item: MenuItem) -> None:
        idx = self._index_of(item.item_id)
        if idx is None:
            self._lines.append(CartLine(item=item, quantity=1))
        else:
            line = self._lines[idx]
            self._lines[idx] = replace(line, quantity=line.quantity + 1)
        log_debug(f"cart_add item={item.item_id} qty={self.quantity_of(item.item_id)}")
        self._notify()

    def update_quantity(self, item_id: str, quantity: int) -> None:
        idx = self._index_of(item_id)
        if idx is None:
            return
        if quantity <= 0:
            del self._lines[idx]
        else:
            self._lines[idx] = replace(self._lines[idx], quantity=quantity)
        log_debug(f"cart_update item={item_id} qty={max(quantity, 0)}")
        self._notify()

    def remove_item(self, item_id: str) -> None:
        idx = self._index_of(item_id)
        if idx is None:
            return
        del self._lines[idx]
        log_debug(f"cart_remove item={item_id}")
        self._notify()

    def clear_cart(self) -> None:
        if not self._lines:
            return
        self._lines.clear()
        log_debug("cart_clear")
        self._notify()

    def _index_of(self, item_id: str) -> int | None:
        for idx, line in enumerate(self._lines):
            if line.item_id == item_id:
                return idx
        return None

    def _notify(self) -> None:
        for listener in list(self._listeners):
            listener()
