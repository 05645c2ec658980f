"""Top navigation bar with the live cart badge."""

from __future__ import annotations

from typing import Callable

from rich.text import Text
from textual.widgets import Static

from quickseat.cart import CartStore

# (destination, label, key)
DESTINATIONS: list[tuple[str, str, str]] = [
    ("home", "Home", "F1"),
    ("book", "Book a Seat", "F2"),
    ("menu", "Menu", "F3"),
    ("cart", "Cart", "F4"),
    ("admin", "Admin", "F5"),
]


def format_nav(active: str, item_count: int) -> Text:
    text = Text()
    text.append("🍽 QuickSeat ", style="bold #e8772e")
    for destination, label, key in DESTINATIONS:
        text.append("  ")
        style = "bold reverse #e8772e" if destination == active else ""
        shown = f"{label} ({item_count})" if destination == "cart" and item_count else label
        text.append(f" {key} {shown} ", style=style)
    return text


class NavBar(Static):
    """Highlights the active destination and follows cart changes."""

    DEFAULT_CSS = """
    NavBar {
        height: 1;
        background: $panel;
    }
    """

    def __init__(self, active: str, cart: CartStore) -> None:
        super().__init__()
        self.active = active
        self.cart = cart
        self._unsubscribe: Callable[[], None] | None = None

    def on_mount(self) -> None:
        self._unsubscribe = self.cart.subscribe(self.refresh_nav)
        self.refresh_nav()

    def on_unmount(self) -> None:
        if self._unsubscribe is not None:
            self._unsubscribe()
            self._unsubscribe = None

    def refresh_nav(self) -> None:
        self.update(format_nav(self.active, self.cart.item_count))
