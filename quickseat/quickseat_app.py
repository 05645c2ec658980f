"""Main Textual app class."""

from __future__ import annotations

from typing import Callable

from textual.app import App
from textual.binding import Binding
from textual.screen import Screen

from quickseat.admin_screen import AdminScreen
from quickseat.cart import CartStore
from quickseat.cart_screen import CartScreen
from quickseat.debug_log import log_debug
from quickseat.landing_screen import LandingScreen
from quickseat.menu_screen import MenuScreen
from quickseat.seat_screen import BookSeatScreen

SCREEN_FACTORIES: dict[str, Callable[[CartStore], Screen]] = {
    "home": LandingScreen,
    "book": BookSeatScreen,
    "menu": MenuScreen,
    "cart": CartScreen,
    "admin": AdminScreen,
}


class QuickSeatApp(App):
    """Seat booking and meal pre-ordering for one restaurant session."""

    TITLE = "QuickSeat"
    SUB_TITLE = "Book. Pre-order. Cook on arrival."

    BINDINGS = [
        Binding("f1", "navigate('home')", "Home", priority=True),
        Binding("f2", "navigate('book')", "Book a Seat", priority=True),
        Binding("f3", "navigate('menu')", "Menu", priority=True),
        Binding("f4", "navigate('cart')", "Cart", priority=True),
        Binding("f5", "navigate('admin')", "Admin", priority=True),
        ("ctrl+q", "quit", "Quit"),
    ]

    def __init__(self, cart: CartStore | None = None) -> None:
        super().__init__()
        self.cart = cart if cart is not None else CartStore()
        self.destination = "home"

    def on_mount(self) -> None:
        log_debug("app_mount")
        self.push_screen(SCREEN_FACTORIES[self.destination](self.cart))

    def action_navigate(self, destination: str) -> None:
        self.navigate(destination)

    def navigate(self, destination: str) -> None:
        """Replace the current page with a freshly built one."""
        if destination not in SCREEN_FACTORIES:
            raise ValueError(f"Unknown destination: {destination}")
        log_debug(f"navigate from={self.destination} to={destination}")
        self.destination = destination
        self.switch_screen(SCREEN_FACTORIES[destination](self.cart))
