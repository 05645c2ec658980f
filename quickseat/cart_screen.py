"""Cart review and checkout screen."""

from __future__ import annotations

from typing import Callable

from rich.text import Text
from textual.app import ComposeResult
from textual.binding import Binding
from textual.containers import Vertical
from textual.events import Key
from textual.reactive import reactive
from textual.screen import Screen
from textual.widgets import Header, Static

from quickseat.cart import CartStore, grand_total, tax_for
from quickseat.config import TAX_RATE_PERCENT
from quickseat.debug_log import log_debug
from quickseat.models import CartLine
from quickseat.nav_bar import NavBar
from quickseat.rendering import format_price

_CHECKOUT_MESSAGE = "Order placed! Your food will be prepared when you arrive and press 'Cook Now'."


class CartScreen(Screen):
    """Adjust quantities, review totals and place the order."""

    BINDINGS = [
        ("up", "move_cursor(-1)", "Previous"),
        ("down", "move_cursor(1)", "Next"),
        ("k", "move_cursor(-1)", "Previous"),
        ("j", "move_cursor(1)", "Next"),
        ("d", "remove_selected", "Remove"),
        ("m", "browse_menu", "Browse Menu"),
        Binding("ctrl+s", "place_order", "Place Order & Pay", priority=True),
    ]

    CSS = """
    #cart-pane {
        height: 1fr;
        border: round $primary;
        padding: 1;
    }

    .pane-title {
        text-style: bold;
        margin-bottom: 1;
    }

    #cart-lines {
        height: 1fr;
    }

    #cart-summary {
        height: auto;
        border: tall $surface;
        padding: 0 1;
    }

    #cart-status {
        height: 2;
        padding: 0 1;
    }
    """

    cursor_index = reactive(0)

    def __init__(self, cart: CartStore) -> None:
        super().__init__()
        self.cart = cart
        self.system_status = ""
        self._unsubscribe: Callable[[], None] | None = None

    def compose(self) -> ComposeResult:
        yield Header()
        yield NavBar("cart", self.cart)
        with Vertical(id="cart-pane"):
            yield Static("Your Order", classes="pane-title")
            yield Static(id="cart-lines")
            yield Static(id="cart-summary")
        yield Static(id="cart-status")

    def on_mount(self) -> None:
        self._unsubscribe = self.cart.subscribe(self._refresh_all)
        self._refresh_all()

    def on_unmount(self) -> None:
        if self._unsubscribe is not None:
            self._unsubscribe()
            self._unsubscribe = None

    def on_key(self, event: Key) -> None:
        if event.character in {"+", "="}:
            self._change_selected_quantity(1)
            event.stop()
            return
        if event.character in {"-", "_"}:
            self._change_selected_quantity(-1)
            event.stop()

    def selected_line(self) -> CartLine | None:
        lines = self.cart.lines
        if not lines:
            return None
        return lines[min(self.cursor_index, len(lines) - 1)]

    def action_move_cursor(self, delta: int) -> None:
        lines = self.cart.lines
        if not lines:
            return
        self.cursor_index = (self.cursor_index + delta) % len(lines)
        self._refresh_lines()

    def action_remove_selected(self) -> None:
        line = self.selected_line()
        if line is None:
            return
        self.cart.remove_item(line.item_id)

    def action_browse_menu(self) -> None:
        self.app.navigate("menu")

    def action_place_order(self) -> None:
        if self.cart.is_empty():
            self.system_status = "Nothing to order"
            self._refresh_status()
            return

        subtotal = self.cart.total
        log_debug(f"checkout items={self.cart.item_count} subtotal={subtotal} total={grand_total(subtotal)}")
        self.system_status = _CHECKOUT_MESSAGE
        self.cart.clear_cart()
        self.cursor_index = 0

    def _change_selected_quantity(self, delta: int) -> None:
        line = self.selected_line()
        if line is None:
            return
        self.cart.update_quantity(line.item_id, line.quantity + delta)

    def _refresh_all(self) -> None:
        self._refresh_lines()
        self._refresh_summary()
        self._refresh_status()

    def _refresh_lines(self) -> None:
        widget = self.query_one("#cart-lines", Static)
        lines = self.cart.lines
        if not lines:
            widget.update(
                Text.assemble(
                    ("🛒 Your cart is empty\n", "bold"),
                    ("Add some delicious items from our menu. Press M to browse.", "dim"),
                )
            )
            return
        if self.cursor_index >= len(lines):
            self.cursor_index = len(lines) - 1

        text = Text()
        for idx, line in enumerate(lines):
            if idx > 0:
                text.append("\n")
            pointer = "➤ " if idx == self.cursor_index else "  "
            text.append(pointer)
            text.append(f"{line.item.name:<24}", style="bold")
            text.append(f"{format_price(line.item.price):>7}", style="#e8772e")
            text.append(f"   − {line.quantity} +   ")
            text.append(format_price(line.line_total), style="bold")
        widget.update(text)

    def _refresh_summary(self) -> None:
        widget = self.query_one("#cart-summary", Static)
        if self.cart.is_empty():
            widget.update("")
            return
        subtotal = self.cart.total
        text = Text()
        text.append(f"{'Subtotal':<20}{format_price(subtotal):>10}\n", style="dim")
        text.append(f"{f'Taxes ({TAX_RATE_PERCENT}%)':<20}{format_price(tax_for(subtotal)):>10}\n", style="dim")
        text.append(f"{'Total':<20}", style="bold")
        text.append(f"{format_price(grand_total(subtotal)):>10}\n", style="bold #e8772e")
        text.append("Ctrl+S Place Order & Pay. Food is prepared only when you press 'Cook Now' at the restaurant.", style="dim")
        widget.update(text)

    def _refresh_status(self) -> None:
        status = self.system_status or "+/- quantity, D remove, ↑/↓ move"
        self.query_one("#cart-status", Static).update(status)
