"""Menu browser with category tabs, subcategory filter and cart bar."""

from __future__ import annotations

from typing import Callable

from rich.text import Text
from textual.app import ComposeResult
from textual.containers import Vertical
from textual.events import Key
from textual.reactive import reactive
from textual.screen import Screen
from textual.widgets import Header, Static

from quickseat.cart import CartStore
from quickseat.data import MENU
from quickseat.debug_log import log_debug
from quickseat.models import MenuCategory, MenuItem
from quickseat.nav_bar import NavBar
from quickseat.rendering import format_menu_item, format_price


class MenuScreen(Screen):
    """Browse the catalog and add dishes to the shared cart."""

    BINDINGS = [
        ("left", "cycle_category(-1)", "Prev category"),
        ("right", "cycle_category(1)", "Next category"),
        ("1", "choose_category(0)", "Category 1"),
        ("2", "choose_category(1)", "Category 2"),
        ("3", "choose_category(2)", "Category 3"),
        ("4", "choose_category(3)", "Category 4"),
        ("s", "cycle_subcategory", "Subcategory"),
        ("a", "show_all", "All"),
        ("up", "move_cursor(-1)", "Previous item"),
        ("down", "move_cursor(1)", "Next item"),
        ("k", "move_cursor(-1)", "Previous item"),
        ("j", "move_cursor(1)", "Next item"),
        ("enter", "add_selected", "Add"),
        ("c", "open_cart", "View cart"),
    ]

    CSS = """
    #menu-pane {
        height: 1fr;
        border: round $primary;
        padding: 1;
    }

    #category-tabs {
        margin-bottom: 1;
    }

    #subcategory-tabs {
        margin-bottom: 1;
    }

    #menu-items {
        height: 1fr;
    }

    #cart-bar {
        height: 3;
        border: heavy $secondary;
        padding: 0 1;
    }
    """

    category_index = reactive(0)
    subcategory = reactive(None)
    cursor_index = reactive(0)

    def __init__(self, cart: CartStore) -> None:
        super().__init__()
        self.cart = cart
        self._unsubscribe: Callable[[], None] | None = None

    def compose(self) -> ComposeResult:
        yield Header()
        yield NavBar("menu", self.cart)
        with Vertical(id="menu-pane"):
            yield Static(id="category-tabs")
            yield Static(id="subcategory-tabs")
            yield Static(id="menu-items")
        yield Static(id="cart-bar")

    def on_mount(self) -> None:
        self._unsubscribe = self.cart.subscribe(self._refresh_all)
        self._refresh_all()

    def on_unmount(self) -> None:
        if self._unsubscribe is not None:
            self._unsubscribe()
            self._unsubscribe = None

    def on_key(self, event: Key) -> None:
        if event.character in {"+", "="}:
            self.action_add_selected()
            event.stop()
            return
        if event.character in {"-", "_"}:
            self.action_decrement_selected()
            event.stop()

    @property
    def category(self) -> MenuCategory:
        return MENU[self.category_index]

    def visible_items(self) -> list[MenuItem]:
        return self.category.items(self.subcategory)

    def current_item(self) -> MenuItem | None:
        items = self.visible_items()
        if not items:
            return None
        return items[min(self.cursor_index, len(items) - 1)]

    def action_cycle_category(self, delta: int) -> None:
        self.action_choose_category((self.category_index + delta) % len(MENU))

    def action_choose_category(self, index: int) -> None:
        if not (0 <= index < len(MENU)):
            return
        self.category_index = index
        self.subcategory = None
        self.cursor_index = 0
        self._refresh_all()

    def action_cycle_subcategory(self) -> None:
        names = [sub.name for sub in self.category.subcategories]
        if self.subcategory is None:
            self.subcategory = names[0]
        else:
            idx = names.index(self.subcategory) + 1
            self.subcategory = names[idx] if idx < len(names) else None
        self.cursor_index = 0
        self._refresh_all()

    def action_show_all(self) -> None:
        self.subcategory = None
        self.cursor_index = 0
        self._refresh_all()

    def action_move_cursor(self, delta: int) -> None:
        items = self.visible_items()
        if not items:
            return
        self.cursor_index = (self.cursor_index + delta) % len(items)
        self._refresh_items()

    def action_add_selected(self) -> None:
        item = self.current_item()
        if item is None or not item.available:
            return
        self.cart.add_item(item)

    def action_decrement_selected(self) -> None:
        item = self.current_item()
        if item is None:
            return
        quantity = self.cart.quantity_of(item.item_id)
        if quantity == 0:
            return
        self.cart.update_quantity(item.item_id, quantity - 1)

    def action_open_cart(self) -> None:
        log_debug(f"menu_open_cart items={self.cart.item_count}")
        self.app.navigate("cart")

    def _refresh_all(self) -> None:
        self._refresh_tabs()
        self._refresh_items()
        self._refresh_cart_bar()

    def _refresh_tabs(self) -> None:
        tabs = Text()
        for idx, category in enumerate(MENU):
            if idx > 0:
                tabs.append("  ")
            style = "bold reverse #e8772e" if idx == self.category_index else ""
            tabs.append(f" {idx + 1} {category.icon} {category.name} ", style=style)
        self.query_one("#category-tabs", Static).update(tabs)

        subs = Text()
        subs.append(" All ", style="bold reverse" if self.subcategory is None else "dim")
        for sub in self.category.subcategories:
            subs.append("  ")
            subs.append(f" › {sub.name} ", style="bold reverse" if sub.name == self.subcategory else "dim")
        self.query_one("#subcategory-tabs", Static).update(subs)

    def _refresh_items(self) -> None:
        items = self.visible_items()
        widget = self.query_one("#menu-items", Static)
        if not items:
            widget.update("No dishes in this section")
            return
        if self.cursor_index >= len(items):
            self.cursor_index = 0

        lines = Text()
        for idx, item in enumerate(items):
            if idx > 0:
                lines.append("\n\n")
            lines.append_text(
                format_menu_item(item, self.cart.quantity_of(item.item_id), is_cursor=idx == self.cursor_index)
            )
        widget.update(lines)

    def _refresh_cart_bar(self) -> None:
        bar = self.query_one("#cart-bar", Static)
        count = self.cart.item_count
        if count == 0:
            bar.update("Enter/+ add, - remove one, S subcategory, ←/→ category")
            return
        text = Text()
        text.append(f"🛒 {count} items", style="bold")
        text.append(f"   {format_price(self.cart.total)}", style="bold #e8772e")
        text.append("   C view cart ›", style="dim")
        bar.update(text)
