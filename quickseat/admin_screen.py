"""Admin dashboard: seat overview, kitchen orders and analytics."""

from __future__ import annotations

from rich.text import Text
from textual.app import ComposeResult
from textual.containers import Vertical
from textual.reactive import reactive
from textual.screen import Screen
from textual.widgets import Header, Static

from quickseat import config
from quickseat.cart import CartStore
from quickseat.constant import ANALYTICS_HEADLINES, TOP_DISHES
from quickseat.data import seed_orders
from quickseat.debug_log import log_debug
from quickseat.models import Order, OrderStatus
from quickseat.nav_bar import NavBar
from quickseat.orders import advance_order, find_order, next_action_label, order_total
from quickseat.printer import check_printer_dependencies, print_kitchen_ticket
from quickseat.rendering import format_clock, format_order_status, format_price, format_seat_cell
from quickseat.seats import SeatBoard

ADMIN_TABS: list[tuple[str, str]] = [
    ("seats", "Seats"),
    ("orders", "Orders"),
    ("analytics", "Analytics"),
]


class AdminScreen(Screen):
    """Restaurant-side view; order statuses advance one step per Enter."""

    BINDINGS = [
        ("1", "choose_tab('seats')", "Seats"),
        ("2", "choose_tab('orders')", "Orders"),
        ("3", "choose_tab('analytics')", "Analytics"),
        ("left", "cycle_tab(-1)", "Prev tab"),
        ("right", "cycle_tab(1)", "Next tab"),
        ("up", "move_cursor(-1)", "Previous order"),
        ("down", "move_cursor(1)", "Next order"),
        ("k", "move_cursor(-1)", "Previous order"),
        ("j", "move_cursor(1)", "Next order"),
        ("enter", "advance_selected", "Next step"),
    ]

    CSS = """
    #admin-pane {
        height: 1fr;
        border: round $primary;
        padding: 1;
    }

    #admin-tabs {
        margin-bottom: 1;
    }

    #admin-body {
        height: 1fr;
    }

    #admin-status {
        height: 2;
        padding: 0 1;
    }
    """

    active_tab = reactive("seats")
    order_cursor = reactive(0)

    def __init__(self, cart: CartStore) -> None:
        super().__init__()
        self.cart = cart
        self.board = SeatBoard()
        self.orders: list[Order] = seed_orders()
        self.system_status = ""
        self.printer_ready = False

    def compose(self) -> ComposeResult:
        yield Header()
        yield NavBar("admin", self.cart)
        with Vertical(id="admin-pane"):
            yield Static(id="admin-tabs")
            yield Static(id="admin-body")
        yield Static(id="admin-status")

    def on_mount(self) -> None:
        if config.PRINT_KITCHEN_TICKETS:
            self.printer_ready, self.system_status = check_printer_dependencies()
        else:
            self.system_status = "Kitchen ticket printing disabled"
        log_debug(f"admin_mount printer_status={self.system_status!r}")
        self._refresh_all()

    def action_choose_tab(self, tab: str) -> None:
        self.active_tab = tab
        self._refresh_all()

    def action_cycle_tab(self, delta: int) -> None:
        names = [name for name, _ in ADMIN_TABS]
        self.action_choose_tab(names[(names.index(self.active_tab) + delta) % len(names)])

    def action_move_cursor(self, delta: int) -> None:
        if self.active_tab != "orders" or not self.orders:
            return
        self.order_cursor = (self.order_cursor + delta) % len(self.orders)
        self._refresh_body()

    def action_advance_selected(self) -> None:
        if self.active_tab != "orders" or not self.orders:
            return
        order_id = self.orders[self.order_cursor].order_id
        updated = advance_order(self.orders, order_id)
        if updated is self.orders:
            return
        self.orders = updated
        order = find_order(self.orders, order_id)
        log_debug(f"order_advance order_id={order_id} status={order.status.value}")
        self.system_status = f"{order_id} is now {order.status.value}"
        if order.status == OrderStatus.COOK_NOW:
            self._print_ticket(order)
        self._refresh_all()

    def _print_ticket(self, order: Order) -> None:
        if not config.PRINT_KITCHEN_TICKETS:
            return
        if not self.printer_ready:
            self.system_status = f"{order.order_id} is now cooking, no ticket (printer unavailable)"
            log_debug(f"ticket_skipped order_id={order.order_id} reason=printer_unavailable")
            return
        try:
            print_kitchen_ticket(order)
        except Exception as exc:
            self.system_status = f"{order.order_id} is now cooking but ticket print failed: {exc}"
            log_debug(f"ticket_print_failed order_id={order.order_id} error={exc!r}")
            return
        self.system_status = f"{order.order_id} is now cooking, ticket printed"
        log_debug(f"ticket_printed order_id={order.order_id}")

    def _refresh_all(self) -> None:
        self._refresh_tabs()
        self._refresh_body()
        self.query_one("#admin-status", Static).update(self.system_status)

    def _refresh_tabs(self) -> None:
        text = Text()
        for idx, (name, label) in enumerate(ADMIN_TABS):
            if idx > 0:
                text.append("  ")
            style = "bold reverse #e8772e" if name == self.active_tab else ""
            text.append(f" {idx + 1} {label} ", style=style)
        self.query_one("#admin-tabs", Static).update(text)

    def _refresh_body(self) -> None:
        if self.active_tab == "seats":
            body = self._render_seats()
        elif self.active_tab == "orders":
            body = self._render_orders()
        else:
            body = self._render_analytics()
        self.query_one("#admin-body", Static).update(body)

    def _render_seats(self) -> Text:
        stats = self.board.stats()
        text = Text()
        for label, value, style in (
            ("Total Tables", stats.total, "bold"),
            ("Available", stats.available, "bold #5fbf72"),
            ("Reserved", stats.reserved, "bold #e0b83a"),
            ("Occupied", stats.occupied, "bold #b23a48"),
        ):
            text.append(f"{value:>3} ", style=style)
            text.append(f"{label}    ", style="dim")
        text.append("\n\nFloor Plan\n", style="bold")
        for idx, seat in enumerate(self.board.seats):
            if idx and idx % 8 == 0:
                text.append("\n")
            text.append_text(format_seat_cell(seat))
        return text

    def _render_orders(self) -> Text:
        if not self.orders:
            return Text("No orders")
        text = Text()
        for idx, order in enumerate(self.orders):
            if idx > 0:
                text.append("\n\n")
            pointer = "➤ " if idx == self.order_cursor else "  "
            text.append(pointer)
            text.append(order.order_id, style="bold")
            text.append(f" · {order.customer_name}  ", style="dim")
            text.append_text(format_order_status(order.status))
            text.append(f"\n    Table {order.seat_id} · {format_clock(order.placed_at)}", style="dim")
            for line in order.lines:
                text.append(f"\n    {line.item.name} × {line.quantity}")
                text.append(f"  {format_price(line.line_total)}", style="dim")
            text.append("\n    Total ", style="bold")
            text.append(format_price(order_total(order)), style="bold #e8772e")
            action = next_action_label(order)
            if action is not None and idx == self.order_cursor:
                text.append(f"\n    Enter ▸ {action}", style="bold #ffffff on #e8772e")
        return text

    def _render_analytics(self) -> Text:
        text = Text()
        for headline in ANALYTICS_HEADLINES:
            text.append(f"{headline['value']:>8} ", style="bold")
            text.append(f"{headline['label']} ", style="dim")
            text.append(f"↗ {headline['change']}    ", style="#5fbf72")
        text.append("\n\nTop Dishes Today\n", style="bold")
        for rank, dish in enumerate(TOP_DISHES, start=1):
            text.append(f"\n {rank}  ", style="bold #e8772e")
            text.append(f"{dish['name']:<24}")
            text.append(f"{format_price(int(dish['revenue']), grouped=True):>10}", style="bold")
            text.append(f"  {dish['orders']} orders", style="dim")
        return text
