"""Seat booking screen."""

from __future__ import annotations

from rich.text import Text
from textual.app import ComposeResult
from textual.containers import Horizontal, Vertical
from textual.reactive import reactive
from textual.screen import Screen
from textual.widgets import Header, Static

from quickseat.cart import CartStore
from quickseat.debug_log import log_debug
from quickseat.models import Seat
from quickseat.nav_bar import NavBar
from quickseat.rendering import TABLE_TYPE_LABELS, format_seat_cell, format_seat_legend
from quickseat.seats import SeatBoard


class BookSeatScreen(Screen):
    """Floor plan with a keyboard cursor; one table can be selected at a time."""

    BINDINGS = [
        ("left", "move_cursor(-1)", "Left"),
        ("right", "move_cursor(1)", "Right"),
        ("h", "move_cursor(-1)", "Left"),
        ("l", "move_cursor(1)", "Right"),
        ("up", "move_row(-1)", "Row up"),
        ("down", "move_row(1)", "Row down"),
        ("k", "move_row(-1)", "Row up"),
        ("j", "move_row(1)", "Row down"),
        ("enter", "select_current", "Select table"),
        ("space", "select_current", "Select table"),
        ("m", "continue_to_menu", "Continue to Menu"),
    ]

    CSS = """
    #book-layout {
        height: 1fr;
    }

    #floor-pane {
        width: 2fr;
        border: round $primary;
        padding: 1;
    }

    #details-pane {
        width: 1fr;
        border: round $secondary;
        padding: 1;
    }

    .pane-title {
        text-style: bold;
        margin-bottom: 1;
    }

    #legend {
        margin-bottom: 1;
    }
    """

    cursor_index = reactive(0)

    def __init__(self, cart: CartStore) -> None:
        super().__init__()
        self.cart = cart
        self.board = SeatBoard()

    def compose(self) -> ComposeResult:
        yield Header()
        yield NavBar("book", self.cart)
        with Horizontal(id="book-layout"):
            with Vertical(id="floor-pane"):
                yield Static("Select Your Table", classes="pane-title")
                yield Static(format_seat_legend(), id="legend")
                yield Static(id="floor-plan")
            with Vertical(id="details-pane"):
                yield Static("Booking Details", classes="pane-title")
                yield Static(id="booking-details")

    def on_mount(self) -> None:
        self._refresh_all()

    def action_move_cursor(self, delta: int) -> None:
        self.cursor_index = (self.cursor_index + delta) % len(self.board.seats)
        self._refresh_floor()

    def action_move_row(self, delta: int) -> None:
        rows = self.board.rows()
        current = self.current_seat()
        row_idx = next(idx for idx, (row, _) in enumerate(rows) if row == current.row)
        target_idx = row_idx + delta
        if not (0 <= target_idx < len(rows)):
            return
        target_row = rows[target_idx][1]
        target_seat = target_row[min(current.number, len(target_row)) - 1]
        self.cursor_index = self.board.seats.index(target_seat)
        self._refresh_floor()

    def action_select_current(self) -> None:
        seat = self.current_seat()
        changed = self.board.select(seat.seat_id)
        selected = self.board.selected
        log_debug(
            f"seat_select seat={seat.seat_id} status={seat.status.value} changed={changed} "
            f"selected={selected.seat_id if selected else None}"
        )
        self._refresh_all()

    def action_continue_to_menu(self) -> None:
        if self.board.selected is None:
            return
        self.app.navigate("menu")

    def current_seat(self) -> Seat:
        return self.board.seats[self.cursor_index]

    def _refresh_all(self) -> None:
        self._refresh_floor()
        self._refresh_details()

    def _refresh_floor(self) -> None:
        current = self.current_seat()
        lines = Text()
        lines.append("🍳 Kitchen Area\n\n", style="dim")
        for row, row_seats in self.board.rows():
            lines.append(f"{row}  ", style="bold dim")
            for seat in row_seats:
                lines.append_text(format_seat_cell(seat, is_cursor=seat.seat_id == current.seat_id))
                lines.append(" ")
            lines.append("\n\n")
        lines.append("🚪 Entrance", style="dim")
        self.query_one("#floor-plan", Static).update(lines)

    def _refresh_details(self) -> None:
        details = self.query_one("#booking-details", Static)
        selected = self.board.selected
        if selected is None:
            details.update("Move to an available (green) table and press Enter to select it.")
            return

        text = Text()
        text.append("Selected Table\n", style="dim")
        text.append(f"{selected.seat_id}\n\n", style="bold #e8772e")
        text.append("Capacity  ", style="dim")
        text.append(f"{selected.capacity} persons\n")
        text.append("Type      ", style="dim")
        text.append(f"{TABLE_TYPE_LABELS[selected.table_type].capitalize()}\n\n")
        text.append(" M ", style="bold reverse #e8772e")
        text.append(" Continue to Menu")
        details.update(text)
