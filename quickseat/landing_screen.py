"""Landing screen: hero, stats and feature cards."""

from __future__ import annotations

from rich.text import Text
from textual.app import ComposeResult
from textual.containers import Horizontal, Vertical
from textual.screen import Screen
from textual.widgets import Header, Static

from quickseat.cart import CartStore
from quickseat.constant import LANDING_FEATURES, LANDING_STATS
from quickseat.nav_bar import NavBar


class LandingScreen(Screen):
    """Marketing entry point with shortcuts into booking and the menu."""

    BINDINGS = [
        ("b", "go('book')", "Book a Seat"),
        ("m", "go('menu')", "Explore Menu"),
    ]

    CSS = """
    #hero {
        padding: 1 2;
        border: round $primary;
        height: auto;
    }

    #stats {
        height: auto;
        margin: 1 0;
    }

    .stat {
        width: 1fr;
        border: tall $surface;
        content-align: center middle;
        height: 4;
    }

    #features {
        height: auto;
    }

    .feature {
        width: 1fr;
        border: round $secondary;
        padding: 0 1;
        height: auto;
    }

    #cta {
        margin-top: 1;
        padding: 0 2;
        text-style: bold;
    }
    """

    def __init__(self, cart: CartStore) -> None:
        super().__init__()
        self.cart = cart

    def compose(self) -> ComposeResult:
        yield Header()
        yield NavBar("home", self.cart)
        with Vertical():
            yield Static(self._hero(), id="hero")
            with Horizontal(id="stats"):
                for value, label in LANDING_STATS:
                    yield Static(Text.assemble((value, "bold #e8772e"), "\n", (label, "dim")), classes="stat")
            with Horizontal(id="features"):
                for feature in LANDING_FEATURES:
                    yield Static(
                        Text.assemble(
                            f"{feature['emoji']} ",
                            (feature["title"], "bold"),
                            "\n",
                            (feature["description"], "dim"),
                        ),
                        classes="feature",
                    )
            yield Static(
                "Ready to Skip the Queue? Join thousands of diners who love the QuickSeat experience.",
                id="cta",
            )

    def _hero(self) -> Text:
        text = Text()
        text.append("✨ The Future of Dining\n\n", style="#e8772e")
        text.append("Book Your Seat. Dine Fresh.\n\n", style="bold")
        text.append(
            "Skip the wait. Book your seat in real-time, pre-order from the menu,\n"
            "and have your food cooked fresh the moment you arrive.\n\n",
            style="dim",
        )
        text.append(" B ", style="bold reverse #e8772e")
        text.append(" Book a Seat    ")
        text.append(" M ", style="bold reverse")
        text.append(" Explore Menu")
        return text

    def action_go(self, destination: str) -> None:
        self.app.navigate(destination)
