"""Entry point for the QuickSeat Textual app."""

from __future__ import annotations

from quickseat.quickseat_app import QuickSeatApp


def main() -> None:
    """Run the Textual application."""
    QuickSeatApp().run()


if __name__ == "__main__":
    main()
