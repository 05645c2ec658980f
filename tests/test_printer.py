"""
Unit tests for kitchen ticket layout, font resolution, rendering and USB output
"""

import pytest

from quickseat import printer
from quickseat.config import (
    PRINTER_FONT_SIZE,
    PRINTER_LEFT_INDENT_PX,
    PRINTER_USB_PRODUCT_ID,
    PRINTER_USB_VENDOR_ID,
    PRINTER_WIDTH_PX,
)
from quickseat.data import seed_orders


@pytest.mark.unit
class TestTicketLayout:
    def test_header(self):
        assert printer.ticket_header(seed_orders()[0]) == "ORD-001 · Table A1"

    def test_lines(self):
        assert printer.ticket_lines(seed_orders()[2]) == [
            "2x Masala Dosa",
            "1x Mango Lassi",
            "Amit Kumar · 1:00 PM",
        ]


@pytest.mark.unit
class TestFontResolution:
    def test_env_override_wins(self, tmp_path, monkeypatch):
        font = tmp_path / "ticket.ttf"
        font.write_bytes(b"")
        monkeypatch.setenv("QUICKSEAT_PRINTER_FONT_PATH", str(font))

        assert printer.resolve_printer_font_path() == str(font)

    def test_no_font_raises(self, tmp_path, monkeypatch):
        monkeypatch.delenv("QUICKSEAT_PRINTER_FONT_PATH", raising=False)
        monkeypatch.setattr(printer, "PRINTER_FONT_PATH", str(tmp_path / "missing.ttf"))
        monkeypatch.setattr(printer, "_LINUX_FONT_FALLBACKS", ())

        with pytest.raises(RuntimeError, match="No usable printer font"):
            printer.resolve_printer_font_path()

    def test_dependency_check_reports_failure(self, tmp_path, monkeypatch):
        monkeypatch.delenv("QUICKSEAT_PRINTER_FONT_PATH", raising=False)
        monkeypatch.setattr(printer, "PRINTER_FONT_PATH", str(tmp_path / "missing.ttf"))
        monkeypatch.setattr(printer, "_LINUX_FONT_FALLBACKS", ())

        ok, message = printer.check_printer_dependencies()

        assert ok is False
        assert message.startswith("Printer deps unavailable")


class RecordedCalls(list):
    device = None


@pytest.fixture
def ticket_font(monkeypatch):
    """Pin a real TrueType font for rendering, or skip where none is installed."""
    monkeypatch.delenv("QUICKSEAT_PRINTER_FONT_PATH", raising=False)
    try:
        font_path = printer.resolve_printer_font_path()
    except RuntimeError:
        pytest.skip("no TrueType font installed")
    monkeypatch.setenv("QUICKSEAT_PRINTER_FONT_PATH", font_path)
    return font_path


@pytest.fixture
def usb_calls(monkeypatch):
    """Replace the escpos USB printer with one that records what it is asked to do."""
    escpos_printer = pytest.importorskip("escpos.printer")
    calls = RecordedCalls()

    class RecordingUsb:
        fail_on_image = False

        def __init__(self, vendor_id, product_id):
            calls.append(("init", vendor_id, product_id))

        def image(self, img):
            calls.append("image")
            if RecordingUsb.fail_on_image:
                raise OSError("paper jam")

        def cut(self):
            calls.append("cut")

        def close(self):
            calls.append("close")

    monkeypatch.setattr(escpos_printer, "Usb", RecordingUsb)
    calls.device = RecordingUsb
    return calls


@pytest.mark.unit
class TestTicketRendering:
    def test_one_image_per_line_plus_header_and_separator(self, ticket_font):
        order = seed_orders()[0]

        images = printer.render_ticket_images(order)

        assert len(images) == len(order.lines) + 3
        assert all(img.mode == "1" for img in images)
        assert all(img.size[0] == PRINTER_WIDTH_PX for img in images)
        assert images[1].size[1] == printer._SEPARATOR_HEIGHT_PX

    def test_separator_is_inked(self):
        separator = printer._render_separator()

        assert separator.size == (PRINTER_WIDTH_PX, printer._SEPARATOR_HEIGHT_PX)
        assert separator.getpixel((PRINTER_WIDTH_PX // 2, printer._SEPARATOR_HEIGHT_PX // 2)) == 0

    def test_long_line_is_trimmed_to_width(self, ticket_font):
        from PIL import Image, ImageDraw, ImageFont

        font = ImageFont.truetype(ticket_font, PRINTER_FONT_SIZE)
        draw = ImageDraw.Draw(Image.new("1", (PRINTER_WIDTH_PX, PRINTER_FONT_SIZE), color=1))

        fitted = printer._fit_text_to_px("W" * 500, font, draw)

        assert fitted.endswith("...")
        assert len(fitted) < 500
        assert draw.textbbox((0, 0), fitted, font=font)[2] <= PRINTER_WIDTH_PX - 2 * PRINTER_LEFT_INDENT_PX

    def test_short_line_kept(self, ticket_font):
        from PIL import Image, ImageDraw, ImageFont

        font = ImageFont.truetype(ticket_font, PRINTER_FONT_SIZE)
        draw = ImageDraw.Draw(Image.new("1", (PRINTER_WIDTH_PX, PRINTER_FONT_SIZE), color=1))

        assert printer._fit_text_to_px("1x Idli", font, draw) == "1x Idli"


@pytest.mark.unit
class TestPrintKitchenTicket:
    def test_prints_every_image_then_cuts_and_closes(self, monkeypatch, usb_calls):
        monkeypatch.setattr(printer, "render_ticket_images", lambda order: ["header", "rule", "l1", "v1", "who"])

        printer.print_kitchen_ticket(seed_orders()[0])

        assert usb_calls == [
            ("init", PRINTER_USB_VENDOR_ID, PRINTER_USB_PRODUCT_ID),
            "image",
            "image",
            "image",
            "image",
            "image",
            "cut",
            "close",
        ]

    def test_printer_closed_when_image_fails(self, monkeypatch, usb_calls):
        monkeypatch.setattr(printer, "render_ticket_images", lambda order: ["header", "rule"])
        monkeypatch.setattr(usb_calls.device, "fail_on_image", True)

        with pytest.raises(OSError, match="paper jam"):
            printer.print_kitchen_ticket(seed_orders()[0])

        assert "cut" not in usb_calls
        assert usb_calls[-1] == "close"

    def test_renders_real_ticket(self, ticket_font, usb_calls):
        order = seed_orders()[2]

        printer.print_kitchen_ticket(order)

        assert usb_calls.count("image") == len(order.lines) + 3
        assert usb_calls[-2:] == ["cut", "close"]
