"""Kitchen ticket printing on a USB thermal printer."""

from __future__ import annotations

import os
from pathlib import Path

from quickseat.config import (
    PRINTER_FONT_PATH,
    PRINTER_FONT_SIZE,
    PRINTER_LEFT_INDENT_PX,
    PRINTER_USB_PRODUCT_ID,
    PRINTER_USB_VENDOR_ID,
    PRINTER_WIDTH_PX,
)
from quickseat.models import Order
from quickseat.rendering import format_clock

_SEPARATOR_HEIGHT_PX = 12
_SEPARATOR_THICKNESS_PX = 3
# Extra vertical headroom so descenders are not clipped on thermal output.
_LINE_EXTRA_PX = 16
_FONT_OVERRIDE_ENV = "QUICKSEAT_PRINTER_FONT_PATH"
_LINUX_FONT_FALLBACKS = (
    "/usr/share/fonts/TTF/DejaVuSans.ttf",
    "/usr/share/fonts/truetype/dejavu/DejaVuSans.ttf",
    "/usr/share/fonts/dejavu/DejaVuSans.ttf",
    "/usr/share/fonts/noto/NotoSans-Regular.ttf",
    "/usr/share/fonts/liberation/LiberationSans-Regular.ttf",
)


def ticket_header(order: Order) -> str:
    return f"{order.order_id} · Table {order.seat_id}"


def ticket_lines(order: Order) -> list[str]:
    """Body lines of a kitchen ticket: one per dish, then who and when."""
    lines = [f"{line.quantity}x {line.item.name}" for line in order.lines]
    lines.append(f"{order.customer_name} · {format_clock(order.placed_at)}")
    return lines


def resolve_printer_font_path() -> str:
    """
    Resolve a printer font path.

    Resolution order:
    1. QUICKSEAT_PRINTER_FONT_PATH (if set)
    2. PRINTER_FONT_PATH
    3. Known Linux fallbacks
    """
    env_override = os.environ.get(_FONT_OVERRIDE_ENV, "").strip()
    candidates: list[str] = []
    if env_override:
        candidates.append(env_override)
    candidates.append(PRINTER_FONT_PATH)
    candidates.extend(_LINUX_FONT_FALLBACKS)

    seen: set[str] = set()
    for candidate in candidates:
        if not candidate or candidate in seen:
            continue
        seen.add(candidate)
        if Path(candidate).is_file():
            return candidate

    raise RuntimeError(
        f"No usable printer font found. Set {_FONT_OVERRIDE_ENV} to a valid .ttf/.otf file. "
        f"Tried: {', '.join(seen)}"
    )


def check_printer_dependencies() -> tuple[bool, str]:
    """Check whether printer dependencies are importable and a font loads."""
    try:
        from escpos.printer import Usb  # noqa: F401
        from PIL import ImageFont

        ImageFont.truetype(resolve_printer_font_path(), PRINTER_FONT_SIZE)
    except Exception as exc:
        return (False, f"Printer deps unavailable: {exc}")
    return (True, "Printer ready")


def _render_line(text: str, font: object) -> object:
    from PIL import Image, ImageDraw

    canvas_height = PRINTER_FONT_SIZE + _LINE_EXTRA_PX
    img = Image.new("1", (PRINTER_WIDTH_PX, canvas_height), color=1)
    draw = ImageDraw.Draw(img)

    bbox = draw.textbbox((0, 0), text, font=font)
    text_height = bbox[3] - bbox[1]
    y = (canvas_height - text_height) // 2 - bbox[1]
    draw.text((PRINTER_LEFT_INDENT_PX, y), _fit_text_to_px(text, font, draw), font=font, fill=0)
    return img


def _fit_text_to_px(text: str, font: object, draw: object) -> str:
    max_width_px = PRINTER_WIDTH_PX - (PRINTER_LEFT_INDENT_PX * 2)
    if draw.textbbox((0, 0), text, font=font)[2] <= max_width_px:
        return text
    ellipsis = "..."
    trimmed = text
    while trimmed:
        candidate = f"{trimmed}{ellipsis}"
        if draw.textbbox((0, 0), candidate, font=font)[2] <= max_width_px:
            return candidate
        trimmed = trimmed[:-1]
    return ellipsis


def _render_separator() -> object:
    from PIL import Image, ImageDraw

    img = Image.new("1", (PRINTER_WIDTH_PX, _SEPARATOR_HEIGHT_PX), color=1)
    draw = ImageDraw.Draw(img)
    top = (_SEPARATOR_HEIGHT_PX - _SEPARATOR_THICKNESS_PX) // 2
    draw.rectangle(
        (PRINTER_LEFT_INDENT_PX, top, PRINTER_WIDTH_PX - PRINTER_LEFT_INDENT_PX, top + _SEPARATOR_THICKNESS_PX - 1),
        fill=0,
    )
    return img


def render_ticket_images(order: Order) -> list[object]:
    """Render the ticket as a list of 1-bit images, top to bottom."""
    from PIL import ImageFont

    font_path = resolve_printer_font_path()
    header_font = ImageFont.truetype(font_path, PRINTER_FONT_SIZE)
    body_font = ImageFont.truetype(font_path, max(10, (PRINTER_FONT_SIZE * 3) // 4))

    images = [_render_line(ticket_header(order), header_font), _render_separator()]
    images.extend(_render_line(line, body_font) for line in ticket_lines(order))
    return images


def print_kitchen_ticket(order: Order) -> None:
    """Print one kitchen ticket and cut the paper."""
    from escpos.printer import Usb

    images = render_ticket_images(order)
    printer = Usb(PRINTER_USB_VENDOR_ID, PRINTER_USB_PRODUCT_ID)
    try:
        for img in images:
            printer.image(img)
        printer.cut()
    finally:
        printer.close()
