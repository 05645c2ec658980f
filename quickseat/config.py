"""Runtime configuration defaults for pricing, logging and kitchen tickets."""

from __future__ import annotations

import os

CURRENCY_SYMBOL = "₹"
TAX_RATE_PERCENT = 5

DEBUG_LOG_PATH = os.environ.get("QUICKSEAT_DEBUG_LOG", "/tmp/quickseat-debug.log")

# Set QUICKSEAT_PRINT_TICKETS=0 on machines without a kitchen printer.
PRINT_KITCHEN_TICKETS = os.environ.get("QUICKSEAT_PRINT_TICKETS", "1").strip() != "0"

PRINTER_USB_VENDOR_ID = 0x28E9
PRINTER_USB_PRODUCT_ID = 0x0289
PRINTER_WIDTH_PX = 384
PRINTER_FONT_SIZE = 40
PRINTER_FONT_PATH = "/System/Library/Fonts/SFNS.ttf"
PRINTER_LEFT_INDENT_PX = 16
