"""Thermal receipt printing over USB ESC/POS.

Each receipt line is rendered to its own 1-bit image so the ticket uses the
configured TrueType font instead of the printer's built-in code page.
"""

from __future__ import annotations

from pathlib import Path

from cashier.config import (
    PRINTER_FONT_PATH,
    PRINTER_FONT_SIZE,
    PRINTER_LEFT_INDENT_PX,
    PRINTER_TAIL_SPACER_PX,
    PRINTER_USB_PRODUCT_ID,
    PRINTER_USB_VENDOR_ID,
    PRINTER_WIDTH_PX,
    setting,
)

# Headroom per line so descenders are not clipped on the paper.
_LINE_EXTRA_PX = 10
_BLANK_LINE_PX = 12
_FONT_OVERRIDE_ENV = "CASHIER_PRINTER_FONT_PATH"
_FONT_FALLBACKS = (
    "/usr/share/fonts/TTF/DejaVuSansMono.ttf",
    "/usr/share/fonts/truetype/dejavu/DejaVuSansMono.ttf",
    "/usr/share/fonts/dejavu/DejaVuSansMono.ttf",
    "/usr/share/fonts/liberation/LiberationMono-Regular.ttf",
)


def resolve_printer_font_path() -> str:
    """Return the first existing font among the override, the configured font and the fallbacks."""
    tried: list[str] = []
    for candidate in (setting(_FONT_OVERRIDE_ENV), PRINTER_FONT_PATH, *_FONT_FALLBACKS):
        if not candidate or candidate in tried:
            continue
        tried.append(candidate)
        if Path(candidate).is_file():
            return candidate

    raise RuntimeError(
        f"No usable receipt font. Point {_FONT_OVERRIDE_ENV} at a .ttf or .otf file "
        f"(tried {', '.join(tried)})"
    )


def _load_font():
    from PIL import ImageFont

    return ImageFont.truetype(resolve_printer_font_path(), PRINTER_FONT_SIZE)


def check_printer_dependencies() -> tuple[bool, str]:
    """Report whether a receipt ticket could be printed right now."""
    try:
        from escpos.printer import Usb  # noqa: F401

        _load_font()
    except Exception as exc:
        return (False, f"Receipt printer unavailable: {exc}")
    return (True, "Receipt printer ready")


def _render_spacer(height_px: int):
    from PIL import Image

    return Image.new("1", (PRINTER_WIDTH_PX, max(1, height_px)), color=1)


def _render_line(text: str, font):
    """Render one receipt line, full paper width, black on white."""
    from PIL import Image, ImageDraw

    if not text:
        return _render_spacer(_BLANK_LINE_PX)

    left, top, _, bottom = ImageDraw.Draw(Image.new("1", (1, 1))).textbbox((0, 0), text, font=font)
    height = bottom - top + _LINE_EXTRA_PX
    img = Image.new("1", (PRINTER_WIDTH_PX, height), color=1)
    ImageDraw.Draw(img).text((PRINTER_LEFT_INDENT_PX - left, _LINE_EXTRA_PX // 2 - top), text, font=font, fill=0)
    return img


def print_receipt_ticket(lines: list[str]) -> None:
    """Print receipt lines top to bottom, feed a tear-off tail and cut."""
    if not lines:
        return

    try:
        from escpos.printer import Usb
    except ImportError as exc:
        raise RuntimeError(f"Receipt printer support is not installed: {exc}") from exc

    font = _load_font()
    printer = Usb(PRINTER_USB_VENDOR_ID, PRINTER_USB_PRODUCT_ID)
    for line in lines:
        printer.image(_render_line(line, font))
    printer.image(_render_spacer(PRINTER_TAIL_SPACER_PX))
    printer.cut()
