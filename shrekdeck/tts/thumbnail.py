"""
Thumbnails for saved objects.

The simulator shows ``<name>.png`` next to ``<name>.json`` in its Saved
Objects browser. Two stock thumbnails are drawn with Pillow: a plain card
back and the blood flask variant. Any other image can be fitted instead.
"""

import io
import logging
from enum import Enum
from pathlib import Path

from PIL import Image, ImageDraw, ImageOps, UnidentifiedImageError

from shrekdeck.errors import ThumbnailError

logger = logging.getLogger(__name__)

THUMBNAIL_SIZE = (256, 256)

COLORS = {
    "transparent": (0, 0, 0, 0),
    "card": (38, 32, 30, 255),
    "border": (201, 164, 76, 255),
    "inner": (64, 54, 50, 255),
    "glass": (220, 230, 235, 255),
    "blood": (138, 10, 18, 255),
    "shine": (255, 255, 255, 160),
}


class ThumbnailStyle(Enum):
    CARD = "card"
    FLASK = "flask"


def _draw_card_back(draw: ImageDraw.ImageDraw, width: int, height: int) -> tuple[int, int, int, int]:
    """Draw a portrait card back centered on the canvas; return its inner box."""
    card_h = int(height * 0.92)
    card_w = int(card_h * 0.714)  # poker card aspect
    left = (width - card_w) // 2
    top = (height - card_h) // 2
    right, bottom = left + card_w, top + card_h

    radius = card_w // 10
    draw.rounded_rectangle((left, top, right, bottom), radius=radius, fill=COLORS["card"],
                           outline=COLORS["border"], width=6)
    inset = card_w // 8
    inner = (left + inset, top + inset, right - inset, bottom - inset)
    draw.rounded_rectangle(inner, radius=radius // 2, fill=COLORS["inner"],
                           outline=COLORS["border"], width=2)
    return inner


def _draw_flask(draw: ImageDraw.ImageDraw, box: tuple[int, int, int, int]) -> None:
    left, top, right, bottom = box
    cx = (left + right) // 2
    w = right - left
    h = bottom - top

    # Round bulb filled with blood, narrow neck and cork
    r = int(w * 0.36)
    cy = bottom - r - h // 10
    draw.ellipse((cx - r, cy - r, cx + r, cy + r), fill=COLORS["glass"])
    # Angles run clockwise from 3 o'clock; this fills the lower part of the bulb
    draw.chord((cx - r + 4, cy - r + 4, cx + r - 4, cy + r - 4), start=-20, end=200,
               fill=COLORS["blood"])

    neck_w = max(4, w // 6)
    neck_top = top + h // 8
    draw.rectangle((cx - neck_w // 2, neck_top, cx + neck_w // 2, cy - r + 2), fill=COLORS["glass"])
    draw.rectangle((cx - neck_w // 2 - 3, neck_top - h // 14, cx + neck_w // 2 + 3, neck_top),
                   fill=COLORS["border"])
    draw.ellipse((cx - r // 2, cy - r // 2, cx - r // 4, cy - r // 4), fill=COLORS["shine"])


def render_thumbnail(style: ThumbnailStyle = ThumbnailStyle.CARD) -> Image.Image:
    """Draw one of the stock thumbnails."""
    width, height = THUMBNAIL_SIZE
    image = Image.new("RGBA", THUMBNAIL_SIZE, COLORS["transparent"])
    draw = ImageDraw.Draw(image)

    inner = _draw_card_back(draw, width, height)
    if style is ThumbnailStyle.FLASK:
        _draw_flask(draw, inner)

    return image


def thumbnail_from_image(path: Path) -> Image.Image:
    """Fit an existing image into the thumbnail size, keeping its aspect ratio.

    Raises:
        ThumbnailError: if the file is missing or not an image
    """
    try:
        with Image.open(path) as source:
            source = source.convert("RGBA")
            fitted = ImageOps.contain(source, THUMBNAIL_SIZE, Image.Resampling.LANCZOS)
    except (OSError, UnidentifiedImageError) as e:
        raise ThumbnailError(f"Could not read thumbnail image {path}: {e}") from e

    canvas = Image.new("RGBA", THUMBNAIL_SIZE, COLORS["transparent"])
    x = (THUMBNAIL_SIZE[0] - fitted.width) // 2
    y = (THUMBNAIL_SIZE[1] - fitted.height) // 2
    canvas.paste(fitted, (x, y), fitted)
    return canvas


def png_bytes(image: Image.Image) -> bytes:
    buffer = io.BytesIO()
    image.save(buffer, format="PNG")
    return buffer.getvalue()
