"""Tests for thumbnail rendering."""

import io

import pytest
from PIL import Image

from shrekdeck.errors import ThumbnailError
from shrekdeck.tts.thumbnail import (
    THUMBNAIL_SIZE,
    ThumbnailStyle,
    png_bytes,
    render_thumbnail,
    thumbnail_from_image,
)


class TestRenderThumbnail:
    @pytest.mark.parametrize("style", list(ThumbnailStyle))
    def test_size_and_mode(self, style: ThumbnailStyle) -> None:
        image = render_thumbnail(style)

        assert image.size == THUMBNAIL_SIZE
        assert image.mode == "RGBA"

    def test_flask_differs_from_card(self) -> None:
        card = render_thumbnail(ThumbnailStyle.CARD)
        flask = render_thumbnail(ThumbnailStyle.FLASK)

        assert card.tobytes() != flask.tobytes()

    def test_corners_transparent(self) -> None:
        assert render_thumbnail().getpixel((0, 0)) == (0, 0, 0, 0)


class TestThumbnailFromImage:
    def test_fits_and_centers(self, tmp_path) -> None:
        path = tmp_path / "wide.png"
        Image.new("RGB", (512, 128), (255, 0, 0)).save(path)

        image = thumbnail_from_image(path)

        assert image.size == THUMBNAIL_SIZE
        red, green, blue, alpha = image.getpixel((128, 128))
        assert red > 200 and blue < 50 and alpha == 255
        # 512x128 shrinks to 256x64, leaving bands above and below
        assert image.getpixel((128, 10)) == (0, 0, 0, 0)

    def test_not_an_image(self, tmp_path) -> None:
        path = tmp_path / "fake.png"
        path.write_text("definitely not a png", encoding="utf-8")

        with pytest.raises(ThumbnailError):
            thumbnail_from_image(path)

    def test_missing_file(self, tmp_path) -> None:
        with pytest.raises(ThumbnailError, match="Could not read"):
            thumbnail_from_image(tmp_path / "nope.png")


def test_png_bytes_round_trip() -> None:
    data = png_bytes(render_thumbnail())

    assert data.startswith(b"\x89PNG")
    with Image.open(io.BytesIO(data)) as image:
        assert image.size == THUMBNAIL_SIZE
