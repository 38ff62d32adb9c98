"""Test configuration and fixtures for squish.

This module provides:
- Synthetic test images written with Pillow (PNG, JPEG, GIF, text)
- An in-memory clipboard implementing the Clipboard protocol
- loguru cleanup between tests
"""

from pathlib import Path

import pytest
from loguru import logger
from PIL import Image, ImageDraw

from squish.common.config import SquishConfig
from squish.common.errors import SquishError
from squish.common.schemas import ClipboardImage

# ============================================================================
# Helpers
# ============================================================================


def draw_test_image(width: int, height: int, mode: str = "RGB") -> Image.Image:
    """Image with sharp edges, so resampling and blur visibly change it."""
    background = (73, 109, 137, 255) if mode == "RGBA" else (73, 109, 137)
    img = Image.new(mode, (width, height), color=background)
    draw = ImageDraw.Draw(img)

    for i in range(0, width, 50):
        draw.line([(i, 0), (i, height)], fill="white", width=2)
    for i in range(0, height, 50):
        draw.line([(0, i), (width, i)], fill="white", width=2)

    draw.ellipse(
        [width // 4, height // 4, 3 * width // 4, 3 * height // 4],
        fill=(200, 100, 100),
    )
    return img


class FakeClipboard:
    """In-memory clipboard for testing."""

    def __init__(
        self,
        image: ClipboardImage | None = None,
        get_error: SquishError | None = None,
        set_error: SquishError | None = None,
    ) -> None:
        self.image: ClipboardImage | None = image
        self.get_error: SquishError | None = get_error
        self.set_error: SquishError | None = set_error
        self.get_calls: int = 0
        self.written: list[ClipboardImage] = []

    def get_image(self) -> ClipboardImage:
        self.get_calls += 1
        if self.get_error is not None:
            raise self.get_error
        assert self.image is not None, "FakeClipboard has no image to hand out"
        return self.image

    def set_image(self, image: ClipboardImage) -> None:
        if self.set_error is not None:
            raise self.set_error
        self.written.append(image)


# ============================================================================
# Session / autouse fixtures
# ============================================================================


@pytest.fixture(autouse=True)
def reset_logger():
    """Drop sinks added by a test (they may point at captured streams)."""
    yield
    logger.remove()


# ============================================================================
# Function-Scoped Fixtures
# ============================================================================


@pytest.fixture
def config() -> SquishConfig:
    return SquishConfig()


@pytest.fixture
def fake_clipboard() -> FakeClipboard:
    return FakeClipboard()


@pytest.fixture
def clipboard_factory() -> type[FakeClipboard]:
    """FakeClipboard class, for tests that need a preloaded or failing clipboard."""
    return FakeClipboard


@pytest.fixture
def image_factory():
    return draw_test_image


@pytest.fixture
def png_path(tmp_path: Path) -> Path:
    """1136x668 opaque PNG."""
    output_path = tmp_path / "input.png"
    draw_test_image(1136, 668).save(output_path, "PNG")
    return output_path


@pytest.fixture
def rgba_png_path(tmp_path: Path) -> Path:
    """300x200 PNG with an alpha channel."""
    output_path = tmp_path / "transparent.png"
    img = draw_test_image(300, 200, mode="RGBA")
    img.putpixel((0, 0), (0, 0, 0, 0))
    img.save(output_path, "PNG")
    return output_path


@pytest.fixture
def jpeg_path(tmp_path: Path) -> Path:
    """800x600 JPEG."""
    output_path = tmp_path / "input.jpg"
    draw_test_image(800, 600).save(output_path, "JPEG", quality=85)
    return output_path


@pytest.fixture
def gif_path(tmp_path: Path) -> Path:
    output_path = tmp_path / "input.gif"
    draw_test_image(120, 80).save(output_path, "GIF")
    return output_path


@pytest.fixture
def text_path(tmp_path: Path) -> Path:
    output_path = tmp_path / "notes.txt"
    _ = output_path.write_text("This is not an image.\nJust some text.\n", encoding="utf-8")
    return output_path


@pytest.fixture
def clipboard_image() -> ClipboardImage:
    """120x90 raw RGBA image, as a clipboard backend reports it."""
    img = draw_test_image(120, 90, mode="RGBA")
    return ClipboardImage(width=img.width, height=img.height, data=img.tobytes())
