"""Unit tests for the system clipboard backend (platform calls mocked)."""

import subprocess
import sys
from io import BytesIO
from unittest.mock import MagicMock

import pytest
from PIL import Image, UnidentifiedImageError

from squish.common.errors import (
    ClipboardEmpty,
    ClipboardNotImage,
    ClipboardUnavailable,
    ClipboardWriteError,
)
from squish.common.schemas import ClipboardImage
from squish.utils import clipboard as clipboard_module
from squish.utils.clipboard import SystemClipboard, encode_png, find_copy_command

# ============================================================================
# Reading
# ============================================================================


class TestGetImage:
    def test_returns_rgba(self, monkeypatch: pytest.MonkeyPatch) -> None:
        grabbed = Image.new("RGB", (30, 20), color=(10, 20, 30))
        monkeypatch.setattr(clipboard_module.ImageGrab, "grabclipboard", lambda: grabbed)

        image = SystemClipboard().get_image()

        assert (image.width, image.height) == (30, 20)
        assert len(image.data) == 30 * 20 * 4
        assert image.data[:4] == bytes([10, 20, 30, 255])

    def test_empty_clipboard(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setattr(clipboard_module.ImageGrab, "grabclipboard", lambda: None)

        with pytest.raises(ClipboardEmpty):
            _ = SystemClipboard().get_image()

    def test_file_list_is_not_an_image(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setattr(
            clipboard_module.ImageGrab, "grabclipboard", lambda: ["/home/user/photo.png"]
        )

        with pytest.raises(ClipboardNotImage):
            _ = SystemClipboard().get_image()

    def test_undecodable_content(self, monkeypatch: pytest.MonkeyPatch) -> None:
        def grab():
            raise UnidentifiedImageError("cannot identify image file")

        monkeypatch.setattr(clipboard_module.ImageGrab, "grabclipboard", grab)

        with pytest.raises(ClipboardNotImage):
            _ = SystemClipboard().get_image()

    @pytest.mark.parametrize("error", [NotImplementedError("no tool"), ChildProcessError("failed")])
    def test_unavailable(self, monkeypatch: pytest.MonkeyPatch, error: Exception) -> None:
        def grab():
            raise error

        monkeypatch.setattr(clipboard_module.ImageGrab, "grabclipboard", grab)

        with pytest.raises(ClipboardUnavailable, match="couldn't access system clipboard"):
            _ = SystemClipboard().get_image()


# ============================================================================
# Writing
# ============================================================================


@pytest.fixture
def small_image() -> ClipboardImage:
    return ClipboardImage(width=2, height=1, data=bytes([255, 0, 0, 255, 0, 255, 0, 128]))


@pytest.fixture
def linux(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(sys, "platform", "linux")


class TestSetImage:
    def test_pipes_png_to_tool(
        self, monkeypatch: pytest.MonkeyPatch, linux, small_image: ClipboardImage
    ) -> None:
        run = MagicMock()
        monkeypatch.setattr(clipboard_module, "find_copy_command", lambda: ["xclip", "-i"])
        monkeypatch.setattr(clipboard_module.subprocess, "run", run)

        SystemClipboard().set_image(small_image)

        run.assert_called_once()
        assert run.call_args.args[0] == ["xclip", "-i"]
        payload = run.call_args.kwargs["input"]
        with Image.open(BytesIO(payload)) as img:
            assert img.format == "PNG"
            assert img.size == (2, 1)
            assert img.getpixel((1, 0)) == (0, 255, 0, 128)

    def test_no_tool(self, monkeypatch: pytest.MonkeyPatch, linux, small_image: ClipboardImage) -> None:
        monkeypatch.setattr(clipboard_module, "find_copy_command", lambda: None)

        with pytest.raises(ClipboardUnavailable):
            SystemClipboard().set_image(small_image)

    def test_tool_failure(self, monkeypatch: pytest.MonkeyPatch, linux, small_image: ClipboardImage) -> None:
        def failing_run(*args, **kwargs):
            raise subprocess.CalledProcessError(1, args[0])

        monkeypatch.setattr(clipboard_module, "find_copy_command", lambda: ["wl-copy"])
        monkeypatch.setattr(clipboard_module.subprocess, "run", failing_run)

        with pytest.raises(ClipboardWriteError, match="couldn't write resized image bytes"):
            SystemClipboard().set_image(small_image)


class TestHelpers:
    def test_prefers_wayland(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("WAYLAND_DISPLAY", "wayland-0")
        monkeypatch.setattr(clipboard_module.shutil, "which", lambda name: f"/usr/bin/{name}")

        assert find_copy_command() == ["wl-copy", "--type", "image/png"]

    def test_falls_back_to_xclip(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.delenv("WAYLAND_DISPLAY", raising=False)
        monkeypatch.setattr(clipboard_module.shutil, "which", lambda name: f"/usr/bin/{name}")

        command = find_copy_command()

        assert command is not None
        assert command[0] == "xclip"

    def test_nothing_installed(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setattr(clipboard_module.shutil, "which", lambda name: None)

        assert find_copy_command() is None

    def test_encode_png_rejects_bad_buffer(self) -> None:
        with pytest.raises(ClipboardWriteError):
            _ = encode_png(ClipboardImage(width=4, height=4, data=b"\x00" * 3))
