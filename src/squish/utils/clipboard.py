"""System clipboard access for RGBA images.

Reading goes through Pillow's ImageGrab, which shells out to the platform
clipboard where needed. Writing pipes a PNG to the first available clipboard
tool:

- Wayland: wl-copy (wl-clipboard)
- X11: xclip
- macOS: osascript
"""

import os
import shutil
import subprocess
import sys
import tempfile
from io import BytesIO
from pathlib import Path
from typing import Protocol

from loguru import logger
from PIL import Image, ImageGrab, UnidentifiedImageError

from ..common.errors import (
    ClipboardEmpty,
    ClipboardNotImage,
    ClipboardUnavailable,
    ClipboardWriteError,
)
from ..common.schemas import ClipboardImage

CLIPBOARD_TIMEOUT_SECONDS = 10


class Clipboard(Protocol):
    """Anything that can hand out and accept raw RGBA images."""

    def get_image(self) -> ClipboardImage: ...

    def set_image(self, image: ClipboardImage) -> None: ...


class SystemClipboard:
    """Clipboard of the machine squish runs on.

    Each call opens the clipboard, does one operation and releases it.
    """

    def get_image(self) -> ClipboardImage:
        try:
            grabbed = ImageGrab.grabclipboard()
        except UnidentifiedImageError as exc:
            raise ClipboardNotImage("couldn't get image from clipboard; content is not an image") from exc
        except (NotImplementedError, OSError) as exc:
            raise ClipboardUnavailable(f"couldn't access system clipboard: {exc}") from exc

        if grabbed is None:
            raise ClipboardEmpty("couldn't get image from clipboard; no image found")

        if not isinstance(grabbed, Image.Image):
            # e.g. a list of copied file names
            raise ClipboardNotImage("couldn't get image from clipboard; content is not an image")

        rgba = grabbed.convert("RGBA")
        logger.debug(f"Read {rgba.width}x{rgba.height} image from clipboard")
        return ClipboardImage(width=rgba.width, height=rgba.height, data=rgba.tobytes())

    def set_image(self, image: ClipboardImage) -> None:
        payload = encode_png(image)

        if sys.platform == "darwin":
            self._set_image_macos(payload)
            return

        command = find_copy_command()
        if command is None:
            raise ClipboardUnavailable(
                "couldn't access system clipboard; install wl-clipboard (Wayland) or xclip (X11)"
            )

        logger.debug(f"Copying {len(payload)} PNG bytes with {command[0]}")
        try:
            _ = subprocess.run(
                command,
                input=payload,
                check=True,
                # xclip keeps serving the selection from a forked child, so no pipes
                stdout=subprocess.DEVNULL,
                stderr=subprocess.DEVNULL,
                timeout=CLIPBOARD_TIMEOUT_SECONDS,
            )
        except (subprocess.CalledProcessError, subprocess.TimeoutExpired, OSError) as exc:
            raise ClipboardWriteError(
                "couldn't write resized image bytes to system clipboard"
            ) from exc

    def _set_image_macos(self, payload: bytes) -> None:
        with tempfile.TemporaryDirectory() as tmp_dir:
            png_path = Path(tmp_dir) / "squish.png"
            _ = png_path.write_bytes(payload)
            script = f'set the clipboard to (read (POSIX file "{png_path}") as «class PNGf»)'
            try:
                _ = subprocess.run(
                    ["osascript", "-e", script],
                    check=True,
                    capture_output=True,
                    timeout=CLIPBOARD_TIMEOUT_SECONDS,
                )
            except (subprocess.CalledProcessError, subprocess.TimeoutExpired, OSError) as exc:
                raise ClipboardWriteError(
                    "couldn't write resized image bytes to system clipboard"
                ) from exc


def find_copy_command() -> list[str] | None:
    """Command line of the clipboard tool to pipe a PNG into, if one exists."""
    if os.environ.get("WAYLAND_DISPLAY") and shutil.which("wl-copy"):
        return ["wl-copy", "--type", "image/png"]
    if shutil.which("xclip"):
        return ["xclip", "-selection", "clipboard", "-t", "image/png", "-i"]
    return None


def encode_png(image: ClipboardImage) -> bytes:
    try:
        pixels = Image.frombytes("RGBA", (image.width, image.height), image.data)
    except ValueError as exc:
        raise ClipboardWriteError(f"couldn't package image for clipboard: {exc}") from exc

    buffer = BytesIO()
    pixels.save(buffer, format="PNG")
    return buffer.getvalue()
