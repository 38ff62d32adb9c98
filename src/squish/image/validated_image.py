"""Decoded, format-tagged images.

A ValidatedImage can only be obtained through one of the named factories
below; each either returns a fully decoded image or raises an
``ImageFormatError``. Nothing downstream of construction ever sees raw bytes.
"""

import struct
from dataclasses import dataclass
from io import BytesIO
from typing import BinaryIO

import numpy as np
from PIL import Image, UnidentifiedImageError

from ..common.errors import DecodeError, FormatUndetected, PixelBufferSizeMismatch
from ..common.schemas import ClipboardSource, FileSource, RawSource
from ..utils.media_types import determine_mime, is_image_mime
from ..utils.profiling import timed
from .formats import SupportedFormat

RGBA_CHANNELS = 4

# Anything Pillow raises for bytes that claim a format but do not decode as it
DECODE_FAILURES = (
    UnidentifiedImageError,
    Image.DecompressionBombError,
    OSError,
    SyntaxError,
    EOFError,
    ValueError,
    struct.error,
)


@dataclass(frozen=True)
class ValidatedImage:
    """A decoded pixel grid paired with the container format it came from."""

    pixels: Image.Image
    format: SupportedFormat

    @property
    def width(self) -> int:
        return self.pixels.width

    @property
    def height(self) -> int:
        return self.pixels.height

    @property
    def size(self) -> int:
        """Length in bytes of the decoded pixel buffer."""
        return self.width * self.height * len(self.pixels.getbands())

    def rgba_bytes(self) -> bytes:
        if self.pixels.mode == "RGBA":
            return self.pixels.tobytes()
        return self.pixels.convert("RGBA").tobytes()

    def save(self, fp: BinaryIO) -> None:
        """Encode with the encoder matching the format tag."""
        self.pixels.save(fp, format=self.format.pil_format)

    def encode(self) -> bytes:
        buffer = BytesIO()
        self.save(buffer)
        return buffer.getvalue()

    # ─────────────────────────────────────────────────────────────
    # Factories
    # ─────────────────────────────────────────────────────────────

    @classmethod
    @timed
    def from_encoded_bytes(cls, data: bytes, origin: str | None = None) -> "ValidatedImage":
        """Sniff, check and decode an encoded image.

        Args:
            data: Encoded container bytes (PNG or JPEG)
            origin: Where the bytes came from, used in error messages

        Raises:
            FormatUndetected: If the bytes are not recognisably an image
            UnsupportedFormat: If the image is neither JPEG nor PNG
            DecodeError: If the bytes are corrupt or truncated
        """
        where = f" ({origin})" if origin else ""

        file_type = determine_mime(data)
        if file_type is not None and is_image_mime(file_type):
            fmt = SupportedFormat.from_mime(file_type)
        else:
            # libmagic needs more than the signature; a bare one still decodes (and fails) below
            signature_match = SupportedFormat.from_signature(data)
            if signature_match is None:
                raise FormatUndetected(f"couldn't determine the image format{where}")
            fmt = signature_match

        try:
            with Image.open(BytesIO(data), formats=[fmt.pil_format]) as img:
                img.load()
                pixels = _normalise_mode(img, fmt)
        except DECODE_FAILURES as exc:
            raise DecodeError(f"couldn't decode bytes to a known image format{where}: {exc}") from exc

        return cls(pixels=pixels, format=fmt)

    @classmethod
    def from_rgba(cls, data: bytes, width: int, height: int) -> "ValidatedImage":
        """Wrap raw RGBA pixels, as handed out by the clipboard.

        The result is always tagged PNG: clipboard pixels carry no container
        format, so PNG stands in as the lossless one. This is an approximation,
        not a detected format.

        Raises:
            PixelBufferSizeMismatch: If ``data`` is not exactly width * height * 4 bytes
        """
        if width <= 0 or height <= 0:
            raise PixelBufferSizeMismatch(
                f"couldn't construct RGBA image from clipboard bytes; invalid dimensions {width}x{height}"
            )

        expected = width * height * RGBA_CHANNELS
        if len(data) != expected:
            raise PixelBufferSizeMismatch(
                "couldn't construct RGBA image from clipboard bytes; "
                + f"expected {expected} bytes for {width}x{height}, got {len(data)}"
            )

        grid = np.frombuffer(data, dtype=np.uint8).reshape(height, width, RGBA_CHANNELS)
        return cls(pixels=Image.fromarray(grid), format=SupportedFormat.PNG)

    @classmethod
    def from_raw_source(cls, source: RawSource) -> "ValidatedImage":
        match source:
            case FileSource(path=path, data=data):
                return cls.from_encoded_bytes(data, origin=path)
            case ClipboardSource(width=width, height=height, data=data):
                return cls.from_rgba(data, width, height)


def _normalise_mode(img: Image.Image, fmt: SupportedFormat) -> Image.Image:
    """Bring decoded pixels to RGB, or RGBA for PNGs carrying transparency."""
    if fmt is SupportedFormat.JPEG:
        target = "RGB"
    else:
        target = "RGBA" if img.has_transparency_data else "RGB"

    if img.mode == target:
        return img.copy()
    return img.convert(target)
