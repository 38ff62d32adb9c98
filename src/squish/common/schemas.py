"""Data carriers passed between pipeline stages."""

from dataclasses import dataclass, field
from pathlib import Path
from typing import ClassVar, TypeAlias

from pydantic import BaseModel, ConfigDict, Field

# ─────────────────────────────────────────────────────────────
# Raw sources (before any decoding)
# ─────────────────────────────────────────────────────────────


@dataclass(frozen=True)
class FileSource:
    """Encoded bytes read from a local file."""

    path: str
    data: bytes = field(repr=False)


@dataclass(frozen=True)
class ClipboardImage:
    """Raw RGBA pixels with explicit dimensions, as exchanged with a clipboard."""

    width: int
    height: int
    data: bytes = field(repr=False)


@dataclass(frozen=True)
class ClipboardSource:
    """Raw RGBA pixels read from the system clipboard."""

    width: int
    height: int
    data: bytes = field(repr=False)

    @classmethod
    def from_clipboard_image(cls, image: ClipboardImage) -> "ClipboardSource":
        return cls(width=image.width, height=image.height, data=image.data)


RawSource: TypeAlias = FileSource | ClipboardSource


# ─────────────────────────────────────────────────────────────
# Request / outcome
# ─────────────────────────────────────────────────────────────


class ResizeRequest(BaseModel):
    """What the user asked for.

    Validated once by RequestValidator, then consumed by the transform and
    dispatch steps.

    Attributes:
        width: Target width in pixels
        blur_strength: Gaussian blur radius applied after resizing (0 = none)
        output_file: Destination path for the resized image
        copy_to_clipboard: Also write the resized image to the clipboard
    """

    width: int = Field(ge=0, description="Target width in pixels")
    blur_strength: int = Field(default=0, ge=0, le=255, description="Blur strength")
    output_file: Path | None = Field(default=None, description="Output file path")
    copy_to_clipboard: bool = Field(default=False, description="Copy result to clipboard")

    model_config: ClassVar[ConfigDict] = ConfigDict(frozen=True, extra="forbid")

    @property
    def has_destination(self) -> bool:
        return self.output_file is not None or self.copy_to_clipboard


class ResizeOutcome(BaseModel):
    """Summary of a completed pipeline run."""

    format: str
    input_width: int
    input_height: int
    input_size: int
    output_width: int
    output_height: int
    output_size: int
    written_to: Path | None = None
    copied_to_clipboard: bool = False

    @property
    def size_change_percent(self) -> float:
        """Signed change of the decoded pixel buffer size, in percent."""
        return (self.output_size - self.input_size) / self.input_size * 100.0
