"""Common module - configuration, errors, and data carriers."""

from .config import DEFAULT_CONFIG, SquishConfig
from .errors import ImageFormatError, OutputError, RequestError, SourceError, SquishError
from .schemas import (
    ClipboardImage,
    ClipboardSource,
    FileSource,
    RawSource,
    ResizeOutcome,
    ResizeRequest,
)

__all__ = [
    "DEFAULT_CONFIG",
    "SquishConfig",
    "SquishError",
    "SourceError",
    "ImageFormatError",
    "RequestError",
    "OutputError",
    "ClipboardImage",
    "ClipboardSource",
    "FileSource",
    "RawSource",
    "ResizeOutcome",
    "ResizeRequest",
]
