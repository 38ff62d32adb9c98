"""Error taxonomy for the squish pipeline.

Every failure is terminal for a run. Errors raised with ``unexpected=True``
describe conditions the earlier checks should have ruled out; their message
asks the user to report them instead of fixing their input.
"""

from typing_extensions import override

UNEXPECTED_ERROR_MESSAGE = (
    "this isn't supposed to happen, please report it at https://github.com/dhth/squish/issues"
)


class SquishError(Exception):
    """Base class for all pipeline failures."""

    def __init__(self, message: str, *, unexpected: bool = False):
        self.message: str = message
        self.unexpected: bool = unexpected
        super().__init__(message)

    @override
    def __str__(self) -> str:
        if self.unexpected:
            return f"{self.message}; {UNEXPECTED_ERROR_MESSAGE}"
        return self.message


# ─────────────────────────────────────────────────────────────
# Input acquisition
# ─────────────────────────────────────────────────────────────


class SourceError(SquishError):
    pass


class FileNotFound(SourceError):
    pass


class MetadataError(SourceError):
    pass


class NoFileName(SourceError):
    pass


class FileTooLarge(SourceError):
    pass


class ReadError(SourceError):
    pass


class ClipboardUnavailable(SourceError):
    pass


class ClipboardEmpty(SourceError):
    pass


class ClipboardNotImage(SourceError):
    pass


# ─────────────────────────────────────────────────────────────
# Format detection and decoding
# ─────────────────────────────────────────────────────────────


class ImageFormatError(SquishError):
    pass


class FormatUndetected(ImageFormatError):
    pass


class UnsupportedFormat(ImageFormatError):
    pass


class DecodeError(ImageFormatError):
    pass


class PixelBufferSizeMismatch(ImageFormatError):
    pass


# ─────────────────────────────────────────────────────────────
# Request validation
# ─────────────────────────────────────────────────────────────


class RequestError(SquishError):
    pass


class WidthTooSmall(RequestError):
    pass


class NoOpResize(RequestError):
    pass


class RatioExceeded(RequestError):
    pass


class ClipboardFormatUnsupported(RequestError):
    pass


class NoDestination(RequestError):
    pass


# ─────────────────────────────────────────────────────────────
# Output delivery
# ─────────────────────────────────────────────────────────────


class OutputError(SquishError):
    pass


class DirectoryCreateError(OutputError):
    pass


class EncodeWriteError(OutputError):
    pass


class ClipboardWriteError(OutputError):
    pass
