from enum import StrEnum

from ..common.errors import UnsupportedFormat

PNG_SIGNATURE = b"\x89PNG\r\n\x1a\n"
JPEG_SIGNATURE = b"\xff\xd8\xff"


class SupportedFormat(StrEnum):
    """Container formats squish reads and writes.

    The tag travels with the decoded pixels and picks the encoder on output.
    """

    JPEG = "image/jpeg"
    PNG = "image/png"

    @property
    def mime_type(self) -> str:
        return self.value

    @property
    def pil_format(self) -> str:
        """Pillow codec name."""
        return self.name

    @property
    def display_name(self) -> str:
        return self.name

    @classmethod
    def allowed_mime_types(cls) -> list[str]:
        return [fmt.mime_type for fmt in cls]

    @classmethod
    def from_mime(cls, file_type: str) -> "SupportedFormat":
        try:
            return cls(file_type)
        except ValueError:
            raise UnsupportedFormat(
                f"file format not supported; allowed types: [{', '.join(cls.allowed_mime_types())}]"
            ) from None

    @property
    def signature(self) -> bytes:
        """Leading bytes every file of this format starts with."""
        return PNG_SIGNATURE if self is SupportedFormat.PNG else JPEG_SIGNATURE

    @classmethod
    def from_signature(cls, data: bytes) -> "SupportedFormat | None":
        """Match the leading bytes alone, for inputs too short for libmagic."""
        for fmt in cls:
            if data.startswith(fmt.signature):
                return fmt
        return None
