from io import BytesIO

import magic

# libmagic only needs the leading bytes to recognise image containers
SNIFF_LENGTH = 8192

UNKNOWN_MIME_TYPES = frozenset(
    {
        "application/octet-stream",
        "application/x-empty",
        "inode/x-empty",
    }
)


def determine_mime(data: bytes | BytesIO) -> str | None:
    """Sniff the MIME type of a buffer from its content.

    Returns None when libmagic cannot tell what the bytes are.
    """
    if isinstance(data, BytesIO):
        data = data.getvalue()

    if not data:
        return None

    mime = magic.Magic(mime=True)
    file_type = mime.from_buffer(data[:SNIFF_LENGTH])
    if not file_type or file_type in UNKNOWN_MIME_TYPES:
        return None
    return file_type


def is_image_mime(file_type: str) -> bool:
    return file_type.startswith("image/")
