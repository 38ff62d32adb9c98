"""Delivers a resized image to its destinations."""

from pathlib import Path

from loguru import logger

from ..common.errors import DirectoryCreateError, EncodeWriteError
from ..common.schemas import ClipboardImage
from ..image.validated_image import ValidatedImage
from ..utils.clipboard import Clipboard

ENCODE_FAILURES = (OSError, ValueError, KeyError)


class OutputDispatcher:
    """Writes images to files and the clipboard.

    The only place in squish that writes to the filesystem.
    """

    def __init__(self, clipboard: Clipboard):
        self.clipboard: Clipboard = clipboard

    def write_file(self, image: ValidatedImage, path: str | Path) -> Path:
        """Encode ``image`` in its own format and write it to ``path``.

        Missing parent directories are created.

        Raises:
            DirectoryCreateError: If a parent directory cannot be created
            EncodeWriteError: If the file cannot be opened, encoded or written
        """
        path = Path(path)

        try:
            path.parent.mkdir(parents=True, exist_ok=True)
        except OSError as exc:
            raise DirectoryCreateError(f"couldn't create target directory: {exc}") from exc

        try:
            f = open(path, "wb")
        except OSError as exc:
            raise EncodeWriteError(f"couldn't create output file: {exc}") from exc

        with f:
            try:
                image.save(f)
            except ENCODE_FAILURES as exc:
                raise EncodeWriteError("couldn't write to output file", unexpected=True) from exc

        logger.debug(f"Wrote {image.format.display_name} image to {path}")
        return path

    def copy_to_clipboard(self, image: ValidatedImage) -> None:
        """Hand the RGBA pixels of ``image`` to the clipboard.

        Raises:
            ClipboardWriteError: If the clipboard rejects the image
            ClipboardUnavailable: If there is no clipboard to write to
        """
        payload = ClipboardImage(width=image.width, height=image.height, data=image.rgba_bytes())
        self.clipboard.set_image(payload)
