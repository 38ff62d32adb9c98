"""Turns an input descriptor into raw, undecoded bytes."""

import os
import stat
from pathlib import Path

from loguru import logger

from ..common.config import SquishConfig
from ..common.errors import FileNotFound, FileTooLarge, MetadataError, NoFileName, ReadError
from ..common.schemas import ClipboardSource, FileSource, RawSource
from ..utils.clipboard import Clipboard


class SourceAcquirer:
    """Reads the input image from the clipboard or a local file.

    Performs exactly one read per call and never decodes anything.
    """

    def __init__(self, config: SquishConfig, clipboard: Clipboard):
        self.config: SquishConfig = config
        self.clipboard: Clipboard = clipboard

    def is_clipboard(self, descriptor: str) -> bool:
        return descriptor == self.config.clipboard_sentinel

    def acquire(self, descriptor: str) -> RawSource:
        """Read the input named by ``descriptor``.

        Raises:
            SourceError: If the clipboard or file cannot be read
        """
        if self.is_clipboard(descriptor):
            return self.from_clipboard()
        return self.from_path(descriptor)

    def from_clipboard(self) -> ClipboardSource:
        image = self.clipboard.get_image()
        return ClipboardSource.from_clipboard_image(image)

    def from_path(self, path_str: str) -> FileSource:
        try:
            file_stat = os.stat(path_str)
        except FileNotFoundError as exc:
            raise FileNotFound(f"couldn't fetch file metadata: no such file \"{path_str}\"") from exc
        except OSError as exc:
            raise MetadataError(f"couldn't fetch file metadata: {exc}") from exc

        if not _has_file_stem(path_str):
            raise NoFileName("provided file has no name")

        if not stat.S_ISREG(file_stat.st_mode):
            raise MetadataError(f"couldn't fetch file metadata: \"{path_str}\" is not a regular file")

        file_len = file_stat.st_size
        if file_len > self.config.max_file_len_bytes:
            raise FileTooLarge(
                f"file's size ({file_len} bytes) exceeds the maximum supported by squish, "
                + f"which is {self.config.max_file_len_bytes} bytes"
            )

        try:
            data = Path(path_str).read_bytes()
        except OSError as exc:
            raise ReadError("couldn't read file contents", unexpected=True) from exc

        logger.debug(f"Read {len(data)} bytes from {path_str}")
        return FileSource(path=path_str, data=data)


def _has_file_stem(path_str: str) -> bool:
    name = Path(path_str).name
    return name not in ("", ".", "..") and Path(name).stem != ""
