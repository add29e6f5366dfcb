"""Shared file handling for binary containers."""

import logging
from pathlib import Path
from types import TracebackType
from typing import BinaryIO, Self

from sample_decoder.decoding.models import StreamFormat
from sample_decoder.exceptions import MalformedContainerError

logger = logging.getLogger(__name__)


class FileContainer:
    """Base class for containers whose payload is a contiguous byte range."""

    def __init__(self, path: Path) -> None:
        self.path = path
        try:
            self._file: BinaryIO = open(path, "rb")
        except OSError as e:
            raise MalformedContainerError(f"Cannot open audio file {path}: {e}") from e
        self._format: StreamFormat | None = None

    @property
    def format(self) -> StreamFormat:
        if self._format is None:
            raise MalformedContainerError(f"Stream format of {self.path} has not been read")
        return self._format

    @property
    def file_size(self) -> int:
        return self.path.stat().st_size

    def seek_payload(self, offset: int) -> None:
        """Position the reader at the first payload byte."""
        if offset > self.file_size:
            raise MalformedContainerError(
                f"Payload offset {offset} is beyond the end of {self.path} ({self.file_size} bytes)"
            )
        self._file.seek(offset)
        logger.debug(f"Payload of {self.path.name} starts at byte {offset}")

    def read(self, size: int = -1, /) -> bytes:
        return self._file.read(size)

    def close(self) -> None:
        self._file.close()

    def __enter__(self) -> Self:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()
