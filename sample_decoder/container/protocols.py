"""Container protocols for Sample Decoder."""

from types import TracebackType
from typing import Protocol, Self, runtime_checkable

from sample_decoder.decoding.models import StreamFormat


@runtime_checkable
class ContainerStream(Protocol):
    """An opened audio container positioned at its sample payload.

    Containers parse their header on construction, expose the declared
    layout as ``format`` and then act as a sequential byte reader over the
    already demultiplexed payload.
    """

    @property
    def format(self) -> StreamFormat:
        """Return the sample layout declared by the container."""
        ...

    def read(self, size: int = -1, /) -> bytes:
        """Read up to ``size`` payload bytes."""
        ...

    def close(self) -> None:
        """Release the underlying file."""
        ...

    def __enter__(self) -> Self:
        ...

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        ...
