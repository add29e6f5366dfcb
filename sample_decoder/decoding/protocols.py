"""Decoding collaborator protocols for Sample Decoder."""

from typing import Protocol, runtime_checkable

from sample_decoder.config import DecodedSample


@runtime_checkable
class ByteReader(Protocol):
    """Sequential reader positioned at the start of the sample payload."""

    def read(self, size: int = -1, /) -> bytes:
        """Read up to ``size`` bytes; fewer are returned only at end of stream."""
        ...


@runtime_checkable
class SampleSink(Protocol):
    """Destination for decoded samples, indexed by (frame, channel)."""

    def write(self, frame_index: int, channel_index: int, value: DecodedSample) -> None:
        """Store one decoded sample."""
        ...
