"""Type aliases for Sample Decoder."""
from typing import TypeAlias, TypedDict

DecodedSample: TypeAlias = int | float


class StreamProfileDict(TypedDict, total=False):
    """TypedDict for raw stream profile dictionaries."""
    encoding: str
    bits_per_sample: int
    channels: int
    frame_rate: float
    big_endian: bool
    frames: int | None
    header_bytes: int
