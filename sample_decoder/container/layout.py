"""Locate the sample payload inside WAV, AIFF and AU files.

soundfile reports what the samples are but not where they live, so the
readers here walk just enough of each header to find the first payload byte.
"""

from typing import BinaryIO, Iterator, NamedTuple

from sample_decoder.exceptions import MalformedContainerError

AU_MAGIC_BIG = b".snd"
AU_MAGIC_LITTLE = b"dns."
AU_HEADER_SIZE = 24
AU_UNKNOWN_SIZE = 0xFFFFFFFF

# AIFC compression type for little-endian 16-bit PCM
AIFC_SOWT = b"sowt"


class PayloadLayout(NamedTuple):
    """Where the payload starts and how the container stores it."""
    offset: int
    data_size: int | None
    big_endian: bool


def _iter_chunks(stream: BinaryIO, start: int, byteorder: str) -> Iterator[tuple[bytes, int, int]]:
    """Yield ``(chunk_id, data_start, size)`` for each chunk after ``start``.

    Chunk bodies are padded to an even length.
    """
    position = start
    while True:
        stream.seek(position)
        header = stream.read(8)
        if len(header) < 8:
            return
        size = int.from_bytes(header[4:8], byteorder)
        yield header[:4], position + 8, size
        position += 8 + size + (size & 1)


def riff_layout(stream: BinaryIO, name: str) -> PayloadLayout:
    """Find the ``data`` chunk of a RIFF (or big-endian RIFX) file."""
    stream.seek(0)
    head = stream.read(12)
    if head[:4] == b"RIFF":
        byteorder = "little"
    elif head[:4] == b"RIFX":
        byteorder = "big"
    else:
        raise MalformedContainerError(f"{name} is not a RIFF file (magic {head[:4]!r})")

    for chunk_id, data_start, size in _iter_chunks(stream, 12, byteorder):
        if chunk_id == b"data":
            return PayloadLayout(data_start, size, byteorder == "big")
    raise MalformedContainerError(f"{name} has no data chunk")


def aiff_layout(stream: BinaryIO, name: str) -> PayloadLayout:
    """Find the ``SSND`` chunk of an AIFF or AIFC file.

    AIFF payloads are big-endian. The one exception is AIFC with the
    ``sowt`` compression type, which stores 16-bit samples little-endian.
    """
    stream.seek(0)
    head = stream.read(12)
    if head[:4] != b"FORM" or head[8:12] not in (b"AIFF", b"AIFC"):
        raise MalformedContainerError(f"{name} is not an AIFF file (magic {head[:4]!r})")

    big_endian = True
    for chunk_id, data_start, size in _iter_chunks(stream, 12, "big"):
        if chunk_id == b"COMM" and head[8:12] == b"AIFC":
            stream.seek(data_start + 18)
            big_endian = stream.read(4) != AIFC_SOWT
        elif chunk_id == b"SSND":
            stream.seek(data_start)
            offset = int.from_bytes(stream.read(4), "big")
            return PayloadLayout(data_start + 8 + offset, max(size - 8 - offset, 0), big_endian)
    raise MalformedContainerError(f"{name} has no SSND chunk")


def au_layout(stream: BinaryIO, name: str) -> PayloadLayout:
    """Read the data offset and size from an AU header."""
    stream.seek(0)
    header = stream.read(AU_HEADER_SIZE)
    if len(header) < AU_HEADER_SIZE:
        raise MalformedContainerError(f"AU header of {name} is truncated ({len(header)} bytes)")

    magic = header[:4]
    if magic == AU_MAGIC_BIG:
        byteorder = "big"
    elif magic == AU_MAGIC_LITTLE:
        byteorder = "little"
    else:
        raise MalformedContainerError(f"{name} is not an AU file (magic {magic!r})")

    offset = int.from_bytes(header[4:8], byteorder)
    data_size = int.from_bytes(header[8:12], byteorder)
    if offset < AU_HEADER_SIZE:
        raise MalformedContainerError(f"AU data offset {offset} overlaps the header")
    return PayloadLayout(offset, None if data_size == AU_UNKNOWN_SIZE else data_size, byteorder == "big")


# soundfile major format -> payload locator
LAYOUT_READERS = {
    "WAV": riff_layout,
    "WAVEX": riff_layout,
    "AIFF": aiff_layout,
    "AU": au_layout,
}
