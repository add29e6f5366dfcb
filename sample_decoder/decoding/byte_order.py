"""Byte order normalization for Sample Decoder."""


def to_big_endian(raw: bytes, big_endian: bool) -> bytes:
    """Return ``raw`` reordered most-significant byte first.

    The result is an immutable ``bytes``; mutable input buffers
    are copied, never reversed in place.
    """
    if big_endian:
        return bytes(raw)
    return bytes(reversed(raw))
