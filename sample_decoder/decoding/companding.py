"""A-law and µ-law expansion for Sample Decoder.

Samples are read as a sign bit followed by a fractional magnitude of the
byte-padded range, then expanded with the continuous companding curves.
This is not the segment table decode of ITU-T G.711; an 8-bit G.711 code
will not decode to the value its table lists.
"""

import math

from sample_decoder.config import SampleEncoding
from sample_decoder.constants import A_LAW_A, MU_LAW_MU
from sample_decoder.decoding.assembler import assemble_magnitude
from sample_decoder.exceptions import UnsupportedEncodingError

A_LAW_K = 1.0 + math.log(A_LAW_A)
A_LAW_CUTOFF = 1.0 / A_LAW_K


def max_magnitude(sample_bytes: int) -> int:
    """Largest magnitude representable once the sign bit is removed."""
    return (1 << (8 * sample_bytes - 1)) - 1


def split_sample(canonical: bytes) -> tuple[bool, float]:
    """Return ``(negative, y)`` where ``y`` is the magnitude as a fraction of its range."""
    negative = bool(canonical[0] & 0x80)
    magnitude = assemble_magnitude(canonical)
    y = float(magnitude) / float(max_magnitude(len(canonical)))
    return negative, y


def expand_alaw(y: float) -> float:
    """Expand a fractional A-law magnitude in [0, 1]."""
    if y < A_LAW_CUTOFF:
        return y * A_LAW_K / A_LAW_A
    return math.exp(y * A_LAW_K - 1.0)


def expand_mulaw(y: float) -> float:
    """Expand a fractional µ-law magnitude in [0, 1]."""
    return (math.pow(1.0 + MU_LAW_MU, y) - 1.0) / MU_LAW_MU


def decode_companded(canonical: bytes, encoding: SampleEncoding) -> float:
    """Decode one companded sample into a signed amplitude.

    Args:
        canonical: Big-endian sample bytes
        encoding: ALAW or ULAW

    Returns:
        float: The expanded amplitude, negated when the sign bit is set

    Raises:
        UnsupportedEncodingError: If encoding is not a companded encoding
    """
    match encoding:
        case SampleEncoding.ALAW:
            expand = expand_alaw
        case SampleEncoding.ULAW:
            expand = expand_mulaw
        case _:
            raise UnsupportedEncodingError(encoding)

    negative, y = split_sample(canonical)
    amplitude = expand(y)
    return -amplitude if negative else amplitude
