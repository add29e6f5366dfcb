"""PCM sample interpretation for Sample Decoder."""

import struct

from sample_decoder.config import DecodedSample, ResolvedType
from sample_decoder.exceptions import InvalidBitDepthError

_MASK_32 = (1 << 32) - 1
_MASK_64 = (1 << 64) - 1


def to_signed(value: int, bits: int) -> int:
    """Reinterpret an unsigned ``bits``-wide value as two's-complement."""
    if value & (1 << (bits - 1)):
        return value - (1 << bits)
    return value


def bits_to_float32(value: int) -> float:
    """Reinterpret the low 32 bits of ``value`` as an IEEE binary32."""
    return struct.unpack(">f", (value & _MASK_32).to_bytes(4, "big"))[0]


def bits_to_float64(value: int) -> float:
    """Reinterpret the low 64 bits of ``value`` as an IEEE binary64."""
    return struct.unpack(">d", (value & _MASK_64).to_bytes(8, "big"))[0]


def decode_pcm(magnitude: int, resolved: ResolvedType, sample_bytes: int) -> DecodedSample:
    """Interpret an assembled sample according to its resolved type.

    Integer samples are sign-extended from the byte-padded width
    (``8 * sample_bytes``), not from the declared bit depth: a 12-bit sample
    is read as a 16-bit value and a 20-bit sample as a 24-bit one.

    Unlike a plain int conversion of the assembled bytes, samples narrower
    than their resolved type are sign-extended: the 24-bit sample
    ``0xFFFFFF`` decodes to ``-1`` in an INT32 dataset, not ``16777215``.

    Args:
        magnitude: Big-endian assembled sample bytes
        resolved: The file's resolved type
        sample_bytes: Bytes per sample

    Returns:
        DecodedSample: An int for integer types, a float for float types

    Raises:
        InvalidBitDepthError: If the padded width does not fit the resolved type
    """
    padded_bits = 8 * sample_bytes
    if padded_bits > resolved.bits:
        raise InvalidBitDepthError(padded_bits, resolved.value)

    match resolved:
        case ResolvedType.FLOAT32:
            return bits_to_float32(magnitude)
        case ResolvedType.FLOAT64:
            return bits_to_float64(magnitude)
        case (
            ResolvedType.INT8
            | ResolvedType.INT16
            | ResolvedType.INT32
            | ResolvedType.INT64
            | ResolvedType.INT128
        ):
            return to_signed(magnitude, padded_bits)
        case (
            ResolvedType.UINT8
            | ResolvedType.UINT16
            | ResolvedType.UINT32
            | ResolvedType.UINT64
            | ResolvedType.UINT128
        ):
            return magnitude
    raise InvalidBitDepthError(padded_bits, resolved.value)
