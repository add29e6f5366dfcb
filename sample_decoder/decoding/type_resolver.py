"""Resolution of the numeric sample type for Sample Decoder."""

from sample_decoder.config import ResolvedType, SampleEncoding
from sample_decoder.constants import MAX_BITS_PER_SAMPLE, MIN_BITS_PER_SAMPLE
from sample_decoder.exceptions import InvalidBitDepthError, UnsupportedEncodingError

# Upper bit bound (inclusive) of each integer width class
_SIGNED_WIDTHS: list[tuple[int, ResolvedType]] = [
    (8, ResolvedType.INT8),
    (16, ResolvedType.INT16),
    (32, ResolvedType.INT32),
    (64, ResolvedType.INT64),
    (128, ResolvedType.INT128),
]

_UNSIGNED_WIDTHS: list[tuple[int, ResolvedType]] = [
    (8, ResolvedType.UINT8),
    (16, ResolvedType.UINT16),
    (32, ResolvedType.UINT32),
    (64, ResolvedType.UINT64),
    (128, ResolvedType.UINT128),
]

_FLOAT_WIDTHS: list[tuple[int, ResolvedType]] = [
    (32, ResolvedType.FLOAT32),
    (64, ResolvedType.FLOAT64),
]


def bytes_per_sample(bits_per_sample: int) -> int:
    """Return the byte footprint of one sample, ``ceil(bits / 8)``."""
    return bits_per_sample // 8 + (1 if bits_per_sample % 8 else 0)


def resolve_type(encoding: SampleEncoding, bits_per_sample: int) -> ResolvedType:
    """Choose the numeric representation for a file's samples.

    Args:
        encoding: The encoding declared by the container
        bits_per_sample: The declared bits per sample

    Returns:
        ResolvedType: The representation every sample of the file decodes to

    Raises:
        UnsupportedEncodingError: If encoding is not a SampleEncoding
        InvalidBitDepthError: If bits_per_sample is outside the encoding's range
    """
    if not isinstance(encoding, SampleEncoding):
        raise UnsupportedEncodingError(encoding)

    match encoding:
        case SampleEncoding.ALAW | SampleEncoding.ULAW:
            return ResolvedType.FLOAT64
        case SampleEncoding.PCM_FLOAT:
            return _pick_width(_FLOAT_WIDTHS, encoding, bits_per_sample)
        case SampleEncoding.PCM_SIGNED:
            return _pick_width(_SIGNED_WIDTHS, encoding, bits_per_sample)
        case SampleEncoding.PCM_UNSIGNED:
            return _pick_width(_UNSIGNED_WIDTHS, encoding, bits_per_sample)
    raise UnsupportedEncodingError(encoding)


def _pick_width(
    widths: list[tuple[int, ResolvedType]],
    encoding: SampleEncoding,
    bits_per_sample: int,
) -> ResolvedType:
    if MIN_BITS_PER_SAMPLE <= bits_per_sample <= MAX_BITS_PER_SAMPLE:
        for upper, resolved in widths:
            if bits_per_sample <= upper:
                return resolved
    raise InvalidBitDepthError(bits_per_sample, encoding)
