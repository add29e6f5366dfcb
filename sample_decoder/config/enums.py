"""Configuration enums for Sample Decoder."""

import re
from enum import Enum

import numpy as np

from sample_decoder.exceptions import UnsupportedEncodingError


class SampleEncoding(str, Enum):
    """Sample encodings a container can declare."""

    PCM_SIGNED = "PCM_SIGNED"
    PCM_UNSIGNED = "PCM_UNSIGNED"
    PCM_FLOAT = "PCM_FLOAT"
    ALAW = "ALAW"
    ULAW = "ULAW"

    def __str__(self) -> str:  # pragma: no cover - convenience for Typer display
        return self.value

    @property
    def is_companded(self) -> bool:
        """Return True for the logarithmic (A-law / µ-law) encodings."""
        return self in (SampleEncoding.ALAW, SampleEncoding.ULAW)

    @classmethod
    def from_tag(cls, tag: "str | SampleEncoding") -> "SampleEncoding":
        """Parse an encoding tag such as ``"pcm_signed"`` or ``"mulaw"``.

        Raises:
            UnsupportedEncodingError: If the tag names no known encoding
        """
        if isinstance(tag, SampleEncoding):
            return tag
        if not isinstance(tag, str):
            raise UnsupportedEncodingError(tag)
        key = tag.strip().upper().replace("-", "_")
        try:
            return cls(key)
        except ValueError:
            pass
        try:
            return _ENCODING_ALIASES[key]
        except KeyError:
            raise UnsupportedEncodingError(tag) from None


_ENCODING_ALIASES = {
    "SIGNED": SampleEncoding.PCM_SIGNED,
    "UNSIGNED": SampleEncoding.PCM_UNSIGNED,
    "FLOAT": SampleEncoding.PCM_FLOAT,
    "A_LAW": SampleEncoding.ALAW,
    "MULAW": SampleEncoding.ULAW,
    "MU_LAW": SampleEncoding.ULAW,
    "U_LAW": SampleEncoding.ULAW,
}


class ResolvedType(Enum):
    """Numeric representation chosen for every sample of a file."""

    INT8 = "int8"
    INT16 = "int16"
    INT32 = "int32"
    INT64 = "int64"
    INT128 = "int128"
    UINT8 = "uint8"
    UINT16 = "uint16"
    UINT32 = "uint32"
    UINT64 = "uint64"
    UINT128 = "uint128"
    FLOAT32 = "float32"
    FLOAT64 = "float64"

    @property
    def bits(self) -> int:
        """Width of the representation in bits."""
        return int(re.sub(r"\D", "", self.value))

    @property
    def is_float(self) -> bool:
        return self in (ResolvedType.FLOAT32, ResolvedType.FLOAT64)

    @property
    def is_signed(self) -> bool:
        """True for signed integers and floats."""
        return not self.value.startswith("uint")

    @property
    def numpy_dtype(self) -> np.dtype:
        """Return the NumPy dtype used to store samples of this type.

        NumPy has no 128-bit integers, so those variants are stored as Python
        ints in an object array.
        """
        if self in (ResolvedType.INT128, ResolvedType.UINT128):
            return np.dtype(object)
        return np.dtype(self.value)
