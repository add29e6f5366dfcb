"""Exception hierarchy for Sample Decoder."""
from sample_decoder.exceptions.base import SampleDecoderError
from sample_decoder.exceptions.decoding import (
    DecodingError,
    InvalidBitDepthError,
    UnsupportedEncodingError,
    StreamUnderrunError,
)
from sample_decoder.exceptions.container import MalformedContainerError
from sample_decoder.exceptions.config import (
    ConfigError,
    ConfigValidationError,
    YAMLConfigError,
)

__all__ = [
    "SampleDecoderError",
    "DecodingError",
    "InvalidBitDepthError",
    "UnsupportedEncodingError",
    "StreamUnderrunError",
    "MalformedContainerError",
    "ConfigError",
    "ConfigValidationError",
    "YAMLConfigError",
]
