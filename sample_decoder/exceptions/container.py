"""Container exceptions for Sample Decoder."""

from sample_decoder.exceptions.base import SampleDecoderError


class MalformedContainerError(SampleDecoderError):
    """Raised when an audio container cannot be parsed.

    This covers issues such as:
    - Missing or truncated headers
    - Bad magic numbers
    - Raw payload files without a stream profile
    """
