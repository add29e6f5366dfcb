"""Sample decoding exceptions for Sample Decoder."""

from sample_decoder.exceptions.base import SampleDecoderError


class DecodingError(SampleDecoderError):
    """Base class for errors raised while turning sample bytes into values."""


class InvalidBitDepthError(DecodingError):
    """Raised when a bit depth is outside the supported range for an encoding.

    PCM integer encodings accept 1-128 bits per sample and PCM float accepts
    1-64. The decoder also raises this when a resolved type cannot hold the
    byte-padded sample width it is handed.
    """

    def __init__(self, bits_per_sample: int, encoding: object) -> None:
        super().__init__(f"Unsupported bit depth {bits_per_sample} for {encoding}.")
        self.bits_per_sample = bits_per_sample
        self.encoding = encoding


class UnsupportedEncodingError(DecodingError):
    """Raised when an encoding tag is not one of the recognized sample encodings."""

    def __init__(self, encoding: object) -> None:
        super().__init__(f"Unknown encoding in audio file: {encoding}")
        self.encoding = encoding


class StreamUnderrunError(DecodingError):
    """Raised when the byte stream ends before the frame/channel grid is complete."""

    def __init__(self, frame: int, channel: int, expected: int, received: int) -> None:
        super().__init__(
            f"Stream ended at frame {frame}, channel {channel}: "
            f"expected {expected} bytes, got {received}."
        )
        self.frame = frame
        self.channel = channel
        self.expected = expected
        self.received = received
