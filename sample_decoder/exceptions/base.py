"""Base exception classes for Sample Decoder."""


class SampleDecoderError(Exception):
    """Base class for all errors raised by Sample Decoder.

    Every failure that should abort reading a file derives from this class so
    callers can catch one type and decide how to report it.
    """
