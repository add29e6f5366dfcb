"""Stream profile exceptions for Sample Decoder."""

from pydantic import ValidationError

from sample_decoder.exceptions.base import SampleDecoderError


class ConfigError(SampleDecoderError):
    """Base class for stream profile problems the user has to fix."""


class ConfigValidationError(ConfigError):
    """A stream profile was read but its values are not acceptable.

    When the failure comes from the ``StreamProfile`` model the original
    pydantic error is kept on ``errors`` for callers that want the
    field-by-field detail.
    """

    def __init__(self, message: str, *, errors: ValidationError | None = None) -> None:
        super().__init__(message)
        self.errors = errors


class YAMLConfigError(ConfigValidationError):
    """A YAML stream profile could not be turned into profile data.

    Raised for a missing file, unparsable YAML, a document without a
    ``stream`` mapping, or a ``schema_version`` newer than this release.
    """
