"""Stream profile loader for Sample Decoder."""

import logging
from pathlib import Path

from pydantic import ValidationError

from sample_decoder.config.models import StreamProfile
from sample_decoder.config.protocols import ProfileSource
from sample_decoder.config.yaml_source import YAMLProfileSource
from sample_decoder.exceptions import ConfigValidationError

logger = logging.getLogger(__name__)


class ProfileLoader:
    """Load and validate a stream profile from a profile source."""

    def __init__(self, source: ProfileSource) -> None:
        self._source = source

    @classmethod
    def from_yaml(cls, profile_path: Path) -> "ProfileLoader":
        """Create a loader reading from a YAML profile file."""
        return cls(YAMLProfileSource(profile_path))

    @property
    def source_description(self) -> str:
        return self._source.source_description

    def load(self) -> StreamProfile:
        """Return the validated stream profile.

        Raises:
            ConfigValidationError: If the stream section fails validation
            YAMLConfigError: If the YAML source cannot be read
            UnsupportedEncodingError: If the profile names an unknown encoding
        """
        stream_data, schema_version = self._source.load()
        logger.debug(f"Loaded profile schema v{schema_version} from {self.source_description}")
        try:
            return StreamProfile(**stream_data)
        except ValidationError as e:
            raise ConfigValidationError(
                f"Invalid stream profile in {self.source_description}: {stream_data}", errors=e
            ) from e
