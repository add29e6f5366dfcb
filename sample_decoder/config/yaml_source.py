"""YAML stream profile source for Sample Decoder."""

from pathlib import Path
from typing import Any

import yaml

from sample_decoder.config.protocols import CURRENT_SCHEMA_VERSION
from sample_decoder.exceptions import YAMLConfigError


class YAMLProfileSource:
    """Load a stream profile from a YAML file.

    Implements the ProfileSource protocol for YAML file loading.

    Attributes:
        profile_path: Path to the YAML profile file
    """

    def __init__(self, profile_path: Path) -> None:
        """Initialize the YAML profile source.

        Args:
            profile_path: Path to the YAML profile file

        Raises:
            YAMLConfigError: If the file does not exist
        """
        self._profile_path = profile_path
        if not profile_path.exists():
            raise YAMLConfigError(f"Profile file not found: {profile_path}")
        if not profile_path.is_file():
            raise YAMLConfigError(f"Profile path is not a file: {profile_path}")

    @property
    def source_description(self) -> str:
        """Human-readable description of the profile source."""
        return f"YAML file: {self._profile_path}"

    def load(self) -> tuple[dict[str, Any], int]:
        """Load and parse the YAML profile file.

        Returns:
            Tuple of (stream_data, schema_version)

        Raises:
            YAMLConfigError: If YAML parsing fails or structure is invalid
        """
        try:
            with open(self._profile_path, 'r', encoding='utf-8') as f:
                data = yaml.safe_load(f)
        except yaml.YAMLError as e:
            error_msg = f"Failed to parse YAML profile: {e}"
            if hasattr(e, 'problem_mark') and e.problem_mark is not None:
                mark = e.problem_mark
                error_msg += f" (line {mark.line + 1}, column {mark.column + 1})"
            raise YAMLConfigError(error_msg) from e

        if data is None:
            raise YAMLConfigError("Profile file is empty")

        if not isinstance(data, dict):
            raise YAMLConfigError(
                f"Profile must be a YAML mapping, got {type(data).__name__}"
            )

        return self._extract_profile(data)

    def _extract_profile(self, data: dict[str, Any]) -> tuple[dict[str, Any], int]:
        """Extract the stream section and schema version from parsed YAML.

        Raises:
            YAMLConfigError: If required sections are missing or invalid
        """
        schema_version = data.get('schema_version', 1)
        if not isinstance(schema_version, int):
            raise YAMLConfigError(
                f"'schema_version' must be an integer, got {type(schema_version).__name__}"
            )
        if schema_version > CURRENT_SCHEMA_VERSION:
            raise YAMLConfigError(
                f"Profile schema version {schema_version} is not supported. "
                f"Maximum supported version is {CURRENT_SCHEMA_VERSION}. "
                "Please update Sample Decoder."
            )

        stream = data.get('stream')
        if stream is None:
            raise YAMLConfigError("Missing required 'stream' section in profile")
        if not isinstance(stream, dict):
            raise YAMLConfigError(
                f"'stream' must be a mapping, got {type(stream).__name__}"
            )

        return stream, schema_version
