"""Stream profile source protocol."""

from typing import Any, Protocol, runtime_checkable

# Newest profile layout this release understands
CURRENT_SCHEMA_VERSION = 1


@runtime_checkable
class ProfileSource(Protocol):
    """Anything that can produce the raw ``stream`` mapping of a profile.

    ``YAMLProfileSource`` is the only implementation shipped; tests use
    in-memory sources.
    """

    def load(self) -> tuple[dict[str, Any], int]:
        """Return ``(stream_data, schema_version)``.

        Raises:
            ConfigError: If the source cannot be read or is badly structured
        """
        ...

    @property
    def source_description(self) -> str:
        """Where the profile came from, for log and error messages."""
        ...
