"""Stream profile path resolution for Sample Decoder."""

from pathlib import Path


# Default profile file names (in order of preference)
DEFAULT_PROFILE_NAMES = [
    "sample_decoder.yaml",
    "sample_decoder.yml",
]


class ProfileResolver:
    """Resolve stream profile file paths.

    Resolution order (first match wins):
    1. Explicit path provided via --profile CLI option
    2. Profile file in current working directory
    3. No profile (only self-describing containers can be read)
    """

    def __init__(self, explicit_path: Path | None = None) -> None:
        """Initialize the profile resolver.

        Args:
            explicit_path: Explicitly provided profile path (highest priority)
        """
        self.explicit_path = explicit_path

    def resolve(self) -> Path | None:
        """Resolve the profile file path.

        Returns:
            Path to the profile file, or None if no profile applies

        Raises:
            FileNotFoundError: If explicit_path is provided but doesn't exist
        """
        if self.explicit_path is not None:
            if not self.explicit_path.exists():
                raise FileNotFoundError(
                    f"Profile file not found: {self.explicit_path}"
                )
            return self.explicit_path

        return self._find_in_directory(Path.cwd())

    def _find_in_directory(self, directory: Path) -> Path | None:
        for name in DEFAULT_PROFILE_NAMES:
            profile_path = directory / name
            if profile_path.is_file():
                return profile_path
        return None

    @staticmethod
    def get_default_path() -> Path:
        """Get the default path for creating new profile files."""
        return Path.cwd() / DEFAULT_PROFILE_NAMES[0]
