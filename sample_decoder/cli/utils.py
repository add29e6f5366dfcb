"""CLI utility functions for Sample Decoder."""
from __future__ import annotations

from pathlib import Path
from typing import Optional

from sample_decoder.config import ProfileLoader, ProfileResolver, StreamProfile


def _sanitize_path(path: Path) -> Path:
    """Return a normalized, absolute version of ``path``."""

    return path.expanduser().resolve()


def _load_profile(explicit_path: Optional[Path]) -> Optional[StreamProfile]:
    """Load the stream profile chosen by the resolver, if any applies."""

    profile_path = ProfileResolver(
        _sanitize_path(explicit_path) if explicit_path else None
    ).resolve()
    if profile_path is None:
        return None
    return ProfileLoader.from_yaml(profile_path).load()


def _export_stem(input_path: Path) -> str:
    """Return the file name stem used for exported arrays."""

    return input_path.stem or input_path.name
