"""Unit test shared fixtures.

Fixtures here are available to all unit tests but not integration tests.
Focus on lightweight mocks and fast execution.
"""

from __future__ import annotations

import io
import struct
from pathlib import Path
from typing import Any

import pytest

from sample_decoder.config import SampleEncoding
from sample_decoder.decoding import StreamFormat


# =============================================================================
# Automatic Markers
# =============================================================================

def pytest_collection_modifyitems(items):
    """Automatically mark all tests in unit/ directory with @pytest.mark.unit."""
    for item in items:
        if "/unit/" in str(item.fspath):
            item.add_marker(pytest.mark.unit)


# =============================================================================
# Sample Data Factories
# =============================================================================

@pytest.fixture
def stream_format_factory():
    """Factory fixture for creating StreamFormat instances.

    Returns:
        Callable that creates a StreamFormat with sensible defaults.

    Example:
        >>> fmt = stream_format_factory(num_frames=2, bits_per_sample=24)
        >>> assert fmt.bytes_per_sample == 3
    """
    def _create(
        num_frames: int = 2,
        num_channels: int = 2,
        bits_per_sample: int = 16,
        encoding: SampleEncoding = SampleEncoding.PCM_SIGNED,
        big_endian: bool = True,
        frame_rate: float = 8000.0,
        frame_size: int | None = None,
    ) -> StreamFormat:
        return StreamFormat(
            num_frames=num_frames,
            num_channels=num_channels,
            bits_per_sample=bits_per_sample,
            encoding=encoding,
            big_endian=big_endian,
            frame_rate=frame_rate,
            frame_size=frame_size,
        )

    return _create


@pytest.fixture
def byte_reader_factory():
    """Factory fixture wrapping raw bytes in a sequential reader.

    Returns:
        Callable that returns an io.BytesIO over the given payload.
    """
    def _create(payload: bytes) -> io.BytesIO:
        return io.BytesIO(payload)

    return _create


@pytest.fixture
def profile_data_factory():
    """Factory fixture for creating stream profile dictionaries.

    Returns:
        Callable that creates profile data dictionaries with sensible defaults.
    """
    def _create(**overrides: Any) -> dict[str, Any]:
        data: dict[str, Any] = {
            "encoding": "PCM_SIGNED",
            "bits_per_sample": 16,
            "channels": 2,
            "frame_rate": 44100,
            "big_endian": False,
        }
        data.update(overrides)
        return data

    return _create


# =============================================================================
# Container File Creation
# =============================================================================

@pytest.fixture
def write_au_file(tmp_path: Path):
    """Factory fixture for writing AU files with a chosen header.

    Returns:
        Callable that writes an AU file and returns its path.
    """
    def _create(
        payload: bytes,
        *,
        encoding_code: int = 3,
        sample_rate: int = 8000,
        channels: int = 1,
        data_size: int | None = None,
        little_endian: bool = False,
        filename: str = "test.au",
    ) -> Path:
        size = len(payload) if data_size is None else data_size
        if little_endian:
            header = b"dns." + struct.pack("<IIIII", 24, size, encoding_code, sample_rate, channels)
        else:
            header = b".snd" + struct.pack(">IIIII", 24, size, encoding_code, sample_rate, channels)
        file_path = tmp_path / filename
        file_path.write_bytes(header + payload)
        return file_path

    return _create


@pytest.fixture
def write_profile_file(tmp_path: Path):
    """Factory fixture for writing YAML stream profiles.

    Returns:
        Callable that writes the given YAML text and returns its path.
    """
    def _create(content: str, filename: str = "profile.yaml") -> Path:
        file_path = tmp_path / filename
        file_path.write_text(content, encoding="utf-8")
        return file_path

    return _create


# =============================================================================
# Profile Text
# =============================================================================

VALID_PROFILE_YAML = """\
schema_version: 1
stream:
  encoding: PCM_SIGNED
  bits_per_sample: 24
  channels: 2
  frame_rate: 48000
  big_endian: true
  header_bytes: 16
"""


@pytest.fixture
def valid_profile_yaml() -> str:
    """YAML text of a complete, valid stream profile."""
    return VALID_PROFILE_YAML
