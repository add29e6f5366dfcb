"""Shared pytest fixtures and marker registration for Sample Decoder.

Fixtures here are available to unit and integration tests alike. Keep them
free of container or profile details; those live in the per-suite
conftest modules.
"""

from __future__ import annotations

from pathlib import Path

import pytest
from pytest_mock import MockerFixture

from sample_decoder.output import ConsoleOutputHandler


# =============================================================================
# Directories
# =============================================================================

@pytest.fixture
def tmp_audio_dir(tmp_path: Path) -> Path:
    """Empty directory to write generated audio files into."""
    audio_dir = tmp_path / "audio"
    audio_dir.mkdir()
    return audio_dir


@pytest.fixture
def tmp_output_dir(tmp_path: Path) -> Path:
    """Empty directory to export decoded datasets into."""
    output_dir = tmp_path / "output"
    output_dir.mkdir()
    return output_dir


# =============================================================================
# Known Payloads
# =============================================================================

@pytest.fixture
def stereo_pcm16_payload() -> bytes:
    """Two big-endian 16-bit stereo frames holding [[100, -100], [0, 32767]]."""
    return bytes.fromhex("0064" "ff9c" "0000" "7fff")


# =============================================================================
# Reporting
# =============================================================================

@pytest.fixture
def mock_console(mocker: MockerFixture):
    """Stand-in for a Rich Console exposing only ``print``."""
    return mocker.MagicMock(spec_set=["print"])


@pytest.fixture
def mock_output_handler(mocker: MockerFixture):
    """Output handler double that records every call.

    Autospecced from ConsoleOutputHandler so a call it does not define
    fails the test.
    """
    return mocker.create_autospec(ConsoleOutputHandler, instance=True)


def pytest_configure(config):
    """Register the markers used across the suite."""
    for marker, description in (
        ("unit", "fast, isolated tests under tests/unit"),
        ("integration", "tests that decode real files end to end"),
        ("soundfile", "tests whose fixtures are written with soundfile"),
        ("pydantic", "tests of pydantic model validation"),
    ):
        config.addinivalue_line("markers", f"{marker}: {description}")
