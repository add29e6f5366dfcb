"""Integration test configuration and fixtures."""

from __future__ import annotations

import shutil
import tempfile
from pathlib import Path
from typing import Generator

import numpy as np
import pytest
import soundfile as sf


def pytest_collection_modifyitems(items):
    """Automatically mark all tests in integration/ with @pytest.mark.integration."""
    for item in items:
        if "/integration/" in str(item.fspath):
            item.add_marker(pytest.mark.integration)
            item.add_marker(pytest.mark.soundfile)


@pytest.fixture(scope="session")
def integration_temp_dir() -> Generator[Path, None, None]:
    """Create a temporary directory for integration tests."""
    temp_dir = Path(tempfile.mkdtemp(prefix="sample_decoder_integration_"))
    yield temp_dir
    # Cleanup after all tests
    shutil.rmtree(temp_dir, ignore_errors=True)


@pytest.fixture
def audio_dir(integration_temp_dir: Path, request) -> Path:
    """Per-test directory for generated audio files."""
    directory = integration_temp_dir / request.node.name
    directory.mkdir(exist_ok=True)
    return directory


@pytest.fixture
def signal() -> np.ndarray:
    """Two channels of deterministic audio in [-0.9, 0.9)."""
    rng = np.random.default_rng(seed=1234)
    return (rng.random((400, 2)) * 1.8 - 0.9).astype(np.float64)


@pytest.fixture
def write_sound_file(audio_dir: Path, signal: np.ndarray):
    """Factory fixture writing ``signal`` with soundfile.

    Returns:
        Callable taking a filename, container format and subtype.
    """
    def _create(
        filename: str,
        *,
        subtype: str,
        file_format: str | None = None,
        sample_rate: int = 22050,
    ) -> Path:
        path = audio_dir / filename
        sf.write(str(path), signal, sample_rate, subtype=subtype, format=file_format)
        return path

    return _create


@pytest.fixture
def output_dir(integration_temp_dir: Path, request) -> Path:
    """Create an output directory for exported datasets."""
    output = integration_temp_dir / f"{request.node.name}_output"
    output.mkdir(exist_ok=True)
    return output
