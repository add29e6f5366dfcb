"""Config module test fixtures.

Provides fixtures specific to testing the stream profile model,
the YAML profile source and profile loading.
"""

from __future__ import annotations

import pytest

from sample_decoder.config import StreamProfile


# =============================================================================
# Valid Profile Fixtures
# =============================================================================

@pytest.fixture
def valid_stream_profile(profile_data_factory) -> StreamProfile:
    """Create a valid StreamProfile instance for testing.

    Returns:
        A stereo 16-bit little-endian StreamProfile.
    """
    return StreamProfile(**profile_data_factory())


# =============================================================================
# Parametrized Encoding Tags
# =============================================================================

@pytest.fixture(params=[
    ("PCM_SIGNED", "PCM_SIGNED"),
    ("pcm_unsigned", "PCM_UNSIGNED"),
    ("pcm-float", "PCM_FLOAT"),
    ("signed", "PCM_SIGNED"),
    ("unsigned", "PCM_UNSIGNED"),
    ("float", "PCM_FLOAT"),
    ("alaw", "ALAW"),
    ("a-law", "ALAW"),
    ("ulaw", "ULAW"),
    ("mulaw", "ULAW"),
    ("mu-law", "ULAW"),
    (" ULAW ", "ULAW"),
])
def encoding_tag(request) -> tuple[str, str]:
    """Parametrized (tag, expected encoding value) pairs."""
    return request.param
