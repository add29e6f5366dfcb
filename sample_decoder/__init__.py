"""Sample Decoder: turn raw audio sample payloads into typed numeric arrays."""
from sample_decoder.constants import VERSION

__version__ = VERSION
