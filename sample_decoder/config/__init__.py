"""Configuration package for Sample Decoder."""

# Re-export enums
from sample_decoder.config.enums import SampleEncoding, ResolvedType

# Re-export models
from sample_decoder.config.models import StreamProfile

# Re-export loader
from sample_decoder.config.loader import ProfileLoader

# Re-export resolver
from sample_decoder.config.resolver import ProfileResolver

# Re-export defaults
from sample_decoder.config.defaults import DEFAULT_STREAM

# Re-export types
from sample_decoder.config.types import DecodedSample, StreamProfileDict

__all__ = [
    # Enums
    "SampleEncoding",
    "ResolvedType",
    # Models
    "StreamProfile",
    # Loader
    "ProfileLoader",
    # Resolver
    "ProfileResolver",
    # Defaults
    "DEFAULT_STREAM",
    # Types
    "DecodedSample",
    "StreamProfileDict",
]
