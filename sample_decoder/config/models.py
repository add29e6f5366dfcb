"""Pydantic models for Sample Decoder configuration."""

from pydantic import BaseModel, Field, field_validator

from sample_decoder.config.enums import SampleEncoding
from sample_decoder.constants import MAX_BITS_PER_SAMPLE, MIN_BITS_PER_SAMPLE


class StreamProfile(BaseModel):
    """User-editable description of a headerless sample payload."""

    encoding: SampleEncoding
    bits_per_sample: int = Field(
        ..., ge=MIN_BITS_PER_SAMPLE, le=MAX_BITS_PER_SAMPLE, description="Declared bits per sample"
    )
    channels: int = Field(..., ge=1, description="Interleaved channel count")
    frame_rate: float = Field(..., gt=0, description="Frames per second")
    big_endian: bool = False
    frames: int | None = Field(None, ge=0, description="Frame count, derived from payload size when omitted")
    header_bytes: int = Field(0, ge=0, description="Bytes to skip before the payload")

    @field_validator("encoding", mode="before")
    @classmethod
    def parse_encoding(cls, value) -> SampleEncoding:
        if isinstance(value, str):
            return SampleEncoding.from_tag(value)
        return value
