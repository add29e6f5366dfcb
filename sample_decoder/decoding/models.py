"""Stream format model shared by containers and the decoding pipeline."""

from pydantic import BaseModel, ConfigDict, Field

from sample_decoder.config import SampleEncoding
from sample_decoder.decoding.type_resolver import bytes_per_sample


class StreamFormat(BaseModel):
    """Sample layout declared by a container for its payload."""

    model_config = ConfigDict(frozen=True)

    num_frames: int = Field(..., ge=0)
    num_channels: int = Field(..., ge=1)
    bits_per_sample: int = Field(..., ge=1)
    encoding: SampleEncoding
    big_endian: bool
    frame_rate: float = Field(..., gt=0)
    frame_size: int | None = Field(None, ge=1, description="Declared bytes per frame, if the container states one")

    @property
    def bytes_per_sample(self) -> int:
        return bytes_per_sample(self.bits_per_sample)

    @property
    def effective_frame_size(self) -> int:
        """Declared frame size, falling back to ``channels * bytes_per_sample``."""
        if self.frame_size is None:
            return self.num_channels * self.bytes_per_sample
        return self.frame_size

    @property
    def payload_size(self) -> int:
        """Bytes the decoder consumes for the whole frame/channel grid."""
        return self.num_frames * self.num_channels * self.bytes_per_sample

    @property
    def dims(self) -> tuple[int, int]:
        return (self.num_frames, self.num_channels)
