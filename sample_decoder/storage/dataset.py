"""Decoded audio datasets for Sample Decoder."""

from typing import Iterator, NamedTuple

import numpy as np
from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from sample_decoder.config import ResolvedType
from sample_decoder.decoding.models import StreamFormat


class AxisDescriptor(NamedTuple):
    """Linear coordinate mapping for one array axis."""
    name: str
    unit: str
    scale: float
    offset: float = 0.0

    def coordinate(self, index: int) -> float:
        """Return the coordinate of ``index`` along this axis."""
        return self.offset + index * self.scale


class DatasetMetadata(BaseModel):
    """Descriptive metadata recorded for a decoded file."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)

    number_of_channels: int
    number_of_frames: int
    frame_size: int
    bits_per_sample: int
    bytes_per_sample: int
    encoding_name: str

    @classmethod
    def from_format(cls, stream_format: StreamFormat) -> "DatasetMetadata":
        """Build metadata from a container's stream format."""
        return cls(
            number_of_channels=stream_format.num_channels,
            number_of_frames=stream_format.num_frames,
            frame_size=stream_format.effective_frame_size,
            bits_per_sample=stream_format.bits_per_sample,
            bytes_per_sample=stream_format.bytes_per_sample,
            encoding_name=stream_format.encoding.value,
        )


def build_axes(frame_rate: float) -> tuple[AxisDescriptor, AxisDescriptor]:
    """Return the (time, channel) axes for a dataset sampled at ``frame_rate``."""
    return (
        AxisDescriptor(name="time", unit="seconds", scale=1.0 / frame_rate),
        AxisDescriptor(name="channel", unit="number", scale=1.0),
    )


class AudioDataset:
    """A decoded ``[frames, channels]`` sample array with its description."""

    value_type = "audio"
    value_unit = "amplitude"

    def __init__(
        self,
        data: np.ndarray,
        *,
        resolved_type: ResolvedType,
        metadata: DatasetMetadata,
        axes: tuple[AxisDescriptor, AxisDescriptor],
        source: str,
    ) -> None:
        self.data = data
        self.resolved_type = resolved_type
        self.metadata = metadata
        self.axes = axes
        self.source = source

    @property
    def dims(self) -> tuple[int, int]:
        return self.data.shape

    def time_of(self, frame_index: int) -> float:
        """Return the time in seconds of ``frame_index``."""
        return self.axes[0].coordinate(frame_index)

    def __repr__(self) -> str:
        return f"AudioDataset(source={self.source!r}, type={self.resolved_type.value}, dims={list(self.dims)})"


class DataBundle:
    """Datasets read from one or more files, grouped by resolved type."""

    def __init__(self) -> None:
        self._datasets: dict[ResolvedType, list[AudioDataset]] = {t: [] for t in ResolvedType}

    def add(self, dataset: AudioDataset) -> None:
        """Add a dataset under its resolved type."""
        self._datasets[dataset.resolved_type].append(dataset)

    def of_type(self, resolved_type: ResolvedType) -> list[AudioDataset]:
        """Return the datasets stored as ``resolved_type``."""
        return list(self._datasets[resolved_type])

    def datasets(self) -> list[AudioDataset]:
        """Return every dataset in the bundle."""
        return [d for group in self._datasets.values() for d in group]

    @property
    def is_empty(self) -> bool:
        return len(self) == 0

    def __len__(self) -> int:
        return sum(len(group) for group in self._datasets.values())

    def __iter__(self) -> Iterator[AudioDataset]:
        return iter(self.datasets())
