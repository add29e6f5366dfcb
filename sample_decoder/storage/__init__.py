"""Decoded sample storage for Sample Decoder."""
from sample_decoder.storage.sink import ArraySink, allocate_array
from sample_decoder.storage.dataset import (
    AudioDataset,
    AxisDescriptor,
    DataBundle,
    DatasetMetadata,
    build_axes,
)

__all__ = [
    "ArraySink",
    "allocate_array",
    "AudioDataset",
    "AxisDescriptor",
    "DataBundle",
    "DatasetMetadata",
    "build_axes",
]
