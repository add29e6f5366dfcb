"""NumPy-backed sample sink for Sample Decoder."""

import numpy as np

from sample_decoder.config import DecodedSample, ResolvedType


def allocate_array(resolved_type: ResolvedType, dims: tuple[int, int]) -> np.ndarray:
    """Allocate a zeroed ``[frames, channels]`` array for ``resolved_type``.

    128-bit variants get an object array so every cell holds a Python int.
    """
    match resolved_type:
        case ResolvedType.INT128 | ResolvedType.UINT128:
            array = np.empty(dims, dtype=object)
            array.fill(0)
            return array
        case _:
            return np.zeros(dims, dtype=resolved_type.numpy_dtype)


class ArraySink:
    """Write decoded samples into a dense frame-by-channel array."""

    def __init__(self, resolved_type: ResolvedType, dims: tuple[int, int]) -> None:
        """Initialize the sink.

        Args:
            resolved_type: Numeric type of every sample
            dims: (num_frames, num_channels)
        """
        self.resolved_type = resolved_type
        self.data = allocate_array(resolved_type, dims)

    @property
    def dims(self) -> tuple[int, int]:
        return self.data.shape

    def write(self, frame_index: int, channel_index: int, value: DecodedSample) -> None:
        """Store one decoded sample at (frame_index, channel_index)."""
        match self.resolved_type:
            case ResolvedType.FLOAT32 | ResolvedType.FLOAT64:
                self.data[frame_index, channel_index] = float(value)
            case _:
                self.data[frame_index, channel_index] = int(value)
