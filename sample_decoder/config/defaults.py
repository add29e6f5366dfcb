"""Default stream profile for Sample Decoder."""

from .types import StreamProfileDict

# Stereo 16-bit little-endian CD audio, the most common raw payload
DEFAULT_STREAM: StreamProfileDict = {
    "encoding": "PCM_SIGNED",
    "bits_per_sample": 16,
    "channels": 2,
    "frame_rate": 44100.0,
    "big_endian": False,
    "frames": None,
    "header_bytes": 0,
}
