"""Headerless sample payloads described by a stream profile."""

from pathlib import Path

from sample_decoder.config import StreamProfile
from sample_decoder.container.base import FileContainer
from sample_decoder.decoding.models import StreamFormat
from sample_decoder.decoding.type_resolver import bytes_per_sample


class RawContainer(FileContainer):
    """Expose a raw interleaved payload using the layout from a profile."""

    def __init__(self, path: Path, profile: StreamProfile) -> None:
        super().__init__(path)
        self.profile = profile
        try:
            self.seek_payload(profile.header_bytes)
            self._format = self._build_format()
        except Exception:
            self.close()
            raise

    def _build_format(self) -> StreamFormat:
        profile = self.profile
        frame_size = profile.channels * bytes_per_sample(profile.bits_per_sample)
        num_frames = profile.frames
        if num_frames is None:
            num_frames = (self.file_size - profile.header_bytes) // frame_size

        return StreamFormat(
            num_frames=num_frames,
            num_channels=profile.channels,
            bits_per_sample=profile.bits_per_sample,
            encoding=profile.encoding,
            big_endian=profile.big_endian,
            frame_rate=profile.frame_rate,
        )
