"""Self-describing audio files (WAV, AIFF, AU) read through soundfile."""

import logging
from pathlib import Path

import soundfile as sf

from sample_decoder.config import SampleEncoding
from sample_decoder.container.base import FileContainer
from sample_decoder.container.layout import LAYOUT_READERS, PayloadLayout
from sample_decoder.decoding.models import StreamFormat
from sample_decoder.exceptions import MalformedContainerError, UnsupportedEncodingError

logger = logging.getLogger(__name__)

# soundfile subtype -> (encoding, bits per sample)
SUBTYPE_ENCODINGS: dict[str, tuple[SampleEncoding, int]] = {
    "PCM_S8": (SampleEncoding.PCM_SIGNED, 8),
    "PCM_U8": (SampleEncoding.PCM_UNSIGNED, 8),
    "PCM_16": (SampleEncoding.PCM_SIGNED, 16),
    "PCM_24": (SampleEncoding.PCM_SIGNED, 24),
    "PCM_32": (SampleEncoding.PCM_SIGNED, 32),
    "FLOAT": (SampleEncoding.PCM_FLOAT, 32),
    "DOUBLE": (SampleEncoding.PCM_FLOAT, 64),
    "ULAW": (SampleEncoding.ULAW, 8),
    "ALAW": (SampleEncoding.ALAW, 8),
}

ENDIAN_FLAGS = {"BIG": True, "LITTLE": False}


class SoundFileContainer(FileContainer):
    """Expose the sample payload of a WAV, AIFF or AU file.

    soundfile supplies the encoding, channel count and rate. The frame count
    comes from the container's declared data size when it has one, so a
    payload cut short by truncation surfaces as a stream underrun.
    """

    def __init__(self, path: Path) -> None:
        super().__init__(path)
        try:
            self._format = self._build_format()
        except Exception:
            self.close()
            raise

    def _build_format(self) -> StreamFormat:
        try:
            info = sf.info(str(self.path))
        except sf.LibsndfileError as e:
            raise MalformedContainerError(f"Failed to read audio file {self.path}: {e}") from e

        if info.subtype not in SUBTYPE_ENCODINGS:
            raise UnsupportedEncodingError(f"{info.format} subtype {info.subtype}")
        encoding, bits = SUBTYPE_ENCODINGS[info.subtype]

        locate = LAYOUT_READERS.get(info.format)
        if locate is None:
            raise UnsupportedEncodingError(f"{info.format} container")
        layout: PayloadLayout = locate(self._file, self.path.name)
        self.seek_payload(layout.offset)

        frame_size = info.channels * (bits // 8)
        num_frames = info.frames if layout.data_size is None else layout.data_size // frame_size
        logger.debug(
            f"{self.path.name}: {info.format} {info.subtype}, {info.channels} channels, "
            f"{num_frames} frames (soundfile reports {info.frames})"
        )

        return StreamFormat(
            num_frames=num_frames,
            num_channels=info.channels,
            bits_per_sample=bits,
            encoding=encoding,
            big_endian=ENDIAN_FLAGS.get(info.endian, layout.big_endian),
            frame_rate=float(info.samplerate),
            frame_size=frame_size,
        )
