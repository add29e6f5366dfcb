"""Sample decoding pipeline for Sample Decoder."""

import logging
from enum import Enum, auto

from tqdm import tqdm

from sample_decoder.config import DecodedSample, ResolvedType
from sample_decoder.decoding.assembler import assemble
from sample_decoder.decoding.byte_order import to_big_endian
from sample_decoder.decoding.companding import decode_companded
from sample_decoder.decoding.models import StreamFormat
from sample_decoder.decoding.pcm import decode_pcm
from sample_decoder.decoding.protocols import ByteReader, SampleSink
from sample_decoder.decoding.type_resolver import resolve_type
from sample_decoder.exceptions import StreamUnderrunError

logger = logging.getLogger(__name__)


class PipelineState(Enum):
    """Lifecycle states of a decoding pipeline."""

    INITIALIZING = auto()
    DECODING = auto()
    DONE = auto()
    FAILED = auto()


class SampleDecodingPipeline:
    """Decode every (frame, channel) sample of a payload into a sink.

    The pipeline resolves the file's numeric type once, then reads the
    interleaved payload frame by frame and channel by channel, normalizing
    each sample to big-endian, assembling it and dispatching it to the PCM or
    companding decoder. Any error moves the pipeline to FAILED and is
    re-raised; the sink must then be discarded.

    A pipeline instance decodes one payload only.
    """

    def __init__(self, stream_format: StreamFormat, *, show_progress: bool = False) -> None:
        """Initialize the pipeline.

        Args:
            stream_format: Layout of the payload to decode
            show_progress: Draw a tqdm progress bar over frames
        """
        self.stream_format = stream_format
        self.show_progress = show_progress
        self.resolved_type: ResolvedType | None = None
        self._state = PipelineState.INITIALIZING

    @property
    def state(self) -> PipelineState:
        return self._state

    def initialize(self) -> ResolvedType:
        """Resolve the numeric type and move to DECODING.

        Returns:
            ResolvedType: The representation every sample decodes to

        Raises:
            InvalidBitDepthError: If the bit depth is unsupported for the encoding
            UnsupportedEncodingError: If the encoding is not recognized
            RuntimeError: If the pipeline has already been initialized
        """
        if self._state is not PipelineState.INITIALIZING:
            raise RuntimeError(f"Pipeline cannot initialize from state {self._state.name}")

        fmt = self.stream_format
        try:
            self.resolved_type = resolve_type(fmt.encoding, fmt.bits_per_sample)
        except Exception:
            self._state = PipelineState.FAILED
            raise

        self._state = PipelineState.DECODING
        logger.debug(
            f"Resolved {fmt.encoding.value} at {fmt.bits_per_sample} bits to {self.resolved_type.value}"
        )
        return self.resolved_type

    def decode(self, reader: ByteReader, sink: SampleSink) -> int:
        """Decode the whole frame/channel grid from ``reader`` into ``sink``.

        Args:
            reader: Byte reader positioned at the first sample
            sink: Destination for decoded samples

        Returns:
            int: Number of payload bytes consumed

        Raises:
            StreamUnderrunError: If the reader runs out of bytes
            RuntimeError: If the pipeline is not in the DECODING state
        """
        if self._state is not PipelineState.DECODING:
            raise RuntimeError(f"Pipeline cannot decode from state {self._state.name}")

        try:
            consumed = self._decode_all(reader, sink)
        except Exception:
            self._state = PipelineState.FAILED
            raise

        self._state = PipelineState.DONE
        logger.debug(f"Decoded {self.stream_format.num_frames} frames ({consumed} bytes)")
        return consumed

    def run(self, reader: ByteReader, sink: SampleSink) -> int:
        """Initialize and decode in one step; see :meth:`decode`."""
        self.initialize()
        return self.decode(reader, sink)

    def _decode_all(self, reader: ByteReader, sink: SampleSink) -> int:
        fmt = self.stream_format
        size = fmt.bytes_per_sample
        consumed = 0

        frames = range(fmt.num_frames)
        if self.show_progress:
            frames = tqdm(frames, desc="Decoding frames", unit="frame")

        for frame in frames:
            for channel in range(fmt.num_channels):
                raw = self._read_sample(reader, frame, channel, size)
                canonical = to_big_endian(raw, fmt.big_endian)
                sink.write(frame, channel, self._decode_sample(canonical, size))
                consumed += size
        return consumed

    def _decode_sample(self, canonical: bytes, size: int) -> DecodedSample:
        encoding = self.stream_format.encoding
        if encoding.is_companded:
            return decode_companded(canonical, encoding)
        return decode_pcm(assemble(canonical), self.resolved_type, size)

    @staticmethod
    def _read_sample(reader: ByteReader, frame: int, channel: int, size: int) -> bytes:
        """Read exactly ``size`` bytes, tolerating short reads from raw streams."""
        chunks: list[bytes] = []
        remaining = size
        while remaining:
            chunk = reader.read(remaining)
            if not chunk:
                break
            chunks.append(chunk)
            remaining -= len(chunk)

        data = b"".join(chunks)
        if len(data) < size:
            raise StreamUnderrunError(frame, channel, size, len(data))
        return data
