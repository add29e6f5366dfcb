"""Whole-file audio reading for Sample Decoder."""

import logging
from pathlib import Path

from sample_decoder.config import StreamProfile
from sample_decoder.container import ContainerStream, open_container
from sample_decoder.decoding import SampleDecodingPipeline, StreamFormat
from sample_decoder.exceptions import SampleDecoderError, UnsupportedEncodingError
from sample_decoder.output import ConsoleOutputHandler, OutputHandler
from sample_decoder.storage import ArraySink, AudioDataset, DataBundle, DatasetMetadata, build_axes

logger = logging.getLogger(__name__)


class AudioFileReader:
    """Open an audio file and decode its samples into a typed dataset.

    The reader opens the container matching the file, reports the declared
    layout, resolves the numeric sample type, allocates a frame-by-channel
    array for it and runs the decoding pipeline over the payload. The
    dataset is only returned once every sample has been decoded.
    """

    def __init__(
        self,
        path: Path,
        *,
        profile: StreamProfile | None = None,
        output_handler: OutputHandler | None = None,
        show_progress: bool = False,
    ) -> None:
        """Initialize the reader.

        Args:
            path: Audio file to read
            profile: Stream profile for raw payload files
            output_handler: Handler for diagnostics (console if None)
            show_progress: Draw a progress bar while decoding
        """
        self.path = path
        self.profile = profile
        self.show_progress = show_progress
        self._output_handler = output_handler or ConsoleOutputHandler()

    @property
    def source(self) -> str:
        return self.path.absolute().as_uri()

    def read(self) -> AudioDataset:
        """Decode the whole file.

        Returns:
            AudioDataset: The decoded samples with metadata and axes

        Raises:
            MalformedContainerError: If the container cannot be parsed
            UnsupportedEncodingError: If the encoding is not recognized
            InvalidBitDepthError: If the bit depth is unsupported
            StreamUnderrunError: If the payload is shorter than declared
        """
        with open_container(self.path, self.profile) as container:
            return self._decode(container)

    def _decode(self, container: ContainerStream) -> AudioDataset:
        stream_format = container.format
        self._report_format(stream_format)

        pipeline = SampleDecodingPipeline(stream_format, show_progress=self.show_progress)
        resolved_type = pipeline.initialize()
        sink = ArraySink(resolved_type, stream_format.dims)
        consumed = pipeline.decode(container, sink)
        logger.info(f"Decoded {self.path.name}: {consumed} bytes as {resolved_type.value}")

        return AudioDataset(
            sink.data,
            resolved_type=resolved_type,
            metadata=DatasetMetadata.from_format(stream_format),
            axes=build_axes(stream_format.frame_rate),
            source=self.source,
        )

    def _report_format(self, stream_format: StreamFormat) -> None:
        self._output_handler.fields([
            ("Frame size", stream_format.effective_frame_size),
            ("Num frames", stream_format.num_frames),
            ("Num channels", stream_format.num_channels),
            ("bits per sample", stream_format.bits_per_sample),
            ("bytes per sample", stream_format.bytes_per_sample),
            ("ENCODING", stream_format.encoding.value),
            ("dims", list(stream_format.dims)),
        ])


def read_all_datasets(
    path: Path,
    *,
    profile: StreamProfile | None = None,
    output_handler: OutputHandler | None = None,
    show_progress: bool = False,
) -> DataBundle:
    """Read every dataset in ``path`` into a bundle.

    A file that fails to decode yields an empty bundle; the failure is
    reported through the output handler and logged. An unrecognized
    encoding is re-raised so callers can report it distinctly.

    Raises:
        UnsupportedEncodingError: If the file declares an unknown encoding
    """
    bundle = DataBundle()
    handler = output_handler or ConsoleOutputHandler()
    reader = AudioFileReader(
        path, profile=profile, output_handler=handler, show_progress=show_progress
    )
    try:
        bundle.add(reader.read())
    except UnsupportedEncodingError:
        raise
    except SampleDecoderError as e:
        handler.error(str(e))
        logger.warning(f"Could not decode {path}: {e}")
    return bundle
