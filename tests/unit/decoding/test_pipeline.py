"""Unit tests for SampleDecodingPipeline."""

from __future__ import annotations

import io

import pytest

from sample_decoder.config import ResolvedType, SampleEncoding
from sample_decoder.decoding import PipelineState, SampleDecodingPipeline
from sample_decoder.exceptions import InvalidBitDepthError, StreamUnderrunError
from sample_decoder.storage import ArraySink


class RecordingSink:
    """Sink that records every write in order."""

    def __init__(self) -> None:
        self.writes: list[tuple[int, int, object]] = []

    def write(self, frame_index: int, channel_index: int, value: object) -> None:
        self.writes.append((frame_index, channel_index, value))


class TrickleReader:
    """Reader that hands out at most one byte per call."""

    def __init__(self, payload: bytes) -> None:
        self._buffer = io.BytesIO(payload)

    def read(self, size: int = -1, /) -> bytes:
        return self._buffer.read(1 if size != 0 else 0)


class TestSampleDecodingPipeline:
    """Tests for SampleDecodingPipeline."""

    def test_signed_16_big_endian_grid(self, stream_format_factory, byte_reader_factory, stereo_pcm16_payload) -> None:
        """Test a 2x2 signed 16-bit stream decodes to the expected grid."""
        payload = stereo_pcm16_payload
        fmt = stream_format_factory()
        sink = RecordingSink()

        consumed = SampleDecodingPipeline(fmt).run(byte_reader_factory(payload), sink)

        assert consumed == 8
        assert sink.writes == [(0, 0, 100), (0, 1, -100), (1, 0, 0), (1, 1, 32767)]

    def test_writes_into_array_sink(self, stream_format_factory, byte_reader_factory) -> None:
        """Test decoded values land at their (frame, channel) index."""
        payload = bytes.fromhex("0064" "ff9c" "0000" "7fff")
        fmt = stream_format_factory()
        pipeline = SampleDecodingPipeline(fmt)
        resolved = pipeline.initialize()
        sink = ArraySink(resolved, fmt.dims)

        pipeline.decode(byte_reader_factory(payload), sink)

        assert resolved is ResolvedType.INT16
        assert sink.data.tolist() == [[100, -100], [0, 32767]]

    def test_little_endian_payload(self, stream_format_factory, byte_reader_factory) -> None:
        """Test little-endian samples are reversed before assembly."""
        payload = bytes.fromhex("6400" "9cff")
        fmt = stream_format_factory(num_frames=1, big_endian=False)
        sink = RecordingSink()

        SampleDecodingPipeline(fmt).run(byte_reader_factory(payload), sink)

        assert [w[2] for w in sink.writes] == [100, -100]

    def test_unsigned_8_bit(self, stream_format_factory, byte_reader_factory) -> None:
        """Test unsigned samples decode to their magnitudes."""
        fmt = stream_format_factory(
            num_frames=3, num_channels=1, bits_per_sample=8, encoding=SampleEncoding.PCM_UNSIGNED
        )
        sink = RecordingSink()

        SampleDecodingPipeline(fmt).run(byte_reader_factory(b"\x00\x80\xff"), sink)

        assert [w[2] for w in sink.writes] == [0, 128, 255]

    def test_float_32(self, stream_format_factory, byte_reader_factory) -> None:
        """Test float samples are reinterpreted from their bit patterns."""
        fmt = stream_format_factory(
            num_frames=1, num_channels=2, bits_per_sample=32, encoding=SampleEncoding.PCM_FLOAT
        )
        sink = RecordingSink()

        SampleDecodingPipeline(fmt).run(byte_reader_factory(bytes.fromhex("3f800000" "bf800000")), sink)

        assert [w[2] for w in sink.writes] == [1.0, -1.0]

    def test_mulaw_dispatch(self, stream_format_factory, byte_reader_factory) -> None:
        """Test companded encodings go through the expansion curves."""
        fmt = stream_format_factory(
            num_frames=3, num_channels=1, bits_per_sample=8, encoding=SampleEncoding.ULAW
        )
        pipeline = SampleDecodingPipeline(fmt)
        sink = RecordingSink()

        pipeline.run(byte_reader_factory(b"\x00\x7f\xff"), sink)

        assert pipeline.resolved_type is ResolvedType.FLOAT64
        assert [w[2] for w in sink.writes] == [0.0, 1.0, -1.0]

    def test_short_reads_are_accumulated(self, stream_format_factory) -> None:
        """Test a reader returning one byte at a time still fills each sample."""
        fmt = stream_format_factory()
        sink = RecordingSink()

        consumed = SampleDecodingPipeline(fmt).run(
            TrickleReader(bytes.fromhex("0064ff9c00007fff")), sink
        )

        assert consumed == 8
        assert [w[2] for w in sink.writes] == [100, -100, 0, 32767]

    def test_zero_frames(self, stream_format_factory, byte_reader_factory) -> None:
        """Test an empty grid consumes nothing and finishes."""
        fmt = stream_format_factory(num_frames=0)
        pipeline = SampleDecodingPipeline(fmt)

        assert pipeline.run(byte_reader_factory(b""), RecordingSink()) == 0
        assert pipeline.state is PipelineState.DONE

    def test_underrun_raises_and_fails(self, stream_format_factory, byte_reader_factory) -> None:
        """Test a truncated payload raises StreamUnderrunError with its position."""
        fmt = stream_format_factory()
        pipeline = SampleDecodingPipeline(fmt)

        with pytest.raises(StreamUnderrunError) as exc_info:
            pipeline.run(byte_reader_factory(bytes.fromhex("0064ff9c00")), RecordingSink())

        assert exc_info.value.frame == 1
        assert exc_info.value.channel == 0
        assert exc_info.value.expected == 2
        assert exc_info.value.received == 1
        assert pipeline.state is PipelineState.FAILED

    def test_invalid_bit_depth_fails_initialization(self, stream_format_factory) -> None:
        """Test an unsupported depth fails before any byte is read."""
        fmt = stream_format_factory(bits_per_sample=129)
        pipeline = SampleDecodingPipeline(fmt)

        with pytest.raises(InvalidBitDepthError):
            pipeline.initialize()

        assert pipeline.state is PipelineState.FAILED

    def test_state_transitions(self, stream_format_factory, byte_reader_factory) -> None:
        """Test INITIALIZING -> DECODING -> DONE."""
        fmt = stream_format_factory(num_frames=1, num_channels=1)
        pipeline = SampleDecodingPipeline(fmt)
        assert pipeline.state is PipelineState.INITIALIZING

        pipeline.initialize()
        assert pipeline.state is PipelineState.DECODING

        pipeline.decode(byte_reader_factory(b"\x00\x01"), RecordingSink())
        assert pipeline.state is PipelineState.DONE

    def test_decode_before_initialize_raises(self, stream_format_factory, byte_reader_factory) -> None:
        """Test decode refuses to run from INITIALIZING."""
        pipeline = SampleDecodingPipeline(stream_format_factory())
        with pytest.raises(RuntimeError, match="INITIALIZING"):
            pipeline.decode(byte_reader_factory(b""), RecordingSink())

    def test_pipeline_is_single_use(self, stream_format_factory, byte_reader_factory) -> None:
        """Test a finished pipeline cannot be run again."""
        fmt = stream_format_factory(num_frames=1, num_channels=1)
        pipeline = SampleDecodingPipeline(fmt)
        pipeline.run(byte_reader_factory(b"\x00\x01"), RecordingSink())

        with pytest.raises(RuntimeError):
            pipeline.run(byte_reader_factory(b"\x00\x01"), RecordingSink())

    def test_progress_bar_wraps_frames(self, mocker, stream_format_factory, byte_reader_factory) -> None:
        """Test show_progress iterates frames through tqdm."""
        mock_tqdm = mocker.patch(
            "sample_decoder.decoding.pipeline.tqdm", side_effect=lambda it, **kwargs: it
        )
        fmt = stream_format_factory(num_frames=1, num_channels=1)

        SampleDecodingPipeline(fmt, show_progress=True).run(byte_reader_factory(b"\x00\x01"), RecordingSink())

        mock_tqdm.assert_called_once()
        assert mock_tqdm.call_args.kwargs["unit"] == "frame"
