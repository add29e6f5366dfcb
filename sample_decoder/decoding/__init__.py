"""Sample decoding core for Sample Decoder."""
from sample_decoder.decoding.assembler import assemble, assemble_magnitude
from sample_decoder.decoding.byte_order import to_big_endian
from sample_decoder.decoding.companding import decode_companded, expand_alaw, expand_mulaw
from sample_decoder.decoding.models import StreamFormat
from sample_decoder.decoding.pcm import decode_pcm
from sample_decoder.decoding.pipeline import PipelineState, SampleDecodingPipeline
from sample_decoder.decoding.protocols import ByteReader, SampleSink
from sample_decoder.decoding.type_resolver import bytes_per_sample, resolve_type

__all__ = [
    "assemble",
    "assemble_magnitude",
    "to_big_endian",
    "decode_companded",
    "expand_alaw",
    "expand_mulaw",
    "StreamFormat",
    "decode_pcm",
    "PipelineState",
    "SampleDecodingPipeline",
    "ByteReader",
    "SampleSink",
    "bytes_per_sample",
    "resolve_type",
]
