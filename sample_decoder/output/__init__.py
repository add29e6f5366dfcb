"""Output handling package for Sample Decoder."""
from sample_decoder.output.protocols import OutputHandler
from sample_decoder.output.console import ConsoleOutputHandler
from sample_decoder.output.export import DatasetExporter

__all__ = [
    "OutputHandler",
    "ConsoleOutputHandler",
    "DatasetExporter",
]
