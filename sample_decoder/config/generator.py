"""Stream profile generator for Sample Decoder."""

from pathlib import Path

import yaml

from sample_decoder.config.defaults import DEFAULT_STREAM
from sample_decoder.config.protocols import CURRENT_SCHEMA_VERSION
from sample_decoder.config.types import StreamProfileDict


# Template header with documentation
PROFILE_HEADER = """\
# Sample Decoder Stream Profile
# =============================
#
# Describes the sample layout of a headerless (raw) payload file.
# WAV, AIFF and AU files carry this information in their headers and ignore it.
#
# STREAM SECTION
# --------------
#   encoding:        (required) One of PCM_SIGNED, PCM_UNSIGNED, PCM_FLOAT,
#                    ALAW, ULAW
#   bits_per_sample: (required) 1-128 for integer PCM, 1-64 for PCM_FLOAT
#   channels:        (required) Number of interleaved channels per frame
#   frame_rate:      (required) Frames per second
#   big_endian:      (optional) Byte order of each sample, default false
#   frames:          (optional) Frame count; derived from the payload size
#                    when omitted
#   header_bytes:    (optional) Bytes to skip before the payload, default 0

"""


class ProfileGenerator:
    """Generate example YAML stream profiles."""

    def __init__(self, stream: StreamProfileDict | None = None) -> None:
        """Initialize the profile generator.

        Args:
            stream: Stream settings (uses defaults if None)
        """
        self.stream = stream if stream is not None else DEFAULT_STREAM

    def generate(self, output_path: Path, *, include_header: bool = True) -> None:
        """Generate a YAML stream profile.

        Args:
            output_path: Path where the profile will be written
            include_header: Whether to include documentation header

        Raises:
            OSError: If the file cannot be written
        """
        output_path.parent.mkdir(parents=True, exist_ok=True)

        profile = {
            'schema_version': CURRENT_SCHEMA_VERSION,
            'stream': dict(self.stream),
        }

        yaml_content = yaml.safe_dump(
            profile,
            default_flow_style=False,
            sort_keys=False,
            allow_unicode=True,
            indent=2,
            width=80,
        )

        with open(output_path, 'w', encoding='utf-8') as f:
            if include_header:
                f.write(PROFILE_HEADER)
            f.write(yaml_content)
