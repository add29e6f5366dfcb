"""Factory functions for audio containers."""

import logging
from pathlib import Path

from sample_decoder.config import StreamProfile
from sample_decoder.container.protocols import ContainerStream
from sample_decoder.container.raw import RawContainer
from sample_decoder.container.sound_file import SoundFileContainer
from sample_decoder.exceptions import MalformedContainerError

logger = logging.getLogger(__name__)

CONTAINER_TYPES = {
    ".wav": SoundFileContainer,
    ".wave": SoundFileContainer,
    ".aif": SoundFileContainer,
    ".aiff": SoundFileContainer,
    ".aifc": SoundFileContainer,
    ".au": SoundFileContainer,
    ".snd": SoundFileContainer,
}


def is_self_describing(path: Path) -> bool:
    """Whether ``path`` carries its own stream format and needs no profile."""
    return path.suffix.lower() in CONTAINER_TYPES


def open_container(path: Path, profile: StreamProfile | None = None) -> ContainerStream:
    """Open ``path`` with the container matching its suffix.

    Files with any other suffix are treated as raw payloads laid out as
    ``profile`` describes.

    Args:
        path: The audio file to open
        profile: Stream profile for raw payload files

    Returns:
        ContainerStream: The opened container, positioned at its payload

    Raises:
        MalformedContainerError: If the file cannot be parsed, or it is a raw
            payload and no profile was given
        UnsupportedEncodingError: If the container declares an unknown encoding
    """
    container_type = CONTAINER_TYPES.get(path.suffix.lower())
    if container_type is not None:
        logger.debug(f"Opening {path} as {container_type.__name__}")
        return container_type(path)

    if profile is None:
        raise MalformedContainerError(
            f"{path.name} is not a WAV, AIFF or AU file and no stream profile was provided"
        )
    logger.debug(f"Opening {path} as raw payload")
    return RawContainer(path, profile)
