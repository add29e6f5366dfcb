"""Audio container adapters for Sample Decoder."""
from sample_decoder.container.protocols import ContainerStream
from sample_decoder.container.factory import is_self_describing, open_container

__all__ = ["ContainerStream", "is_self_describing", "open_container"]
