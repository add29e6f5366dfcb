"""Reporting protocol used by the reader and the CLI."""

from typing import Protocol, runtime_checkable


@runtime_checkable
class OutputHandler(Protocol):
    """Destination for user-facing decoder messages.

    The reader only reports through this interface, so library callers can
    pass a handler that collects, logs or discards the diagnostics.
    """

    def print(self, message: str, **kwargs) -> None:
        """Emit ``message`` as-is."""
        ...

    def info(self, message: str) -> None:
        ...

    def warning(self, message: str) -> None:
        """Emit a non-fatal problem."""
        ...

    def error(self, message: str) -> None:
        """Emit the reason a file could not be decoded."""
        ...

    def fields(self, rows: list[tuple[str, object]]) -> None:
        """Emit aligned ``name = value`` lines describing a stream layout."""
        ...
