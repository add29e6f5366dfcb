"""Rich console reporting for Sample Decoder."""

from rich.console import Console
from rich.markup import escape


class ConsoleOutputHandler:
    """Report decoder diagnostics on a Rich console.

    Messages may contain Rich markup; values printed through :meth:`fields`
    are escaped so file paths and list reprs are shown verbatim.
    """

    def __init__(self, console: Console | None = None) -> None:
        self.console = console if console is not None else Console()

    def print(self, message: str, **kwargs) -> None:
        self.console.print(message, **kwargs)

    def info(self, message: str) -> None:
        self.print(message)

    def warning(self, message: str) -> None:
        self.print(f"[yellow]Warning:[/yellow] {message}")

    def error(self, message: str) -> None:
        self.print(f"[red]Error:[/red] {message}")

    def fields(self, rows: list[tuple[str, object]]) -> None:
        """Print one ``name = value`` line per row, names padded to a common width."""
        if not rows:
            return
        width = max(len(name) for name, _ in rows)
        for name, value in rows:
            self.print(f"{name.ljust(width)} = {escape(str(value))}")
