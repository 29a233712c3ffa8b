"""Console output for the CLI.

Wraps rich for consistent output. All CLI output should go through this module.
"""

from rich.console import Console as RichConsole

_console: "Console | None" = None


class Console:
    def __init__(self) -> None:
        self._out = RichConsole()
        self._err = RichConsole(stderr=True)

    def print(self, message: str) -> None:
        self._out.print(message)

    def success(self, message: str) -> None:
        self._out.print(f"[green]✓[/green] {message}")

    def error(self, message: str, hint: str | None = None) -> None:
        self._err.print(f"[red]✗[/red] {message}")
        if hint:
            self._err.print(f"  [dim]{hint}[/dim]")


def get_console() -> Console:
    global _console
    if _console is None:
        _console = Console()
    return _console
