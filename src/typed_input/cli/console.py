"""CLI console helpers with optional Rich support.

This module intentionally avoids module-level imports of Rich so the
CLI keeps working (with plain stderr output) when Rich is not
installed.
"""

from __future__ import annotations

import sys
from typing import Any


def get_rich_console() -> Any:
    """Create a Rich console instance targeting stderr.

    Raises
    ------
    ModuleNotFoundError
        If Rich is not installed.
    """
    from rich.console import Console

    return Console(stderr=True)


class _ConsoleProxy:
    """Minimal stderr reporter with Rich fallback."""

    def print(self, *objects: object) -> None:
        """Render with Rich when available, else plain stderr print."""
        try:
            rich_console = get_rich_console()
        except ModuleNotFoundError:
            print(*objects, file=sys.stderr)
            return
        rich_console.print(*objects)

    def error(self, message: str, hint: str | None = None) -> None:
        """Render an error line and an optional hint line.

        *message* and *hint* are user data and are escaped before being
        handed to Rich's markup parser.
        """
        try:
            rich_console = get_rich_console()
            from rich.markup import escape
        except ModuleNotFoundError:
            print(f"Error: {message}", file=sys.stderr)
            if hint:
                print(f"Hint: {hint}", file=sys.stderr)
            return
        rich_console.print(f"[bold red]Error:[/bold red] {escape(message)}")
        if hint:
            rich_console.print(f"[yellow]Hint:[/yellow] {escape(hint)}")


console = _ConsoleProxy()
