"""Console output formatting utilities for envcmd."""

from __future__ import annotations

import threading
from typing import Optional

import click

# Rotated through by command index.
PALETTE = ("bright_blue", "bright_magenta", "bright_cyan")


class Console:
    """Centralized console output formatting.

    Every line goes through a single lock so that commands running on
    separate threads never split each other's lines.
    """

    def __init__(self, debug: bool = False, color: Optional[bool] = True):
        """
        Initialize console formatter.

        Args:
            debug: If True, show debug lines and stack traces
            color: ANSI colour on/off; None lets click decide per stream
        """
        self.debug = debug
        self.color = color
        self._lock = threading.Lock()

    def _echo(self, line: str, err: bool = False) -> None:
        with self._lock:
            click.echo(line, err=err, color=self.color)

    def print_info(self, message: str) -> None:
        """Print informational message."""
        self._echo(f"{click.style('I.', fg='green')} {message}")

    def print_error(self, message: str) -> None:
        """Print error message to stderr."""
        self._echo(f"{click.style('E.', fg='red')} {message}", err=True)

    def print_command(self, index: int, message: str) -> None:
        """Print a line tagged with a command index and its colour."""
        colour = PALETTE[index % len(PALETTE)]
        self._echo(f"{click.style(f'{index}.', fg=colour)} {message}")

    def print_exception(self, exc: Exception) -> None:
        """Print exception, with full traceback only in debug mode."""
        if self.debug:
            import traceback
            with self._lock:
                traceback.print_exc()
        else:
            self.print_error(f"Error: {exc}")

    def print_debug(self, message: str) -> None:
        """Print debug message (only if debug mode enabled)."""
        if self.debug:
            self._echo(f"[DEBUG] {message}", err=True)


# Global console instance (will be initialized by CLI)
_console: Optional[Console] = None


def get_console() -> Console:
    """Get the global console instance."""
    global _console
    if _console is None:
        _console = Console()
    return _console


def set_console(console: Console) -> None:
    """Set the global console instance."""
    global _console
    _console = console
