from __future__ import annotations

import sys
from typing import Any

from rich.console import Console


console = Console()
stderr_console = Console(stderr=True)


def echo(message: Any, **kwargs: Any) -> None:
    """Output to console with rich formatting."""
    console.print(message, **kwargs)


def warning(message: str) -> None:
    """Print warning message to stderr without terminating execution."""
    stderr_console.print(f"Warning: {message}", style="yellow", highlight=False)


def error(message: str, code: int = 1) -> None:
    """Print error to stderr and exit with specified code."""
    stderr_console.print(f"Error: {message}", style="bold red", highlight=False)
    sys.exit(code)
