"""Shared utility functions for gyatt.

Provides async command execution with inherited standard streams, a
directory helper, and Rich-based operator output.  All user-facing messages
go through the module-level :data:`console`.
"""

from __future__ import annotations

import asyncio
from pathlib import Path

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from gyatt.errors import CommandError

console = Console()

# ---------------------------------------------------------------------------
# Async command execution
# ---------------------------------------------------------------------------


async def run_command(cmd: list[str], cwd: str | Path | None = None) -> int:
    """Run an external command and wait for it to finish.

    The child inherits stdin, stdout and stderr so the operator can interact
    with it (e.g. git credential prompts).  No timeout is applied.

    Args:
        cmd: Argument vector; the first item is the executable.
        cwd: Working directory for the child process.

    Returns:
        The child's exit status.

    Raises:
        CommandError: If the executable cannot be launched.
    """
    try:
        process = await asyncio.create_subprocess_exec(
            *cmd,
            stdout=None,
            stderr=None,
            cwd=str(cwd) if cwd else None,
        )
    except OSError as exc:
        raise CommandError(cmd, None, str(exc)) from exc

    return await process.wait()


async def run_checked(cmd: list[str], cwd: str | Path | None = None) -> None:
    """Run *cmd* with inherited streams and raise on a non-zero exit status."""
    returncode = await run_command(cmd, cwd=cwd)
    if returncode != 0:
        raise CommandError(cmd, returncode)


# ---------------------------------------------------------------------------
# File-system helpers
# ---------------------------------------------------------------------------


def ensure_dir(path: str | Path) -> Path:
    """Create a directory (and parents) if it does not exist.

    Args:
        path: Directory path.

    Returns:
        The ``Path`` object that was created or already existed.
    """
    dir_path = Path(path)
    dir_path.mkdir(parents=True, exist_ok=True)
    return dir_path


# ---------------------------------------------------------------------------
# Rich output helpers
# ---------------------------------------------------------------------------


def print_step(message: str) -> None:
    """Print a dim progress line."""
    console.print(f"[dim]{escape(message)}[/dim]")


def print_summary_table(data: dict[str, str], title: str = "Summary") -> None:
    """Print a two-column key/value summary table.

    Args:
        data: Mapping of label -> value.
        title: Table title.
    """
    table = Table(title=title, show_header=True, header_style="bold cyan")
    table.add_column("Item", style="dim", no_wrap=True)
    table.add_column("Value")

    for key, value in data.items():
        table.add_row(key, str(value))

    console.print(table)
    console.print()


def print_success(message: str) -> None:
    """Print a green success message."""
    console.print(f"[bold green]{escape(message)}[/bold green]")


def print_error(message: str) -> None:
    """Print a red error message."""
    console.print(f"[bold red]{escape(message)}[/bold red]")


def print_warning(message: str) -> None:
    """Print a yellow warning message."""
    console.print(f"[bold yellow]{escape(message)}[/bold yellow]")
