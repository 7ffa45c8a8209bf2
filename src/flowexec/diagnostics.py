"""Single-line diagnostics on stderr.

Shared by the CLI and the executor so that a child process reports its own
failure the same way the top-level process does.
"""

import os

import click

_verbose = False


def set_verbose(enabled: bool) -> None:
    """Enable or disable tracing for this process and future children."""
    global _verbose
    _verbose = enabled


def report(error: Exception) -> None:
    """Print the one-line failure message for ``error``."""
    click.echo(f"Error: {error}", err=True)


def trace(message: str) -> None:
    if _verbose:
        click.echo(f"[flowexec {os.getpid()}] {message}", err=True)
