"""Low-level process helpers for the executor.

Thin wrappers around ``os.fork``, ``os.waitpid`` and ``os.execvp`` that
translate OS failures into flow errors and keep Python's own state
(buffered stdio, signal dispositions) from leaking into child processes.
"""

from __future__ import annotations

import os
import signal
import sys
import traceback
from collections.abc import Callable, Sequence
from typing import NoReturn

from .diagnostics import report, trace
from .models import FlowError, LaunchError, ResourceError

# Python ignores these at startup; exec'd programs expect the defaults
_RESTORED_SIGNALS = tuple(
    getattr(signal, name)
    for name in ("SIGPIPE", "SIGXFSZ")
    if hasattr(signal, name)
)


def flush_stdio() -> None:
    """Flush Python-level stdio so buffered data is written exactly once."""
    for stream in (sys.stdout, sys.stderr):
        if stream is not None:
            try:
                stream.flush()
            except (OSError, ValueError):
                # closed or detached stream
                pass


def restore_signals() -> None:
    for signum in _RESTORED_SIGNALS:
        signal.signal(signum, signal.SIG_DFL)


def spawn(body: Callable[[], None], label: str) -> int:
    """Fork a child that runs ``body`` and exits.

    The child never returns to the caller: it leaves through ``os._exit``
    with status 0 if ``body`` returns and 1 if it raises. A FlowError is
    reported as a one-line diagnostic on the child's stderr.

    Args:
        body: Work to run in the child
        label: Description used in verbose traces

    Returns:
        Child pid (in the parent)

    Raises:
        ResourceError: If the fork fails
    """
    flush_stdio()
    try:
        pid = os.fork()
    except OSError as e:
        raise ResourceError("fork", e) from e

    if pid == 0:
        status = 1
        try:
            body()
            status = 0
        except FlowError as e:
            report(e)
        except BaseException:
            traceback.print_exc()
        finally:
            flush_stdio()
            os._exit(status)

    trace(f"spawned {pid} for {label}")
    return pid


def wait(pid: int) -> int:
    """Block until child ``pid`` terminates and return its exit code.

    Negative values are the number of the terminating signal.
    """
    _, status = os.waitpid(pid, 0)
    code = os.waitstatus_to_exitcode(status)
    trace(f"child {pid} exited with {code}")
    return code


def make_pipe() -> tuple[int, int]:
    try:
        return os.pipe()
    except OSError as e:
        raise ResourceError("pipe", e) from e


def redirect(source_fd: int, target_fd: int) -> None:
    """Make ``target_fd`` refer to ``source_fd`` (dup2)."""
    try:
        os.dup2(source_fd, target_fd)
    except OSError as e:
        raise ResourceError("dup2", e) from e


def exec_argv(argv: Sequence[str]) -> NoReturn:
    """Replace the current process image with ``argv``.

    Raises:
        LaunchError: If argv is empty or the program cannot be executed
    """
    if not argv:
        raise LaunchError("", "empty command")

    trace(f"exec {list(argv)}")
    flush_stdio()
    restore_signals()
    try:
        os.execvp(argv[0], list(argv))
    except OSError as e:
        raise LaunchError(argv[0], e.strerror or str(e)) from e
