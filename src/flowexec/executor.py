"""Flow execution engine.

Turns a component graph into a tree of OS processes. Nodes replace the
current process with their command; pipes, concatenations and stderr
redirects fork children and recurse into ``FlowExecutor.execute`` inside
those children, so the calling process only ever waits.
"""

import os
from typing import NoReturn, Optional

from .context import Limits
from .diagnostics import trace
from .models import (
    Component,
    ComponentTypeError,
    Concatenate,
    Node,
    Pipe,
    ResourceError,
    StderrRedirect,
    UnsupportedComponentError,
)
from .process_utils import exec_argv, make_pipe, redirect, spawn, wait
from .registry import Registry
from .tokenizer import tokenize

STDIN_FILENO = 0
STDOUT_FILENO = 1
STDERR_FILENO = 2


class FlowExecutor:
    """Executes components resolved from a registry."""

    def __init__(self, registry: Registry, limits: Optional[Limits] = None):
        """Initialize executor.

        Args:
            registry: Parsed components used to resolve references
            limits: Part index and argv limits (default: built-in limits)
        """
        self.registry = registry
        self.limits = limits or Limits()

    def execute(self, component: Component) -> None:
        """Execute ``component`` in the current process.

        Only returns for pipes, concatenations and stderr redirects, once
        every child they spawned has terminated. A node never returns.

        Raises:
            FlowError: On resolution, launch or resource failures
        """
        if isinstance(component, Node):
            self.execute_node(component)
        elif isinstance(component, Pipe):
            self.execute_pipe(component)
        elif isinstance(component, Concatenate):
            self.execute_concatenate(component)
        elif isinstance(component, StderrRedirect):
            self.execute_stderr(component)
        else:
            raise UnsupportedComponentError(component.name, component.type)

    def execute_node(self, node: Node) -> NoReturn:
        argv = tokenize(node.command, self.limits.max_tokens)
        trace(f"node '{node.name}'")
        exec_argv(argv)

    def execute_pipe(self, pipe: Pipe) -> None:
        source = self.registry.require(pipe.from_)
        destination = self.registry.require(pipe.to)

        read_fd, write_fd = make_pipe()

        def run_source() -> None:
            os.close(read_fd)
            redirect(write_fd, STDOUT_FILENO)
            os.close(write_fd)
            self.execute(source)

        def run_destination() -> None:
            os.close(write_fd)
            redirect(read_fd, STDIN_FILENO)
            os.close(read_fd)
            self.execute(destination)

        source_pid = None
        try:
            source_pid = spawn(
                run_source, f"pipe '{pipe.name}' source '{source.name}'"
            )
            destination_pid = spawn(
                run_destination,
                f"pipe '{pipe.name}' destination '{destination.name}'",
            )
        except ResourceError:
            os.close(read_fd)
            os.close(write_fd)
            if source_pid is not None:
                wait(source_pid)
            raise

        # Both ends must be closed here or the destination never sees EOF
        os.close(read_fd)
        os.close(write_fd)

        wait(source_pid)
        wait(destination_pid)

    def execute_concatenate(self, concat: Concatenate) -> None:
        count = min(concat.parts, self.limits.max_parts)
        for index in range(count):
            part_name = concat.part_names.get(index)
            if part_name is None:
                continue

            part = self.registry.require(part_name, role="Part")
            pid = spawn(
                lambda: self.execute(part),
                f"concatenate '{concat.name}' part {index} '{part.name}'",
            )
            wait(pid)

    def execute_stderr(self, redirect_component: StderrRedirect) -> None:
        node = self.registry.require(redirect_component.from_)
        if not isinstance(node, Node):
            raise ComponentTypeError(
                "stderr can only be applied to nodes "
                f"('{node.name}' is a {node.type})"
            )

        def run_node() -> None:
            redirect(STDOUT_FILENO, STDERR_FILENO)
            self.execute_node(node)

        pid = spawn(
            run_node,
            f"stderr '{redirect_component.name}' node '{node.name}'",
        )
        wait(pid)


def execute(
    registry: Registry, target: Component, limits: Optional[Limits] = None
) -> None:
    """Execute ``target`` with references resolved from ``registry``."""
    FlowExecutor(registry, limits).execute(target)


__all__ = ["FlowExecutor", "execute"]
