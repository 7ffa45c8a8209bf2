"""Errors raised while loading and executing flows.

Every error is fatal for the process that detects it: the message is
printed on one line and the process exits with status 1.
"""

from __future__ import annotations

from typing import Optional

from .components import ComponentType


class FlowError(Exception):
    """Base class for flow errors."""

    pass


class FlowFileError(FlowError):
    """The flow description could not be opened."""

    def __init__(self, path: str, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(f"Cannot open flow file '{path}': {reason}")


class RegistryFullError(FlowError):
    """More components were declared than the registry accepts."""

    def __init__(self, capacity: int):
        self.capacity = capacity
        super().__init__(
            f"Too many components (limit is {capacity})"
        )


class ComponentNotFoundError(FlowError):
    """A referenced component name is not defined."""

    def __init__(self, name: str, role: str = "Component"):
        self.name = name
        self.role = role
        super().__init__(f"{role} '{name}' not found")


class ComponentTypeError(FlowError):
    """A referenced component has the wrong type for its context."""

    pass


class UnsupportedComponentError(FlowError):
    """The executor has no behavior for this component type."""

    def __init__(self, name: str, component_type: ComponentType):
        self.name = name
        self.component_type = component_type
        super().__init__(
            f"Unsupported component type '{component_type}' for '{name}'"
        )


class LaunchError(FlowError):
    """An external program could not be executed."""

    def __init__(self, program: str, reason: str):
        self.program = program
        self.reason = reason
        super().__init__(f"Cannot execute '{program}': {reason}")


class ResourceError(FlowError):
    """Process or pipe creation failed."""

    def __init__(self, operation: str, cause: Optional[OSError] = None):
        self.operation = operation
        reason = cause.strerror if cause is not None else "unknown error"
        super().__init__(f"{operation} failed: {reason}")


__all__ = [
    "ComponentNotFoundError",
    "ComponentTypeError",
    "FlowError",
    "FlowFileError",
    "LaunchError",
    "RegistryFullError",
    "ResourceError",
    "UnsupportedComponentError",
]
