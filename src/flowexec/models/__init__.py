"""Pydantic models and exceptions for flow descriptions."""

from .components import (
    Component,
    ComponentType,
    Concatenate,
    FileRedirect,
    Node,
    Pipe,
    StderrRedirect,
)
from .errors import (
    ComponentNotFoundError,
    ComponentTypeError,
    FlowError,
    FlowFileError,
    LaunchError,
    RegistryFullError,
    ResourceError,
    UnsupportedComponentError,
)

__all__ = [
    "Component",
    "ComponentNotFoundError",
    "ComponentType",
    "ComponentTypeError",
    "Concatenate",
    "FileRedirect",
    "FlowError",
    "FlowFileError",
    "LaunchError",
    "Node",
    "Pipe",
    "RegistryFullError",
    "ResourceError",
    "StderrRedirect",
    "UnsupportedComponentError",
]
