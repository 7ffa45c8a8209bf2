"""Component definitions."""

from __future__ import annotations

from typing import Dict, Literal, Union

from pydantic import BaseModel, ConfigDict, Field

ComponentType = Literal["node", "pipe", "concatenate", "stderr", "file"]


class Node(BaseModel):
    """Leaf component wrapping one external command."""

    type: Literal["node"] = "node"
    name: str
    command: str = ""


class Pipe(BaseModel):
    """Connects the output of one component to the input of another."""

    model_config = ConfigDict(populate_by_name=True)

    type: Literal["pipe"] = "pipe"
    name: str
    from_: str = Field(default="", alias="from")
    to: str = ""


class Concatenate(BaseModel):
    """Runs its parts one after another, outputs back-to-back.

    ``parts`` is the declared count; ``part_names`` maps an explicit index
    to a component name and may have gaps.
    """

    type: Literal["concatenate"] = "concatenate"
    name: str
    parts: int = 0
    part_names: Dict[int, str] = Field(default_factory=dict)


class StderrRedirect(BaseModel):
    """Merges a node's error stream into its output stream."""

    model_config = ConfigDict(populate_by_name=True)

    type: Literal["stderr"] = "stderr"
    name: str
    from_: str = Field(default="", alias="from")


class FileRedirect(BaseModel):
    """Parsed and stored, never executed."""

    type: Literal["file"] = "file"
    name: str
    filename: str = ""


Component = Union[Node, Pipe, Concatenate, StderrRedirect, FileRedirect]


__all__ = [
    "Component",
    "ComponentType",
    "Concatenate",
    "FileRedirect",
    "Node",
    "Pipe",
    "StderrRedirect",
]
