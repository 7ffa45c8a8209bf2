"""Flow description parsing.

A flow description is a list of ``key=value`` lines. Component keys
(``node``, ``pipe``, ``concatenate``, ``stderr``, ``file``) open a new
component which becomes the cursor; every other key sets a field on the
cursor when the cursor has that field and is ignored otherwise:

    node=greet
    command=echo hello
    node=shout
    command=tr a-z A-Z
    pipe=loud
    from=greet
    to=shout
"""

import re
from pathlib import Path
from typing import Callable, Dict, Optional, Union

from .context import Limits
from .models import (
    Component,
    Concatenate,
    FileRedirect,
    FlowFileError,
    Node,
    Pipe,
    StderrRedirect,
)
from .registry import Registry

PART_PREFIX = "part_"

_INT_PREFIX = re.compile(r"[ \t\n\v\f\r]*([+-]?[0-9]+)")

# Keys that open a new component
COMPONENT_KEYS: Dict[str, Callable[[str], Component]] = {
    "node": lambda name: Node(name=name),
    "pipe": lambda name: Pipe(name=name),
    "concatenate": lambda name: Concatenate(name=name),
    "stderr": lambda name: StderrRedirect(name=name),
    "file": lambda name: FileRedirect(name=name),
}


def parse_int(text: str) -> int:
    """Parse the leading integer of ``text``, 0 when there is none.

    Mirrors C ``atoi``: leading whitespace and a sign are accepted and any
    trailing garbage is ignored.
    """
    match = _INT_PREFIX.match(text)
    return int(match.group(1)) if match else 0


def apply_key(
    component: Optional[Component],
    key: str,
    value: str,
    limits: Optional[Limits] = None,
) -> bool:
    """Apply a field key to the component under construction.

    Args:
        component: Current cursor (None before the first component)
        key: Line key
        value: Line value, untrimmed
        limits: Limits providing the part index bound

    Returns:
        True if a field was set, False if the key does not apply
    """
    limits = limits or Limits()

    if key == "command":
        if isinstance(component, Node):
            component.command = value
            return True
    elif key == "from":
        if isinstance(component, (Pipe, StderrRedirect)):
            component.from_ = value
            return True
    elif key == "to":
        if isinstance(component, Pipe):
            component.to = value
            return True
    elif key == "parts":
        if isinstance(component, Concatenate):
            component.parts = parse_int(value)
            return True
    elif key.startswith(PART_PREFIX):
        if isinstance(component, Concatenate):
            index = parse_int(key[len(PART_PREFIX) :])
            if 0 <= index < limits.max_parts:
                component.part_names[index] = value
                return True
    elif key == "name":
        if isinstance(component, FileRedirect):
            component.filename = value
            return True
    return False


def parse_flow_text(text: str, limits: Optional[Limits] = None) -> Registry:
    """Parse flow description text into a registry.

    References between components are stored as names and never checked
    here; an undefined name only fails when execution reaches it.

    Args:
        text: Flow description
        limits: Limits for registry capacity and part indices

    Returns:
        Registry holding components in file order

    Raises:
        RegistryFullError: If more components are declared than allowed
    """
    limits = limits or Limits()
    registry = Registry(capacity=limits.max_components)
    cursor: Optional[Component] = None

    for line in text.split("\n"):
        if not line or "=" not in line:
            continue

        key, value = line.split("=", 1)

        factory = COMPONENT_KEYS.get(key)
        if factory is not None:
            cursor = registry.add(factory(value))
        else:
            apply_key(cursor, key, value, limits)

    return registry


def parse_flow(
    path: Union[str, Path], limits: Optional[Limits] = None
) -> Registry:
    """Read and parse a flow description file.

    Raises:
        FlowFileError: If the file cannot be opened or decoded
    """
    try:
        text = Path(path).read_text(encoding="utf-8")
    except OSError as e:
        raise FlowFileError(str(path), e.strerror or str(e)) from e
    except UnicodeDecodeError as e:
        raise FlowFileError(str(path), f"not valid UTF-8 ({e.reason})") from e
    return parse_flow_text(text, limits)


__all__ = ["apply_key", "parse_flow", "parse_flow_text", "parse_int"]
