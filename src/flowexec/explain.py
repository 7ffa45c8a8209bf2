"""Describe the process tree a target would produce, without running it."""

from typing import Any, Dict, List, Optional

from .context import Limits
from .models import Component, Concatenate, Node, Pipe, StderrRedirect
from .registry import Registry
from .tokenizer import tokenize


def explain_target(
    registry: Registry, target: str, limits: Optional[Limits] = None
) -> Dict[str, Any]:
    """Build a JSON-serializable plan for ``target``.

    Unresolved references are kept in the plan and marked ``missing``; a
    reference back to a component already on the current path is marked
    ``cycle`` and not expanded further.

    Args:
        registry: Parsed components
        target: Name of the component to explain
        limits: Limits used for part indices and argv

    Returns:
        Nested dictionary describing the component tree
    """
    return _explain(registry, target, limits or Limits(), [])


def _explain(
    registry: Registry, name: str, limits: Limits, path: List[str]
) -> Dict[str, Any]:
    component = registry.find(name)
    if component is None:
        return {"name": name, "missing": True}
    if name in path:
        return {"name": name, "type": component.type, "cycle": True}

    path = path + [name]
    plan: Dict[str, Any] = {"name": name, "type": component.type}

    if isinstance(component, Node):
        plan["command"] = component.command
        plan["argv"] = tokenize(component.command, limits.max_tokens)
    elif isinstance(component, Pipe):
        plan["from"] = _explain(registry, component.from_, limits, path)
        plan["to"] = _explain(registry, component.to, limits, path)
    elif isinstance(component, Concatenate):
        plan["parts"] = [
            dict(index=index, **_explain(registry, part, limits, path))
            for index, part in _declared_parts(component, limits)
        ]
    elif isinstance(component, StderrRedirect):
        plan["from"] = _explain(registry, component.from_, limits, path)
    else:
        plan["filename"] = component.filename
        plan["supported"] = False

    return plan


def _declared_parts(concat: Concatenate, limits: Limits):
    count = min(concat.parts, limits.max_parts)
    return [
        (index, concat.part_names[index])
        for index in range(count)
        if index in concat.part_names
    ]


__all__ = ["explain_target"]
