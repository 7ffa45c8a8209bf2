"""Flowexec context and limit resolution."""

import os
from dataclasses import dataclass
from typing import Optional

import click

DEFAULT_MAX_PARTS = 10
DEFAULT_MAX_TOKENS = 63


@dataclass(frozen=True)
class Limits:
    """Size limits applied while parsing and executing a flow."""

    max_components: Optional[int] = None
    max_parts: int = DEFAULT_MAX_PARTS
    max_tokens: int = DEFAULT_MAX_TOKENS


def _env_int(var: str, minimum: int = 1) -> Optional[int]:
    """Read a positive integer from the environment, None when unset or empty."""
    raw = os.environ.get(var)
    if raw is None or not raw.strip():
        return None
    try:
        value = int(raw)
    except ValueError:
        raise click.BadParameter(
            f"{var} must be an integer, got {raw!r}"
        ) from None
    if value < minimum:
        raise click.BadParameter(
            f"{var} must be at least {minimum}, got {value}"
        )
    return value


def resolve_limits(max_components_option: Optional[int] = None) -> Limits:
    """Resolve size limits.

    Resolution order for each limit:
    1. CLI flag (only --max-components has one)
    2. $FLOWEXEC_MAX_COMPONENTS, $FLOWEXEC_MAX_PARTS, $FLOWEXEC_MAX_TOKENS
    3. Built-in defaults

    Reads fresh from the environment each time.

    Args:
        max_components_option: Value of --max-components if provided

    Returns:
        Limits with every field resolved
    """
    max_components = max_components_option
    if max_components is None:
        max_components = _env_int("FLOWEXEC_MAX_COMPONENTS")

    max_parts = _env_int("FLOWEXEC_MAX_PARTS")
    max_tokens = _env_int("FLOWEXEC_MAX_TOKENS")

    return Limits(
        max_components=max_components,
        max_parts=DEFAULT_MAX_PARTS if max_parts is None else max_parts,
        max_tokens=DEFAULT_MAX_TOKENS if max_tokens is None else max_tokens,
    )


class FlowContext:
    def __init__(self):
        self.flow_file = None
        self.target = None
        self.limits = Limits()
        self.verbose = False


pass_context = click.make_pass_decorator(FlowContext, ensure=True)
