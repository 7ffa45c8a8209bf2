"""flowexec - run declarative process pipelines.

A flow description declares commands ("nodes") and the ways they are
combined (pipes, concatenations, stderr redirects); flowexec runs the
process tree rooted at one named component.
"""

from .executor import FlowExecutor, execute
from .parser import parse_flow, parse_flow_text
from .registry import Registry
from .tokenizer import tokenize

__version__ = "0.1.0"

__all__ = [
    "FlowExecutor",
    "Registry",
    "execute",
    "parse_flow",
    "parse_flow_text",
    "tokenize",
]
