"""Executor tests with process creation replaced.

Real process trees are covered end to end in tests/cli/test_run.py.
"""

import pytest

import flowexec.executor as executor_module
from flowexec.executor import FlowExecutor
from flowexec.models import ResourceError, UnsupportedComponentError
from flowexec.parser import parse_flow_text

PIPE_FLOW = "node=A\ncommand=echo hi\nnode=B\ncommand=cat\npipe=P\nfrom=A\nto=B\n"


def test_source_waited_when_destination_spawn_fails(monkeypatch):
    spawned = []
    waited = []

    def fake_spawn(body, label):
        if spawned:
            raise ResourceError("fork", OSError(11, "Resource temporarily unavailable"))
        spawned.append(label)
        return 4242

    monkeypatch.setattr(executor_module, "spawn", fake_spawn)
    monkeypatch.setattr(executor_module, "wait", lambda pid: waited.append(pid) or 0)

    registry = parse_flow_text(PIPE_FLOW)
    with pytest.raises(ResourceError, match="fork failed"):
        FlowExecutor(registry).execute(registry.find("P"))

    assert waited == [4242]


def test_source_spawn_failure_waits_for_nothing(monkeypatch):
    waited = []

    def fake_spawn(body, label):
        raise ResourceError("fork", OSError(11, "Resource temporarily unavailable"))

    monkeypatch.setattr(executor_module, "spawn", fake_spawn)
    monkeypatch.setattr(executor_module, "wait", lambda pid: waited.append(pid) or 0)

    registry = parse_flow_text(PIPE_FLOW)
    with pytest.raises(ResourceError):
        FlowExecutor(registry).execute(registry.find("P"))

    assert waited == []


def test_pipe_waits_source_then_destination(monkeypatch):
    pids = iter([10, 20])
    waited = []

    monkeypatch.setattr(executor_module, "spawn", lambda body, label: next(pids))
    monkeypatch.setattr(executor_module, "wait", lambda pid: waited.append(pid) or 0)

    registry = parse_flow_text(PIPE_FLOW)
    FlowExecutor(registry).execute(registry.find("P"))

    assert waited == [10, 20]


def test_file_component_unsupported():
    registry = parse_flow_text("file=F\nname=out.txt\n")
    with pytest.raises(UnsupportedComponentError) as exc_info:
        FlowExecutor(registry).execute(registry.find("F"))
    assert exc_info.value.component_type == "file"
    assert exc_info.value.name == "F"
