"""Pytest configuration and shared fixtures."""

import os
import subprocess
import sys
import textwrap

import pytest
from click.testing import CliRunner

from flowexec.cli import cli


@pytest.fixture(autouse=True)
def clear_flowexec_env(monkeypatch):
    """Keep limit and verbosity settings from the developer's shell out of tests."""
    for var in (
        "FLOWEXEC_VERBOSE",
        "FLOWEXEC_MAX_COMPONENTS",
        "FLOWEXEC_MAX_PARTS",
        "FLOWEXEC_MAX_TOKENS",
    ):
        monkeypatch.delenv(var, raising=False)


@pytest.fixture
def cli_runner():
    """Provide Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def invoke(cli_runner):
    """Invoke the CLI in-process.

    Only safe for paths that never fork or exec (usage errors, missing
    targets, --explain); use ``run_flow`` for anything that executes.
    """

    def _invoke(args, env=None):
        return cli_runner.invoke(cli, args, env=env)

    return _invoke


@pytest.fixture
def flow_file(tmp_path):
    """Write a flow description and return its path.

    Usage:
        path = flow_file('''
            node=A
            command=echo hi
        ''')
    """

    def _write(text, name="test.flow"):
        path = tmp_path / name
        path.write_text(textwrap.dedent(text).lstrip("\n"))
        return path

    return _write


@pytest.fixture
def run_flow(flow_file):
    """Run ``python -m flowexec`` on a flow description in a subprocess.

    Returns the CompletedProcess with text stdout/stderr.
    """

    def _run(text, target, *options, env=None, timeout=30):
        path = flow_file(text)
        full_env = os.environ.copy()
        full_env.update(env or {})
        return subprocess.run(
            [sys.executable, "-m", "flowexec", *options, str(path), target],
            capture_output=True,
            text=True,
            stdin=subprocess.DEVNULL,
            env=full_env,
            timeout=timeout,
            check=False,
        )

    return _run
