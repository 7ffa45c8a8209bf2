"""Tests for process helpers that do not fork."""

import signal

from flowexec.process_utils import _RESTORED_SIGNALS


def test_restored_signals():
    assert set(_RESTORED_SIGNALS) == {signal.SIGPIPE, signal.SIGXFSZ}
