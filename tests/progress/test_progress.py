"""Tests for the background heartbeat."""

import logging
import threading
import time

import pytest

from overlapchain.config import SearchConfig
from overlapchain.graph import OverlapGraph
from overlapchain.progress import ProgressSignal, search_with_progress


def test_heartbeat_fires_periodically() -> None:
    fired = threading.Event()
    calls = []

    def callback() -> None:
        calls.append(time.monotonic())
        if len(calls) >= 2:
            fired.set()

    signal = ProgressSignal(interval=0.01, callback=callback)
    signal.start()
    try:
        assert fired.wait(timeout=5.0)
    finally:
        signal.stop()
    assert signal.beats >= 2
    assert not signal.is_running


def test_stop_wakes_heartbeat_immediately() -> None:
    calls = []
    signal = ProgressSignal(interval=60.0, callback=lambda: calls.append(1))
    signal.start()
    assert signal.is_running

    started = time.monotonic()
    signal.stop()
    assert time.monotonic() - started < 5.0
    assert not signal.is_running
    assert calls == []
    assert signal.beats == 0


def test_context_manager_joins_on_exit() -> None:
    with ProgressSignal(interval=60.0, callback=lambda: None) as signal:
        assert signal.is_running
    assert not signal.is_running


def test_context_manager_joins_when_body_raises() -> None:
    signal = ProgressSignal(interval=60.0, callback=lambda: None)
    with pytest.raises(RuntimeError, match="boom"):
        with signal:
            raise RuntimeError("boom")
    assert not signal.is_running


def test_double_start_rejected_and_restart_after_stop() -> None:
    signal = ProgressSignal(interval=60.0, callback=lambda: None)
    signal.start()
    try:
        with pytest.raises(RuntimeError):
            signal.start()
    finally:
        signal.stop()
    signal.start()
    signal.stop()
    assert not signal.is_running


def test_stop_without_start_is_noop() -> None:
    ProgressSignal(interval=1.0).stop()


def test_invalid_interval_rejected() -> None:
    with pytest.raises(ValueError):
        ProgressSignal(interval=0)


def test_default_callback_logs_message(caplog) -> None:
    fired = threading.Event()

    class _Flag(logging.Handler):
        def emit(self, record: logging.LogRecord) -> None:
            if "still searching" in record.getMessage():
                fired.set()

    handler = _Flag()
    progress_logger = logging.getLogger("overlapchain.progress")
    progress_logger.addHandler(handler)
    try:
        with caplog.at_level(logging.INFO, logger="overlapchain"):
            with ProgressSignal(interval=0.01):
                assert fired.wait(timeout=5.0)
    finally:
        progress_logger.removeHandler(handler)
    assert any("still searching" in r.getMessage() for r in caplog.records)


def test_search_with_progress_returns_result_and_stops() -> None:
    before = {t.name for t in threading.enumerate()}
    graph = OverlapGraph.build(["123456", "567890"])
    result = search_with_progress(
        graph, SearchConfig(heartbeat_interval=60.0), callback=lambda: None
    )
    assert result.max_length() == 2
    after = {t.name for t in threading.enumerate()}
    assert "overlapchain-progress" not in after - before
