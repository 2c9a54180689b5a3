"""
Tests for the threading.Timer scheduler adapter.
"""

import threading

from src.adapters.scheduler import ThreadingScheduler


def test_runs_callback() -> None:
    scheduler = ThreadingScheduler()
    fired = threading.Event()

    scheduler.call_later(0.01, fired.set)

    assert fired.wait(timeout=2)


def test_cancelled_task_does_not_run() -> None:
    scheduler = ThreadingScheduler()
    fired = threading.Event()

    task = scheduler.call_later(0.2, fired.set)
    task.cancel()

    assert not fired.wait(timeout=0.4)


def test_shutdown_cancels_pending() -> None:
    scheduler = ThreadingScheduler()
    fired = threading.Event()
    scheduler.call_later(0.2, fired.set)

    scheduler.shutdown()

    assert not fired.wait(timeout=0.4)


def test_failing_callback_does_not_break_scheduler() -> None:
    scheduler = ThreadingScheduler()
    fired = threading.Event()

    def boom() -> None:
        raise RuntimeError("boom")

    scheduler.call_later(0.01, boom)
    scheduler.call_later(0.02, fired.set)

    assert fired.wait(timeout=2)


def test_cancel_releases_timer() -> None:
    scheduler = ThreadingScheduler()

    for _ in range(50):
        scheduler.call_later(60, lambda: None).cancel()

    assert scheduler.pending == 0


def test_fired_timer_is_released() -> None:
    scheduler = ThreadingScheduler()
    fired = threading.Event()

    scheduler.call_later(0.01, fired.set)

    assert fired.wait(timeout=2)
    assert scheduler.pending == 0
