import pytest

from keypop.utils.timers import TimerScheduler


def test_call_later_fires_once_when_due():
    scheduler = TimerScheduler()
    calls = []
    handle = scheduler.call_later(1.0, lambda: calls.append(scheduler.now))

    scheduler.advance(0.5)
    assert calls == []
    scheduler.advance(0.5)
    assert calls == [1.0]
    scheduler.advance(5.0)
    assert calls == [1.0]
    assert not handle.active


def test_call_every_fires_for_each_elapsed_period():
    scheduler = TimerScheduler()
    calls = []
    scheduler.call_every(1.0, lambda: calls.append(scheduler.now))

    fired = scheduler.advance(3.5)
    assert fired == 3
    assert calls == [1.0, 2.0, 3.0]


def test_due_order_and_ties_follow_scheduling_order():
    scheduler = TimerScheduler()
    calls = []
    scheduler.call_later(2.0, lambda: calls.append("late"))
    scheduler.call_later(1.0, lambda: calls.append("first"))
    scheduler.call_later(1.0, lambda: calls.append("second"))

    scheduler.advance(2.0)
    assert calls == ["first", "second", "late"]


def test_cancelled_timer_never_fires():
    scheduler = TimerScheduler()
    calls = []
    handle = scheduler.call_every(1.0, lambda: calls.append("tick"))
    scheduler.advance(1.0)
    handle.cancel()
    scheduler.advance(10.0)
    assert calls == ["tick"]
    assert scheduler.pending == 0


def test_cancel_inside_same_advance_blocks_pending_callback():
    scheduler = TimerScheduler()
    calls = []
    victim = scheduler.call_later(1.0, lambda: calls.append("victim"))
    # Scheduled first so it runs before the victim at the same instant.
    scheduler.call_later(0.5, victim.cancel)
    scheduler.advance(2.0)
    assert calls == []


def test_cancel_all_from_callback_stops_everything():
    scheduler = TimerScheduler()
    calls = []
    scheduler.call_every(1.0, lambda: calls.append("clock"))
    scheduler.call_later(1.0, scheduler.cancel_all)
    scheduler.call_later(1.5, lambda: calls.append("spawn"))

    scheduler.advance(5.0)
    assert calls == ["clock"]
    assert scheduler.pending == 0


def test_callback_can_reschedule_itself():
    scheduler = TimerScheduler()
    calls = []

    def cycle():
        calls.append(scheduler.now)
        scheduler.call_later(0.5, cycle)

    scheduler.call_later(0.0, cycle)
    scheduler.advance(1.0)
    assert calls == [0.0, 0.5, 1.0]


def test_repeating_interval_must_be_positive():
    with pytest.raises(ValueError):
        TimerScheduler().call_every(0.0, lambda: None)
