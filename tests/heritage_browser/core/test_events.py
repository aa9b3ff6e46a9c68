from __future__ import annotations

from heritage_browser.core.events import (
    EventTarget,
    ImmediateFrameScheduler,
    LatestValueMailbox,
    ManualFrameScheduler,
)


def test_event_target_dispatch_and_no_duplicate_listeners():
    target = EventTarget("document")
    seen = []

    target.add_listener("pointermove", seen.append)
    target.add_listener("pointermove", seen.append)
    assert target.listener_count("pointermove") == 1

    target.dispatch("pointermove", 10)
    target.dispatch("pointerup", 20)
    assert seen == [10]


def test_event_target_remove_listener():
    target = EventTarget()
    seen = []
    target.add_listener("resize", seen.append)
    target.remove_listener("resize", seen.append)
    target.remove_listener("resize", seen.append)

    target.dispatch("resize", 1)
    assert seen == []
    assert target.listener_count() == 0


def test_listener_may_detach_itself_during_dispatch():
    target = EventTarget()
    calls = []

    def once(payload):
        calls.append(payload)
        target.remove_listener("pointerup", once)

    target.add_listener("pointerup", once)
    target.dispatch("pointerup", "a")
    target.dispatch("pointerup", "b")
    assert calls == ["a"]


def test_manual_scheduler_runs_queued_callbacks_per_frame():
    scheduler = ManualFrameScheduler()
    calls = []

    def requeue():
        calls.append("requeue")
        scheduler.request_frame(lambda: calls.append("next"))

    scheduler.request_frame(requeue)
    assert scheduler.pending == 1

    assert scheduler.run_frame() == 1
    assert calls == ["requeue"]
    assert scheduler.pending == 1

    scheduler.run_frame()
    assert calls == ["requeue", "next"]
    assert scheduler.run_frame() == 0


def test_immediate_scheduler_runs_synchronously():
    calls = []
    ImmediateFrameScheduler().request_frame(lambda: calls.append(1))
    assert calls == [1]


def test_mailbox_keeps_latest_value_only():
    box: LatestValueMailbox[int] = LatestValueMailbox()
    assert not box.has_value()
    assert box.take() is None

    box.post(1)
    box.post(2)
    box.post(3)
    assert box.overwritten == 2
    assert box.take() == 3
    assert box.take() is None


def test_mailbox_clear():
    box: LatestValueMailbox[int] = LatestValueMailbox()
    box.post(0)
    box.clear()
    assert not box.has_value()
