"""
test_event_manager.py
---------------------
Unit tests for the pub-sub dispatcher.
"""

from car_shoot.core.services.event_manager import (
    EventManager, RoundOverEvent, RoundRestartedEvent
)


def test_dispatch_reaches_subscribers_of_that_type_only():
    events = EventManager()
    over, restarted = [], []
    events.subscribe(RoundOverEvent, over.append)
    events.subscribe(RoundRestartedEvent, restarted.append)

    events.dispatch(RoundOverEvent(score=4, high_score=9))

    assert over == [RoundOverEvent(4, 9)]
    assert restarted == []


def test_duplicate_subscription_is_ignored():
    events = EventManager()
    received = []
    events.subscribe(RoundRestartedEvent, received.append)
    events.subscribe(RoundRestartedEvent, received.append)

    events.dispatch(RoundRestartedEvent())

    assert len(received) == 1
    assert events.get_subscriber_count(RoundRestartedEvent) == 1


def test_failing_callback_does_not_stop_others():
    events = EventManager()
    received = []

    def broken(event):
        raise RuntimeError("boom")

    events.subscribe(RoundRestartedEvent, broken)
    events.subscribe(RoundRestartedEvent, received.append)

    events.dispatch(RoundRestartedEvent())

    assert len(received) == 1


def test_unsubscribe_and_clear():
    events = EventManager()
    received = []
    events.subscribe(RoundOverEvent, received.append)
    events.subscribe(RoundRestartedEvent, received.append)

    events.unsubscribe(RoundOverEvent, received.append)
    events.unsubscribe(RoundOverEvent, received.append)
    events.dispatch(RoundOverEvent(1, 1))

    assert received == []
    assert events.get_subscriber_count() == 1
    events.clear_all()
    assert events.get_subscriber_count() == 0
