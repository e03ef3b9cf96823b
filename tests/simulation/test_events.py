from __future__ import annotations

import pytest

from arctic_circle.simulation.events import EventChannel, SimEvent


class TestEventChannel:
    def test_publish_reaches_subscribers_in_order(self) -> None:
        channel = EventChannel()
        received: list[tuple[str, object]] = []
        channel.subscribe(SimEvent.TILES_ADDED, lambda p: received.append(("a", p)))
        channel.subscribe(SimEvent.TILES_ADDED, lambda p: received.append(("b", p)))
        channel.publish(SimEvent.TILES_ADDED, [1, 2])
        assert received == [("a", [1, 2]), ("b", [1, 2])]

    def test_events_are_isolated(self) -> None:
        channel = EventChannel()
        received: list[object] = []
        channel.subscribe(SimEvent.TILES_REMOVED, received.append)
        channel.publish(SimEvent.TILES_ADDED, [])
        assert received == []

    def test_unsubscribe(self) -> None:
        channel = EventChannel()
        received: list[object] = []
        unsubscribe = channel.subscribe(SimEvent.ITERATION_STARTED, received.append)
        assert channel.listener_count(SimEvent.ITERATION_STARTED) == 1
        unsubscribe()
        unsubscribe()
        channel.publish(SimEvent.ITERATION_STARTED, 1)
        assert received == []
        assert channel.listener_count(SimEvent.ITERATION_STARTED) == 0

    def test_is_publishing_only_during_delivery(self) -> None:
        channel = EventChannel()
        flags: list[bool] = []
        channel.subscribe(
            SimEvent.RUNNING_STATE_CHANGED, lambda _: flags.append(channel.is_publishing)
        )
        assert not channel.is_publishing
        channel.publish(SimEvent.RUNNING_STATE_CHANGED, True)
        assert flags == [True]
        assert not channel.is_publishing

    def test_is_publishing_reset_after_listener_error(self) -> None:
        channel = EventChannel()

        def boom(_: object) -> None:
            raise KeyError("listener failure")

        channel.subscribe(SimEvent.DISPLAY_MODE_CHANGED, boom)
        with pytest.raises(KeyError):
            channel.publish(SimEvent.DISPLAY_MODE_CHANGED, None)
        assert not channel.is_publishing
