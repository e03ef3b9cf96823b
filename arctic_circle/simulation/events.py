"""Event channel between the simulation engine and its read-only listeners.

The engine is the only publisher. Listeners react to events but must not call
back into engine mutation entry points while an event is being delivered;
the engine checks :attr:`EventChannel.is_publishing` and raises
:exc:`ReentrantUpdateError` when they do.
"""

from __future__ import annotations

from collections import defaultdict
from collections.abc import Callable
from enum import Enum
from typing import Any

Listener = Callable[[Any], None]


class SimEvent(Enum):
    """Notifications published by the simulation engine."""

    ITERATION_STARTED = "iteration_started"
    RUNNING_STATE_CHANGED = "running_state_changed"
    GRID_CELLS_ADDED = "grid_cells_added"
    PLACEHOLDERS_ADDED = "placeholders_added"
    TILES_ADDED = "tiles_added"
    TILES_REMOVED = "tiles_removed"
    PHASE_STATE_CHANGED = "phase_state_changed"
    MAX_ITERATIONS_CHANGED = "max_iterations_changed"
    RANDOM_SEED_CHANGED = "random_seed_changed"
    RANDOM_BIAS_COEF_CHANGED = "random_bias_coef_changed"
    ARCTIC_CIRCLE_ACTIVE_CHANGED = "arctic_circle_active_changed"
    DISPLAY_MODE_CHANGED = "display_mode_changed"


class ReentrantUpdateError(RuntimeError):
    """A listener tried to mutate the engine while an event was delivered."""


class EventChannel:
    """Synchronous publish/subscribe keyed by :class:`SimEvent`."""

    def __init__(self) -> None:
        self._listeners: defaultdict[SimEvent, list[Listener]] = defaultdict(list)
        self._depth = 0

    @property
    def is_publishing(self) -> bool:
        return self._depth > 0

    def subscribe(self, event: SimEvent, listener: Listener) -> Callable[[], None]:
        """Register ``listener`` and return a callable that unregisters it."""
        self._listeners[event].append(listener)

        def unsubscribe() -> None:
            listeners = self._listeners[event]
            if listener in listeners:
                listeners.remove(listener)

        return unsubscribe

    def publish(self, event: SimEvent, payload: Any) -> None:
        self._depth += 1
        try:
            for listener in list(self._listeners[event]):
                listener(payload)
        finally:
            self._depth -= 1

    def listener_count(self, event: SimEvent) -> int:
        return len(self._listeners[event])
