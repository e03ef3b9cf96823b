"""Cyclic phase-state machine gating which engine operation runs."""

from __future__ import annotations

from collections.abc import Callable, Mapping

from arctic_circle.config.constants import SIM_PHASE_STATE_DURATIONS
from arctic_circle.domain.phase import SimPhaseState

StateListener = Callable[[SimPhaseState], None]


class SimPhaseStateHandler:
    """Advances through the phase states as the phase grows.

    Before the first transition the current state is implicitly the last state
    of the sequence, so the first transition enters the first state. Any phase
    overshoot past a state's duration is carried into the next state's budget,
    and a single large step walks through every boundary it crosses.
    """

    def __init__(
        self,
        start_phase: float = 0.0,
        durations: Mapping[SimPhaseState, float] = SIM_PHASE_STATE_DURATIONS,
    ) -> None:
        if not durations:
            raise ValueError("durations must not be empty")
        if any(duration <= 0.0 for duration in durations.values()):
            raise ValueError("phase state durations must be > 0")
        self._durations = dict(durations)
        self._states = tuple(self._durations)
        self._state: SimPhaseState | None = None
        self._last_transition_phase = start_phase
        self._listeners: list[StateListener] = []

    @property
    def state(self) -> SimPhaseState | None:
        """Current state, or ``None`` before the first transition."""
        return self._state

    @property
    def last_transition_phase(self) -> float:
        return self._last_transition_phase

    def subscribe(self, listener: StateListener) -> Callable[[], None]:
        self._listeners.append(listener)
        return lambda: self._listeners.remove(listener)

    def update(self, phase: float) -> list[SimPhaseState]:
        """Feed a new phase and return the states entered, in order."""
        entered: list[SimPhaseState] = []
        while True:
            current = self._state if self._state is not None else self._states[-1]
            duration = self._durations[current]
            overshoot = (phase - self._last_transition_phase) - duration
            if overshoot < 0:
                return entered
            next_state = self._states[(self._states.index(current) + 1) % len(self._states)]
            self._state = next_state
            # == phase - overshoot
            self._last_transition_phase += duration
            entered.append(next_state)
            for listener in list(self._listeners):
                listener(next_state)
