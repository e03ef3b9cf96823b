"""Headless phase clock driving a simulator at a fixed pace.

Each tick advances the phase by ``speed * step_interval`` and forwards it to
the simulator. Ticks are explicit calls, so a run is reproducible and never
depends on wall-clock time.
"""

from __future__ import annotations

from typing import Protocol

from arctic_circle.config.types import ClockConfig, validate_sim_speed


class PhaseDriven(Protocol):
    is_running: bool

    def update(self, phase: float) -> None: ...


class PhaseClock:
    """Play/pause clock producing a monotonically increasing phase."""

    def __init__(self, simulator: PhaseDriven, config: ClockConfig | None = None) -> None:
        config = config or ClockConfig()
        self._simulator = simulator
        self._speed = config.speed
        self._step_interval = config.step_interval
        self._phase = 0.0
        self._ticks = 0
        self._is_active = False

    @property
    def phase(self) -> float:
        return self._phase

    @property
    def ticks(self) -> int:
        return self._ticks

    @property
    def is_active(self) -> bool:
        return self._is_active

    @property
    def speed(self) -> float:
        """Phase advanced per simulated second."""
        return self._speed

    @speed.setter
    def speed(self, value: float) -> None:
        validate_sim_speed(value)
        self._speed = value

    def play(self) -> None:
        self._is_active = True

    def pause(self) -> None:
        self._is_active = False

    def tick(self) -> bool:
        """Advance one step when active; return whether the phase moved."""
        if not self._is_active:
            return False
        self._phase += self._speed * self._step_interval
        self._ticks += 1
        self._simulator.update(self._phase)
        return True

    def run_until_stopped(self, max_ticks: int) -> int:
        """Tick until the simulator stops running; return the ticks taken.

        Raises :exc:`RuntimeError` if the simulator is still running after
        ``max_ticks`` ticks.
        """
        if max_ticks < 1:
            raise ValueError("max_ticks must be >= 1")
        self.play()
        start = self._ticks
        try:
            while self._simulator.is_running:
                if self._ticks - start >= max_ticks:
                    raise RuntimeError(f"simulator still running after {max_ticks} ticks")
                self.tick()
        finally:
            self.pause()
        return self._ticks - start
