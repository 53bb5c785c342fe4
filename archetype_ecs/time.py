"""Frame timing and fixed-timestep accumulation. Durations are in seconds."""

from __future__ import annotations

import math
from time import perf_counter
from typing import Callable

_NS_PER_SECOND = 1_000_000_000


def _to_ns(seconds: float) -> int:
    if not seconds >= 0:
        raise ValueError(f"duration must be non-negative, got {seconds}")
    return round(seconds * _NS_PER_SECOND)


class Time:
    """Tracks delta and elapsed time between frames, with a time scale."""

    def __init__(self, clock: Callable[[], float] = perf_counter) -> None:
        self._clock = clock
        now = clock()
        self._startup = now
        self._last_update = now
        self._delta = 0.0
        self._elapsed = 0.0
        self._frame_count = 0
        self._time_scale = 1.0

    def update(self) -> None:
        """Advance to a new frame; call once per frame."""
        now = self._clock()
        self._delta = now - self._last_update
        self._elapsed = now - self._startup
        self._last_update = now
        self._frame_count += 1

    @property
    def delta(self) -> float:
        """Unscaled time since the previous frame."""
        return self._delta

    @property
    def delta_seconds(self) -> float:
        """Time since the previous frame, multiplied by the time scale."""
        return self._delta * self._time_scale

    @property
    def elapsed(self) -> float:
        return self._elapsed

    @property
    def frame_count(self) -> int:
        return self._frame_count

    @property
    def time_scale(self) -> float:
        return self._time_scale

    @time_scale.setter
    def time_scale(self, scale: float) -> None:
        self._time_scale = 0.0 if math.isnan(scale) else max(float(scale), 0.0)

    def pause(self) -> None:
        self._time_scale = 0.0

    def resume(self) -> None:
        self._time_scale = 1.0

    @property
    def is_paused(self) -> bool:
        return self._time_scale == 0.0


class FixedTime:
    """Accumulates frame time and reports how many fixed steps to run."""

    def __init__(self, hz: float = 60) -> None:
        if not hz > 0:
            raise ValueError(f"frequency must be positive, got {hz}")
        self._init_ns(round(_NS_PER_SECOND / hz))

    def _init_ns(self, timestep_ns: int) -> None:
        if timestep_ns <= 0:
            raise ValueError("timestep must be positive")
        self._timestep = timestep_ns
        self._accumulator = 0
        self._overstep = 0

    @classmethod
    def from_duration(cls, timestep: float) -> FixedTime:
        fixed = cls.__new__(cls)
        fixed._init_ns(_to_ns(timestep))
        return fixed

    def tick(self, delta: float) -> int:
        """Add delta seconds and return the number of whole steps now due."""
        self._accumulator += _to_ns(delta)
        steps, self._accumulator = divmod(self._accumulator, self._timestep)
        self._overstep = self._accumulator
        return steps

    @property
    def timestep(self) -> float:
        return self._timestep / _NS_PER_SECOND

    @property
    def overstep(self) -> float:
        """Leftover time after the last tick, for interpolation."""
        return self._overstep / _NS_PER_SECOND

    @property
    def overstep_fraction(self) -> float:
        """Overstep as a fraction of the timestep, in [0, 1)."""
        return self._overstep / self._timestep