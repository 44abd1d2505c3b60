"""Selection of the temperature threshold that decides a fan's speed."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

__all__ = ["TemperatureThreshold", "ThresholdManager"]


@dataclass(frozen=True)
class TemperatureThreshold:
    """A fan speed that applies between a lower and an upper temperature."""

    up_threshold: float
    down_threshold: float
    fan_speed: float


class ThresholdManager:
    """Tracks the current threshold with hysteresis as temperatures change.

    Thresholds are ordered by ascending ``up_threshold``. With ``legacy``
    the selection moves up only when the *next* threshold's upper bound is
    reached.
    """

    def __init__(
        self, thresholds: Iterable[TemperatureThreshold], legacy: bool = False
    ) -> None:
        ordered = sorted(thresholds, key=lambda t: t.up_threshold)
        if not ordered:
            raise ValueError("Invalid size for TemperatureThresholds")
        self.thresholds: tuple[TemperatureThreshold, ...] = tuple(ordered)
        self.legacy = legacy
        self._current = 0

    def auto_select(self, temperature: float) -> TemperatureThreshold:
        """Move to the threshold matching ``temperature`` and return it."""
        t = self.thresholds
        last = len(t) - 1
        i = self._current
        while i > 0 and temperature <= t[i].down_threshold:
            i -= 1
        if self.legacy:
            while i < last and temperature >= t[i + 1].up_threshold:
                i += 1
        else:
            while i < last and temperature >= t[i].up_threshold:
                i += 1
        self._current = i
        return t[i]

    def current(self) -> TemperatureThreshold:
        """Return the threshold selected last."""
        return self.thresholds[self._current]