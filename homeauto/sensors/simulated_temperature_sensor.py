from __future__ import annotations

import random
from collections.abc import Iterable
from threading import Lock
from typing import Optional

from .base import Sensor
from ..domain.errors import ReadFailure
from ..domain.models import SensorReading


class SimulatedTemperatureSensor(Sensor):
    """
    Stand-in for an ADC-backed probe.

    Each sample is base + randrange(100) / 10, so with the default base the
    value lands on a 0.1 degree grid in [25.0, 35.0).
    """

    def __init__(
        self,
        sensor_id: str = "temp_sim",
        base: float = 25.0,
        rng: Optional[random.Random] = None,
    ):
        self._sensor_id = sensor_id
        self._base = float(base)
        self._rng = rng or random.Random()

    @property
    def sensor_id(self) -> str:
        return self._sensor_id

    def sample(self) -> SensorReading:
        return self._reading(self._base + self._rng.randrange(100) / 10.0)


class ScriptedTemperatureSensor(Sensor):
    """Replays a fixed sequence. A None entry, or running out, is a ReadFailure."""

    def __init__(self, values: Iterable[Optional[float]], sensor_id: str = "temp_scripted"):
        self._sensor_id = sensor_id
        self._lock = Lock()
        self._values = list(values)
        self._pos = 0

    @property
    def sensor_id(self) -> str:
        return self._sensor_id

    @property
    def remaining(self) -> int:
        with self._lock:
            return len(self._values) - self._pos

    def push(self, value: Optional[float]) -> None:
        with self._lock:
            self._values.append(value)

    def sample(self) -> SensorReading:
        with self._lock:
            if self._pos >= len(self._values):
                raise ReadFailure(f"{self._sensor_id}: script exhausted")
            value = self._values[self._pos]
            self._pos += 1

        if value is None:
            raise ReadFailure(f"{self._sensor_id}: scripted read failure")
        return self._reading(value)
