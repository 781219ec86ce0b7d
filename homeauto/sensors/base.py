from __future__ import annotations

from abc import ABC, abstractmethod

from ..domain.models import SensorReading


class Sensor(ABC):
    """Domain-facing temperature source."""

    @property
    @abstractmethod
    def sensor_id(self) -> str:
        ...

    @property
    def unit(self) -> str:
        return "degC"

    @abstractmethod
    def sample(self) -> SensorReading:
        """Return one fresh reading. Raise ReadFailure instead of guessing."""
        ...

    def _reading(self, value: float) -> SensorReading:
        return SensorReading(value=float(value), unit=self.unit, sensor_id=self.sensor_id)
