from __future__ import annotations
from typing import Protocol, runtime_checkable
from .models import ActuatorState, Direction, SensorReading


@runtime_checkable
class TemperatureSource(Protocol):
    sensor_id: str
    unit: str

    def sample(self) -> SensorReading:
        ...


@runtime_checkable
class BinaryActuator(Protocol):
    actuator_id: str

    def set_binary(self, on: bool) -> None:
        ...

    def state(self) -> ActuatorState:
        ...


@runtime_checkable
class VariableActuator(Protocol):
    actuator_id: str

    def set_level(self, level: int) -> int:
        ...

    def set_direction(self, direction: Direction) -> None:
        ...

    def start(self, direction: Direction, level: int) -> int:
        ...

    def stop(self) -> None:
        ...

    def state(self) -> ActuatorState:
        ...
