from __future__ import annotations
from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import Optional


def _now_utc() -> datetime:
    return datetime.now(timezone.utc)


class ActuatorKind(str, Enum):
    BINARY = "binary"
    VARIABLE = "variable"


class Direction(str, Enum):
    FORWARD = "forward"
    BACKWARD = "backward"
    STOPPED = "stopped"


@dataclass(frozen=True)
class ActuatorState:
    actuator_id: str
    kind: ActuatorKind
    on: bool = False
    level: int = 0  # 0..100, VARIABLE only
    direction: Direction = Direction.STOPPED  # VARIABLE only


@dataclass(frozen=True)
class SensorReading:
    value: float
    unit: str = "degC"
    sensor_id: str = "unknown"
    ts_utc: datetime = field(default_factory=_now_utc, compare=False)


@dataclass(frozen=True)
class ActuatorCommand:
    direction: Direction
    level: int
    label: str = ""

    @classmethod
    def forward(cls, level: int) -> ActuatorCommand:
        return cls(Direction.FORWARD, level, f"forward {level}%")

    @classmethod
    def backward(cls, level: int) -> ActuatorCommand:
        return cls(Direction.BACKWARD, level, f"backward {level}%")

    @classmethod
    def stop(cls) -> ActuatorCommand:
        return cls(Direction.STOPPED, 0, "stop")

    @property
    def is_stop(self) -> bool:
        return self.direction is Direction.STOPPED


@dataclass(frozen=True)
class ThresholdPolicy:
    threshold: float
    on_action: ActuatorCommand
    off_action: ActuatorCommand

    @classmethod
    def from_settings(cls, settings) -> ThresholdPolicy:
        return cls(
            threshold=float(settings.temp_threshold),
            on_action=ActuatorCommand.forward(settings.fan_on_level),
            off_action=ActuatorCommand.stop(),
        )


@dataclass(frozen=True)
class CycleResult:
    reading: Optional[SensorReading]
    command: Optional[ActuatorCommand]
    applied_level: Optional[int]
    error: Optional[str] = None

    @property
    def decided(self) -> bool:
        return self.command is not None
