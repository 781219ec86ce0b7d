from __future__ import annotations
import logging
from threading import Lock

from ..domain.models import ActuatorKind, ActuatorState, Direction

logger = logging.getLogger(__name__)

LEVEL_MIN = 0
LEVEL_MAX = 100


def clamp_level(level: int) -> int:
    return max(LEVEL_MIN, min(LEVEL_MAX, int(level)))


class SimulatedLight:
    def __init__(self, actuator_id: str = "light_sim_01") -> None:
        self.actuator_id = actuator_id
        self._on = False

    def set_binary(self, on: bool) -> None:
        self._on = bool(on)
        logger.info("%s set_state=%s", self.actuator_id, self._on)

    def state(self) -> ActuatorState:
        return ActuatorState(self.actuator_id, ActuatorKind.BINARY, on=self._on)


class SimulatedFan:
    """
    PWM fan / DC motor behind an H-bridge, simulated.

    Level and direction are independent: STOPPED with a non-zero level is
    representable and left to the caller to avoid. Use stop() to get both.
    """

    def __init__(self, actuator_id: str = "fan_sim_01") -> None:
        self.actuator_id = actuator_id
        self._lock = Lock()
        self._level = 0
        self._direction = Direction.STOPPED

    def set_level(self, level: int) -> int:
        applied = clamp_level(level)
        with self._lock:
            self._level = applied
        if applied != level:
            logger.debug("%s level %s clamped to %d", self.actuator_id, level, applied)
        logger.info("%s set_level=%d", self.actuator_id, applied)
        return applied

    def set_direction(self, direction: Direction) -> None:
        if not isinstance(direction, Direction):
            raise TypeError(f"direction must be a Direction, got {direction!r}")
        with self._lock:
            self._direction = direction
        logger.info("%s set_direction=%s", self.actuator_id, direction.value)

    def start(self, direction: Direction, level: int) -> int:
        self.set_direction(direction)
        applied = self.set_level(level)
        logger.info("%s start direction=%s level=%d", self.actuator_id, direction.value, applied)
        return applied

    def stop(self) -> None:
        with self._lock:
            self._level = 0
            self._direction = Direction.STOPPED
        logger.info("%s stop", self.actuator_id)

    def state(self) -> ActuatorState:
        with self._lock:
            return ActuatorState(
                self.actuator_id,
                ActuatorKind.VARIABLE,
                on=self._level > 0,
                level=self._level,
                direction=self._direction,
            )
