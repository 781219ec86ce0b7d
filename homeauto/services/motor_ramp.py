from __future__ import annotations

import logging
import time
from collections.abc import Iterator
from typing import Callable

from ..domain.interfaces import VariableActuator
from ..domain.models import Direction

logger = logging.getLogger(__name__)


def ramp_levels(start: int, stop: int, step: int) -> Iterator[int]:
    """Ramp from start towards stop, including stop when the step lands on it."""
    if step <= 0:
        raise ValueError(f"step must be positive, got {step}")
    if stop >= start:
        yield from range(start, stop + 1, step)
    else:
        yield from range(start, stop - 1, -step)


def run_motor_demo(
    motor: VariableActuator,
    step: int = 10,
    delay: float = 1.0,
    sleep: Callable[[float], None] = time.sleep,
    write: Callable[[str], None] = print,
) -> list[int]:
    """
    Forward ramp-up 0 -> 100, reverse, ramp-down 100 -> 0, stop.
    Returns every duty cycle that was applied, in order.
    """
    applied: list[int] = []
    logger.info("Motor ramp demo (step=%d delay=%.1fs)", step, delay)
    write("Motor Control System")

    for direction, start, stop in ((Direction.FORWARD, 0, 100), (Direction.BACKWARD, 100, 0)):
        motor.set_direction(direction)
        write(f"Motor Direction: {direction.value.capitalize()}")
        for level in ramp_levels(start, stop, step):
            duty = motor.set_level(level)
            applied.append(duty)
            write(f"PWM Signal: Motor running at {duty}% speed")
            sleep(delay)

    motor.stop()
    write("Motor stopped")
    return applied
