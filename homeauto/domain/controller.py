from __future__ import annotations
import logging

from .errors import ReadFailure
from .interfaces import TemperatureSource, VariableActuator
from .models import ActuatorCommand, CycleResult, SensorReading, ThresholdPolicy

logger = logging.getLogger(__name__)


def evaluate(reading: SensorReading, policy: ThresholdPolicy) -> ActuatorCommand:
    """
    Map one reading to one command. Strictly greater than the threshold
    selects on_action; a reading equal to the threshold selects off_action.
    """
    if reading.value > policy.threshold:
        return policy.on_action
    return policy.off_action


def apply_command(fan: VariableActuator, command: ActuatorCommand) -> int:
    if command.is_stop:
        fan.stop()
        return 0
    return fan.start(command.direction, command.level)


class ThresholdController:
    """
    Stateless threshold control: every cycle is a full re-evaluation, so a
    reading that stays above the threshold re-issues on_action each cycle.
    """

    def __init__(self, policy: ThresholdPolicy) -> None:
        self.policy = policy

    def evaluate(self, reading: SensorReading) -> ActuatorCommand:
        command = evaluate(reading, self.policy)
        if reading.value > self.policy.threshold:
            logger.info(
                "Temperature %.2f exceeds threshold %.2f, fan -> %s",
                reading.value, self.policy.threshold, command.label,
            )
        else:
            logger.info(
                "Temperature %.2f is at or below threshold %.2f, fan -> %s",
                reading.value, self.policy.threshold, command.label,
            )
        return command

    def run_cycle(self, sensor: TemperatureSource, fan: VariableActuator) -> CycleResult:
        try:
            reading = sensor.sample()
        except ReadFailure as e:
            logger.warning("Sensor read failed, no decision this cycle: %s", e)
            return CycleResult(reading=None, command=None, applied_level=None, error=str(e))

        command = self.evaluate(reading)
        applied = apply_command(fan, command)
        return CycleResult(reading=reading, command=command, applied_level=applied)
