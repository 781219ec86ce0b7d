from __future__ import annotations
import logging
import time
from dataclasses import dataclass
from typing import Callable, Optional

from ..domain.controller import ThresholdController
from ..domain.interfaces import TemperatureSource, VariableActuator
from ..domain.models import CycleResult


logger = logging.getLogger(__name__)


@dataclass
class LiveState:
    cycles: int = 0
    failed_reads: int = 0
    last_result: Optional[CycleResult] = None


class AutoFanService:
    """Headless variant of the automatic fan control menu entry."""

    def __init__(
        self,
        sensor: TemperatureSource,
        fan: VariableActuator,
        controller: ThresholdController,
        interval: float,
        sleep: Callable[[float], None] = time.sleep,
    ) -> None:
        self._sensor = sensor
        self._fan = fan
        self._controller = controller
        self._interval = interval
        self._sleep = sleep
        self.live = LiveState()

    def step(self) -> CycleResult:
        result = self._controller.run_cycle(self._sensor, self._fan)
        self.live.cycles += 1
        self.live.last_result = result
        if not result.decided:
            self.live.failed_reads += 1
        return result

    def run(self, cycles: Optional[int] = None) -> list[CycleResult]:
        logger.info(
            "Auto fan loop started (interval=%ss threshold=%.2f cycles=%s)",
            self._interval,
            self._controller.policy.threshold,
            cycles if cycles is not None else "unbounded",
        )

        results: list[CycleResult] = []
        try:
            while cycles is None or len(results) < cycles:
                result = self.step()
                results.append(result)
                if result.decided:
                    logger.info(
                        "[cycle %d] temp=%.2f -> %s (level=%d)",
                        self.live.cycles, result.reading.value, result.command.label, result.applied_level,
                    )

                if cycles is not None and len(results) >= cycles:
                    break
                self._sleep(self._interval)

        except KeyboardInterrupt:
            logger.info("Interrupted")
        finally:
            self._fan.stop()

        logger.info(
            "Auto fan loop stopped after %d cycle(s), %d failed read(s)",
            self.live.cycles, self.live.failed_reads,
        )
        return results
