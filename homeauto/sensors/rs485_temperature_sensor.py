from __future__ import annotations

from dataclasses import dataclass
import logging

from .base import Sensor
from ..domain.errors import HardwareFault, ReadFailure
from ..domain.models import SensorReading
from ..drivers.rs485_modbus import RS485ModbusRTU

logger = logging.getLogger(__name__)


@dataclass
class TemperatureRegisterSpec:
    functioncode: int = 3  # 3=holding, 4=input
    address: int = 1
    count: int = 1
    scale: float = 0.1     # raw tenths of a degree
    signed: bool = True    # two's complement across all words


def decode_registers(regs: list[int], spec: TemperatureRegisterSpec) -> float:
    # Big-endian, hi word first
    raw = 0
    for r in regs:
        raw = (raw << 16) | (r & 0xFFFF)

    bits = 16 * len(regs)
    if spec.signed and raw & (1 << (bits - 1)):
        raw -= 1 << bits
    return float(raw) * float(spec.scale)


class RS485TemperatureSensor(Sensor):
    def __init__(
        self,
        driver: RS485ModbusRTU,
        spec: TemperatureRegisterSpec = TemperatureRegisterSpec(),
        sensor_id: str = "temp_rs485",
    ):
        self._driver = driver
        self._spec = spec
        self._sensor_id = sensor_id

    @property
    def sensor_id(self) -> str:
        return self._sensor_id

    def sample(self) -> SensorReading:
        try:
            regs = self._driver.read_registers(self._spec.functioncode, self._spec.address, self._spec.count)
        except HardwareFault as e:
            raise ReadFailure(f"{self._sensor_id}: {e}") from e

        if len(regs) != self._spec.count:
            raise ReadFailure(f"{self._sensor_id}: expected {self._spec.count} registers, got {len(regs)}")

        value = decode_registers(regs, self._spec)
        logger.debug(
            "RS485 read: fc=%d addr=%d regs=%s temp=%.2f",
            self._spec.functioncode, self._spec.address, regs, value,
        )
        return self._reading(value)
