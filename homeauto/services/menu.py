from __future__ import annotations

import logging
import time
from enum import IntEnum
from typing import Callable, Optional

from ..domain.controller import ThresholdController, apply_command
from ..domain.errors import InvalidChoice, ReadFailure
from ..domain.interfaces import BinaryActuator, TemperatureSource, VariableActuator

logger = logging.getLogger(__name__)


class MenuCommand(IntEnum):
    LIGHT_ON = 1
    LIGHT_OFF = 2
    SET_FAN_SPEED = 3
    READ_TEMPERATURE = 4
    AUTO_FAN = 5
    EXIT = 6


MENU_LABELS = {
    MenuCommand.LIGHT_ON: "Turn Light ON",
    MenuCommand.LIGHT_OFF: "Turn Light OFF",
    MenuCommand.SET_FAN_SPEED: "Set Fan Speed",
    MenuCommand.READ_TEMPERATURE: "Read Temperature",
    MenuCommand.AUTO_FAN: "Automatic Fan Control based on Temperature",
    MenuCommand.EXIT: "Exit",
}


def parse_choice(text: str) -> MenuCommand:
    try:
        return MenuCommand(int(text.strip()))
    except ValueError:
        raise InvalidChoice(f"Invalid choice: {text.strip()!r}") from None


def parse_speed(text: str) -> int:
    try:
        return int(text.strip())
    except ValueError:
        raise InvalidChoice(f"Invalid fan speed: {text.strip()!r}") from None


def render_menu() -> str:
    lines = ["", "Select an option:"]
    lines += [f"{cmd.value}. {MENU_LABELS[cmd]}" for cmd in MenuCommand]
    return "\n".join(lines)


class HomeAutomation:
    """Owns the actuators; every menu action is routed through dispatch()."""

    def __init__(
        self,
        light: BinaryActuator,
        fan: VariableActuator,
        sensor: TemperatureSource,
        controller: ThresholdController,
        write: Callable[[str], None] = print,
    ) -> None:
        self.light = light
        self.fan = fan
        self.sensor = sensor
        self.controller = controller
        self._write = write

    def dispatch(self, command: MenuCommand, speed: Optional[int] = None) -> bool:
        """Run one command. Returns False when the caller should exit."""
        if command is MenuCommand.LIGHT_ON:
            self.light.set_binary(True)
            self._write("Light turned ON.")

        elif command is MenuCommand.LIGHT_OFF:
            self.light.set_binary(False)
            self._write("Light turned OFF.")

        elif command is MenuCommand.SET_FAN_SPEED:
            if speed is None:
                raise InvalidChoice("Set Fan Speed needs a speed")
            applied = self.fan.set_level(speed)
            self._write(f"Fan speed set to {applied}%.")

        elif command is MenuCommand.READ_TEMPERATURE:
            self._show_temperature()

        elif command is MenuCommand.AUTO_FAN:
            reading = self._show_temperature()
            if reading is not None:
                cmd = self.controller.evaluate(reading)
                if cmd.is_stop:
                    self._write("Temperature is below threshold. Turning fan OFF.")
                else:
                    self._write("Temperature exceeds threshold! Turning fan ON.")
                apply_command(self.fan, cmd)

        elif command is MenuCommand.EXIT:
            self._write("Exiting...")
            self.shutdown()
            return False

        return True

    def _show_temperature(self):
        try:
            reading = self.sensor.sample()
        except ReadFailure as e:
            logger.warning("Temperature read failed: %s", e)
            self._write("Temperature read failed, no action taken.")
            return None
        self._write(f"Current Temperature: {reading.value:.2f}°C")
        return reading

    def shutdown(self) -> None:
        self.fan.stop()
        self.light.set_binary(False)
        logger.info("Actuators reset to off")


def run_menu(
    system: HomeAutomation,
    read_line: Callable[[str], str] = input,
    write: Callable[[str], None] = print,
    sleep: Callable[[float], None] = time.sleep,
    delay: float = 0.5,
) -> None:
    write("=== Home Automation System ===")
    try:
        while True:
            write(render_menu())
            try:
                command = parse_choice(read_line("Enter choice: "))
                speed = None
                if command is MenuCommand.SET_FAN_SPEED:
                    speed = parse_speed(read_line("Enter fan speed (0-100): "))
            except InvalidChoice as e:
                logger.debug("%s", e)
                write("Invalid choice. Please try again.")
                sleep(delay)
                continue

            if not system.dispatch(command, speed):
                return
            sleep(delay)

    except (EOFError, KeyboardInterrupt):
        write("Exiting...")
        system.shutdown()
