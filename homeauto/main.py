from __future__ import annotations

import argparse
import logging
import random
import sys

from .core.config import Settings, settings
from .core.log import configure_logging

from .domain.controller import ThresholdController
from .domain.errors import InitializationError
from .domain.models import ThresholdPolicy
from .drivers.actuators_sim import SimulatedFan, SimulatedLight
from .drivers.rs485_modbus import RS485ModbusRTU, ModbusRtuConfig
from .sensors.base import Sensor
from .sensors.simulated_temperature_sensor import SimulatedTemperatureSensor
from .sensors.rs485_temperature_sensor import RS485TemperatureSensor, TemperatureRegisterSpec
from .services.menu import HomeAutomation, run_menu
from .services.motor_ramp import run_motor_demo
from .services.sampler import AutoFanService


logger = logging.getLogger(__name__)


def build_sensor(cfg: Settings) -> tuple[Sensor, RS485ModbusRTU | None]:
    """Returns the sensor and, for rs485, the driver the caller must close."""
    if cfg.sensor_mode.lower() == "rs485":
        driver = RS485ModbusRTU(
            ModbusRtuConfig(
                port=cfg.rs485_port,
                baudrate=cfg.rs485_baudrate,
                slave_id=cfg.rs485_slave_id,
            )
        )
        # Fail at startup rather than on the first cycle
        driver.connect()

        spec = TemperatureRegisterSpec(
            functioncode=cfg.temp_functioncode,
            address=cfg.temp_register_address,
            count=cfg.temp_register_count,
            scale=cfg.temp_scale,
            signed=cfg.temp_signed,
        )
        return RS485TemperatureSensor(driver=driver, spec=spec), driver

    if cfg.sensor_mode.lower() != "sim":
        raise InitializationError(f"Unknown sensor_mode: {cfg.sensor_mode!r}")

    return SimulatedTemperatureSensor(base=cfg.temp_base, rng=random.Random(cfg.seed)), None


def _percent_step(text: str) -> int:
    try:
        step = int(text)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid int value: {text!r}") from None
    if not 1 <= step <= 100:
        raise argparse.ArgumentTypeError(f"step must be between 1 and 100, got {step}")
    return step


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="homeauto", description=settings.app_name)
    p.add_argument("--sensor-mode", choices=["sim", "rs485"], help="Override HOMEAUTO_SENSOR_MODE")
    p.add_argument("--seed", type=int, help="Seed for the simulated temperature sensor")
    p.add_argument("--verbose", "-v", action="store_true", help="Debug logging")

    sub = p.add_subparsers(dest="command")
    sub.add_parser("menu", help="Interactive menu (default)")

    auto = sub.add_parser("auto", help="Run automatic fan control periodically")
    auto.add_argument("--cycles", type=int, help="Stop after this many cycles (default: run until Ctrl-C)")
    auto.add_argument("--interval", type=float, help="Seconds between cycles")
    auto.add_argument("--threshold", type=float, help="Fan turns on strictly above this temperature")

    motor = sub.add_parser("motor-demo", help="Ramp a simulated motor forward then backward")
    motor.add_argument("--step", type=_percent_step, help="Duty cycle step in percent (1-100)")
    motor.add_argument("--delay", type=float, help="Seconds between steps")
    return p


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    overrides = {}
    if args.sensor_mode:
        overrides["sensor_mode"] = args.sensor_mode
    if args.seed is not None:
        overrides["seed"] = args.seed
    if getattr(args, "threshold", None) is not None:
        overrides["temp_threshold"] = args.threshold
    cfg = settings.model_copy(update=overrides)

    configure_logging("DEBUG" if args.verbose else cfg.log_level, cfg.log_file)
    command = args.command or "menu"
    logger.info("Starting %s (command=%s sensor_mode=%s)", cfg.app_name, command, cfg.sensor_mode)

    if command == "motor-demo":
        run_motor_demo(
            SimulatedFan(actuator_id="motor_sim_01"),
            step=args.step if args.step is not None else cfg.ramp_step,
            delay=args.delay if args.delay is not None else cfg.ramp_delay_seconds,
        )
        return 0

    try:
        sensor, driver = build_sensor(cfg)
    except InitializationError as e:
        logger.error("Initialization failed: %s", e)
        return 1

    fan = SimulatedFan()
    controller = ThresholdController(ThresholdPolicy.from_settings(cfg))

    try:
        if command == "auto":
            interval = args.interval if args.interval is not None else cfg.sample_seconds
            AutoFanService(sensor, fan, controller, interval=interval).run(cycles=args.cycles)
        else:
            system = HomeAutomation(SimulatedLight(), fan, sensor, controller)
            run_menu(system, delay=cfg.menu_delay_seconds)
    finally:
        if driver is not None:
            driver.close()

    logger.info("Shutdown complete")
    return 0


if __name__ == "__main__":
    sys.exit(main())
