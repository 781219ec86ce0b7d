from __future__ import annotations

import pytest

from homeauto.domain.controller import ThresholdController
from homeauto.domain.models import ActuatorCommand, ThresholdPolicy
from homeauto.drivers.actuators_sim import SimulatedFan, SimulatedLight
from homeauto.sensors.simulated_temperature_sensor import ScriptedTemperatureSensor


@pytest.fixture
def light() -> SimulatedLight:
    return SimulatedLight()


@pytest.fixture
def fan() -> SimulatedFan:
    return SimulatedFan()


@pytest.fixture
def policy() -> ThresholdPolicy:
    return ThresholdPolicy(
        threshold=30.0,
        on_action=ActuatorCommand.forward(75),
        off_action=ActuatorCommand.stop(),
    )


@pytest.fixture
def controller(policy) -> ThresholdController:
    return ThresholdController(policy)


@pytest.fixture
def scripted():
    def _make(*values):
        return ScriptedTemperatureSensor(values)
    return _make
