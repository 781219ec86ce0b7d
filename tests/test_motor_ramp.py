import logging

import pytest

from homeauto.domain.models import Direction
from homeauto.services.motor_ramp import ramp_levels, run_motor_demo


def test_ramp_levels():
    assert list(ramp_levels(0, 100, 10)) == list(range(0, 101, 10))
    assert list(ramp_levels(100, 0, 10)) == list(range(100, -1, -10))
    assert list(ramp_levels(0, 100, 30)) == [0, 30, 60, 90]


def test_ramp_levels_rejects_non_positive_step():
    with pytest.raises(ValueError):
        list(ramp_levels(0, 100, 0))


def test_motor_demo_sequence(fan, caplog):
    sleeps = []
    with caplog.at_level(logging.INFO):
        applied = run_motor_demo(fan, step=10, delay=1.0, sleep=sleeps.append, write=lambda s: None)

    up = list(range(0, 101, 10))
    assert applied == up + up[::-1]
    assert len(sleeps) == 22
    assert fan.state().direction is Direction.STOPPED
    assert fan.state().level == 0

    messages = [r.getMessage() for r in caplog.records]
    forward = messages.index("fan_sim_01 set_direction=forward")
    backward = messages.index("fan_sim_01 set_direction=backward")
    assert forward < messages.index("fan_sim_01 set_level=100") < backward
    assert messages[-1] == "fan_sim_01 stop"


def test_motor_demo_writes_duty_cycle_and_direction(fan):
    output = []
    run_motor_demo(fan, step=50, delay=0, sleep=lambda s: None, write=output.append)

    assert output == [
        "Motor Control System",
        "Motor Direction: Forward",
        "PWM Signal: Motor running at 0% speed",
        "PWM Signal: Motor running at 50% speed",
        "PWM Signal: Motor running at 100% speed",
        "Motor Direction: Backward",
        "PWM Signal: Motor running at 100% speed",
        "PWM Signal: Motor running at 50% speed",
        "PWM Signal: Motor running at 0% speed",
        "Motor stopped",
    ]
