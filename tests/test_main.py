import pytest

import homeauto.main as main_module
from homeauto.core.config import Settings
from homeauto.domain.errors import InitializationError
from homeauto.sensors.simulated_temperature_sensor import SimulatedTemperatureSensor


@pytest.fixture(autouse=True)
def no_logging_setup(monkeypatch):
    monkeypatch.setattr(main_module, "configure_logging", lambda *a, **kw: None)


def test_settings_defaults(monkeypatch):
    monkeypatch.delenv("HOMEAUTO_TEMP_THRESHOLD", raising=False)
    cfg = Settings(_env_file=None)
    assert cfg.temp_threshold == 30.0
    assert cfg.fan_on_level == 75
    assert cfg.temp_base == 25.0
    assert cfg.sensor_mode == "sim"


def test_settings_read_environment(monkeypatch):
    monkeypatch.setenv("HOMEAUTO_TEMP_THRESHOLD", "27.5")
    monkeypatch.setenv("HOMEAUTO_FAN_ON_LEVEL", "60")
    cfg = Settings(_env_file=None)
    assert cfg.temp_threshold == 27.5
    assert cfg.fan_on_level == 60


def test_settings_reject_out_of_range_level():
    with pytest.raises(ValueError):
        Settings(_env_file=None, fan_on_level=120)


def test_build_sensor_sim_is_seeded():
    cfg = Settings(_env_file=None, seed=5)
    a, driver = main_module.build_sensor(cfg)
    b, _ = main_module.build_sensor(cfg)
    assert driver is None
    assert isinstance(a, SimulatedTemperatureSensor)
    assert a.sample().value == b.sample().value


def test_build_sensor_unknown_mode():
    with pytest.raises(InitializationError):
        main_module.build_sensor(Settings(_env_file=None, sensor_mode="carrier-pigeon"))


def test_settings_reject_unknown_functioncode():
    with pytest.raises(ValueError, match="temp_functioncode"):
        Settings(_env_file=None, temp_functioncode=6)
    assert Settings(_env_file=None, temp_functioncode=4).temp_functioncode == 4


def test_settings_functioncode_from_environment(monkeypatch):
    monkeypatch.setenv("HOMEAUTO_TEMP_FUNCTIONCODE", "16")
    with pytest.raises(ValueError):
        Settings(_env_file=None)


def test_main_motor_demo_prints_ramp(capsys):
    assert main_module.main(["motor-demo", "--step", "50", "--delay", "0"]) == 0
    out = capsys.readouterr().out.splitlines()
    assert out[0] == "Motor Control System"
    assert "Motor Direction: Forward" in out
    assert "Motor Direction: Backward" in out
    assert out.count("PWM Signal: Motor running at 50% speed") == 2
    assert out[-1] == "Motor stopped"


@pytest.mark.parametrize("step", ["0", "-5", "101", "ten"])
def test_main_motor_demo_rejects_bad_step(step, monkeypatch, capsys):
    called = []
    monkeypatch.setattr(main_module, "run_motor_demo", lambda *a, **kw: called.append(kw))

    with pytest.raises(SystemExit) as exc:
        main_module.main(["motor-demo", "--step", step])

    assert exc.value.code == 2
    assert called == []
    assert "--step" in capsys.readouterr().err


def test_main_motor_demo_default_step(monkeypatch):
    seen = {}
    monkeypatch.setattr(main_module, "run_motor_demo", lambda motor, **kw: seen.update(kw))
    assert main_module.main(["motor-demo", "--delay", "0"]) == 0
    assert seen["step"] == 10


def test_main_auto_runs_cycles(monkeypatch):
    seen = {}

    def fake_run(self, cycles=None):
        seen["cycles"] = cycles
        seen["interval"] = self._interval
        seen["threshold"] = self._controller.policy.threshold
        return []

    monkeypatch.setattr(main_module.AutoFanService, "run", fake_run)
    rc = main_module.main(["--seed", "1", "auto", "--cycles", "2", "--interval", "0", "--threshold", "28"])

    assert rc == 0
    assert seen == {"cycles": 2, "interval": 0.0, "threshold": 28.0}


def test_main_initialization_failure_exits_nonzero(monkeypatch):
    def boom(cfg):
        raise InitializationError("no bus")

    monkeypatch.setattr(main_module, "build_sensor", boom)
    assert main_module.main(["auto", "--cycles", "1"]) == 1
