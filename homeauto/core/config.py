from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import Field, field_validator


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="HOMEAUTO_", env_file=".env", extra="ignore")

    app_name: str = "Home Automation System"

    # Simulated temperature: base + randrange(100) / 10 => [25.0, 35.0)
    temp_base: float = 25.0
    seed: int | None = None

    # Automatic fan control
    temp_threshold: float = 30.0
    fan_on_level: int = Field(default=75, ge=0, le=100)

    # Control loop pacing
    menu_delay_seconds: float = Field(default=0.5, ge=0)
    sample_seconds: float = Field(default=5.0, gt=0)

    # Motor ramp demo
    ramp_step: int = Field(default=10, ge=1, le=100)
    ramp_delay_seconds: float = Field(default=1.0, ge=0)

    # Logging
    log_file: str | None = "homeauto.log"
    log_level: str = "INFO"

    # Sensor mode: "sim" or "rs485"
    sensor_mode: str = "sim"

    # RS485 / Modbus RTU
    rs485_port: str = "/dev/ttyUSB0"      # Windows example: "COM3"
    rs485_baudrate: int = 9600
    rs485_slave_id: int = 1

    # Temperature register definition
    temp_functioncode: int = 3            # 3=holding, 4=input
    temp_register_address: int = 1
    temp_register_count: int = 1
    temp_scale: float = 0.1               # most RS485 probes report tenths of a degree
    temp_signed: bool = True

    @field_validator("temp_functioncode")
    @classmethod
    def _read_functioncode(cls, v: int) -> int:
        if v not in (3, 4):
            raise ValueError(f"temp_functioncode must be 3 (holding) or 4 (input), got {v}")
        return v


settings = Settings()
