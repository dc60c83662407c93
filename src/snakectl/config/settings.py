"""Configuration management for snakectl.

Loads settings from a YAML configuration file with environment variable
overrides (``SNAKECTL_`` prefix). Supports .env files.
"""

from __future__ import annotations

import logging
from pathlib import Path

import yaml
from pydantic import BaseModel, Field, model_validator
from pydantic_settings import BaseSettings

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH = Path("config/snakectl.yaml")


class ControllerConfig(BaseModel):
    min_speed: int = Field(default=1, gt=0, description="Slowest tick rate (ticks/s)")
    max_speed: int = Field(default=10, gt=0, description="Fastest tick rate (ticks/s)")
    initial_speed: int = Field(default=5, gt=0)
    pause_interval: float = Field(default=0.1, gt=0)
    capture_poll_interval: float = Field(default=0.005, gt=0)

    @model_validator(mode="after")
    def _check_speed_bounds(self) -> ControllerConfig:
        if self.min_speed > self.max_speed:
            raise ValueError(
                f"min_speed ({self.min_speed}) exceeds max_speed ({self.max_speed})"
            )
        if not self.min_speed <= self.initial_speed <= self.max_speed:
            raise ValueError(
                f"initial_speed {self.initial_speed} outside "
                f"[{self.min_speed}, {self.max_speed}]"
            )
        return self


class KeysConfig(BaseModel):
    """Raw key codes bound to each control command.

    Defaults are the ASCII codes of q, p, h, k, l, j, + and -. Extra codes
    (e.g. curses arrow keys 258-261) may be appended per command.
    """

    quit: list[int] = Field(default_factory=lambda: [113])
    pause: list[int] = Field(default_factory=lambda: [112])
    left: list[int] = Field(default_factory=lambda: [104])
    up: list[int] = Field(default_factory=lambda: [107])
    right: list[int] = Field(default_factory=lambda: [108])
    down: list[int] = Field(default_factory=lambda: [106])
    speed_up: list[int] = Field(default_factory=lambda: [43])
    speed_down: list[int] = Field(default_factory=lambda: [45])


class LoggingConfig(BaseModel):
    level: str = Field(default="INFO")
    format: str = Field(
        default="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )
    file: str | None = Field(default=None)


class Settings(BaseSettings):
    """Root configuration for snakectl.

    Loads from YAML file and supports environment variable overrides.
    Reads .env files automatically.
    """

    model_config = {
        "env_prefix": "SNAKECTL_",
        "env_nested_delimiter": "__",
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "extra": "ignore",
    }

    controller: ControllerConfig = Field(default_factory=ControllerConfig)
    keys: KeysConfig = Field(default_factory=KeysConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


def load_settings(config_path: Path | str | None = None) -> Settings:
    """Load settings from YAML + .env + environment variables.

    Priority: YAML file > env vars > .env file > defaults
    """
    path = Path(config_path) if config_path else DEFAULT_CONFIG_PATH

    yaml_data = {}
    if path.exists():
        with open(path) as f:
            yaml_data = yaml.safe_load(f) or {}
        logger.info("Loaded configuration from %s", path)
    else:
        logger.warning("Config file %s not found, using defaults + env vars", path)

    return Settings(**yaml_data)

