"""Configuration helpers for the wardrobe stylist service."""

from dataclasses import dataclass
from pathlib import Path
import os
from typing import Optional

DEFAULT_LOCATION = "London,UK"
WEATHER_BACKENDS = ("simulated", "openweather")


@dataclass
class StylistConfig:
    """Configuration values for the recommendation service.

    Values come from environment variables, optionally layered over a
    ``key: value`` file selected through ``APP_ENV`` or ``APP_CONFIG_PATH``.
    """

    default_location: str = DEFAULT_LOCATION
    weather_backend: str = "simulated"
    openweather_api_key: Optional[str] = None
    weather_timeout_seconds: float = 5.0
    recommendation_limit: int = 5
    environment: str | None = None

    def __post_init__(self) -> None:
        if self.weather_backend not in WEATHER_BACKENDS:
            raise ValueError(
                f"Unsupported weather backend '{self.weather_backend}'. Allowed: {list(WEATHER_BACKENDS)}"
            )

    @classmethod
    def from_env(cls) -> "StylistConfig":
        """Build a config from environment variables or an environment file."""

        env_name = os.getenv("APP_ENV")
        config_path = os.getenv("APP_CONFIG_PATH")
        config_dir = Path(os.getenv("STYLIST_CONFIG_DIR", "config/environments"))
        file_config: dict = {}

        if config_path:
            path = Path(config_path)
        elif env_name:
            path = config_dir / f"{env_name}.yaml"
        else:
            path = None

        if path and path.exists():
            file_config = cls._load_yaml_config(path)

        def get_value(key: str, default: Optional[str] = None) -> Optional[str]:
            return os.getenv(key.upper(), file_config.get(key, default))

        return cls(
            default_location=str(get_value("default_location") or DEFAULT_LOCATION),
            weather_backend=str(get_value("weather_backend") or "simulated").lower(),
            openweather_api_key=get_value("openweather_api_key"),
            weather_timeout_seconds=float(get_value("weather_timeout_seconds") or 5.0),
            recommendation_limit=int(get_value("recommendation_limit") or 5),
            environment=env_name,
        )

    @staticmethod
    def _load_yaml_config(path: Path) -> dict:
        """Parse a flat ``key: value`` config file."""

        config: dict[str, str] = {}
        for line in path.read_text().splitlines():
            stripped = line.strip()
            if not stripped or stripped.startswith("#"):
                continue
            if ":" not in stripped:
                continue
            key, raw_value = stripped.split(":", 1)
            value = raw_value.strip()
            if (value.startswith("\"") and value.endswith("\"")) or (
                value.startswith("'") and value.endswith("'")
            ):
                value = value[1:-1]
            config[key.strip()] = value
        return config
