"""Weather value type consumed by the recommendation engine."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict

from models.taxonomy import WeatherType, validate_weather_type


@dataclass(frozen=True)
class WeatherCondition:
    """Current conditions for a location, in degrees Celsius."""

    type: WeatherType
    temperature: int
    precipitation_chance: int

    def __post_init__(self) -> None:
        object.__setattr__(self, "type", validate_weather_type(self.type))
        if not 0 <= self.precipitation_chance <= 100:
            raise ValueError(
                f"precipitation_chance must be between 0 and 100, got {self.precipitation_chance}"
            )

    @property
    def is_wet(self) -> bool:
        return self.type in (WeatherType.RAINY, WeatherType.SNOWY)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "type": self.type.value,
            "temperature": self.temperature,
            "precipitation": self.precipitation_chance,
        }


__all__ = ["WeatherCondition"]
