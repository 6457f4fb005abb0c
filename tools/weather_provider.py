"""Weather provider abstractions and implementations."""

from __future__ import annotations

import logging
import random
from abc import ABC, abstractmethod
from datetime import date
from typing import Callable, List, Optional

import requests
from pydantic import BaseModel, ValidationError

from models.taxonomy import WeatherType
from models.weather import WeatherCondition
from tools.observability import instrument_tool


LOGGER = logging.getLogger(__name__)

WINDY_SPEED_MS = 10.0

_CONDITION_MAP = {
    "rain": WeatherType.RAINY,
    "drizzle": WeatherType.RAINY,
    "thunderstorm": WeatherType.RAINY,
    "snow": WeatherType.SNOWY,
    "clear": WeatherType.SUNNY,
    "clouds": WeatherType.CLOUDY,
    "squall": WeatherType.WINDY,
    "tornado": WeatherType.WINDY,
}


class WeatherProviderError(RuntimeError):
    """Raised when a provider cannot produce a weather condition."""


class _Condition(BaseModel):
    main: str = "unknown"


class _Wind(BaseModel):
    speed: float = 0.0


class _Main(BaseModel):
    temp: float


class _ForecastEntry(BaseModel):
    dt_txt: str
    main: _Main
    pop: float = 0.0
    wind: _Wind = _Wind()
    weather: List[_Condition] = []


class _ForecastResponse(BaseModel):
    list: List[_ForecastEntry] = []


class WeatherProvider(ABC):
    """Abstract weather provider interface."""

    @abstractmethod
    def get_weather_condition(self, location: str) -> WeatherCondition:
        """Return the current weather condition for ``location``."""


class SimulatedWeatherProvider(WeatherProvider):
    """Offline provider that draws plausible weather from the calendar month.

    Months fall into four bands: Dec-Feb, Mar-May, Jun-Sep and Oct-Nov. Each
    band draws temperature first, then the condition type, then the
    precipitation chance from the injected random source.
    """

    def __init__(
        self,
        rng: Optional[random.Random] = None,
        today: Optional[Callable[[], date]] = None,
    ) -> None:
        self.rng = rng or random.Random()
        self.today = today or date.today

    def get_weather_condition(self, location: str) -> WeatherCondition:
        month = self.today().month
        rng = self.rng
        if month in (12, 1, 2):
            temperature = rng.randrange(-5, 5)
            condition = WeatherType.SNOWY if rng.random() > 0.5 else WeatherType.CLOUDY
            precipitation = rng.randrange(40, 100)
        elif month in (3, 4, 5):
            temperature = rng.randrange(10, 20)
            if rng.random() > 0.7:
                condition = WeatherType.RAINY
            else:
                condition = WeatherType.CLOUDY if rng.random() > 0.5 else WeatherType.SUNNY
            precipitation = rng.randrange(20, 70)
        elif month in (6, 7, 8, 9):
            temperature = rng.randrange(20, 30)
            condition = WeatherType.RAINY if rng.random() > 0.8 else WeatherType.SUNNY
            precipitation = rng.randrange(0, 30)
        else:
            temperature = rng.randrange(5, 15)
            if rng.random() > 0.6:
                condition = WeatherType.RAINY
            else:
                condition = WeatherType.CLOUDY if rng.random() > 0.5 else WeatherType.WINDY
            precipitation = rng.randrange(30, 70)

        LOGGER.debug("Simulated weather", extra={"month": month, "weather_type": condition.value})
        return WeatherCondition(type=condition, temperature=temperature, precipitation_chance=precipitation)


class OpenWeatherProvider(WeatherProvider):
    """OpenWeather forecast provider with schema validation."""

    url = "https://api.openweathermap.org/data/2.5/forecast"

    def __init__(self, api_key: str | None = None, timeout_seconds: float = 5.0) -> None:
        self.api_key = api_key
        self.timeout_seconds = timeout_seconds

    @staticmethod
    def _weather_type(entry: _ForecastEntry) -> WeatherType:
        main = entry.weather[0].main.lower() if entry.weather else "unknown"
        mapped = _CONDITION_MAP.get(main)
        if mapped in (WeatherType.RAINY, WeatherType.SNOWY, WeatherType.WINDY):
            return mapped
        if entry.wind.speed >= WINDY_SPEED_MS:
            return WeatherType.WINDY
        return mapped or WeatherType.CLOUDY

    @instrument_tool("get_weather_condition")
    def get_weather_condition(self, location: str) -> WeatherCondition:
        if not location:
            raise ValueError("location is required for weather lookups")
        if not self.api_key:
            raise WeatherProviderError("OpenWeather API key is not configured")

        LOGGER.info("Fetching weather forecast", extra={"location": location})
        params = {"q": location, "appid": self.api_key, "units": "metric"}
        try:
            response = requests.get(self.url, params=params, timeout=self.timeout_seconds)
            response.raise_for_status()
            parsed = _ForecastResponse.model_validate(response.json())
        except requests.RequestException as exc:
            raise WeatherProviderError("Weather API unreachable") from exc
        except ValidationError as exc:
            raise WeatherProviderError("Weather payload schema validation failed") from exc

        if not parsed.list:
            raise WeatherProviderError("Weather API returned no forecast entries")
        entry = parsed.list[0]
        precipitation = max(0, min(100, round(entry.pop * 100)))
        return WeatherCondition(
            type=self._weather_type(entry),
            temperature=round(entry.main.temp),
            precipitation_chance=precipitation,
        )


class MockWeatherProvider(WeatherProvider):
    """Offline deterministic weather provider for tests."""

    def __init__(self, condition: WeatherCondition | None = None) -> None:
        self.condition = condition or WeatherCondition(
            type=WeatherType.CLOUDY, temperature=12, precipitation_chance=10
        )
        self.calls: List[str] = []

    def get_weather_condition(self, location: str) -> WeatherCondition:
        self.calls.append(location)
        LOGGER.info("Returning mock weather", extra={"location": location})
        return self.condition


__all__ = [
    "WeatherProvider",
    "WeatherProviderError",
    "SimulatedWeatherProvider",
    "OpenWeatherProvider",
    "MockWeatherProvider",
]
