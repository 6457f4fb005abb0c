"""Canonical taxonomy definitions for wardrobe items and weather.

The recommendation rules key off these enums rather than raw strings so that
filtering and outfit assembly stay consistent with each other.
"""

from __future__ import annotations

from enum import Enum
from typing import Dict, List


class Category(str, Enum):
    """Wardrobe categories; each maps to an outfit slot."""

    TOP = "top"
    BOTTOM = "bottom"
    DRESS = "dress"
    OUTERWEAR = "outerwear"
    SHOES = "shoes"
    ACCESSORIES = "accessories"
    BAGS = "bags"
    OTHER = "other"


class WeatherType(str, Enum):
    SUNNY = "sunny"
    RAINY = "rainy"
    SNOWY = "snowy"
    CLOUDY = "cloudy"
    WINDY = "windy"


SEASONS: List[str] = ["spring", "summer", "fall", "winter"]

CATEGORY_ALIASES: Dict[str, Category] = {
    "tops": Category.TOP,
    "shirt": Category.TOP,
    "bottoms": Category.BOTTOM,
    "pants": Category.BOTTOM,
    "dresses": Category.DRESS,
    "jacket": Category.OUTERWEAR,
    "coat": Category.OUTERWEAR,
    "shoe": Category.SHOES,
    "footwear": Category.SHOES,
    "accessory": Category.ACCESSORIES,
    "bag": Category.BAGS,
}


def _normalize_key(value: str) -> str:
    """Normalise a free-form string into a taxonomy key."""

    return value.strip().lower().replace(" ", "_")


def normalize_category(value: str | Category | None) -> Category:
    """Map a raw category label to a :class:`Category`.

    Unknown or missing labels fall into :attr:`Category.OTHER` so that stray
    rows never break recommendation runs.
    """

    if isinstance(value, Category):
        return value
    if not value:
        return Category.OTHER
    key = _normalize_key(str(value))
    try:
        return Category(key)
    except ValueError:
        return CATEGORY_ALIASES.get(key, Category.OTHER)


def validate_weather_type(value: str | WeatherType) -> WeatherType:
    """Validate a weather type label.

    Raises a :class:`ValueError` for labels outside the supported set.
    """

    if isinstance(value, WeatherType):
        return value
    key = _normalize_key(str(value))
    try:
        return WeatherType(key)
    except ValueError:
        allowed = [member.value for member in WeatherType]
        raise ValueError(f"Unsupported weather type '{value}'. Allowed: {allowed}") from None


def validate_season(value: str) -> str:
    """Return the canonical season label, raising ``ValueError`` for unknown ones."""

    key = _normalize_key(value)
    if key not in SEASONS:
        raise ValueError(f"Unsupported season '{value}'. Allowed: {SEASONS}")
    return key


__all__ = [
    "Category",
    "WeatherType",
    "SEASONS",
    "CATEGORY_ALIASES",
    "normalize_category",
    "validate_season",
    "validate_weather_type",
]
