"""Candidate filtering for outfit recommendations.

Filters run in a fixed order (season, occasion, style, weather), each one
narrowing the output of the previous. When the fully filtered pool is too
small the constraints are relaxed one stage at a time.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable, Dict, Iterable, List, Optional, Sequence

from models.outfit import OutfitCriteria
from models.taxonomy import Category
from models.wardrobe_item import WardrobeItem
from models.weather import WeatherCondition

logger = logging.getLogger(__name__)

MIN_CANDIDATES = 5

HOT_TOP_KEYWORDS = ("heavy", "wool", "winter")
HOT_BOTTOM_KEYWORDS = ("jeans", "thick")
OPEN_SHOE_KEYWORDS = ("sandal", "open")


@dataclass(frozen=True)
class FilteringResult:
    """Captures the candidate pool and how it was reached."""

    items: List[WardrobeItem]
    relaxation: str
    debug: Dict[str, object]


def matches_or_wildcard(tags: Optional[Sequence[str]], target: str) -> bool:
    """Return True when ``tags`` is empty or contains ``target``."""

    if not tags:
        return True
    return target in tags


def _text_contains(text: Optional[str], keywords: Iterable[str]) -> bool:
    if not text:
        return False
    lowered = text.lower()
    return any(keyword.lower() in lowered for keyword in keywords)


def filter_by_season(items: List[WardrobeItem], season: str) -> List[WardrobeItem]:
    return [item for item in items if matches_or_wildcard(item.seasons, season)]


def filter_by_occasion(items: List[WardrobeItem], occasion: str) -> List[WardrobeItem]:
    return [item for item in items if matches_or_wildcard(item.occasions, occasion)]


def filter_by_style(items: List[WardrobeItem], style_preference: Sequence[str]) -> List[WardrobeItem]:
    """Keep untagged items and items whose style mentions any preferred style."""

    return [item for item in items if not item.style or _text_contains(item.style, style_preference)]


def _outerwear_ok(item: WardrobeItem, weather: WeatherCondition) -> bool:
    # Cold and wet allowances never override the heat exclusion.
    return weather.temperature <= 25


def _top_ok(item: WardrobeItem, weather: WeatherCondition) -> bool:
    return not (weather.temperature > 25 and _text_contains(item.description, HOT_TOP_KEYWORDS))


def _bottom_ok(item: WardrobeItem, weather: WeatherCondition) -> bool:
    if weather.temperature < 10 and _text_contains(item.description, ("short",)):
        return False
    if weather.temperature > 28 and _text_contains(item.description, HOT_BOTTOM_KEYWORDS):
        return False
    return True


def _dress_ok(item: WardrobeItem, weather: WeatherCondition) -> bool:
    return not (weather.temperature < 10 and not _text_contains(item.description, ("long",)))


def _shoes_ok(item: WardrobeItem, weather: WeatherCondition) -> bool:
    return not (
        weather.is_wet
        and weather.precipitation_chance > 50
        and _text_contains(item.description, OPEN_SHOE_KEYWORDS)
    )


WEATHER_RULES: Dict[Category, Callable[[WardrobeItem, WeatherCondition], bool]] = {
    Category.OUTERWEAR: _outerwear_ok,
    Category.TOP: _top_ok,
    Category.BOTTOM: _bottom_ok,
    Category.DRESS: _dress_ok,
    Category.SHOES: _shoes_ok,
}


def is_weather_appropriate(item: WardrobeItem, weather: WeatherCondition) -> bool:
    """Apply the category specific weather rule; other categories always pass."""

    rule = WEATHER_RULES.get(item.category)
    return rule(item, weather) if rule else True


def filter_by_weather(items: List[WardrobeItem], weather: WeatherCondition) -> List[WardrobeItem]:
    return [item for item in items if is_weather_appropriate(item, weather)]


def filter_candidates(items: List[WardrobeItem], criteria: OutfitCriteria | None = None) -> FilteringResult:
    """Narrow ``items`` by the criteria, relaxing filters if too few remain."""

    criteria = criteria or OutfitCriteria()
    seasonal = filter_by_season(items, criteria.season) if criteria.season else items
    occasion_items = filter_by_occasion(seasonal, criteria.occasion) if criteria.occasion else seasonal
    styled = (
        filter_by_style(occasion_items, criteria.style_preference)
        if criteria.style_preference
        else occasion_items
    )
    weather_items = filter_by_weather(styled, criteria.weather) if criteria.weather else styled

    candidates = weather_items
    relaxation = "none"
    if len(candidates) < MIN_CANDIDATES:
        candidates, relaxation = occasion_items, "style_and_weather"
        if len(candidates) < MIN_CANDIDATES:
            candidates, relaxation = seasonal, "occasion"
            if len(candidates) < MIN_CANDIDATES:
                candidates, relaxation = items, "all"

    debug = {
        "input_count": len(items),
        "season_count": len(seasonal),
        "occasion_count": len(occasion_items),
        "style_count": len(styled),
        "weather_count": len(weather_items),
        "candidate_count": len(candidates),
    }
    if relaxation != "none":
        logger.info("Relaxed filters (%s) to keep %s candidates", relaxation, len(candidates))
    return FilteringResult(items=list(candidates), relaxation=relaxation, debug=debug)


__all__ = [
    "FilteringResult",
    "MIN_CANDIDATES",
    "matches_or_wildcard",
    "filter_by_season",
    "filter_by_occasion",
    "filter_by_style",
    "filter_by_weather",
    "is_weather_appropriate",
    "filter_candidates",
]
