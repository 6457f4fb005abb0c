"""Additive scoring for candidate outfits."""

from __future__ import annotations

from typing import Dict, Optional, Sequence

from models.outfit import OutfitCriteria, RecommendedOutfit
from models.taxonomy import WeatherType

SCORE_WEIGHTS = {
    "per_item": 5,
    "occasion": 20,
    "season": 15,
    "weather": 10,
    "style_match": 5,
    "color_match": 5,
    "per_category": 5,
}


def _count_matches(values: Sequence[Optional[str]], wanted: Sequence[str]) -> int:
    lowered = [want.lower() for want in wanted]
    return sum(1 for value in values if value and any(want in value.lower() for want in lowered))


def _weather_bonus(outfit: RecommendedOutfit, criteria: OutfitCriteria) -> int:
    weather = criteria.weather
    tags = outfit.weather_suitability
    if weather is None or not tags:
        return 0
    # Conditions stack; an outfit can earn more than one weather bonus.
    bonus = 0
    if weather.type == WeatherType.RAINY and "rainy" in tags:
        bonus += SCORE_WEIGHTS["weather"]
    if weather.type == WeatherType.SNOWY and "cold" in tags:
        bonus += SCORE_WEIGHTS["weather"]
    if weather.type == WeatherType.SUNNY and weather.temperature > 20 and "warm" in tags:
        bonus += SCORE_WEIGHTS["weather"]
    if weather.temperature < 15 and "cool" in tags:
        bonus += SCORE_WEIGHTS["weather"]
    return bonus


def score_breakdown(outfit: RecommendedOutfit, criteria: OutfitCriteria | None = None) -> Dict[str, int]:
    """Return each scoring component's contribution for ``outfit``."""

    criteria = criteria or OutfitCriteria()
    breakdown = {
        "items": SCORE_WEIGHTS["per_item"] * len(outfit.items),
        "occasion": 0,
        "season": 0,
        "weather": _weather_bonus(outfit, criteria),
        "style": 0,
        "color": 0,
        "variety": SCORE_WEIGHTS["per_category"] * len({item.category for item in outfit.items}),
    }
    if criteria.occasion and outfit.occasion == criteria.occasion:
        breakdown["occasion"] = SCORE_WEIGHTS["occasion"]
    if criteria.season and outfit.season == criteria.season:
        breakdown["season"] = SCORE_WEIGHTS["season"]
    if criteria.style_preference:
        matches = _count_matches([item.style for item in outfit.items], criteria.style_preference)
        breakdown["style"] = SCORE_WEIGHTS["style_match"] * matches
    if criteria.color_scheme:
        matches = _count_matches([item.color for item in outfit.items], criteria.color_scheme)
        breakdown["color"] = SCORE_WEIGHTS["color_match"] * matches
    return breakdown


def score_outfit(outfit: RecommendedOutfit, criteria: OutfitCriteria | None = None) -> int:
    return sum(score_breakdown(outfit, criteria).values())


__all__ = ["score_outfit", "score_breakdown", "SCORE_WEIGHTS"]
