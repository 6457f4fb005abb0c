"""Outfit recommendation entry points.

``get_outfit_recommendations`` runs filter, combine, score and rank over a
wardrobe. ``get_weather_based_recommendations`` first asks a weather provider
for current conditions and derives the season from the temperature.
"""

from __future__ import annotations

import logging
import random
from dataclasses import replace
from typing import List, Optional

from logic.item_filtering import filter_candidates
from logic.outfit_builder import generate_combinations
from logic.outfit_scoring import score_outfit
from models.outfit import OutfitCriteria, RecommendedOutfit
from models.wardrobe_item import WardrobeItem
from stylist_app.config import DEFAULT_LOCATION
from stylist_app.logging_config import get_logger, log_event, operation_context
from tools.weather_provider import SimulatedWeatherProvider, WeatherProvider

LOGGER = get_logger(__name__)

DEFAULT_LIMIT = 5


def season_for_temperature(temperature: int) -> str:
    """Map a temperature in Celsius to the season label used for filtering."""

    if temperature < 5:
        return "winter"
    if temperature < 15:
        return "fall"
    if temperature < 25:
        return "spring"
    return "summer"


def get_outfit_recommendations(
    items: List[WardrobeItem],
    criteria: OutfitCriteria | None = None,
    limit: int = DEFAULT_LIMIT,
    rng: Optional[random.Random] = None,
) -> List[RecommendedOutfit]:
    """Return up to ``limit`` outfits ranked by score, best first."""

    if not items:
        return []
    criteria = criteria or OutfitCriteria()

    with operation_context("engine:get_outfit_recommendations") as correlation_id:
        filtering = filter_candidates(list(items), criteria)
        outfits = generate_combinations(filtering.items, criteria, rng=rng)
        scored = [replace(outfit, score=score_outfit(outfit, criteria)) for outfit in outfits]
        # sorted() is stable, so equal scores keep generation order.
        ranked = sorted(scored, key=lambda outfit: outfit.score, reverse=True)[:limit]

        log_event(
            LOGGER,
            level=logging.INFO,
            event="recommendations_generated",
            correlation_id=correlation_id,
            input_count=len(items),
            candidate_count=len(filtering.items),
            relaxation=filtering.relaxation,
            combination_count=len(outfits),
            returned_count=len(ranked),
            top_score=ranked[0].score if ranked else None,
        )
        return ranked


def get_weather_based_recommendations(
    items: List[WardrobeItem],
    location: str = DEFAULT_LOCATION,
    provider: WeatherProvider | None = None,
    limit: int = DEFAULT_LIMIT,
    rng: Optional[random.Random] = None,
) -> List[RecommendedOutfit]:
    """Recommend outfits for the current weather at ``location``.

    Any provider failure degrades to criteria-free recommendations instead of
    propagating to the caller.
    """

    provider = provider or SimulatedWeatherProvider()
    with operation_context("engine:get_weather_based_recommendations"):
        try:
            weather = provider.get_weather_condition(location)
        except Exception as exc:  # noqa: BLE001
            log_event(
                LOGGER,
                level=logging.WARNING,
                event="weather_lookup_failed",
                provider=type(provider).__name__,
                error=str(exc),
                exc_info=True,
            )
            return get_outfit_recommendations(items, limit=limit, rng=rng)

        season = season_for_temperature(weather.temperature)
        LOGGER.info("Weather %s at %sC maps to season %s", weather.type.value, weather.temperature, season)
        return get_outfit_recommendations(
            items, OutfitCriteria(season=season, weather=weather), limit=limit, rng=rng
        )


__all__ = [
    "DEFAULT_LOCATION",
    "DEFAULT_LIMIT",
    "season_for_temperature",
    "get_outfit_recommendations",
    "get_weather_based_recommendations",
]
