"""Service wiring for wardrobe outfit recommendations."""

from __future__ import annotations

import logging
import random
from typing import List, Optional

from logic.recommendation_engine import get_outfit_recommendations, get_weather_based_recommendations
from models.outfit import OutfitCriteria, RecommendedOutfit
from models.wardrobe_item import WardrobeItem
from stylist_app.config import StylistConfig
from stylist_app.logging_config import configure_logging, get_logger, log_event
from tools.wardrobe_store import InMemoryWardrobeStore, WardrobeStore
from tools.weather_provider import OpenWeatherProvider, SimulatedWeatherProvider, WeatherProvider


LOGGER = get_logger(__name__)


class NoWardrobeItemsError(LookupError):
    """Raised when a user has nothing in their wardrobe to style."""


def build_weather_provider(config: StylistConfig) -> WeatherProvider:
    if config.weather_backend == "openweather":
        return OpenWeatherProvider(
            api_key=config.openweather_api_key, timeout_seconds=config.weather_timeout_seconds
        )
    return SimulatedWeatherProvider()


class StylistApp:
    """Wires configuration, wardrobe storage and the weather provider together."""

    def __init__(
        self,
        config: StylistConfig | None = None,
        store: WardrobeStore | None = None,
        weather_provider: WeatherProvider | None = None,
        rng: Optional[random.Random] = None,
    ) -> None:
        self.config = config or StylistConfig.from_env()
        configure_logging()
        self.store = store or InMemoryWardrobeStore()
        self.weather_provider = weather_provider or build_weather_provider(self.config)
        self.rng = rng

    def _wardrobe(self, user_id: str) -> List[WardrobeItem]:
        items = self.store.list_items_for_user(user_id)
        if not items:
            raise NoWardrobeItemsError(user_id)
        return items

    def recommend(self, user_id: str, criteria: OutfitCriteria | None = None) -> List[RecommendedOutfit]:
        return get_outfit_recommendations(
            self._wardrobe(user_id), criteria, limit=self.config.recommendation_limit, rng=self.rng
        )

    def recommend_for_weather(self, user_id: str, location: str | None = None) -> List[RecommendedOutfit]:
        return get_weather_based_recommendations(
            self._wardrobe(user_id),
            location=location or self.config.default_location,
            provider=self.weather_provider,
            limit=self.config.recommendation_limit,
            rng=self.rng,
        )

    def record_request(
        self, user_id: str, criteria: OutfitCriteria, items_count: int, results_count: int
    ) -> None:
        """Log a recommendation request for later tuning; never raises."""

        try:
            log_event(
                LOGGER,
                level=logging.INFO,
                event="recommendation_request",
                user_id=user_id,
                request_params=criteria.to_dict(),
                items_count=items_count,
                results_count=results_count,
            )
        except Exception:  # noqa: BLE001
            LOGGER.exception("Failed to record recommendation request")


__all__ = ["StylistApp", "NoWardrobeItemsError", "build_weather_provider"]
