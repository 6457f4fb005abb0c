"""Model package exports."""

from models.taxonomy import *  # noqa: F401,F403
from models.outfit import OutfitCriteria, RecommendedOutfit
from models.wardrobe_item import WardrobeItem, from_raw_metadata
from models.weather import WeatherCondition

__all__ = ["WardrobeItem", "from_raw_metadata", "WeatherCondition", "OutfitCriteria", "RecommendedOutfit"]
