"""Recommendation criteria and outfit schemas."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from models.wardrobe_item import WardrobeItem
from models.weather import WeatherCondition


@dataclass(frozen=True)
class OutfitCriteria:
    """Optional conditions a recommendation run is tuned for."""

    occasion: Optional[str] = None
    season: Optional[str] = None
    weather: Optional[WeatherCondition] = None
    style_preference: List[str] = field(default_factory=list)
    color_scheme: List[str] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "occasion": self.occasion,
            "season": self.season,
            "weather": self.weather.to_dict() if self.weather else None,
            "stylePreference": list(self.style_preference),
            "colorScheme": list(self.color_scheme),
        }


@dataclass
class RecommendedOutfit:
    name: str
    description: str
    items: List[WardrobeItem]
    reasoning: str
    occasion: Optional[str] = None
    season: Optional[str] = None
    weather_suitability: Optional[List[str]] = None
    score: int = 0

    def to_dict(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "description": self.description,
            "items": [item.to_dict() for item in self.items],
            "occasion": self.occasion,
            "season": self.season,
            "weatherSuitability": list(self.weather_suitability) if self.weather_suitability else None,
            "reasoning": self.reasoning,
            "score": self.score,
        }


__all__ = ["OutfitCriteria", "RecommendedOutfit"]
