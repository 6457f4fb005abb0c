"""Outfit combination generation from filtered wardrobe items."""
from __future__ import annotations

import logging
import random
from dataclasses import replace
from typing import Dict, List, Optional

from models.outfit import OutfitCriteria, RecommendedOutfit
from models.taxonomy import Category
from models.wardrobe_item import WardrobeItem

logger = logging.getLogger(__name__)

MAX_TOPS = 5
MAX_BOTTOMS = 5
MAX_DRESSES = 5
MAX_SHOES = 3

SLOT_CATEGORIES = (
    Category.TOP,
    Category.BOTTOM,
    Category.OUTERWEAR,
    Category.DRESS,
    Category.SHOES,
    Category.ACCESSORIES,
)
LAYERED_SUITABILITY = ["cold", "cool", "windy"]


def group_by_category(items: List[WardrobeItem]) -> Dict[Category, List[WardrobeItem]]:
    """Partition items into outfit slots, preserving input order."""

    grouped: Dict[Category, List[WardrobeItem]] = {category: [] for category in SLOT_CATEGORIES}
    for item in items:
        if item.category in grouped:
            grouped[item.category].append(item)
    return grouped


def _separates(grouped: Dict[Category, List[WardrobeItem]], criteria: OutfitCriteria) -> List[RecommendedOutfit]:
    tops = grouped[Category.TOP][:MAX_TOPS]
    bottoms = grouped[Category.BOTTOM][:MAX_BOTTOMS]
    shoes = grouped[Category.SHOES][:MAX_SHOES]
    outfits = []
    for top in tops:
        for bottom in bottoms:
            for shoe in shoes:
                outfits.append(
                    RecommendedOutfit(
                        name=f"{top.name} with {bottom.name}",
                        description=f"A casual outfit combining {top.name} with {bottom.name} and {shoe.name}.",
                        items=[top, bottom, shoe],
                        occasion=criteria.occasion or "casual",
                        season=criteria.season,
                        reasoning="Basic top and bottom combination with matching shoes.",
                    )
                )
    return outfits


def _dresses(grouped: Dict[Category, List[WardrobeItem]], criteria: OutfitCriteria) -> List[RecommendedOutfit]:
    outfits = []
    for dress in grouped[Category.DRESS][:MAX_DRESSES]:
        for shoe in grouped[Category.SHOES][:MAX_SHOES]:
            outfits.append(
                RecommendedOutfit(
                    name=f"{dress.name} with {shoe.name}",
                    description=f"An elegant outfit with {dress.name} and {shoe.name}.",
                    items=[dress, shoe],
                    occasion=criteria.occasion or "formal",
                    season=criteria.season,
                    reasoning="Dress and shoes combination for a put-together look.",
                )
            )
    return outfits


def _layered(grouped: Dict[Category, List[WardrobeItem]], criteria: OutfitCriteria) -> List[RecommendedOutfit]:
    required = (Category.TOP, Category.BOTTOM, Category.OUTERWEAR, Category.SHOES)
    if not all(grouped[category] for category in required):
        return []
    top, bottom, outer, shoe = (grouped[category][0] for category in required)
    return [
        RecommendedOutfit(
            name=f"{outer.name} over {top.name} with {bottom.name}",
            description=(
                f"A layered outfit with {outer.name} over {top.name}, "
                f"paired with {bottom.name} and {shoe.name}."
            ),
            items=[top, bottom, outer, shoe],
            occasion=criteria.occasion or "casual",
            season=criteria.season or "fall",
            weather_suitability=list(LAYERED_SUITABILITY),
            reasoning="Layered outfit suitable for cooler weather.",
        )
    ]


def add_accessories(
    outfits: List[RecommendedOutfit], accessories: List[WardrobeItem], rng: random.Random
) -> List[RecommendedOutfit]:
    """Give every other outfit (even indices) one randomly chosen accessory."""

    if not accessories:
        return list(outfits)
    augmented = []
    for index, outfit in enumerate(outfits):
        if index % 2 == 0:
            accessory = accessories[rng.randrange(len(accessories))]
            outfit = replace(
                outfit,
                items=[*outfit.items, accessory],
                description=f"{outfit.description} Accessorized with {accessory.name}.",
            )
        augmented.append(outfit)
    return augmented


def generate_combinations(
    items: List[WardrobeItem],
    criteria: OutfitCriteria | None = None,
    rng: Optional[random.Random] = None,
) -> List[RecommendedOutfit]:
    """Build unscored outfits from the separates, dress and layered families."""

    criteria = criteria or OutfitCriteria()
    grouped = group_by_category(items)
    separates = _separates(grouped, criteria)
    dresses = _dresses(grouped, criteria)
    layered = _layered(grouped, criteria)
    logger.info(
        "Generated %s separates, %s dress and %s layered outfits",
        len(separates),
        len(dresses),
        len(layered),
    )
    return add_accessories(separates + dresses + layered, grouped[Category.ACCESSORIES], rng or random.Random())


__all__ = [
    "MAX_TOPS",
    "MAX_BOTTOMS",
    "MAX_DRESSES",
    "MAX_SHOES",
    "group_by_category",
    "add_accessories",
    "generate_combinations",
]
