"""Model-level validation for wardrobe items, weather and outfits."""

import pytest

from models.outfit import OutfitCriteria, RecommendedOutfit
from models.taxonomy import SEASONS, Category, WeatherType, normalize_category, validate_season, validate_weather_type
from models.wardrobe_item import WardrobeItem, from_raw_metadata
from models.weather import WeatherCondition


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("top", Category.TOP),
        (" Outerwear ", Category.OUTERWEAR),
        ("accessory", Category.ACCESSORIES),
        ("jacket", Category.OUTERWEAR),
        ("swimwear", Category.OTHER),
        (None, Category.OTHER),
        (Category.DRESS, Category.DRESS),
    ],
)
def test_normalize_category(raw, expected) -> None:
    assert normalize_category(raw) is expected


def test_from_raw_metadata_handles_store_rows() -> None:
    item = from_raw_metadata(
        {
            "item_id": 42,
            "user_id": "u1",
            "category": "tops",
            "name": "Oxford shirt",
            "season": None,
            "occasion": "business",
            "material": ["cotton", " "],
            "created_at": "2024-01-01",
        }
    )

    assert item.item_id == "42"
    assert item.category is Category.TOP
    assert item.seasons == []
    assert item.occasions == ["business"]
    assert item.materials == ["cotton"]


def test_from_raw_metadata_requires_item_id() -> None:
    with pytest.raises(ValueError):
        from_raw_metadata({"category": "top"})


def test_wardrobe_item_to_dict_uses_store_field_names() -> None:
    item = WardrobeItem(item_id="1", category="shoes", name="Boots", seasons=["winter"])

    payload = item.to_dict()

    assert payload["category"] == "shoes"
    assert payload["season"] == ["winter"]
    assert payload["occasion"] == []


def test_weather_condition_validation() -> None:
    condition = WeatherCondition(type="Rainy", temperature=8, precipitation_chance=60)

    assert condition.type is WeatherType.RAINY
    assert condition.is_wet
    assert condition.to_dict() == {"type": "rainy", "temperature": 8, "precipitation": 60}
    with pytest.raises(ValueError):
        WeatherCondition(type="hail", temperature=8, precipitation_chance=60)
    with pytest.raises(ValueError):
        WeatherCondition(type="sunny", temperature=30, precipitation_chance=101)
    with pytest.raises(ValueError):
        validate_weather_type("foggy")


def test_validate_season_accepts_only_known_labels() -> None:
    assert [validate_season(label.upper()) for label in SEASONS] == SEASONS
    assert validate_season(" Fall ") == "fall"
    with pytest.raises(ValueError):
        validate_season("autumn")


def test_outfit_to_dict_serialises_items_and_criteria() -> None:
    outfit = RecommendedOutfit(
        name="Look",
        description="A look.",
        items=[WardrobeItem(item_id="1", category="dress", name="Dress")],
        reasoning="Because.",
        occasion="formal",
        score=25,
    )
    criteria = OutfitCriteria(style_preference=["boho"])

    payload = outfit.to_dict()

    assert payload["items"][0]["item_id"] == "1"
    assert payload["weatherSuitability"] is None
    assert payload["score"] == 25
    assert criteria.to_dict()["stylePreference"] == ["boho"]
