"""Combination generator coverage for the three outfit families."""

import random

from logic.outfit_builder import add_accessories, generate_combinations, group_by_category
from models.outfit import OutfitCriteria
from models.taxonomy import Category
from tests.factories import make_item, make_items


def test_group_by_category_preserves_input_order() -> None:
    items = [make_item("t2", "top"), make_item("s1", "shoes"), make_item("t1", "top"), make_item("x", "bags")]

    grouped = group_by_category(items)

    assert [item.item_id for item in grouped[Category.TOP]] == ["t2", "t1"]
    assert [item.item_id for item in grouped[Category.SHOES]] == ["s1"]
    assert Category.BAGS not in grouped


def test_separates_family_is_capped() -> None:
    items = make_items("t", "top", 10) + make_items("b", "bottom", 10) + make_items("s", "shoes", 10)

    outfits = generate_combinations(items)

    assert len(outfits) == 75
    assert {outfit.items[0].item_id for outfit in outfits} == {f"t{i}" for i in range(5)}
    assert {outfit.items[2].item_id for outfit in outfits} == {"s0", "s1", "s2"}
    first = outfits[0]
    assert [item.item_id for item in first.items] == ["t0", "b0", "s0"]
    assert first.name == "t0 with b0"
    assert first.occasion == "casual"
    assert first.season is None
    assert first.weather_suitability is None
    assert first.score == 0


def test_dress_family_defaults_to_formal() -> None:
    items = make_items("d", "dress", 7) + make_items("s", "shoes", 4)

    outfits = generate_combinations(items, OutfitCriteria(season="summer"))

    assert len(outfits) == 15
    assert all(outfit.occasion == "formal" for outfit in outfits)
    assert all(outfit.season == "summer" for outfit in outfits)
    assert outfits[0].description == "An elegant outfit with d0 and s0."


def test_layered_family_uses_first_item_of_each_group() -> None:
    items = (
        make_items("t", "top", 3)
        + make_items("b", "bottom", 3)
        + make_items("o", "outerwear", 3)
        + make_items("s", "shoes", 3)
    )

    outfits = generate_combinations(items)

    layered = [outfit for outfit in outfits if outfit.weather_suitability]
    assert len(outfits) == 27 + 1
    assert len(layered) == 1
    assert layered[0] is outfits[-1]
    assert [item.item_id for item in layered[0].items] == ["t0", "b0", "o0", "s0"]
    assert layered[0].season == "fall"
    assert layered[0].weather_suitability == ["cold", "cool", "windy"]
    assert layered[0].name == "o0 over t0 with b0"


def test_layered_family_keeps_requested_season_and_occasion() -> None:
    items = [make_item("t", "top"), make_item("b", "bottom"), make_item("o", "outerwear"), make_item("s", "shoes")]

    outfits = generate_combinations(items, OutfitCriteria(season="winter", occasion="business"))

    assert [outfit.season for outfit in outfits] == ["winter", "winter"]
    assert [outfit.occasion for outfit in outfits] == ["business", "business"]


def test_missing_slots_produce_no_outfits() -> None:
    items = make_items("t", "top", 2) + make_items("b", "bottom", 2) + make_items("a", "accessories", 2)

    assert generate_combinations(items) == []


def test_accessories_added_to_even_indices_only() -> None:
    items = (
        [make_item("t", "top"), make_item("b", "bottom")]
        + make_items("s", "shoes", 3)
        + make_items("a", "accessories", 2)
    )

    outfits = generate_combinations(items, rng=random.Random(7))

    assert [len(outfit.items) for outfit in outfits] == [4, 3, 4]
    for outfit in (outfits[0], outfits[2]):
        accessory = outfit.items[-1]
        assert accessory.category == Category.ACCESSORIES
        assert outfit.description.endswith(f"Accessorized with {accessory.name}.")
    assert "Accessorized" not in outfits[1].description


def test_accessory_choice_is_deterministic_for_a_seed() -> None:
    items = make_items("t", "top", 2) + make_items("b", "bottom", 2) + make_items("s", "shoes", 1)
    items += make_items("a", "accessories", 5)

    first = generate_combinations(items, rng=random.Random(42))
    second = generate_combinations(items, rng=random.Random(42))

    assert [outfit.to_dict() for outfit in first] == [outfit.to_dict() for outfit in second]


def test_add_accessories_leaves_inputs_untouched() -> None:
    base = generate_combinations([make_item("t", "top"), make_item("b", "bottom"), make_item("s", "shoes")])
    scarf = make_item("scarf", "accessories")

    augmented = add_accessories(base, [scarf], random.Random(0))

    assert len(base[0].items) == 3
    assert augmented[0].items[-1] is scarf
    assert add_accessories(base, [], random.Random(0)) == base
