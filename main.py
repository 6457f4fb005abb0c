"""Simple entrypoint to print weather-based outfit ideas for a demo wardrobe."""

import json

from models.wardrobe_item import from_raw_metadata
from stylist_app.app import StylistApp

DEMO_WARDROBE = [
    {"item_id": "t1", "category": "top", "name": "White linen shirt", "color": "white", "season": ["summer"]},
    {"item_id": "t2", "category": "top", "name": "Grey wool sweater", "description": "Heavy wool knit"},
    {"item_id": "b1", "category": "bottom", "name": "Blue jeans", "description": "Classic jeans"},
    {"item_id": "b2", "category": "bottom", "name": "Beige chinos", "style": "smart casual"},
    {"item_id": "d1", "category": "dress", "name": "Black midi dress", "description": "Long sleeve"},
    {"item_id": "o1", "category": "outerwear", "name": "Trench coat", "occasion": ["casual", "business"]},
    {"item_id": "s1", "category": "shoes", "name": "White sneakers"},
    {"item_id": "s2", "category": "shoes", "name": "Leather sandals", "description": "Open toe sandal"},
    {"item_id": "a1", "category": "accessories", "name": "Silk scarf", "color": "red"},
]


def main() -> None:
    app = StylistApp()
    app.store.replace_items_for_user("demo", [from_raw_metadata(raw) for raw in DEMO_WARDROBE])
    outfits = app.recommend_for_weather("demo")
    print(json.dumps([outfit.to_dict() for outfit in outfits], indent=2))


if __name__ == "__main__":
    main()
