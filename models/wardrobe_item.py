"""Wardrobe item data model and helpers."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from models.taxonomy import Category, normalize_category


def _ensure_list(value: Any) -> List[Any]:
    """Coerce a scalar or iterable into a list."""

    if value is None:
        return []
    if isinstance(value, (list, tuple, set)):
        return list(value)
    return [value]


def _clean_tags(values: Any) -> List[str]:
    return [str(value).strip() for value in _ensure_list(values) if str(value).strip()]


@dataclass
class WardrobeItem:
    """Represents an item in the user's wardrobe.

    Empty ``seasons`` or ``occasions`` lists mean the item suits every season
    or occasion.
    """

    item_id: str
    category: Category
    name: str = ""
    description: Optional[str] = None
    color: Optional[str] = None
    style: Optional[str] = None
    seasons: List[str] = field(default_factory=list)
    occasions: List[str] = field(default_factory=list)
    user_id: Optional[str] = None
    brand: Optional[str] = None
    materials: List[str] = field(default_factory=list)

    def __post_init__(self) -> None:
        self.category = normalize_category(self.category)
        self.seasons = _clean_tags(self.seasons)
        self.occasions = _clean_tags(self.occasions)
        self.materials = _clean_tags(self.materials)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "item_id": self.item_id,
            "category": self.category.value,
            "name": self.name,
            "description": self.description,
            "color": self.color,
            "style": self.style,
            "season": list(self.seasons),
            "occasion": list(self.occasions),
            "user_id": self.user_id,
            "brand": self.brand,
            "material": list(self.materials),
        }


def from_raw_metadata(metadata: Dict[str, Any]) -> WardrobeItem:
    """Factory to build a :class:`WardrobeItem` from a hosted-store row.

    Accepts both the store column names (``season``, ``occasion``,
    ``material``) and the model attribute names.
    """

    if not metadata.get("item_id"):
        raise ValueError("Missing required field for WardrobeItem: item_id")

    return WardrobeItem(
        item_id=str(metadata["item_id"]),
        category=normalize_category(metadata.get("category")),
        name=str(metadata.get("name") or ""),
        description=metadata.get("description"),
        color=metadata.get("color"),
        style=metadata.get("style"),
        seasons=_ensure_list(metadata.get("season", metadata.get("seasons"))),
        occasions=_ensure_list(metadata.get("occasion", metadata.get("occasions"))),
        user_id=metadata.get("user_id"),
        brand=metadata.get("brand"),
        materials=_ensure_list(metadata.get("material", metadata.get("materials"))),
    )


__all__ = ["WardrobeItem", "from_raw_metadata"]
