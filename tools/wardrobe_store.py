"""Wardrobe storage interface and an in-memory implementation.

The hosted object store is owned by the surrounding application; the
recommendation service only needs to list a user's items.
"""
from __future__ import annotations

from dataclasses import replace
from typing import Dict, Iterable, List

from models.wardrobe_item import WardrobeItem
from tools.observability import instrument_tool


class WardrobeStore:
    """Persistence interface for wardrobe items."""

    def list_items_for_user(self, user_id: str) -> List[WardrobeItem]:
        raise NotImplementedError

    def replace_items_for_user(self, user_id: str, items: Iterable[WardrobeItem]) -> List[WardrobeItem]:
        raise NotImplementedError


class InMemoryWardrobeStore(WardrobeStore):
    """Process-local store keyed by user id, preserving insertion order."""

    def __init__(self) -> None:
        self._items: Dict[str, List[WardrobeItem]] = {}

    @instrument_tool("list_wardrobe_items")
    def list_items_for_user(self, user_id: str) -> List[WardrobeItem]:
        return list(self._items.get(user_id, []))

    def replace_items_for_user(self, user_id: str, items: Iterable[WardrobeItem]) -> List[WardrobeItem]:
        # Stored copies carry the owner; the caller's items are left untouched.
        stored = [replace(item, user_id=user_id) for item in items]
        self._items[user_id] = stored
        return list(stored)


__all__ = ["WardrobeStore", "InMemoryWardrobeStore"]
