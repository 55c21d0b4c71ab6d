"""
Core Data Models for Scriptoria.

These models define the world: the items lying around, the characters who
fight over them, and the locations that hold both.
"""

from scriptoria.models.item import Item, ItemKind, create_item
from scriptoria.models.character import (
    AttackResult,
    Behavior,
    Character,
    Disposition,
    create_character,
)
from scriptoria.models.location import (
    HIDDEN_ITEM_POOL,
    Location,
    create_location,
    find_by_name,
)

__all__ = [
    # Items
    "Item",
    "ItemKind",
    "create_item",
    # Characters
    "AttackResult",
    "Behavior",
    "Character",
    "Disposition",
    "create_character",
    # Locations
    "HIDDEN_ITEM_POOL",
    "Location",
    "create_location",
    "find_by_name",
]
