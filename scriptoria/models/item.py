"""
Item Models for Scriptoria.

Items are immutable value objects. Each instance is owned by exactly one
container at a time (a location's item list or a character's inventory),
so containers track them by identity rather than by value.
"""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, Field


class ItemKind(str, Enum):
    """What picking an item up does."""

    WEAPON = "weapon"
    HEALING = "healing"
    QUEST = "quest"
    TREASURE = "treasure"


class Item(BaseModel):
    """A pickupable thing."""

    model_config = {"frozen": True}

    name: str = Field(min_length=1, max_length=255)
    kind: ItemKind
    value: int = Field(
        default=0, ge=0, description="Attack bonus, health restored or treasure worth"
    )
    description: str = ""

    def label(self) -> str:
        """Name with kind, as shown in inventory and search listings."""
        return f"{self.name} ({self.kind.value})"


def create_item(
    name: str,
    kind: ItemKind | str,
    value: int = 0,
    description: str = "",
) -> Item:
    """Factory function to create an item."""
    return Item(name=name, kind=ItemKind(kind), value=value, description=description)
