"""
Location Models for Scriptoria.

Locations are the nodes of the world graph. Each one owns the items lying
in it, hosts the characters currently standing in it, and keeps directed
edges to the locations reachable from it.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from scriptoria.models.character import Character
from scriptoria.models.item import Item, ItemKind
from scriptoria.skills.dice import RandomSource, roll_chance

logger = logging.getLogger(__name__)

# Templates only; search hands out copies so no instance is shared.
HIDDEN_ITEM_POOL: tuple[Item, ...] = (
    Item(
        name="Ancient Coin",
        kind=ItemKind.TREASURE,
        value=50,
        description="A mysterious coin with strange markings",
    ),
    Item(
        name="Health Potion",
        kind=ItemKind.HEALING,
        value=25,
        description="A glowing red potion",
    ),
    Item(
        name="Magic Stone",
        kind=ItemKind.QUEST,
        value=0,
        description="A stone that pulses with magical energy",
    ),
)

DEFAULT_DISCOVERY_CHANCE = 0.3


@dataclass(eq=False)
class Location:
    """One explorable area of the world."""

    name: str
    description: str
    characters: list[Character] = field(default_factory=list, repr=False)
    items: list[Item] = field(default_factory=list, repr=False)
    connected_locations: list[Location] = field(default_factory=list, repr=False)
    visited: bool = False
    searched: bool = False

    def get_alive_characters(self) -> list[Character]:
        return [c for c in self.characters if c.is_alive]

    def enter_location(self) -> str:
        """Mark the location visited and describe what is here right now."""
        self.visited = True
        message = f"\n=== {self.name} ===\n{self.description}\n"

        alive = self.get_alive_characters()
        if alive:
            message += f"\nCharacters here: {', '.join(c.name for c in alive)}"

        if self.items:
            message += f"\nItems here: {', '.join(i.name for i in self.items)}"

        if self.connected_locations:
            names = ", ".join(loc.name for loc in self.connected_locations)
            message += f"\nConnected areas: {names}"

        return message

    def search_location(
        self,
        rng: RandomSource,
        discovery_chance: float = DEFAULT_DISCOVERY_CHANCE,
        hidden_items: tuple[Item, ...] = HIDDEN_ITEM_POOL,
    ) -> str:
        """
        Report what is here and maybe turn up a hidden item.

        At most one hidden item is ever discovered per location; once the
        discovery roll succeeds the location stays searched for good.
        """
        results = []

        if self.items:
            results.append(f"Items found: {', '.join(i.label() for i in self.items)}")

        alive = self.get_alive_characters()
        if alive:
            results.append(f"Characters present: {', '.join(c.name for c in alive)}")

        if not self.searched and roll_chance(discovery_chance, rng):
            found = rng.choice(hidden_items).model_copy()
            self.items.append(found)
            self.searched = True
            logger.debug("Hidden %s discovered in %s", found.name, self.name)
            results.append(f"🔍 You discovered a hidden {found.name}!")

        return "\n".join(results) if results else "You found nothing of interest."

    def add_character(self, character: Character) -> None:
        self.characters.append(character)

    def add_item(self, item: Item) -> None:
        self.items.append(item)

    def remove_item(self, item: Item) -> bool:
        """Remove this exact instance; value-equal duplicates stay put."""
        for index, held in enumerate(self.items):
            if held is item:
                del self.items[index]
                return True
        return False

    def connect_to(self, location: Location) -> None:
        """Add a one-way edge from here to location."""
        if not any(loc is location for loc in self.connected_locations):
            self.connected_locations.append(location)

    def find_item(self, term: str) -> Item | None:
        return find_by_name(self.items, term)

    def find_alive_character(self, term: str) -> Character | None:
        return find_by_name(self.get_alive_characters(), term)

    def find_connection(self, term: str) -> Location | None:
        return find_by_name(self.connected_locations, term)


def find_by_name(candidates, term: str):
    """First candidate whose name contains term, case-insensitively."""
    needle = term.lower()
    for candidate in candidates:
        if needle in candidate.name.lower():
            return candidate
    return None


def create_location(name: str, description: str) -> Location:
    """Factory function to create an empty, unvisited location."""
    return Location(name=name, description=description)
