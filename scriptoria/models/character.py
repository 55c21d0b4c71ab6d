"""
Character Models for Scriptoria.

A Character is any combat-capable actor: the player, townsfolk and monsters
alike. How a non-player character reacts to being talked to or attacked is
carried by its Behavior rather than keyed off its display name.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum

from pydantic import BaseModel, Field

from scriptoria.models.item import Item, ItemKind
from scriptoria.skills.dice import RandomSource, roll_dice

logger = logging.getLogger(__name__)


class Disposition(str, Enum):
    """Whether a character can be fought."""

    HOSTILE = "hostile"
    PEACEFUL = "peaceful"


class Behavior(BaseModel):
    """How a character responds to the player."""

    model_config = {"frozen": True}

    disposition: Disposition = Disposition.HOSTILE
    dialogue: str | None = Field(default=None, description="Scripted line for talk")
    refusal: str | None = Field(
        default=None, description="What a peaceful character says when attacked"
    )

    @property
    def is_peaceful(self) -> bool:
        return self.disposition == Disposition.PEACEFUL


class AttackResult(BaseModel):
    """Outcome of one character attacking another."""

    attacker: str
    target: str
    damage: int = Field(default=0, ge=0)
    narrative: str
    target_defeated: bool = False


@dataclass(eq=False)
class Character:
    """
    An actor with health, attack power and an inventory.

    Equality is identity: two goblins with the same stats are still
    two goblins.
    """

    name: str
    health: int
    attack_power: int
    is_player: bool = False
    behavior: Behavior = field(default_factory=Behavior)
    max_health: int = field(init=False)
    inventory: list[Item] = field(default_factory=list, init=False)
    is_alive: bool = field(default=True, init=False)

    def __post_init__(self) -> None:
        if self.health < 1:
            raise ValueError(f"{self.name} must start with positive health")
        if self.attack_power < 1:
            raise ValueError(f"{self.name} must start with positive attack power")
        self.max_health = self.health

    def attack(self, target: Character, rng: RandomSource) -> AttackResult:
        """Strike target for a uniform 1..attack_power damage."""
        if not self.is_alive:
            return AttackResult(
                attacker=self.name,
                target=target.name,
                narrative=f"{self.name} cannot attack - they are defeated!",
            )

        damage = roll_dice(f"1d{self.attack_power}", rng).total
        outcome = target.take_damage(damage)
        logger.debug("%s hit %s for %d", self.name, target.name, damage)

        return AttackResult(
            attacker=self.name,
            target=target.name,
            damage=damage,
            narrative=f"{self.name} attacks {target.name} for {damage} damage! {outcome}",
            target_defeated=not target.is_alive,
        )

    def take_damage(self, amount: int) -> str:
        self.health = max(0, self.health - amount)

        if self.health == 0:
            self.is_alive = False
            return f"{self.name} has been defeated!"

        return f"{self.name} has {self.health} health remaining."

    def pick_up_item(self, item: Item) -> str:
        """
        Take ownership of an item and apply its effect.

        The caller must already have removed the item from its previous
        container.
        """
        self.inventory.append(item)

        if item.kind == ItemKind.WEAPON:
            self.attack_power += item.value
            return f"{self.name} picked up {item.name}! Attack power increased by {item.value}."

        if item.kind == ItemKind.HEALING:
            before = self.health
            if self.is_alive:
                self.health = min(self.max_health, self.health + item.value)
            return f"{self.name} used {item.name} and restored {self.health - before} health!"

        return f"{self.name} picked up {item.name}."

    def view_inventory(self) -> str:
        if not self.inventory:
            return f"{self.name}'s inventory is empty."

        labels = ", ".join(item.label() for item in self.inventory)
        return f"{self.name}'s inventory: {labels}"

    def health_bar(self, width: int = 10) -> str:
        filled = self.health * width // self.max_health
        return "█" * filled + "░" * (width - filled)

    def get_status(self, bar_width: int = 10) -> str:
        return (
            f"{self.name} | Health: {self.health}/{self.max_health} "
            f"[{self.health_bar(bar_width)}] | Attack: {self.attack_power}"
        )


def create_character(
    name: str,
    health: int,
    attack_power: int,
    *,
    is_player: bool = False,
    disposition: Disposition = Disposition.HOSTILE,
    dialogue: str | None = None,
    refusal: str | None = None,
) -> Character:
    """Factory function to create a character with its behavior."""
    return Character(
        name=name,
        health=health,
        attack_power=attack_power,
        is_player=is_player,
        behavior=Behavior(disposition=disposition, dialogue=dialogue, refusal=refusal),
    )
