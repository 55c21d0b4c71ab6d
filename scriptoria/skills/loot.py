"""
Loot Skill.

Rolls for what a defeated enemy leaves behind.
"""

from __future__ import annotations

from scriptoria.models.item import Item, ItemKind
from scriptoria.skills.dice import RandomSource, roll_chance

COMBAT_DROP_POOL: tuple[Item, ...] = (
    Item(
        name="Health Potion",
        kind=ItemKind.HEALING,
        value=20,
        description="A healing potion dropped by your enemy",
    ),
    Item(
        name="Battle Trophy",
        kind=ItemKind.TREASURE,
        value=30,
        description="A valuable trophy from your victory",
    ),
)

DEFAULT_DROP_CHANCE = 0.6


def roll_combat_drop(
    rng: RandomSource,
    chance: float = DEFAULT_DROP_CHANCE,
    pool: tuple[Item, ...] = COMBAT_DROP_POOL,
) -> Item | None:
    """
    Roll for a drop from a defeated enemy.

    Args:
        rng: Random source
        chance: Probability that anything drops at all
        pool: Templates to pick from uniformly

    Returns:
        A fresh Item, or None when nothing dropped
    """
    if not roll_chance(chance, rng):
        return None
    return rng.choice(pool).model_copy()
