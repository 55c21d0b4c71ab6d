"""
Stateless Skills for Scriptoria.

Skills are pure functions that:
- Take a random source explicitly
- Execute game rules (dice, loot tables)
- Return structured output
- NEVER maintain state between calls
"""

from scriptoria.skills.dice import DiceResult, RandomSource, roll_chance, roll_dice
from scriptoria.skills.loot import COMBAT_DROP_POOL, roll_combat_drop

__all__ = [
    # Dice
    "roll_dice",
    "roll_chance",
    "DiceResult",
    "RandomSource",
    # Loot
    "COMBAT_DROP_POOL",
    "roll_combat_drop",
]
