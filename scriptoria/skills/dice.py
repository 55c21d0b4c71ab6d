"""
Dice Rolling Skill.

Implements dice rolling in NdX notation over an injected random source,
so callers (and tests) decide where the randomness comes from.
"""

from __future__ import annotations

import re
from collections.abc import Sequence
from typing import Protocol, TypeVar

from pydantic import BaseModel, Field

T = TypeVar("T")


class RandomSource(Protocol):
    """The subset of ``random.Random`` the game relies on."""

    def randint(self, a: int, b: int) -> int: ...

    def random(self) -> float: ...

    def choice(self, seq: Sequence[T]) -> T: ...


class DiceResult(BaseModel):
    """Result of a dice roll."""

    notation: str = Field(description="Original dice notation")
    rolls: list[int] = Field(description="Individual die results")
    modifier: int = Field(default=0, description="Any +/- modifier")
    total: int = Field(description="Final result")


DICE_PATTERN = re.compile(r"^(\d+)d(\d+)([+-]\d+)?$")


def roll_dice(notation: str, rng: RandomSource) -> DiceResult:
    """
    Roll dice using standard notation.

    Supports:
    - NdX: Roll N dice with X sides (e.g., "1d15", "2d6")
    - NdX+M: Add modifier (e.g., "1d20+5", "2d6-2")

    Each die is uniform over 1..X inclusive.

    Args:
        notation: Dice notation string
        rng: Random source used for every die

    Returns:
        DiceResult with individual rolls and total

    Examples:
        >>> result = roll_dice("1d12", random.Random(7))
        >>> 1 <= result.total <= 12
        True
    """
    notation = notation.lower().strip()

    match = DICE_PATTERN.match(notation)
    if not match:
        raise ValueError(f"Invalid dice notation: {notation}")

    num_dice = int(match.group(1))
    die_size = int(match.group(2))
    modifier = int(match.group(3)) if match.group(3) else 0

    if num_dice < 1 or die_size < 1:
        raise ValueError("Number of dice and die size must be positive")

    rolls = [rng.randint(1, die_size) for _ in range(num_dice)]

    return DiceResult(
        notation=notation,
        rolls=rolls,
        modifier=modifier,
        total=sum(rolls) + modifier,
    )


def roll_chance(probability: float, rng: RandomSource) -> bool:
    """Return True with the given probability (strictly below the threshold)."""
    return rng.random() < probability
