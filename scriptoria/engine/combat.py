"""
Combat Resolution for Scriptoria.

Resolves one exchange of blows: the attacker strikes first and, if the
target is still standing, it strikes back in the same turn. There is no
initiative and no turn queue.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from pydantic import BaseModel, Field

from scriptoria.models.character import AttackResult

if TYPE_CHECKING:
    from scriptoria.models.character import Character
    from scriptoria.skills.dice import RandomSource


class ExchangeResult(BaseModel):
    """Outcome of a single attack-and-counterattack exchange."""

    attack: AttackResult
    counter: AttackResult | None = Field(
        default=None, description="Target's reply, absent if it fell"
    )
    target_defeated: bool = False
    attacker_defeated: bool = False

    @property
    def narrative(self) -> str:
        lines = [self.attack.narrative]
        if self.counter is not None:
            lines.append(self.counter.narrative)
        return "\n".join(lines)


def resolve_exchange(
    attacker: Character, target: Character, rng: RandomSource
) -> ExchangeResult:
    """
    Resolve attacker hitting target, then target hitting back if alive.

    Args:
        attacker: Who starts the exchange (the player)
        target: Who gets hit first
        rng: Random source for both damage rolls

    Returns:
        ExchangeResult with both attacks and who fell
    """
    attack = attacker.attack(target, rng)

    counter = None
    if target.is_alive:
        counter = target.attack(attacker, rng)

    return ExchangeResult(
        attack=attack,
        counter=counter,
        target_defeated=not target.is_alive,
        attacker_defeated=not attacker.is_alive,
    )
