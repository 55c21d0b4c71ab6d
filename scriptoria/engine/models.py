"""
Engine Data Models for Scriptoria.

Defines the core data structures for the command loop:
- Action: What a verb means
- ParsedCommand: A tokenized player command
- GameConfig: Tunable rules of the game
"""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, Field


class Action(str, Enum):
    """Semantic action a verb maps to."""

    # Exploration
    LOOK = "look"
    SEARCH = "search"
    MOVE = "move"

    # Items
    PICK_UP = "pick_up"
    INVENTORY = "inventory"

    # Encounters
    ATTACK = "attack"
    TALK = "talk"

    # Meta
    STATUS = "status"
    HELP = "help"
    LOCATIONS = "locations"

    # Special
    UNKNOWN = "unknown"


class ParsedCommand(BaseModel):
    """A player command split into verb and argument."""

    action: Action
    verb: str = Field(description="First token, lowercased")
    argument: str = Field(default="", description="Remaining tokens, single-spaced")
    original_input: str = Field(description="The player's raw input")


class GameConfig(BaseModel):
    """Game configuration."""

    # Player
    player_name: str = Field(default="Adventurer", min_length=1)

    # Chances
    search_discovery_chance: float = Field(default=0.3, ge=0.0, le=1.0)
    combat_drop_chance: float = Field(default=0.6, ge=0.0, le=1.0)

    # Victory
    treasures_to_win: int = Field(default=2, ge=1)

    # Display
    health_bar_width: int = Field(default=10, ge=1)
    description_preview_length: int = Field(default=60, ge=1)
