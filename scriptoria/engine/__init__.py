"""
Core Engine for Scriptoria.

The engine orchestrates:
- Command parsing (verb and argument)
- Dispatch to the handler for each action
- Combat exchanges and loot
- Win and loss tracking
"""

from __future__ import annotations

from scriptoria.engine.combat import ExchangeResult, resolve_exchange
from scriptoria.engine.game import (
    GAME_OVER_MESSAGE,
    HELP_TEXT,
    Game,
    GameNotStartedError,
    not_found_message,
)
from scriptoria.engine.intent import VERB_ALIASES, parse_command, strip_particle
from scriptoria.engine.models import Action, GameConfig, ParsedCommand

__all__ = [
    # Main engine
    "Game",
    "GameNotStartedError",
    "GAME_OVER_MESSAGE",
    "HELP_TEXT",
    "not_found_message",
    # Combat
    "ExchangeResult",
    "resolve_exchange",
    # Models
    "Action",
    "GameConfig",
    "ParsedCommand",
    # Command parsing
    "VERB_ALIASES",
    "parse_command",
    "strip_particle",
]
