"""
Command Parser for Scriptoria.

Turns raw player input into a ParsedCommand. The grammar is deliberately
small: the first word is the verb, everything after it is the argument.
"""

from __future__ import annotations

from scriptoria.engine.models import Action, ParsedCommand

VERB_ALIASES: dict[str, Action] = {
    "look": Action.LOOK,
    "examine": Action.LOOK,
    "search": Action.SEARCH,
    "move": Action.MOVE,
    "go": Action.MOVE,
    "travel": Action.MOVE,
    "pick": Action.PICK_UP,
    "take": Action.PICK_UP,
    "get": Action.PICK_UP,
    "attack": Action.ATTACK,
    "fight": Action.ATTACK,
    "talk": Action.TALK,
    "speak": Action.TALK,
    "inventory": Action.INVENTORY,
    "inv": Action.INVENTORY,
    "status": Action.STATUS,
    "health": Action.STATUS,
    "help": Action.HELP,
    "locations": Action.LOCATIONS,
}

# Filler words dropped from the front of an argument: "pick up X", "go to X"
LEADING_PARTICLES: dict[Action, tuple[str, ...]] = {
    Action.PICK_UP: ("up",),
    Action.MOVE: ("to",),
    Action.TALK: ("to", "with"),
}


def strip_particle(action: Action, argument: str) -> str:
    """Drop a leading particle the verb commonly takes."""
    for particle in LEADING_PARTICLES.get(action, ()):
        if argument == particle:
            return ""
        if argument.startswith(particle + " "):
            return argument[len(particle) + 1 :]
    return argument


def parse_command(player_input: str) -> ParsedCommand:
    """
    Parse raw input into a command.

    Input is lowercased, trimmed and split on single spaces. The first
    token selects the action; the rest, rejoined with single spaces, is
    the argument.

    Args:
        player_input: Raw text from the player

    Returns:
        ParsedCommand (action UNKNOWN for verbs outside the table)
    """
    words = player_input.lower().strip().split(" ")
    verb = words[0]
    action = VERB_ALIASES.get(verb, Action.UNKNOWN)
    argument = strip_particle(action, " ".join(words[1:]))

    return ParsedCommand(
        action=action,
        verb=verb,
        argument=argument,
        original_input=player_input,
    )
