"""
Game Engine for Scriptoria.

The world-state machine behind the adventure. An outer shell constructs a
Game, calls initialize_game() once, then feeds every line the player types
to process_command() and shows what comes back.
"""

from __future__ import annotations

import logging
import random
from collections.abc import Callable
from dataclasses import dataclass, field

from scriptoria.content import create_starter_world
from scriptoria.engine.combat import resolve_exchange
from scriptoria.engine.intent import parse_command
from scriptoria.engine.models import Action, GameConfig
from scriptoria.models import Character, ItemKind, Location
from scriptoria.skills import RandomSource, roll_combat_drop

logger = logging.getLogger(__name__)

GAME_OVER_MESSAGE = "Game is over. Please refresh to start a new adventure."
VICTORY_BANNER = (
    "\n\n🎉 CONGRATULATIONS! You have collected enough treasures and won the game! 🎉"
)
DEFEAT_BANNER = "\n\n💀 GAME OVER! Your adventure ends here... 💀"

HELP_TEXT = """
🗡️ SCRIPTORIA COMMANDS 🗡️

Movement:
• move [location] / go [location] / travel [location] - Travel to a connected location
• look / examine - Look around current location

Items:
• pick [item] / take [item] / get [item] - Pick up an item
• search - Search for hidden items
• inventory / inv - View your inventory

Combat:
• attack [character] / fight [character] - Attack a character
• talk [character] / speak [character] - Talk to a character

Status:
• status / health - View your current status
• locations - List visited locations
• help - Show this help message

🎯 GOAL: Collect treasures and explore the mysterious land of Scriptoria!
"""


class GameNotStartedError(RuntimeError):
    """Raised when the game is used before initialize_game()."""


def not_found_message(kind: str, term: str, candidates) -> str:
    """Explain a failed name lookup, listing what could have matched."""
    if not candidates:
        return f"There are no {kind} here."
    names = ", ".join(candidate.name for candidate in candidates)
    return f'Cannot find {kind} "{term}". Available: {names}'


@dataclass
class Game:
    """
    Main game state and command dispatcher.

    Owns:
    - The player and the fixed list of locations
    - Where the player currently is
    - Win/loss flags and the treasure and kill counters

    Every command runs to completion before returning its narrative text.
    Once game_over is set nothing changes any more.
    """

    config: GameConfig = field(default_factory=GameConfig)
    rng: RandomSource = field(default_factory=random.Random)

    # World (set by initialize_game)
    player: Character | None = field(init=False, default=None)
    current_location: Location | None = field(init=False, default=None)
    locations: list[Location] = field(init=False, default_factory=list)

    # Progress
    game_over: bool = field(init=False, default=False)
    game_won: bool = field(init=False, default=False)
    treasures_found: int = field(init=False, default=0)
    enemies_defeated: int = field(init=False, default=0)

    _handlers: dict[Action, Callable[[str], str]] = field(
        init=False, default_factory=dict, repr=False
    )

    def __post_init__(self) -> None:
        """Register the command handlers."""
        self._handlers = {
            Action.LOOK: self.look,
            Action.SEARCH: self.search,
            Action.MOVE: self.move_to_location,
            Action.PICK_UP: self.pick_up_item,
            Action.ATTACK: self.attack_character,
            Action.TALK: self.talk_to_character,
            Action.INVENTORY: self.view_inventory,
            Action.STATUS: self.view_status,
            Action.HELP: self.get_help,
            Action.LOCATIONS: self.list_visited_locations,
        }

    def initialize_game(self) -> str:
        """Build the world and return the narration for the starting location."""
        world = create_starter_world(player_name=self.config.player_name)

        self.player = world.player
        self.locations = world.locations
        self.current_location = world.starting_location
        self.game_over = False
        self.game_won = False
        self.treasures_found = 0
        self.enemies_defeated = 0

        logger.info("New game started at %s", self.current_location.name)
        return self.current_location.enter_location()

    @property
    def is_started(self) -> bool:
        return self.player is not None and self.current_location is not None

    def _require_started(self) -> None:
        if not self.is_started:
            raise GameNotStartedError("Call initialize_game() first")

    # =========================================================================
    # Command Dispatch
    # =========================================================================

    def process_command(self, command: str) -> str:
        """
        Run one player command and return its narrative.

        Args:
            command: Raw text as typed by the player

        Returns:
            What happened, for display
        """
        self._require_started()

        if self.game_over:
            return GAME_OVER_MESSAGE

        parsed = parse_command(command)
        logger.debug("Parsed %r as %s(%r)", command, parsed.action.value, parsed.argument)

        handler = self._handlers.get(parsed.action)
        if handler is None:
            return f'Unknown command: "{command}". Type "help" for available commands.'

        return handler(parsed.argument)

    # =========================================================================
    # Exploration
    # =========================================================================

    def look(self, _: str = "") -> str:
        return self.current_location.enter_location()

    def search(self, _: str = "") -> str:
        return self.current_location.search_location(
            self.rng, discovery_chance=self.config.search_discovery_chance
        )

    def move_to_location(self, location_name: str) -> str:
        connections = self.current_location.connected_locations
        target = self.current_location.find_connection(location_name)

        if target is None:
            return not_found_message("locations", location_name, connections)

        logger.info("Moving from %s to %s", self.current_location.name, target.name)
        self.current_location = target
        return target.enter_location()

    def list_visited_locations(self, _: str = "") -> str:
        visited = [location for location in self.locations if location.visited]
        if not visited:
            return "You have not yet explored any locations."

        preview = self.config.description_preview_length
        lines = [
            f"• {location.name} - {location.description[:preview]}..."
            for location in visited
        ]
        return "Visited locations:\n" + "\n".join(lines)

    # =========================================================================
    # Items
    # =========================================================================

    def pick_up_item(self, item_name: str) -> str:
        """Move an item from the current location into the player's inventory."""
        location = self.current_location
        item = location.find_item(item_name)

        if item is None:
            return not_found_message("items", item_name, location.items)

        location.remove_item(item)
        result = self.player.pick_up_item(item)

        if item.kind == ItemKind.TREASURE:
            self.treasures_found += 1
            logger.info("Treasure %s found (%d total)", item.name, self.treasures_found)
            if self.treasures_found >= self.config.treasures_to_win:
                self.game_won = True
                self.game_over = True
                logger.info("Game won after %d treasures", self.treasures_found)
                return result + VICTORY_BANNER

        return result

    def view_inventory(self, _: str = "") -> str:
        return self.player.view_inventory()

    # =========================================================================
    # Encounters
    # =========================================================================

    def attack_character(self, character_name: str) -> str:
        """
        Attack a character in the current location.

        The player strikes first; a surviving target strikes back in the
        same turn. Peaceful characters refuse to fight.
        """
        alive = self.current_location.get_alive_characters()
        target = self.current_location.find_alive_character(character_name)

        if target is None:
            return not_found_message("targets", character_name, alive)

        if target.behavior.is_peaceful:
            return target.behavior.refusal or f"{target.name} refuses to fight you."

        exchange = resolve_exchange(self.player, target, self.rng)
        logger.debug(
            "Exchange with %s: dealt %d, took %d",
            target.name,
            exchange.attack.damage,
            exchange.counter.damage if exchange.counter else 0,
        )
        result = exchange.narrative

        if exchange.target_defeated:
            self.enemies_defeated += 1
            drop = roll_combat_drop(self.rng, chance=self.config.combat_drop_chance)
            if drop is not None:
                self.current_location.add_item(drop)
                result += f"\n{target.name} dropped {drop.name}!"
        elif exchange.attacker_defeated:
            self.game_over = True
            logger.info("Player defeated by %s", target.name)
            result += DEFEAT_BANNER

        return result

    def talk_to_character(self, character_name: str) -> str:
        alive = self.current_location.get_alive_characters()
        target = self.current_location.find_alive_character(character_name)

        if target is None:
            return not_found_message("characters", character_name, alive)

        return target.behavior.dialogue or f"{target.name} looks at you but says nothing."

    # =========================================================================
    # Meta
    # =========================================================================

    def view_status(self, _: str = "") -> str:
        return self.player.get_status(self.config.health_bar_width)

    def get_help(self, _: str = "") -> str:
        return HELP_TEXT

    def get_game_status(self) -> str:
        """One-line snapshot of the player and the game's progress."""
        self._require_started()
        return (
            f"{self.view_status()} | Treasures: {self.treasures_found} "
            f"| Enemies Defeated: {self.enemies_defeated}"
        )
