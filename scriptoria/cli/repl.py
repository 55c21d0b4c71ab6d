"""
Interactive REPL for Scriptoria.

Provides a text-based interface for playing the game in a terminal.
"""

from __future__ import annotations

import argparse
import logging
import random
import sys
from collections.abc import Callable
from dataclasses import dataclass
from typing import TextIO

from scriptoria.engine import Game, GameConfig

logger = logging.getLogger(__name__)

WIN_MESSAGE = "🎉 Congratulations! You have mastered Scriptoria! 🎉"
LOSS_MESSAGE = "💀 Game Over! Start a new game to try again. 💀"
FAREWELL_MESSAGE = "Thanks for playing Scriptoria!"


@dataclass
class Command:
    """A shell command handled outside the game itself."""

    name: str
    aliases: list[str]
    description: str
    handler: Callable[[], str | None]


class GameREPL:
    """
    Interactive REPL for playing Scriptoria.

    Owns one Game, reads player input line by line, and prints the game's
    narration followed by the status line. Streams are injectable so the
    loop can be driven from tests.
    """

    def __init__(
        self,
        game: Game,
        *,
        stdin: TextIO | None = None,
        stdout: TextIO | None = None,
        prompt: str = "> ",
    ) -> None:
        self.game = game
        self.stdin = stdin or sys.stdin
        self.stdout = stdout or sys.stdout
        self.prompt = prompt
        self.running = False
        self.commands: dict[str, Command] = {}
        self._register_commands()

    def _register_commands(self) -> None:
        """Register shell commands."""
        commands = [
            Command(
                name="quit",
                aliases=["exit", "q"],
                description="Leave the game",
                handler=self._cmd_quit,
            ),
        ]

        for cmd in commands:
            self.commands[cmd.name] = cmd
            for alias in cmd.aliases:
                self.commands[alias] = cmd

    def _cmd_quit(self) -> str | None:
        self.running = False
        return None

    def _write(self, text: str = "") -> None:
        self.stdout.write(text + "\n")
        self.stdout.flush()

    def _read(self) -> str | None:
        """Read one line, or None at end of input."""
        self.stdout.write(self.prompt)
        self.stdout.flush()
        line = self.stdin.readline()
        if not line:
            return None
        return line.rstrip("\n")

    def _process_input(self, text: str) -> str | None:
        shell_command = self.commands.get(text.strip().lower())
        if shell_command is not None:
            return shell_command.handler()
        return self.game.process_command(text)

    def run(self) -> None:
        """Play until the game ends or the player leaves."""
        self.running = True
        self._write(self.game.initialize_game())
        self._write(self.game.get_game_status())

        while self.running and not self.game.game_over:
            try:
                user_input = self._read()
            except KeyboardInterrupt:
                self._write()
                break

            if user_input is None:
                self._write()
                break

            if not user_input.strip():
                continue

            response = self._process_input(user_input)
            if response is None:
                continue

            self._write(response)
            self._write(self.game.get_game_status())

        self.running = False

        if self.game.game_over:
            self._write()
            self._write(WIN_MESSAGE if self.game.game_won else LOSS_MESSAGE)
        else:
            self._write(FAREWELL_MESSAGE)


def run_game(
    player_name: str = "Adventurer",
    seed: int | None = None,
) -> Game:
    """
    Run Scriptoria in the terminal.

    Args:
        player_name: Name for the player character
        seed: Seed for the random source, for reproducible runs

    Returns:
        The finished Game
    """
    game = Game(config=GameConfig(player_name=player_name), rng=random.Random(seed))
    logger.info("Starting Scriptoria for %s (seed=%s)", player_name, seed)
    GameREPL(game).run()
    return game


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Scriptoria Text Adventure")
    parser.add_argument("--name", default="Adventurer", help="Character name")
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Random seed for a reproducible adventure",
    )
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        default="WARNING",
        help="Logging verbosity",
    )

    args = parser.parse_args(argv)
    logging.basicConfig(
        level=args.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    run_game(player_name=args.name, seed=args.seed)
    return 0


if __name__ == "__main__":
    sys.exit(main())
