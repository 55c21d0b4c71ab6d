"""
Scriptoria - a small text adventure.

Explore five locations, fight their guardians and collect two treasures
to win. The engine is a plain state machine driven by text commands:

    game = Game()
    print(game.initialize_game())
    print(game.process_command("go ruins"))
"""

from scriptoria.engine import Game, GameConfig, GameNotStartedError

__all__ = ["Game", "GameConfig", "GameNotStartedError"]
