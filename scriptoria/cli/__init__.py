"""Terminal interface for Scriptoria."""

from scriptoria.cli.repl import GameREPL, main, run_game

__all__ = ["GameREPL", "main", "run_game"]
