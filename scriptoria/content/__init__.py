"""
Game Content for Scriptoria.

The world is hard-coded: locations, characters and items are built here.
"""

from scriptoria.content.starter_world import (
    STARTING_LOCATION,
    StarterWorldResult,
    create_starter_world,
)

__all__ = [
    "STARTING_LOCATION",
    "StarterWorldResult",
    "create_starter_world",
]
