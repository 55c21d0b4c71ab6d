"""
Starter World for Scriptoria.

Provides the fixed world of the game: five locations, five non-player
characters and six items, ready for the player to explore.
"""

from __future__ import annotations

from dataclasses import dataclass

from scriptoria.models import (
    Character,
    Disposition,
    Item,
    ItemKind,
    Location,
    create_character,
    create_item,
    create_location,
)

STARTING_LOCATION = "Forest Entrance"


@dataclass
class StarterWorldResult:
    """Result of creating the starter world."""

    player: Character
    starting_location: Location
    locations: list[Location]  # in world order
    npcs: dict[str, Character]  # key -> character
    items: dict[str, Item]  # key -> item


def create_starter_world(player_name: str = "Adventurer") -> StarterWorldResult:
    """
    Create the complete world of Scriptoria.

    Returns a world with:
    - The Forest Entrance as the starting location
    - Four more locations joined by two-way paths
    - The Wise Hermit, who will not fight, and four hostile guardians
    - A weapon, potion, quest item or treasure in every location

    Args:
        player_name: Name for the player character

    Returns:
        StarterWorldResult with every created object
    """
    player = create_character(player_name, health=100, attack_power=15, is_player=True)

    # =========================================================================
    # Create Items
    # =========================================================================
    items = {
        "sword": create_item(
            "Iron Sword", ItemKind.WEAPON, 10, "A sturdy blade that gleams in the light"
        ),
        "potion": create_item(
            "Health Potion", ItemKind.HEALING, 30, "A red potion that restores vitality"
        ),
        "key": create_item(
            "Ancient Key", ItemKind.QUEST, 0, "An ornate key with mysterious engravings"
        ),
        "dagger": create_item(
            "Silver Dagger", ItemKind.WEAPON, 7, "A quick, lightweight blade"
        ),
        "scroll": create_item(
            "Magic Scroll", ItemKind.QUEST, 0, "A scroll containing ancient magic"
        ),
        "chalice": create_item(
            "Golden Chalice", ItemKind.TREASURE, 100, "A valuable treasure of Scriptoria"
        ),
    }

    # =========================================================================
    # Create NPCs
    # =========================================================================
    npcs = {
        "goblin": create_character(
            "Goblin Warrior",
            health=40,
            attack_power=12,
            dialogue=(
                'The goblin snarls: "You dare enter our territory? '
                'Leave now or face our wrath!"'
            ),
        ),
        "guardian": create_character(
            "Ancient Guardian",
            health=80,
            attack_power=20,
            dialogue=(
                'The guardian speaks in an ancient voice: "I have protected these '
                "ruins for centuries. Prove your worth in battle, or leave this "
                'sacred place."'
            ),
        ),
        "hermit": create_character(
            "Wise Hermit",
            health=60,
            attack_power=5,
            disposition=Disposition.PEACEFUL,
            dialogue=(
                'The hermit speaks softly: "Welcome to Scriptoria, brave soul. Seek '
                "the treasures hidden in the ancient places, but beware the guardians "
                "that protect them. The Ancient Key you seek lies in these very "
                'ruins."'
            ),
            refusal=(
                'The Wise Hermit raises his hand peacefully. "I mean you no harm, '
                'young adventurer. Perhaps we should talk instead."'
            ),
        ),
        "beast": create_character(
            "Shadow Beast",
            health=60,
            attack_power=18,
            dialogue=(
                'The shadow beast whispers menacingly: "The darkness calls for your '
                'soul... but perhaps you seek what lies deeper in the cave?"'
            ),
        ),
        "keeper": create_character(
            "Treasure Keeper",
            health=50,
            attack_power=15,
            dialogue=(
                'The keeper guards the treasures: "These treasures have been mine '
                'for ages! You must defeat me to claim them!"'
            ),
        ),
    }

    # =========================================================================
    # Create Locations
    # =========================================================================
    forest = create_location(
        "Forest Entrance",
        "You stand at the edge of a mysterious forest. Ancient trees tower above "
        "you, their branches creating a canopy that filters the sunlight into "
        "dancing shadows.",
    )
    ruins = create_location(
        "Ancient Ruins",
        "Crumbling stone structures rise from the earth, covered in moss and "
        "strange symbols. The air here feels heavy with forgotten magic.",
    )
    cave = create_location(
        "Hidden Cave",
        "A dark cave extends deep into the mountainside. The sound of dripping "
        "water echoes from within, and you sense something valuable lies in the "
        "depths.",
    )
    grove = create_location(
        "Mystical Grove",
        "A circular clearing surrounded by silver trees that seem to glow with "
        "inner light. This place radiates powerful magic.",
    )
    chamber = create_location(
        "Treasure Chamber",
        "A magnificent chamber filled with ancient treasures. Golden light "
        "reflects off precious gems and artifacts. This is the heart of "
        "Scriptoria!",
    )

    # Paths run both ways; each pair is listed from both ends
    connections = [
        (forest, ruins),
        (forest, grove),
        (ruins, forest),
        (ruins, cave),
        (cave, ruins),
        (cave, chamber),
        (grove, forest),
        (grove, chamber),
        (chamber, cave),
        (chamber, grove),
    ]
    for origin, destination in connections:
        origin.connect_to(destination)

    # =========================================================================
    # Populate Locations
    # =========================================================================
    placements = [
        (forest, ["hermit"], ["potion"]),
        (ruins, ["goblin", "guardian"], ["sword", "key"]),
        (cave, ["beast"], ["dagger"]),
        (grove, [], ["scroll"]),
        (chamber, ["keeper"], ["chalice"]),
    ]
    for location, npc_keys, item_keys in placements:
        for key in npc_keys:
            location.add_character(npcs[key])
        for key in item_keys:
            location.add_item(items[key])

    return StarterWorldResult(
        player=player,
        starting_location=forest,
        locations=[forest, ruins, cave, grove, chamber],
        npcs=npcs,
        items=items,
    )
