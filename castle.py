"""
ABOUTME: The dragon's castle: the three rooms of Dragon's Escape and their ASCII art
ABOUTME: build_castle_registry() is the only place rooms are constructed
"""

from room_registry import Direction, Room, RoomRegistry

DUNGEON_CELL = "Dungeon Cell"
HALLWAY = "Hallway"
THRONE_ROOM = "Throne Room"

START_ROOM = DUNGEON_CELL
TREASURE_ROOM = THRONE_ROOM

DUNGEON_ART = r"""
    ┌─────────────────┐
    │    🚪░░░░░░░    │
    │   ░░░▒▒▒▒▒░░░   │
    │  ░░▒▒     ▒▒░░  │
    │ ░░▒▒  🕳️   ▒▒░░ │
    │ ░░▒▒       ▒▒░░ │
    │  ░░▒▒▒▒▒▒▒▒░░   │
    │   ░░░░░░░░░░    │
    └─────────────────┘
    DUNGEON CELL
"""

HALLWAY_ART = r"""
    ┌─────────────────┐
    │ 🕯️             🕯️ │
    │                 │
    │    ────────     │
    │                 │
    │ 🕯️             🕯️ │
    │                 │
    │    ────────     │
    └─────────────────┘
    STONE HALLWAY
"""

THRONE_ART = r"""
    ┌─────────────────┐
    │      ___        │
    │     /___\       │
    │    🐉|_|🐉      │
    │    💎💰💎     │
    │   📦TREASURE📦  │
    │                 │
    │     🪑THRONE🪑   │
    └─────────────────┘
    THRONE ROOM
"""


def build_castle_registry() -> RoomRegistry:
    """Build the castle: dungeon north to hallway, hallway east to the throne room."""
    dungeon = Room(
        name=DUNGEON_CELL,
        display_name="Dungeon Cell",
        description=(
            "A cold, dark prison cell. Stone walls surround you.\n"
            "There's a rusty door to the NORTH."
        ),
        art=DUNGEON_ART,
        exits={Direction.NORTH: HALLWAY},
    )

    hallway = Room(
        name=HALLWAY,
        display_name="Hallway",
        description=(
            "A torch-lit hallway with ancient tapestries.\n"
            "Exits lead SOUTH and EAST."
        ),
        art=HALLWAY_ART,
        exits={Direction.SOUTH: DUNGEON_CELL, Direction.EAST: THRONE_ROOM},
    )

    throne_room = Room(
        name=THRONE_ROOM,
        display_name="Throne Room",
        description=(
            "A magnificent room with dragon-carved throne!\n"
            "Golden treasures sparkle everywhere!\n"
            "You found the dragon's treasure hoard!"
        ),
        art=THRONE_ART,
        exits={Direction.WEST: HALLWAY},
    )

    return RoomRegistry([dungeon, hallway, throne_room])
