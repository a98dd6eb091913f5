"""
ABOUTME: Room graph for Dragon's Escape: directions, rooms and the name-keyed registry
ABOUTME: Rooms are immutable once built; exits map a Direction to a neighbour's name
"""

from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Dict, FrozenSet, Iterable, List, Mapping, Optional, Tuple


class Direction(Enum):
    NORTH = "north"
    SOUTH = "south"
    EAST = "east"
    WEST = "west"

    @property
    def arrow(self) -> str:
        return DIRECTION_ARROWS[self]


DIRECTION_ARROWS = {
    Direction.NORTH: "🔼",
    Direction.SOUTH: "🔽",
    Direction.EAST: "▶",
    Direction.WEST: "◀",
}

# Only full lowercase words are accepted; "n", "northward" etc. are not directions here.
DIRECTION_WORDS = {direction.value: direction for direction in Direction}


def parse_direction(word: str) -> Optional[Direction]:
    """
    Map a direction word to a Direction.

    Returns None for anything that is not exactly one of the four words
    (after trimming and case-folding).
    """
    if not word:
        return None
    return DIRECTION_WORDS.get(word.strip().lower())


@dataclass(frozen=True)
class Room:
    name: str
    display_name: str
    description: str
    art: str = ""
    exits: Mapping[Direction, str] = field(default_factory=dict, hash=False)

    def __post_init__(self):
        # Freeze the exits so a built room can never grow a new door
        object.__setattr__(self, "exits", MappingProxyType(dict(self.exits)))

    def exit_to(self, direction: Direction) -> Optional[str]:
        return self.exits.get(direction)

    def available_directions(self) -> FrozenSet[Direction]:
        return frozenset(self.exits.keys())

    def __repr__(self) -> str:
        exits = {d.value: target for d, target in self.exits.items()}
        return f"Room(name='{self.name}', exits={exits})"


class RoomRegistry:
    """
    Fixed set of rooms keyed by name.

    Built once at startup and never modified afterwards. Lookups for unknown
    names return None; callers decide what that means.
    """

    def __init__(self, rooms: Iterable[Room]):
        self._rooms: Dict[str, Room] = {}
        for room in rooms:
            if room.name in self._rooms:
                raise ValueError(f"Duplicate room name: {room.name!r}")
            self._rooms[room.name] = room

    def get(self, name: str) -> Optional[Room]:
        return self._rooms.get(name)

    def names(self) -> List[str]:
        return list(self._rooms.keys())

    def exits_from(self, name: str) -> FrozenSet[Direction]:
        room = self.get(name)
        if room is None:
            return frozenset()
        return room.available_directions()

    def dangling_exits(self) -> List[Tuple[str, Direction, str]]:
        """
        List every exit whose target room is not registered.

        Returns:
            (room name, direction, missing target) triples; empty for a sound graph
        """
        dangling = []
        for room in self._rooms.values():
            for direction, target in room.exits.items():
                if target not in self._rooms:
                    dangling.append((room.name, direction, target))
        return dangling

    def __contains__(self, name: object) -> bool:
        return name in self._rooms

    def __len__(self) -> int:
        return len(self._rooms)

    def __iter__(self):
        return iter(self._rooms.values())
