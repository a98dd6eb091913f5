"""
ABOUTME: Movement resolution for Dragon's Escape
ABOUTME: Decides where a move leads using only the room registry; never touches game state
"""

from dataclasses import dataclass
from typing import Optional

from room_registry import Direction, RoomRegistry

NO_EXIT = "no_exit"
NO_SUCH_ROOM = "no_such_room"


@dataclass
class MovementResult:
    """Result of resolving one move.

    When `moved` is False, `to_room` equals `from_room` and `reason` says why.
    """
    moved: bool
    from_room: str
    to_room: str
    direction: Direction
    reason: Optional[str] = None


class MovementAnalyzer:
    """
    Resolves moves against the room graph.

    Handles:
    - Exits that exist and lead to a registered room
    - Directions with no exit from the current room
    - Exits whose target is missing from the registry (a construction defect)
    """

    def __init__(self, registry: RoomRegistry):
        self.registry = registry

    def resolve(self, from_room_name: str, direction: Direction) -> MovementResult:
        """
        Work out the outcome of moving `direction` from `from_room_name`.

        Args:
            from_room_name: Name of the room the player is standing in
            direction: Direction the player wants to go

        Returns:
            MovementResult describing the destination or why there is none
        """
        room = self.registry.get(from_room_name)
        target = room.exit_to(direction) if room is not None else None

        if target is None:
            return self._blocked(from_room_name, direction, NO_EXIT)

        if target not in self.registry:
            return self._blocked(from_room_name, direction, NO_SUCH_ROOM)

        return MovementResult(
            moved=True,
            from_room=from_room_name,
            to_room=target,
            direction=direction,
        )

    def _blocked(self, room_name: str, direction: Direction, reason: str) -> MovementResult:
        return MovementResult(
            moved=False,
            from_room=room_name,
            to_room=room_name,
            direction=direction,
            reason=reason,
        )
