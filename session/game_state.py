"""
GameState dataclass for Dragon's Escape.

This module defines the single mutable state object of a play session.
The orchestrator is its only owner; nothing here is module-level or shared.
"""

from dataclasses import dataclass


@dataclass
class GameState:
    """
    State of one play session.

    Only two fields drive the game: where the player stands and whether the
    treasure event has already fired. The rest is bookkeeping for logging.
    """

    current_room_name: str = ""
    visited_throne_room: bool = False  # One-shot: never goes back to False within a session

    turn_count: int = 0
    running: bool = True

    @classmethod
    def start(cls, room_name: str) -> "GameState":
        """Create a fresh session state standing in `room_name`."""
        return cls(current_room_name=room_name)

    def move_to(self, room_name: str) -> None:
        self.current_room_name = room_name

    def mark_treasure_found(self) -> bool:
        """
        Record that the treasure event fired.

        Returns:
            True the first time it is called in a session, False afterwards
        """
        if self.visited_throne_room:
            return False
        self.visited_throne_room = True
        return True

    def end(self) -> None:
        self.running = False
