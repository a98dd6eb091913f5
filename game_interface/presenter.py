"""
ABOUTME: Presentation protocol for Dragon's Escape
ABOUTME: The game loop talks to the screen only through this interface
"""

from typing import FrozenSet, Protocol, runtime_checkable

from room_registry import Direction, Room


@runtime_checkable
class Presenter(Protocol):
    """
    Everything the game loop needs to show the player.

    Implementations decide layout, colours and pacing. The loop passes plain
    room data, the set of open directions and ready-made status strings.
    """

    def show_title(self) -> None:
        """Show the title screen and introduction."""
        ...

    def show_room(self, room: Room) -> None:
        ...

    def show_treasure_event(self) -> None:
        ...

    def show_compass(self, directions: FrozenSet[Direction]) -> None:
        ...

    def show_command_prompt(self) -> None:
        ...

    def show_help(self) -> None:
        ...

    def show_map(self) -> None:
        ...

    def show_continue_prompt(self) -> None:
        """Ask the player to press ENTER before going on."""
        ...

    def show_movement(self, direction: Direction) -> None:
        ...

    def show_status(self, message: str) -> None:
        ...

    def show_error(self, message: str) -> None:
        ...

    def show_goodbye(self) -> None:
        ...
