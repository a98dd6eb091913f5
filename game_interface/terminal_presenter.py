"""
ABOUTME: Terminal rendering for Dragon's Escape: boxed headers, ASCII art and animations
ABOUTME: All pacing goes through an injectable sleep so tests run instantly with no console
"""

import sys
import time
from typing import Callable, FrozenSet, Optional, TextIO

from room_registry import Direction, Room

BOX_WIDTH = 36
CLEAR_SEQUENCE = "\x1b[2J\x1b[1;1H"

TITLE_FRAMES = (
    """
    🐉 🏰 🐉 🏰 🐉 🏰 🐉 🏰 🐉
          DRAGON'S ESCAPE
    🐉 🏰 🐉 🏰 🐉 🏰 🐉 🏰 🐉
        """,
    """
    🏰 🐉 🏰 🐉 🏰 🐉 🏰 🐉 🏰
          DRAGON'S ESCAPE
    🏰 🐉 🏰 🐉 🏰 🐉 🏰 🐉 🏰
        """,
)
TITLE_CYCLES = 3
TITLE_FRAME_DELAY = 0.5

TREASURES = ("💎", "💰", "👑", "💍", "🏆", "🔮")
TREASURE_CYCLES = 2
TREASURE_FRAME_DELAY = 0.2

MOVEMENT_FRAMES = 3
MOVEMENT_FRAME_DELAY = 0.3
FEEDBACK_DELAY = 1.0

HELP_LINES = (
    "│ 🎮 COMMANDS:                       │",
    "│   go north/south/east/west         │",
    "│   look - Examine room              │",
    "│   map - Show game map              │",
    "│   help - This menu                 │",
    "│   quit - Exit game                 │",
    "├────────────────────────────────────┤",
    "│ 🎯 GOAL:                           │",
    "│   Find the treasure in the         │",
    "│   Throne Room!                     │",
    "├────────────────────────────────────┤",
    "│ 💡 TIPS:                           │",
    "│   • Start in Dungeon Cell          │",
    "│   • Go North to Hallway            │",
    "│   • Go East to Throne Room         │",
    "│   • Find the treasure!             │",
)

MAP_LINES = (
    "│                                    │",
    "│        🏰 THRONE ROOM 🏰          │",
    "│              │                    │",
    "│              │                    │",
    "│ WEST ← HALLWAY → EAST             │",
    "│              │                    │",
    "│              │                    │",
    "│           DUNGEON 🕳️              │",
    "│                                    │",
)

GOODBYE_LINES = (
    "│                                    │",
    "│      Thanks for playing!           │",
    "│    🐉 Dragon's Escape 🐉         │",
    "│                                    │",
    "│   Come back for more adventures!   │",
    "│                                    │",
)


class TerminalPresenter:
    """Renders the game to a text stream with box-drawing frames and paced animations."""

    def __init__(
        self,
        stream: Optional[TextIO] = None,
        sleep: Callable[[float], None] = time.sleep,
        enable_animations: bool = True,
        animation_speed: float = 1.0,
        clear_screen: bool = True,
    ):
        """
        Args:
            stream: Where to write (default: sys.stdout)
            sleep: Blocking delay function, replaced with a no-op in tests
            enable_animations: When False no delay is ever requested
            animation_speed: Multiplier on every delay (0 disables waiting)
            clear_screen: Emit ANSI clear sequences between screens
        """
        self.stream = stream or sys.stdout
        self._sleep = sleep
        self.enable_animations = enable_animations
        self.animation_speed = animation_speed
        self.clear_screen = clear_screen

    @classmethod
    def from_config(cls, config, stream: Optional[TextIO] = None, sleep=time.sleep):
        return cls(
            stream=stream,
            sleep=sleep,
            enable_animations=config.enable_animations,
            animation_speed=config.animation_speed,
            clear_screen=config.clear_screen,
        )

    # helpers
    def _write(self, text: str = "") -> None:
        self.stream.write(text + "\n")

    def _pause(self, seconds: float) -> None:
        if self.enable_animations and self.animation_speed > 0:
            self._sleep(seconds * self.animation_speed)

    def _clear(self) -> None:
        if self.clear_screen:
            self.stream.write(CLEAR_SEQUENCE)

    def _header(self, title: str) -> None:
        self._write("┌" + "─" * BOX_WIDTH + "┐")
        self._write(f"│{title:^{BOX_WIDTH}}│")
        self._write("└" + "─" * BOX_WIDTH + "┘")

    def _panel(self, title: str, lines) -> None:
        self._write("┌" + "─" * BOX_WIDTH + "┐")
        self._write(f"│{title:^{BOX_WIDTH}}│")
        self._write("├" + "─" * BOX_WIDTH + "┤")
        for line in lines:
            self._write(line)
        self._write("└" + "─" * BOX_WIDTH + "┘")

    # screens
    def show_title(self) -> None:
        if self.enable_animations:
            for _ in range(TITLE_CYCLES):
                for frame in TITLE_FRAMES:
                    self._clear()
                    self._write(frame)
                    self._pause(TITLE_FRAME_DELAY)
        else:
            self._clear()
            self._write(TITLE_FRAMES[0])

        self._write("You are a brave adventurer trapped in a dragon's castle!")
        self._write("Explore rooms, find treasures, and escape to freedom!\n")
        self._write("Press ENTER to begin your adventure...")
        self.stream.flush()

    def show_room(self, room: Room) -> None:
        self._clear()
        self._header(room.display_name)
        self._write(room.art)
        self._header("ROOM DESCRIPTION")
        self._write(room.description)

    def show_treasure_event(self) -> None:
        self._write()
        for _ in range(TREASURE_CYCLES):
            for treasure in TREASURES:
                self._clear()
                self._header("TREASURE FOUND!")
                self._write()
                self._write(f"{treasure:^{BOX_WIDTH}}")
                self._write()
                self._write("🎉 YOU FOUND THE DRAGON'S HOARD! 🎉")
                self._write("The treasure glitters before you!")
                self._pause(TREASURE_FRAME_DELAY)

    def show_compass(self, directions: FrozenSet[Direction]) -> None:
        north = "🔼 NORTH " if Direction.NORTH in directions else "        "
        west = "◀ WEST " if Direction.WEST in directions else "       "
        east = "EAST ▶" if Direction.EAST in directions else "      "
        south = "🔽 SOUTH " if Direction.SOUTH in directions else "        "

        self._write()
        self._write("┌" + "─" * BOX_WIDTH + "┐")
        self._write(f"│{'COMPASS':^{BOX_WIDTH}}│")
        self._write("├" + "─" * BOX_WIDTH + "┤")
        self._write(f"│{north:^{BOX_WIDTH}}│")
        self._write(f"│{west + '   ' + east:^{BOX_WIDTH}}│")
        self._write(f"│{south:^{BOX_WIDTH}}│")
        self._write("└" + "─" * BOX_WIDTH + "┘")

    def show_command_prompt(self) -> None:
        self._write()
        self._header("YOUR COMMAND")
        self.stream.write("> ")
        self.stream.flush()

    def show_help(self) -> None:
        self._clear()
        self._panel("HELP MENU", HELP_LINES)

    def show_map(self) -> None:
        self._clear()
        self._panel("CASTLE MAP", MAP_LINES)
        self._write("You are exploring a dragon's castle!")
        self._write("Find your way to the treasure!")

    def show_continue_prompt(self) -> None:
        self._write()
        self._write("Press ENTER to continue...")
        self.stream.flush()

    def show_movement(self, direction: Direction) -> None:
        for i in range(MOVEMENT_FRAMES):
            self._clear()
            self._header("MOVING...")
            self._write()
            self._write(f"{'.' * (i + 1):^{BOX_WIDTH}}")
            self._write(f"{direction.arrow:^{BOX_WIDTH}}")
            self._write(f"{'Moving ' + direction.value.upper():^{BOX_WIDTH}}")
            self._pause(MOVEMENT_FRAME_DELAY)
        self._pause(FEEDBACK_DELAY)

    def show_status(self, message: str) -> None:
        self._write(message)
        self._pause(FEEDBACK_DELAY)

    def show_error(self, message: str) -> None:
        self._write(f"❌ {message}")
        self._pause(FEEDBACK_DELAY)

    def show_goodbye(self) -> None:
        self._clear()
        self._panel("FAREWELL!", GOODBYE_LINES)
        self.stream.flush()
