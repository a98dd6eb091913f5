"""
ABOUTME: Command interpreter for Dragon's Escape
ABOUTME: Classifies one line of player input into exactly one Command, with no side effects
"""

from dataclasses import dataclass, field
from typing import Optional, Union

from room_registry import Direction, parse_direction

MOVE_PREFIX = "go "


@dataclass(frozen=True)
class Quit:
    pass


@dataclass(frozen=True)
class Look:
    pass


@dataclass(frozen=True)
class Help:
    pass


@dataclass(frozen=True)
class ShowMap:
    pass


@dataclass(frozen=True)
class NoOp:
    pass


@dataclass(frozen=True)
class Move:
    direction: Direction


@dataclass(frozen=True)
class Unknown:
    """Input outside the grammar.

    `text` is the normalized line. `invalid_direction` is set when the line
    started with "go " but the rest was not a direction; it is not part of
    equality so Unknown("go up") compares equal however it was produced.
    """

    text: str
    invalid_direction: Optional[str] = field(default=None, compare=False)


Command = Union[Quit, Look, Help, ShowMap, NoOp, Move, Unknown]

KEYWORD_COMMANDS = {
    "quit": Quit(),
    "exit": Quit(),
    "look": Look(),
    "help": Help(),
    "map": ShowMap(),
}


class CommandParser:
    """
    Parser for the fixed command grammar.

    Recognized (case-insensitive, surrounding whitespace ignored):
    quit, exit, look, help, map, go <north|south|east|west> and the empty line.
    """

    def parse(self, raw: str) -> Command:
        normalized = (raw or "").strip().lower()

        if not normalized:
            return NoOp()

        if normalized in KEYWORD_COMMANDS:
            return KEYWORD_COMMANDS[normalized]

        if normalized.startswith(MOVE_PREFIX):
            token = normalized[len(MOVE_PREFIX):].strip()
            direction = parse_direction(token)
            if direction is not None:
                return Move(direction)
            return Unknown(text=normalized, invalid_direction=token)

        return Unknown(text=normalized)


_default_parser = CommandParser()


def parse_command(raw: str) -> Command:
    """Classify a line of input using the default parser."""
    return _default_parser.parse(raw)
