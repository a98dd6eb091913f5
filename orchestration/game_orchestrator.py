import logging
from typing import Callable, Optional

from session.game_state import GameState
from session.game_configuration import GameConfiguration
from castle import build_castle_registry
from command_parser import (
    Command,
    CommandParser,
    Help,
    Look,
    Move,
    NoOp,
    Quit,
    ShowMap,
    Unknown,
)
from movement_analyzer import MovementAnalyzer
from room_registry import Room, RoomRegistry
from game_interface import Presenter, TerminalPresenter
from logger import get_logger

EXAMINE_MESSAGE = "You examine your surroundings carefully..."
BLOCKED_MESSAGE = "You can't go that way!"


class GameOrchestrator:
    """
    Runs one play session of Dragon's Escape.

    This class is responsible for:
    - Owning the GameState (nothing else mutates it)
    - The turn loop: render, read, classify, dispatch
    - The one-time treasure event
    - Treating end of input as an implicit quit

    Rendering is delegated to the presenter, classification to the command
    parser and move resolution to the movement analyzer.
    """

    def __init__(
        self,
        config: Optional[GameConfiguration] = None,
        registry: Optional[RoomRegistry] = None,
        presenter: Optional[Presenter] = None,
        input_func: Callable[[], str] = input,
        logger: Optional[logging.Logger] = None,
    ):
        """
        Args:
            config: Game configuration (defaults to GameConfiguration())
            registry: Room graph (defaults to the castle)
            presenter: Where output goes (defaults to a TerminalPresenter on stdout)
            input_func: Blocking line reader; raises EOFError at end of input
            logger: Logger for structured gameplay events

        Raises:
            ValueError: If the configured start or treasure room is not in the registry
        """
        self.config = config or GameConfiguration()
        self.registry = registry or build_castle_registry()
        self.presenter = presenter or TerminalPresenter.from_config(self.config)
        self.input_func = input_func
        self.logger = logger or get_logger()

        for setting in ("start_room", "treasure_room"):
            room_name = getattr(self.config, setting)
            if room_name not in self.registry:
                raise ValueError(f"{setting} {room_name!r} is not a known room")

        self.parser = CommandParser()
        self.movement = MovementAnalyzer(self.registry)
        self.game_state = GameState.start(self.config.start_room)

    def play(self) -> int:
        """
        Play a complete session.

        Returns:
            Process exit status (always 0; quitting is the only way out)
        """
        self.logger.info(
            "Session started",
            extra={
                "event_type": "session_started",
                "room": self.game_state.current_room_name,
            },
        )

        try:
            if self.config.show_title_screen:
                self.presenter.show_title()
                if self._read_line() is None:
                    self._end_session("end_of_input")
                    return 0

            while self.game_state.running:
                self.run_turn()
        except KeyboardInterrupt:
            # Ctrl-C during an animation or pause
            self._end_session("interrupted")

        return 0

    def run_turn(self) -> bool:
        """
        Play one turn: show the room, read one command and apply it.

        Returns:
            False once the session has ended
        """
        room = self._current_room()
        self.presenter.show_room(room)

        if room.name == self.config.treasure_room and self.game_state.mark_treasure_found():
            self.presenter.show_treasure_event()
            self.logger.info(
                "Treasure found",
                extra={
                    "event_type": "treasure_found",
                    "room": room.name,
                    "turn": self.game_state.turn_count,
                },
            )

        self.presenter.show_compass(room.available_directions())
        self.presenter.show_command_prompt()

        line = self._read_line()
        if line is None:
            self._end_session("end_of_input")
            return False

        return self.process_command(self.parser.parse(line))

    def process_command(self, command: Command) -> bool:
        """
        Apply a classified command to the game state.

        Returns:
            False if the command ended the session
        """
        self.game_state.turn_count += 1
        self.logger.debug(
            f"Command: {command}",
            extra={
                "event_type": "command_parsed",
                "command": type(command).__name__,
                "turn": self.game_state.turn_count,
            },
        )

        if isinstance(command, Quit):
            self._end_session("quit")
        elif isinstance(command, Look):
            self.presenter.show_status(EXAMINE_MESSAGE)
        elif isinstance(command, Help):
            self.presenter.show_help()
            self._wait_for_acknowledgment()
        elif isinstance(command, ShowMap):
            self.presenter.show_map()
            self._wait_for_acknowledgment()
        elif isinstance(command, Move):
            self._handle_movement(command)
        elif isinstance(command, Unknown):
            self._handle_unknown(command)
        elif isinstance(command, NoOp):
            pass

        return self.game_state.running

    def _handle_movement(self, command: Move) -> None:
        result = self.movement.resolve(self.game_state.current_room_name, command.direction)

        if not result.moved:
            self.presenter.show_error(BLOCKED_MESSAGE)
            self.logger.info(
                f"Cannot go {command.direction.value} from {result.from_room}",
                extra={
                    "event_type": "movement_blocked",
                    "room": result.from_room,
                    "direction": command.direction.value,
                    "reason": result.reason,
                    "turn": self.game_state.turn_count,
                },
            )
            return

        self.presenter.show_movement(command.direction)
        self.game_state.move_to(result.to_room)
        self.logger.info(
            f"Entered {result.to_room}",
            extra={
                "event_type": "room_entered",
                "room": result.to_room,
                "from_room": result.from_room,
                "direction": command.direction.value,
                "turn": self.game_state.turn_count,
            },
        )

    def _handle_unknown(self, command: Unknown) -> None:
        if command.invalid_direction is not None:
            message = f"Unknown direction: '{command.invalid_direction}'"
        else:
            message = f"Unknown command: '{command.text}'"

        self.presenter.show_error(message)
        self.logger.info(
            message,
            extra={
                "event_type": "command_rejected",
                "text": command.text,
                "turn": self.game_state.turn_count,
            },
        )

    def _wait_for_acknowledgment(self) -> None:
        self.presenter.show_continue_prompt()
        if self._read_line() is None:
            self._end_session("end_of_input")

    def _read_line(self) -> Optional[str]:
        """Read one line; None means the input stream is finished."""
        try:
            return self.input_func()
        except (EOFError, KeyboardInterrupt):
            return None

    def _current_room(self) -> Room:
        room = self.registry.get(self.game_state.current_room_name)
        if room is None:
            raise RuntimeError(
                f"Current room {self.game_state.current_room_name!r} is not registered"
            )
        return room

    def _end_session(self, reason: str) -> None:
        if not self.game_state.running:
            return
        self.presenter.show_goodbye()
        self.game_state.end()
        self.logger.info(
            "Session ended",
            extra={
                "event_type": "session_ended",
                "reason": reason,
                "room": self.game_state.current_room_name,
                "turn": self.game_state.turn_count,
            },
        )
