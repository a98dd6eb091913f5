"""
Game configuration management for Dragon's Escape.

This module provides a typed interface to game configuration, loaded from
the [tool.dragons_escape] table of a TOML file and from environment
variables prefixed with DRAGONS_ESCAPE_.
"""

import logging
import tomllib
from typing import Optional
from pathlib import Path
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict
from dotenv import load_dotenv

from castle import START_ROOM, TREASURE_ROOM

TOML_SECTION = "dragons_escape"


class GameConfiguration(BaseSettings):
    """
    Typed configuration object for Dragon's Escape.

    Every field has a default so the game runs without any config file.
    """

    # World settings
    start_room: str = Field(
        default=START_ROOM, description="Room the player starts the session in"
    )
    treasure_room: str = Field(
        default=TREASURE_ROOM, description="Room that triggers the one-time treasure event"
    )

    # Presentation settings
    enable_animations: bool = Field(
        default=True, description="Play animation frames and feedback pauses"
    )
    animation_speed: float = Field(
        default=1.0, ge=0.0, description="Multiplier applied to every animation delay"
    )
    show_title_screen: bool = Field(
        default=True, description="Show the title screen and wait for ENTER before play"
    )
    clear_screen: bool = Field(
        default=True, description="Emit ANSI clear-screen sequences between screens"
    )

    # Logging
    log_level: str = Field(default="WARNING", description="Logging level name")
    log_file: Optional[str] = Field(
        default=None, description="Path to human-readable log file"
    )
    json_log_file: Optional[str] = Field(
        default=None, description="Path to JSON-lines log file"
    )

    model_config = SettingsConfigDict(
        env_prefix="DRAGONS_ESCAPE_",
        env_file=None,
        case_sensitive=False,
        extra="forbid",  # Catch typos in config early
    )

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, value: str) -> str:
        """Accept any stdlib level name, case-insensitively."""
        level_name = value.upper()
        if not isinstance(logging.getLevelName(level_name), int):
            raise ValueError(f"Unknown log level: {value}")
        return level_name

    @property
    def log_level_number(self) -> int:
        return logging.getLevelName(self.log_level)

    @classmethod
    def from_toml(cls, config_file: Optional[Path] = None) -> "GameConfiguration":
        """
        Create GameConfiguration from the [tool.dragons_escape] table of a TOML file.

        Values present in the file win over environment variables, which win
        over defaults. A file without the table yields an env/default config.

        Args:
            config_file: Path to TOML file (defaults to pyproject.toml)

        Returns:
            GameConfiguration instance

        Raises:
            FileNotFoundError: If config file doesn't exist
            OSError: If config file can't be read (e.g. it is a directory)
            tomllib.TOMLDecodeError: If config file is not valid TOML
        """
        # Load .env file if it exists to populate environment variables
        load_dotenv()

        config_file = Path(config_file) if config_file else Path("pyproject.toml")

        if not config_file.exists():
            raise FileNotFoundError(f"Configuration file not found: {config_file}")

        with open(config_file, "rb") as f:
            toml_data = tomllib.load(f)

        section = toml_data.get("tool", {}).get(TOML_SECTION, {})

        world_config = section.get("world", {})
        presentation_config = section.get("presentation", {})
        logging_config = section.get("logging", {})

        config_dict = {
            # World settings
            "start_room": world_config.get("start_room"),
            "treasure_room": world_config.get("treasure_room"),
            # Presentation settings
            "enable_animations": presentation_config.get("enable_animations"),
            "animation_speed": presentation_config.get("animation_speed"),
            "show_title_screen": presentation_config.get("show_title_screen"),
            "clear_screen": presentation_config.get("clear_screen"),
            # Logging
            "log_level": logging_config.get("log_level"),
            "log_file": logging_config.get("log_file"),
            "json_log_file": logging_config.get("json_log_file"),
        }

        # Unknown keys are passed through so extra="forbid" rejects them
        for table_name, table in (
            ("world", world_config),
            ("presentation", presentation_config),
            ("logging", logging_config),
        ):
            for key, value in table.items():
                if key not in config_dict:
                    config_dict[f"{table_name}.{key}"] = value

        # Missing keys fall through to environment variables and defaults
        config_dict = {k: v for k, v in config_dict.items() if v is not None}

        return cls(**config_dict)

    @classmethod
    def load(cls, config_file: Optional[Path] = None) -> "GameConfiguration":
        """
        Load configuration the way the command line does.

        An explicit path must exist. Without one, pyproject.toml in the working
        directory is used if present, otherwise environment variables and defaults.
        """
        if config_file is not None:
            return cls.from_toml(config_file)

        default_file = Path("pyproject.toml")
        if default_file.exists():
            return cls.from_toml(default_file)

        load_dotenv()
        return cls()
