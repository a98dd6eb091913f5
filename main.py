#!/usr/bin/env python3

import argparse
import sys
import tomllib
from pathlib import Path

from pydantic import ValidationError

from orchestration import GameOrchestrator
from session.game_configuration import GameConfiguration
from logger import setup_logging


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Dragon's Escape - find the treasure in the dragon's castle"
    )
    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help="TOML file with a [tool.dragons_escape] table (default: ./pyproject.toml if present)",
    )
    parser.add_argument(
        "--no-animations",
        action="store_true",
        help="Skip animation frames and pauses",
    )
    parser.add_argument(
        "--log-level",
        default=None,
        help="Logging level, e.g. INFO or DEBUG (default: from configuration)",
    )
    return parser


def load_configuration(args) -> GameConfiguration:
    config = GameConfiguration.load(args.config)

    overrides = {}
    if args.no_animations:
        overrides["enable_animations"] = False
    if args.log_level:
        overrides["log_level"] = args.log_level

    if overrides:
        # Re-validate so a bad --log-level is reported like a bad config value
        config = GameConfiguration(**{**config.model_dump(), **overrides})
    return config


def main(argv=None, input_func=input) -> int:
    args = build_parser().parse_args(argv)

    try:
        config = load_configuration(args)
    except (OSError, tomllib.TOMLDecodeError, ValidationError) as e:
        print(f"❌ Configuration error: {e}", file=sys.stderr)
        return 2

    logger = setup_logging(
        config.log_file,
        config.json_log_file,
        log_level=config.log_level_number,
    )

    try:
        orchestrator = GameOrchestrator(config=config, input_func=input_func, logger=logger)
    except ValueError as e:
        print(f"❌ Configuration error: {e}", file=sys.stderr)
        return 2

    return orchestrator.play()


if __name__ == "__main__":
    sys.exit(main())
