"""
Dragon's Escape Game Interface Layer

This module holds everything that draws the game for the player:
- Presenter: protocol the game loop renders through
- TerminalPresenter: box-drawing terminal rendering with paced animations
"""

from .presenter import Presenter
from .terminal_presenter import TerminalPresenter

__all__ = ["Presenter", "TerminalPresenter"]
