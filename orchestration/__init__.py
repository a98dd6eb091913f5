"""Game loop for Dragon's Escape."""

from .game_orchestrator import GameOrchestrator

__all__ = ["GameOrchestrator"]
