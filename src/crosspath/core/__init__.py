"""Core components for crosspath."""

from .models import Config, GrammarKind, CURRENT_DIR, PARENT_DIR

__all__ = [
    "Config",
    "GrammarKind",
    "CURRENT_DIR",
    "PARENT_DIR",
]
