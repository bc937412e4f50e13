"""Utility modules for crosspath."""

from .console import ConsoleManager, ERROR_ICON, THEMES

__all__ = ["ConsoleManager", "ERROR_ICON", "THEMES"]
