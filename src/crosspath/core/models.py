"""
Core data models for crosspath.

This module contains the grammar selector and the configuration settings
used throughout the library and the command-line interface.
"""

import os
import sys
from dataclasses import dataclass, field
from enum import Enum
from typing import Optional
from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()


CURRENT_DIR = "."
PARENT_DIR = ".."


class GrammarKind(str, Enum):
    """Path grammars understood by crosspath."""

    POSIX = "posix"
    WINDOWS = "windows"

    @classmethod
    def from_name(cls, name: str) -> "GrammarKind":
        """
        Resolve a grammar from its (case-insensitive) name.

        Args:
            name: Grammar name such as "posix" or "Windows".

        Returns:
            The matching GrammarKind.

        Raises:
            ValueError: If the name does not denote a known grammar.
        """
        try:
            return cls(name.strip().lower())
        except ValueError:
            valid = ", ".join(kind.value for kind in cls)
            raise ValueError(f"Unknown path grammar: {name!r} (expected one of: {valid})") from None

    @classmethod
    def for_platform(cls, platform: Optional[str] = None) -> "GrammarKind":
        """Grammar used natively by the given (or running) sys.platform value."""
        platform = platform or sys.platform
        return cls.WINDOWS if platform == "win32" else cls.POSIX


def _grammar_from_env() -> GrammarKind:
    name = os.getenv('CROSSPATH_GRAMMAR', '')
    if name:
        return GrammarKind.from_name(name)
    return GrammarKind.for_platform()


@dataclass
class Config:
    """Configuration settings for crosspath."""

    # Grammar used by the platform-dispatching facade
    grammar: GrammarKind = field(default_factory=_grammar_from_env)

    log_level: str = field(default_factory=lambda: os.getenv('CROSSPATH_LOG_LEVEL', 'WARNING'))

    def __post_init__(self):
        if not isinstance(self.grammar, GrammarKind):
            self.grammar = GrammarKind.from_name(str(self.grammar))
        self.log_level = self.log_level.upper()

    @property
    def is_windows(self) -> bool:
        """Check if the configured grammar is the Windows one."""
        return self.grammar is GrammarKind.WINDOWS
