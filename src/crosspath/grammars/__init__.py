"""Path grammars for the platforms crosspath understands."""
import logging
from typing import Callable, Optional, Union

from ..core.models import Config, GrammarKind
from .base import PathGrammar
from .posix import PosixGrammar
from .windows import WindowsGrammar

logger = logging.getLogger(__name__)

_GRAMMAR_CLASSES = {
    GrammarKind.POSIX: PosixGrammar,
    GrammarKind.WINDOWS: WindowsGrammar,
}

# Shared instances reading the process working directory
posix = PosixGrammar()
windows = WindowsGrammar()


def create_grammar(kind: Union[GrammarKind, str], cwd: Optional[Callable[[], str]] = None) -> PathGrammar:
    """
    Create a path grammar.

    Args:
        kind: Grammar kind or its name ("posix", "windows")
        cwd: Optional working-directory callable used by to_absolute/to_relative

    Returns:
        New PathGrammar instance

    Raises:
        ValueError: If the grammar name is unknown
    """
    if not isinstance(kind, GrammarKind):
        kind = GrammarKind.from_name(kind)
    return _GRAMMAR_CLASSES[kind](cwd=cwd)


def get_grammar(config: Optional[Config] = None) -> PathGrammar:
    """
    Get the shared grammar selected by a configuration.

    Args:
        config: Configuration object (defaults to one read from the environment)

    Returns:
        The shared posix or windows instance
    """
    config = config or Config()
    grammar = windows if config.is_windows else posix
    logger.debug(f"Selected {config.grammar.value} path grammar")
    return grammar


__all__ = [
    'PathGrammar',
    'PosixGrammar',
    'WindowsGrammar',
    'posix',
    'windows',
    'create_grammar',
    'get_grammar',
]
