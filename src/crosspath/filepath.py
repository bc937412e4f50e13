"""
Platform-dispatching path functions.

Every function here forwards to the grammar of the running platform (or the
one named by CROSSPATH_GRAMMAR), chosen when the module is imported.
set_grammar() swaps it for tests and tools; code that reasons about another
platform's paths can also call crosspath.posix or crosspath.windows directly.
"""

import logging
from typing import List, Sequence, Union

from .core.models import Config, GrammarKind
from .grammars import PathGrammar, get_grammar

logger = logging.getLogger(__name__)


def _configured_grammar() -> PathGrammar:
    """Grammar named by the environment, or the platform's on a bad name."""
    try:
        return get_grammar(Config())
    except ValueError as e:
        fallback = GrammarKind.for_platform()
        logger.warning(f"{e}; using the {fallback.value} grammar")
        return get_grammar(Config(grammar=fallback))


_grammar = _configured_grammar()

# Separators of the grammar selected at import
SEPARATOR = _grammar.SEPARATOR
LIST_SEPARATOR = _grammar.LIST_SEPARATOR


def current_grammar() -> PathGrammar:
    """Return the grammar the module-level functions dispatch to."""
    return _grammar


def set_grammar(grammar: Union[PathGrammar, GrammarKind, str]) -> PathGrammar:
    """
    Make the module-level functions dispatch to another grammar.

    SEPARATOR and LIST_SEPARATOR keep describing the grammar selected at
    import; use current_grammar().SEPARATOR to follow a swap.

    Args:
        grammar: Grammar instance, or a kind or name of a shared grammar

    Returns:
        The previously selected grammar, so callers can restore it

    Raises:
        ValueError: If the grammar name is unknown
    """
    global _grammar
    if not isinstance(grammar, PathGrammar):
        grammar = get_grammar(Config(grammar=grammar))
    previous, _grammar = _grammar, grammar
    return previous


def clean(path: str) -> str:
    """Return the shortest lexically equivalent form of a path."""
    return _grammar.clean(path)


def join(segments: Sequence[str]) -> str:
    """Join path segments and clean the result ("" if all are empty)."""
    return _grammar.join(segments)


def split(path: str) -> List[str]:
    """Split a path into its volume or root and its names."""
    return _grammar.split(path)


def dirname(path: str) -> str:
    """Return all but the last element of a path."""
    return _grammar.dirname(path)


def basename(path: str) -> str:
    """Return the last element of a path, "" for a root or volume."""
    return _grammar.basename(path)


def extension(path: str) -> str:
    """Return the suffix from the final dot of the last element."""
    return _grammar.extension(path)


def volume_name(path: str) -> str:
    """Return the leading volume prefix of a path."""
    return _grammar.volume_name(path)


def is_absolute(path: str) -> bool:
    """Check if a path is absolute."""
    return _grammar.is_absolute(path)


def is_rooted(path: str) -> bool:
    """Check if a path is anchored at a root or a drive."""
    return _grammar.is_rooted(path)


def is_relative(path: str) -> bool:
    """Check if a path is not rooted."""
    return _grammar.is_relative(path)


def is_local(path: str) -> bool:
    """Check if a path stays within the directory it is evaluated in."""
    return _grammar.is_local(path)


def to_slash(path: str) -> str:
    """Replace native separators with forward slashes."""
    return _grammar.to_slash(path)


def from_slash(path: str) -> str:
    """Replace forward slashes with the native separator."""
    return _grammar.from_slash(path)


def split_list(path_list: str) -> List[str]:
    """Split a PATH-style list on the list separator."""
    return _grammar.split_list(path_list)


def to_absolute(path: str) -> str:
    """Resolve a path against the current working directory."""
    return _grammar.to_absolute(path)


def to_relative(path: str, base: str) -> str:
    """Return the relative path that leads from base to path."""
    return _grammar.to_relative(path, base)
