"""Lexical POSIX and Windows path manipulation."""

from .core.models import Config, GrammarKind
from .grammars import PathGrammar, PosixGrammar, WindowsGrammar, posix, windows, create_grammar, get_grammar
from .filepath import (
    SEPARATOR,
    LIST_SEPARATOR,
    current_grammar,
    set_grammar,
    clean,
    join,
    split,
    dirname,
    basename,
    extension,
    volume_name,
    is_absolute,
    is_rooted,
    is_relative,
    is_local,
    to_slash,
    from_slash,
    split_list,
    to_absolute,
    to_relative,
)

__version__ = "0.1.0"

__all__ = [
    "Config",
    "GrammarKind",
    "PathGrammar",
    "PosixGrammar",
    "WindowsGrammar",
    "posix",
    "windows",
    "create_grammar",
    "get_grammar",
    "SEPARATOR",
    "LIST_SEPARATOR",
    "current_grammar",
    "set_grammar",
    "clean",
    "join",
    "split",
    "dirname",
    "basename",
    "extension",
    "volume_name",
    "is_absolute",
    "is_rooted",
    "is_relative",
    "is_local",
    "to_slash",
    "from_slash",
    "split_list",
    "to_absolute",
    "to_relative",
]
