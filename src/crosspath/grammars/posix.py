"""POSIX path grammar: a single "/" separator and no volumes."""

from ..core.models import GrammarKind
from .base import PathGrammar


class PosixGrammar(PathGrammar):
    """Path rules used by Linux, macOS and other POSIX systems."""

    kind = GrammarKind.POSIX
    SEPARATOR = "/"
    LIST_SEPARATOR = ":"

    def is_separator(self, char: str) -> bool:
        return char == "/"

    def volume_name_len(self, path: str) -> int:
        return 0

    def is_rooted(self, path: str) -> bool:
        return path.startswith("/")

    def is_absolute(self, path: str) -> bool:
        return path.startswith("/")
