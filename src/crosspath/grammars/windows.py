"""
Windows path grammar.

Windows paths accept both "\\" and "/" as separators and may start with a
volume prefix:

    C:                  drive letter
    \\\\host\\share        UNC share
    \\\\.\\UNC\\host\\share  UNC share through the local device namespace
    \\\\.\\device          local device
    \\\\?\\C:  \\??\\C:      root local device

A path such as "C:foo" is rooted (it names a drive) but relative to the
current directory of that drive; only "C:\\foo" is absolute.
"""

import string
from typing import List

from ..core.models import CURRENT_DIR, GrammarKind
from .base import PathGrammar

UNC_DEVICE_PREFIX = "\\\\.\\UNC"
LOCAL_DEVICE_PREFIXES = ("\\\\.", "\\\\?", "\\??")

# Reserved DOS device names, matched case-insensitively
RESERVED_NAMES = frozenset(
    ["CON", "PRN", "AUX", "NUL", "CONIN$", "CONOUT$"]
    + [f"COM{i}" for i in range(1, 10)]
    + [f"LPT{i}" for i in range(1, 10)]
)

_ASCII_UPPER = str.maketrans(string.ascii_lowercase, string.ascii_uppercase)


def _fold(text: str) -> str:
    """Upper-case ASCII letters only."""
    return text.translate(_ASCII_UPPER)


def _is_letter(char: str) -> bool:
    return char in string.ascii_letters


def is_separator(char: str) -> bool:
    """Check if a character is a Windows path separator."""
    return char == "\\" or char == "/"


def _has_prefix_fold(path: str, prefix: str) -> bool:
    """
    Check if path starts with prefix as a whole path element.

    Letters compare case-insensitively and any separator in the prefix
    matches either separator. The prefix must be followed by a separator or
    the end of the path.
    """
    if len(path) < len(prefix):
        return False
    for char, expected in zip(path, prefix):
        if is_separator(expected):
            if not is_separator(char):
                return False
        elif _fold(char) != _fold(expected):
            return False
    return len(path) == len(prefix) or is_separator(path[len(prefix)])


def _unc_len(path: str, prefix_len: int) -> int:
    """Index of the separator closing the share name, or len(path)."""
    count = 0
    for i in range(prefix_len, len(path)):
        if is_separator(path[i]):
            count += 1
            if count == 2:
                return i
    return len(path)


def volume_name_len(path: str) -> int:
    """
    Get the length of the volume prefix of a Windows path.

    Args:
        path: Path using either separator.

    Returns:
        2 for a drive letter, the index just past the host and share for a
        UNC path, the index just past the device name for a local device
        path, otherwise 0.
    """
    if len(path) >= 2 and path[1] == ':' and _is_letter(path[0]):
        return 2
    if not path or not is_separator(path[0]):
        return 0
    if _has_prefix_fold(path, UNC_DEVICE_PREFIX):
        return _unc_len(path, len(UNC_DEVICE_PREFIX) + 1)
    if any(_has_prefix_fold(path, prefix) for prefix in LOCAL_DEVICE_PREFIXES):
        if len(path) == 3:
            return 3
        # The device name (e.g. "C:" in \\?\C:\) belongs to the volume
        for i in range(4, len(path)):
            if is_separator(path[i]):
                return i
        return len(path)
    if len(path) >= 3 and is_separator(path[1]) and not is_separator(path[2]):
        return _unc_len(path, 2)
    return 0


class WindowsGrammar(PathGrammar):
    """Path rules used by Windows, including drive letters and UNC shares."""

    kind = GrammarKind.WINDOWS
    SEPARATOR = "\\"
    ALT_SEPARATOR = "/"
    LIST_SEPARATOR = ";"

    def is_separator(self, char: str) -> bool:
        return is_separator(char)

    def volume_name_len(self, path: str) -> int:
        return volume_name_len(path)

    def _has_drive(self, path: str) -> bool:
        return len(path) >= 2 and path[1] == ':' and _is_letter(path[0])

    def is_rooted(self, path: str) -> bool:
        if not path:
            return False
        return is_separator(path[0]) or self._has_drive(path)

    def is_absolute(self, path: str) -> bool:
        if len(path) >= 3 and self._has_drive(path) and is_separator(path[2]):
            return True
        vol_len = volume_name_len(path)
        return 0 < vol_len < len(path) and is_separator(path[vol_len])

    def _post_clean(self, cleaned: str, original: str, vol_len: int) -> str:
        if vol_len or original.startswith(cleaned):
            return cleaned
        # A colon in the first element would read as a drive: a/../c: -> .\c:
        first = cleaned.split(self.SEPARATOR, 1)[0]
        if ':' in first:
            return CURRENT_DIR + self.SEPARATOR + cleaned
        # \a\..\??\c:\x must not turn into the root local device \??\c:\x
        if cleaned.startswith(self.SEPARATOR + "??"):
            return self.SEPARATOR + CURRENT_DIR + cleaned
        return cleaned

    def split(self, path: str) -> List[str]:
        components = super().split(path)
        if not components or volume_name_len(path):
            return components

        # Keep the "." that clean puts in front of a colon-bearing first
        # name (.\a:b) or a leading ?? (\.\??a) as its own component
        at = 1 if self.is_rooted(path) else 0
        guard = self.SEPARATOR * at + CURRENT_DIR + self.SEPARATOR
        has_dot = len(components) > at and components[at] == CURRENT_DIR
        if not has_dot and self.clean(path).startswith(guard):
            components.insert(at, CURRENT_DIR)
        return components

    def _is_drive_prefix(self, text: str) -> bool:
        return len(text) == 2 and self._has_drive(text)

    def _join_guard(self, joined: str, segment: str) -> str:
        if len(joined) == 1 and segment.startswith("??") and (len(segment) == 2 or is_separator(segment[2])):
            return CURRENT_DIR + self.SEPARATOR
        return ""

    def split_list(self, path_list: str) -> List[str]:
        """
        Split a PATH-style list on ";".

        Separators inside double quotes do not split, and the quotes are
        removed from every entry.
        """
        if not path_list:
            return []

        entries = []
        start = 0
        quoted = False
        for i, char in enumerate(path_list):
            if char == '"':
                quoted = not quoted
            elif char == self.LIST_SEPARATOR and not quoted:
                entries.append(path_list[start:i])
                start = i + 1
        entries.append(path_list[start:])
        return [entry.replace('"', '') for entry in entries]

    def to_absolute(self, path: str) -> str:
        if self.is_absolute(path):
            return self.clean(path)

        vol_len = volume_name_len(path)
        if vol_len > 2:
            # A bare share or device names its own root
            return self.clean(path + self.SEPARATOR)

        cwd = self._current_dir()
        if self._has_drive(path):
            drive, rest = path[:2], path[2:]
            if self._has_drive(cwd) and _fold(cwd[:2]) == _fold(drive):
                return self.join([cwd, rest])
            return self.clean(drive + self.SEPARATOR + rest)
        if self.is_rooted(path):
            return self.clean(self.volume_name(cwd) + path)
        return self.join([cwd, path])

    def _same_volume(self, path: str, other: str) -> bool:
        return _fold(self.from_slash(self.volume_name(path))) == _fold(self.from_slash(self.volume_name(other)))

    def _same_name(self, name: str, other: str) -> bool:
        return _fold(name) == _fold(other)

    def _is_reserved_name(self, name: str) -> bool:
        # Device names ignore anything after a dot or colon and trailing spaces
        base = name
        for i, char in enumerate(name):
            if char in '.:':
                base = name[:i]
                break
        return _fold(base.rstrip(' ')) in RESERVED_NAMES

    def is_local(self, path: str) -> bool:
        # Colons are only valid when marking a drive letter
        if ':' in path:
            return False
        return super().is_local(path)
