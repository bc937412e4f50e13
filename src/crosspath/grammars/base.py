"""
Base path grammar interface.

This module defines the abstract interface that every path grammar
implements, together with the lexical algorithms shared by all of them:
the clean engine, decomposition (dirname, basename, split), composition
(join) and the conversions relative to the current working directory.

Grammars only differ in a handful of primitives (which characters are
separators, how long the volume prefix is, what counts as rooted or
absolute) plus a few hooks for Windows-specific guards.
"""

import logging
import os
from abc import ABC, abstractmethod
from typing import Callable, List, Optional, Sequence

from ..core.models import CURRENT_DIR, PARENT_DIR, GrammarKind

logger = logging.getLogger(__name__)


class PathGrammar(ABC):
    """
    Abstract base class for path grammars.

    Concrete grammars (POSIX, Windows) provide the separator constants and
    the structural primitives; everything else is expressed in terms of
    them. Instances hold no mutable state and are safe to share between
    threads.
    """

    kind: GrammarKind
    SEPARATOR: str
    ALT_SEPARATOR: str = ""
    LIST_SEPARATOR: str

    def __init__(self, cwd: Optional[Callable[[], str]] = None):
        """
        Initialize grammar.

        Args:
            cwd: Callable returning the current working directory as an
                 absolute path in this grammar. Defaults to os.getcwd and is
                 only consulted by to_absolute and to_relative.
        """
        self._cwd = cwd or os.getcwd

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"

    @abstractmethod
    def is_separator(self, char: str) -> bool:
        """Check if a single character is a path separator."""
        pass

    @abstractmethod
    def volume_name_len(self, path: str) -> int:
        """
        Get the length of the leading volume prefix of a path.

        Args:
            path: Path in any separator form.

        Returns:
            Length of the volume prefix, 0 if the path has none.
        """
        pass

    @abstractmethod
    def is_rooted(self, path: str) -> bool:
        """Check if a path is anchored at a root or a drive."""
        pass

    @abstractmethod
    def is_absolute(self, path: str) -> bool:
        """Check if a path is absolute."""
        pass

    def is_relative(self, path: str) -> bool:
        """Check if a path is relative (not rooted)."""
        return not self.is_rooted(path)

    def volume_name(self, path: str) -> str:
        """Return the leading volume prefix of a path ("" when there is none)."""
        return path[:self.volume_name_len(path)]

    def to_slash(self, path: str) -> str:
        """Replace every native separator with a forward slash."""
        if self.SEPARATOR == "/":
            return path
        return path.replace(self.SEPARATOR, "/")

    def from_slash(self, path: str) -> str:
        """Replace every forward slash with the native separator."""
        if self.SEPARATOR == "/":
            return path
        return path.replace("/", self.SEPARATOR)

    # Clean engine

    def clean(self, path: str) -> str:
        """
        Return the shortest lexically equivalent form of a path.

        Runs of separators collapse into one, "." segments are dropped and
        ".." segments remove the preceding name. A ".." that has nothing to
        remove is dropped at a root and kept in a relative path. The result
        ends with a separator only when it denotes a root, and an empty
        result becomes ".".

        Args:
            path: Path in any separator form.

        Returns:
            Cleaned path using native separators.
        """
        path = self.from_slash(path)
        vol_len = self.volume_name_len(path)
        volume, rest = path[:vol_len], path[vol_len:]

        if not rest:
            if vol_len == 2:
                # "c:" is the current directory of drive c
                return path + CURRENT_DIR
            # Share and device volumes stand on their own
            return path or CURRENT_DIR

        sep = self.SEPARATOR
        rooted = rest[0] == sep
        n = len(rest)
        out: List[str] = []
        # Output lengths at which each emitted name began; ".." truncates
        # back to the most recent one.
        marks: List[int] = []
        r = 0
        if rooted:
            out.append(sep)
            r = 1

        while r < n:
            if rest[r] == sep:
                r += 1
            elif rest[r] == '.' and (r + 1 == n or rest[r + 1] == sep):
                r += 1
            elif rest[r] == '.' and rest[r + 1] == '.' and (r + 2 == n or rest[r + 2] == sep):
                r += 2
                if marks:
                    del out[marks.pop():]
                elif not rooted:
                    if out:
                        out.append(sep)
                    out.extend(PARENT_DIR)
            else:
                marks.append(len(out))
                if len(out) != (1 if rooted else 0):
                    out.append(sep)
                start = r
                while r < n and rest[r] != sep:
                    r += 1
                out.extend(rest[start:r])

        cleaned = "".join(out) or CURRENT_DIR
        return volume + self._post_clean(cleaned, rest, vol_len)

    def _post_clean(self, cleaned: str, original: str, vol_len: int) -> str:
        """
        Hook for grammar-specific fixups of a cleaned path.

        Args:
            cleaned: Cleaned text following the volume prefix.
            original: Native-separator input text following the volume prefix.
            vol_len: Length of the volume prefix.

        Returns:
            The (possibly prefixed) cleaned text.
        """
        return cleaned

    # Decomposition

    def _trim_trailing_separators(self, path: str, vol_len: int) -> int:
        end = len(path)
        while end > vol_len and self.is_separator(path[end - 1]):
            end -= 1
        return end

    def _last_separator(self, path: str, end: int, vol_len: int) -> int:
        i = end - 1
        while i >= vol_len and not self.is_separator(path[i]):
            i -= 1
        return i

    def dirname(self, path: str) -> str:
        """
        Return all but the last element of a path.

        Trailing separators are ignored. A root (or a bare volume) is its
        own dirname, and a single relative name yields ".".

        Args:
            path: Path in any separator form.

        Returns:
            Cleaned parent path.
        """
        vol_len = self.volume_name_len(path)
        end = self._trim_trailing_separators(path, vol_len)
        if end == vol_len:
            return self.clean(path)

        i = self._last_separator(path, end, vol_len)
        if i < vol_len:
            return self.clean(path[:vol_len] + CURRENT_DIR)
        if i == vol_len:
            return self.clean(path[:vol_len + 1])
        return self.clean(path[:i])

    def basename(self, path: str) -> str:
        """
        Return the last element of a path.

        Trailing separators are ignored. Unlike os.path conventions, a root,
        a bare volume or the empty path yield "" rather than "." or "/".

        Args:
            path: Path in any separator form.

        Returns:
            Last name in the path, or "" when there is none.
        """
        vol_len = self.volume_name_len(path)
        end = self._trim_trailing_separators(path, vol_len)
        i = self._last_separator(path, end, vol_len)
        return path[i + 1:end]

    def split(self, path: str) -> List[str]:
        """
        Split a path into its components.

        The first component is the volume prefix (followed by a separator
        when the path continues with one) or a lone separator for a rooted
        path without a volume. The remaining components are the non-empty
        names between separators; "." and ".." are kept as they appear.

        Args:
            path: Path in any separator form.

        Returns:
            List of components; join() of it equals clean(path).
        """
        vol_len = self.volume_name_len(path)
        rest = self.from_slash(path[vol_len:])
        rooted = rest.startswith(self.SEPARATOR)

        components = []
        if vol_len:
            root = self.from_slash(path[:vol_len])
            components.append(root + self.SEPARATOR if rooted else root)
        elif rooted:
            components.append(self.SEPARATOR)

        components.extend(name for name in rest.split(self.SEPARATOR) if name)
        return components

    def extension(self, path: str) -> str:
        """
        Return the file name extension of a path.

        Args:
            path: Path in any separator form.

        Returns:
            Suffix starting at the final dot of the last element, or "".
        """
        for i in range(len(path) - 1, -1, -1):
            if self.is_separator(path[i]):
                break
            if path[i] == '.':
                return path[i:]
        return ""

    def split_list(self, path_list: str) -> List[str]:
        """Split a PATH-style list on the grammar's list separator."""
        if not path_list:
            return []
        return path_list.split(self.LIST_SEPARATOR)

    # Composition

    def _is_drive_prefix(self, text: str) -> bool:
        """Check if text is a bare drive prefix that must stay drive-relative."""
        return False

    def _join_guard(self, joined: str, segment: str) -> str:
        """Text to insert between a lone root and the next segment."""
        return ""

    def join(self, segments: Sequence[str]) -> str:
        """
        Join path segments into a single cleaned path.

        Empty segments are ignored. A separator is inserted between segments
        unless the text so far already ends with one (in which case leading
        separators of the next segment are dropped) or is a bare drive
        prefix such as "c:".

        Args:
            segments: Path segments in any separator form.

        Returns:
            Cleaned joined path, or "" if every segment is empty.
        """
        separators = self.SEPARATOR + self.ALT_SEPARATOR
        joined = ""
        for segment in segments:
            if not segment:
                continue
            if not joined:
                joined = segment
                continue

            if self.is_separator(joined[-1]):
                segment = segment.lstrip(separators)
                if not segment:
                    continue
                joined += self._join_guard(joined, segment)
            elif not self._is_drive_prefix(joined):
                joined += self.SEPARATOR
            joined += segment

        if not joined:
            return ""
        return self.clean(joined)

    # Working-directory conversions

    def _current_dir(self) -> str:
        cwd = self._cwd()
        logger.debug(f"Resolving against working directory {cwd!r} ({self.kind.value})")
        return cwd

    def to_absolute(self, path: str) -> str:
        """
        Return an absolute form of a path.

        Args:
            path: Path in any separator form.

        Returns:
            clean(path) if it is already absolute, otherwise the path
            resolved against the current working directory.
        """
        if self.is_absolute(path):
            return self.clean(path)
        return self.join([self._current_dir(), path])

    def _same_volume(self, path: str, other: str) -> bool:
        return True

    def _same_name(self, name: str, other: str) -> bool:
        return name == other

    def to_relative(self, path: str, base: str) -> str:
        """
        Return a relative path that leads from base to path.

        Both paths are made absolute first. When they live on different
        volumes no relative path exists and the absolute path is returned.

        Args:
            path: Target path.
            base: Directory the result is relative to.

        Returns:
            Relative path such that join([base, result]) == clean(path).
        """
        target = self.to_absolute(path)
        origin = self.to_absolute(base)
        if not self._same_volume(target, origin):
            logger.debug(f"No relative path from {origin!r} to {target!r}: volumes differ")
            return target

        target_parts = self.split(target)
        origin_parts = self.split(origin)
        common = 0
        for name, other in zip(target_parts, origin_parts):
            if not self._same_name(name, other):
                break
            common += 1

        parts = [PARENT_DIR] * (len(origin_parts) - common) + target_parts[common:]
        if not parts:
            return CURRENT_DIR
        if ':' in parts[0]:
            # keep "a:b" from being read as a drive
            parts.insert(0, CURRENT_DIR)
        return self.join(parts)

    # Locality

    def _is_reserved_name(self, name: str) -> bool:
        return False

    def is_local(self, path: str) -> bool:
        """
        Check if a path is lexically local.

        A local path is non-empty, not rooted, names no reserved device and
        does not escape its starting directory through "..".

        Args:
            path: Path in any separator form.

        Returns:
            True if the path stays within the directory it is evaluated in.
        """
        if not path or self.is_rooted(path):
            return False

        names = self.from_slash(path).split(self.SEPARATOR)
        if any(self._is_reserved_name(name) for name in names):
            return False
        if CURRENT_DIR in names or PARENT_DIR in names:
            path = self.clean(path)
        else:
            path = self.from_slash(path)
        return path != PARENT_DIR and not path.startswith(PARENT_DIR + self.SEPARATOR)
