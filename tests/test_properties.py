"""Properties that hold for every input in both grammars."""

import random

import pytest

from path_vectors import POSIX_CLEAN, WINDOWS_CLEAN

SAMPLES = sorted({p for p, _ in POSIX_CLEAN + WINDOWS_CLEAN} | {
    "c:foo", "C:/", "\\\\host\\share\\dir\\", "\\\\?\\C:", "\\??\\C:\\x", "1:\\x",
    "\\\\.\\UNC\\h\\s", "\0", "a\0/b", "  ", "\\", "//./x", ":",
    "\\??\\a", "\\??\\", "\\\\.\\c:", "//?/c:", "\\\\.\\UNC",
    "ab:c//d", ":/\\x", "x/./y:z", "a:b/../c:d/./e", "./:",
})

# Pieces that exercise separators, dots, device prefixes and colons
ALPHABET = ["\\", "/", ".", "..", "?", "??", ":", "c:", "UNC", "a", "b"]


def random_paths(seed, count=400, max_pieces=8):
    rng = random.Random(seed)
    return ["".join(rng.choice(ALPHABET) for _ in range(rng.randint(1, max_pieces)))
            for _ in range(count)]


def dirname_walk_ends(grammar, path):
    current = grammar.clean(path)
    for _ in range(2 * len(current) + 8):
        parent = grammar.dirname(current)
        if parent == current:
            return True
        current = parent
    return False


@pytest.mark.parametrize("path", SAMPLES)
class TestProperties:
    def test_clean_is_idempotent(self, grammar, path):
        once = grammar.clean(path)
        assert grammar.clean(once) == once

    def test_round_trip(self, grammar, path):
        if path:
            assert grammar.join(grammar.split(path)) == grammar.clean(path)

    def test_dirname_walk_ends(self, grammar, path):
        assert dirname_walk_ends(grammar, path)

    def test_relative_is_not_rooted(self, grammar, path):
        assert grammar.is_relative(path) == (not grammar.is_rooted(path))

    def test_absolute_implies_rooted(self, grammar, path):
        if grammar.is_absolute(path):
            assert grammar.is_rooted(path)

    def test_clean_preserves_absoluteness(self, grammar, path):
        if grammar.is_absolute(path):
            assert grammar.is_absolute(grammar.clean(path))

    def test_volume_within_path(self, grammar, path):
        assert 0 <= grammar.volume_name_len(path) <= len(path)

    def test_basename_has_no_separator(self, grammar, path):
        name = grammar.basename(path)
        assert not any(grammar.is_separator(c) for c in name)


@pytest.mark.parametrize("seed", [7, 1337, 20240229])
class TestRandomPaths:
    """The same properties over generated inputs."""

    def test_clean_is_idempotent(self, grammar, seed):
        failures = [p for p in random_paths(seed) if grammar.clean(grammar.clean(p)) != grammar.clean(p)]
        assert failures == []

    def test_round_trip(self, grammar, seed):
        failures = [p for p in random_paths(seed) if grammar.join(grammar.split(p)) != grammar.clean(p)]
        assert failures == []

    def test_dirname_walk_ends(self, grammar, seed):
        failures = [p for p in random_paths(seed) if not dirname_walk_ends(grammar, p)]
        assert failures == []
