"""Tests for dirname, basename, split and extension."""

import pytest


class TestDirname:
    """Parent directory of a path."""

    @pytest.mark.parametrize("path, expected", [
        ("", "."),
        (".", "."),
        ("..", "."),
        ("/", "/"),
        ("////", "/"),
        ("foo", "."),
        ("foo/", "."),
        ("/foo", "/"),
        ("//foo", "/"),
        ("/foo/bar", "/foo"),
        ("/foo/bar/", "/foo"),
        ("/foo/bar//", "/foo"),
        ("foo/bar/baz", "foo/bar"),
        ("a/b/../c", "a"),
        ("./a", "."),
        ("../a", ".."),
        ("x/./y", "x"),
    ])
    def test_posix(self, posix, path, expected):
        assert posix.dirname(path) == expected

    @pytest.mark.parametrize("path, expected", [
        ("", "."),
        ("c:", "c:."),
        ("c:\\", "c:\\"),
        ("c:/", "c:\\"),
        ("c:/foo", "c:\\"),
        ("c:\\foo\\bar", "c:\\foo"),
        ("c:\\foo\\bar\\", "c:\\foo"),
        ("c:foo", "c:."),
        ("c:foo\\bar", "c:foo"),
        ("\\foo", "\\"),
        ("/foo/bar", "\\foo"),
        ("a\\b", "a"),
        ("a/b\\c", "a\\b"),
        ("\\\\host\\share", "\\\\host\\share"),
        ("\\\\host\\share\\", "\\\\host\\share\\"),
        ("\\\\host\\share\\a", "\\\\host\\share\\"),
        ("\\\\host\\share\\a\\b", "\\\\host\\share\\a"),
        ("//host/share/a/b", "\\\\host\\share\\a"),
        ("\\\\?\\C:\\x", "\\\\?\\C:\\"),
        ("\\\\.\\UNC\\host\\share\\x\\y", "\\\\.\\UNC\\host\\share\\x"),
    ])
    def test_windows(self, windows, path, expected):
        assert windows.dirname(path) == expected

    @pytest.mark.parametrize("path", [
        "/a/b/c/d", "a/b/../../c", "../../x", "c:\\a\\b", "c:a\\b", "\\\\h\\s\\a\\b", "//./UNC/h/s/x",
        "", "\\\\?\\C:\\a", "///abc/def",
        "\\??\\a", "\\??\\c:\\x", "\\\\.\\x", "a/../ab:c/d",
    ])
    def test_walk_reaches_fixed_point(self, grammar, path):
        current = grammar.clean(path)
        for _ in range(64):
            parent = grammar.dirname(current)
            if parent == current:
                break
            current = parent
        else:
            pytest.fail(f"dirname walk from {path!r} did not terminate")


class TestBasename:
    """Last element of a path."""

    @pytest.mark.parametrize("path, expected", [
        ("", ""),
        ("/", ""),
        ("///", ""),
        (".", "."),
        ("..", ".."),
        ("foo", "foo"),
        ("/foo/bar", "bar"),
        ("/foo/bar/", "bar"),
        ("/foo/bar//", "bar"),
        ("a/..", ".."),
        ("a\\b", "a\\b"),
    ])
    def test_posix(self, posix, path, expected):
        assert posix.basename(path) == expected

    @pytest.mark.parametrize("path, expected", [
        ("", ""),
        ("\\", ""),
        ("c:", ""),
        ("c:\\", ""),
        ("c:foo", "foo"),
        ("c:\\foo\\bar.txt", "bar.txt"),
        ("a/b\\c", "c"),
        ("a/b\\c\\", "c"),
        ("//host/share/", ""),
        ("\\\\host\\share", ""),
        ("\\\\host\\share\\x", "x"),
        ("\\\\?\\C:\\", ""),
    ])
    def test_windows(self, windows, path, expected):
        assert windows.basename(path) == expected


class TestSplit:
    """Decomposition into components."""

    @pytest.mark.parametrize("path, expected", [
        ("", []),
        ("/", ["/"]),
        ("//", ["/"]),
        ("/usr/local/bin", ["/", "usr", "local", "bin"]),
        ("a//b/", ["a", "b"]),
        ("./a/../b", [".", "a", "..", "b"]),
        ("a\\b", ["a\\b"]),
    ])
    def test_posix(self, posix, path, expected):
        assert posix.split(path) == expected

    @pytest.mark.parametrize("path, expected", [
        ("", []),
        ("c:", ["c:"]),
        ("c:\\", ["c:\\"]),
        ("c:/foo/bar", ["c:\\", "foo", "bar"]),
        ("c:foo", ["c:", "foo"]),
        ("\\a/b", ["\\", "a", "b"]),
        ("a\\b", ["a", "b"]),
        ("\\\\host\\share", ["\\\\host\\share"]),
        ("//host/share/x/y", ["\\\\host\\share\\", "x", "y"]),
        ("\\\\?\\C:\\a", ["\\\\?\\C:\\", "a"]),
        ("///abc", ["\\", "abc"]),
        ("ab:c//d", [".", "ab:c", "d"]),
        ("./ab:c//d", [".", "ab:c", "d"]),
        ("ab:c\\d", ["ab:c", "d"]),
        ("\\??\\c:", ["\\??\\c:"]),
        ("///??a", ["\\", ".", "??a"]),
        ("\\??a\\b", ["\\", "??a", "b"]),
    ])
    def test_windows(self, windows, path, expected):
        assert windows.split(path) == expected


class TestExtension:
    """File name extensions."""

    @pytest.mark.parametrize("path, expected", [
        ("", ""),
        ("file.go", ".go"),
        ("a/b.txt", ".txt"),
        ("a.b/c", ""),
        ("file.tar.gz", ".gz"),
        (".bashrc", ".bashrc"),
        ("a.b\\c", ".b\\c"),
    ])
    def test_posix(self, posix, path, expected):
        assert posix.extension(path) == expected

    def test_windows_stops_at_either_separator(self, windows):
        assert windows.extension("a.b\\c") == ""
        assert windows.extension("a.b/c") == ""
        assert windows.extension("c:\\dir\\file.exe") == ".exe"
