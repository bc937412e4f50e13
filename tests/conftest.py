import pytest

from crosspath.grammars import create_grammar


POSIX_CWD = "/home/dev/project"
WINDOWS_CWD = "C:\\Users\\dev\\project"


@pytest.fixture
def posix():
    """POSIX grammar with a fixed working directory."""
    return create_grammar("posix", cwd=lambda: POSIX_CWD)


@pytest.fixture
def windows():
    """Windows grammar with a fixed working directory."""
    return create_grammar("windows", cwd=lambda: WINDOWS_CWD)


@pytest.fixture(params=["posix", "windows"])
def grammar(request):
    """Each grammar in turn, for properties that hold for both."""
    cwd = POSIX_CWD if request.param == "posix" else WINDOWS_CWD
    return create_grammar(request.param, cwd=lambda: cwd)
