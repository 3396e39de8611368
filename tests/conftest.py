import os

import pytest

from securepass import PasswordOptions, SeededRandomSource


class ScriptedSource:
    """Random source replaying a fixed list of draws, failing when exhausted."""

    def __init__(self, *values: int) -> None:
        self._values = list(values)

    def randbelow(self, upper: int) -> int:
        value = self._values.pop(0)
        assert 0 <= value < upper, (value, upper)
        return value

    @property
    def remaining(self) -> int:
        return len(self._values)


@pytest.fixture
def scripted():
    return ScriptedSource


@pytest.fixture
def seeded_source():
    return SeededRandomSource(20240501)


@pytest.fixture
def default_options():
    return PasswordOptions()


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch):
    """Keep SECUREPASS_* variables of the host out of the tests."""
    for name in list(os.environ):
        if name.startswith("SECUREPASS"):
            monkeypatch.delenv(name)
