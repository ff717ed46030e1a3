from __future__ import annotations

import os
from collections.abc import Iterable, Iterator

import pytest


class ScriptedSource:
    """Deterministic `RandomSource` replaying a fixed sequence of indices."""

    def __init__(self, indices: Iterable[int]) -> None:
        self._indices: Iterator[int] = iter(indices)
        self.calls: list[int] = []

    def randbelow(self, upper: int) -> int:
        self.calls.append(upper)
        value = next(self._indices)
        assert 0 <= value < upper
        return value


@pytest.fixture
def scripted_source():
    return ScriptedSource


@pytest.fixture(autouse=True)
def _isolated_settings(monkeypatch: pytest.MonkeyPatch, tmp_path) -> None:
    """Keep the user's real PASSGEN_* environment and .env files out of tests."""

    for key in list(os.environ):
        if key.upper().startswith("PASSGEN_"):
            monkeypatch.delenv(key, raising=False)
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path / "xdg"))
    monkeypatch.chdir(tmp_path)
