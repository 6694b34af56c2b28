"""Shared test fixtures for sibylline-tokens."""

from pathlib import Path

import pytest

from sibylline_tokens.helpers import PatternHelper, _REGISTRY


@pytest.fixture
def isolated_config(tmp_path, monkeypatch):
    """Point user and project config lookups at empty temp directories."""
    home = tmp_path / "home"
    project = tmp_path / "project"
    home.mkdir()
    project.mkdir()
    monkeypatch.setattr(Path, "home", lambda: home)
    monkeypatch.chdir(project)
    return home, project


@pytest.fixture
def temp_helpers():
    """Register ad-hoc pattern helpers for one test, then remove them."""
    added: list[str] = []

    def register(name: str, pattern: str, kind: str | None = None) -> PatternHelper:
        helper = PatternHelper(name=name, pattern=pattern, kind=kind)
        _REGISTRY[name] = helper
        added.append(name)
        return helper

    yield register

    for name in added:
        _REGISTRY.pop(name, None)
