"""Shared pytest fixtures for configuration-focused tests."""

from __future__ import annotations

from pathlib import Path

import pytest


@pytest.fixture
def repo_root(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Force the portable repo root to a temporary directory for isolation."""

    _ = (tmp_path / "pyproject.toml").write_text("[project]\nname='tmp'\n")

    import setlistfm.config.paths as paths

    def _fake_detect_repo_root(_start: Path | None = None) -> Path:
        return tmp_path

    monkeypatch.setattr(paths, "_detect_repo_root", _fake_detect_repo_root, raising=True)
    monkeypatch.delenv("SETLISTFM_CONFIG", raising=False)
    monkeypatch.delenv("SETLISTFM_API_KEY", raising=False)
    return tmp_path
