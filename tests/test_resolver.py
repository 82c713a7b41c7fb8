from pathlib import Path

import pytest

from unitsync.core.runtime.resolver import DEFAULT_UNITS_DIR, units_dir


def test_explicit_wins(monkeypatch: pytest.MonkeyPatch, tmp_path: Path):
    monkeypatch.setenv("UNITSYNC_UNITS_DIR", "/from/env")
    assert units_dir(tmp_path) == tmp_path


def test_env_then_default(monkeypatch: pytest.MonkeyPatch):
    monkeypatch.setenv("UNITSYNC_UNITS_DIR", "/from/env")
    assert units_dir() == Path("/from/env")
    monkeypatch.delenv("UNITSYNC_UNITS_DIR")
    assert units_dir() == DEFAULT_UNITS_DIR == Path("/etc/systemd/system")
