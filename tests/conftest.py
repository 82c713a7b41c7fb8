from __future__ import annotations

from pathlib import Path
from typing import List, Optional, Tuple

import pytest

from unitsync.core.errors import ServiceManagerError
from unitsync.core.project.models import ServiceDeclaration


UNIT_TEMPLATE = """[Unit]
Description={{ description | default('managed service') }}

[Service]
ExecStart=/usr/bin/{{ binary }} --port {{ port }}
Restart=always

[Install]
WantedBy=multi-user.target
"""


class RecordingManager:
    """Fake ServiceManager: registra llamadas en orden y puede fallar a demanda."""

    def __init__(self, *, fail_restart_on: Optional[str] = None, fail_reload: bool = False) -> None:
        self.calls: List[Tuple[str, ...]] = []
        self.fail_restart_on = fail_restart_on
        self.fail_reload = fail_reload

    def reload(self) -> None:
        self.calls.append(("reload",))
        if self.fail_reload:
            raise ServiceManagerError(["systemctl", "daemon-reload"], 1, "boom")

    def restart(self, unit: str) -> None:
        self.calls.append(("restart", unit))
        if unit == self.fail_restart_on:
            raise ServiceManagerError(["systemctl", "restart", unit], 5, "unit failed")


class StaticConfirmer:
    def __init__(self, answer: bool) -> None:
        self.answer = answer
        self.prompts: List[str] = []

    def confirm(self, prompt: str) -> bool:
        self.prompts.append(prompt)
        return self.answer


@pytest.fixture
def templates_dir(tmp_path: Path) -> Path:
    d = tmp_path / "templates"
    d.mkdir()
    (d / "t1").write_text(UNIT_TEMPLATE)
    return d


@pytest.fixture
def units_dir(tmp_path: Path) -> Path:
    d = tmp_path / "units"
    d.mkdir()
    return d


@pytest.fixture
def state_path(tmp_path: Path) -> Path:
    return tmp_path / "state.yaml"


@pytest.fixture
def manager() -> RecordingManager:
    return RecordingManager()


def declaration(unit: str = "db.service", template: str = "t1", **variables: str) -> ServiceDeclaration:
    if not variables:
        variables = {"binary": "postgres", "port": "5432"}
    return ServiceDeclaration(template=template, unit=unit, variables=variables)
