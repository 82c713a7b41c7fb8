from pathlib import Path

from unitsync.core.hashing import fingerprint
from unitsync.core.project.detector import analyze
from unitsync.core.project.models import ChangeKind
from unitsync.core.project.renderer import render_template
from unitsync.core.runtime.state import StateFile

from conftest import declaration


def _rendered(templates_dir: Path) -> str:
    return render_template(templates_dir, "t1", {"binary": "postgres", "port": "5432"})


def test_missing_unit_is_create_without_drift(templates_dir: Path, units_dir: Path):
    # incluso con una huella guardada, una unit inexistente nunca tiene drift
    state = StateFile({"db.service": fingerprint("something else")})
    change = analyze(declaration(), templates_dir, state, units_dir)

    assert change.old_content is None
    assert change.drift is False
    assert change.new_content == _rendered(templates_dir)
    assert change.kind == ChangeKind.CREATE


def test_live_unit_without_state_entry_is_not_drift(templates_dir: Path, units_dir: Path):
    (units_dir / "db.service").write_text("X\n")
    change = analyze(declaration(), templates_dir, StateFile(), units_dir)

    assert change.old_content == "X\n"
    assert change.drift is False
    assert change.kind == ChangeKind.UPDATE


def test_hand_edited_unit_is_drift(templates_dir: Path, units_dir: Path):
    (units_dir / "db.service").write_text("X\n")
    state = StateFile({"db.service": fingerprint("X0\n")})
    change = analyze(declaration(), templates_dir, state, units_dir)

    assert change.drift is True
    assert change.kind == ChangeKind.UPDATE_WITH_DRIFT


def test_up_to_date_unit(templates_dir: Path, units_dir: Path):
    rendered = _rendered(templates_dir)
    (units_dir / "db.service").write_text(rendered)
    state = StateFile({"db.service": fingerprint(rendered)})
    change = analyze(declaration(), templates_dir, state, units_dir)

    assert change.needs_update is False
    assert change.drift is False
    assert change.kind == ChangeKind.UP_TO_DATE


def test_live_content_read_exactly(templates_dir: Path, units_dir: Path):
    # CRLF no se normaliza: es contenido distinto
    rendered = _rendered(templates_dir)
    (units_dir / "db.service").write_bytes(rendered.replace("\n", "\r\n").encode())
    change = analyze(declaration(), templates_dir, StateFile(), units_dir)

    assert change.old_content == rendered.replace("\n", "\r\n")
    assert change.needs_update is True
