from pathlib import Path

import pytest

from unitsync.core.errors import ServiceManagerError, StateOutOfSyncError
from unitsync.core.hashing import fingerprint
from unitsync.core.project.renderer import render_template
from unitsync.core.project.sync import CONFIRM_PROMPT, SyncOutcome, run_sync
from unitsync.core.runtime.state import StateFile

from conftest import RecordingManager, StaticConfirmer, declaration


def _rendered(templates_dir: Path) -> str:
    return render_template(templates_dir, "t1", {"binary": "postgres", "port": "5432"})


def test_scenario_a_create_from_scratch(templates_dir, units_dir, state_path, manager):
    confirmer = StaticConfirmer(True)
    previews = []
    result = run_sync(
        [declaration()], templates_dir, state_path, units_dir,
        manager=manager, confirmer=confirmer, on_plan=previews.append,
    )

    rendered = _rendered(templates_dir)
    assert result.outcome == SyncOutcome.APPLIED
    assert [c.unit for c in result.plan] == ["db.service"]
    assert result.plan[0].old_content is None
    assert result.applied == ["db.service"]
    assert (units_dir / "db.service").read_text() == rendered
    assert StateFile.load_or_create(state_path).services == {"db.service": fingerprint(rendered)}
    assert confirmer.prompts == [CONFIRM_PROMPT]
    assert len(previews) == 1


def test_scenario_b_nothing_to_do(templates_dir, units_dir, state_path, manager):
    rendered = _rendered(templates_dir)
    (units_dir / "db.service").write_text(rendered)
    StateFile({"db.service": fingerprint(rendered)}).save(state_path)
    before = state_path.read_bytes()
    confirmer = StaticConfirmer(True)

    result = run_sync([declaration()], templates_dir, state_path, units_dir, manager=manager, confirmer=confirmer)

    assert result.outcome == SyncOutcome.NO_CHANGES
    assert manager.calls == []
    assert confirmer.prompts == []
    assert state_path.read_bytes() == before


def test_scenario_c_never_applied_unit_is_overwritten(templates_dir, units_dir, state_path, manager):
    (units_dir / "db.service").write_text("X\n")
    result = run_sync([declaration()], templates_dir, state_path, units_dir, manager=manager, confirmer=None)

    assert result.outcome == SyncOutcome.APPLIED
    assert result.plan[0].drift is False
    assert (units_dir / "db.service").read_text() == _rendered(templates_dir)


def test_scenario_d_drift_blocks_without_force(templates_dir, units_dir, state_path, manager):
    (units_dir / "db.service").write_text("X\n")
    StateFile({"db.service": fingerprint("X0\n")}).save(state_path)

    with pytest.raises(StateOutOfSyncError):
        run_sync([declaration()], templates_dir, state_path, units_dir, manager=manager, confirmer=None)

    assert (units_dir / "db.service").read_text() == "X\n"
    assert manager.calls == []


def test_scenario_d_force_overwrites(templates_dir, units_dir, state_path, manager):
    (units_dir / "db.service").write_text("X\n")
    StateFile({"db.service": fingerprint("X0\n")}).save(state_path)

    result = run_sync([declaration()], templates_dir, state_path, units_dir, manager=manager, confirmer=None, force=True)

    rendered = _rendered(templates_dir)
    assert result.outcome == SyncOutcome.APPLIED
    assert (units_dir / "db.service").read_text() == rendered
    assert StateFile.load_or_create(state_path).get("db.service") == fingerprint(rendered)


def test_declined_confirmation_has_no_side_effects(templates_dir, units_dir, state_path, manager):
    result = run_sync(
        [declaration()], templates_dir, state_path, units_dir,
        manager=manager, confirmer=StaticConfirmer(False),
    )

    assert result.outcome == SyncOutcome.CANCELLED
    assert not (units_dir / "db.service").exists()
    assert not state_path.exists()
    assert manager.calls == []


def test_state_not_saved_when_apply_fails(templates_dir, units_dir, state_path):
    manager = RecordingManager(fail_restart_on="b.service")
    with pytest.raises(ServiceManagerError):
        run_sync(
            [declaration("a.service"), declaration("b.service")],
            templates_dir, state_path, units_dir, manager=manager, confirmer=None,
        )
    assert (units_dir / "a.service").exists()
    assert not state_path.exists()


def test_second_run_is_idempotent(templates_dir, units_dir, state_path, manager):
    run_sync([declaration()], templates_dir, state_path, units_dir, manager=manager, confirmer=None)
    manager.calls.clear()

    result = run_sync([declaration()], templates_dir, state_path, units_dir, manager=manager, confirmer=None)
    assert result.outcome == SyncOutcome.NO_CHANGES
    assert manager.calls == []


def test_corrupt_state_file_does_not_block(templates_dir, units_dir, state_path, manager):
    state_path.write_text("services: [this is not: valid")
    result = run_sync([declaration()], templates_dir, state_path, units_dir, manager=manager, confirmer=None)
    assert result.outcome == SyncOutcome.APPLIED
    assert "db.service" in StateFile.load_or_create(state_path).services
