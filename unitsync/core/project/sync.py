"""
Orquestación de un run completo de convergencia.

estado → plan → vista previa → confirmación → apply → guardar estado.

La vista previa y la confirmación son inyectadas (callbacks/capacidades),
de modo que este flujo nunca bloquea sobre la terminal por sí mismo.
"""

import logging
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Callable, List, Optional, Sequence

from unitsync.core.infra.apply import apply_plan
from unitsync.core.infra.contracts import Confirmer, ServiceManager
from unitsync.core.project.models import ProposedChange, ServiceDeclaration
from unitsync.core.project.planner import plan_changes
from unitsync.core.runtime.state import StateFile


logger = logging.getLogger(__name__)

CONFIRM_PROMPT = "¿Aplicar estos cambios?"


class SyncOutcome(str, Enum):
    NO_CHANGES = "no-changes"
    APPLIED = "applied"
    CANCELLED = "cancelled"


@dataclass
class SyncResult:
    outcome: SyncOutcome
    plan: List[ProposedChange] = field(default_factory=list)
    applied: List[str] = field(default_factory=list)


def run_sync(
    declarations: Sequence[ServiceDeclaration],
    template_dir: Path,
    state_path: Path,
    units_dir: Path,
    manager: ServiceManager,
    confirmer: Optional[Confirmer],
    force: bool = False,
    on_plan: Optional[Callable[[List[ProposedChange]], None]] = None,
    on_change: Optional[Callable[[ProposedChange], None]] = None,
) -> SyncResult:
    """
    Ejecuta un run. confirmer=None equivale a confirmar automáticamente (--yes).

    El estado se guarda una única vez, solo si todos los cambios se aplicaron.
    Cualquier UnitSyncError se propaga sin modificar.
    """
    state = StateFile.load_or_create(state_path)
    plan = plan_changes(declarations, template_dir, state, units_dir, force=force)

    if not plan:
        logger.info("Sin cambios para %d servicio(s)", len(declarations))
        return SyncResult(SyncOutcome.NO_CHANGES)

    if on_plan:
        on_plan(plan)

    if confirmer is not None and not confirmer.confirm(CONFIRM_PROMPT):
        logger.info("Operación cancelada por el operador")
        return SyncResult(SyncOutcome.CANCELLED, plan=plan)

    applied = apply_plan(plan, state, units_dir, manager, on_change=on_change)
    state.save(state_path)
    return SyncResult(SyncOutcome.APPLIED, plan=plan, applied=applied)
