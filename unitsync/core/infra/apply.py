"""
Apply Engine: ejecuta un plan unit por unit.

Para cada cambio: escribe el contenido, recarga el gestor, reinicia la unit
y registra la nueva huella en el estado en memoria. Cualquier fallo corta el
resto del plan; lo ya aplicado queda aplicado (sin rollback). El estado NO
se guarda aquí: quien llama lo persiste una vez, al final.
"""

import logging
from pathlib import Path
from typing import Callable, Iterable, List, Optional

from unitsync.core.infra.contracts import ServiceManager
from unitsync.core.project.models import ProposedChange
from unitsync.core.runtime.state import StateFile
from unitsync.core.tools import write_text


logger = logging.getLogger(__name__)


def apply_change(
    change: ProposedChange,
    state: StateFile,
    units_dir: Path,
    manager: ServiceManager,
) -> None:
    unit_path = Path(units_dir) / change.unit

    write_text(unit_path, change.new_content)
    logger.info("Escrita %s", unit_path)

    # el gestor debe releer la definición antes del restart
    manager.reload()
    manager.restart(change.unit)

    state.record(change.unit, change.new_content)


def apply_plan(
    plan: Iterable[ProposedChange],
    state: StateFile,
    units_dir: Path,
    manager: ServiceManager,
    on_change: Optional[Callable[[ProposedChange], None]] = None,
) -> List[str]:
    """
    Aplica el plan en orden. Devuelve las units aplicadas.

    on_change se invoca antes de aplicar cada cambio (progreso en la CLI).
    """
    applied: List[str] = []
    for change in plan:
        if on_change:
            on_change(change)
        apply_change(change, state, units_dir, manager)
        applied.append(change.unit)
    return applied
