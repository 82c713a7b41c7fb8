"""
Planificación: genera el plan de cambios (qué aplicar) sin ejecutar.

El orden del plan es el orden de la configuración, y es también el orden
en que se aplica. El drift sin --force bloquea el plan completo, no solo
el servicio afectado.
"""

import logging
from pathlib import Path
from typing import Iterable, List

from unitsync.core.errors import StateOutOfSyncError
from unitsync.core.project.detector import analyze
from unitsync.core.project.models import ProposedChange, ServiceDeclaration
from unitsync.core.runtime.state import StateFile


logger = logging.getLogger(__name__)


def plan_changes(
    declarations: Iterable[ServiceDeclaration],
    template_dir: Path,
    state: StateFile,
    units_dir: Path,
    force: bool = False,
) -> List[ProposedChange]:
    """
    Devuelve los cambios necesarios, en orden de declaración.

    Raises:
        StateOutOfSyncError: una unit que necesita cambio tiene drift y force es False
        TemplateNotFoundError, TemplateRenderError, UnitSyncIOError: desde el análisis
    """
    plan: List[ProposedChange] = []
    for declaration in declarations:
        change = analyze(declaration, template_dir, state, units_dir)

        if not change.needs_update:
            logger.debug("%s al día", change.unit)
            continue

        if change.drift and not force:
            raise StateOutOfSyncError(change.unit)

        plan.append(change)

    return plan


def analyze_all(
    declarations: Iterable[ServiceDeclaration],
    template_dir: Path,
    state: StateFile,
    units_dir: Path,
) -> List[ProposedChange]:
    """Análisis de todas las declaraciones sin filtrar ni cortar por drift (para `status`)."""
    return [analyze(d, template_dir, state, units_dir) for d in declarations]
