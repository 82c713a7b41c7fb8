"""
Detección de drift (diferencias entre estado deseado, real y registrado).

Para una declaración: renderiza el contenido deseado, lee la unit en vivo
(si existe) y la compara contra la huella guardada. No decide si hace falta
actualizar; eso depende también del contenido renderizado y lo hace el planner.
"""

import logging
from pathlib import Path

from unitsync.core.project.models import ProposedChange, ServiceDeclaration
from unitsync.core.project.renderer import render_template
from unitsync.core.runtime.state import StateFile
from unitsync.core.tools import read_text


logger = logging.getLogger(__name__)


def analyze(
    declaration: ServiceDeclaration,
    template_dir: Path,
    state: StateFile,
    units_dir: Path,
) -> ProposedChange:
    """
    Analiza una declaración.

    Los errores de plantilla se propagan sin tocar: una plantilla rota es un
    error de configuración y aborta el run completo.
    """
    new_content = render_template(template_dir, declaration.template, declaration.variables)

    unit_path = Path(units_dir) / declaration.unit
    if not unit_path.exists():
        logger.debug("%s no existe en %s", declaration.unit, units_dir)
        return ProposedChange(unit=declaration.unit, new_content=new_content)

    old_content = read_text(unit_path)
    drift = not state.matches(declaration.unit, old_content)
    if drift:
        logger.info("%s modificada fuera de unitsync", declaration.unit)

    return ProposedChange(
        unit=declaration.unit,
        new_content=new_content,
        old_content=old_content,
        drift=drift,
    )
