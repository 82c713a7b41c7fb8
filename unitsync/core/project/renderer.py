"""
Renderizado de plantillas de units (Jinja2).

Cada llamada crea su propio Environment: sin caché entre servicios, ya que
cada declaración puede usar una plantilla distinta. Las variables
indefinidas son error (StrictUndefined), nunca texto vacío.

La plantilla principal se lee de template_dir/template_name tal cual (la ruta
puede salir del directorio, p. ej. ../shared/base.service); los
{% include %} se resuelven dentro de template_dir.
"""

import logging
from pathlib import Path
from typing import Mapping

from jinja2 import Environment, FileSystemLoader, StrictUndefined, TemplateError

from unitsync.core.errors import TemplateNotFoundError, TemplateRenderError
from unitsync.core.tools import read_text


logger = logging.getLogger(__name__)

# Errores de Python dentro de expresiones ({{ 1 // 0 }}, tipos, índices)
_EXPRESSION_ERRORS = (ArithmeticError, TypeError, ValueError, LookupError)


def render_template(template_dir: Path, template_name: str, variables: Mapping[str, str]) -> str:
    """
    Renderiza template_dir/template_name con variables.

    Raises:
        TemplateNotFoundError: si la plantilla no existe (se verifica antes de parsear)
        UnitSyncIOError: si existe pero no se puede leer
        TemplateRenderError: sintaxis inválida, variable indefinida o error en render
    """
    template_dir = Path(template_dir)
    template_path = template_dir / template_name
    if not template_path.is_file():
        raise TemplateNotFoundError(template_path)
    source = read_text(template_path)

    env = Environment(
        loader=FileSystemLoader(str(template_dir)),
        undefined=StrictUndefined,
        keep_trailing_newline=True,
        autoescape=False,
    )
    try:
        template = env.from_string(source)
        rendered = template.render(dict(variables))
    except TemplateError as e:
        raise TemplateRenderError(template_name, str(e)) from e
    except _EXPRESSION_ERRORS as e:
        raise TemplateRenderError(template_name, f"{type(e).__name__}: {e}") from e

    logger.debug("Plantilla %s renderizada (%d bytes)", template_path, len(rendered))
    return rendered
