"""
Loader de la configuración declarativa
Carga el YAML de entrada y lo convierte a modelos Pydantic
"""

import logging
from pathlib import Path

import yaml
from pydantic import ValidationError as PydanticValidationError

from unitsync.core.errors import ConfigError
from unitsync.core.project.models import ServicesConfig
from unitsync.core.tools import read_text


logger = logging.getLogger(__name__)


def load_config(path: Path) -> ServicesConfig:
    """
    Carga y valida el archivo de servicios.

    Raises:
        UnitSyncIOError: si el archivo no se puede leer
        ConfigError: si el YAML es inválido o no respeta el esquema
    """
    path = Path(path)
    content = read_text(path)

    try:
        data = yaml.safe_load(content)
    except yaml.YAMLError as e:
        raise ConfigError(path, str(e)) from e

    if not isinstance(data, dict):
        raise ConfigError(path, "se esperaba un mapeo con la clave 'services'")

    try:
        config = ServicesConfig.model_validate(data)
    except PydanticValidationError as e:
        raise ConfigError(path, str(e)) from e

    logger.debug("Configuración cargada de %s (%d servicios)", path, len(config.services))
    return config
