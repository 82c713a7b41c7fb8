"""
Resolución de rutas y parámetros de entorno.

- units_dir(): directorio donde viven las units instaladas (/etc/systemd/system).
- systemctl_timeout(): timeout en segundos para las llamadas a systemctl.

Orden de precedencia: opción explícita (CLI) → variable de entorno → default.
"""

import logging
import os
from pathlib import Path
from typing import Optional


logger = logging.getLogger(__name__)

# Ruta canónica de units administradas localmente
DEFAULT_UNITS_DIR = Path("/etc/systemd/system")
DEFAULT_SYSTEMCTL_TIMEOUT = 90.0

UNITS_DIR_ENV = "UNITSYNC_UNITS_DIR"
SYSTEMCTL_TIMEOUT_ENV = "UNITSYNC_SYSTEMCTL_TIMEOUT"


def units_dir(explicit: Optional[Path] = None) -> Path:
    """Directorio de units en vivo."""
    if explicit is not None:
        return Path(explicit).expanduser()
    from_env = os.environ.get(UNITS_DIR_ENV, "").strip()
    if from_env:
        return Path(from_env).expanduser()
    return DEFAULT_UNITS_DIR


def systemctl_timeout() -> float:
    """Timeout para systemctl; valores inválidos caen al default."""
    raw = os.environ.get(SYSTEMCTL_TIMEOUT_ENV, "").strip()
    if not raw:
        return DEFAULT_SYSTEMCTL_TIMEOUT
    try:
        value = float(raw)
    except ValueError:
        logger.warning("%s inválido (%r), usando %ss", SYSTEMCTL_TIMEOUT_ENV, raw, DEFAULT_SYSTEMCTL_TIMEOUT)
        return DEFAULT_SYSTEMCTL_TIMEOUT
    if value <= 0:
        logger.warning("%s debe ser positivo, usando %ss", SYSTEMCTL_TIMEOUT_ENV, DEFAULT_SYSTEMCTL_TIMEOUT)
        return DEFAULT_SYSTEMCTL_TIMEOUT
    return value
