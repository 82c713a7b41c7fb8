"""
State Store: memoria de lo último que unitsync escribió en cada unit.

Formato en disco (YAML):

    services:
      db.service: <sha256 hex>

Un archivo ausente, vacío o corrupto equivale a "no se sabe nada todavía":
nunca debe bloquear el análisis. Una unit sin entrada jamás fue aplicada
por esta herramienta, por lo que no se puede marcar como drift.
"""

import logging
from pathlib import Path
from typing import Dict, Optional

import yaml

from unitsync.core.errors import UnitSyncIOError
from unitsync.core.hashing import fingerprint
from unitsync.core.tools import write_text_atomic


logger = logging.getLogger(__name__)


class StateFile:
    """Mapeo unit → fingerprint; se muta en memoria y se persiste una vez por run."""

    def __init__(self, services: Optional[Dict[str, str]] = None):
        self.services: Dict[str, str] = dict(services or {})

    @classmethod
    def load_or_create(cls, path: Path) -> "StateFile":
        """
        Carga el estado desde path.

        - Si no existe: estado vacío.
        - Si existe pero no se puede parsear (YAML inválido, forma inesperada,
          no UTF-8): estado vacío, con warning.
        - Si existe y no se puede leer (permisos): UnitSyncIOError.
        """
        path = Path(path)
        if not path.exists():
            logger.debug("Sin estado previo en %s", path)
            return cls()

        try:
            raw = path.read_bytes()
        except OSError as e:
            raise UnitSyncIOError(path, e) from e

        try:
            content = raw.decode("utf-8")
        except UnicodeDecodeError:
            logger.warning("Estado en %s no es UTF-8; se ignora", path)
            return cls()

        services = _parse_services(content)
        if services is None:
            logger.warning("Estado en %s ilegible; se parte de estado vacío", path)
            return cls()
        logger.debug("Estado cargado de %s (%d units)", path, len(services))
        return cls(services)

    def save(self, path: Path) -> None:
        """Serializa y sobrescribe path de forma atómica."""
        content = yaml.safe_dump(
            {"services": dict(self.services)},
            default_flow_style=False,
            sort_keys=False,
        )
        write_text_atomic(Path(path), content)
        logger.debug("Estado guardado en %s (%d units)", path, len(self.services))

    def get(self, unit: str) -> Optional[str]:
        return self.services.get(unit)

    def matches(self, unit: str, content: str) -> bool:
        """True si no hay huella guardada para unit o si coincide con el contenido."""
        stored = self.services.get(unit)
        if stored is None:
            return True
        return stored == fingerprint(content)

    def record(self, unit: str, content: str) -> None:
        """Registra la huella de lo que se acaba de escribir para unit."""
        self.services[unit] = fingerprint(content)

    def __len__(self) -> int:
        return len(self.services)

    def __repr__(self) -> str:
        return f"StateFile(services={self.services!r})"


def _parse_services(content: str) -> Optional[Dict[str, str]]:
    """Devuelve el mapeo o None si el documento no tiene la forma esperada."""
    try:
        data = yaml.safe_load(content)
    except yaml.YAMLError:
        return None
    if data is None:
        # archivo vacío
        return {}
    if not isinstance(data, dict):
        return None
    services = data.get("services")
    if not isinstance(services, dict):
        return None
    if not all(isinstance(k, str) and isinstance(v, str) for k, v in services.items()):
        return None
    return dict(services)
