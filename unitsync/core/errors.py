"""
Errores de unitsync.

El core solo define excepciones; la CLI se encarga del formato de salida.
Cada error lleva únicamente los datos que su mensaje necesita, para que
la CLI (y los tests) puedan distinguirlos por tipo y no por texto.
"""

from pathlib import Path
from typing import Optional, Sequence


class UnitSyncError(Exception):
    """Error base de unitsync."""
    pass


class ValidationError(UnitSyncError):
    """Error de validación de una declaración de servicio."""
    pass


class ConfigError(UnitSyncError):
    """Archivo de configuración ilegible o con formato inválido."""

    def __init__(self, path: Path, detail: str):
        self.path = Path(path)
        self.detail = detail
        super().__init__(f"Error de configuración en {self.path}: {detail}")


class UnitSyncIOError(UnitSyncError):
    """Fallo de lectura/escritura en el filesystem."""

    def __init__(self, path: Path, error: OSError):
        self.path = Path(path)
        self.error = error
        super().__init__(f"Error de E/S en {self.path}: {error}")


class TemplateNotFoundError(UnitSyncError):
    """La plantilla declarada no existe en el directorio de plantillas."""

    def __init__(self, path: Path):
        self.path = Path(path)
        super().__init__(f"Plantilla no encontrada: {self.path}")


class TemplateRenderError(UnitSyncError):
    """Fallo del motor de plantillas (sintaxis, variable indefinida, etc.)."""

    def __init__(self, template: str, detail: str):
        self.template = template
        self.detail = detail
        super().__init__(f"Error en plantilla {template}: {detail}")


class StateOutOfSyncError(UnitSyncError):
    """La unit fue modificada fuera de unitsync desde el último apply."""

    def __init__(self, unit: str):
        self.unit = unit
        super().__init__(f"El servicio {unit} fue modificado fuera de esta herramienta")


class ServiceManagerError(UnitSyncError):
    """systemctl (u otro gestor) terminó con error."""

    def __init__(self, command: Sequence[str], returncode: Optional[int], stderr: str = ""):
        self.command = list(command)
        self.returncode = returncode
        self.stderr = stderr
        msg = f"Falló '{' '.join(self.command)}'"
        if returncode is not None:
            msg += f" (código {returncode})"
        if stderr.strip():
            msg += f": {stderr.strip()}"
        super().__init__(msg)
