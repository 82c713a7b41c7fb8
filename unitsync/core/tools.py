"""
Módulo Tools - Lectura/escritura de archivos de texto

Todas las operaciones son exactas: newline="" desactiva la traducción de
finales de línea, de modo que lo leído es lo que se hashea y lo escrito es
lo renderizado, byte a byte (UTF-8).
"""

import os
import tempfile
from pathlib import Path

from unitsync.core.errors import UnitSyncIOError


def read_text(path: Path) -> str:
    """
    Lee un archivo de texto sin normalizar finales de línea

    Raises:
        UnitSyncIOError: si no se puede leer o no es UTF-8 válido
    """
    try:
        with open(path, "r", encoding="utf-8", newline="") as f:
            return f.read()
    except OSError as e:
        raise UnitSyncIOError(path, e) from e
    except UnicodeDecodeError as e:
        raise UnitSyncIOError(path, OSError(f"contenido no UTF-8: {e}")) from e


def write_text(path: Path, content: str) -> None:
    """
    Escribe (reemplazando) un archivo de texto tal cual, creando el directorio padre

    Raises:
        UnitSyncIOError: si no se puede escribir
    """
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        with open(path, "w", encoding="utf-8", newline="") as f:
            f.write(content)
    except OSError as e:
        raise UnitSyncIOError(path, e) from e


def write_text_atomic(path: Path, content: str) -> None:
    """
    Escribe a un temporal en el mismo directorio y lo renombra sobre el destino.
    El archivo destino nunca queda a medio escribir.
    """
    tmp_name = None
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        with tempfile.NamedTemporaryFile(
            "w",
            encoding="utf-8",
            newline="",
            dir=path.parent,
            prefix=f".{path.name}.",
            suffix=".tmp",
            delete=False,
        ) as f:
            tmp_name = f.name
            f.write(content)
            f.flush()
            os.fsync(f.fileno())
        os.replace(tmp_name, path)
    except OSError as e:
        if tmp_name and os.path.exists(tmp_name):
            os.unlink(tmp_name)
        raise UnitSyncIOError(path, e) from e
