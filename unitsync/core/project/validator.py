"""
Validación de declaraciones (lógica pura).

Sin I/O; solo reglas sobre estructuras de datos.
"""

from typing import Iterable, List

from unitsync.core.errors import ValidationError


def validate_unit_name(unit: str) -> None:
    """El nombre de unit es también un nombre de archivo: no vacío y sin rutas."""
    if not unit or not unit.strip():
        raise ValidationError("El nombre de la unit no puede estar vacío")
    if unit != unit.strip():
        raise ValidationError(f"El nombre de la unit no puede tener espacios al inicio o final: {unit!r}")
    if unit in (".", ".."):
        raise ValidationError(f"Nombre de unit inválido: {unit!r}")
    if any(c in unit for c in "/\\\0"):
        raise ValidationError(f"El nombre de la unit no puede contener separadores de ruta: {unit!r}")


def find_duplicate_units(declarations: Iterable) -> List[str]:
    """
    Devuelve las units declaradas más de una vez, en orden de primera repetición.
    No se rechazan: la última declaración gana en el estado.
    """
    seen: set = set()
    duplicates: List[str] = []
    for d in declarations:
        if d.unit in seen and d.unit not in duplicates:
            duplicates.append(d.unit)
        seen.add(d.unit)
    return duplicates
