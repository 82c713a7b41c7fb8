"""
Modelos de datos de unitsync (agnósticos de interfaz y filesystem).

- ServiceDeclaration / ServicesConfig: lo que declara el YAML de entrada.
- ProposedChange / ChangeKind: resultado de analizar una declaración
  contra la unit en vivo y el estado guardado. Nunca se persiste.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from unitsync.core.errors import ValidationError
from unitsync.core.project.validator import validate_unit_name


class ServiceDeclaration(BaseModel):
    """Una entrada de `services:` en la configuración."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    template: str = Field(..., min_length=1, description="Nombre de plantilla relativo al directorio de plantillas")
    unit: str = Field(..., description="Nombre de la unit (y de su archivo en vivo)")
    variables: Dict[str, str] = Field(default_factory=dict, description="Variables para la plantilla")

    @field_validator("unit")
    @classmethod
    def _check_unit(cls, v: str) -> str:
        try:
            validate_unit_name(v)
        except ValidationError as e:
            raise ValueError(str(e)) from e
        return v

    @field_validator("variables", mode="before")
    @classmethod
    def _stringify_scalars(cls, v):
        # YAML convierte `port: 5432` en int; las variables son texto
        if v is None:
            return {}
        if not isinstance(v, dict):
            return v
        out = {}
        for key, value in v.items():
            if isinstance(value, bool):
                value = "true" if value else "false"
            elif isinstance(value, (int, float)):
                value = str(value)
            out[str(key)] = value
        return out


class ServicesConfig(BaseModel):
    """Documento de entrada completo."""

    model_config = ConfigDict(extra="forbid")

    services: List[ServiceDeclaration] = Field(...)


class ChangeKind(str, Enum):
    UP_TO_DATE = "up-to-date"
    CREATE = "create"
    UPDATE = "update"
    UPDATE_WITH_DRIFT = "update-with-drift"


@dataclass(frozen=True)
class ProposedChange:
    """
    Cambio propuesto para una unit.

    old_content es None si la unit todavía no existe. drift solo es True si
    existía contenido previo, había huella guardada y no coinciden.
    """
    unit: str
    new_content: str
    old_content: Optional[str] = None
    drift: bool = False

    @property
    def needs_update(self) -> bool:
        return self.old_content is None or self.old_content != self.new_content

    @property
    def kind(self) -> ChangeKind:
        if self.old_content is None:
            return ChangeKind.CREATE
        if not self.needs_update:
            return ChangeKind.UP_TO_DATE
        if self.drift:
            return ChangeKind.UPDATE_WITH_DRIFT
        return ChangeKind.UPDATE
