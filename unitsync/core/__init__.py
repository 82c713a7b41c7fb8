"""
Core: lógica de convergencia.

- Este paquete NO debe importar: unitsync.cli ni unitsync.providers.
- Las capacidades externas (systemctl, prompt) llegan inyectadas vía
  unitsync.core.infra.contracts.
"""

from unitsync.core.errors import (
    ConfigError,
    ServiceManagerError,
    StateOutOfSyncError,
    TemplateNotFoundError,
    TemplateRenderError,
    UnitSyncError,
    UnitSyncIOError,
    ValidationError,
)

__all__ = [
    "UnitSyncError",
    "ValidationError",
    "ConfigError",
    "UnitSyncIOError",
    "TemplateNotFoundError",
    "TemplateRenderError",
    "StateOutOfSyncError",
    "ServiceManagerError",
]
