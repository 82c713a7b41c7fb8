"""
Contratos de las capacidades externas que usa el core.

El core solo define interfaces; la implementación real vive en
unitsync/providers/* (systemctl, prompt de Rich). Los tests inyectan fakes.
"""

from typing import Protocol


class ServiceManager(Protocol):
    """Gestor de servicios del host (p. ej. systemd)."""

    def reload(self) -> None:
        """Relee las definiciones de units. Error → ServiceManagerError."""
        ...

    def restart(self, unit: str) -> None:
        """Reinicia una unit. Error → ServiceManagerError."""
        ...


class Confirmer(Protocol):
    """Confirmación sí/no del operador."""

    def confirm(self, prompt: str) -> bool:
        ...
