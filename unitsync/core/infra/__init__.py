"""
Contratos de capacidades externas y motor de apply.
"""

from unitsync.core.infra.contracts import ServiceManager, Confirmer
from unitsync.core.infra.apply import apply_change, apply_plan

__all__ = ["ServiceManager", "Confirmer", "apply_change", "apply_plan"]
