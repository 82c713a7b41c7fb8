"""
Project: modelos, validación, renderizado, detección de drift y planificación.
"""

from unitsync.core.project.models import ChangeKind, ProposedChange, ServiceDeclaration, ServicesConfig
from unitsync.core.project.detector import analyze
from unitsync.core.project.planner import plan_changes, analyze_all
from unitsync.core.project.validator import validate_unit_name, find_duplicate_units

__all__ = [
    "ChangeKind",
    "ProposedChange",
    "ServiceDeclaration",
    "ServicesConfig",
    "analyze",
    "plan_changes",
    "analyze_all",
    "validate_unit_name",
    "find_duplicate_units",
]
