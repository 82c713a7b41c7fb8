"""
Runtime: resolución de rutas y estado persistido (fingerprints).
"""

from unitsync.core.runtime.resolver import units_dir, systemctl_timeout
from unitsync.core.runtime.state import StateFile

__all__ = ["units_dir", "systemctl_timeout", "StateFile"]
