"""
Provider systemd: recarga y reinicio de units vía systemctl
"""

import logging
import subprocess
from typing import List, Optional, Sequence

from unitsync.core.errors import ServiceManagerError
from unitsync.core.runtime.resolver import systemctl_timeout


logger = logging.getLogger(__name__)


def run_command(command: Sequence[str], timeout: float) -> subprocess.CompletedProcess:
    """
    Ejecuta un comando del sistema y exige código 0

    Args:
        command: Lista con comando y argumentos
        timeout: Timeout en segundos

    Returns:
        El CompletedProcess (stdout/stderr como texto)

    Raises:
        ServiceManagerError: código distinto de 0, timeout o comando inexistente
    """
    logger.debug("Ejecutando: %s", " ".join(command))
    try:
        result = subprocess.run(
            list(command),
            capture_output=True,
            text=True,
            timeout=timeout,
            check=False,
        )
    except subprocess.TimeoutExpired as e:
        raise ServiceManagerError(command, None, f"timeout tras {timeout}s") from e
    except FileNotFoundError as e:
        raise ServiceManagerError(command, None, f"comando no encontrado: {command[0]}") from e
    except OSError as e:
        raise ServiceManagerError(command, None, str(e)) from e

    if result.returncode != 0:
        raise ServiceManagerError(command, result.returncode, result.stderr or "")
    return result


class SystemctlManager:
    """ServiceManager real: `systemctl daemon-reload` y `systemctl restart <unit>`."""

    def __init__(self, systemctl: str = "systemctl", timeout: Optional[float] = None):
        self.systemctl = systemctl
        self.timeout = timeout if timeout is not None else systemctl_timeout()

    def _cmd(self, *args: str) -> List[str]:
        return [self.systemctl, *args]

    def reload(self) -> None:
        run_command(self._cmd("daemon-reload"), self.timeout)
        logger.info("systemd recargado")

    def restart(self, unit: str) -> None:
        run_command(self._cmd("restart", unit), self.timeout)
        logger.info("%s reiniciado", unit)
