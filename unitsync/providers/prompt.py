"""
Confirmación interactiva con Rich
"""

from typing import Optional

from rich.console import Console
from rich.prompt import Confirm


class RichConfirmer:
    """Confirmer real: pregunta sí/no en la terminal (por defecto: no)."""

    def __init__(self, console: Optional[Console] = None, default: bool = False):
        self.console = console or Console()
        self.default = default

    def confirm(self, prompt: str) -> bool:
        return Confirm.ask(f"[bold yellow]{prompt}[/bold yellow]", console=self.console, default=self.default)
