"""
Presentación en terminal: diffs, acciones planificadas y tabla de estado.
"""

import difflib
from typing import List, Optional

from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from unitsync.core.project.models import ChangeKind, ProposedChange


NO_NEWLINE_MARKER = "\\ Sin salto de línea al final"


def _visible_line(line: str) -> str:
    """Quita el fin de línea, dejando visible un \\r o su ausencia"""
    if line.endswith("\n"):
        line = line[:-1]
        if line.endswith("\r"):
            line = line[:-1] + "\\r"
        return line
    return f"{line}  {NO_NEWLINE_MARKER}"


def render_diff_lines(old_content: Optional[str], new_content: str, unit: str) -> List[str]:
    """
    Diff unificado (sin colorear) entre la unit en vivo y la renderizada.

    Compara con los finales de línea incluidos: un cambio CRLF -> LF o del
    salto final aparece en el diff (marcado con \\r o NO_NEWLINE_MARKER).
    """
    old_lines = (old_content or "").splitlines(keepends=True)
    new_lines = new_content.splitlines(keepends=True)
    diff = list(difflib.unified_diff(
        old_lines,
        new_lines,
        fromfile=f"{unit} (actual)" if old_content is not None else "/dev/null",
        tofile=f"{unit} (deseado)",
        lineterm="",
        n=3,
    ))
    # las dos cabeceras y los @@ no llevan fin de línea propio
    return diff[:2] + [line if line.startswith("@@") else _visible_line(line) for line in diff[2:]]


def show_diff(change: ProposedChange, console: Console) -> None:
    """Muestra el diff de un cambio, con aviso si pisa cambios manuales"""
    diff_lines = render_diff_lines(change.old_content, change.new_content, change.unit)

    colored = []
    for line in diff_lines:
        text = escape(line)
        if line.startswith('+') and not line.startswith('+++'):
            colored.append(f"[green]{text}[/green]")
        elif line.startswith('-') and not line.startswith('---'):
            colored.append(f"[red]{text}[/red]")
        elif line.startswith('@'):
            colored.append(f"[cyan]{text}[/cyan]")
        else:
            colored.append(text)

    if change.drift:
        console.print(f"[bold red]⚠️  {escape(change.unit)} fue modificada fuera de unitsync; se sobrescribirá[/bold red]")

    body = "\n".join(colored) if colored else "[dim]Sin diferencias de texto[/dim]"
    border = "red" if change.drift else "cyan"
    console.print(Panel(body, title=f"Cambios en {escape(change.unit)}", border_style=border))


def show_plan(plan: List[ProposedChange], console: Console) -> None:
    """Vista previa completa: diffs y lista de acciones"""
    console.print("\n[bold]Cambios planificados:[/bold]")
    for change in plan:
        show_diff(change, console)

    console.print("[bold]Se realizarán las siguientes acciones:[/bold]")
    for change in plan:
        unit = escape(change.unit)
        if change.drift:
            console.print(f" [red]![/red] Sobrescribir cambios manuales en: {unit}")
        verb = "Crear" if change.old_content is None else "Actualizar"
        console.print(f" * {verb} unit: {unit}")
        console.print(" * Recargar systemd (daemon-reload)")
        console.print(f" * Reiniciar servicio: {unit}")
    console.print()


_KIND_STYLE = {
    ChangeKind.UP_TO_DATE: "[green]al día[/green]",
    ChangeKind.CREATE: "[cyan]crear[/cyan]",
    ChangeKind.UPDATE: "[yellow]actualizar[/yellow]",
    ChangeKind.UPDATE_WITH_DRIFT: "[red]actualizar (drift)[/red]",
}


def show_status(changes: List[ProposedChange], console: Console) -> None:
    """Tabla de estado por unit"""
    if not changes:
        console.print("[yellow]⚠️ No hay servicios declarados[/yellow]")
        return

    table = Table(title="Estado de units", show_header=True, header_style="bold cyan")
    table.add_column("Unit", style="cyan")
    table.add_column("Estado")
    table.add_column("Drift")

    for change in changes:
        drift = "[red]sí[/red]" if change.drift else "[dim]no[/dim]"
        table.add_row(escape(change.unit), _KIND_STYLE[change.kind], drift)

    console.print(table)
