"""
Aplicación CLI de unitsync.

Solo compone comandos y presentación; la lógica vive en core y providers.
"""

import logging
from pathlib import Path
from typing import List, Optional

import typer
from dotenv import load_dotenv
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.panel import Panel

from unitsync import __version__
from unitsync.cli.display import show_plan, show_status
from unitsync.core.errors import UnitSyncError
from unitsync.core.infra.contracts import Confirmer, ServiceManager
from unitsync.core.project.loader import load_config
from unitsync.core.project.models import ProposedChange, ServiceDeclaration
from unitsync.core.project.planner import analyze_all, plan_changes
from unitsync.core.project.sync import SyncOutcome, run_sync
from unitsync.core.project.validator import find_duplicate_units
from unitsync.core.runtime.resolver import units_dir as resolve_units_dir
from unitsync.core.runtime.state import StateFile
from unitsync.providers.prompt import RichConfirmer
from unitsync.providers.systemd import SystemctlManager


app = typer.Typer(
    name="unitsync",
    help="unitsync - Convergencia declarativa de units de systemd",
    add_completion=False,
    no_args_is_help=True,
)

console = Console()


@app.callback()
def _root():
    """Carga .env del directorio actual antes de cualquier comando"""
    env_file = Path.cwd() / ".env"
    if env_file.exists():
        load_dotenv(env_file)


def build_manager() -> ServiceManager:
    return SystemctlManager()


def build_confirmer() -> Confirmer:
    return RichConfirmer(console)


def _setup_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=console, show_path=False)],
        force=True,
    )


def _load_declarations(input_file: Path) -> List[ServiceDeclaration]:
    config = load_config(input_file)
    for unit in find_duplicate_units(config.services):
        console.print(f"[yellow]⚠️ La unit {escape(unit)} está declarada más de una vez; la última gana[/yellow]")
    return config.services


def _report_error(error: UnitSyncError) -> None:
    console.print(f"[red]❌ {escape(str(error))}[/red]")


@app.command()
def apply(
    input_file: Path = typer.Option(..., "--input", "-i", help="Archivo YAML con los servicios"),
    state_file: Path = typer.Option(..., "--state", "-s", help="Archivo donde se guarda el estado"),
    templates: Path = typer.Option(Path("templates"), "--templates", help="Directorio de plantillas"),
    units_dir: Optional[Path] = typer.Option(None, "--units-dir", help="Directorio de units (default: /etc/systemd/system)"),
    force: bool = typer.Option(False, "--force", help="Aplicar aunque haya cambios manuales (drift)"),
    yes: bool = typer.Option(False, "--yes", "-y", help="No pedir confirmación"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Modo verbose"),
):
    """
    Renderiza, compara y aplica los cambios en las units

    Ejemplo: unitsync apply -i services.yaml -s state.yaml --templates templates
    """
    _setup_logging(verbose)

    def _progress(change: ProposedChange) -> None:
        console.print(f"[cyan]🔄 Actualizando servicio: {escape(change.unit)}[/cyan]")

    try:
        declarations = _load_declarations(input_file)
        console.print("[dim]Analizando cambios...[/dim]")
        result = run_sync(
            declarations,
            templates,
            state_file,
            resolve_units_dir(units_dir),
            manager=build_manager(),
            confirmer=None if yes else build_confirmer(),
            force=force,
            on_plan=lambda plan: show_plan(plan, console),
            on_change=_progress,
        )
    except UnitSyncError as e:
        _report_error(e)
        raise typer.Exit(code=1)

    if result.outcome == SyncOutcome.NO_CHANGES:
        console.print("[green]✅ Ningún servicio necesita cambios[/green]")
    elif result.outcome == SyncOutcome.CANCELLED:
        console.print("[yellow]Operación cancelada[/yellow]")
    else:
        console.print(f"[green]✅ Cambios aplicados correctamente ({len(result.applied)} unit(s))[/green]")


@app.command()
def plan(
    input_file: Path = typer.Option(..., "--input", "-i", help="Archivo YAML con los servicios"),
    state_file: Path = typer.Option(..., "--state", "-s", help="Archivo de estado"),
    templates: Path = typer.Option(Path("templates"), "--templates", help="Directorio de plantillas"),
    units_dir: Optional[Path] = typer.Option(None, "--units-dir", help="Directorio de units (default: /etc/systemd/system)"),
    force: bool = typer.Option(False, "--force", help="Incluir units con drift en el plan"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Modo verbose"),
):
    """
    Muestra los cambios que aplicaría `apply`, sin escribir nada
    """
    _setup_logging(verbose)
    try:
        declarations = _load_declarations(input_file)
        state = StateFile.load_or_create(state_file)
        changes = plan_changes(declarations, templates, state, resolve_units_dir(units_dir), force=force)
    except UnitSyncError as e:
        _report_error(e)
        raise typer.Exit(code=1)

    if not changes:
        console.print("[green]✅ Ningún servicio necesita cambios[/green]")
        return
    show_plan(changes, console)
    console.print(f"[dim]{len(changes)} cambio(s) pendiente(s). Ejecuta 'unitsync apply' para aplicarlos.[/dim]")


@app.command()
def status(
    input_file: Path = typer.Option(..., "--input", "-i", help="Archivo YAML con los servicios"),
    state_file: Path = typer.Option(..., "--state", "-s", help="Archivo de estado"),
    templates: Path = typer.Option(Path("templates"), "--templates", help="Directorio de plantillas"),
    units_dir: Optional[Path] = typer.Option(None, "--units-dir", help="Directorio de units (default: /etc/systemd/system)"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Modo verbose"),
):
    """
    Estado de cada unit declarada: al día, crear, actualizar o drift
    """
    _setup_logging(verbose)
    try:
        declarations = _load_declarations(input_file)
        state = StateFile.load_or_create(state_file)
        changes = analyze_all(declarations, templates, state, resolve_units_dir(units_dir))
    except UnitSyncError as e:
        _report_error(e)
        raise typer.Exit(code=1)
    show_status(changes, console)


@app.command()
def version():
    """Muestra la versión de unitsync"""
    console.print(Panel.fit(
        "[bold cyan]unitsync[/bold cyan]\n"
        "[dim]Convergencia declarativa de units de systemd[/dim]\n\n"
        f"[bold]Versión:[/bold] {__version__}",
        border_style="cyan"
    ))


def main():
    app()
