"""[Layer: Presentation] Typer CLI Commands."""

from pathlib import Path
from typing import Optional

import typer

from beadview.config import Settings, get_settings, load_hooks, load_key_config
from beadview.core.triggers import trigger_key_hint
from beadview.core.updater import UpdateCheckError, check_latest_release, current_version
from beadview.database import BeadStore, find_beads_file
from beadview.hooks import HookExecutor
from beadview.models import STATUS_ORDER
from beadview.tui.app import BeadViewApp


def _version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        typer.echo(f"beadview {current_version()}")
        raise typer.Exit()


app = typer.Typer(
    name="beadview",
    help="Terminal browser for beads issues.",
)


def _resolve_beads_path(settings: Settings, beads: Optional[Path]) -> Optional[Path]:
    """CLI flag, then BEADVIEW_BEADS_PATH, then .beads/issues.jsonl upwards."""
    if beads is not None:
        return beads
    if settings.beads_path is not None:
        return settings.beads_path
    return find_beads_file()


def _launch_tui(beads: Optional[Path] = None) -> None:
    """Build the app from settings and run it."""
    settings = get_settings()
    store = BeadStore(_resolve_beads_path(settings, beads))
    hooks = HookExecutor(load_hooks(settings.config_path), timeout=settings.hook_timeout)
    BeadViewApp(
        store=store,
        key_config=load_key_config(settings.config_path),
        hooks=hooks,
        update_url=settings.update_url if settings.update_check else None,
        update_timeout=settings.update_timeout,
    ).run()


@app.callback(invoke_without_command=True)
def main(
    ctx: typer.Context,
    version: bool = typer.Option(
        False,
        "--version",
        "-V",
        callback=_version_callback,
        is_eager=True,
        help="Show version and exit.",
    ),
) -> None:
    """Browse beads. Run without a command to open the TUI."""
    if ctx.invoked_subcommand is None:
        _launch_tui()


@app.command()
def tui(
    beads: Optional[Path] = typer.Option(
        None, "--beads", "-b", help="Path to issues.jsonl"
    ),
) -> None:
    """Open the beads browser."""
    _launch_tui(beads)


@app.command(name="list")
def list_beads(
    status: Optional[str] = typer.Option(
        None, "--status", "-s", help="Filter by status"
    ),
    beads: Optional[Path] = typer.Option(
        None, "--beads", "-b", help="Path to issues.jsonl"
    ),
) -> None:
    """Print beads without opening the TUI."""
    if status is not None and status not in STATUS_ORDER:
        typer.echo(
            f"Unknown status {status!r}. Choose from: {', '.join(STATUS_ORDER)}",
            err=True,
        )
        raise typer.Exit(1)

    store = BeadStore(_resolve_beads_path(get_settings(), beads))
    rows = store.list_beads(status)  # type: ignore[arg-type]
    if not rows:
        typer.echo("No beads found.")
        return
    for bead in rows:
        typer.echo(f"{bead.id:<12} {bead.priority_label}  {bead.status:<12} {bead.title}")


@app.command()
def keys() -> None:
    """Show the effective tutorial key bindings."""
    config = load_key_config(get_settings().config_path)
    bindings = config.bindings
    typer.echo(trigger_key_hint(bindings))
    double_tap = "on" if bindings.double_tap_enabled else "off"
    space = "on" if bindings.help_modal_space else "off"
    typer.echo(f"Double tap: {double_tap} ({config.threshold * 1000:.0f} ms)")
    typer.echo(f"Space in help opens tutorial: {space}")


@app.command(name="check-update")
def check_update() -> None:
    """Check GitHub for a newer release."""
    settings = get_settings()
    try:
        tag, url = check_latest_release(settings.update_url, settings.update_timeout)
    except UpdateCheckError as e:
        typer.echo(str(e), err=True)
        raise typer.Exit(1)
    if tag:
        typer.echo(f"beadview {tag} is available: {url}")
    else:
        typer.echo(f"beadview {current_version()} is up to date.")


@app.command()
def version() -> None:
    """Show version."""
    typer.echo(f"beadview {current_version()}")
