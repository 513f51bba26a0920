"""pi-manager CLI — drive a pi-manager backend from the terminal.

Usage:
    python cli/main.py --help

Every command runs one (or, for ``status``, two concurrent) API calls
against ``$PIMANAGER_HOST/api/v1`` and prints the result.
"""

from __future__ import annotations

import sys
from pathlib import Path

# Ensure the project root is on sys.path so that `from pimanager.xxx import ...`
# works when the CLI is invoked as `python cli/main.py` from any directory.
_ROOT = Path(__file__).resolve().parent.parent
if str(_ROOT) not in sys.path:
    sys.path.insert(0, str(_ROOT))

import asyncio
import logging

import typer

from cli.commands.project import project_app
from cli.rendering import render_listing, render_pi_health
from cli.runtime import expect_dict, run_api
from pimanager.api import endpoints
from pimanager.api.models import FsListing

app = typer.Typer(
    name="pimanager",
    help="pi-manager client CLI.",
    no_args_is_help=True,
)
app.add_typer(project_app, name="project")


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log every HTTP request."),
) -> None:
    """pi-manager client CLI."""
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        )


# ---------------------------------------------------------------------------
# Host status
# ---------------------------------------------------------------------------
def _echo_health(health: dict) -> None:
    marker = "✅" if health.get("ok") else "❌"
    typer.echo(f"{marker} Backend healthy: {bool(health.get('ok'))}")
    typer.echo(f"   Last check  : {health.get('last_check', '?')}")
    typer.echo(f"   Tailscale   : {health.get('tailscale_name') or '(none)'}")


@app.command("health")
def health() -> None:
    """Check that the backend is up."""
    _echo_health(expect_dict(run_api(endpoints.get_health()), "health"))


@app.command("info")
def info() -> None:
    """Show backend name, version and uptime."""
    data = expect_dict(run_api(endpoints.get_info()), "info")
    typer.echo(
        f"{data.get('name', '?')} v{data.get('version', '?')}  "
        f"(up {data.get('uptime_s', 0)}s)"
    )


@app.command("pi-health")
def pi_health() -> None:
    """Show CPU, memory, disk and temperature of the host."""
    typer.echo(render_pi_health(expect_dict(run_api(endpoints.get_pi_health()), "pi-health")))


@app.command("boots")
def boots() -> None:
    """Show why the host last rebooted."""
    data = expect_dict(run_api(endpoints.get_last_boot()), "boots")
    typer.echo(f"[boots] {data.get('boot_id', '?')}: {data.get('reason', '?')}")
    for key in ("notes", "error"):
        if data.get(key):
            typer.echo(f"   {key}: {data[key]}")


async def _status() -> list:
    return await asyncio.gather(endpoints.get_health(), endpoints.get_pi_health())


@app.command("status")
def status() -> None:
    """Fetch health and host metrics concurrently and print both."""
    health_data, pi_data = run_api(_status())
    _echo_health(expect_dict(health_data, "health"))
    typer.echo("")
    typer.echo(render_pi_health(expect_dict(pi_data, "pi-health")))


# ---------------------------------------------------------------------------
# File browser
# ---------------------------------------------------------------------------
@app.command("ls")
def ls(
    path: str = typer.Argument("", help="Directory relative to the server's base path."),
) -> None:
    """List sub-directories under the server's browsable base path."""
    data = expect_dict(run_api(endpoints.get_files(path)), "fs")
    typer.echo(render_listing(FsListing.from_dict(data)))


# ---------------------------------------------------------------------------
# Entry-point
# ---------------------------------------------------------------------------
if __name__ == "__main__":
    app()
