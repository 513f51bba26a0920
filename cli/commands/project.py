"""Project management commands."""

from typing import List, Optional

import typer

from cli.rendering import render_project, render_project_line
from cli.runtime import expect_dict, expect_list, run_api
from pimanager.api import endpoints
from pimanager.api.models import PipelineStep, Project

project_app = typer.Typer(help="Manage projects on the pi-manager host.", no_args_is_help=True)


def _parse_step(raw: str) -> PipelineStep:
    """Parse a ``NAME=CMD`` option value."""
    name, sep, cmd = raw.partition("=")
    if not sep or not name.strip() or not cmd.strip():
        raise typer.BadParameter(f"expected NAME=CMD, got {raw!r}", param_hint="--step")
    return PipelineStep(name=name.strip(), cmd=cmd.strip())


@project_app.command("list")
def project_list() -> None:
    """List all projects."""
    projects = expect_list(run_api(endpoints.get_projects()), "projects")
    if not projects:
        typer.echo("No projects found.")
        return

    typer.echo("Projects:")
    for raw in projects:
        typer.echo(f"  {render_project_line(Project.from_dict(raw))}")


@project_app.command("show")
def project_show(
    project_id: str = typer.Argument(..., help="Project ID.")
) -> None:
    """Show one project, including its pipeline and last log."""
    raw = expect_dict(run_api(endpoints.get_project(project_id)), "project")
    typer.echo(render_project(Project.from_dict(raw)))


@project_app.command("new")
def project_new(
    project_id: str = typer.Argument(..., help="ID of the new project."),
    description: str = typer.Option("", help="Free-form description."),
    path: str = typer.Option("", help="Working directory for pipeline steps."),
    port: str = typer.Option("", help="Port the project listens on (auto-detected if empty)."),
    check_cmd: str = typer.Option("", "--check-cmd", help="Command used to check status."),
    step: Optional[List[str]] = typer.Option(
        None, "--step", help="Pipeline step as NAME=CMD. Repeat for several steps."
    ),
) -> None:
    """Create a new project."""
    pipeline = [_parse_step(s) for s in step or []]
    project = Project(
        id=project_id,
        description=description,
        check_cmd=check_cmd,
        pipeline=pipeline,
        path=path,
        port=port,
    )
    created = expect_dict(run_api(endpoints.create_project(project.to_dict())), "project")
    typer.echo(f"✅ Project created: {created.get('id', project_id)}")


@project_app.command("delete")
def project_delete(
    project_id: str = typer.Argument(..., help="Project ID.")
) -> None:
    """Stop and delete a project."""
    run_api(endpoints.delete_project(project_id))
    typer.echo(f"🗑️  Project deleted: {project_id}")


@project_app.command("start")
def project_start(
    project_id: str = typer.Argument(..., help="Project ID.")
) -> None:
    """Run the project's pipeline in the background on the host."""
    result = expect_dict(run_api(endpoints.start_project(project_id)), "start")
    if "error" in result:
        typer.echo(f"⚠️  {project_id}: {result['error']}")
        return
    typer.echo(f"🚀 {project_id}: {result.get('status', 'started')}")


@project_app.command("stop")
def project_stop(
    project_id: str = typer.Argument(..., help="Project ID.")
) -> None:
    """Stop a running project."""
    result = expect_dict(run_api(endpoints.stop_project(project_id)), "stop")
    typer.echo(f"⏹️  {project_id}: {result.get('status', 'stopped')}")
