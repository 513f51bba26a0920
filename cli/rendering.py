"""Utilities for rendering API payloads in the CLI."""

from __future__ import annotations

from typing import Any

from pimanager.api.models import FsListing, PiHealthSample, Project


def render_listing(listing: FsListing) -> str:
    """Render a directory listing as an ASCII tree rooted at ``current_path``."""
    lines = [f"📁 {listing.current_path}"]
    count = len(listing.entries)
    if not count:
        lines.append("└── (empty)")
    for i, entry in enumerate(listing.entries):
        connector = "└── " if i == count - 1 else "├── "
        icon = "📁" if entry.is_dir else "📄"
        lines.append(f"{connector}{icon} {entry.name}  [{entry.path}]")
    return "\n".join(lines)


def render_project_line(project: Project) -> str:
    line = f"{_get_icon(project.status)} {project.id:<24} {project.status:<8}"
    if project.status == "BOOTING":
        line += f" {project.progress:>3}%"
        if project.current_step:
            line += f" ({project.current_step})"
    if project.port:
        line += f"  :{project.port}"
    return line


def render_project(project: Project) -> str:
    """Render the full detail view of a single project."""
    lines = [
        f"{_get_icon(project.status)} Project: {project.id}",
        "-" * 40,
        f"   Status      : {project.status}",
        f"   Description : {project.description or '(none)'}",
        f"   Path        : {project.path or '(none)'}",
        f"   Port        : {project.port or '(auto)'}",
        f"   Progress    : {project.progress}%",
    ]
    if project.current_step:
        lines.append(f"   Step        : {project.current_step}")
    if project.check_cmd:
        lines.append(f"   Check       : {project.check_cmd}")

    lines.append("\n   Pipeline:")
    if not project.pipeline:
        lines.append("    (no steps)")
    for i, step in enumerate(project.pipeline, start=1):
        lines.append(f"    {i}. {step.name}: {step.cmd}")

    if project.last_log:
        lines.append("\n   Last log:")
        lines.extend(f"    {ln}" for ln in project.last_log.rstrip().splitlines())
    return "\n".join(lines)


def render_pi_health(data: dict[str, Any]) -> str:
    """Render the ``/pi-health`` payload: current metrics plus history size."""
    current = PiHealthSample.from_dict(data)
    history = [PiHealthSample.from_dict(h) for h in data.get("history") or []]
    lines = [
        f"🖥️  Host        : {data.get('hostname', '?')}",
        f"   Tailscale   : {data.get('tailscale_name') or '(none)'}",
        f"   CPU         : {_pct(current.cpu_usage)}",
        f"   Memory      : {_pct(current.memory_percent)}",
        f"   Disk        : {_pct(current.disk_percent)}",
        f"   Temperature : {current.temperature:.1f} °C",
    ]
    if "load_avg_1" in data:
        lines.append(
            "   Load avg    : "
            f"{data.get('load_avg_1')} {data.get('load_avg_5')} {data.get('load_avg_15')}"
        )
    lines.append(f"   History     : {len(history)} samples")
    if history:
        last = history[-1]
        lines.append(f"   Last sample : {last.time}  cpu={_pct(last.cpu_usage)}")
    return "\n".join(lines)


def _pct(value: Any) -> str:
    return f"{float(value or 0.0):.1f}%"


def _get_icon(status: str) -> str:
    icons = {
        "IDLE": "⚪",
        "BOOTING": "🟡",
        "ACTIVE": "🟢",
        "RUNNING": "🟢",
        "FAILED": "🔴",
    }
    return icons.get(status, "📦")
