"""Dataclass views over decoded API payloads.

The endpoint bindings return plain decoded JSON; these types exist for
callers (the CLI) that want attribute access.  ``from_dict`` tolerates
missing keys so that older or newer backends still decode.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


@dataclass
class PipelineStep:
    name: str
    cmd: str

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> PipelineStep:
        return cls(name=data.get("name", ""), cmd=data.get("cmd", ""))

    def to_dict(self) -> dict[str, Any]:
        return {"name": self.name, "cmd": self.cmd}


@dataclass
class Project:
    """A managed project: a named pipeline of shell steps run on the host."""

    id: str
    description: str = ""
    check_cmd: str = ""
    pipeline: list[PipelineStep] = field(default_factory=list)
    path: str = ""
    status: str = "IDLE"  # IDLE | BOOTING | ACTIVE | RUNNING | FAILED
    last_log: str = ""
    current_step: str = ""
    progress: int = 0
    port: str = ""

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Project:
        return cls(
            id=data.get("id", ""),
            description=data.get("description", ""),
            check_cmd=data.get("check_cmd", ""),
            pipeline=[PipelineStep.from_dict(s) for s in data.get("pipeline") or []],
            path=data.get("path", ""),
            status=data.get("status", "IDLE"),
            last_log=data.get("last_log", ""),
            current_step=data.get("current_step", ""),
            progress=int(data.get("progress") or 0),
            port=data.get("port", ""),
        )

    def to_dict(self) -> dict[str, Any]:
        """Serialise to the record accepted by ``POST /projects``."""
        record: dict[str, Any] = {
            "id": self.id,
            "description": self.description,
            "check_cmd": self.check_cmd,
            "pipeline": [s.to_dict() for s in self.pipeline],
            "status": self.status,
            "last_log": self.last_log,
            "current_step": self.current_step,
            "progress": self.progress,
            "port": self.port,
        }
        if self.path:
            record["path"] = self.path
        return record


@dataclass
class FsEntry:
    name: str
    path: str
    abs_path: str
    is_dir: bool = True

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> FsEntry:
        return cls(
            name=data.get("name", ""),
            path=data.get("path", ""),
            abs_path=data.get("abs_path", ""),
            is_dir=bool(data.get("is_dir", True)),
        )


@dataclass
class FsListing:
    """Directory listing returned by ``GET /fs``."""

    current_path: str
    entries: list[FsEntry] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> FsListing:
        return cls(
            current_path=data.get("current_path", ""),
            entries=[FsEntry.from_dict(e) for e in data.get("entries") or []],
        )


@dataclass
class PiHealthSample:
    """One point of host metrics: a ``history`` entry or the current reading."""

    time: str
    cpu_usage: float = 0.0
    memory_percent: float = 0.0
    temperature: float = 0.0
    disk_percent: float = 0.0

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> PiHealthSample:
        return cls(
            time=data.get("time", ""),
            cpu_usage=float(data.get("cpu_usage") or 0.0),
            memory_percent=float(data.get("memory_percent") or 0.0),
            temperature=float(data.get("temperature") or 0.0),
            disk_percent=float(data.get("disk_percent") or 0.0),
        )
