"""Endpoint bindings for the pi-manager REST API.

Routes (relative to ``/api/v1``)
--------------------------------
GET    /                    API name, version and uptime
GET    /health              Liveness check
GET    /pi-health           Host metrics plus recent history
GET    /boots/last          Reason for the last boot
GET    /projects            List all projects
POST   /projects            Create a project
GET    /projects/{id}       Single project
DELETE /projects/{id}       Delete a project
POST   /projects/{id}/start Run the project's pipeline
POST   /projects/{id}/stop  Stop a running project
GET    /fs?path=...         Directory listing under the server's base path

Each binding returns the executor's outcome unchanged.
"""

from __future__ import annotations

import json
from typing import Any, Mapping
from urllib.parse import quote

from pimanager.api.client import ApiResult, RequestOptions, call_api

# Characters left unescaped by a URI-component encoder, besides the
# alphanumerics and ``-_.~`` that ``quote`` never escapes.
_COMPONENT_SAFE = "!*'()"


def encode_component(value: str) -> str:
    """Percent-encode *value* for use inside a single path segment or query value."""
    return quote(value, safe=_COMPONENT_SAFE)


async def get_info() -> ApiResult:
    return await call_api("/")


async def get_health() -> ApiResult:
    return await call_api("/health")


async def get_pi_health() -> ApiResult:
    return await call_api("/pi-health")


async def get_last_boot() -> ApiResult:
    return await call_api("/boots/last")


async def get_projects() -> ApiResult:
    return await call_api("/projects")


async def get_project(project_id: str) -> ApiResult:
    return await call_api(f"/projects/{encode_component(project_id)}")


async def create_project(project: Mapping[str, Any]) -> ApiResult:
    """POST *project* as a compact JSON record."""
    return await call_api(
        "/projects",
        RequestOptions(
            method="POST",
            body=json.dumps(project, separators=(",", ":"), ensure_ascii=False),
        ),
    )


async def delete_project(project_id: str) -> ApiResult:
    return await call_api(
        f"/projects/{encode_component(project_id)}",
        RequestOptions(method="DELETE"),
    )


async def start_project(project_id: str) -> ApiResult:
    return await call_api(
        f"/projects/{encode_component(project_id)}/start",
        RequestOptions(method="POST"),
    )


async def stop_project(project_id: str) -> ApiResult:
    return await call_api(
        f"/projects/{encode_component(project_id)}/stop",
        RequestOptions(method="POST"),
    )


async def get_files(path: str = "") -> ApiResult:
    return await call_api(f"/fs?path={encode_component(path)}")
