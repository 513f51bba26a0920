"""API package — request executor and endpoint bindings."""

from pimanager.api.client import API_BASE_PATH, ApiResult, RequestOptions, call_api
from pimanager.api.endpoints import (
    create_project,
    delete_project,
    encode_component,
    get_files,
    get_health,
    get_info,
    get_last_boot,
    get_pi_health,
    get_project,
    get_projects,
    start_project,
    stop_project,
)
from pimanager.api.errors import ApiError

__all__ = [
    "API_BASE_PATH",
    "ApiError",
    "ApiResult",
    "RequestOptions",
    "call_api",
    "create_project",
    "delete_project",
    "encode_component",
    "get_files",
    "get_health",
    "get_info",
    "get_last_boot",
    "get_pi_health",
    "get_project",
    "get_projects",
    "start_project",
    "stop_project",
]
