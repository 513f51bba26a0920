"""Glue between sync typer commands and the async API bindings."""

from __future__ import annotations

import asyncio
import json
from typing import Any, Awaitable, TypeVar

import httpx
import typer

from pimanager.api.errors import ApiError
from pimanager.config import settings

T = TypeVar("T")


def run_api(awaitable: Awaitable[T]) -> T:
    """Run *awaitable* to completion, turning API failures into a CLI exit.

    HTTP, transport and decoding failures are printed and abort the command
    with exit code 1.
    """
    try:
        return asyncio.run(_await(awaitable))
    except ApiError as exc:
        typer.echo(f"❌ {exc}")
        raise typer.Exit(code=1)
    except httpx.TransportError as exc:
        typer.echo(f"❌ Cannot reach {settings.api_host}: {exc}")
        raise typer.Exit(code=1)
    except json.JSONDecodeError as exc:
        typer.echo(f"❌ Invalid JSON from backend: {exc}")
        raise typer.Exit(code=1)


async def _await(awaitable: Awaitable[T]) -> T:
    return await awaitable


def expect_dict(value: Any, what: str) -> dict[str, Any]:
    """Abort unless the backend returned a JSON object."""
    if not isinstance(value, dict):
        typer.echo(f"❌ Unexpected {what} response: {value!r}")
        raise typer.Exit(code=1)
    return value


def expect_list(value: Any, what: str) -> list[Any]:
    """Abort unless the backend returned a JSON array."""
    if not isinstance(value, list):
        typer.echo(f"❌ Unexpected {what} response: {value!r}")
        raise typer.Exit(code=1)
    return value
