"""Request executor shared by every endpoint binding.

``call_api`` sends exactly one HTTP request to the pi-manager backend and
normalises the outcome:

* non-2xx status  → :class:`~pimanager.api.errors.ApiError`
* JSON response   → decoded value
* anything else   → body text

Transport errors (``httpx.ConnectError`` and friends) and JSON decoding
errors are not caught here; they reach the caller unchanged.
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field
from typing import Any, Dict, List, Mapping, Optional, Union

import httpx

from pimanager.api.errors import ApiError
from pimanager.config import settings

logger = logging.getLogger(__name__)

API_BASE_PATH = "/api/v1"

_DEFAULT_HEADERS = {"Content-Type": "application/json"}

JsonValue = Union[Dict[str, Any], List[Any], str, int, float, bool, None]
ApiResult = Union[JsonValue, str]


@dataclass
class RequestOptions:
    """Per-call request configuration."""

    method: str = "GET"
    headers: Mapping[str, str] = field(default_factory=dict)
    body: Optional[str] = None


def _build_url(path: str) -> str:
    # Plain concatenation: the caller supplies a well-formed relative path.
    return f"{settings.api_host}{API_BASE_PATH}{path}"


def _merge_headers(headers: Mapping[str, str]) -> httpx.Headers:
    """Return the default headers overridden by *headers* (case-insensitive)."""
    merged = httpx.Headers(_DEFAULT_HEADERS)
    merged.update(headers)
    return merged


def _is_json(response: httpx.Response) -> bool:
    return "application/json" in response.headers.get("content-type", "")


async def call_api(path: str, options: Optional[RequestOptions] = None) -> ApiResult:
    """Send one request to ``API_BASE_PATH + path`` and return the decoded body.

    Args:
        path: Path relative to the API base, e.g. ``"/projects"``.  Any
            identifier embedded in it must already be percent-encoded.
        options: Method, extra headers and pre-serialised body.

    Raises:
        ApiError: If the backend returns a non-2xx status.
        httpx.TransportError: If no response could be obtained.
        json.JSONDecodeError: If a JSON response body cannot be parsed.
    """
    options = options or RequestOptions()
    url = _build_url(path)
    logger.debug("%s %s", options.method, url)

    async with httpx.AsyncClient(timeout=None, follow_redirects=True) as client:
        response = await client.request(
            options.method,
            url,
            headers=_merge_headers(options.headers),
            content=options.body,
        )

    if not response.is_success:
        # Error bodies are always read as text, whatever their content type.
        error = ApiError(response.status_code, response.reason_phrase, response.text)
        logger.warning("%s %s failed: %s", options.method, url, error)
        raise error

    if _is_json(response):
        # Undecodable bytes become U+FFFD, so only malformed JSON fails here.
        return json.loads(response.content.decode("utf-8", errors="replace"))
    return response.text
