"""Errors raised by the request executor."""

from __future__ import annotations


class ApiError(Exception):
    """The backend answered with a non-success HTTP status.

    ``str(err)`` is ``"{status} {status_text} - {body}"`` where *body* is the
    verbatim response text.
    """

    def __init__(self, status: int, status_text: str, body: str) -> None:
        self.status = status
        self.status_text = status_text
        self.body = body
        super().__init__(f"{status} {status_text} - {body}")
