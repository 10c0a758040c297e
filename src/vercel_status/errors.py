from __future__ import annotations

from typing import Any

import httpx

GENERIC_FETCH_ERROR = "Failed to fetch deployments"
UNKNOWN_ERROR = "An unknown error occurred"


class DashboardError(Exception):
    """Base class for errors raised while refreshing the dashboard."""


class CredentialValidationError(DashboardError):
    """A credential has no team id or token, even after applying defaults."""


class UpstreamError(DashboardError):
    """Non-success response from the deployments endpoint."""

    def __init__(
        self,
        message: str,
        *,
        status_code: int | None = None,
        data: Any | None = None,
    ):
        super().__init__(message)
        self.status_code = status_code
        self.data = data

    @classmethod
    def from_response(cls, response: httpx.Response) -> UpstreamError:
        """Build an error from the ``error`` field of a failed response."""
        try:
            data = response.json()
        except ValueError:
            data = None
        message = _error_text(data) or GENERIC_FETCH_ERROR
        return cls(message, status_code=response.status_code, data=data)


class RefreshInProgressError(DashboardError):
    """A refresh was requested while another one is still running."""


def _error_text(data: Any) -> str | None:
    if not isinstance(data, dict):
        return None
    err = data.get("error")
    if isinstance(err, str):
        return err or None
    # The Vercel API nests errors as {"error": {"code", "message"}}
    if isinstance(err, dict):
        msg = err.get("message")
        if isinstance(msg, str) and msg:
            return msg
    return None


def describe(exc: BaseException) -> str:
    """Human-readable message for an exception raised during a refresh."""
    return str(exc) or UNKNOWN_ERROR


__all__ = [
    "DashboardError",
    "CredentialValidationError",
    "UpstreamError",
    "RefreshInProgressError",
    "GENERIC_FETCH_ERROR",
    "UNKNOWN_ERROR",
    "describe",
]
