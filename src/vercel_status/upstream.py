"""Requests that load one team's deployments.

Two routes lead to the same ``{"team": ..., "deployments": [...]}`` payload:
the relay endpoint (one POST carrying the team id and token) or the Vercel
REST API itself (deployments list plus team lookup).
"""

from __future__ import annotations

import logging
import urllib.parse
from typing import Any

import httpx

from ._http import BaseTransport, JSONBody
from .errors import GENERIC_FETCH_ERROR, UpstreamError

logger = logging.getLogger(__name__)

RELAY_PATH = "/api/vercel"
DEPLOYMENTS_PATH = "/v6/deployments"
TEAM_PATH = "/v2/teams/{team_id}"


def _is_success(status_code: int) -> bool:
    return 200 <= status_code < 300


def _json_object(resp: httpx.Response) -> dict[str, Any]:
    """Decode a successful response body that must be a JSON object."""
    try:
        data = resp.json()
    except ValueError:
        data = None
    if not isinstance(data, dict):
        raise UpstreamError(GENERIC_FETCH_ERROR, status_code=resp.status_code, data=data)
    return data


async def fetch_via_relay(
    transport: BaseTransport,
    relay_url: str,
    *,
    team_id: str,
    token: str,
    timeout: float | None = None,
) -> dict[str, Any]:
    """POST the credential to the relay and return its payload."""
    url = relay_url.rstrip("/") + RELAY_PATH
    resp = await transport.send(
        "POST",
        url,
        body=JSONBody({"teamId": team_id, "apiToken": token}),
        timeout=timeout,
    )
    if not _is_success(resp.status_code):
        raise UpstreamError.from_response(resp)
    return _json_object(resp)


async def fetch_from_api(
    transport: BaseTransport,
    *,
    team_id: str,
    token: str,
    limit: int | None = None,
    timeout: float | None = None,
) -> dict[str, Any]:
    """Query the Vercel API for a team's deployments and team info."""
    params: dict[str, Any] = {"teamId": team_id}
    if limit is not None:
        params["limit"] = limit

    resp = await transport.send(
        "GET", DEPLOYMENTS_PATH, token=token, params=params, timeout=timeout
    )
    if not _is_success(resp.status_code):
        raise UpstreamError.from_response(resp)
    deployments = _json_object(resp).get("deployments", [])

    team_resp = await transport.send(
        "GET",
        TEAM_PATH.format(team_id=urllib.parse.quote(team_id, safe="")),
        token=token,
        timeout=timeout,
    )
    if not _is_success(team_resp.status_code):
        raise UpstreamError.from_response(team_resp)

    logger.debug("Loaded %d deployments for team %s", len(deployments), team_id)
    return {"team": _json_object(team_resp), "deployments": deployments}


__all__ = ["fetch_via_relay", "fetch_from_api", "RELAY_PATH", "DEPLOYMENTS_PATH", "TEAM_PATH"]
