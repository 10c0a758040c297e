"""HTTP relay that loads a team's deployments on behalf of a browser client.

``POST /api/vercel`` takes ``{"teamId", "apiToken"}`` and answers with
``{"team", "deployments"}`` or ``{"error"}`` and a non-2xx status, which is
what the relay mode of the fetcher expects.
"""

from __future__ import annotations

import logging

import fastapi
from fastapi.responses import JSONResponse
from pydantic import BaseModel, ConfigDict, Field

from ._http import AsyncTransport, HTTPConfig
from .config import DashboardConfig
from .errors import UpstreamError
from .upstream import RELAY_PATH, fetch_from_api

logger = logging.getLogger(__name__)

MISSING_CREDENTIALS = "Team ID and API Token are required"


class RelayRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    team_id: str | None = Field(default=None, alias="teamId")
    api_token: str | None = Field(default=None, alias="apiToken")


def create_app(config: DashboardConfig | None = None) -> fastapi.FastAPI:
    """Build the relay application.

    Blank ``teamId``/``apiToken`` values fall back to the config defaults.
    """
    config = config or DashboardConfig.from_env()
    transport = AsyncTransport(HTTPConfig(base_url=config.base_url, timeout=config.timeout))
    app = fastapi.FastAPI(title="vercel-status relay")

    @app.post(RELAY_PATH)
    async def relay(payload: RelayRequest):
        team_id = config.resolve_team_id(payload.team_id)
        token = config.resolve_token(payload.api_token)
        if not team_id or not token:
            return JSONResponse({"error": MISSING_CREDENTIALS}, status_code=400)

        try:
            return await fetch_from_api(
                transport,
                team_id=team_id,
                token=token,
                limit=config.deployments_limit,
            )
        except UpstreamError as exc:
            logger.info("Upstream request for team %s failed: %s", team_id, exc)
            return JSONResponse({"error": str(exc)}, status_code=exc.status_code or 502)

    return app


__all__ = ["create_app", "RelayRequest"]
