"""Core logic for loading deployments of every configured team."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass

from .._http import BaseTransport
from ..aggregate import build_team_result
from ..config import DashboardConfig
from ..credentials import Credential
from ..errors import CredentialValidationError
from ..models import AggregateState, TeamDeploymentsResponse, TeamResult
from ..upstream import fetch_from_api, fetch_via_relay

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ResolvedCredential:
    """A credential with defaults applied; both fields are non-empty."""

    team_id: str
    token: str

    def __repr__(self) -> str:
        return f"ResolvedCredential(team_id={self.team_id!r})"


def resolve_credentials(
    credentials: Iterable[Credential],
    config: DashboardConfig,
) -> list[ResolvedCredential]:
    """Apply config defaults and validate every credential.

    Raises CredentialValidationError for the first unusable entry. Nothing
    touches the network until the whole list has passed.
    """
    items = list(credentials)
    if not items:
        raise CredentialValidationError("At least one team is required")

    resolved: list[ResolvedCredential] = []
    for credential in items:
        team_id = config.resolve_team_id(credential.team_id)
        if not team_id:
            raise CredentialValidationError("Team ID is required for all teams")
        token = config.resolve_token(credential.api_token)
        if not token:
            raise CredentialValidationError("API Token is required for all teams")
        resolved.append(ResolvedCredential(team_id=team_id, token=token))
    return resolved


class _BaseDeploymentFetcher:
    """
    Base class containing the shared fetch logic.

    All methods are async and use the _transport attribute for HTTP requests.
    Subclasses provide a blocking or an async transport.
    """

    _transport: BaseTransport
    _config: DashboardConfig

    async def _fetch_team(self, credential: ResolvedCredential) -> TeamResult:
        if self._config.relay_url:
            payload = await fetch_via_relay(
                self._transport,
                self._config.relay_url,
                team_id=credential.team_id,
                token=credential.token,
            )
        else:
            payload = await fetch_from_api(
                self._transport,
                team_id=credential.team_id,
                token=credential.token,
                limit=self._config.deployments_limit,
            )
        response = TeamDeploymentsResponse.model_validate(payload)
        return build_team_result(response.team_name, response.deployments)

    async def _fetch_all(self, credentials: Iterable[Credential]) -> AggregateState:
        """Fetch every team in order; any failure discards all results."""
        resolved = resolve_credentials(credentials, self._config)

        state: AggregateState = {}
        for credential in resolved:
            logger.debug("Fetching deployments for team %s", credential.team_id)
            state[credential.team_id] = await self._fetch_team(credential)

        logger.info("Fetched deployments for %d team(s)", len(state))
        return state


__all__ = ["ResolvedCredential", "resolve_credentials"]
