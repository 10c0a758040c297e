"""Dashboard configuration.

Team id and token defaults come from here instead of being looked up in the
environment at fetch time. ``DashboardConfig.from_env`` builds one from the
process environment; tests and the relay pass explicit values.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Mapping

from ._http import DEFAULT_API_BASE_URL, DEFAULT_TIMEOUT

TEAM_ID_ENV = "VERCEL_TEAM_ID"
TOKEN_ENV = "VERCEL_TOKEN"
RELAY_URL_ENV = "VERCEL_STATUS_RELAY_URL"


def _get(env: Mapping[str, str], key: str) -> str | None:
    value = env.get(key)
    if value == "":
        return None
    return value


@dataclass(frozen=True)
class DashboardConfig:
    """Process-wide defaults applied when a credential field is blank."""

    default_team_id: str | None = None
    default_token: str | None = None
    relay_url: str | None = None
    base_url: str = DEFAULT_API_BASE_URL
    timeout: float = DEFAULT_TIMEOUT
    deployments_limit: int | None = None

    @classmethod
    def from_env(cls, env: Mapping[str, str] | None = None, **overrides) -> DashboardConfig:
        """Build a config from environment variables.

        Empty strings are treated as unset. Keyword overrides win over the
        environment.
        """
        source = os.environ if env is None else env
        values = {
            "default_team_id": _get(source, TEAM_ID_ENV),
            "default_token": _get(source, TOKEN_ENV),
            "relay_url": _get(source, RELAY_URL_ENV),
        }
        values.update({k: v for k, v in overrides.items() if v is not None})
        return cls(**values)

    def resolve_team_id(self, team_id: str | None) -> str | None:
        return team_id or self.default_team_id or None

    def resolve_token(self, token: str | None) -> str | None:
        return token or self.default_token or None


__all__ = ["DashboardConfig", "TEAM_ID_ENV", "TOKEN_ENV", "RELAY_URL_ENV"]
