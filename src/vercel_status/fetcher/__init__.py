"""Deployment fetching - synchronous functions."""

from __future__ import annotations

from collections.abc import Iterable

from ..config import DashboardConfig
from ..credentials import Credential
from ..models import AggregateState
from ._core import ResolvedCredential, resolve_credentials
from .client import AsyncDeploymentFetcher, DeploymentFetcher


def fetch_all(
    credentials: Iterable[Credential],
    *,
    config: DashboardConfig | None = None,
) -> AggregateState:
    """Fetch deployments for every credential and group them by team and project.

    Parameters:
    - credentials: team id / token pairs, queried one at a time in order
    - config: defaults for blank fields, relay URL, API base URL and timeout

    Returns: mapping of resolved team id -> TeamResult. Raises on the first
    failure without returning partial results.
    """
    with DeploymentFetcher(config) as fetcher:
        return fetcher.fetch_all(credentials)


__all__ = [
    "fetch_all",
    "DeploymentFetcher",
    "AsyncDeploymentFetcher",
    "ResolvedCredential",
    "resolve_credentials",
]
