"""Deployment fetching - asynchronous functions."""

from __future__ import annotations

from collections.abc import Iterable

from ..config import DashboardConfig
from ..credentials import Credential
from ..models import AggregateState
from .client import AsyncDeploymentFetcher


async def fetch_all(
    credentials: Iterable[Credential],
    *,
    config: DashboardConfig | None = None,
) -> AggregateState:
    """Fetch deployments for every credential (async)."""
    async with AsyncDeploymentFetcher(config) as fetcher:
        return await fetcher.fetch_all(credentials)


__all__ = ["fetch_all"]
