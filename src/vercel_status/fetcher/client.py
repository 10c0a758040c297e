"""Deployment fetcher client classes."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any

import httpx

from .._http import AsyncTransport, BlockingTransport, HTTPConfig, iter_coroutine
from ..config import DashboardConfig
from ..credentials import Credential
from ..models import AggregateState
from ._core import _BaseDeploymentFetcher


def _http_config(config: DashboardConfig) -> HTTPConfig:
    return HTTPConfig(base_url=config.base_url, timeout=config.timeout)


class DeploymentFetcher(_BaseDeploymentFetcher):
    """Synchronous client that loads deployments for a list of credentials."""

    def __init__(
        self,
        config: DashboardConfig | None = None,
        *,
        client: httpx.Client | None = None,
    ):
        self._config = config or DashboardConfig()
        self._transport = BlockingTransport(_http_config(self._config), client=client)

    @property
    def config(self) -> DashboardConfig:
        return self._config

    def fetch_all(self, credentials: Iterable[Credential]) -> AggregateState:
        """Fetch and group deployments for every credential, all or nothing."""
        return iter_coroutine(self._fetch_all(credentials))

    def close(self) -> None:
        self._transport.close()

    def __enter__(self) -> DeploymentFetcher:
        return self

    def __exit__(self, *args: Any) -> None:
        self.close()


class AsyncDeploymentFetcher(_BaseDeploymentFetcher):
    """Asynchronous client that loads deployments for a list of credentials."""

    def __init__(self, config: DashboardConfig | None = None):
        self._config = config or DashboardConfig()
        self._transport = AsyncTransport(_http_config(self._config))

    @property
    def config(self) -> DashboardConfig:
        return self._config

    async def fetch_all(self, credentials: Iterable[Credential]) -> AggregateState:
        """Fetch and group deployments for every credential, all or nothing."""
        return await self._fetch_all(credentials)

    async def close(self) -> None:
        self._transport.close()

    async def __aenter__(self) -> AsyncDeploymentFetcher:
        return self

    async def __aexit__(self, *args: Any) -> None:
        await self.close()


__all__ = ["DeploymentFetcher", "AsyncDeploymentFetcher"]
