"""Best-effort repository star count for the dashboard header."""

from __future__ import annotations

import logging

import httpx

from ._http import (
    DEFAULT_TIMEOUT,
    AsyncTransport,
    BaseTransport,
    BlockingTransport,
    HTTPConfig,
    iter_coroutine,
)

logger = logging.getLogger(__name__)

GITHUB_API_BASE_URL = "https://api.github.com"
DEFAULT_REPOSITORY = "ThalesAugusto0/vercel-status-tracker"


async def _get_stargazers_count(transport: BaseTransport, repository: str) -> int:
    try:
        resp = await transport.send(
            "GET",
            f"/repos/{repository}",
            headers={"accept": "application/vnd.github+json"},
        )
    except httpx.HTTPError as exc:
        logger.debug("Star count request for %s failed: %s", repository, exc)
        return 0

    if resp.status_code != 200:
        logger.debug("Star count request for %s returned %s", repository, resp.status_code)
        return 0
    try:
        data = resp.json()
    except ValueError:
        return 0
    count = data.get("stargazers_count") if isinstance(data, dict) else None
    return count if isinstance(count, int) else 0


def get_stargazers_count(
    repository: str = DEFAULT_REPOSITORY,
    *,
    timeout: float = DEFAULT_TIMEOUT,
) -> int:
    """Return the repository's star count, or 0 when it cannot be loaded."""
    transport = BlockingTransport(HTTPConfig(base_url=GITHUB_API_BASE_URL, timeout=timeout))
    try:
        return iter_coroutine(_get_stargazers_count(transport, repository))
    finally:
        transport.close()


async def get_stargazers_count_async(
    repository: str = DEFAULT_REPOSITORY,
    *,
    timeout: float = DEFAULT_TIMEOUT,
) -> int:
    """Return the repository's star count, or 0 when it cannot be loaded (async)."""
    transport = AsyncTransport(HTTPConfig(base_url=GITHUB_API_BASE_URL, timeout=timeout))
    return await _get_stargazers_count(transport, repository)


__all__ = [
    "get_stargazers_count",
    "get_stargazers_count_async",
    "DEFAULT_REPOSITORY",
    "GITHUB_API_BASE_URL",
]
