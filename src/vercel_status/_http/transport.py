"""HTTP transport implementations for sync and async clients."""

from __future__ import annotations

import abc
from dataclasses import dataclass
from typing import Any

import httpx

from .config import HTTPConfig


@dataclass(frozen=True, slots=True)
class JSONBody:
    """JSON request body."""

    data: Any


RequestBody = JSONBody | None


class BaseTransport(abc.ABC):
    """Abstract base class for HTTP transports.

    Unlike a single-account SDK client, the dashboard talks to several teams
    with different tokens, so the bearer is passed per request.
    """

    def __init__(self, config: HTTPConfig) -> None:
        self._config = config

    @property
    def config(self) -> HTTPConfig:
        return self._config

    def _prepare(
        self,
        path: str,
        token: str | None,
        headers: dict[str, str] | None,
        timeout: float | None,
    ) -> tuple[str, dict[str, str], float]:
        url = path if path.startswith(("http://", "https://")) else self._config.build_url(path)
        request_headers = self._config.get_headers(token)
        if headers:
            request_headers.update(headers)
        effective_timeout = timeout if timeout is not None else self._config.timeout
        return url, request_headers, effective_timeout

    @abc.abstractmethod
    async def send(
        self,
        method: str,
        path: str,
        *,
        token: str | None = None,
        params: dict[str, Any] | None = None,
        body: RequestBody = None,
        headers: dict[str, str] | None = None,
        timeout: float | None = None,
    ) -> httpx.Response:
        """Send an HTTP request and return the response."""
        ...

    @abc.abstractmethod
    def close(self) -> None:
        """Close any underlying resources."""
        ...


class BlockingTransport(BaseTransport):
    """
    Synchronous HTTP transport using httpx.Client.

    Methods are declared async but don't actually await anything,
    allowing them to be executed via iter_coroutine().
    """

    def __init__(self, config: HTTPConfig, *, client: httpx.Client | None = None) -> None:
        super().__init__(config)
        self._client = client
        self._owns_client = client is None

    def _get_client(self) -> httpx.Client:
        if self._client is None:
            self._client = httpx.Client(timeout=httpx.Timeout(self._config.timeout))
        return self._client

    async def send(
        self,
        method: str,
        path: str,
        *,
        token: str | None = None,
        params: dict[str, Any] | None = None,
        body: RequestBody = None,
        headers: dict[str, str] | None = None,
        timeout: float | None = None,
    ) -> httpx.Response:
        """Send a synchronous HTTP request (wrapped as async for iter_coroutine)."""
        url, request_headers, effective_timeout = self._prepare(path, token, headers, timeout)
        json_data = body.data if isinstance(body, JSONBody) else None
        return self._get_client().request(
            method,
            url,
            params=params or None,
            json=json_data,
            headers=request_headers,
            timeout=httpx.Timeout(effective_timeout),
        )

    def close(self) -> None:
        """Close the underlying HTTP client."""
        if self._client is not None and self._owns_client:
            self._client.close()
        self._client = None


class AsyncTransport(BaseTransport):
    """Asynchronous HTTP transport using httpx.AsyncClient."""

    def __init__(self, config: HTTPConfig) -> None:
        super().__init__(config)

    async def send(
        self,
        method: str,
        path: str,
        *,
        token: str | None = None,
        params: dict[str, Any] | None = None,
        body: RequestBody = None,
        headers: dict[str, str] | None = None,
        timeout: float | None = None,
    ) -> httpx.Response:
        """Send an asynchronous HTTP request."""
        url, request_headers, effective_timeout = self._prepare(path, token, headers, timeout)
        json_data = body.data if isinstance(body, JSONBody) else None

        # Use a fresh client for each request (ephemeral pattern)
        async with httpx.AsyncClient(timeout=httpx.Timeout(effective_timeout)) as client:
            resp = await client.request(
                method,
                url,
                params=params or None,
                json=json_data,
                headers=request_headers,
            )
        return resp

    def close(self) -> None:
        """Close the underlying HTTP client (no-op for ephemeral pattern)."""
        pass


__all__ = [
    "BaseTransport",
    "BlockingTransport",
    "AsyncTransport",
    "JSONBody",
    "RequestBody",
]
