"""Shared HTTP infrastructure for the dashboard clients."""

from .config import DEFAULT_API_BASE_URL, DEFAULT_TIMEOUT, HTTPConfig
from .iter_coroutine import iter_coroutine
from .transport import (
    AsyncTransport,
    BaseTransport,
    BlockingTransport,
    JSONBody,
    RequestBody,
)

__all__ = [
    "DEFAULT_API_BASE_URL",
    "DEFAULT_TIMEOUT",
    "HTTPConfig",
    "iter_coroutine",
    "BaseTransport",
    "BlockingTransport",
    "AsyncTransport",
    "JSONBody",
    "RequestBody",
]
