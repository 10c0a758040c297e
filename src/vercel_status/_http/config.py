"""HTTP configuration shared by the dashboard clients."""

from __future__ import annotations

from dataclasses import dataclass, field

DEFAULT_API_BASE_URL = "https://api.vercel.com"
DEFAULT_TIMEOUT = 60.0


@dataclass
class HTTPConfig:
    """Configuration for HTTP requests made by a transport."""

    base_url: str = DEFAULT_API_BASE_URL
    timeout: float = DEFAULT_TIMEOUT
    default_headers: dict[str, str] = field(default_factory=dict)

    def get_headers(self, bearer: str | None = None) -> dict[str, str]:
        """Build request headers, with authorization when a bearer is given."""
        headers = {
            "accept": "application/json",
            "content-type": "application/json",
            **self.default_headers,
        }
        if bearer:
            headers["authorization"] = f"Bearer {bearer}"
        return headers

    def build_url(self, path: str) -> str:
        return self.base_url.rstrip("/") + path


__all__ = ["HTTPConfig", "DEFAULT_API_BASE_URL", "DEFAULT_TIMEOUT"]
