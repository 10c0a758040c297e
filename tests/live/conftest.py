"""Fixtures for live API tests.

These tests require real API credentials set via environment variables:
- VERCEL_TOKEN: Vercel API token
- VERCEL_TEAM_ID: Vercel team ID
"""

import os

import pytest


def has_vercel_credentials() -> bool:
    """Check if Vercel API credentials are available."""
    return bool(os.getenv("VERCEL_TOKEN") and os.getenv("VERCEL_TEAM_ID"))


requires_vercel_credentials = pytest.mark.skipif(
    not has_vercel_credentials(),
    reason="Requires VERCEL_TOKEN and VERCEL_TEAM_ID environment variables",
)


@pytest.fixture
def vercel_token() -> str:
    return os.environ["VERCEL_TOKEN"]


@pytest.fixture
def vercel_team_id() -> str:
    return os.environ["VERCEL_TEAM_ID"]
