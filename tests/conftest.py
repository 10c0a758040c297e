"""Shared fixtures for all tests."""

from collections.abc import Generator

import pytest

from vercel_status import DashboardConfig


@pytest.fixture
def mock_env_clear(monkeypatch: pytest.MonkeyPatch) -> Generator[None, None, None]:
    """Clear dashboard-related environment variables for testing.

    This ensures tests don't accidentally use real credentials from the environment.
    """
    for var in ["VERCEL_TOKEN", "VERCEL_TEAM_ID", "VERCEL_STATUS_RELAY_URL"]:
        monkeypatch.delenv(var, raising=False)
    yield


@pytest.fixture
def mock_token() -> str:
    """Mock Vercel API token for testing."""
    return "test_token_123456789"


@pytest.fixture
def mock_team_id() -> str:
    """Mock Vercel team ID for testing."""
    return "team_test123456789"


@pytest.fixture
def config() -> DashboardConfig:
    """Config with no defaults, talking to the Vercel API directly."""
    return DashboardConfig()


def make_deployment(
    name: str,
    *,
    state: str = "READY",
    created_at: int = 1_700_000_000_000,
    building_at: int | None = None,
    ready: int | None = None,
    **extra,
) -> dict:
    """Build a deployment record shaped like the Vercel API response."""
    record = {
        "uid": f"dpl_{name}_{created_at}",
        "name": name,
        "url": f"{name}-abc123.vercel.app",
        "state": state,
        "createdAt": created_at,
    }
    if building_at is not None:
        record["buildingAt"] = building_at
    if ready is not None:
        record["ready"] = ready
    record.update(extra)
    return record


@pytest.fixture(name="make_deployment")
def make_deployment_fixture():
    """Factory for Vercel-shaped deployment records."""
    return make_deployment
