"""Fixtures for integration tests using respx mocking."""

import json

import httpx
import pytest
import respx

VERCEL_API_BASE = "https://api.vercel.com"
RELAY_BASE = "https://relay.test"


class FakeVercel:
    """Serves per-team deployments and team info from in-memory data."""

    def __init__(self) -> None:
        self.teams: dict[str, dict] = {}
        self.failures: dict[str, httpx.Response] = {}

    def add_team(self, team_id: str, token: str, username: str | None, deployments: list[dict]):
        team: dict = {"id": team_id, "slug": team_id}
        if username is not None:
            team["creator"] = {"username": username}
        self.teams[team_id] = {"token": token, "team": team, "deployments": deployments}

    def fail(self, team_id: str, response: httpx.Response) -> None:
        self.failures[team_id] = response

    def _authorize(self, request: httpx.Request, team_id: str) -> httpx.Response | None:
        if team_id in self.failures:
            return self.failures[team_id]
        entry = self.teams.get(team_id)
        if entry is None:
            return httpx.Response(404, json={"error": {"code": "not_found", "message": "Team not found"}})
        if request.headers.get("authorization") != f"Bearer {entry['token']}":
            return httpx.Response(403, json={"error": {"code": "forbidden", "message": "Not authorized"}})
        return None

    def deployments(self, request: httpx.Request) -> httpx.Response:
        team_id = request.url.params.get("teamId", "")
        denied = self._authorize(request, team_id)
        if denied is not None:
            return denied
        return httpx.Response(
            200,
            json={"deployments": self.teams[team_id]["deployments"], "pagination": {"count": 0}},
        )

    def team(self, request: httpx.Request, team_id: str) -> httpx.Response:
        denied = self._authorize(request, team_id)
        if denied is not None:
            return denied
        return httpx.Response(200, json=self.teams[team_id]["team"])

    def relay(self, request: httpx.Request) -> httpx.Response:
        body = json.loads(request.content)
        team_id = body.get("teamId") or ""
        if team_id in self.failures:
            return self.failures[team_id]
        entry = self.teams.get(team_id)
        if entry is None or body.get("apiToken") != entry["token"]:
            return httpx.Response(403, json={"error": "Invalid team or token"})
        return httpx.Response(
            200, json={"team": entry["team"], "deployments": entry["deployments"]}
        )


@pytest.fixture
def fake_vercel() -> FakeVercel:
    return FakeVercel()


@pytest.fixture
def api_mock(fake_vercel: FakeVercel):
    """Mock the Vercel API and the relay endpoint."""
    with respx.mock(assert_all_called=False) as mock:
        mock.get(f"{VERCEL_API_BASE}/v6/deployments").mock(side_effect=fake_vercel.deployments)
        mock.get(url__regex=rf"{VERCEL_API_BASE}/v2/teams/(?P<team_id>[^/?]+)").mock(
            side_effect=fake_vercel.team
        )
        mock.post(f"{RELAY_BASE}/api/vercel").mock(side_effect=fake_vercel.relay)
        yield mock
