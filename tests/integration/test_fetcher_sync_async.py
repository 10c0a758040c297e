"""
Integration tests for the deployment fetcher.

Both the sync and async clients run against a mocked Vercel API and a mocked
relay endpoint; they must produce the same grouped results and fail the
same way.
"""

import httpx
import pytest

from vercel_status import (
    AsyncDeploymentFetcher,
    Credential,
    CredentialValidationError,
    DashboardConfig,
    DeploymentFetcher,
    UpstreamError,
    fetch_all,
)
from vercel_status.fetcher import aio

from .conftest import RELAY_BASE


@pytest.fixture
def two_teams(fake_vercel, make_deployment):
    fake_vercel.add_team(
        "team_a",
        "tok_a",
        "alice",
        [
            make_deployment("web", created_at=1, building_at=10, ready=2010),
            make_deployment("web", created_at=3, state="ERROR"),
            make_deployment("docs", created_at=2, building_at=0, ready=500),
        ],
    )
    fake_vercel.add_team("team_b", "tok_b", None, [make_deployment("api", created_at=7)])
    return [Credential("team_a", "tok_a"), Credential("team_b", "tok_b")]


class TestFetchAll:
    def test_groups_by_team_and_project(self, api_mock, two_teams):
        with DeploymentFetcher() as fetcher:
            state = fetcher.fetch_all(two_teams)

        assert list(state) == ["team_a", "team_b"]
        assert state["team_a"].team_name == "alice"
        assert state["team_b"].team_name == "Unknown Team"
        assert [d.created_at for d in state["team_a"].projects["web"]] == [3, 1]
        assert set(state["team_a"].projects) == {"web", "docs"}
        assert [d.name for d in state["team_b"].projects["api"]] == ["api"]

    def test_sends_team_id_and_bearer_token(self, api_mock, two_teams):
        fetch_all(two_teams[:1])

        request = api_mock.calls[0].request
        assert request.url.path == "/v6/deployments"
        assert request.url.params["teamId"] == "team_a"
        assert request.headers["authorization"] == "Bearer tok_a"

    def test_requests_are_sequential_in_credential_order(self, api_mock, two_teams):
        fetch_all(list(reversed(two_teams)))

        team_ids = [
            call.request.url.params.get("teamId") or call.request.url.path.rsplit("/", 1)[-1]
            for call in api_mock.calls
        ]
        assert team_ids == ["team_b", "team_b", "team_a", "team_a"]

    def test_deployments_limit_is_forwarded(self, api_mock, two_teams):
        fetch_all(two_teams[:1], config=DashboardConfig(deployments_limit=50))
        assert api_mock.calls[0].request.url.params["limit"] == "50"

    def test_blank_fields_fall_back_to_config_defaults(self, api_mock, two_teams):
        config = DashboardConfig(default_team_id="team_a", default_token="tok_a")
        state = fetch_all([Credential("", ""), Credential("team_b", "tok_b")], config=config)
        assert list(state) == ["team_a", "team_b"]

    def test_explicit_values_win_over_defaults(self, api_mock, two_teams):
        config = DashboardConfig(default_team_id="team_a", default_token="tok_a")
        state = fetch_all([Credential("team_b", "tok_b")], config=config)
        assert list(state) == ["team_b"]

    def test_is_idempotent(self, api_mock, two_teams):
        first = fetch_all(two_teams)
        second = fetch_all(two_teams)
        assert first == second

    def test_duplicate_team_ids_collapse_to_one_entry(self, api_mock, two_teams):
        state = fetch_all([two_teams[0], two_teams[0]])
        assert list(state) == ["team_a"]


class TestValidation:
    def test_empty_credentials(self, api_mock):
        with pytest.raises(CredentialValidationError, match="At least one team is required"):
            fetch_all([])
        assert not api_mock.calls

    def test_missing_team_id_makes_no_network_calls(self, api_mock, two_teams):
        with pytest.raises(CredentialValidationError, match="Team ID is required for all teams"):
            fetch_all([two_teams[0], Credential("", "tok_x")])
        assert not api_mock.calls

    def test_missing_token_makes_no_network_calls(self, api_mock, two_teams):
        with pytest.raises(CredentialValidationError, match="API Token is required for all teams"):
            fetch_all([two_teams[0], Credential("team_b", "")])
        assert not api_mock.calls


class TestUpstreamErrors:
    def test_upstream_error_message_is_propagated(self, api_mock, fake_vercel, two_teams):
        fake_vercel.fail(
            "team_b",
            httpx.Response(403, json={"error": {"code": "forbidden", "message": "Token revoked"}}),
        )
        with pytest.raises(UpstreamError, match="Token revoked") as exc_info:
            fetch_all(two_teams)
        assert exc_info.value.status_code == 403

    def test_generic_message_without_error_body(self, api_mock, fake_vercel, two_teams):
        fake_vercel.fail("team_a", httpx.Response(500, text="upstream exploded"))
        with pytest.raises(UpstreamError, match="Failed to fetch deployments"):
            fetch_all(two_teams)

    def test_failure_stops_remaining_credentials(self, api_mock, fake_vercel, two_teams):
        fake_vercel.fail("team_a", httpx.Response(401, json={"error": "Unauthorized"}))
        with pytest.raises(UpstreamError, match="Unauthorized"):
            fetch_all(two_teams)
        assert all("team_b" not in str(call.request.url) for call in api_mock.calls)


class TestRelayMode:
    @pytest.fixture
    def relay_config(self):
        return DashboardConfig(relay_url=RELAY_BASE)

    def test_one_post_per_credential(self, api_mock, two_teams, relay_config):
        state = fetch_all(two_teams, config=relay_config)

        assert len(api_mock.calls) == 2
        request = api_mock.calls[0].request
        assert request.method == "POST"
        assert str(request.url) == f"{RELAY_BASE}/api/vercel"
        assert "authorization" not in request.headers
        assert state["team_a"].team_name == "alice"

    def test_relay_error_text(self, api_mock, two_teams, relay_config):
        with pytest.raises(UpstreamError, match="Invalid team or token"):
            fetch_all([Credential("team_a", "wrong")], config=relay_config)

    def test_same_result_as_direct_mode(self, api_mock, two_teams, relay_config):
        assert fetch_all(two_teams, config=relay_config) == fetch_all(two_teams)


class TestAsyncFetcher:
    @pytest.mark.asyncio
    async def test_matches_sync_result(self, api_mock, two_teams):
        async with AsyncDeploymentFetcher() as fetcher:
            async_state = await fetcher.fetch_all(two_teams)
        assert async_state == fetch_all(two_teams)

    @pytest.mark.asyncio
    async def test_module_function(self, api_mock, two_teams):
        state = await aio.fetch_all(two_teams, config=DashboardConfig(relay_url=RELAY_BASE))
        assert list(state) == ["team_a", "team_b"]

    @pytest.mark.asyncio
    async def test_validation_error(self, api_mock):
        with pytest.raises(CredentialValidationError):
            await aio.fetch_all([Credential()])
        assert not api_mock.calls

    @pytest.mark.asyncio
    async def test_upstream_error(self, api_mock, fake_vercel, two_teams):
        fake_vercel.fail("team_a", httpx.Response(429, json={"error": "Rate limited"}))
        with pytest.raises(UpstreamError, match="Rate limited"):
            await aio.fetch_all(two_teams)


class TestMalformedResponses:
    @pytest.mark.parametrize("body", [[], "deployments", None])
    def test_non_object_deployments_body(self, api_mock, fake_vercel, two_teams, body):
        fake_vercel.fail("team_a", httpx.Response(200, json=body))
        with pytest.raises(UpstreamError, match="Failed to fetch deployments") as exc_info:
            fetch_all(two_teams[:1])
        assert exc_info.value.status_code == 200

    def test_non_json_relay_body(self, api_mock, fake_vercel, two_teams):
        fake_vercel.fail("team_a", httpx.Response(200, text="<html>gateway</html>"))
        with pytest.raises(UpstreamError, match="Failed to fetch deployments"):
            fetch_all(two_teams[:1], config=DashboardConfig(relay_url=RELAY_BASE))
