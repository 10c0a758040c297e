from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

READY_STATE = "READY"
UNKNOWN_TEAM = "Unknown Team"


def _numeric_or_none(value: Any) -> int | float | None:
    # Only real numbers count; "123", True and None are all treated as absent.
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return None
    return value


class Deployment(BaseModel):
    """A deployment record as returned by the Vercel API.

    Fields the dashboard does not use are kept as extras so the record can be
    passed on verbatim.
    """

    model_config = ConfigDict(populate_by_name=True, extra="allow", frozen=True)

    # Records without a name share the "" project bucket
    name: str = ""
    state: str | None = None
    created_at: int | float = Field(default=0, alias="createdAt")
    building_at: int | float | None = Field(default=None, alias="buildingAt")
    ready: int | float | None = None

    @field_validator("building_at", "ready", mode="before")
    @classmethod
    def _lenient_timestamp(cls, value: Any) -> int | float | None:
        return _numeric_or_none(value)

    @field_validator("created_at", mode="before")
    @classmethod
    def _lenient_created_at(cls, value: Any) -> int | float:
        numeric = _numeric_or_none(value)
        return 0 if numeric is None else numeric

    @property
    def build_time_ms(self) -> int | float | None:
        """Build duration, or None when the timestamps cannot be trusted."""
        if self.ready is None or self.building_at is None:
            return None
        if self.ready <= self.building_at:
            return None
        return self.ready - self.building_at

    @property
    def is_ready(self) -> bool:
        return self.state == READY_STATE


class TeamCreator(BaseModel):
    model_config = ConfigDict(extra="allow")

    username: str | None = None


class TeamInfo(BaseModel):
    model_config = ConfigDict(extra="allow")

    creator: TeamCreator | None = None

    @property
    def display_name(self) -> str:
        if self.creator is not None and self.creator.username:
            return self.creator.username
        return UNKNOWN_TEAM


class TeamDeploymentsResponse(BaseModel):
    """Payload of the relay endpoint: team info plus its deployments."""

    model_config = ConfigDict(extra="allow")

    team: TeamInfo | None = None
    deployments: list[Deployment] = Field(default_factory=list)

    @property
    def team_name(self) -> str:
        return self.team.display_name if self.team is not None else UNKNOWN_TEAM


@dataclass
class TeamResult:
    """Deployments of one team, bucketed by project name."""

    team_name: str
    projects: dict[str, list[Deployment]] = field(default_factory=dict)


AggregateState = dict[str, TeamResult]


__all__ = [
    "Deployment",
    "TeamCreator",
    "TeamInfo",
    "TeamDeploymentsResponse",
    "TeamResult",
    "AggregateState",
    "READY_STATE",
    "UNKNOWN_TEAM",
]
