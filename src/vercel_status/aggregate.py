"""Grouping of fetched deployments by project."""

from __future__ import annotations

from collections.abc import Iterable, Iterator

from .models import AggregateState, Deployment, TeamResult


def group_by_project(deployments: Iterable[Deployment]) -> dict[str, list[Deployment]]:
    """Bucket deployments by project name, newest first within each bucket.

    ``sorted`` is stable, so deployments sharing a ``createdAt`` keep their
    upstream order.
    """
    buckets: dict[str, list[Deployment]] = {}
    for deployment in deployments:
        buckets.setdefault(deployment.name, []).append(deployment)
    return {
        name: sorted(items, key=lambda d: d.created_at, reverse=True)
        for name, items in buckets.items()
    }


def build_team_result(team_name: str, deployments: Iterable[Deployment]) -> TeamResult:
    return TeamResult(team_name=team_name, projects=group_by_project(deployments))


def iter_deployments(state: AggregateState) -> Iterator[Deployment]:
    """Yield every deployment, team by team and project by project."""
    for team in state.values():
        for deployments in team.projects.values():
            yield from deployments


__all__ = ["group_by_project", "build_team_result", "iter_deployments"]
