"""Plain-text rendering of the dashboard."""

from __future__ import annotations

from datetime import datetime, timezone

from .models import AggregateState, Deployment
from .stats import DeploymentStats

ERROR_HINT = "Please enter valid Vercel Team ID and API Token."


def format_tiles(stats: DeploymentStats) -> list[tuple[str, str]]:
    """The four summary tiles as (label, value) pairs."""
    return [
        ("Total Deployments", str(stats.total_deployments)),
        ("Success Rate", f"{stats.success_rate}%"),
        ("Avg Build Time", f"{stats.average_build_time}s"),
        ("Most Active", stats.most_active_project),
    ]


def _format_timestamp(millis: int | float) -> str:
    if not millis:
        return "-"
    moment = datetime.fromtimestamp(millis / 1000, tz=timezone.utc)
    return moment.strftime("%Y-%m-%d %H:%M:%S UTC")


def format_deployment(deployment: Deployment) -> str:
    build_time = deployment.build_time_ms
    duration = f"{build_time / 1000:.1f}s" if build_time is not None else "-"
    state = deployment.state or "UNKNOWN"
    return f"{_format_timestamp(deployment.created_at)}  {state:<9} {duration}"


def render_dashboard(
    state: AggregateState,
    stats: DeploymentStats,
    *,
    error: str | None = None,
    limit_per_project: int | None = 5,
) -> str:
    lines = [f"Vercel Deployments | {stats.total_deployments}", ""]
    lines.extend(f"{label:<18} {value}" for label, value in format_tiles(stats))
    lines.append("")

    if error is not None:
        lines.extend([error, ERROR_HINT])
        return "\n".join(lines)

    for team in state.values():
        lines.append(team.team_name)
        for project, deployments in team.projects.items():
            lines.append(f"  {project} ({len(deployments)})")
            shown = deployments if limit_per_project is None else deployments[:limit_per_project]
            lines.extend(f"    {format_deployment(d)}" for d in shown)
        lines.append("")
    return "\n".join(lines).rstrip() + "\n"


__all__ = ["format_tiles", "format_deployment", "render_dashboard"]
