"""Deployment dashboard across one or more Vercel teams."""

from .aggregate import group_by_project, iter_deployments
from .config import DashboardConfig
from .credentials import Credential, CredentialStore
from .dashboard import AsyncDashboard, Dashboard, Notification
from .errors import (
    CredentialValidationError,
    DashboardError,
    RefreshInProgressError,
    UpstreamError,
)
from .fetcher import AsyncDeploymentFetcher, DeploymentFetcher, fetch_all
from .models import AggregateState, Deployment, TeamResult
from .stars import get_stargazers_count, get_stargazers_count_async
from .stats import DeploymentStats, compute_stats

__all__ = [
    "AggregateState",
    "AsyncDashboard",
    "AsyncDeploymentFetcher",
    "Credential",
    "CredentialStore",
    "CredentialValidationError",
    "Dashboard",
    "DashboardConfig",
    "DashboardError",
    "Deployment",
    "DeploymentFetcher",
    "DeploymentStats",
    "Notification",
    "RefreshInProgressError",
    "TeamResult",
    "UpstreamError",
    "compute_stats",
    "fetch_all",
    "get_stargazers_count",
    "get_stargazers_count_async",
    "group_by_project",
    "iter_deployments",
]
