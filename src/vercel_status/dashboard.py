"""Session state behind the dashboard view.

A dashboard owns the credential list, the last successfully fetched
aggregate state and the loading/error flags a view renders from. Results are
only committed when a whole refresh succeeds; a failed refresh keeps the
previous state and records one error message plus a transient notification.
"""

from __future__ import annotations

import logging
import threading
from dataclasses import dataclass
from typing import Any, Literal

from ._http import iter_coroutine
from .config import DashboardConfig
from .credentials import CredentialStore
from .errors import DashboardError, RefreshInProgressError, describe
from .fetcher import AsyncDeploymentFetcher, DeploymentFetcher
from .fetcher._core import _BaseDeploymentFetcher
from .models import AggregateState
from .stars import DEFAULT_REPOSITORY, get_stargazers_count, get_stargazers_count_async
from .stats import DeploymentStats, compute_stats

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Notification:
    """A transient message for the view to show once."""

    title: str
    description: str
    variant: Literal["default", "destructive"] = "default"


class _BaseDashboard:
    _fetcher: _BaseDeploymentFetcher

    def __init__(
        self,
        config: DashboardConfig | None = None,
        credentials: CredentialStore | None = None,
        *,
        repository: str = DEFAULT_REPOSITORY,
    ) -> None:
        self.config = config or DashboardConfig()
        self.credentials = credentials if credentials is not None else CredentialStore()
        self.repository = repository
        self.state: AggregateState = {}
        self.loading = True
        self.refreshing = False
        self.error: str | None = None
        self.stars_count = 0
        self._notifications: list[Notification] = []

    def add_team(self) -> None:
        self.credentials.add()

    def remove_team(self, index: int) -> None:
        self.credentials.remove(index)

    def update_team(self, index: int, field_name: str, value: str) -> None:
        self.credentials.update(index, field_name, value)

    def stats(self) -> DeploymentStats:
        return compute_stats(self.state)

    def pop_notifications(self) -> list[Notification]:
        notifications, self._notifications = self._notifications, []
        return notifications

    async def _refresh(self) -> bool:
        # No await between the check and the assignment, so concurrent tasks
        # on one event loop cannot both get past here.
        if self.refreshing:
            raise RefreshInProgressError("A refresh is already in progress")
        self.refreshing = True
        self.loading = True
        self.error = None
        try:
            state = await self._fetcher._fetch_all(self.credentials.snapshot())
        except Exception as exc:
            message = describe(exc)
            logger.warning(
                "Refreshing deployments failed: %s",
                message,
                exc_info=not isinstance(exc, DashboardError),
            )
            self.error = message
            self._notifications.append(
                Notification(title="Error", description=message, variant="destructive")
            )
            return False
        else:
            self.state = state
            return True
        finally:
            self.loading = False
            self.refreshing = False


class Dashboard(_BaseDashboard):
    """Synchronous dashboard session."""

    def __init__(
        self,
        config: DashboardConfig | None = None,
        credentials: CredentialStore | None = None,
        *,
        repository: str = DEFAULT_REPOSITORY,
    ) -> None:
        super().__init__(config, credentials, repository=repository)
        self._fetcher = DeploymentFetcher(self.config)
        self._lock = threading.Lock()

    def refresh(self) -> bool:
        """Fetch every team again. Returns False if the refresh failed.

        Raises RefreshInProgressError if another thread is refreshing.
        """
        if not self._lock.acquire(blocking=False):
            raise RefreshInProgressError("A refresh is already in progress")
        try:
            return iter_coroutine(self._refresh())
        finally:
            self._lock.release()

    def load_stars(self) -> int:
        self.stars_count = get_stargazers_count(self.repository, timeout=self.config.timeout)
        return self.stars_count

    def close(self) -> None:
        self._fetcher.close()

    def __enter__(self) -> Dashboard:
        return self

    def __exit__(self, *args: Any) -> None:
        self.close()


class AsyncDashboard(_BaseDashboard):
    """Asynchronous dashboard session."""

    def __init__(
        self,
        config: DashboardConfig | None = None,
        credentials: CredentialStore | None = None,
        *,
        repository: str = DEFAULT_REPOSITORY,
    ) -> None:
        super().__init__(config, credentials, repository=repository)
        self._fetcher = AsyncDeploymentFetcher(self.config)

    async def refresh(self) -> bool:
        """Fetch every team again. Returns False if the refresh failed.

        Raises RefreshInProgressError if a refresh is already running.
        """
        return await self._refresh()

    async def load_stars(self) -> int:
        self.stars_count = await get_stargazers_count_async(
            self.repository, timeout=self.config.timeout
        )
        return self.stars_count

    async def close(self) -> None:
        await self._fetcher.close()

    async def __aenter__(self) -> AsyncDashboard:
        return self

    async def __aexit__(self, *args: Any) -> None:
        await self.close()


__all__ = ["Dashboard", "AsyncDashboard", "Notification"]
