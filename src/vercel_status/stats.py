"""Summary numbers shown above the deployment list."""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable
from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal

from .aggregate import iter_deployments
from .models import AggregateState, Deployment

NO_PROJECT = "None"


@dataclass(frozen=True)
class DeploymentStats:
    total_deployments: int
    successful_deployments: int
    # Display strings with one decimal, e.g. "2.5"
    average_build_time: str
    most_active_project: str

    @property
    def success_rate(self) -> str:
        """Share of READY deployments as a percentage with one decimal."""
        if not self.total_deployments:
            return _one_decimal(0)
        return _one_decimal(self.successful_deployments / self.total_deployments * 100)


def _one_decimal(value: float) -> str:
    # Decimal(float) is exact, so halves round up like JavaScript's toFixed(1).
    return str(Decimal(value).quantize(Decimal("0.1"), rounding=ROUND_HALF_UP))


def summarize(deployments: Iterable[Deployment]) -> DeploymentStats:
    """Reduce a flat sequence of deployments into summary numbers."""
    total = 0
    successful = 0
    build_times: list[int | float] = []
    counts: Counter[str] = Counter()

    for deployment in deployments:
        total += 1
        if deployment.is_ready:
            successful += 1
        build_time = deployment.build_time_ms
        if build_time is not None:
            build_times.append(build_time)
        counts[deployment.name] += 1

    if build_times:
        average = _one_decimal(sum(build_times) / len(build_times) / 1000)
    else:
        average = _one_decimal(0)

    # Counter preserves insertion order and max() keeps the first maximum,
    # so ties go to the project seen first.
    most_active = max(counts, key=counts.__getitem__) if counts else NO_PROJECT

    return DeploymentStats(
        total_deployments=total,
        successful_deployments=successful,
        average_build_time=average,
        most_active_project=most_active,
    )


def compute_stats(state: AggregateState) -> DeploymentStats:
    """Statistics over every deployment of every team in ``state``."""
    return summarize(iter_deployments(state))


__all__ = ["DeploymentStats", "compute_stats", "summarize", "NO_PROJECT"]
