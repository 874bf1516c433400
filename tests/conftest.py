"""
Shared fixtures for the PERT estimator test suite.

Provides small factories for estimates and tasks plus ready-made task
collections used across the engine, format and storage tests.
"""

from __future__ import annotations

from datetime import datetime, timezone
from typing import List, Optional, Tuple

import pytest

from pert_estimator.engine.pert import create_task
from pert_estimator.models.task import Task, TaskEstimate, TimeUnit, TimeValue


def make_estimate(
    optimistic: float,
    nominal: float,
    pessimistic: float,
    unit: str = "hours",
    units: Optional[Tuple[str, str, str]] = None,
) -> TaskEstimate:
    """Build an estimate from plain numbers."""
    o_unit, n_unit, p_unit = units or (unit, unit, unit)
    return TaskEstimate(
        optimistic=TimeValue(optimistic, TimeUnit(o_unit)),
        nominal=TimeValue(nominal, TimeUnit(n_unit)),
        pessimistic=TimeValue(pessimistic, TimeUnit(p_unit)),
    )


@pytest.fixture
def estimate_factory():
    return make_estimate


@pytest.fixture
def sample_task() -> Task:
    """The 2/4/12 hour task: expected 5.0, std 10/6."""
    return create_task("Design", make_estimate(2, 4, 12), task_id="task-design")


@pytest.fixture
def sample_tasks(sample_task: Task) -> List[Task]:
    return [
        sample_task,
        create_task("Build", make_estimate(1, 2, 4, unit="days"), task_id="task-build"),
        create_task(None, make_estimate(30, 45, 90, unit="minutes"), task_id="task-unnamed"),
        create_task(
            "Rollout",
            make_estimate(4, 1, 1, units=("hours", "days", "weeks")),
            task_id="task-rollout",
        ),
    ]


@pytest.fixture
def fixed_time() -> datetime:
    return datetime(2024, 8, 10, 12, 30, 0, tzinfo=timezone.utc)
