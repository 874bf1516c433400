"""Core PERT estimation engine."""

import math
import uuid
from typing import Iterable, Optional

from ..exceptions import InvalidEstimateError
from ..models.task import PertResult, ProjectSummary, Task, TaskEstimate
from .conversion import to_hours


def validate_estimate(estimate: TaskEstimate) -> bool:
    """Check 0 < optimistic <= nominal <= pessimistic once converted to hours."""
    optimistic = to_hours(estimate.optimistic)
    nominal = to_hours(estimate.nominal)
    pessimistic = to_hours(estimate.pessimistic)

    # Large finite magnitudes can overflow to inf once scaled to hours.
    if not all(math.isfinite(hours) for hours in (optimistic, nominal, pessimistic)):
        return False

    return (
        optimistic > 0
        and nominal > 0
        and pessimistic > 0
        and optimistic <= nominal <= pessimistic
    )


def calculate_pert(estimate: TaskEstimate) -> PertResult:
    """Derive expected duration, standard deviation and variance in hours."""
    if not validate_estimate(estimate):
        raise InvalidEstimateError(
            "Invalid estimate: optimistic <= nominal <= pessimistic and all values > 0"
        )

    optimistic = to_hours(estimate.optimistic)
    nominal = to_hours(estimate.nominal)
    pessimistic = to_hours(estimate.pessimistic)

    expected_duration = (optimistic + 4 * nominal + pessimistic) / 6
    standard_deviation = (pessimistic - optimistic) / 6
    variance = standard_deviation * standard_deviation

    return PertResult(
        expected_duration=expected_duration,
        standard_deviation=standard_deviation,
        variance=variance,
    )


def create_task(
    name: Optional[str],
    estimate: TaskEstimate,
    task_id: Optional[str] = None,
) -> Task:
    """Build a task from a validated estimate, generating an id if needed."""
    result = calculate_pert(estimate)

    return Task(
        id=task_id or str(uuid.uuid4()),
        name=name,
        estimate=estimate,
        expected_duration=result.expected_duration,
        standard_deviation=result.standard_deviation,
        variance=result.variance,
    )


def calculate_project_summary(tasks: Iterable[Task]) -> ProjectSummary:
    """Aggregate tasks assuming their durations are independent."""
    task_list = list(tasks)
    if not task_list:
        return ProjectSummary()

    total_expected = 0.0
    total_variance = 0.0
    for task in task_list:
        total_expected += task.expected_duration
        total_variance += task.variance

    return ProjectSummary(
        total_expected_duration=total_expected,
        total_standard_deviation=math.sqrt(total_variance),
        total_variance=total_variance,
        tasks=task_list,
    )
