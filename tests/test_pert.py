"""
PERT engine tests.

Covers the estimate validator, the calculator, the task factory and the
project aggregator.
"""

from __future__ import annotations

import math
import uuid

import pytest

from conftest import make_estimate
from pert_estimator.engine.pert import (
    calculate_pert,
    calculate_project_summary,
    create_task,
    validate_estimate,
)
from pert_estimator.exceptions import InvalidEstimateError, PertEstimatorError
from pert_estimator.models.task import ProjectSummary


# =============================================================================
# Validator
# =============================================================================


class TestValidateEstimate:
    def test_accepts_ordered_positive_triple(self):
        assert validate_estimate(make_estimate(1, 2, 3))

    def test_accepts_equal_triple(self):
        assert validate_estimate(make_estimate(4, 4, 4))

    @pytest.mark.parametrize("o,n,p", [
        (5, 3, 8),    # optimistic > nominal
        (1, 9, 8),    # nominal > pessimistic
        (0, 1, 2),
        (-1, 1, 2),
        (1, 1, 0),
    ])
    def test_rejects(self, o, n, p):
        assert validate_estimate(make_estimate(o, n, p)) is False

    def test_compares_in_hours_across_units(self):
        # 90 minutes <= 2 hours <= 1 day
        assert validate_estimate(make_estimate(90, 2, 1, units=("minutes", "hours", "days")))
        # 1 day (8h) > 4 hours
        assert not validate_estimate(make_estimate(1, 4, 10, units=("days", "hours", "hours")))

    def test_nan_is_rejected(self):
        assert not validate_estimate(make_estimate(float("nan"), 2, 3))

    def test_overflow_to_infinity_is_rejected(self):
        # 1e308 weeks is finite but exceeds float range once multiplied by 40
        assert not validate_estimate(make_estimate(1, 2, 1e308, unit="weeks"))

    def test_calculate_pert_rejects_overflowing_estimate(self):
        with pytest.raises(InvalidEstimateError):
            calculate_pert(make_estimate(1e308, 1e308, 1e308, unit="weeks"))


# =============================================================================
# Calculator
# =============================================================================


class TestCalculatePert:
    def test_reference_scenario(self):
        result = calculate_pert(make_estimate(2, 4, 12))

        assert result.expected_duration == pytest.approx(5.0)
        assert result.standard_deviation == pytest.approx(10 / 6)
        assert result.variance == pytest.approx(100 / 36)

    def test_variance_is_square_of_standard_deviation(self):
        result = calculate_pert(make_estimate(0.5, 3.25, 17.75, unit="days"))

        assert result.standard_deviation >= 0
        assert result.variance == result.standard_deviation * result.standard_deviation

    def test_equal_triple_is_point_estimate(self):
        result = calculate_pert(make_estimate(3, 3, 3, unit="days"))

        assert result.expected_duration == pytest.approx(24.0)
        assert result.standard_deviation == 0
        assert result.variance == 0

    def test_results_are_in_hours(self):
        result = calculate_pert(make_estimate(1, 2, 4, unit="days"))
        assert result.expected_duration == pytest.approx((8 + 64 + 32) / 6)

    def test_invalid_estimate_raises(self):
        with pytest.raises(InvalidEstimateError, match="optimistic"):
            calculate_pert(make_estimate(5, 3, 8))

    def test_invalid_estimate_error_is_a_value_error(self):
        with pytest.raises(ValueError):
            calculate_pert(make_estimate(0, 0, 0))
        assert issubclass(InvalidEstimateError, PertEstimatorError)


# =============================================================================
# Task factory
# =============================================================================


class TestCreateTask:
    def test_populates_derived_fields(self):
        estimate = make_estimate(2, 4, 12)
        task = create_task("Design", estimate)

        assert task.name == "Design"
        assert task.estimate is estimate
        assert task.expected_duration == pytest.approx(5.0)
        assert task.standard_deviation == pytest.approx(10 / 6)
        assert task.variance == pytest.approx(100 / 36)

    def test_generates_uuid_when_id_missing(self):
        task = create_task(None, make_estimate(1, 2, 3))
        assert uuid.UUID(task.id)

    def test_generated_ids_are_unique(self):
        ids = {create_task(None, make_estimate(1, 2, 3)).id for _ in range(200)}
        assert len(ids) == 200

    def test_keeps_supplied_id(self):
        assert create_task("x", make_estimate(1, 2, 3), task_id="abc").id == "abc"

    def test_missing_name_is_stored_as_none(self):
        task = create_task(None, make_estimate(1, 2, 3))
        assert task.name is None
        assert task.display_name(3) == "Task 3"

    def test_invalid_estimate_produces_no_task(self):
        with pytest.raises(InvalidEstimateError):
            create_task("bad", make_estimate(3, 2, 1))

    def test_task_is_immutable(self, sample_task):
        with pytest.raises(AttributeError):
            sample_task.expected_duration = 1.0

    def test_to_dict_uses_wire_keys(self, sample_task):
        data = sample_task.to_dict()

        assert data["id"] == "task-design"
        assert data["name"] == "Design"
        assert data["estimate"]["optimistic"] == {"value": 2, "unit": "hours"}
        assert set(data) == {"id", "name", "estimate", "expectedDuration", "standardDeviation", "variance"}

    def test_to_dict_omits_absent_name(self):
        assert "name" not in create_task(None, make_estimate(1, 2, 3)).to_dict()


# =============================================================================
# Project aggregator
# =============================================================================


class TestCalculateProjectSummary:
    def test_empty_collection(self):
        summary = calculate_project_summary([])

        assert summary == ProjectSummary(0.0, 0.0, 0.0, [])

    def test_single_task(self, sample_task):
        summary = calculate_project_summary([sample_task])

        assert summary.total_expected_duration == sample_task.expected_duration
        assert summary.total_standard_deviation == pytest.approx(sample_task.standard_deviation)
        assert summary.total_variance == sample_task.variance
        assert summary.tasks == [sample_task]

    def test_variances_add_not_standard_deviations(self):
        first = create_task("a", make_estimate(2, 4, 12))
        second = create_task("b", make_estimate(1, 5, 7))
        summary = calculate_project_summary([first, second])

        assert summary.total_variance == pytest.approx(first.variance + second.variance)
        assert summary.total_standard_deviation == pytest.approx(
            math.sqrt(first.variance + second.variance)
        )
        assert summary.total_standard_deviation < first.standard_deviation + second.standard_deviation

    def test_preserves_order_and_accepts_iterables(self, sample_tasks):
        summary = calculate_project_summary(iter(sample_tasks))

        assert [t.id for t in summary.tasks] == [t.id for t in sample_tasks]
        assert summary.total_expected_duration == pytest.approx(
            sum(t.expected_duration for t in sample_tasks)
        )

    def test_does_not_mutate_input(self, sample_tasks):
        original = list(sample_tasks)
        calculate_project_summary(sample_tasks)
        assert sample_tasks == original
