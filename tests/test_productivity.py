"""
Scoring Tests.

This module tests the pure productivity calculations:
- Per-task completion percentage
- Day-level overall productivity (count-based)
- Label thresholds
"""

from __future__ import annotations

import pytest

from dayboard.constants import ProductivityLabel
from dayboard.productivity import (
    completion_percentage,
    overall_productivity,
    productivity_label,
    summarize_day,
)
from tests.conftest import TaskFactory


pytestmark = [pytest.mark.productivity, pytest.mark.unit]


# =============================================================================
# Completion Percentage Tests
# =============================================================================


class TestCompletionPercentage:
    """Tests for per-task completion percentage."""

    def test_three_of_four(self):
        """Test the 3/4 scenario."""
        assert completion_percentage(3, 4) == 75

    @pytest.mark.parametrize("completed, total, expected", [
        (0, 1, 0),
        (1, 1, 100),
        (1, 3, 33),
        (2, 3, 67),
        (1, 8, 13),   # 12.5 rounds half up
        (3, 8, 38),   # 37.5 rounds half up
        (99, 100, 99),
        (199, 200, 100),  # 99.5 rounds up
    ])
    def test_rounding(self, completed: int, total: int, expected: int):
        assert completion_percentage(completed, total) == expected

    @pytest.mark.parametrize("completed, total", [(0, 0), (5, 4), (-1, 4)])
    def test_invalid_counts_rejected(self, completed: int, total: int):
        with pytest.raises(ValueError):
            completion_percentage(completed, total)


# =============================================================================
# Overall Productivity Tests
# =============================================================================


class TestOverallProductivity:
    """Tests for the day-level score and its label."""

    def test_no_tasks_scores_zero(self):
        assert overall_productivity(0, 0) == 0

    def test_half_completed(self):
        assert overall_productivity(2, 1) == 50

    @pytest.mark.parametrize("score, label", [
        (100, ProductivityLabel.PRODUCTIVE),
        (80, ProductivityLabel.PRODUCTIVE),
        (79, ProductivityLabel.MODERATELY_PRODUCTIVE),
        (50, ProductivityLabel.MODERATELY_PRODUCTIVE),
        (49, ProductivityLabel.NOT_PRODUCTIVE),
        (0, ProductivityLabel.NOT_PRODUCTIVE),
    ])
    def test_label_thresholds(self, score: int, label: ProductivityLabel):
        assert productivity_label(score) is label


# =============================================================================
# Day Summary Tests
# =============================================================================


class TestSummarizeDay:
    """Tests for scoring a snapshot of tasks."""

    def test_one_complete_one_half_done(self):
        """Test that only fully completed tasks count."""
        tasks = [
            TaskFactory.create_completed(total_items=2),
            TaskFactory.create(total_items=2, completed_items=1),
        ]

        summary = summarize_day(tasks)

        assert summary.total_tasks == 2
        assert summary.completed_tasks == 1
        assert summary.overall_productivity == 50
        assert summary.productivity_label == ProductivityLabel.MODERATELY_PRODUCTIVE

    def test_empty_day(self):
        summary = summarize_day([])

        assert summary.total_tasks == 0
        assert summary.completed_tasks == 0
        assert summary.overall_productivity == 0
        assert summary.productivity_label == ProductivityLabel.NOT_PRODUCTIVE

    def test_all_completed_is_productive(self):
        tasks = [TaskFactory.create_completed() for _ in range(5)]

        summary = summarize_day(tasks)

        assert summary.overall_productivity == 100
        assert summary.productivity_label == ProductivityLabel.PRODUCTIVE

    def test_partial_progress_does_not_count(self):
        """Test that 99% done tasks do not raise the count-based score."""
        tasks = [TaskFactory.create(total_items=100, completed_items=99) for _ in range(3)]

        assert summarize_day(tasks).overall_productivity == 0

    def test_same_snapshot_same_result(self):
        tasks = [
            TaskFactory.create_completed(),
            TaskFactory.create(completed_items=1),
            TaskFactory.create(completed_items=3),
        ]

        assert summarize_day(tasks) == summarize_day(tasks)
