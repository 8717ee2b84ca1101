"""
Productivity calculation.

Scores are count-based: a day's overall productivity is the share of its
tasks that are fully completed, not the mean of the per-task percentages.
All rounding is half-up and done in integer arithmetic.
"""

from __future__ import annotations

from typing import Iterable

from dayboard.constants import (
    COMPLETE_PERCENTAGE,
    MODERATELY_PRODUCTIVE_THRESHOLD,
    PRODUCTIVE_THRESHOLD,
    ProductivityLabel,
)
from dayboard.models import DaySummary, Task


def _percent(part: int, whole: int) -> int:
    """round-half-up(100 * part / whole) for non-negative integers."""
    return (200 * part + whole) // (2 * whole)


def completion_percentage(completed_items: int, total_items: int) -> int:
    """
    Percentage of a task's items that are done.

    Args:
        completed_items: Items done (0..total_items)
        total_items: Target item count (>= 1)

    Returns:
        Integer in 0..100
    """
    if total_items < 1:
        raise ValueError("total_items must be at least 1")
    if not 0 <= completed_items <= total_items:
        raise ValueError("completed_items must be between 0 and total_items")
    return _percent(completed_items, total_items)


def overall_productivity(total_tasks: int, completed_tasks: int) -> int:
    if total_tasks == 0:
        return 0
    return _percent(completed_tasks, total_tasks)


def productivity_label(score: int) -> ProductivityLabel:
    if score >= PRODUCTIVE_THRESHOLD:
        return ProductivityLabel.PRODUCTIVE
    if score >= MODERATELY_PRODUCTIVE_THRESHOLD:
        return ProductivityLabel.MODERATELY_PRODUCTIVE
    return ProductivityLabel.NOT_PRODUCTIVE


def summarize_day(tasks: Iterable[Task]) -> DaySummary:
    """
    Score a snapshot of one day's tasks.

    A task counts as completed when its completion percentage is 100.
    """
    tasks = list(tasks)
    total = len(tasks)
    completed = sum(1 for task in tasks if task.completion_percentage == COMPLETE_PERCENTAGE)
    score = overall_productivity(total, completed)
    return DaySummary(
        total_tasks=total,
        completed_tasks=completed,
        overall_productivity=score,
        productivity_label=productivity_label(score),
    )
