"""Dashboard counters."""

from dataclasses import dataclass
from datetime import datetime, timedelta

from ..models.sessions import WorkoutSession


@dataclass
class DashboardStats:
    total_sessions: int
    this_week: int
    this_month: int
    total_exercises: int


def compute_stats(
    sessions: list[WorkoutSession],
    exercise_count: int,
    now: datetime | None = None,
) -> DashboardStats:
    """Count sessions overall, since Monday, and in the current month."""
    now = now or datetime.now()
    week_start = (now - timedelta(days=now.weekday())).replace(
        hour=0, minute=0, second=0, microsecond=0
    )
    month_start = now.replace(day=1, hour=0, minute=0, second=0, microsecond=0)

    dated = [s.started_at.replace(tzinfo=None) for s in sessions if s.started_at]
    return DashboardStats(
        total_sessions=len(sessions),
        this_week=sum(1 for d in dated if week_start <= d <= now),
        this_month=sum(1 for d in dated if month_start <= d <= now),
        total_exercises=exercise_count,
    )
