"""Date-bounded running statistics.

Every function takes the storage handle and the "now" anchor explicitly, so
the same code serves requests, the CLI and tests with a fixed clock.
"""
import calendar
from dataclasses import dataclass, field
from datetime import datetime, time, timedelta
from typing import List, Optional

PERIODS = ("week", "month", "year")

# Weeks start on Monday (datetime.weekday() == 0).
WEEK_START = 0


@dataclass
class PeriodSummary:
    period: str
    start_date: datetime
    end_date: datetime
    runs: List = field(default_factory=list)
    total_distance: int = 0
    average_pace: Optional[float] = None
    target_distance: Optional[int] = None

    @property
    def run_count(self):
        return len(self.runs)

    @property
    def target_reached(self):
        if self.target_distance is None:
            return None
        return self.total_distance >= self.target_distance


def _start_of_day(value):
    return value.replace(hour=0, minute=0, second=0, microsecond=0)


def day_bounds(day):
    """Closed interval covering one calendar day."""
    return datetime.combine(day, time.min), datetime.combine(day, time.max)


def period_bounds(period, now):
    """Return the closed ``(start, end)`` interval of the period containing ``now``.

    ``end`` is the last microsecond of the period, so a run stamped exactly at
    the next period's start belongs to the next period only. A week running
    past year 9999 ends at ``datetime.max``.
    """
    day = _start_of_day(now)
    if period == "week":
        start = day - timedelta(days=(day.weekday() - WEEK_START) % 7)
        try:
            last_day = start + timedelta(days=6)
        except OverflowError:
            return start, datetime.max
    elif period == "month":
        start = day.replace(day=1)
        last_day = start.replace(day=calendar.monthrange(start.year, start.month)[1])
    elif period == "year":
        start = day.replace(month=1, day=1)
        last_day = start.replace(month=12, day=31)
    else:
        raise ValueError(f"Unknown period {period!r}; expected one of {PERIODS}")
    return start, datetime.combine(last_day.date(), time.max)


def average_pace(runs):
    """Mean minutes per kilometre over runs that recorded a duration.

    This is the plain mean of each run's ratio, not total time over total
    distance: a short slow run weighs as much as a long fast one.
    """
    paces = [run.duration / run.distance for run in runs if run.duration and run.distance]
    if not paces:
        return None
    return round(sum(paces) / len(paces), 2)


def period_summary(storage, user_id, period, now, target_distance=None):
    start, end = period_bounds(period, now)
    runs = storage.get_runs(user_id, start, end)
    return PeriodSummary(
        period=period,
        start_date=start,
        end_date=end,
        runs=list(runs),
        total_distance=sum(run.distance for run in runs),
        average_pace=average_pace(runs),
        # the profile target is a weekly goal
        target_distance=target_distance if period == "week" else None,
    )


def running_stats(storage, user_id, now, target_distance=None):
    """Weekly, monthly and yearly summaries anchored on ``now``."""
    return {
        "weekly": period_summary(storage, user_id, "week", now, target_distance),
        "monthly": period_summary(storage, user_id, "month", now),
        "yearly": period_summary(storage, user_id, "year", now),
    }
