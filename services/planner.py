"""
Weekly Plan Service

Builds a seven-day plan by drawing one meal per time slot per day.
"""

import random
from dataclasses import dataclass
from typing import Any, Callable, Optional, Sequence

from constants import DAYS_OF_WEEK, TIME_SLOTS


@dataclass(frozen=True)
class WeeklyPlanEntry:
    """One day of a weekly plan. A slot is None when no meal was available."""
    day: str
    breakfast: Optional[Any] = None
    lunch: Optional[Any] = None
    dinner: Optional[Any] = None

    def meals(self):
        """Return (time_slot, meal) pairs for the filled slots, in slot order."""
        pairs = []
        for slot in TIME_SLOTS:
            meal = getattr(self, slot.lower())
            if meal is not None:
                pairs.append((slot, meal))
        return pairs


def partition_by_time_slot(meals):
    """
    Group meals into Breakfast/Lunch/Dinner buckets.

    Meals tagged with any other value land in no bucket and are
    therefore never planned.
    """
    buckets = {slot: [] for slot in TIME_SLOTS}
    for meal in meals:
        bucket = buckets.get(getattr(meal, 'time_slot', None))
        if bucket is not None:
            bucket.append(meal)
    return buckets


def generate_weekly_plan(meals: Sequence[Any],
                         choose: Callable[[Sequence[Any]], Any] = random.choice):
    """
    Generate a plan for Monday through Sunday.

    Every day and every slot is drawn independently with ``choose``, so a
    meal may repeat within the week or never appear. ``choose`` receives a
    non-empty bucket and returns one of its members; it defaults to a
    uniform random pick.

    Returns a list of seven WeeklyPlanEntry objects in day order.
    """
    buckets = partition_by_time_slot(meals)

    plan = []
    for day in DAYS_OF_WEEK:
        picks = {}
        for slot, bucket in buckets.items():
            picks[slot.lower()] = choose(bucket) if bucket else None
        plan.append(WeeklyPlanEntry(day=day, **picks))
    return plan
