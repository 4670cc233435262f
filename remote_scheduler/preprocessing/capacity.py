# remote_scheduler/preprocessing/capacity.py
from __future__ import annotations

from typing import Iterable, List, Sequence, Tuple

from remote_scheduler.domain.models import Day


def plan_slots_per_day(num_days: int, extra_day: int, base_slots: int, holiday_idx: Iterable[int]) -> List[int]:
    """日ごとのリモート枠：基本枠、+1枠の日、祝日は0（祝日が優先）"""
    slots = [base_slots] * num_days
    slots[extra_day] += 1
    for i in holiday_idx:
        slots[i] = 0
    return slots


def build_days(day_names: Sequence[str], slots: Sequence[int], extra_day: int, holiday_idx: Iterable[int]) -> Tuple[Day, ...]:
    hol = set(holiday_idx)
    return tuple(
        Day(idx=i, name=name, slots=slots[i], is_extra=(i == extra_day), is_holiday=(i in hol))
        for i, name in enumerate(day_names)
    )
