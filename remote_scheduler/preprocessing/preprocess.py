# remote_scheduler/preprocessing/preprocess.py
from __future__ import annotations

import logging
import random
from dataclasses import dataclass
from typing import Dict, List, Mapping, Optional, Sequence, Tuple

from remote_scheduler.config import AppConfig
from remote_scheduler.domain.models import InputData, Person
from remote_scheduler.preprocessing.capacity import build_days, plan_slots_per_day
from remote_scheduler.preprocessing.combinations import generate_combinations
from remote_scheduler.validation.validator import day_index, forbidden_from_vacations

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Preprocessed:
    choices_by_day: Tuple[Tuple[int, ...], ...]  # day -> 候補マスク（祝日は空）


def ordered_people(people: Sequence[str], rng: random.Random, shuffle: bool) -> List[str]:
    """ビット位置の並び順を決める（シャッフルで並び順による偏りをなくす）"""
    out = list(people)
    if shuffle:
        rng.shuffle(out)
    return out


def build_input_data(
    cfg: AppConfig,
    people: Sequence[str],
    vacation_returns: Optional[Mapping[str, Sequence[str]]] = None,
) -> InputData:
    """
    設定から1回分の探索入力を作る。
    曜日名の解決に失敗したら ValidationError（探索前に即中断）。
    """
    week = cfg.week
    holiday_idx = [day_index(week.days, h) for h in week.holidays]
    slots = plan_slots_per_day(len(week.days), week.extra_day, week.base_slots, holiday_idx)
    days = build_days(week.days, slots, week.extra_day, holiday_idx)

    forbidden = forbidden_from_vacations(week.days, people, vacation_returns or {})

    return InputData(
        persons=tuple(Person(idx=i, name=name) for i, name in enumerate(people)),
        days=days,
        forbidden=forbidden,
        remotes_per_person=cfg.rules.remotes_per_person,
        max_consecutive=cfg.rules.max_consecutive,
    )


def preprocess_all(data: InputData) -> Preprocessed:
    n = len(data.persons)
    cache: Dict[int, Tuple[int, ...]] = {}
    choices: List[Tuple[int, ...]] = []
    for d in data.days:
        if d.slots == 0:
            choices.append(())
            continue
        if d.slots not in cache:
            cache[d.slots] = tuple(generate_combinations(n, d.slots))
        choices.append(cache[d.slots])
        logger.debug("%s: slots=%d candidates=%d", d.name, d.slots, len(cache[d.slots]))
    return Preprocessed(choices_by_day=tuple(choices))
