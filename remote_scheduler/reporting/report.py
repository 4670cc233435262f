# remote_scheduler/reporting/report.py
from __future__ import annotations

from typing import Dict, List

import pandas as pd

from remote_scheduler.config import ExportConfig
from remote_scheduler.domain.bitmask import is_remote
from remote_scheduler.domain.models import InputData, Schedule
from remote_scheduler.domain.weekgrid import WeekGrid


HOLIDAY_MARK = "祝日"


def header_labels(data: InputData, grid: WeekGrid, cfg: ExportConfig) -> List[str]:
    """見出し行：祝日と+1枠の日に注記を付ける"""
    labels = []
    for d in data.days:
        label = grid.day_label(d.idx)
        if d.is_holiday:
            label += f" {cfg.holiday_label}"
        elif d.is_extra:
            label += " " + cfg.extra_label.format(slots=d.slots)
        labels.append(label)
    return labels


def format_schedule_lines(data: InputData, schedule: Schedule, grid: WeekGrid) -> List[str]:
    lines = []
    for d in data.days:
        if d.is_holiday:
            lines.append(f" {grid.day_label(d.idx)}: {HOLIDAY_MARK}")
            continue
        remotes = schedule.remote_names(d.idx, data.names)
        lines.append(f" {grid.day_label(d.idx)}: {', '.join(remotes)}")
    return lines


def build_schedule_table(data: InputData, schedule: Schedule, labels: List[str]) -> pd.DataFrame:
    """
    列=日、各列は上から順にその日のリモート者を詰める（列ごとに人数が違う）。
    祝日の列は空のまま。
    """
    columns: Dict[str, List[str]] = {}
    for d in data.days:
        columns[labels[d.idx]] = [] if d.is_holiday else schedule.remote_names(d.idx, data.names)

    height = max((len(v) for v in columns.values()), default=0)
    padded = {k: v + [""] * (height - len(v)) for k, v in columns.items()}
    return pd.DataFrame(padded, columns=labels)


def _longest_streak(schedule: Schedule, p: int) -> int:
    best = cur = 0
    for mask in schedule.masks:
        if is_remote(mask, p):
            cur += 1
            best = max(best, cur)
        else:
            cur = 0
    return best


def build_person_summary(data: InputData, schedule: Schedule) -> pd.DataFrame:
    rows = []
    for person in data.persons:
        days = [d.name for d in data.days if is_remote(schedule.masks[d.idx], person.idx)]
        forbidden = sorted(data.forbidden_for(person.idx))
        rows.append(dict(
            person_name=person.name,
            remote_days=len(days),
            remote_day_names=", ".join(days),
            longest_streak=_longest_streak(schedule, person.idx),
            forbidden_days=", ".join(data.days[i].name for i in forbidden),
        ))
    df = pd.DataFrame(rows)
    if not df.empty:
        df = df.sort_values("person_name").reset_index(drop=True)
    return df
