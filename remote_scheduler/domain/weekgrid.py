# remote_scheduler/domain/weekgrid.py
from __future__ import annotations

from dataclasses import dataclass
from datetime import date, timedelta
from typing import List, Optional, Sequence

from dateutil import parser
from dateutil.relativedelta import relativedelta, MO


@dataclass(frozen=True)
class WeekGrid:
    """週の曜日名に日付を付ける（開始日なしなら曜日名のみ）"""
    days: Sequence[str]
    week_start: Optional[date] = None

    @classmethod
    def from_text(cls, days: Sequence[str], text: Optional[str]) -> "WeekGrid":
        if not text:
            return cls(days=days)
        return cls(days=days, week_start=week_monday(text))

    def day_date(self, idx: int) -> Optional[date]:
        if self.week_start is None:
            return None
        return self.week_start + timedelta(days=idx)

    def day_label(self, idx: int) -> str:
        d = self.day_date(idx)
        if d is None:
            return self.days[idx]
        return f"{self.days[idx]} {d.strftime('%m/%d')}"

    def labels(self) -> List[str]:
        return [self.day_label(i) for i in range(len(self.days))]


def week_monday(text: str) -> date:
    """任意の日付文字列から、その週の月曜日を求める"""
    d = parser.parse(text).date()
    return d + relativedelta(weekday=MO(-1))
