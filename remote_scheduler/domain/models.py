# remote_scheduler/domain/models.py
from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, FrozenSet, List, Optional, Tuple

from remote_scheduler.domain.bitmask import names_of, popcount


@dataclass(frozen=True)
class Person:
    idx: int   # ビット位置
    name: str


@dataclass(frozen=True)
class Day:
    idx: int
    name: str
    slots: int          # その日のリモート枠（祝日は0）
    is_extra: bool
    is_holiday: bool


@dataclass(frozen=True)
class InputData:
    persons: Tuple[Person, ...]                 # 並び順=ビット位置
    days: Tuple[Day, ...]
    forbidden: Dict[str, FrozenSet[int]]        # 人名 -> リモート禁止日のインデックス
    remotes_per_person: int
    max_consecutive: int

    @property
    def names(self) -> List[str]:
        return [p.name for p in self.persons]

    @property
    def slots_per_day(self) -> List[int]:
        return [d.slots for d in self.days]

    def forbidden_for(self, p: int) -> FrozenSet[int]:
        return self.forbidden.get(self.persons[p].name, frozenset())


@dataclass(frozen=True)
class Schedule:
    """日ごとのリモートマスク（生成後は不変）"""
    masks: Tuple[int, ...]

    def __len__(self) -> int:
        return len(self.masks)

    def remote_names(self, day_idx: int, names: List[str]) -> List[str]:
        return names_of(self.masks[day_idx], names)

    def headcount(self, day_idx: int) -> int:
        return popcount(self.masks[day_idx])


@dataclass
class SolveResult:
    feasible: bool
    status: str                      # "ok" / "infeasible" / "node_limit"
    schedule: Optional[Schedule]
    nodes: int = 0                   # 探索したノード数
    attempts: int = 1
