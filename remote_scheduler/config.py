# remote_scheduler/config.py
from dataclasses import dataclass
from typing import Optional, Tuple


@dataclass(frozen=True)
class WeekConfig:
    """週の枠設定"""
    days: Tuple[str, ...] = ("Lundi", "Mardi", "Mercredi", "Jeudi", "Vendredi")
    base_slots: int = 4     # 1日あたりのリモート枠
    extra_day: int = 2      # +1枠の日（Mercredi）
    holidays: Tuple[str, ...] = ()  # 祝日（枠0）の曜日名


@dataclass(frozen=True)
class RuleConfig:
    """人ごとのルール（ハード制約）"""
    remotes_per_person: int = 3  # 週あたりのリモート日数（ちょうど）
    max_consecutive: int = 2     # 連続リモートの上限


@dataclass(frozen=True)
class SolverConfig:
    seed: Optional[int] = None   # None=毎回ランダム
    node_limit: int = 0          # 0=無制限
    attempts: int = 1            # 生成不可能時の再試行回数（呼び出し側）
    shuffle_people: bool = True  # 人の並び順もシャッフルする


@dataclass(frozen=True)
class ExportConfig:
    out_path: str = "assets/output/remote_schedule.xlsx"
    sheet_name: str = "Remote Schedule"
    summary_sheet_name: str = "person_summary"
    holiday_label: str = "(祝日)"
    extra_label: str = "({slots}枠)"


@dataclass(frozen=True)
class AppConfig:
    people: Tuple[str, ...] = ("Oussama", "Outman", "Ayoub", "Omar", "Yamin", "Sara", "Hamza")

    week: WeekConfig = WeekConfig()
    rules: RuleConfig = RuleConfig()
    solver: SolverConfig = SolverConfig()
    export: ExportConfig = ExportConfig()


DEFAULT_CONFIG = AppConfig()
