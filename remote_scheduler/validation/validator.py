# remote_scheduler/validation/validator.py
from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, FrozenSet, Iterable, List, Mapping, Sequence

from remote_scheduler.config import AppConfig
from remote_scheduler.domain.bitmask import is_remote, popcount
from remote_scheduler.domain.models import InputData, Schedule


@dataclass(frozen=True)
class ValidationError(Exception):
    message: str


@dataclass(frozen=True)
class ValidationWarning:
    message: str


def day_index(days: Sequence[str], day: str) -> int:
    """曜日名 -> インデックス（大文字小文字は区別しない）"""
    for i, name in enumerate(days):
        if name.lower() == day.strip().lower():
            return i
    raise ValidationError(f"不明な曜日です: {day}")


def validate_config(cfg: AppConfig) -> List[ValidationWarning]:
    """設定の整合性チェック。致命的なものは ValidationError、探索前に即中断。"""
    warnings: List[ValidationWarning] = []
    week, rules = cfg.week, cfg.rules

    if not cfg.people:
        raise ValidationError("対象者が0名です。")
    if len(set(cfg.people)) != len(cfg.people):
        raise ValidationError("対象者の名前が重複しています。")
    if not week.days:
        raise ValidationError("曜日が設定されていません。")
    if len({d.lower() for d in week.days}) != len(week.days):
        raise ValidationError("曜日名が重複しています。")
    if not (0 <= week.extra_day < len(week.days)):
        raise ValidationError(f"+1枠の日のインデックスが範囲外です: {week.extra_day}")
    if week.base_slots < 0:
        raise ValidationError("1日あたりの枠は0以上にしてください。")
    if rules.remotes_per_person < 0:
        raise ValidationError("1人あたりのリモート日数は0以上にしてください。")
    if rules.max_consecutive < 1:
        raise ValidationError("連続リモート上限は1以上にしてください。")

    # 祝日名は探索前に解決できること
    holiday_idx = {day_index(week.days, h) for h in week.holidays}

    total_capacity = 0
    for i in range(len(week.days)):
        if i in holiday_idx:
            continue
        slots = week.base_slots + (1 if i == week.extra_day else 0)
        total_capacity += slots
        if slots > len(cfg.people):
            warnings.append(ValidationWarning(
                f"{week.days[i]} の枠({slots})が人数({len(cfg.people)})を超えています（生成不可能）。"
            ))

    need = len(cfg.people) * rules.remotes_per_person
    if need != total_capacity:
        # 枠は毎日ちょうど埋まるので、合計が一致しないと必ず生成不可能
        warnings.append(ValidationWarning(
            f"必要リモート日数の合計({need})と週の枠の合計({total_capacity})が一致しません。"
        ))

    return warnings


def forbidden_from_vacations(
    days: Sequence[str],
    people: Sequence[str],
    vacation_returns: Mapping[str, Iterable[str]],
) -> Dict[str, FrozenSet[int]]:
    """休暇明けの日（人名 -> 曜日名の一覧）を禁止日集合に変換する"""
    out: Dict[str, set] = {}
    for name, day_names in vacation_returns.items():
        if name not in people:
            raise ValidationError(f"休暇明けの指定に不明な人物がいます: {name}")
        forbidden = out.setdefault(name, set())
        for day in day_names:
            forbidden.add(day_index(days, day))
    return {k: frozenset(v) for k, v in out.items()}


def is_legal(
    day: int,
    mask: int,
    counts: Sequence[int],
    consecutive: Sequence[int],
    data: InputData,
) -> bool:
    """その日の候補マスクが置けるか（状態は変更しない）"""
    for p in range(len(data.persons)):
        if not is_remote(mask, p):
            continue
        if consecutive[p] >= data.max_consecutive or counts[p] >= data.remotes_per_person:
            return False
        if day in data.forbidden_for(p):
            return False
    return True


def check_schedule(schedule: Schedule, data: InputData) -> List[str]:
    """完成したスケジュールの事後チェック。違反メッセージの一覧を返す（空ならOK）。"""
    problems: List[str] = []
    n = len(data.persons)

    if len(schedule) != len(data.days):
        return [f"日数が一致しません: {len(schedule)} != {len(data.days)}"]

    for d in data.days:
        cnt = popcount(schedule.masks[d.idx])
        if cnt != d.slots:
            problems.append(f"{d.name}: 人数 {cnt} が枠 {d.slots} と一致しません")

    for p in range(n):
        name = data.persons[p].name
        total = 0
        streak = 0
        for d in data.days:
            if is_remote(schedule.masks[d.idx], p):
                total += 1
                streak += 1
                if streak > data.max_consecutive:
                    problems.append(f"{name}: {d.name} で連続リモートが上限を超えています")
                if d.idx in data.forbidden_for(p):
                    problems.append(f"{name}: 禁止日 {d.name} にリモートが入っています")
            else:
                # 祝日でもリセットする（探索側は祝日で連続数を保持するので、こちらの方が緩い）
                streak = 0
        if total != data.remotes_per_person:
            problems.append(f"{name}: リモート日数 {total} != {data.remotes_per_person}")

    return problems
