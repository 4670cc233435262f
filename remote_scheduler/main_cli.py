# remote_scheduler/main_cli.py
from __future__ import annotations

import argparse
import dataclasses
import logging
import random
from typing import Dict, List, Optional

from remote_scheduler.config import DEFAULT_CONFIG, AppConfig
from remote_scheduler.domain.weekgrid import WeekGrid
from remote_scheduler.io_layer.paths import InputPaths
from remote_scheduler.io_layer.xlsx_reader import RosterReader
from remote_scheduler.validation.validator import validate_config, check_schedule, day_index, ValidationError
from remote_scheduler.preprocessing.preprocess import build_input_data, ordered_people, preprocess_all
from remote_scheduler.optimization.backtrack import solve_with_attempts
from remote_scheduler.reporting.report import (
    build_person_summary, build_schedule_table, format_schedule_lines, header_labels,
)
from remote_scheduler.reporting.export_xlsx import export_schedule_xlsx


def parse_args(argv: Optional[List[str]] = None):
    p = argparse.ArgumentParser(description="週のリモート勤務スケジュールをランダム探索で生成する")
    p.add_argument("--roster", help="対象者・休暇明けの xlsx（people / vacation シート）")
    p.add_argument("--people", nargs="+", help="対象者（--roster より優先）")
    p.add_argument("--holidays", nargs="*", default=None, help="祝日の曜日名（指定なし=祝日なし）")
    p.add_argument("--extra-day", help="+1枠の曜日名")
    p.add_argument("--base-slots", type=int, help="1日あたりのリモート枠")
    p.add_argument("--quota", type=int, help="1人あたりのリモート日数")
    p.add_argument("--max-consecutive", type=int, help="連続リモートの上限")
    p.add_argument("--vacation", action="append", default=[], metavar="NAME=DAY",
                   help="休暇明けの日（その日はリモート不可）。複数指定可")
    p.add_argument("--seed", type=int, help="乱数シード（再現用）")
    p.add_argument("--attempts", type=int, help="ノード上限で打ち切った場合の再試行回数")
    p.add_argument("--node-limit", type=int, help="探索ノード数の上限（0=無制限）")
    p.add_argument("--no-shuffle", action="store_true", help="対象者の並び順をシャッフルしない")
    p.add_argument("--week-of", help="対象週の日付（例: 2026-10-19）。見出しに日付を付ける")
    p.add_argument("--out", help="出力xlsx")
    p.add_argument("--no-export", action="store_true", help="xlsxを出力しない")
    p.add_argument("--verbose", action="store_true")
    return p.parse_args(argv)


def _parse_vacations(items: List[str]) -> Dict[str, List[str]]:
    """NAME=DAY の並びを 人物名 -> 曜日名の一覧 にまとめる（同じ人物は複数日可）"""
    out: Dict[str, List[str]] = {}
    for item in items:
        name, sep, day = item.partition("=")
        if not sep or not name.strip() or not day.strip():
            raise ValidationError(f"--vacation の形式が不正です（NAME=DAY）: {item}")
        out.setdefault(name.strip(), []).append(day.strip())
    return out


def build_config(args, base: AppConfig = DEFAULT_CONFIG) -> AppConfig:
    """コマンドライン引数で既定設定を上書きする"""
    week = base.week
    if args.holidays is not None:
        week = dataclasses.replace(week, holidays=tuple(args.holidays))
    if args.extra_day is not None:
        week = dataclasses.replace(week, extra_day=day_index(week.days, args.extra_day))
    if args.base_slots is not None:
        week = dataclasses.replace(week, base_slots=args.base_slots)

    rules = base.rules
    if args.quota is not None:
        rules = dataclasses.replace(rules, remotes_per_person=args.quota)
    if args.max_consecutive is not None:
        rules = dataclasses.replace(rules, max_consecutive=args.max_consecutive)

    solver = base.solver
    if args.seed is not None:
        solver = dataclasses.replace(solver, seed=args.seed)
    if args.attempts is not None:
        solver = dataclasses.replace(solver, attempts=args.attempts)
    if args.node_limit is not None:
        solver = dataclasses.replace(solver, node_limit=args.node_limit)
    if args.no_shuffle:
        solver = dataclasses.replace(solver, shuffle_people=False)

    export = base.export
    if args.out:
        export = dataclasses.replace(export, out_path=args.out)

    people = tuple(args.people) if args.people else base.people
    return dataclasses.replace(base, people=people, week=week, rules=rules, solver=solver, export=export)


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)
    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    vacations: Dict[str, List[str]] = {}
    roster_people: List[str] = []
    if args.roster:
        reader = RosterReader(InputPaths(roster_file=args.roster))
        try:
            roster_people, vacations = reader.read_all()
        except (OSError, ValueError) as e:
            print(f"[ERROR] 入力読み込みでエラーが発生しました: {e}")
            return 1

    try:
        cfg = build_config(args)
        if args.roster and not args.people:
            cfg = dataclasses.replace(cfg, people=tuple(roster_people))
        for name, days in _parse_vacations(args.vacation).items():
            vacations.setdefault(name, []).extend(days)
        warnings = validate_config(cfg)
        grid = WeekGrid.from_text(cfg.week.days, args.week_of)
    except ValidationError as e:
        print(f"[ERROR] {e.message}")
        return 1
    except ValueError as e:
        # --week-of の日付が読めない
        print(f"[ERROR] 日付を解釈できません: {args.week_of} ({e})")
        return 1

    for w in warnings:
        print(f"[WARN] {w.message}")

    rng = random.Random(cfg.solver.seed)
    people = ordered_people(cfg.people, rng, cfg.solver.shuffle_people)
    try:
        data = build_input_data(cfg, people, vacations)
    except ValidationError as e:
        print(f"[ERROR] {e.message}")
        return 1

    extra = data.days[cfg.week.extra_day]
    if not extra.is_holiday:
        print(f"[INFO] {grid.day_label(extra.idx)} は今週 {extra.slots} 枠です。")
    holidays = [grid.day_label(d.idx) for d in data.days if d.is_holiday]
    if holidays:
        print(f"[INFO] 祝日: {', '.join(holidays)}")

    pre = preprocess_all(data)
    result = solve_with_attempts(
        data, pre, rng,
        attempts=cfg.solver.attempts,
        node_limit=cfg.solver.node_limit,
    )

    if not result.feasible:
        if result.status == "node_limit":
            print(f"[RESULT] 探索上限（{cfg.solver.node_limit} ノード × {result.attempts} 回）までに解が見つかりませんでした。")
        else:
            print("[RESULT] 生成不可能：この条件を満たすスケジュールは存在しません。条件を緩めてください。")
        return 2

    problems = check_schedule(result.schedule, data)
    if problems:
        # 探索結果が制約を満たさないのは内部不整合
        for msg in problems:
            print(f"[ERROR] {msg}")
        return 1

    print("[RESULT] 週間スケジュール:")
    for line in format_schedule_lines(data, result.schedule, grid):
        print(line)

    if args.no_export:
        return 0

    labels = header_labels(data, grid, cfg.export)
    schedule_df = build_schedule_table(data, result.schedule, labels)
    person_df = build_person_summary(data, result.schedule)
    out_path = export_schedule_xlsx(cfg.export.out_path, schedule_df, person_df, cfg.export)
    print(f"[RESULT] OK: {out_path}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
