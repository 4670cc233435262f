# remote_scheduler/gui/app.py
from __future__ import annotations

import dataclasses
import random
from pathlib import Path
import sys

import streamlit as st

# 日本語コメント: Streamlitは実行ディレクトリが変わるため、リポジトリルートをパスに追加する。
ROOT_DIR = Path(__file__).resolve().parents[2]
if str(ROOT_DIR) not in sys.path:
    sys.path.append(str(ROOT_DIR))

from remote_scheduler.config import DEFAULT_CONFIG
from remote_scheduler.domain.weekgrid import WeekGrid
from remote_scheduler.validation.validator import validate_config, check_schedule, ValidationError
from remote_scheduler.preprocessing.preprocess import build_input_data, ordered_people, preprocess_all
from remote_scheduler.optimization.backtrack import solve_with_attempts
from remote_scheduler.reporting.report import build_person_summary, build_schedule_table, header_labels
from remote_scheduler.reporting.export_xlsx import export_schedule_bytes


def main():
    cfg = DEFAULT_CONFIG
    days = list(cfg.week.days)

    st.title("週間リモート勤務スケジューラ（ランダム探索）")

    st.header("入力")
    people = st.text_area("対象者（改行区切り）", value="\n".join(cfg.people)).strip().splitlines()
    people = [p.strip() for p in people if p.strip()]
    holidays = st.multiselect("祝日", options=days, default=list(cfg.week.holidays))
    extra_day = st.selectbox("+1枠の日", options=days, index=cfg.week.extra_day)
    base_slots = st.number_input("1日あたりの枠", min_value=0, max_value=50, value=cfg.week.base_slots)
    quota = st.number_input("1人あたりのリモート日数", min_value=0, max_value=len(days),
                            value=cfg.rules.remotes_per_person)
    week_of = st.date_input("対象週（任意）", value=None)

    st.subheader("休暇明け（その日はリモート不可）")
    vacation_text = st.text_area("人物名=曜日名（改行区切り）", value="").strip().splitlines()

    st.header("探索設定")
    seed_text = st.text_input("乱数シード（空=ランダム）", value="")
    node_limit = st.number_input("探索ノード上限（0=無制限）", min_value=0, value=cfg.solver.node_limit)
    attempts = st.number_input("再試行回数", min_value=1, max_value=100, value=cfg.solver.attempts)

    run = st.button("スケジュールを生成")

    if not run:
        st.stop()

    # 日本語コメント: 入力を設定に反映して検証（不正なら探索しない）
    try:
        seed = int(seed_text) if seed_text.strip() else None
    except ValueError:
        st.error(f"乱数シードは整数で指定してください: {seed_text}")
        st.stop()

    cfg2 = dataclasses.replace(
        cfg,
        people=tuple(people),
        week=dataclasses.replace(cfg.week, holidays=tuple(holidays), extra_day=days.index(extra_day),
                                 base_slots=int(base_slots)),
        rules=dataclasses.replace(cfg.rules, remotes_per_person=int(quota)),
        solver=dataclasses.replace(cfg.solver, seed=seed, node_limit=int(node_limit), attempts=int(attempts)),
    )

    vacations = {}
    for line in vacation_text:
        if not line.strip():
            continue
        name, sep, day = line.partition("=")
        if not sep:
            st.error(f"休暇明けの形式が不正です（人物名=曜日名）: {line}")
            st.stop()
        vacations.setdefault(name.strip(), []).append(day.strip())

    try:
        for w in validate_config(cfg2):
            st.warning(w.message)
        rng = random.Random(cfg2.solver.seed)
        data = build_input_data(cfg2, ordered_people(cfg2.people, rng, cfg2.solver.shuffle_people), vacations)
    except ValidationError as e:
        st.error(e.message)
        st.stop()

    grid = WeekGrid.from_text(cfg2.week.days, week_of.isoformat() if week_of else None)

    # 日本語コメント: 前処理 → 探索
    pre = preprocess_all(data)
    result = solve_with_attempts(data, pre, rng, attempts=cfg2.solver.attempts, node_limit=cfg2.solver.node_limit)

    if not result.feasible:
        if result.status == "node_limit":
            st.error("探索上限までに解が見つかりませんでした。上限を増やすか再試行してください。")
        else:
            st.error("生成不可能：この条件を満たすスケジュールは存在しません。")
        st.stop()

    problems = check_schedule(result.schedule, data)
    if problems:
        st.error("\n".join(problems))
        st.stop()

    labels = header_labels(data, grid, cfg2.export)
    schedule_df = build_schedule_table(data, result.schedule, labels)
    person_df = build_person_summary(data, result.schedule)

    st.success(f"スケジュールを生成しました（探索ノード数: {result.nodes}）。")

    tab1, tab2 = st.tabs(["週間スケジュール", "人物別サマリ"])
    with tab1:
        st.dataframe(schedule_df, use_container_width=True)
    with tab2:
        st.dataframe(person_df, use_container_width=True)

    # 日本語コメント: ダウンロード（xlsx）
    xlsx_bytes = export_schedule_bytes(schedule_df, person_df, cfg2.export)
    st.download_button(
        label="結果xlsxをダウンロード",
        data=xlsx_bytes,
        file_name=Path(cfg2.export.out_path).name,
        mime="application/vnd.openxmlformats-officedocument.spreadsheetml.sheet"
    )


if __name__ == "__main__":
    main()
