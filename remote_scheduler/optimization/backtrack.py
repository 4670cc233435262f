# remote_scheduler/optimization/backtrack.py
from __future__ import annotations

import logging
import random
from typing import List, Optional, Sequence, Tuple

from remote_scheduler.domain.bitmask import is_remote
from remote_scheduler.domain.models import InputData, Schedule, SolveResult
from remote_scheduler.preprocessing.preprocess import Preprocessed
from remote_scheduler.validation.validator import is_legal

logger = logging.getLogger(__name__)


class _NodeLimitReached(Exception):
    pass


def advance_state(
    mask: int,
    counts: Sequence[int],
    consecutive: Sequence[int],
) -> Tuple[List[int], List[int]]:
    """候補マスクを置いた後の状態（コピー）を返す。元の配列は変更しない。"""
    new_counts = list(counts)
    new_consec = list(consecutive)
    for p in range(len(new_counts)):
        if is_remote(mask, p):
            new_counts[p] += 1
            new_consec[p] += 1
        else:
            new_consec[p] = 0
    return new_counts, new_consec


def solve_random(
    data: InputData,
    pre: Preprocessed,
    rng: random.Random,
    node_limit: int = 0,
) -> SolveResult:
    """
    ランダム順のバックトラック探索。
    - 日ごとに候補マスクをシャッフルして順に試す
    - 全日を埋めた時点で全員の日数がちょうど規定数なら採用（最初の解で打ち切り）
    - 全候補を試して解がなければ infeasible（例外ではない）
    node_limit > 0 の場合、探索ノード数が上限を超えたら node_limit で打ち切る。
    """
    n = len(data.persons)
    num_days = len(data.days)
    schedule: List[int] = [0] * num_days
    nodes = 0

    def backtrack(day: int, counts: List[int], consec: List[int]) -> bool:
        nonlocal nodes
        nodes += 1
        if node_limit and nodes > node_limit:
            raise _NodeLimitReached()

        if day == num_days:
            return all(c == data.remotes_per_person for c in counts)

        # 枠0の日（祝日）は分岐なしで次の日へ。人の状態も変えない。
        if data.days[day].slots == 0:
            schedule[day] = 0
            return backtrack(day + 1, counts, consec)

        shuffled = list(pre.choices_by_day[day])
        rng.shuffle(shuffled)

        for mask in shuffled:
            if not is_legal(day, mask, counts, consec, data):
                continue
            new_counts, new_consec = advance_state(mask, counts, consec)
            schedule[day] = mask
            if backtrack(day + 1, new_counts, new_consec):
                return True
        return False

    try:
        found = backtrack(0, [0] * n, [0] * n)
    except _NodeLimitReached:
        logger.info("node limit reached: nodes=%d", nodes - 1)
        return SolveResult(feasible=False, status="node_limit", schedule=None, nodes=nodes - 1)

    if not found:
        logger.info("no schedule: nodes=%d", nodes)
        return SolveResult(feasible=False, status="infeasible", schedule=None, nodes=nodes)

    logger.info("schedule found: nodes=%d", nodes)
    return SolveResult(feasible=True, status="ok", schedule=Schedule(masks=tuple(schedule)), nodes=nodes)


def solve_with_attempts(
    data: InputData,
    pre: Preprocessed,
    rng: random.Random,
    attempts: int = 1,
    node_limit: int = 0,
) -> SolveResult:
    """
    呼び出し側の再試行。毎回シャッフルし直して探索する。
    infeasible（全探索済み）は再試行しても結果が変わらないので打ち切る。
    """
    result: Optional[SolveResult] = None
    total_nodes = 0
    for i in range(1, max(1, attempts) + 1):
        result = solve_random(data, pre, rng, node_limit=node_limit)
        total_nodes += result.nodes
        result.nodes = total_nodes
        result.attempts = i
        if result.feasible or result.status == "infeasible":
            break
        logger.debug("attempt %d stopped by node limit, retrying", i)
    return result
