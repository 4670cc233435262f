# remote_scheduler/preprocessing/combinations.py
from __future__ import annotations

from typing import List


def generate_combinations(n: int, k: int) -> List[int]:
    """
    n人からちょうどk人を選ぶ全組合せをビットマスクで返す。
    k=0 なら空マスク1つ、k>n なら空リスト。順序は保証しない（呼び出し側でシャッフル）。
    """
    out: List[int] = []
    if k < 0 or k > n:
        return out
    _combine(0, 0, n, k, out)
    return out


def _combine(start: int, mask: int, n: int, k: int, out: List[int]) -> None:
    if k == 0:
        out.append(mask)
        return
    # 残りk個を置ける位置までに限定（昇順に選ぶので重複しない）
    for i in range(start, n - k + 1):
        _combine(i + 1, mask | (1 << i), n, k - 1, out)
