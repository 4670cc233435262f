# remote_scheduler/domain/bitmask.py
from __future__ import annotations

from typing import Iterable, List, Sequence


def is_remote(mask: int, p: int) -> bool:
    return (mask >> p) & 1 == 1


def popcount(mask: int) -> int:
    return bin(mask).count("1")


def members(mask: int, n: int) -> List[int]:
    """マスクで立っているビット（人インデックス）を昇順で返す"""
    return [p for p in range(n) if is_remote(mask, p)]


def mask_of(indices: Iterable[int]) -> int:
    mask = 0
    for p in indices:
        mask |= 1 << p
    return mask


def names_of(mask: int, names: Sequence[str]) -> List[str]:
    return [names[p] for p in members(mask, len(names))]
