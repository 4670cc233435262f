from math import comb

import pytest

from remote_scheduler.domain.bitmask import popcount
from remote_scheduler.preprocessing.combinations import generate_combinations


@pytest.mark.parametrize("n,k", [(1, 0), (1, 1), (5, 2), (7, 4), (7, 5), (7, 7), (10, 3)])
def test_count_matches_binomial_and_masks_are_distinct(n, k):
    masks = generate_combinations(n, k)
    assert len(masks) == comb(n, k)
    assert len(set(masks)) == len(masks)
    assert all(popcount(m) == k for m in masks)
    assert all(m < (1 << n) for m in masks)


def test_k_zero_is_single_empty_mask():
    assert generate_combinations(4, 0) == [0]
    assert generate_combinations(0, 0) == [0]


def test_k_greater_than_n_is_empty():
    assert generate_combinations(3, 4) == []


def test_small_case_exact():
    assert sorted(generate_combinations(3, 2)) == [0b011, 0b101, 0b110]
