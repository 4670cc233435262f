import dataclasses
import random

import pytest

from remote_scheduler.config import DEFAULT_CONFIG
from remote_scheduler.preprocessing.preprocess import build_input_data


PEOPLE = ["Oussama", "Outman", "Ayoub", "Omar", "Yamin", "Sara", "Hamza"]


def make_config(**overrides):
    """既定設定（7名・5日・基本4枠・水曜+1・祝日なし・3日）に上書きを適用する"""
    week = dataclasses.replace(DEFAULT_CONFIG.week, **overrides.pop("week", {}))
    rules = dataclasses.replace(DEFAULT_CONFIG.rules, **overrides.pop("rules", {}))
    overrides.setdefault("people", tuple(PEOPLE))
    return dataclasses.replace(DEFAULT_CONFIG, week=week, rules=rules, **overrides)


@pytest.fixture
def cfg():
    return make_config()


@pytest.fixture
def data(cfg):
    return build_input_data(cfg, PEOPLE)


@pytest.fixture
def rng():
    return random.Random(1234)
