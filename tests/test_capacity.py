from remote_scheduler.preprocessing.capacity import build_days, plan_slots_per_day
from remote_scheduler.preprocessing.preprocess import build_input_data, preprocess_all

from conftest import PEOPLE, make_config


def test_base_and_extra_day():
    assert plan_slots_per_day(5, 2, 4, []) == [4, 4, 5, 4, 4]


def test_holiday_is_zero():
    assert plan_slots_per_day(5, 2, 4, [0]) == [0, 4, 5, 4, 4]


def test_holiday_overrides_extra_day():
    assert plan_slots_per_day(5, 2, 4, [2, 4]) == [4, 4, 0, 4, 0]


def test_build_days_flags():
    days = build_days(["A", "B", "C"], [3, 0, 4], extra_day=2, holiday_idx=[1])
    assert [d.name for d in days] == ["A", "B", "C"]
    assert days[1].is_holiday and days[1].slots == 0
    assert days[2].is_extra and not days[2].is_holiday


def test_input_data_resolves_holiday_names_case_insensitively():
    cfg = make_config(week=dict(holidays=("lundi",)))
    data = build_input_data(cfg, PEOPLE)
    assert data.slots_per_day == [0, 4, 5, 4, 4]
    assert data.days[0].is_holiday


def test_preprocess_holiday_has_no_candidates():
    cfg = make_config(week=dict(holidays=("Lundi",)))
    pre = preprocess_all(build_input_data(cfg, PEOPLE))
    assert pre.choices_by_day[0] == ()
    assert len(pre.choices_by_day[1]) == 35
    assert len(pre.choices_by_day[2]) == 21
