import pytest
from openpyxl import Workbook

from remote_scheduler.io_layer.paths import InputPaths
from remote_scheduler.io_layer.xlsx_reader import RosterReader


def _write_roster(path, people, vacations=None):
    wb = Workbook()
    ws = wb.active
    ws.title = "people"
    ws.append(["name"])
    for p in people:
        ws.append([p])
    if vacations is not None:
        vs = wb.create_sheet("vacation")
        vs.append(["name", "return_day"])
        for name, day in vacations:
            vs.append([name, day])
    wb.save(path)
    return str(path)


def test_read_people_and_vacations(tmp_path):
    path = _write_roster(tmp_path / "roster.xlsx", ["Sara", " Omar ", None, "Hamza"], [("Sara", "Jeudi")])
    people, vacations = RosterReader(InputPaths(roster_file=path)).read_all()
    assert people == ["Sara", "Omar", "Hamza"]
    assert vacations == {"Sara": ["Jeudi"]}


def test_vacation_sheet_is_optional(tmp_path):
    path = _write_roster(tmp_path / "roster.xlsx", ["Sara"])
    assert RosterReader(InputPaths(roster_file=path)).read_vacation_returns() == {}


def test_missing_people_sheet(tmp_path):
    wb = Workbook()
    wb.active.title = "other"
    path = tmp_path / "bad.xlsx"
    wb.save(path)
    with pytest.raises(ValueError):
        RosterReader(InputPaths(roster_file=str(path))).read_people()


def test_vacation_without_day(tmp_path):
    path = _write_roster(tmp_path / "roster.xlsx", ["Sara"], [("Sara", None)])
    with pytest.raises(ValueError):
        RosterReader(InputPaths(roster_file=path)).read_vacation_returns()


def test_several_return_days_for_one_person(tmp_path):
    path = _write_roster(tmp_path / "roster.xlsx", ["Sara", "Omar"],
                         [("Sara", "Lundi"), ("Omar", "Mardi"), ("Sara", "Jeudi")])
    vacations = RosterReader(InputPaths(roster_file=path)).read_vacation_returns()
    assert vacations == {"Sara": ["Lundi", "Jeudi"], "Omar": ["Mardi"]}


def test_people_sheet_without_names(tmp_path):
    path = _write_roster(tmp_path / "roster.xlsx", [])
    with pytest.raises(ValueError):
        RosterReader(InputPaths(roster_file=path)).read_people()
