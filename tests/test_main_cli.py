from openpyxl import Workbook, load_workbook

from remote_scheduler.main_cli import main


def test_generates_schedule_and_xlsx(tmp_path, capsys):
    out = tmp_path / "remote.xlsx"
    code = main(["--seed", "5", "--out", str(out), "--week-of", "2026-10-21"])
    assert code == 0
    text = capsys.readouterr().out
    assert "[RESULT] 週間スケジュール:" in text
    assert "Mercredi 10/21 は今週 5 枠です。" in text
    assert f"[RESULT] OK: {out}" in text

    ws = load_workbook(out)["Remote Schedule"]
    header = [c.value for c in ws[1]]
    assert header[2] == "Mercredi 10/21 (5枠)"
    names = [c.value for row in ws.iter_rows(min_row=2) for c in row if c.value]
    assert len(names) == 21


def test_same_seed_prints_same_schedule(capsys):
    main(["--seed", "9", "--no-export"])
    first = capsys.readouterr().out
    main(["--seed", "9", "--no-export"])
    assert capsys.readouterr().out == first


def test_vacation_day_is_respected(capsys):
    assert main(["--seed", "1", "--no-export", "--vacation", "Oussama=Lundi"]) == 0
    lundi = [l for l in capsys.readouterr().out.splitlines() if l.startswith(" Lundi:")][0]
    assert "Oussama" not in lundi


def test_unknown_holiday_is_configuration_error(capsys):
    assert main(["--holidays", "Dimanche", "--no-export"]) == 1
    assert "[ERROR] 不明な曜日です: Dimanche" in capsys.readouterr().out


def test_bad_vacation_format(capsys):
    assert main(["--vacation", "Oussama", "--no-export"]) == 1
    assert "[ERROR]" in capsys.readouterr().out


def test_infeasible_is_reported_separately(capsys):
    assert main(["--holidays", "Lundi", "--seed", "0", "--no-export"]) == 2
    text = capsys.readouterr().out
    assert "[WARN]" in text
    assert "[INFO] 祝日: Lundi" in text
    assert "生成不可能" in text


def test_node_limit_message(capsys):
    assert main(["--holidays", "Lundi", "--node-limit", "3", "--attempts", "2", "--no-export"]) == 2
    assert "探索上限（3 ノード × 2 回）" in capsys.readouterr().out


def test_roster_file(tmp_path, capsys):
    wb = Workbook()
    ws = wb.active
    ws.title = "people"
    ws.append(["name"])
    for i in range(8):
        ws.append([f"P{i}"])
    vs = wb.create_sheet("vacation")
    vs.append(["name", "return_day"])
    vs.append(["P0", "Mardi"])
    path = tmp_path / "roster.xlsx"
    wb.save(path)

    code = main([
        "--roster", str(path), "--holidays", "Mercredi", "--quota", "2",
        "--seed", "3", "--no-export",
    ])
    assert code == 0
    mardi = [l for l in capsys.readouterr().out.splitlines() if l.startswith(" Mardi:")][0]
    assert "P0" not in mardi.split(": ")[1].split(", ")


def test_missing_roster_file(tmp_path, capsys):
    assert main(["--roster", str(tmp_path / "none.xlsx"), "--no-export"]) == 1
    assert "入力読み込み" in capsys.readouterr().out


def test_repeated_vacation_for_one_person(capsys):
    code = main(["--seed", "0", "--no-export", "--vacation", "Sara=Lundi", "--vacation", "Sara=Jeudi"])
    assert code == 0
    lines = capsys.readouterr().out.splitlines()
    for day in ("Lundi", "Jeudi"):
        line = [l for l in lines if l.startswith(f" {day}:")][0]
        assert "Sara" not in line.split(": ")[1].split(", ")


def test_roster_and_flag_vacations_are_merged(tmp_path, capsys):
    wb = Workbook()
    ws = wb.active
    ws.title = "people"
    ws.append(["name"])
    for name in ("Oussama", "Outman", "Ayoub", "Omar", "Yamin", "Sara", "Hamza"):
        ws.append([name])
    vs = wb.create_sheet("vacation")
    vs.append(["name", "return_day"])
    vs.append(["Sara", "Lundi"])
    path = tmp_path / "roster.xlsx"
    wb.save(path)

    assert main(["--roster", str(path), "--vacation", "Sara=Jeudi", "--seed", "4", "--no-export"]) == 0
    lines = capsys.readouterr().out.splitlines()
    for day in ("Lundi", "Jeudi"):
        line = [l for l in lines if l.startswith(f" {day}:")][0]
        assert "Sara" not in line.split(": ")[1].split(", ")


def test_roster_without_names_is_an_error(tmp_path, capsys):
    wb = Workbook()
    ws = wb.active
    ws.title = "people"
    ws.append(["name"])
    path = tmp_path / "roster.xlsx"
    wb.save(path)

    assert main(["--roster", str(path), "--seed", "0", "--no-export"]) == 1
    text = capsys.readouterr().out
    assert "[ERROR]" in text
    assert "[RESULT]" not in text
