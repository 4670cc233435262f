# remote_scheduler/io_layer/xlsx_reader.py
from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, List, Tuple

from openpyxl import load_workbook

from remote_scheduler.io_layer.paths import InputPaths


def _cell_text(v) -> str:
    return "" if v is None else str(v).strip()


@dataclass(frozen=True)
class RosterReader:
    paths: InputPaths

    def read_people(self) -> List[str]:
        """people シートの A列（2行目以降）を人物名として読む。空行は無視。"""
        wb = load_workbook(self.paths.roster_file, read_only=True, data_only=True)
        try:
            if self.paths.people_sheet_name not in wb.sheetnames:
                raise ValueError(
                    f"{self.paths.roster_file} に '{self.paths.people_sheet_name}' シートが見つかりません。"
                )
            ws = wb[self.paths.people_sheet_name]
            people: List[str] = []
            for r in ws.iter_rows(min_row=2, max_col=1, values_only=True):
                name = _cell_text(r[0]) if r else ""
                if name:
                    people.append(name)
            if not people:
                raise ValueError(
                    f"{self.paths.roster_file} の '{self.paths.people_sheet_name}' シートに人物名がありません。"
                )
            return people
        finally:
            wb.close()

    def read_vacation_returns(self) -> Dict[str, List[str]]:
        """vacation シート（任意）：A列=人物名, B列=休暇明けの曜日名。同じ人物の複数行はすべて有効。"""
        wb = load_workbook(self.paths.roster_file, read_only=True, data_only=True)
        try:
            if self.paths.vacation_sheet_name not in wb.sheetnames:
                return {}
            ws = wb[self.paths.vacation_sheet_name]
            out: Dict[str, List[str]] = {}
            for r in ws.iter_rows(min_row=2, max_col=2, values_only=True):
                name = _cell_text(r[0]) if r else ""
                day = _cell_text(r[1]) if r and len(r) > 1 else ""
                if not name:
                    continue
                if not day:
                    raise ValueError(f"休暇明けの曜日が空です: {name}")
                out.setdefault(name, []).append(day)
            return out
        finally:
            wb.close()

    def read_all(self) -> Tuple[List[str], Dict[str, List[str]]]:
        return self.read_people(), self.read_vacation_returns()
