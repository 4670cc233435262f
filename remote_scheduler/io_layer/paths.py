# remote_scheduler/io_layer/paths.py
from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class InputPaths:
    """
    roster_file: 対象者と休暇明けをまとめた xlsx（任意。なければ設定の既定値を使う）
      people シート: A列=人物名（1行目は見出し）
      vacation シート: A列=人物名, B列=休暇明けの曜日名（任意シート）
    """
    roster_file: Optional[str] = None

    # シート名（運用で変えるならここだけ）
    people_sheet_name: str = "people"
    vacation_sheet_name: str = "vacation"
