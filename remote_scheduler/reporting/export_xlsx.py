# remote_scheduler/reporting/export_xlsx.py
from __future__ import annotations

from io import BytesIO
from pathlib import Path
from typing import BinaryIO, Union

import pandas as pd
from openpyxl.utils import get_column_letter

from remote_scheduler.config import ExportConfig


def _autosize_columns(ws, df: pd.DataFrame) -> None:
    for i, col in enumerate(df.columns, start=1):
        width = max([len(str(col))] + [len(str(v)) for v in df[col].tolist()])
        ws.column_dimensions[get_column_letter(i)].width = width + 2


def _write_frames(
    target: Union[str, BinaryIO],
    schedule_df: pd.DataFrame,
    person_df: pd.DataFrame,
    cfg: ExportConfig,
) -> None:
    with pd.ExcelWriter(target, engine="openpyxl") as w:
        # 1枚目：日ごとのリモート者（見出し=曜日）
        schedule_df.to_excel(w, sheet_name=cfg.sheet_name, index=False)
        person_df.to_excel(w, sheet_name=cfg.summary_sheet_name, index=False)
        _autosize_columns(w.sheets[cfg.sheet_name], schedule_df)
        _autosize_columns(w.sheets[cfg.summary_sheet_name], person_df)


def export_schedule_xlsx(
    out_path: str,
    schedule_df: pd.DataFrame,
    person_df: pd.DataFrame,
    cfg: ExportConfig,
) -> str:
    Path(out_path).parent.mkdir(parents=True, exist_ok=True)
    _write_frames(out_path, schedule_df, person_df, cfg)
    return out_path


def export_schedule_bytes(schedule_df: pd.DataFrame, person_df: pd.DataFrame, cfg: ExportConfig) -> bytes:
    """Streamlitダウンロード用にxlsxをメモリに書き出す。"""
    buf = BytesIO()
    _write_frames(buf, schedule_df, person_df, cfg)
    return buf.getvalue()
