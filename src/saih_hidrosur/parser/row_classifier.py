"""Structural classification of reservoir table rows."""

from __future__ import annotations

from typing import Optional

from ..domain.models import RowKind, TableRow

# 幅広見出しセルを使うが県の区切りではないバナー（日付・合計・流域コード）
EXCLUDED_BANNERS = ("Fecha Actual", "TOTAL", "D.H.")
NBSP_PLACEHOLDER = "&nbsp"

# 貯水池のデータ行が持つ最低限のセル数
MIN_DATA_CELLS = 10


def _is_excluded_banner(text: str) -> bool:
    return text == NBSP_PLACEHOLDER or any(banner in text for banner in EXCLUDED_BANNERS)


def detect_section_name(row: TableRow) -> Optional[str]:
    """見出し行なら県名を、それ以外なら None を返す。"""
    text = (row.header_text or "").strip()
    if not text or _is_excluded_banner(text):
        return None
    return text


def is_data_row(row: TableRow) -> bool:
    return len(row.cells) >= MIN_DATA_CELLS


def classify_row(row: TableRow) -> RowKind:
    """行を SECTION / DATA / SKIP に分類する。

    合計行などのバナー行はセル数に関係なく SKIP とする。
    """
    if detect_section_name(row) is not None:
        return RowKind.SECTION
    if (row.header_text or "").strip():
        return RowKind.SKIP
    if is_data_row(row):
        return RowKind.DATA
    return RowKind.SKIP
