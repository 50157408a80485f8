"""Conversion of classified data rows into ReservoirRecord values."""

from __future__ import annotations

import re
from typing import Optional, Sequence, Union

from ..domain.models import ReservoirRecord, TableRow
from ..logger.app_logger import get_logger
from .numbers import parse_locale_number
from .row_classifier import MIN_DATA_CELLS

logger = get_logger(__name__)

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


def parse_identifier(text: str) -> Optional[int]:
    """先頭の整数部分を ID として読み取る。数字で始まらなければ None。"""
    match = _LEADING_INT.match(text or "")
    return int(match.group(1)) if match else None


def build_record(row: Union[TableRow, Sequence[str]], section_name: str) -> Optional[ReservoirRecord]:
    """データ行のセルを ReservoirRecord に変換する。

    Args:
        row: TableRow またはセルテキストの並び
        section_name: 行が属する県名（そのまま設定する）

    Returns:
        ReservoirRecord。セル数が足りない、または ID が数値でない場合は None。
        個々の数値セルが読めない場合は NaN として残す。
    """
    cols = list(row.cells if isinstance(row, TableRow) else row)
    if len(cols) < MIN_DATA_CELLS:
        return None

    identifier = parse_identifier(cols[0])
    if identifier is None:
        logger.debug("ID が数値でない行を除外しました: %s", "|".join(cols))
        return None

    return ReservoirRecord(
        identifier=identifier,
        name=cols[1],
        section_name=section_name,
        current_percentage=parse_locale_number(cols[2]),
        total_capacity_hm3=parse_locale_number(cols[3]),
        accumulated_today_mm=parse_locale_number(cols[4]),
        current_volume_hm3=parse_locale_number(cols[5]),
        accumulated_last_week_mm=parse_locale_number(cols[6]),
        volume_last_week_hm3=parse_locale_number(cols[7]),
        accumulated_last_year_mm=parse_locale_number(cols[8]),
        volume_last_year_hm3=parse_locale_number(cols[9]),
        chart_reference=cols[10] if len(cols) > 10 else None,
    )
