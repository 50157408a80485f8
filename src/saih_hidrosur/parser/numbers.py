"""Locale-aware numeric parsing for table cells."""

from __future__ import annotations

import math
import re
from typing import Optional

# 「データなし」を表すプレースホルダー
NO_DATA_SENTINELS = frozenset({"*", "n/d"})

_LEADING_NUMBER = re.compile(r"[+-]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?")


def parse_locale_number(text: Optional[str]) -> float:
    """セル文字列を float に変換する（小数点はカンマ）。

    空文字・プレースホルダー・数値として読めない値はすべて NaN を返し、
    例外は送出しない。"9,86" -> 9.86、"55,82 hm3" のような末尾の単位は無視する。
    """
    if text is None:
        return math.nan
    value = text.strip()
    if not value or value in NO_DATA_SENTINELS:
        return math.nan

    # 最初のカンマだけを小数点として扱う
    normalized = value.replace(",", ".", 1)
    match = _LEADING_NUMBER.match(normalized)
    if match is None:
        return math.nan
    return float(match.group(0))
