"""
貯水池状況テーブルのドメインモデル

TableRow はHTMLから切り出した1行、ReservoirRecord はデータ行1行分の
型付き計測値、ReservoirUpdate は保存先の更新形式を表す。
"""

from __future__ import annotations

import math
from dataclasses import asdict, dataclass, fields
from enum import Enum
from typing import Any, Dict, Optional, Tuple


class RowKind(Enum):
    """テーブル行の種別"""
    SECTION = "section"  # 県名の見出し行
    DATA = "data"        # 貯水池1件分のデータ行
    SKIP = "skip"


@dataclass(frozen=True)
class TableRow:
    """1行分のセルテキスト

    cells は通常セル（td）のテキスト、header_text は先頭の幅広見出しセル
    （th colspan=2）のテキスト。見出しセルが無い行では None。
    """
    cells: Tuple[str, ...]
    header_text: Optional[str] = None

    def __post_init__(self):
        if not isinstance(self.cells, tuple):
            object.__setattr__(self, "cells", tuple(self.cells))


@dataclass(frozen=True)
class ReservoirRecord:
    """貯水池1件分の計測値（欠測は NaN）"""
    identifier: int
    name: str
    section_name: str
    current_percentage: float
    total_capacity_hm3: float
    accumulated_today_mm: float
    current_volume_hm3: float
    accumulated_last_week_mm: float
    volume_last_week_hm3: float
    accumulated_last_year_mm: float
    volume_last_year_hm3: float
    chart_reference: Optional[str] = None

    @classmethod
    def field_names(cls) -> Tuple[str, ...]:
        return tuple(f.name for f in fields(cls))

    def to_dict(self) -> Dict[str, Any]:
        """辞書形式に変換（NaN・無限大は None に置き換える）"""
        return {key: _non_finite_to_none(value) for key, value in asdict(self).items()}


@dataclass(frozen=True)
class ReservoirUpdate:
    """保存先の更新形式（id・名称・現在貯水量・計測日）"""
    identifier: int
    name: str
    current_reading: float
    measured_on: str

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.identifier,
            "nombre": self.name,
            "aguaActualSAIH": _non_finite_to_none(self.current_reading),
            "fechaMedidaSAIH": self.measured_on,
        }


def _non_finite_to_none(value: Any) -> Any:
    """NaN・無限大は JSON で表せないため None にする"""
    if isinstance(value, float) and not math.isfinite(value):
        return None
    return value
