"""Projection of extracted records into the storage-update shape."""

from __future__ import annotations

from datetime import date
from typing import Iterable, List, Optional

from ..domain.models import ReservoirRecord, ReservoirUpdate


def to_update_records(
    records: Iterable[ReservoirRecord],
    run_date: Optional[date] = None,
) -> List[ReservoirUpdate]:
    """ReservoirRecord を保存先の更新形式に写像する。

    計測日は実行日（YYYY-MM-DD）で、省略時は今日の日付を使う。
    """
    measured_on = (run_date or date.today()).isoformat()
    return [
        ReservoirUpdate(
            identifier=record.identifier,
            name=record.name,
            current_reading=record.current_volume_hm3,
            measured_on=measured_on,
        )
        for record in records
    ]
