"""CSV output for extracted records."""

from __future__ import annotations

from pathlib import Path
from typing import Iterable, Union

import pandas as pd

from ..domain.models import ReservoirRecord, ReservoirUpdate
from ..logger.app_logger import get_logger

logger = get_logger(__name__)

UPDATE_COLUMNS = ["id", "nombre", "aguaActualSAIH", "fechaMedidaSAIH"]


def records_to_dataframe(records: Iterable[ReservoirRecord]) -> pd.DataFrame:
    """ReservoirRecord のリストを DataFrame に変換する（欠測・無限大は空セル）"""
    rows = [record.to_dict() for record in records]
    return pd.DataFrame(rows, columns=list(ReservoirRecord.field_names()))


def updates_to_dataframe(updates: Iterable[ReservoirUpdate]) -> pd.DataFrame:
    return pd.DataFrame([update.to_dict() for update in updates], columns=UPDATE_COLUMNS)


def export_csv(
    items: Iterable[Union[ReservoirRecord, ReservoirUpdate]],
    output_path: Union[str, Path],
    *,
    updates: bool = False,
) -> Path:
    """レコードをCSVとして書き出す（Excel で開けるよう utf-8-sig）。

    updates=True のときは保存先の更新形式の列で出力する（0件でも列は同じ）。
    """
    items = list(items)
    if updates:
        df = updates_to_dataframe(items)
    else:
        df = records_to_dataframe(items)

    path = Path(output_path)
    path.parent.mkdir(parents=True, exist_ok=True)
    df.to_csv(path, index=False, encoding="utf-8-sig")
    logger.info("CSVを出力しました: %s (%d 件)", path.resolve(), len(df))
    return path
