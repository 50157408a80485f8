"""JSON output for records and storage updates."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Iterable, Union

from ..domain.models import ReservoirRecord, ReservoirUpdate
from ..logger.app_logger import get_logger

logger = get_logger(__name__)

Exportable = Union[ReservoirRecord, ReservoirUpdate]


def export_json(items: Iterable[Exportable], output_path: Union[str, Path]) -> Path:
    """レコードをJSON配列として書き出す（NaN・無限大は null）。"""
    path = Path(output_path)
    path.parent.mkdir(parents=True, exist_ok=True)

    data = [item.to_dict() for item in items]
    path.write_text(json.dumps(data, ensure_ascii=False, indent=2, allow_nan=False), encoding="utf-8")
    logger.info("JSONを出力しました: %s (%d 件)", path.resolve(), len(data))
    return path
