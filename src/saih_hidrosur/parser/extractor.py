"""Orchestration: HTML document -> flat list of ReservoirRecord."""

from __future__ import annotations

from typing import Iterable, List

from ..domain.models import ReservoirRecord, TableRow
from ..logger.app_logger import get_logger
from .html_rows import Document, iter_table_rows
from .record_builder import build_record
from .section_grouper import group_rows

logger = get_logger(__name__)


def extract_rows(rows: Iterable[TableRow]) -> List[ReservoirRecord]:
    """TableRow の並びから ReservoirRecord のリストを作る（県→行の順）。"""
    records: List[ReservoirRecord] = []
    for group in group_rows(rows):
        for row in group.rows:
            record = build_record(row, group.name)
            if record is not None:
                records.append(record)
        logger.debug("%s: %d 行を処理しました", group.name, len(group.rows))
    return records


def extract(document: Document) -> List[ReservoirRecord]:
    """貯水池状況ページのHTMLをパースしてレコードのリストを返す。

    テーブルが見つからない場合は空のリストを返す（エラーにはしない）。

    Args:
        document: HTML文字列（str/bytes）またはパース済みの BeautifulSoup

    Raises:
        TypeError: document がHTMLとして扱えない型の場合
    """
    records = extract_rows(iter_table_rows(document))
    logger.info("貯水池レコードを %d 件抽出しました", len(records))
    return records
