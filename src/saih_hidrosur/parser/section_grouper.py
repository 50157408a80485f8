"""Positional grouping of data rows under province headers."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, Iterator, List, Optional, Tuple

from ..domain.models import RowKind, TableRow
from ..logger.app_logger import get_logger
from .row_classifier import classify_row, detect_section_name

logger = get_logger(__name__)


@dataclass
class SectionGroup:
    """県名と、その見出しに続くデータ行"""
    name: str
    rows: List[TableRow] = field(default_factory=list)


def group_rows(rows: Iterable[TableRow]) -> List[SectionGroup]:
    """データ行を直前の見出し行ごとのグループにまとめる。

    - 最初の見出し行より前のデータ行は所属が決まらないため捨てる
    - 同じ県名の見出しが再び現れた場合も新しいグループとして扱う
    - データ行を持たない見出しはグループを作らない
    """
    groups: List[SectionGroup] = []
    current_section: Optional[str] = None
    current: Optional[SectionGroup] = None

    for index, row in enumerate(rows):
        kind = classify_row(row)
        if kind is RowKind.SECTION:
            current_section = detect_section_name(row)
            current = None
        elif kind is RowKind.DATA:
            if current_section is None:
                logger.debug("見出し行より前のデータ行を除外しました (row=%d)", index)
                continue
            if current is None:
                current = SectionGroup(name=current_section)
                groups.append(current)
            current.rows.append(row)

    return groups


def iter_section_rows(rows: Iterable[TableRow]) -> Iterator[Tuple[str, TableRow]]:
    """(県名, データ行) を文書順に返すフラット版。"""
    for group in group_rows(rows):
        for row in group.rows:
            yield group.name, row
