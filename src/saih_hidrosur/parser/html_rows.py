"""BeautifulSoup adapter that turns the status table into TableRow values."""

from __future__ import annotations

from typing import Iterator, List, Union

from bs4 import BeautifulSoup, Tag

from ..domain.models import TableRow

Document = Union[str, bytes, BeautifulSoup]

ROW_SELECTOR = "table tbody tr"
# <tbody> を省略したマークアップ用（ブラウザは暗黙の tbody を補う）
IMPLICIT_BODY_ROW_SELECTOR = "table > tr"
HEADER_CELL_SELECTOR = 'th[colspan="2"]'


def load_soup(document: Document) -> BeautifulSoup:
    """HTML文字列またはパース済みの BeautifulSoup を受け取り soup を返す。

    Raises:
        TypeError: HTMLとして扱えない型が渡された場合
    """
    if isinstance(document, BeautifulSoup):
        return document
    if isinstance(document, (str, bytes)):
        return BeautifulSoup(document, "html.parser")
    raise TypeError(f"HTML文字列または BeautifulSoup を指定してください: {type(document).__name__}")


def select_table_rows(soup: BeautifulSoup) -> List[Tag]:
    rows = soup.select(ROW_SELECTOR)
    if rows:
        return rows
    return soup.select(IMPLICIT_BODY_ROW_SELECTOR)


def to_table_row(tr: Tag) -> TableRow:
    """tr 要素からセルテキストと幅広見出しセルのテキストを取り出す。"""
    cells = tuple(td.get_text().strip() for td in tr.find_all("td"))
    headers = tr.select(HEADER_CELL_SELECTOR)
    header_text = "".join(th.get_text() for th in headers).strip() if headers else None
    return TableRow(cells=cells, header_text=header_text)


def iter_table_rows(document: Document) -> Iterator[TableRow]:
    """テーブル本体の行を文書順に TableRow として返す。"""
    for tr in select_table_rows(load_soup(document)):
        yield to_table_row(tr)
