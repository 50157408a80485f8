from pathlib import Path

import pytest

from saih_hidrosur.domain.models import TableRow

FIXTURES_DIR = Path(__file__).parent / "fixtures"


@pytest.fixture()
def embalses_html():
    return (FIXTURES_DIR / "embalses.html").read_text(encoding="utf-8")


@pytest.fixture()
def make_data_row():
    """11列のデータ行を作る。values で3列目以降を上書きできる。"""
    def _factory(identifier="3", name="EMBALSE DE CHARCO REDONDO", values=None, chart="Ver"):
        numeric = list(values) if values is not None else ["76,45", "73,01", "0,0", "55,82", "0,0", "55,93", "0,0", "41,27"]
        return TableRow(cells=(identifier, name, *numeric, chart))
    return _factory


@pytest.fixture()
def header_row():
    """幅広見出しセルだけを持つ行を作る。"""
    def _factory(text):
        return TableRow(cells=(), header_text=text)
    return _factory
