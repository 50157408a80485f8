import math

import pytest

from saih_hidrosur.domain.models import ReservoirRecord, TableRow
from saih_hidrosur.parser.record_builder import build_record, parse_identifier


def test_builds_typed_record(make_data_row):
    record = build_record(make_data_row(), "CÁDIZ")

    assert isinstance(record, ReservoirRecord)
    assert record.identifier == 3
    assert record.name == "EMBALSE DE CHARCO REDONDO"
    assert record.section_name == "CÁDIZ"
    assert record.current_percentage == pytest.approx(76.45)
    assert record.total_capacity_hm3 == pytest.approx(73.01)
    assert record.current_volume_hm3 == pytest.approx(55.82)
    assert record.volume_last_week_hm3 == pytest.approx(55.93)
    assert record.volume_last_year_hm3 == pytest.approx(41.27)
    assert record.chart_reference == "Ver"


def test_accepts_plain_cell_sequence():
    cells = ["58", "EMBALSE DE BENINAR", "17,93", "54,99", "0,0", "9,86", "0,0", "9,90", "0,0", "7,75"]

    record = build_record(cells, "ALMERÍA")

    assert record.current_volume_hm3 == pytest.approx(9.86)
    # 10列のみの場合はグラフ列なし
    assert record.chart_reference is None


def test_placeholder_fields_become_nan_without_rejecting(make_data_row):
    row = make_data_row("373", "EMBALSE DE PIEDRAS", ["n/d", "60,00", "*", "", "abc", "n/d", "n/d", "n/d"])

    record = build_record(row, "HUELVA")

    assert record is not None
    assert record.total_capacity_hm3 == pytest.approx(60.0)
    for value in (
        record.current_percentage,
        record.accumulated_today_mm,
        record.current_volume_hm3,
        record.accumulated_last_week_mm,
        record.volume_last_year_hm3,
    ):
        assert math.isnan(value)


def test_short_row_returns_none():
    assert build_record(TableRow(cells=("3", "EMBALSE", "1,0")), "CÁDIZ") is None


@pytest.mark.parametrize("identifier", ["", "TOTAL", "n/d", "—"])
def test_non_numeric_identifier_returns_none(make_data_row, identifier):
    assert build_record(make_data_row(identifier), "CÁDIZ") is None


def test_name_spacing_is_kept(make_data_row):
    record = build_record(make_data_row("29", "EMBALSE DEL  GUADALTEBA"), "MÁLAGA")
    assert record.name == "EMBALSE DEL  GUADALTEBA"


@pytest.mark.parametrize("text, expected", [("3", 3), (" 271 ", 271), ("58a", 58), ("x58", None)])
def test_parse_identifier(text, expected):
    assert parse_identifier(text) == expected


def test_to_dict_replaces_nan_with_none(make_data_row):
    row = make_data_row(values=["*"] * 8)
    data = build_record(row, "CÁDIZ").to_dict()

    assert data["identifier"] == 3
    assert data["current_volume_hm3"] is None
    assert data["section_name"] == "CÁDIZ"


def test_to_dict_replaces_infinity_with_none(make_data_row):
    row = make_data_row(values=["1e999"] + ["1,0"] * 7)
    record = build_record(row, "CÁDIZ")

    assert math.isinf(record.current_percentage)
    assert record.to_dict()["current_percentage"] is None
