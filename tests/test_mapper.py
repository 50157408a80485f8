import math
from datetime import date

from saih_hidrosur.parser import build_record
from saih_hidrosur.service.mapper import to_update_records


def test_maps_records_to_update_shape(make_data_row):
    record = build_record(make_data_row("58", "EMBALSE DE BENINAR", ["17,93", "54,99", "0,0", "9,86", "0,0", "9,9", "0,0", "7,75"]), "ALMERÍA")

    updates = to_update_records([record], run_date=date(2025, 10, 14))

    assert updates[0].to_dict() == {
        "id": 58,
        "nombre": "EMBALSE DE BENINAR",
        "aguaActualSAIH": 9.86,
        "fechaMedidaSAIH": "2025-10-14",
    }


def test_missing_volume_is_kept_as_nan(make_data_row):
    record = build_record(make_data_row(values=["n/d"] * 8), "HUELVA")

    update = to_update_records([record])[0]

    assert math.isnan(update.current_reading)
    assert update.to_dict()["aguaActualSAIH"] is None


def test_default_date_is_today_in_iso_format(make_data_row):
    record = build_record(make_data_row(), "CÁDIZ")

    update = to_update_records([record])[0]

    assert update.measured_on == date.today().isoformat()


def test_empty_input():
    assert to_update_records([]) == []
