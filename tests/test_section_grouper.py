from saih_hidrosur.domain.models import TableRow
from saih_hidrosur.parser.section_grouper import group_rows, iter_section_rows


def test_rows_follow_latest_header(make_data_row, header_row):
    rows = [
        header_row("CÁDIZ"),
        make_data_row("3"),
        make_data_row("8"),
        header_row("MÁLAGA"),
        make_data_row("16"),
    ]

    groups = group_rows(rows)

    assert [g.name for g in groups] == ["CÁDIZ", "MÁLAGA"]
    assert [r.cells[0] for r in groups[0].rows] == ["3", "8"]
    assert [r.cells[0] for r in groups[1].rows] == ["16"]


def test_data_row_before_any_header_is_dropped(make_data_row, header_row):
    rows = [make_data_row("1"), header_row("GRANADA"), make_data_row("51")]

    pairs = list(iter_section_rows(rows))

    assert [(name, row.cells[0]) for name, row in pairs] == [("GRANADA", "51")]


def test_banners_do_not_change_section(make_data_row, header_row):
    rows = [
        header_row("Fecha Actual: 14/10/2025"),
        header_row("ALMERÍA"),
        make_data_row("58"),
        header_row("TOTAL ALMERÍA"),
        header_row("D.H. Cuencas Mediterráneas Andaluzas"),
        make_data_row("84"),
    ]

    pairs = [(name, row.cells[0]) for name, row in iter_section_rows(rows)]

    assert pairs == [("ALMERÍA", "58"), ("ALMERÍA", "84")]


def test_repeated_header_name_starts_new_group(make_data_row, header_row):
    rows = [
        header_row("HUELVA"),
        make_data_row("371"),
        header_row("SEVILLA"),
        make_data_row("400"),
        header_row("HUELVA"),
        make_data_row("373"),
    ]

    groups = group_rows(rows)

    assert [g.name for g in groups] == ["HUELVA", "SEVILLA", "HUELVA"]
    assert groups[2].rows[0].cells[0] == "373"


def test_header_without_data_rows_creates_no_group(make_data_row, header_row):
    rows = [header_row("CÓRDOBA"), header_row("CÁDIZ"), make_data_row("3")]

    assert [g.name for g in group_rows(rows)] == ["CÁDIZ"]


def test_short_rows_are_skipped(make_data_row, header_row):
    rows = [header_row("CÁDIZ"), TableRow(cells=("x",) * 5), make_data_row("3")]

    assert len(group_rows(rows)[0].rows) == 1


def test_empty_input():
    assert group_rows([]) == []
    assert list(iter_section_rows(iter([]))) == []
