# saih_hidrosur/parser/__init__.py
from .extractor import extract, extract_rows
from .html_rows import iter_table_rows, load_soup
from .numbers import parse_locale_number
from .record_builder import build_record
from .row_classifier import classify_row, detect_section_name, is_data_row
from .section_grouper import SectionGroup, group_rows, iter_section_rows

__all__ = [
    "extract",
    "extract_rows",
    "iter_table_rows",
    "load_soup",
    "parse_locale_number",
    "build_record",
    "classify_row",
    "detect_section_name",
    "is_data_row",
    "SectionGroup",
    "group_rows",
    "iter_section_rows",
]
