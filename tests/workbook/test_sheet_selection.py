from __future__ import annotations

import pytest

from hr_attendance.core.exceptions import ParseError
from hr_attendance.workbook.model import Sheet
from hr_attendance.workbook.reader import read_workbook
from hr_attendance.workbook.selector import NamedSheetStrategy, PositionalSheetStrategy, select_data_sheet


def _sheet(name, rows=None):
    return Sheet(name=name, rows=rows if rows is not None else [["x"]])


def test_named_statistics_sheet_wins_over_position():
    sheets = [_sheet("Registros"), _sheet("Horarios"), _sheet("Estadísticas")]
    assert select_data_sheet(sheets).name == "Estadísticas"


def test_page_2_naming_is_recognised():
    assert NamedSheetStrategy().match([_sheet("Page 1"), _sheet("Page 2")]).name == "Page 2"


def test_second_sheet_then_first_sheet():
    assert select_data_sheet([_sheet("A"), _sheet("B"), _sheet("C")]).name == "B"
    assert select_data_sheet([_sheet("Solo")]).name == "Solo"


def test_no_sheets_or_empty_choice_is_a_parse_error():
    with pytest.raises(ParseError):
        select_data_sheet([])
    with pytest.raises(ParseError):
        select_data_sheet([_sheet("A"), _sheet("B", rows=[[None, ""]])])


def test_positional_strategy_on_empty_list():
    assert PositionalSheetStrategy().match([]) is None


def test_reader_returns_every_sheet_as_a_grid(xlsx_bytes):
    payload = xlsx_bytes({"Uno": [["ID", "Nombre"], [12345678, "ANA"]], "Dos": [["Total", None, 1.5]]})

    sheets = read_workbook(payload)

    assert [s.name for s in sheets] == ["Uno", "Dos"]
    assert sheets[0].rows[1] == [12345678, "ANA"]
    assert sheets[1].rows[0][1] is None


@pytest.mark.parametrize("payload", [b"", b"\x00\x01garbage"])
def test_reader_rejects_unreadable_payloads(payload):
    with pytest.raises(ParseError, match="could not read file"):
        read_workbook(payload)
