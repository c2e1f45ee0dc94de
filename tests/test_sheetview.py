from tabexport.sheetview import SheetView
from tabexport.workbook import Sheet


def _view():
    sheet = Sheet("Data")
    sheet.add_row([" a ", "b"])
    sheet.add_row(["1.50", "3.0", "abc", ""])
    sheet.add_row(["", "  "])
    return SheetView(sheet)


def test_name_and_rc():
    view = _view()
    view.row, view.column = 4, 2
    assert view.name == "Data"
    assert view.rc() == (5, 3)


def test_get_cell_data_trims_and_handles_out_of_range():
    view = _view()
    assert view.get_cell_data(0, 0) == "a"
    assert view.get_cell_data(0, 5) == ""
    assert view.get_cell_data(10, 0) == ""


def test_get_cell_data_as_numeric():
    view = _view()
    assert view.get_cell_data_as_numeric(1, 0) == "1.5"
    assert view.get_cell_data_as_numeric(1, 1) == "3"
    assert view.get_cell_data_as_numeric(1, 2) == ""
    assert view.get_cell_data_as_numeric(1, 3) == ""
    assert view.get_cell_data_as_numeric(9, 9) == ""


def test_set_cell_data_grows_sheet():
    view = _view()
    view.set_cell_data(5, 3, "x")
    assert view.get_cell_data(5, 3) == "x"
    assert view.get_cell_data(5, 0) == ""


def test_is_full_row_empty():
    view = _view()
    assert view.is_full_row_empty(2, 2)
    assert not view.is_full_row_empty(0, 2)
    assert view.is_full_row_empty(7, 3)