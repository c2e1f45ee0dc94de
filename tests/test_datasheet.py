from types import SimpleNamespace

import pytest

from tabexport.data import DataModel
from tabexport.dataheader import DataHeader
from tabexport.datasheet import DataSheet, field_def_getter, must_fill_check
from tabexport.fields import FieldDescriptor, FileDescriptor
from tabexport.i18n import ExportError
from tabexport.meta import MetaInfo
from tabexport.workbook import Workbook

PRAGMA = "TableName: Sample Package: demo"


def make_sheet(rows, name="Data"):
    sheet = Workbook().add_sheet(name)
    for row in rows:
        sheet.add_row(row)
    return sheet


def build(rows, pragma=PRAGMA, index=0):
    local_fd = FileDescriptor(pragma=MetaInfo(pragma))
    file = SimpleNamespace(file_name="demo.xlsx", local_fd=local_fd)
    view = DataSheet(make_sheet(rows), file=file)
    header = DataHeader()
    header.parse_proto_field(index, view, local_fd, FileDescriptor())
    return view, header, file


def raws(model):
    return [[fv.raw_value for fv in line.values] for line in model.lines]


def test_is_valid():
    assert DataSheet(make_sheet([["ID"]])).is_valid()
    assert not DataSheet(make_sheet([["ID"]], name=" #skip")).is_valid()
    assert not DataSheet(make_sheet([[""]])).is_valid()


def test_row_major_stops_after_empty_line():
    rows = [
        ["ID", "Name"],
        ["int32", "string"],
        [],
        [],
        ["1", "a"],
        ["2", "b"],
        [],
        ["3", "c"],
    ]
    view, header, file = build(rows)
    model = DataModel()
    view.export(file, model, header, None)
    assert raws(model) == [["1", "a"], ["2", "b"]]
    first = model.lines[0].values[0]
    assert first.field_def is header.header_by_name["ID"]
    assert first.r == 5
    assert first.file_name == "demo.xlsx"
    assert first.field_repeated_count == 1


def test_comment_column_is_skipped():
    rows = [["ID", "#note"], ["int32", "string"], [], [], ["1", "ignored"]]
    view, header, file = build(rows)
    model = DataModel()
    view.export(file, model, header, None)
    assert raws(model) == [["1"]]


def test_float_uses_numeric_form():
    rows = [["Rate"], ["float"], [], [], ["1.50"]]
    view, header, file = build(rows)
    model = DataModel()
    view.export(file, model, header, None)
    assert raws(model) == [["1.5"]]


def test_column_major():
    rows = [["x"], ["Name", "string", "", "", "hero"], ["Level", "int32", "", "", "3"]]
    view, header, file = build(rows, pragma=PRAGMA + " Vertical: true")
    model = DataModel()
    view.export(file, model, header, None)
    assert raws(model) == [["hero", "3"]]
    assert [fv.field_def.name for fv in model.lines[0].values] == ["Name", "Level"]


def test_child_sheet_uses_parent_fields():
    _, parent, _ = build([["ID", "Name"], ["int32", "string"]])
    view, child, file = build([["ID"], ["int32"], [], [], ["5"]], index=1)
    model = DataModel()
    view.export(file, model, child, parent)
    values = model.lines[0].values
    assert [fv.field_def for fv in values] == [
        parent.header_by_name["ID"],
        parent.header_by_name["Name"],
    ]
    assert [fv.raw_value for fv in values] == ["5", ""]


def test_child_field_missing_in_parent():
    _, parent, _ = build([["ID"], ["int32"]])
    view, child, file = build([["Other"], ["int32"], [], [], ["5"]], index=1)
    with pytest.raises(ExportError):
        view.export(file, DataModel(), child, parent)


def test_field_def_getter():
    _, parent, _ = build([["ID"], ["int32"]])
    _, child, _ = build([["#c", "ID"], ["string", "int32"]], index=1)
    assert field_def_getter(5, child, parent) is None
    assert field_def_getter(0, child, parent) is child.raw_field(0)
    assert field_def_getter(1, child, parent) is parent.header_by_name["ID"]
    assert field_def_getter(1, child, None) is child.raw_field(1)


def test_must_fill_check_rejects_empty():
    fd = FieldDescriptor(name="ID", meta=MetaInfo("MustFill: true"))
    with pytest.raises(ExportError):
        must_fill_check(fd, "")