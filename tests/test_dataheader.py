from types import SimpleNamespace

import pytest

from tabexport.dataheader import DataHeader, DataHeaderElement
from tabexport.fields import (
    Descriptor,
    DescriptorKind,
    FieldDescriptor,
    FieldType,
    FileDescriptor,
)
from tabexport.i18n import ExportError
from tabexport.meta import MetaInfo
from tabexport.sheetview import SheetView
from tabexport.workbook import Workbook

PRAGMA = "TableName: Sample Package: demo"


def make_view(rows, name="Data"):
    sheet = Workbook().add_sheet(name)
    for row in rows:
        sheet.add_row(row)
    return SheetView(sheet, file=SimpleNamespace(file_name="demo.xlsx"))


def local(pragma=PRAGMA):
    return FileDescriptor(pragma=MetaInfo(pragma))


BASIC = [
    ["ID", "Name", "#note"],
    ["int32", "string", "string"],
    ["MakeIndex: true", "", ""],
    ["id comment", "", ""],
]


def test_horizontal_header_and_row_descriptor():
    local_fd = local()
    header = DataHeader()
    header.parse_proto_field(0, make_view(BASIC), local_fd, FileDescriptor())

    assert len(header.raw_fields) == 3
    assert [f.name for f in header.header_fields] == ["ID", "Name"]
    row_d = local_fd.row_descriptor()
    assert row_d.name == "SampleDefine"
    assert [f.name for f in row_d.fields] == ["ID", "Name"]
    assert [f.name for f in row_d.indexes] == ["ID"]
    assert header.header_by_name["ID"].comment == "id comment"
    assert header.header_by_name["Name"].type == FieldType.STRING


def test_raw_field_and_repeated_count():
    header = DataHeader()
    header.parse_proto_field(0, make_view(BASIC), local(), FileDescriptor())
    first = header.raw_field(0)
    assert header.field_repeated_count(first) == 1
    assert header.raw_field(10) is None
    assert header.raw_field(2).name == "#note"


def test_non_first_sheet_defines_no_row_type():
    local_fd = local()
    header = DataHeader()
    header.parse_proto_field(1, make_view(BASIC), local_fd, FileDescriptor())
    assert local_fd.row_descriptor() is None
    assert len(header.header_fields) == 2


def test_vertical_header():
    rows = [["x"], ["Name", "string", "", ""], ["Level", "int32", "", ""]]
    header = DataHeader()
    header.parse_proto_field(
        1, make_view(rows), local(PRAGMA + " Vertical: true"), FileDescriptor()
    )
    assert [f.name for f in header.raw_fields] == ["Name", "Level"]
    assert header.header_by_name["Level"].type == FieldType.INT32


def test_duplicate_name_fails_at_name_row():
    view = make_view([["ID", "ID"], ["int32", "int32"]])
    with pytest.raises(ExportError):
        DataHeader().parse_proto_field(1, view, local(), FileDescriptor())
    assert view.rc() == (1, 2)


def test_unknown_type_fails_at_type_row():
    view = make_view([["ID"], ["Nope"]])
    with pytest.raises(ExportError):
        DataHeader().parse_proto_field(1, view, local(), FileDescriptor())
    assert view.rc() == (2, 1)


def test_reserved_row_type_name():
    local_fd = local()
    local_fd.add(Descriptor(name="SampleDefine"))
    with pytest.raises(ExportError):
        DataHeader().parse_proto_field(0, make_view(BASIC), local_fd, FileDescriptor())


def test_empty_header_raises_value_error():
    with pytest.raises(ValueError):
        DataHeader().parse_proto_field(
            1, make_view([["x"]]), local(PRAGMA + " Vertical: true"), FileDescriptor()
        )


def test_equal_and_asymmetric_equal():
    a, b = DataHeader(), DataHeader()
    a.parse_proto_field(1, make_view(BASIC), local(), FileDescriptor())
    b.parse_proto_field(1, make_view(BASIC), local(), FileDescriptor())
    assert a.equal(b) is None
    assert a.asymmetric_equal(b) is None

    c = DataHeader()
    c.parse_proto_field(1, make_view([["ID"], ["int64"]]), local(), FileDescriptor())
    assert a.asymmetric_equal(c) == "ID"
    assert a.equal(c) == "field len"


def test_element_resolves_global_type():
    global_fd = FileDescriptor()
    color = Descriptor(name="Color", kind=DescriptorKind.ENUM)
    global_fd.add(color)
    fd = FieldDescriptor(name="Tint")
    DataHeaderElement("Tint", "Color", "", "a\nb").parse(
        fd, FileDescriptor(), global_fd, {}
    )
    assert fd.type == FieldType.ENUM
    assert fd.complex is color
    assert fd.comment == "a b"