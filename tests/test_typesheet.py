import pytest

from tabexport.fields import DescriptorKind, FieldType, FileDescriptor
from tabexport.i18n import ExportError
from tabexport.typesheet import TypeSheet
from tabexport.workbook import Workbook
from types import SimpleNamespace

PRAGMA = "TableName: Sample Package: demo"
HEADER = ["ObjectType", "FieldName", "FieldType", "Value", "Comment"]


def make_type_sheet(rows):
    sheet = Workbook().add_sheet("@Types")
    for row in rows:
        sheet.add_row(row)
    return TypeSheet(sheet, file=SimpleNamespace(file_name="demo.xlsx"))


def test_parse_enum_and_struct():
    view = make_type_sheet(
        [
            [PRAGMA],
            HEADER,
            [],
            ["ActorType", "None", "int32", "0", "none"],
            ["ActorType", "Pharah", "int32", "1", ""],
            ["Prop", "HP", "int32", "", ""],
            ["Prop", "Kind", "ActorType", "", ""],
        ]
    )
    local_fd = FileDescriptor()
    view.parse(local_fd, FileDescriptor())

    enum_d = local_fd.descriptor_by_name["ActorType"]
    assert enum_d.kind == DescriptorKind.ENUM
    assert [f.name for f in enum_d.fields] == ["None", "Pharah"]
    assert [f.enum_value for f in enum_d.fields] == [0, 1]

    struct_d = local_fd.descriptor_by_name["Prop"]
    assert struct_d.kind == DescriptorKind.STRUCT
    kind_fd = struct_d.field_by_name["Kind"]
    assert kind_fd.type == FieldType.ENUM
    assert kind_fd.complex is enum_d
    assert local_fd.pragma.get_string("TableName") == "Sample"


def test_forward_reference_is_resolved():
    view = make_type_sheet(
        [
            [PRAGMA],
            HEADER,
            [],
            ["Prop", "Kind", "Color", "", ""],
            ["Color", "Red", "int32", "0", ""],
        ]
    )
    local_fd = FileDescriptor()
    view.parse(local_fd, FileDescriptor())
    kind_fd = local_fd.descriptor_by_name["Prop"].field_by_name["Kind"]
    assert kind_fd.type == FieldType.ENUM
    assert kind_fd.complex is local_fd.descriptor_by_name["Color"]


def test_alias_column_sets_meta():
    view = make_type_sheet(
        [
            [PRAGMA],
            ["ObjectType", "FieldName", "FieldType", "Value", "Alias"],
            [],
            ["Color", "Red", "int32", "0", "红"],
        ]
    )
    local_fd = FileDescriptor()
    view.parse(local_fd, FileDescriptor())
    red = local_fd.descriptor_by_name["Color"].field_by_name["Red"]
    assert red.meta.get_string("Alias") == "红"


def test_enum_without_zero_fails():
    view = make_type_sheet([[PRAGMA], HEADER, [], ["Color", "Red", "int32", "1", ""]])
    with pytest.raises(ExportError):
        view.parse(FileDescriptor(), FileDescriptor())


def test_missing_package_points_at_pragma():
    view = make_type_sheet(
        [["TableName: X"], HEADER, [], ["Color", "Red", "int32", "0", ""]]
    )
    with pytest.raises(ExportError):
        view.parse(FileDescriptor(), FileDescriptor())
    assert view.rc() == (1, 1)


def test_unexpected_header():
    view = make_type_sheet([[PRAGMA], ["ObjectType", "Bogus"], [], ["X", "y"]])
    with pytest.raises(ExportError):
        view.parse(FileDescriptor(), FileDescriptor())
    assert view.rc() == (2, 2)


def test_empty_object_type():
    view = make_type_sheet([[PRAGMA], HEADER, [], ["", "HP", "int32", "", ""]])
    with pytest.raises(ExportError):
        view.parse(FileDescriptor(), FileDescriptor())
    assert view.rc() == (4, 1)


def test_unknown_field_type():
    view = make_type_sheet([[PRAGMA], HEADER, [], ["Prop", "HP", "Nope", "", ""]])
    with pytest.raises(ExportError):
        view.parse(FileDescriptor(), FileDescriptor())