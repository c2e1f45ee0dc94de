"""Type sheet rows and their resolution into descriptors."""

from __future__ import annotations

from dataclasses import dataclass, field

from .fields import (
    REPEATED_KEYWORD,
    Descriptor,
    DescriptorKind,
    DuplicateFieldNameError,
    DuplicateIndexNameError,
    FieldDescriptor,
    FieldType,
    FileDescriptor,
    parse_field_type,
)
from .i18n import ExportError, StringID
from .textutil import string_to_primitive


@dataclass(eq=False)
class TypeModel:
    """One row of the type sheet: column name -> (value, column index)."""

    row: int = 0
    col_data: dict = field(default_factory=dict)
    fd: FieldDescriptor = field(default_factory=FieldDescriptor)
    raw_field_type: str = ""
    done: bool = False

    def get_value(self, name: str) -> tuple[str, int]:
        """Return (value, column) of a column, or ("", -1) if it is absent."""
        return self.col_data.get(name, ("", -1))


def _find_local_field_type(file_d: FileDescriptor | None, raw: str):
    is_repeated = raw.startswith(REPEATED_KEYWORD)
    pure = raw[len(REPEATED_KEYWORD) + 1 :] if is_repeated else raw

    ft = parse_field_type(pure)
    if ft is not None:
        return ft, is_repeated, None

    desc = file_d.descriptor_by_name.get(raw) if file_d is not None else None
    if desc is not None:
        # Struct fields may only refer to enums, never to other structs.
        if desc.kind != DescriptorKind.ENUM:
            raise ExportError(StringID.TYPE_SHEET_STRUCT_FIELD_CAN_NOT_BE_STRUCT, f"'{raw}'")
        return FieldType.ENUM, is_repeated, desc

    return FieldType.NONE, is_repeated, None


def find_field_type(local_fd: FileDescriptor, global_fd: FileDescriptor, raw: str):
    """Resolve ``raw`` locally, then globally.

    Returns (field type, is repeated, complex descriptor); the type is NONE
    when it is not known yet.
    """
    ft, is_repeated, complex_d = _find_local_field_type(local_fd, raw)
    if ft != FieldType.NONE or global_fd is local_fd:
        return ft, is_repeated, complex_d
    ft, is_repeated, complex_d = _find_local_field_type(global_fd, raw)
    return ft, is_repeated, complex_d


def parse_field_value(raw: str):
    """Return (descriptor kind, enum value) implied by a Value cell."""
    if raw == "":
        return DescriptorKind.STRUCT, 0
    try:
        value = string_to_primitive(raw, "int64")
    except ValueError as exc:
        raise ExportError(StringID.TYPE_SHEET_ENUM_VALUE_PARSE_FAILED, str(exc)) from exc
    value = ((value + 2**31) % 2**32) - 2**31
    return DescriptorKind.ENUM, value


@dataclass(eq=False)
class TypeModelRoot:
    """All rows of a type sheet plus the location of the last processed cell."""

    pragma: str = ""
    models: list = field(default_factory=list)
    unknown_models: list = field(default_factory=list)
    field_type_col: int = 0
    row: int = 0
    col: int = 0

    def parse_pragma(self, local_fd: FileDescriptor) -> None:
        """Parse the file pragma; TableName and Package are required."""
        try:
            local_fd.pragma.parse(self.pragma)
        except ValueError as exc:
            raise ExportError(
                StringID.TYPE_SHEET_PRAGMA_PARSE_FAILED, f"'{self.pragma}'"
            ) from exc
        if local_fd.pragma.get_string("TableName") == "":
            raise ExportError(StringID.TYPE_SHEET_TABLE_NAME_IS_EMPTY)
        if local_fd.pragma.get_string("Package") == "":
            raise ExportError(StringID.TYPE_SHEET_PACKAGE_IS_EMPTY)

    def parse_data(self, local_fd: FileDescriptor, global_fd: FileDescriptor) -> None:
        """Build descriptors from every row; unresolved types are deferred."""
        reserved = local_fd.pragma.get_string("TableName") + "Define"

        for m in self.models:
            self.row = m.row

            type_name, self.col = m.get_value("ObjectType")
            if type_name == reserved:
                raise ExportError(
                    StringID.DATA_HEADER_USE_RESERVED_TYPE_NAME, f"'{type_name}'"
                )

            td = local_fd.descriptor_by_name.get(type_name)
            if td is None:
                td = Descriptor(name=type_name)
                local_fd.add(td)

            m.fd.name, self.col = m.get_value("FieldName")

            m.raw_field_type, self.col = m.get_value("FieldType")
            self.field_type_col = self.col

            ft, is_repeated, complex_d = find_field_type(
                local_fd, global_fd, m.raw_field_type
            )
            if ft == FieldType.NONE:
                self.unknown_models.append(m)
            m.fd.type = ft
            m.fd.complex = complex_d
            m.fd.is_repeated = is_repeated

            raw_value, self.col = m.get_value("Value")
            kind, enum_value = parse_field_value(raw_value)

            if td.kind == DescriptorKind.NONE:
                td.kind = kind
            elif td.kind != kind:
                raise ExportError(StringID.TYPE_SHEET_DESCRIPTOR_KIND_NOT_SAME)

            if td.kind == DescriptorKind.ENUM and enum_value in td.field_by_number:
                raise ExportError(StringID.TYPE_SHEET_DUPLICATED_ENUM_VALUE, str(enum_value))

            m.fd.enum_value = enum_value

            comment, self.col = m.get_value("Comment")
            m.fd.comment = comment.replace("\n", " ")

            raw_meta, self.col = m.get_value("Meta")
            try:
                m.fd.meta.parse(raw_meta)
            except ValueError as exc:
                raise ExportError(
                    StringID.TYPE_SHEET_FIELD_META_PARSE_FAILED, str(exc)
                ) from exc

            alias, self.col = m.get_value("Alias")
            if self.col != -1:
                m.fd.meta.set_string("Alias", alias)

            default, self.col = m.get_value("Default")
            if self.col != -1:
                m.fd.meta.set_string("Default", default)

            try:
                td.add(m.fd)
            except (DuplicateFieldNameError, DuplicateIndexNameError) as exc:
                raise ExportError(
                    StringID.TYPE_SHEET_DUPLICATE_FIELD_NAME, f"'{m.fd.name}'"
                ) from exc

    def solve_unknown_model(
        self, local_fd: FileDescriptor, global_fd: FileDescriptor
    ) -> None:
        """Resolve field types that referred to types declared later."""
        for m in self.unknown_models:
            self.row = m.row
            self.col = self.field_type_col

            ft, is_repeated, complex_d = find_field_type(
                local_fd, global_fd, m.raw_field_type
            )
            if ft == FieldType.NONE:
                raise ExportError(
                    StringID.TYPE_SHEET_FIELD_TYPE_NOT_FOUND, f"'{m.raw_field_type}'"
                )
            m.fd.type = ft
            m.fd.complex = complex_d
            m.fd.is_repeated = is_repeated