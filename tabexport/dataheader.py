"""The four header rows of a data sheet: field name, type, meta and comment."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from .cellref import r1c1_to_a1
from .fields import (
    Descriptor,
    DescriptorKind,
    DescriptorUsage,
    FieldDescriptor,
    FieldType,
    FileDescriptor,
    field_type_to_string,
)
from .i18n import ExportError, StringID
from .sheetview import SheetView

log = logging.getLogger(__name__)

HEADER_FIELD_NAME = 0
HEADER_FIELD_TYPE = 1
HEADER_FIELD_META = 2
HEADER_COMMENT = 3
HEADER_DATA_BEGIN = 4


class _HeaderError(ExportError):
    """A header cell is wrong; ``pos`` is the header row (or column) at fault."""

    def __init__(self, pos: int, string_id, detail: str = ""):
        super().__init__(string_id, detail)
        self.pos = pos


def _check_same_name(exist: FieldDescriptor, fd: FieldDescriptor) -> None:
    # Several columns with one name are only allowed for repeated fields.
    if not exist.is_repeated:
        raise _HeaderError(
            HEADER_FIELD_NAME, StringID.DATA_HEADER_DUPLICATE_FIELD_NAME, f"'{fd.name}'"
        )
    if exist.type != fd.type:
        raise _HeaderError(
            HEADER_FIELD_TYPE,
            StringID.DATA_HEADER_REPEATED_FIELD_TYPE_NOT_SAME_IN_MULTI_COLUMN,
            f"'{fd.name}' '{field_type_to_string(exist.type)}' "
            f"'{field_type_to_string(fd.type)}'",
        )
    if exist.complex is not fd.complex:
        raise _HeaderError(
            HEADER_FIELD_TYPE,
            StringID.DATA_HEADER_REPEATED_FIELD_TYPE_NOT_SAME_IN_MULTI_COLUMN,
            f"'{fd.name}'",
        )
    if str(exist.meta) != str(fd.meta):
        raise _HeaderError(
            HEADER_FIELD_META,
            StringID.DATA_HEADER_REPEATED_FIELD_META_NOT_SAME_IN_MULTI_COLUMN,
            f"'{fd.name}'",
        )


@dataclass
class DataHeaderElement:
    """The header cells of one column."""

    field_name: str = ""
    field_type: str = ""
    field_meta: str = ""
    comment: str = ""

    def parse(
        self,
        fd: FieldDescriptor,
        local_fd: FileDescriptor,
        global_fd: FileDescriptor | None,
        header_by_name: dict,
    ) -> None:
        """Fill ``fd`` from the header cells; raises ExportError with ``pos``."""
        found = fd.parse_type(local_fd, self.field_type)
        if not found and global_fd is not None and global_fd is not local_fd:
            fd.parse_type(global_fd, self.field_type)

        if fd.type == FieldType.NONE:
            raise _HeaderError(
                HEADER_FIELD_TYPE,
                StringID.DATA_HEADER_TYPE_NOT_FOUND,
                f"'{fd.name}' ({field_type_to_string(fd.type)}) raw: {self.field_type}",
            )

        try:
            fd.meta.parse(self.field_meta)
        except ValueError as exc:
            raise _HeaderError(
                HEADER_FIELD_META, StringID.DATA_HEADER_META_PARSE_FAILED, f"'{exc}'"
            ) from exc

        fd.comment = self.comment.replace("\n", " ")

        exist = header_by_name.get(fd.name)
        if exist is not None:
            _check_same_name(exist, fd)


def _log_location(sheet: SheetView) -> None:
    r, c = sheet.rc()
    log.error(
        "%s|%s(%s)", getattr(sheet.file, "file_name", ""), sheet.name, r1c1_to_a1(r, c)
    )


@dataclass(eq=False)
class DataHeader:
    """Column definitions of a data sheet."""

    # In sheet order, keeping comment columns and repeated columns.
    raw_fields: list = field(default_factory=list)
    # In sheet order, one entry per field.
    header_fields: list = field(default_factory=list)
    header_by_name: dict = field(default_factory=dict)

    def parse_proto_field(
        self,
        index: int,
        sheet: SheetView,
        local_fd: FileDescriptor,
        global_fd: FileDescriptor | None,
    ) -> None:
        """Read the header of ``sheet``; the first sheet also defines the row type.

        Raises ExportError for a bad header and ValueError if it has no fields.
        """
        vertical = local_fd.pragma.get_bool("Vertical")
        try:
            if vertical:
                sheet.row = 1
                while True:
                    element = DataHeaderElement(
                        *(sheet.get_cell_data(sheet.row, col) for col in range(4))
                    )
                    if element.field_name == "":
                        break
                    try:
                        self._add_header_element(element, local_fd, global_fd)
                    except _HeaderError as exc:
                        sheet.column = exc.pos
                        raise
                    sheet.row += 1
            else:
                sheet.column = 0
                while True:
                    element = DataHeaderElement(
                        *(sheet.get_cell_data(row, sheet.column) for row in range(4))
                    )
                    if element.field_name == "":
                        break
                    try:
                        self._add_header_element(element, local_fd, global_fd)
                    except _HeaderError as exc:
                        sheet.row = exc.pos
                        raise
                    sheet.column += 1

            if not self.raw_fields:
                raise ValueError(f"sheet '{sheet.name}' has no header fields")

            if index == 0:
                self._make_row_descriptor(local_fd)
        except ExportError:
            _log_location(sheet)
            raise

    def raw_field(self, index: int) -> FieldDescriptor | None:
        if index >= len(self.raw_fields):
            return None
        return self.raw_fields[index]

    def field_repeated_count(self, fd: FieldDescriptor) -> int:
        """Number of columns that hold ``fd``."""
        return sum(1 for raw in self.raw_fields if raw is fd)

    def equal(self, other: DataHeader) -> str | None:
        """Return None if both headers match, else the name of the mismatch."""
        if len(self.header_fields) != len(other.header_fields):
            return "field len"
        for mine, theirs in zip(self.header_fields, other.header_fields):
            if not mine.same_as(theirs):
                return mine.name
        return None

    def asymmetric_equal(self, other: DataHeader) -> str | None:
        """Check fields present in both headers; return the first mismatch name."""
        for other_fd in other.header_fields:
            this_fd = self.header_by_name.get(other_fd.name)
            if this_fd is not None and not this_fd.same_as(other_fd):
                return other_fd.name
        return None

    def _add_header_element(
        self,
        element: DataHeaderElement,
        local_fd: FileDescriptor,
        global_fd: FileDescriptor | None,
    ) -> None:
        fd = FieldDescriptor(name=element.field_name)

        # Columns starting with '#' are comments but still keep their slot.
        if not element.field_name.startswith("#"):
            element.parse(fd, local_fd, global_fd, self.header_by_name)
            exist = self.header_by_name.get(fd.name)
            if exist is not None:
                fd = exist
            else:
                self.header_by_name[fd.name] = fd
                self.header_fields.append(fd)

        self.raw_fields.append(fd)

    def _make_row_descriptor(self, file_d: FileDescriptor) -> None:
        row_type = Descriptor(
            name=f"{file_d.pragma.get_string('TableName')}Define",
            kind=DescriptorKind.STRUCT,
            usage=DescriptorUsage.ROW_TYPE,
        )
        if row_type.name in file_d.descriptor_by_name:
            raise ExportError(
                StringID.DATA_HEADER_USE_RESERVED_TYPE_NAME, f"'{row_type.name}'"
            )
        file_d.add(row_type)
        for fd in self.header_fields:
            row_type.add(fd)