"""Parsing of the @Types sheet into enum and struct descriptors."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from .cellref import r1c1_to_a1
from .fields import DescriptorKind, FileDescriptor
from .i18n import ExportError, StringID, text
from .sheetview import SheetView
from .typemodel import TypeModel, TypeModelRoot

log = logging.getLogger(__name__)

ROW_PRAGMA = 0
ROW_FIELD_DESC = 1
ROW_COMMENT = 2
ROW_DATA_BEGIN = 3

TYPE_HEADERS = (
    "ObjectType",
    "FieldName",
    "FieldType",
    "Value",
    "Comment",
    "Meta",
    "Alias",
    "Default",
)

_MAX_TYPE_COLUMNS = 100


def _file_name(view: SheetView) -> str:
    return getattr(view.file, "file_name", "")


@dataclass(eq=False)
class TypeSheet(SheetView):
    """The sheet that declares the enums and structs of a table file."""

    def _detect_max_type_col(self) -> int:
        for col in range(_MAX_TYPE_COLUMNS):
            if self.get_cell_data(ROW_FIELD_DESC, col) == "":
                return col
        return 0

    def _parse_table(self, root: TypeModelRoot) -> None:
        root.pragma = self.get_cell_data(ROW_PRAGMA, 0)
        max_col = self._detect_max_type_col()

        meet_empty_line = False
        warned = False
        row = ROW_DATA_BEGIN
        while True:
            if self.is_full_row_empty(row, max_col):
                if meet_empty_line:
                    break
                meet_empty_line = True
                row += 1
                continue

            if meet_empty_line and not warned:
                log.error(
                    "%s %s|%s(%s)",
                    text(StringID.TYPE_SHEET_ROW_DATA_SPLITED_BY_EMPTY_LINE),
                    _file_name(self),
                    self.name,
                    r1c1_to_a1(row, 1),
                )
                warned = True

            model = TypeModel(row=row)
            for col in range(max_col):
                declare = self.get_cell_data(ROW_FIELD_DESC, col)
                if declare not in TYPE_HEADERS:
                    self.row, self.column = ROW_FIELD_DESC, col
                    raise ExportError(
                        StringID.TYPE_SHEET_UNEXPECTED_TYPE_HEADER, f"'{declare}'"
                    )
                value = self.get_cell_data(row, col)
                if declare == "ObjectType" and value == "":
                    self.row, self.column = row, col
                    raise ExportError(StringID.TYPE_SHEET_OBJECT_NAME_EMPTY)
                model.col_data[declare] = (value, col)

            if model.col_data:
                root.models.append(model)
            row += 1

    def parse(self, local_fd: FileDescriptor, global_fd: FileDescriptor) -> None:
        """Read every type row into ``local_fd``; raises ExportError on failure."""
        root = TypeModelRoot()
        try:
            self._parse_table(root)
            try:
                root.parse_pragma(local_fd)
            except ExportError:
                self.row, self.column = ROW_PRAGMA, 0
                raise
            try:
                root.parse_data(local_fd, global_fd)
                root.solve_unknown_model(local_fd, global_fd)
            except ExportError:
                self.row, self.column = root.row, root.col
                raise
        except ExportError:
            r, c = self.rc()
            log.error("%s|%s(%s)", _file_name(self), self.name, r1c1_to_a1(r, c))
            raise

        self._check_protobuf_compatibility(local_fd)

    @staticmethod
    def _check_protobuf_compatibility(file_d: FileDescriptor) -> None:
        # proto3 requires every enum to have a zero value.
        for d in file_d.descriptors:
            if d.kind == DescriptorKind.ENUM and 0 not in d.field_by_number:
                raise ExportError(
                    StringID.TYPE_SHEET_FIRST_ENUM_VALUE_SHOULD_BE_ZERO, f"'{d.name}'"
                )