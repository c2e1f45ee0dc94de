"""Reading the data rows of a sheet into a DataModel."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from .cellref import r1c1_to_a1
from .data import DataModel, FieldValue, LineData
from .dataheader import HEADER_DATA_BEGIN, DataHeader
from .fields import FieldDescriptor, FieldType
from .i18n import ExportError, StringID, text
from .sheetview import SheetView

log = logging.getLogger(__name__)

COLUMN_MAJOR_ROW_DATA_BEGIN = 1
COLUMN_MAJOR_COLUMN_VALUE = 4


def field_def_getter(
    index: int, data_header: DataHeader, parent_header: DataHeader | None
) -> FieldDescriptor | None:
    """Return the field of column ``index``, taken from the parent header if any.

    Returns None past the last column; raises ExportError when a child sheet
    column is not defined by the parent header.
    """
    fd = data_header.raw_field(index)
    if fd is None:
        return None
    if parent_header is None or fd.name.startswith("#"):
        return fd
    parent_fd = parent_header.header_by_name.get(fd.name)
    if parent_fd is None:
        raise ExportError(
            StringID.DATA_HEADER_FIELD_NOT_DEFINED_IN_MAIN_TABLE_IN_MULTI_TABLE_MODE,
            f"'{fd.name}'",
        )
    return parent_fd


def must_fill_check(fd: FieldDescriptor, raw: str) -> None:
    """Raise ExportError if ``fd`` is marked MustFill and ``raw`` is empty."""
    if fd.meta.get_bool("MustFill") and raw == "":
        raise ExportError(StringID.DATA_SHEET_MUST_FILL, str(fd))


@dataclass(eq=False)
class DataSheet(SheetView):
    """A sheet holding table rows."""

    def is_valid(self) -> bool:
        """False for sheets named with a leading '#' or with an empty first cell."""
        if self.sheet.name.strip().startswith("#"):
            return False
        return self.get_cell_data(0, 0) != ""

    def export(
        self,
        file,
        data_model: DataModel,
        data_header: DataHeader,
        parent_header: DataHeader | None,
    ) -> None:
        """Append the sheet's rows to ``data_model``."""
        if file.local_fd.pragma.get_bool("Vertical"):
            self._export_column_major(file, data_model, data_header)
        else:
            self._export_row_major(file, data_model, data_header, parent_header)

    def _warn_split(self, file) -> None:
        r, _ = self.rc()
        log.warning(
            "%s %s|%s(%s)",
            text(StringID.DATA_SHEET_ROW_DATA_SPLITED_BY_EMPTY_LINE),
            file.file_name,
            self.name,
            r1c1_to_a1(r, 1),
        )

    def _export_row_major(self, file, data_model, data_header, parent_header) -> None:
        count = len(data_header.raw_fields)
        meet_empty_line = False
        self.row = HEADER_DATA_BEGIN
        while True:
            if self.is_full_row_empty(self.row, count):
                if meet_empty_line:
                    break
                meet_empty_line = True
                self.row += 1
                continue
            if meet_empty_line:
                # Data after a blank row is not exported; tell the user.
                self._warn_split(file)
                break

            line = LineData()
            self.column = 0
            while self.column < count:
                try:
                    fd = field_def_getter(self.column, data_header, parent_header)
                except ExportError:
                    log.error(
                        "%s|%s(%s)",
                        file.file_name,
                        self.name,
                        r1c1_to_a1(self.row + 1, self.column + 1),
                    )
                    raise
                if not self._process_line(fd, line, data_header, file):
                    break
                self.column += 1

            if parent_header is not None:
                for fd in parent_header.raw_fields:
                    if fd.name in data_header.header_by_name:
                        continue
                    if not self._process_line(fd, line, data_header, file):
                        break

            data_model.add(line)
            self.row += 1

    def _process_line(self, fd, line: LineData, data_header: DataHeader, file) -> bool:
        """Add the current cell to ``line``; False when the columns are exhausted."""
        if fd is None:
            return False
        if fd.name.startswith("#"):
            return True

        if fd.type == FieldType.FLOAT and not fd.is_repeated:
            raw = self.get_cell_data_as_numeric(self.row, self.column)
        else:
            raw = self.get_cell_data(self.row, self.column)

        r, c = self.rc()
        line.add(
            FieldValue(
                field_def=fd,
                raw_value=raw,
                r=r,
                c=c,
                sheet_name=self.name,
                file_name=file.file_name,
                field_repeated_count=data_header.field_repeated_count(fd),
            )
        )
        return True

    def _export_column_major(self, file, data_model, data_header) -> None:
        count = len(data_header.raw_fields)
        meet_empty_line = False
        warned = False
        line = LineData()
        self.row = COLUMN_MAJOR_ROW_DATA_BEGIN
        while True:
            if self.is_full_row_empty(self.row, count):
                if meet_empty_line:
                    break
                meet_empty_line = True
                self.row += 1
                continue
            if meet_empty_line and not warned:
                self._warn_split(file)
                warned = True

            fd = data_header.raw_field(self.row - COLUMN_MAJOR_ROW_DATA_BEGIN)
            if fd is None:
                break
            if not fd.name.startswith("#"):
                raw = self.get_cell_data(self.row, COLUMN_MAJOR_COLUMN_VALUE)
                r, c = self.rc()
                line.add(
                    FieldValue(
                        field_def=fd,
                        raw_value=raw,
                        r=r,
                        c=c,
                        sheet_name=self.name,
                        file_name=file.file_name,
                        field_repeated_count=data_header.field_repeated_count(fd),
                    )
                )
            self.row += 1

        data_model.add(line)