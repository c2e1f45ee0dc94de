"""Cursor-carrying view over a workbook sheet."""

from __future__ import annotations

import math
from dataclasses import dataclass

from .workbook import Sheet


def _general_number(value: float) -> str:
    text_value = repr(value)
    if text_value.endswith(".0"):
        text_value = text_value[:-2]
    return text_value


@dataclass(eq=False)
class SheetView:
    """A sheet with a current row/column used to locate errors."""

    sheet: Sheet
    file: object = None
    row: int = 0
    column: int = 0

    @property
    def name(self) -> str:
        return self.sheet.name

    def rc(self) -> tuple[int, int]:
        """Return the current 1-based (row, column)."""
        return self.row + 1, self.column + 1

    def get_cell_data(self, row: int, col: int) -> str:
        """Return the trimmed cell text, "" outside the sheet."""
        return self.sheet.cell(row, col).strip()

    def get_cell_data_as_numeric(self, row: int, col: int) -> str:
        """Return the cell as a plain number, "" if empty or not numeric."""
        raw = self.sheet.cell(row, col)
        if not raw.strip() or raw != raw.strip() or "_" in raw:
            return ""
        try:
            value = float(raw)
        except ValueError:
            return ""
        if not math.isfinite(value):
            return ""
        return _general_number(value)

    def set_cell_data(self, row: int, col: int, data: str) -> None:
        """Set a cell, growing the sheet as needed."""
        while len(self.sheet.rows) <= row:
            self.sheet.add_row()
        cells = self.sheet.rows[row]
        while len(cells) <= col:
            cells.append("")
        cells[col] = data

    def is_full_row_empty(self, row: int, max_col: int) -> bool:
        return all(self.get_cell_data(row, col) == "" for col in range(max_col))