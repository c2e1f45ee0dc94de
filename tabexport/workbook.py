"""In-memory workbook model, a minimal xlsx reader and a JSON sheet cache."""

from __future__ import annotations

import json
import os
import posixpath
import re
import zipfile
from dataclasses import dataclass, field
from xml.etree import ElementTree

_REF_RE = re.compile(r"([A-Za-z]+)([0-9]+)")


@dataclass
class Sheet:
    """A named sheet holding rows of string cells."""

    name: str
    rows: list = field(default_factory=list)

    def add_row(self, values=()) -> list:
        row = [str(v) for v in values]
        self.rows.append(row)
        return row

    def cell(self, row: int, col: int) -> str:
        """Return the cell value, "" when outside the filled area."""
        if row < 0 or col < 0 or row >= len(self.rows):
            return ""
        cells = self.rows[row]
        return cells[col] if col < len(cells) else ""


@dataclass
class Workbook:
    """An ordered collection of sheets."""

    sheets: list = field(default_factory=list)

    def add_sheet(self, name: str) -> Sheet:
        sheet = Sheet(name)
        self.sheets.append(sheet)
        return sheet


def _local(tag: str) -> str:
    return tag.rsplit("}", 1)[-1]


def _column_index(letters: str) -> int:
    n = 0
    for ch in letters.upper():
        n = n * 26 + ord(ch) - ord("A") + 1
    return n - 1


def _texts(elem) -> str:
    return "".join(e.text or "" for e in elem.iter() if _local(e.tag) == "t")


def _shared_strings(zf: zipfile.ZipFile) -> list:
    try:
        data = zf.read("xl/sharedStrings.xml")
    except KeyError:
        return []
    root = ElementTree.fromstring(data)
    return [_texts(si) for si in root if _local(si.tag) == "si"]


def _sheet_targets(zf: zipfile.ZipFile):
    root = ElementTree.fromstring(zf.read("xl/workbook.xml"))
    rels = {}
    try:
        rel_root = ElementTree.fromstring(zf.read("xl/_rels/workbook.xml.rels"))
        for rel in rel_root:
            target = rel.get("Target", "")
            if target.startswith("/"):
                target = target.lstrip("/")
            else:
                target = posixpath.normpath(posixpath.join("xl", target))
            rels[rel.get("Id")] = target
    except KeyError:
        pass
    position = 0
    for elem in root.iter():
        if _local(elem.tag) != "sheet":
            continue
        position += 1
        rid = next((v for k, v in elem.attrib.items() if _local(k) == "id"), None)
        target = rels.get(rid, f"xl/worksheets/sheet{position}.xml")
        yield elem.get("name", ""), target


def _cell_value(cell, shared: list) -> str:
    kind = cell.get("t", "n")
    if kind == "inlineStr":
        return _texts(cell)
    value = next((e.text or "" for e in cell if _local(e.tag) == "v"), "")
    if kind == "s" and value:
        return shared[int(value)]
    if kind == "b":
        return "TRUE" if value == "1" else "FALSE"
    return value


def _read_zip(zf: zipfile.ZipFile) -> Workbook:
    shared = _shared_strings(zf)
    book = Workbook()
    for name, target in _sheet_targets(zf):
        sheet = book.add_sheet(name)
        root = ElementTree.fromstring(zf.read(target))
        for row in (e for e in root.iter() if _local(e.tag) == "row"):
            row_no = int(row.get("r", len(sheet.rows) + 1)) - 1
            while len(sheet.rows) <= row_no:
                sheet.add_row()
            cells = sheet.rows[row_no]
            for cell in (c for c in row if _local(c.tag) == "c"):
                match = _REF_RE.fullmatch(cell.get("r", ""))
                col = _column_index(match.group(1)) if match else len(cells)
                while len(cells) <= col:
                    cells.append("")
                cells[col] = _cell_value(cell, shared)
    return book


def read_workbook(path) -> Workbook:
    """Read every sheet of an xlsx file into a Workbook."""
    with zipfile.ZipFile(path) as zf:
        return _read_zip(zf)


def _read_json(path: str):
    try:
        with open(path, encoding="utf-8") as f:
            return json.load(f)
    except (OSError, ValueError):
        return None


def _write_json(path: str, data) -> None:
    with open(path, "w", encoding="utf-8") as f:
        json.dump(data, f, ensure_ascii=False)
        f.write("\n")


class TableCache:
    """Caches the cell contents of an xlsx file, keyed by its entry CRCs."""

    def __init__(self, name: str, cache_dir: str):
        self.name = name
        self.cache_dir = cache_dir
        self._zip = None
        self._origin = None

    @property
    def use_cache(self) -> bool:
        return self._origin is None

    @property
    def _cache_file(self) -> str:
        return os.path.join(self.cache_dir, f"{os.path.basename(self.name)}.cache")

    @property
    def _hash_file(self) -> str:
        return os.path.join(self.cache_dir, f"{os.path.basename(self.name)}.hash")

    def open(self) -> None:
        self._zip = zipfile.ZipFile(self.name)

    def close(self) -> None:
        if self._zip is not None:
            self._zip.close()
            self._zip = None

    def __enter__(self):
        self.open()
        return self

    def __exit__(self, *exc):
        self.close()

    def _crcs(self) -> dict:
        return {info.filename: info.CRC for info in self._zip.infolist()}

    def _read_cache(self):
        hashes = _read_json(self._hash_file)
        if not isinstance(hashes, dict) or hashes.get("CRC32Map") != self._crcs():
            return None
        cached = _read_json(self._cache_file)
        if not isinstance(cached, dict):
            return None
        book = Workbook()
        for s in cached.get("Sheets") or []:
            sheet = book.add_sheet(s["Name"])
            for row in s.get("Cells") or []:
                sheet.add_row(row)
        return book

    def load(self) -> Workbook:
        """Return the cached workbook, or read the original file on a miss."""
        if self._zip is None:
            self.open()
        book = self._read_cache()
        if book is not None:
            return book
        self._origin = _read_zip(self._zip)
        return self._origin

    def save(self) -> None:
        """Write the hash and cache files for the workbook read from the source."""
        if self._origin is None:
            return
        _write_json(self._hash_file, {"CRC32Map": self._crcs()})
        _write_json(
            self._cache_file,
            {
                "Name": self.name,
                "Sheets": [
                    {"Name": s.name, "Cells": [list(r) for r in s.rows]}
                    for s in self._origin.sheets
                ],
            },
        )