"""Conversion of gathered row data into the value tree of a table."""

from __future__ import annotations

import logging

from .cellref import r1c1_to_a1
from .data import DataModel, Node, Record, Table
from .datasheet import must_fill_check
from .fields import FieldDescriptor, FieldType
from .filters import ConvertError, convert_value
from .i18n import ExportError, StringID

log = logging.getLogger(__name__)


def struct_field_has_default_value(fd: FieldDescriptor) -> bool:
    """True if ``fd`` is a struct field with at least one defaulted member."""
    descriptor = fd.complex
    if descriptor is None:
        return False
    return any(child.meta.get_string("Default") != "" for child in descriptor.fields)


def _suggest_ignore(fd: FieldDescriptor) -> bool | None:
    """Decide how an empty, undefaulted cell is exported.

    Returns None if the cell produces no node at all, otherwise whether the
    node is merely suggested to be ignored by the printers.
    """
    if fd.is_repeated:
        # An empty repeated struct without defaults is not exported at all;
        # other repeated fields keep a placeholder.
        if fd.type == FieldType.STRUCT and not struct_field_has_default_value(fd):
            return None
        return False
    if fd.type == FieldType.STRUCT:
        return not struct_field_has_default_value(fd)
    return True


def merge_values(data_model: DataModel, tab: Table, checker) -> None:
    """Convert every line of ``data_model`` into a record of ``tab``."""
    for line in data_model.lines:
        record = Record()
        for fv in line.values:
            fd = fv.field_def
            try:
                suggest_ignore = False
                if fv.raw_value == "" and fd.meta.get_string("Default") == "":
                    must_fill_check(fd, fv.raw_value)
                    decision = _suggest_ignore(fd)
                    if decision is None:
                        continue
                    suggest_ignore = decision
                column_processor(checker, record, fd, fv.raw_value, suggest_ignore)
            except ExportError:
                log.error(
                    "%s|%s(%s)", fv.file_name, fv.sheet_name, r1c1_to_a1(fv.r, fv.c)
                )
                raise
        tab.add(record)


def column_processor(
    checker, record: Record, fd: FieldDescriptor, raw: str, suggest_ignore: bool
) -> None:
    """Add the nodes of one cell to ``record``."""
    spliter = fd.list_spliter()

    if fd.is_repeated and spliter:
        node = None if fd.type == FieldType.STRUCT else record.new_node_by_define(fd)
        for part in raw.split(spliter):
            single = part.strip()
            if fd.type == FieldType.STRUCT:
                # Each struct element hangs under its own key node.
                root = record.new_node_by_define(fd)
                root.struct_root = True
                node = root.add_key(fd)
            if raw != "":
                data_processor(checker, fd, single, node)
        return

    node = record.new_node_by_define(fd)
    node.suggest_ignore = suggest_ignore
    if fd.type == FieldType.STRUCT:
        node.struct_root = True
        node = node.add_key(fd)
    node.suggest_ignore = suggest_ignore
    data_processor(checker, fd, raw, node)


def data_processor(checker, fd: FieldDescriptor, raw: str, node: Node) -> None:
    """Convert one value into ``node`` and apply the repeat check."""
    try:
        converted = convert_value(fd, raw, checker.global_fd, node)
    except (ConvertError, ExportError, ValueError) as exc:
        raise ExportError(
            StringID.DATA_SHEET_VALUE_CONVERT_ERROR, f"{fd} raw: '{raw}'"
        ) from exc

    if fd.meta.get_bool("RepeatCheck") and not checker.check_value_repeat(
        fd, converted
    ):
        raise ExportError(StringID.DATA_SHEET_VALUE_REPEATED, f"{fd} raw: '{converted}'")