"""Conversion of raw cell text into value nodes."""

from __future__ import annotations

import re
from dataclasses import dataclass

from .data import Node
from .fields import Descriptor, FieldDescriptor, FieldType, FileDescriptor
from .i18n import ExportError, StringID
from .textutil import string_to_primitive


class ConvertError(ExportError):
    """A cell value could not be converted to its field type."""


_PRIMITIVE_KINDS = {
    FieldType.INT32: "int32",
    FieldType.INT64: "int64",
    FieldType.UINT32: "uint32",
    FieldType.UINT64: "uint64",
    FieldType.FLOAT: "float32",
}


@dataclass
class _Token:
    kind: str
    value: str


_TOKEN_RE = re.compile(
    r"""
    (?P<skip>\s+|\#[^\n]*)
    |(?P<number>-?\d+(?:\.\d+)?(?:[eE][+-]?\d+)?)
    |(?P<string>")
    |(?P<colon>:)
    |(?P<ident>[^\W\d]\w*)
    |(?P<unknown>.)
    """,
    re.VERBOSE | re.DOTALL,
)

_ESCAPES = {"n": "\n", "r": "\r", "t": "\t", '"': '"', "\\": "\\"}


def _read_string(text: str, pos: int) -> tuple[str, int]:
    out = []
    while pos < len(text):
        ch = text[pos]
        if ch == '"':
            return "".join(out), pos + 1
        if ch == "\\" and pos + 1 < len(text):
            out.append(_ESCAPES.get(text[pos + 1], text[pos + 1]))
            pos += 2
            continue
        if ch == "\n":
            break
        out.append(ch)
        pos += 1
    raise ValueError("unterminated string")


def _tokens(text: str):
    pos = 0
    while pos < len(text):
        match = _TOKEN_RE.match(text, pos)
        kind = match.lastgroup
        pos = match.end()
        if kind == "skip":
            continue
        if kind == "string":
            value, pos = _read_string(text, pos)
            yield _Token("string", value)
        else:
            yield _Token(kind, match.group())
    yield _Token("eof", "")


def _parse_pairs(fd: FieldDescriptor, text: str):
    """Yield (key, value) pairs from ``Key: value`` cell text."""
    try:
        tokens = list(_tokens(text))
    except ValueError as exc:
        raise ConvertError(
            StringID.STRUCT_PARSER_LEXER_ERROR, f"'{fd.name}' '{exc}'"
        ) from exc

    it = iter(tokens)
    tok = next(it)
    while tok.kind != "eof":
        if tok.kind != "ident":
            raise ConvertError(StringID.STRUCT_PARSER_EXPECT_FIELD, f"'{fd.name}'")
        key = tok.value
        tok = next(it)
        if tok.kind != "colon":
            raise ConvertError(StringID.STRUCT_PARSER_UNEXPECTED_SPLITER, f"'{key}'")
        tok = next(it)
        yield key, tok.value
        if tok.kind != "eof":
            tok = next(it)


def parse_struct(
    fd: FieldDescriptor, value: str, file_d: FileDescriptor, node: Node
) -> None:
    """Parse ``Key: value`` cell text of a struct field into child nodes."""
    found: dict[FieldDescriptor, str] = {}
    for key, raw in _parse_pairs(fd, value):
        field_d = fd.complex.field_by_value_and_meta(key)
        if field_d is None:
            raise ConvertError(StringID.STRUCT_PARSER_FIELD_NOT_FOUND, f"'{key}'")
        if field_d in found:
            raise ConvertError(
                StringID.STRUCT_PARSER_DUPLICATE_FIELD_IN_CELL, f"'{key}'"
            )
        found[field_d] = raw

    for struct_field in fd.complex.fields:
        default = struct_field.meta.get_string("Default")
        if struct_field not in found and default:
            found[struct_field] = default

    # Output follows declaration order so the binary layout is stable.
    for field_d in sorted(found, key=lambda f: f.order):
        convert_value(field_d, found[field_d], file_d, node.add_key(field_d))


def fill_struct_default_value(
    struct_d: Descriptor, file_d: FileDescriptor, node: Node
) -> None:
    """Fill an empty struct cell with each field's default value."""
    for fd in struct_d.fields:
        has_default = fd.meta.get_string("Default") != ""
        if not has_default and node.suggest_ignore:
            continue
        field_node = node.add_key(fd)
        if not has_default and node.value == "":
            field_node.suggest_ignore = True
        convert_value(fd, "", file_d, field_node)


def convert_value(
    fd: FieldDescriptor, value: str, file_d: FileDescriptor, node: Node
) -> str:
    """Check and convert ``value`` for ``fd``, adding value nodes under ``node``.

    Returns the output text of the value; raises ConvertError on failure.
    """
    if value == "":
        value = fd.default_value()

    kind = _PRIMITIVE_KINDS.get(fd.type)
    if kind is not None:
        try:
            string_to_primitive(value, kind)
        except ValueError as exc:
            raise ConvertError(
                StringID.DATA_SHEET_VALUE_CONVERT_ERROR, f"{fd} raw: '{value}'"
            ) from exc
        node.add_value(value)
        return value

    if fd.type == FieldType.BOOL:
        try:
            ret = "true" if string_to_primitive(value, "bool") else "false"
        except ValueError as exc:
            raise ConvertError(
                StringID.DATA_SHEET_VALUE_CONVERT_ERROR, f"{fd} raw: '{value}'"
            ) from exc
        node.add_value(ret)
        return ret

    if fd.type == FieldType.STRING:
        node.add_value(value)
        return value

    if fd.type == FieldType.ENUM:
        if fd.complex is None:
            raise ConvertError(StringID.CONVERT_VALUE_ENUM_TYPE_NIL, f"'{fd.name}'")
        evd = fd.complex.field_by_value_and_meta(value)
        if evd is None:
            raise ConvertError(
                StringID.CONVERT_VALUE_ENUM_VALUE_NOT_FOUND,
                f"'{value}' '{fd.complex.name}'",
            )
        node.add_value(evd.name).enum_value = evd.enum_value
        return evd.name

    if fd.type == FieldType.STRUCT:
        if fd.complex is None:
            raise ConvertError(StringID.CONVERT_VALUE_STRUCT_TYPE_NIL, f"'{fd.name}'")
        if value == "":
            fill_struct_default_value(fd.complex, file_d, node)
        else:
            parse_struct(fd, value, file_d, node)
        return ""

    raise ConvertError(
        StringID.CONVERT_VALUE_UNKNOWN_FIELD_TYPE, f"'{fd.name}' '{fd.name}'"
    )