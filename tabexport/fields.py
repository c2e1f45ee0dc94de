"""Type descriptors: field types, fields, composite types and files."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import IntEnum

from .meta import MetaInfo

log = logging.getLogger(__name__)

REPEATED_KEYWORD = "repeated"
SLICE_KEYWORD = "[]"


class FieldType(IntEnum):
    NONE = 0
    INT32 = 1
    INT64 = 2
    UINT32 = 3
    UINT64 = 4
    FLOAT = 5
    STRING = 6
    BOOL = 7
    ENUM = 8
    STRUCT = 9
    TABLE = 10


class DescriptorKind(IntEnum):
    NONE = 0
    ENUM = 1
    STRUCT = 2


class DescriptorUsage(IntEnum):
    NONE = 0
    ROW_TYPE = 1
    COMBINE_STRUCT = 2


class DuplicateFieldNameError(ValueError):
    """A descriptor already has a field of this name."""


class DuplicateIndexNameError(ValueError):
    """A descriptor already has an index of this name."""


_NAME_BY_TYPE = {
    FieldType.NONE: "none",
    FieldType.INT32: "int32",
    FieldType.INT64: "int64",
    FieldType.UINT32: "uint32",
    FieldType.UINT64: "uint64",
    FieldType.FLOAT: "float",
    FieldType.STRING: "string",
    FieldType.BOOL: "bool",
    FieldType.ENUM: "enum",
    FieldType.STRUCT: "struct",
}
_TYPE_BY_NAME = {v: k for k, v in _NAME_BY_TYPE.items()}


def make_tag(t: int, order: int) -> int:
    """Combine a field type and an order into a binary tag."""
    return (int(t) << 16) | int(order)


def field_type_to_string(t) -> str:
    return _NAME_BY_TYPE.get(t, "unknown")


def parse_field_type(text: str):
    """Return the FieldType named by ``text``, or None."""
    return _TYPE_BY_NAME.get(text)


@dataclass(eq=False)
class FieldDescriptor:
    """Describes one column, struct field or enum value."""

    name: str = ""
    type: FieldType = FieldType.NONE
    complex: Descriptor | None = field(default=None, repr=False)
    order: int = 0
    meta: MetaInfo = field(default_factory=MetaInfo)
    is_repeated: bool = False
    enum_value: int = 0
    comment: str = ""
    parent: Descriptor | None = field(default=None, repr=False)

    def tag(self) -> int:
        return make_tag(self.type, self.order)

    def _complex_name(self) -> str:
        return self.complex.name if self.complex is not None else ""

    def same_as(self, other: FieldDescriptor) -> bool:
        """Compare name, type, meta, repetition, enum value and complex type name."""
        return (
            self.name == other.name
            and self.type == other.type
            and str(self.meta) == str(other.meta)
            and self.is_repeated == other.is_repeated
            and self.enum_value == other.enum_value
            and self._complex_name() == other._complex_name()
        )

    def type_string(self) -> str:
        if self.complex is not None:
            return self.complex.name
        return field_type_to_string(self.type)

    def kind_string(self) -> str:
        return field_type_to_string(self.type)

    def __str__(self) -> str:
        rep = "repeated " if self.is_repeated else ""
        return f"name: '{self.name}' {rep}type: '{self.type_string()}'"

    def default_value(self) -> str:
        value = self.meta.get_string("Default")
        if value:
            return value
        if self.type in (
            FieldType.INT32,
            FieldType.UINT32,
            FieldType.INT64,
            FieldType.UINT64,
            FieldType.FLOAT,
        ):
            return "0"
        if self.type == FieldType.BOOL:
            return "false"
        if self.type == FieldType.ENUM:
            if self.complex is None:
                log.debug("build type null while get default value %s", self.name)
                return ""
            if not self.complex.fields:
                return ""
            return self.complex.fields[0].name
        return ""

    def list_spliter(self) -> str:
        return self.meta.get_string("ListSpliter")

    def repeat_check(self) -> bool:
        return self.meta.get_bool("RepeatCheck")

    def parse_type(self, file_d: FileDescriptor, raw: str) -> bool:
        """Resolve ``raw`` as a builtin type or a type of ``file_d``; False if unknown."""
        if raw.startswith(REPEATED_KEYWORD):
            pure = raw[len(REPEATED_KEYWORD) + 1 :]
            self.is_repeated = False
        elif raw.startswith(SLICE_KEYWORD):
            pure = raw[len(SLICE_KEYWORD) :]
            self.is_repeated = False
        else:
            pure = raw

        ft = parse_field_type(pure)
        if ft is not None:
            self.type = ft
            return True

        desc = file_d.descriptor_by_name.get(pure)
        if desc is None:
            return False
        self.complex = desc
        if desc.kind == DescriptorKind.STRUCT:
            self.type = FieldType.STRUCT
        elif desc.kind == DescriptorKind.ENUM:
            self.type = FieldType.ENUM
        return True


@dataclass(eq=False)
class Descriptor:
    """A struct or enum type with its fields and indexes."""

    name: str = ""
    kind: DescriptorKind = DescriptorKind.NONE
    usage: DescriptorUsage = DescriptorUsage.NONE
    field_by_name: dict = field(default_factory=dict, repr=False)
    field_by_number: dict = field(default_factory=dict, repr=False)
    fields: list = field(default_factory=list, repr=False)
    indexes: list = field(default_factory=list, repr=False)
    index_by_name: dict = field(default_factory=dict, repr=False)
    file: FileDescriptor | None = field(default=None, repr=False)

    def add(self, fd: FieldDescriptor) -> None:
        """Append a field; raises on a duplicate field or index name."""
        fd.parent = self
        fd.order = len(self.fields)

        if fd.name in self.field_by_name:
            raise DuplicateFieldNameError(f"Duplicate field name: {fd.name}")
        self.field_by_name[fd.name] = fd
        self.field_by_number[fd.enum_value] = fd
        self.fields.append(fd)

        if fd.meta.get_bool("MakeIndex"):
            if fd.name in self.index_by_name:
                raise DuplicateIndexNameError(f"Duplicate index name: {fd.name}")
            self.index_by_name[fd.name] = fd
            self.indexes.append(fd)

    def field_by_value_and_meta(self, value: str) -> FieldDescriptor | None:
        """Find a field by its name or its Alias meta."""
        for fd in self.fields:
            if fd.name == value or fd.meta.get_string("Alias") == value:
                return fd
        return None


@dataclass(eq=False)
class FileDescriptor:
    """The types declared by one table file (or the combined output)."""

    name: str = ""
    descriptor_by_name: dict = field(default_factory=dict, repr=False)
    descriptors: list = field(default_factory=list, repr=False)
    pragma: MetaInfo = field(default_factory=MetaInfo)

    def match_tag(self, tag: str) -> bool:
        if not self.pragma.contains_key("OutputTag"):
            return True
        return self.pragma.contains_value("OutputTag", tag)

    def row_descriptor(self) -> Descriptor | None:
        return next(
            (d for d in self.descriptors if d.usage == DescriptorUsage.ROW_TYPE), None
        )

    def add(self, descriptor: Descriptor) -> None:
        """Register a type; raises ValueError if its name is already taken."""
        if descriptor.name in self.descriptor_by_name:
            raise ValueError(f"duplicate type name: {descriptor.name}")
        if descriptor.file is None:
            descriptor.file = self
        self.descriptors.append(descriptor)
        self.descriptor_by_name[descriptor.name] = descriptor