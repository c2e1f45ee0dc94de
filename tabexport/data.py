"""Row data gathered from sheets and the value tree built from it."""

from __future__ import annotations

from dataclasses import dataclass, field

from .fields import FieldDescriptor, FieldType, FileDescriptor


@dataclass(eq=False)
class FieldValue:
    """The raw text of one cell together with its field and position."""

    field_def: FieldDescriptor
    raw_value: str = ""
    r: int = 0
    c: int = 0
    sheet_name: str = ""
    file_name: str = ""
    field_repeated_count: int = 0


@dataclass(eq=False)
class LineData:
    """All cell values of one data row."""

    values: list = field(default_factory=list)

    def add(self, fv: FieldValue) -> None:
        self.values.append(fv)

    def sort(self) -> None:
        # Column index keeps repeated fields split over several columns in order.
        self.values.sort(key=lambda fv: fv.field_def.order + fv.c)

    def __len__(self) -> int:
        return len(self.values)

    def __iter__(self):
        return iter(self.values)


@dataclass(eq=False)
class DataModel:
    """The rows of one table before conversion."""

    lines: list = field(default_factory=list)

    def add(self, line: LineData) -> None:
        line.sort()
        self.lines.append(line)


@dataclass(eq=False)
class Node:
    """A node of the converted value tree: either a key or a value."""

    fd: FieldDescriptor | None = None
    struct_root: bool = False
    value: str = ""
    enum_value: int = 0
    raw: bytes = b""
    children: list = field(default_factory=list)
    suggest_ignore: bool = False

    @property
    def name(self) -> str:
        return self.fd.name if self.fd is not None else ""

    @property
    def type(self) -> FieldType:
        return self.fd.type if self.fd is not None else FieldType.NONE

    @property
    def is_repeated(self) -> bool:
        return self.fd.is_repeated if self.fd is not None else False

    def tag(self) -> int:
        return self.fd.tag()

    def add_value(self, value: str) -> Node:
        node = Node(value=value)
        self.children.append(node)
        return node

    def add_key(self, fd: FieldDescriptor) -> Node:
        node = Node(fd=fd)
        self.children.append(node)
        return node


@dataclass(eq=False)
class Record:
    """The top-level nodes of one output row, one per field."""

    nodes: list = field(default_factory=list)
    _node_by_fd: dict = field(default_factory=dict, repr=False)

    def new_node_by_define(self, fd: FieldDescriptor) -> Node:
        """Return the node for ``fd``, creating it on first use."""
        node = self._node_by_fd.get(fd)
        if node is None:
            node = Node(fd=fd)
            self._node_by_fd[fd] = node
            self.nodes.append(node)
        return node


@dataclass(eq=False)
class Table:
    """Converted records of one table file."""

    local_fd: FileDescriptor | None = None
    global_fd: FileDescriptor | None = None
    recs: list = field(default_factory=list)

    def add(self, record: Record) -> None:
        self.recs.append(record)

    @property
    def name(self) -> str:
        return self.local_fd.name