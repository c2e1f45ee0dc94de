from tabexport.data import DataModel, FieldValue, LineData, Node, Record, Table
from tabexport.fields import Descriptor, FieldDescriptor, FieldType, FileDescriptor


def _fields(*names):
    d = Descriptor(name="Row")
    out = [FieldDescriptor(name=n, type=FieldType.INT32) for n in names]
    for fd in out:
        d.add(fd)
    return out


def test_data_model_add_sorts_line_by_order_and_column():
    a, b = _fields("a", "b")
    line = LineData()
    line.add(FieldValue(field_def=b, raw_value="2", c=2))
    line.add(FieldValue(field_def=a, raw_value="1", c=1))
    model = DataModel()
    model.add(line)
    assert [fv.raw_value for fv in model.lines[0]] == ["1", "2"]
    assert len(model.lines[0]) == 2


def test_sort_keeps_repeated_columns_in_order():
    (a,) = _fields("a")
    line = LineData()
    for c in (3, 1, 2):
        line.add(FieldValue(field_def=a, raw_value=str(c), c=c))
    DataModel().add(line)
    assert [fv.c for fv in line] == [1, 2, 3]


def test_record_reuses_node_for_same_field():
    a, b = _fields("a", "b")
    rec = Record()
    first = rec.new_node_by_define(a)
    assert rec.new_node_by_define(a) is first
    rec.new_node_by_define(b)
    assert [n.fd for n in rec.nodes] == [a, b]


def test_node_children():
    (a,) = _fields("a")
    root = Node(fd=a)
    key = root.add_key(a)
    val = key.add_value("5")
    assert root.children == [key]
    assert key.children == [val]
    assert val.value == "5"
    assert key.name == "a"
    assert key.type == FieldType.INT32
    assert key.tag() == a.tag()


def test_value_node_without_field():
    node = Node(value="x")
    assert node.name == ""
    assert node.is_repeated is False


def test_table_name_and_add():
    tab = Table(local_fd=FileDescriptor(name="Sample"))
    rec = Record()
    tab.add(rec)
    assert tab.name == "Sample"
    assert tab.recs == [rec]