# tabexport

`tabexport` is a library for reading spreadsheet workbooks that describe
game or application configuration tables. It reads an `.xlsx` file, parses
its `@Types` sheet into enum and struct descriptors, reads the header rows
of its data sheets, and converts every data cell into a typed value tree
ready to be written out in some other format.

## Workbook layout

A workbook holds one `@Types` sheet and one or more data sheets.

The `@Types` sheet starts with a pragma in its first cell, for example
`TableName: Sample Package: table`; both keys are required. The second row
names the columns (`ObjectType`, `FieldName`, `FieldType`, `Value`,
`Comment`, `Meta`, `Alias`, `Default`), the third row is free for comments,
and from the fourth row on each line declares an enum value (when `Value`
is filled) or a struct field. Every enum needs a value of 0.

A data sheet has four header rows (field name, field type, field meta,
comment) followed by the data rows; reading stops at the first blank row.
A sheet whose name starts with `#`, or whose first cell is empty, is not a
data sheet, and a column whose name starts with `#` is skipped. With the
`Vertical: true` pragma a sheet is read column-major, one field per row.

## Modules

- `tabexport.workbook` – `Workbook`, `Sheet`, `read_workbook(path)` (a
  minimal xlsx reader) and `TableCache`, which keeps a JSON copy of a
  workbook's cells and reuses it while the file's zip entry CRCs are
  unchanged.
- `tabexport.typesheet` – `TypeSheet.parse(local_fd, global_fd)` fills a
  `FileDescriptor` from the `@Types` sheet.
- `tabexport.dataheader` – `DataHeader.parse_proto_field(...)` reads the
  header of a data sheet; the first sheet also defines the row type
  `<TableName>Define`.
- `tabexport.datasheet` – `DataSheet.export(...)` gathers the rows of a
  sheet into a `DataModel`.
- `tabexport.merge` – `merge_values(data_model, table, checker)` converts
  the rows into `Record`s of `Node`s, applying defaults, `MustFill`,
  `ListSpliter` and `RepeatCheck`.
- `tabexport.filters` – `convert_value(...)` checks and converts one cell,
  including `Key: value` struct cells.
- `tabexport.fields`, `tabexport.meta`, `tabexport.data` – the descriptor,
  metadata and value-tree classes.
- `tabexport.i18n` – messages in `en_us` and `zh_cn`, chosen with
  `set_language`; errors are raised as `ExportError`.
- `tabexport.cellref` – `r1c1_to_a1(5, 3)` gives `"C5"`.
- `tabexport.textutil` – string escaping and primitive parsing helpers.

## Example

```python
from types import SimpleNamespace

from tabexport.data import DataModel, Table
from tabexport.dataheader import DataHeader
from tabexport.datasheet import DataSheet
from tabexport.fields import FileDescriptor
from tabexport.i18n import set_language
from tabexport.merge import merge_values
from tabexport.typesheet import TypeSheet
from tabexport.workbook import Workbook

set_language("en_us")

book = Workbook()
types = book.add_sheet("@Types")
types.add_row(["TableName: Sample Package: table"])
types.add_row(["ObjectType", "FieldName", "FieldType", "Value", "Comment"])
types.add_row([])
types.add_row(["ActorType", "None", "int32", "0"])
types.add_row(["ActorType", "Hero", "int32", "1"])

rows = book.add_sheet("Data")
rows.add_row(["ID", "Name", "Type"])
rows.add_row(["int32", "string", "ActorType"])
rows.add_row(["MakeIndex: true", "", ""])
rows.add_row(["", "", ""])
rows.add_row(["1", "Knight", "Hero"])

local_fd, global_fd = FileDescriptor(), FileDescriptor()
source = SimpleNamespace(file_name="Sample.xlsx", local_fd=local_fd)

TypeSheet(book.sheets[0], source).parse(local_fd, global_fd)
sheet = DataSheet(book.sheets[1], source)
header = DataHeader()
header.parse_proto_field(0, sheet, local_fd, global_fd)
local_fd.name = local_fd.pragma.get_string("TableName")

model = DataModel()
sheet.export(source, model, header, None)

table = Table(local_fd=local_fd)
checker = SimpleNamespace(global_fd=global_fd, check_value_repeat=lambda fd, value: True)
merge_values(model, table, checker)

print([(n.name, [c.value for c in n.children]) for n in table.recs[0].nodes])
# [('ID', ['1']), ('Name', ['Knight']), ('Type', ['Hero'])]
```

A real workbook is read with `read_workbook("Sample.xlsx")` instead of
building one by hand.

## What it does not do

The package stops at the value tree. It has no command line, does not
write JSON, Lua, protobuf, binary or type-description files, and does not
combine several workbooks into one output; those steps are left to the
caller.

## Running the tests

```
pip install .[test]
pytest
```