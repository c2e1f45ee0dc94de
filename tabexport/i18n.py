"""Localised message strings."""

from enum import IntEnum, auto


class StringID(IntEnum):
    CONVERT_VALUE_ENUM_TYPE_NIL = 0
    CONVERT_VALUE_STRUCT_TYPE_NIL = auto()
    CONVERT_VALUE_ENUM_VALUE_NOT_FOUND = auto()
    CONVERT_VALUE_UNKNOWN_FIELD_TYPE = auto()
    STRUCT_PARSER_LEXER_ERROR = auto()
    STRUCT_PARSER_EXPECT_FIELD = auto()
    STRUCT_PARSER_UNEXPECTED_SPLITER = auto()
    STRUCT_PARSER_FIELD_NOT_FOUND = auto()
    STRUCT_PARSER_DUPLICATE_FIELD_IN_CELL = auto()
    RUN_CACHE_FILE = auto()
    RUN_COLLECT_TYPE_INFO = auto()
    RUN_EXPORT_SHEET_DATA = auto()
    GLOBALS_COMBINE_NAME_LOST = auto()
    GLOBALS_PACKAGE_NAME_DIFF = auto()
    GLOBALS_TABLE_NAME_DUPLICATED = auto()
    GLOBALS_OUTPUT_COMBINE_DATA = auto()
    GLOBALS_DUPLICATE_TYPE_NAME = auto()
    FILE_TYPE_SHEET_KEEP_SINGLETON = auto()
    FILE_TYPE_SHEET_NOT_FOUND = auto()
    DATA_SHEET_VALUE_CONVERT_ERROR = auto()
    DATA_SHEET_VALUE_REPEATED = auto()
    DATA_SHEET_ROW_DATA_SPLITED_BY_EMPTY_LINE = auto()
    DATA_SHEET_MUST_FILL = auto()
    DATA_HEADER_TYPE_NOT_FOUND = auto()
    DATA_HEADER_META_PARSE_FAILED = auto()
    DATA_HEADER_DUPLICATE_FIELD_NAME = auto()
    DATA_HEADER_REPEATED_FIELD_TYPE_NOT_SAME_IN_MULTI_COLUMN = auto()
    DATA_HEADER_REPEATED_FIELD_META_NOT_SAME_IN_MULTI_COLUMN = auto()
    DATA_HEADER_USE_RESERVED_TYPE_NAME = auto()
    DATA_HEADER_NOT_MATCH = auto()
    DATA_HEADER_FIELD_NOT_DEFINED_IN_MAIN_TABLE_IN_MULTI_TABLE_MODE = auto()
    DATA_HEADER_NOT_MATCH_IN_MULTI_TABLE_MODE = auto()
    TYPE_SHEET_PRAGMA_PARSE_FAILED = auto()
    TYPE_SHEET_TABLE_NAME_IS_EMPTY = auto()
    TYPE_SHEET_PACKAGE_IS_EMPTY = auto()
    TYPE_SHEET_FIELD_TYPE_NOT_FOUND = auto()
    TYPE_SHEET_ENUM_VALUE_PARSE_FAILED = auto()
    TYPE_SHEET_DESCRIPTOR_KIND_NOT_SAME = auto()
    TYPE_SHEET_FIELD_META_PARSE_FAILED = auto()
    TYPE_SHEET_STRUCT_FIELD_CAN_NOT_BE_STRUCT = auto()
    TYPE_SHEET_FIRST_ENUM_VALUE_SHOULD_BE_ZERO = auto()
    TYPE_SHEET_UNEXPECTED_TYPE_HEADER = auto()
    TYPE_SHEET_DUPLICATED_ENUM_VALUE = auto()
    TYPE_SHEET_ROW_DATA_SPLITED_BY_EMPTY_LINE = auto()
    TYPE_SHEET_OBJECT_NAME_EMPTY = auto()
    TYPE_SHEET_DUPLICATE_FIELD_NAME = auto()
    PRINTER_IGNORED_BY_OUTPUT_TAG = auto()
    PRINTER_OPEN_WRITE_OUTPUT_FILE_FAILED = auto()
    SYSTEM_OPEN_READ_XLSX_FAILED = auto()


S = StringID

_EN_US = {
    S.CONVERT_VALUE_ENUM_TYPE_NIL: "[TT101] ConvertValue: Enum type nil",
    S.CONVERT_VALUE_STRUCT_TYPE_NIL: "[TT102] ConvertValue: Struct type nil",
    S.CONVERT_VALUE_ENUM_VALUE_NOT_FOUND: "[TT103] ConvertValue: Enum value not found",
    S.CONVERT_VALUE_UNKNOWN_FIELD_TYPE: "[TT104] ConvertValue: Unknown field type",
    S.STRUCT_PARSER_LEXER_ERROR: "[TT201] StructParser: Lexer error",
    S.STRUCT_PARSER_EXPECT_FIELD: "[TT202] StructParser: Expect field",
    S.STRUCT_PARSER_UNEXPECTED_SPLITER: "[TT203] StructParser: Unexpected k-v spliter",
    S.STRUCT_PARSER_FIELD_NOT_FOUND: "[TT204] StructParser: Field not found",
    S.STRUCT_PARSER_DUPLICATE_FIELD_IN_CELL: "[TT205] StructParser: Duplicate field",
    S.RUN_CACHE_FILE: "Run: Caching file",
    S.RUN_COLLECT_TYPE_INFO: "Run: Collect Type Info",
    S.RUN_EXPORT_SHEET_DATA: "Run: Export Sheet Data",
    S.GLOBALS_OUTPUT_COMBINE_DATA: "Globals: Merge Combined Data",
    S.GLOBALS_COMBINE_NAME_LOST: "[TT301] Globals: Please specify 'combinename' params",
    S.GLOBALS_PACKAGE_NAME_DIFF: "[TT302] Globals: Keep all type in same package",
    S.GLOBALS_TABLE_NAME_DUPLICATED: "[TT303] Globals: Duplicate table name",
    S.GLOBALS_DUPLICATE_TYPE_NAME: "[TT304] Globals: Duplicate type name( table name ?)",
    S.FILE_TYPE_SHEET_KEEP_SINGLETON: "[TT401] File: Type sheet only need ONE in a file",
    S.FILE_TYPE_SHEET_NOT_FOUND: "[TT402] File: @Types sheet not found",
    S.DATA_SHEET_VALUE_CONVERT_ERROR: "[TT501] DataSheet: Cell value convert error",
    S.DATA_SHEET_VALUE_REPEATED: "[TT502] DataSheet: Duplicated cell value",
    S.DATA_SHEET_MUST_FILL: "[TT503] DataSheet: cell value must fill",
    S.DATA_SHEET_ROW_DATA_SPLITED_BY_EMPTY_LINE: "[TT503] DataSheet: Row data splited by empty line",
    S.DATA_HEADER_TYPE_NOT_FOUND: "[TT602] DataHeader: Type not found",
    S.DATA_HEADER_META_PARSE_FAILED: "[TT603] DataHeader: Meta parse failed",
    S.DATA_HEADER_DUPLICATE_FIELD_NAME: "[TT604] DataHeader: Duplicated field name",
    S.DATA_HEADER_REPEATED_FIELD_TYPE_NOT_SAME_IN_MULTI_COLUMN: "[TT605] DataHeader: Repeated field type not same in columns",
    S.DATA_HEADER_REPEATED_FIELD_META_NOT_SAME_IN_MULTI_COLUMN: "[TT606] DataHeader: Repeated field meta not same in columns",
    S.DATA_HEADER_USE_RESERVED_TYPE_NAME: "[TT607] DataHeader: Use reserved type name, like TableName+'Define' ",
    S.DATA_HEADER_NOT_MATCH: "[TT608] DataHeader: Multi sheet data header not match",
    S.DATA_HEADER_FIELD_NOT_DEFINED_IN_MAIN_TABLE_IN_MULTI_TABLE_MODE: "[TT609] DataHeader: Field not defined in main table, in multi table mode",
    S.DATA_HEADER_NOT_MATCH_IN_MULTI_TABLE_MODE: "[TT610] DataHeader: Sheet data header not match in multi table mode",
    S.TYPE_SHEET_PRAGMA_PARSE_FAILED: "[TT701] TypeSheet: File pragma parse failed",
    S.TYPE_SHEET_TABLE_NAME_IS_EMPTY: "[TT702] TypeSheet: Table name is empty",
    S.TYPE_SHEET_PACKAGE_IS_EMPTY: "[TT703] TypeSheet: Package is empty",
    S.TYPE_SHEET_FIELD_TYPE_NOT_FOUND: "[TT704] TypeSheet: Field type not found",
    S.TYPE_SHEET_ENUM_VALUE_PARSE_FAILED: "[TT705] TypeSheet: Enum value parse failed",
    S.TYPE_SHEET_DESCRIPTOR_KIND_NOT_SAME: "[TT706] TypeSheet: Descriptor kind not the same, due to enum value",
    S.TYPE_SHEET_FIELD_META_PARSE_FAILED: "[TT707] TypeSheet: Field meta parse failed",
    S.TYPE_SHEET_STRUCT_FIELD_CAN_NOT_BE_STRUCT: "[TT708] TypeSheet: Struct field can not be struct kind",
    S.TYPE_SHEET_FIRST_ENUM_VALUE_SHOULD_BE_ZERO: "[TT709] TypeSheet: First enum value should be zero",
    S.TYPE_SHEET_UNEXPECTED_TYPE_HEADER: "[TT710] TypeSheet: Unexpected type header",
    S.TYPE_SHEET_DUPLICATED_ENUM_VALUE: "[TT711] TypeSheet: Duplicated enum value",
    S.TYPE_SHEET_ROW_DATA_SPLITED_BY_EMPTY_LINE: "[TT712] TypeSheet: Row data splited by empty line",
    S.TYPE_SHEET_OBJECT_NAME_EMPTY: "[TT713] TypeSheet: 'ObjectName' is empty",
    S.TYPE_SHEET_DUPLICATE_FIELD_NAME: "[TT714] TypeSheet: Duplicate field name",
    S.PRINTER_IGNORED_BY_OUTPUT_TAG: "[TT801] Printer: Ignored by 'OutputTag' in @Types",
    S.PRINTER_OPEN_WRITE_OUTPUT_FILE_FAILED: "[TT802] Printer: Open write output file failed,",
    S.SYSTEM_OPEN_READ_XLSX_FAILED: "[TT901] Open read Xlsx failed, ",
}

_ZH_CN = {
    S.CONVERT_VALUE_ENUM_TYPE_NIL: "[TT101] 值转换: 枚举类型空",
    S.CONVERT_VALUE_STRUCT_TYPE_NIL: "[TT102] 值转换: 结构类型空",
    S.CONVERT_VALUE_ENUM_VALUE_NOT_FOUND: "[TT103] 值转换: 枚举值未找到",
    S.CONVERT_VALUE_UNKNOWN_FIELD_TYPE: "[TT104] 值转换: 未知的字段类型",
    S.STRUCT_PARSER_LEXER_ERROR: "[TT201] 结构体解析: 词法错误",
    S.STRUCT_PARSER_EXPECT_FIELD: "[TT202] 结构体解析: 期望字段",
    S.STRUCT_PARSER_UNEXPECTED_SPLITER: "[TT203] 结构体解析: 非预期的键值分割符",
    S.STRUCT_PARSER_FIELD_NOT_FOUND: "[TT204] 结构体解析: 未知字段",
    S.STRUCT_PARSER_DUPLICATE_FIELD_IN_CELL: "[TT205] 结构体解析: 重复的字段",
    S.RUN_CACHE_FILE: "运行: 缓冲文件",
    S.RUN_COLLECT_TYPE_INFO: "运行: 收集类型信息",
    S.RUN_EXPORT_SHEET_DATA: "运行: 导出表单数据",
    S.GLOBALS_OUTPUT_COMBINE_DATA: "合并: 输出合并数据",
    S.GLOBALS_COMBINE_NAME_LOST: "[TT301] 合并: 请在参数中添加 'combinename' 指明合并配置名",
    S.GLOBALS_PACKAGE_NAME_DIFF: "[TT302] 合并: 所有表中的@Types中的包名(Package)请保持一致",
    S.GLOBALS_TABLE_NAME_DUPLICATED: "[TT303] 合并: 表名(TableName)重复",
    S.GLOBALS_DUPLICATE_TYPE_NAME: "[TT304] 合并: 重复的类型名(表名?)",
    S.FILE_TYPE_SHEET_KEEP_SINGLETON: "[TT401] 文件: 类型表在一个表中只能有一份",
    S.FILE_TYPE_SHEET_NOT_FOUND: "[TT402] 文件: 类型表(@Types)没有找到",
    S.DATA_SHEET_VALUE_CONVERT_ERROR: "[TT501] 数据表: 单元格转换错误",
    S.DATA_SHEET_VALUE_REPEATED: "[TT502] 数据表: 单元格值重复",
    S.DATA_SHEET_ROW_DATA_SPLITED_BY_EMPTY_LINE: "[TT503] 数据表: 空行后依然有数据没有导出",
    S.DATA_SHEET_MUST_FILL: "[TT504] 数据表: 单元格必须被填充",
    S.DATA_HEADER_TYPE_NOT_FOUND: "[TT602] 数据头: 未知类型",
    S.DATA_HEADER_META_PARSE_FAILED: "[TT603] 数据头: 特性解析错误",
    S.DATA_HEADER_DUPLICATE_FIELD_NAME: "[TT604] 数据头: 重复的字段名",
    S.DATA_HEADER_REPEATED_FIELD_TYPE_NOT_SAME_IN_MULTI_COLUMN: "[TT605] 数据头: 数组字段在多列中的类型不一致",
    S.DATA_HEADER_REPEATED_FIELD_META_NOT_SAME_IN_MULTI_COLUMN: "[TT606] 数据头: 数组字段在多列中的特性不一致",
    S.DATA_HEADER_USE_RESERVED_TYPE_NAME: "[TT607] 数据头: 使用了保留的类型名 例如:表名+'Define'",
    S.DATA_HEADER_NOT_MATCH: "[TT608] 数据头: 多个表单使用的数据头描述不一致",
    S.DATA_HEADER_FIELD_NOT_DEFINED_IN_MAIN_TABLE_IN_MULTI_TABLE_MODE: "[TT609] 数据头: 多表格导出时, 子表中的字段在母表中没有定义",
    S.DATA_HEADER_NOT_MATCH_IN_MULTI_TABLE_MODE: "[TT610] 数据头: 多表格导出时, 子表中的字段与母表定义不一致",
    S.TYPE_SHEET_PRAGMA_PARSE_FAILED: "[TT701] 类型表: 文件特性解析失败",
    S.TYPE_SHEET_TABLE_NAME_IS_EMPTY: "[TT702] 类型表: 表名(TableName)为空",
    S.TYPE_SHEET_PACKAGE_IS_EMPTY: "[TT703] 类型表: 包名(Package)为空",
    S.TYPE_SHEET_FIELD_TYPE_NOT_FOUND: "[TT704] 类型表: 未知字段类型",
    S.TYPE_SHEET_ENUM_VALUE_PARSE_FAILED: "[TT705] 类型表: 枚举值解析失败",
    S.TYPE_SHEET_DESCRIPTOR_KIND_NOT_SAME: "[TT706] 类型表: 类型前后不一致, 由枚举值不一致导致",
    S.TYPE_SHEET_FIELD_META_PARSE_FAILED: "[TT707] 类型表: 字段特性解析失败",
    S.TYPE_SHEET_STRUCT_FIELD_CAN_NOT_BE_STRUCT: "[TT708] 类型表: 结构体字段类型不能是结构体类型",
    S.TYPE_SHEET_FIRST_ENUM_VALUE_SHOULD_BE_ZERO: "[TT709] 类型表: 第一个枚举值必须为0",
    S.TYPE_SHEET_UNEXPECTED_TYPE_HEADER: "[TT710] 类型表: 非期望的类型表头名",
    S.TYPE_SHEET_DUPLICATED_ENUM_VALUE: "[TT711] 类型表: 重复的枚举值",
    S.TYPE_SHEET_ROW_DATA_SPLITED_BY_EMPTY_LINE: "[TT712] 类型表: 空行后依然有数据没有导出",
    S.TYPE_SHEET_OBJECT_NAME_EMPTY: "[TT713] 类型表: 'ObjectName'字段不能为空",
    S.TYPE_SHEET_DUPLICATE_FIELD_NAME: "[TT714] 类型表: 重复的字段名",
    S.PRINTER_IGNORED_BY_OUTPUT_TAG: "[TT801] 输出器: @Types的'OutputTag'忽略了目标",
    S.PRINTER_OPEN_WRITE_OUTPUT_FILE_FAILED: "[TT802] 输出器: 打开输出文件失败,",
    S.SYSTEM_OPEN_READ_XLSX_FAILED: "[TT901] 打开读取电子表格失败:",
}

_LANGUAGES = {"en_us": _EN_US, "zh_cn": _ZH_CN}
_current = None


def text(string_id) -> str:
    """Return the message for ``string_id`` in the current language."""
    if _current is None:
        return "!!i18n not set!!"
    found = _current.get(string_id)
    if found is not None:
        return found
    return f"i18n:{int(string_id)}"


def set_language(lan: str) -> None:
    """Select the message language; raises ValueError if it is not supported."""
    global _current
    if lan not in _LANGUAGES:
        raise ValueError(f"language not support: {lan}")
    _current = _LANGUAGES[lan]


class ExportError(Exception):
    """An export failure carrying a localised message and optional detail."""

    def __init__(self, string_id, detail: str = ""):
        self.string_id = string_id
        self.detail = detail
        message = text(string_id)
        super().__init__(f"{message}, {detail}" if detail else message)