import pytest

from tabexport.textutil import (
    change_extension,
    string_escape,
    string_to_primitive,
    string_wrap,
)


def test_escape_quote_and_newline():
    assert string_escape('a"b\nc\r') == 'a\\"b\\nc\\r'


def test_escape_keeps_existing_escape():
    assert string_escape("x\\ny") == "x\\ny"


def test_escape_doubles_lone_backslash():
    assert string_escape("a\\b") == "a\\\\b"


def test_wrap():
    assert string_wrap("hi") == '"hi"'


def test_change_extension():
    assert change_extension("dir/sub/file.xlsx", ".json") == "file.json"
    assert change_extension("noext", ".bin") == "noext.bin"


def test_ints():
    assert string_to_primitive("-12", "int32") == -12
    assert string_to_primitive("42", "uint64") == 42
    with pytest.raises(ValueError):
        string_to_primitive("-1", "uint32")
    with pytest.raises(ValueError):
        string_to_primitive(str(2**31), "int32")
    with pytest.raises(ValueError):
        string_to_primitive(" 1", "int64")


def test_bool():
    assert string_to_primitive("是", "bool") is True
    assert string_to_primitive("否", "bool") is False
    assert string_to_primitive("", "bool") is False
    assert string_to_primitive("TRUE", "bool") is True
    with pytest.raises(ValueError):
        string_to_primitive("yes", "bool")


def test_float_and_string():
    assert string_to_primitive("1.5", "float32") == 1.5
    assert string_to_primitive("2.25", "float64") == 2.25
    assert string_to_primitive("abc", "string") == "abc"
    with pytest.raises(ValueError):
        string_to_primitive("x", "float64")


def test_unknown_kind():
    with pytest.raises(TypeError):
        string_to_primitive("1", "complex")