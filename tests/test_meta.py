import pytest

from tabexport.meta import MetaInfo, is_system_tag


def test_parse_quoted_values():
    m = MetaInfo()
    m.parse('TableName: "Sample" Package: "table"')
    assert m.get_string("TableName") == "Sample"
    assert m.get_string("Package") == "table"


def test_missing_key_is_empty():
    m = MetaInfo('A: "x"')
    assert m.get_string("B") == ""
    assert m.contains_key("A")
    assert not m.contains_key("B")


def test_get_bool():
    m = MetaInfo("MakeIndex: true RepeatCheck: false")
    assert m.get_bool("MakeIndex") is True
    assert m.get_bool("RepeatCheck") is False
    assert m.get_bool("Other") is False


def test_multiple_values_for_key():
    m = MetaInfo('OutputTag: ".cs" OutputTag: ".lua"')
    assert m.contains_value("OutputTag", ".cs")
    assert m.contains_value("OutputTag", ".lua")
    assert not m.contains_value("OutputTag", ".go")
    assert m.raw()["OutputTag"] == [".cs", ".lua"]


def test_set_string_replaces():
    m = MetaInfo('Alias: "a"')
    m.set_string("Alias", "b")
    assert m.get_string("Alias") == "b"
    assert m.raw() == {"Alias": "b"}


def test_user_meta_excludes_system_tags_sorted():
    m = MetaInfo('json: "j" Alias: "x" bson: "b"')
    assert list(m.user_meta()) == [("bson", "b"), ("json", "j")]


def test_is_system_tag():
    assert is_system_tag("ListSpliter")
    assert not is_system_tag("json")


def test_str_independent_of_order():
    a = MetaInfo("MakeIndex: true RepeatCheck: true")
    b = MetaInfo("RepeatCheck: true MakeIndex: true")
    assert str(a) == str(b)
    assert str(a) != str(MetaInfo("MakeIndex: true"))


def test_str_round_trip():
    m = MetaInfo('Default: "a \\"q\\"" ListSpliter: "|"')
    again = MetaInfo(str(m))
    assert again.get_string("Default") == 'a "q"'
    assert str(again) == str(m)


def test_parse_missing_colon_raises():
    with pytest.raises(ValueError):
        MetaInfo('Key "x"')


def test_parse_unterminated_string_raises():
    with pytest.raises(ValueError):
        MetaInfo('Key: "x')


def test_empty_text():
    m = MetaInfo("")
    assert m.raw() == {}