import pytest

from tabexport.i18n import ExportError, StringID, set_language, text


def test_english_message():
    set_language("en_us")
    assert text(StringID.RUN_CACHE_FILE) == "Run: Caching file"


def test_chinese_message():
    set_language("zh_cn")
    assert text(StringID.DATA_SHEET_MUST_FILL) == "[TT504] 数据表: 单元格必须被填充"
    set_language("en_us")


def test_all_ids_have_both_languages():
    for lan in ("en_us", "zh_cn"):
        set_language(lan)
        for sid in StringID:
            assert not text(sid).startswith("i18n:")
    set_language("en_us")


def test_unknown_id_falls_back():
    set_language("en_us")
    assert text(999) == "i18n:999"


def test_unsupported_language():
    with pytest.raises(ValueError):
        set_language("xx_yy")


def test_export_error_message():
    set_language("en_us")
    err = ExportError(StringID.GLOBALS_TABLE_NAME_DUPLICATED, "'Sample'")
    assert str(err) == "[TT303] Globals: Duplicate table name, 'Sample'"
    assert err.string_id is StringID.GLOBALS_TABLE_NAME_DUPLICATED