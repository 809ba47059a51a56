import pytest

from kata.stringutil import (
    LetterCase,
    bool_to_string,
    get_extension_from_file_name,
    remove_outer_quotes,
    split_by_char,
    string_to_bool,
    string_to_double,
    string_to_int,
    trim_string,
    unsigned_to_hex_string,
)


def test_split_documented_example():
    assert split_by_char("string1|string2|string3", "|") == ["string1", "string2", "string3"]


def test_split_empty_source():
    assert split_by_char("", "|") == []


def test_split_only_separator():
    assert split_by_char("|", "|") == ["", ""]


def test_split_without_separator():
    assert split_by_char("single", "|") == ["single"]


def test_split_trailing_separator_adds_empty_entry():
    assert split_by_char("a|", "|") == ["a", ""]


@pytest.mark.parametrize("source", ["a|b", "||", "x||y|", "plain"])
def test_split_join_round_trip(source):
    assert "|".join(split_by_char(source, "|")) == source


@pytest.mark.parametrize("text", ["True", "true", "yes", "Y", "1"])
def test_string_to_bool_true(text):
    assert string_to_bool(text) is True


@pytest.mark.parametrize("text", ["", "false", "no", "0", "maybe"])
def test_string_to_bool_false(text):
    assert string_to_bool(text) is False


def test_bool_to_string_formats():
    assert bool_to_string(True) == "True"
    assert bool_to_string(True, LetterCase.LOWER_CASE) == "true"
    assert bool_to_string(True, LetterCase.UPPER_CASE) == "TRUE"
    assert bool_to_string(False) == "False"
    assert bool_to_string(False, LetterCase.LOWER_CASE) == "false"
    assert bool_to_string(False, LetterCase.UPPER_CASE) == "FALSE"
    assert bool_to_string(False, LetterCase.CAMEL_CASE) == "False"


@pytest.mark.parametrize("value", [True, False])
def test_bool_round_trip(value):
    for case in LetterCase:
        assert string_to_bool(bool_to_string(value, case)) is value


@pytest.mark.parametrize("number", [0, 7, -42, 123456])
def test_string_to_int_round_trip(number):
    assert string_to_int(str(number)) == number


def test_string_to_int_reads_prefix():
    assert string_to_int("  -17abc") == -17


def test_string_to_int_without_number():
    assert string_to_int("abc") == 0


def test_string_to_double():
    assert string_to_double("3.5") == 3.5
    assert string_to_double("2.5e1x") == 25.0
    assert string_to_double("x") == 0.0


def test_unsigned_to_hex_string():
    assert unsigned_to_hex_string(255) == "ff"


@pytest.mark.parametrize("number", [0, 1, 16, 4096, 987654])
def test_hex_round_trip(number):
    assert int(unsigned_to_hex_string(number), 16) == number


def test_hex_rejects_negative():
    with pytest.raises(ValueError):
        unsigned_to_hex_string(-1)


def test_extension():
    assert get_extension_from_file_name("archive.tar.gz") == "gz"
    assert get_extension_from_file_name("27_plugin_lion.dll") == "dll"
    assert get_extension_from_file_name("noext") == ""


def test_remove_outer_quotes_both():
    assert remove_outer_quotes('"abc"') == "abc"


def test_remove_outer_quotes_one_side_kept_by_default():
    assert remove_outer_quotes('"abc') == '"abc'
    assert remove_outer_quotes('abc"') == 'abc"'


def test_remove_outer_quotes_one_side_removed_when_asked():
    assert remove_outer_quotes('"abc', False) == "abc"
    assert remove_outer_quotes('abc"', False) == "abc"


def test_remove_outer_quotes_short_text():
    assert remove_outer_quotes('"') == '"'


def test_trim_string():
    assert trim_string("  a b \t") == "a b"
    assert trim_string("\tx") == "x"


def test_trim_blank_only_unchanged():
    assert trim_string("   ") == "   "