import pytest

from nbfc.jsonparse import parse
from nbfc.jsonwrite import escape_string, to_string


@pytest.mark.parametrize(
    "value",
    [
        {},
        [],
        {"SelectedConfigId": "Some Model", "ReadOnly": False, "PID": 1234},
        {"TargetFanSpeeds": [0.5, -1.0, 100.0]},
        {"Fans": [{"Name": 'quote " and \\ slash', "Critical": True}, {"n": None}]},
        [1, [2, [3, []]], "x"],
        "tab\there\nnewline",
        -17,
    ],
)
def test_round_trip(value):
    assert parse(to_string(value)) == value


def test_empty_object_layout():
    assert to_string({}) == "\n{\n}"


def test_escape_quote_and_backslash():
    assert escape_string('"\\') == "\\u0022\\u005C"


def test_double_uses_six_decimals():
    assert to_string(1.5) == "\n1.500000"


def test_escape_removes_control_characters():
    text = "".join(chr(c) for c in range(0x20)) + '"\\ok'
    escaped = escape_string(text)
    assert all(c >= " " for c in escaped)
    assert '"' not in escaped
    assert parse('"' + escaped + '"') == text


def test_non_ascii_left_untouched():
    assert escape_string("caf\u00e9") == "caf\u00e9"


def test_indent_shifts_every_line():
    value = {"a": {"b": [1, 2]}, "c": "d"}
    plain = to_string(value).split("\n")
    shifted = to_string(value, 4).split("\n")
    assert len(plain) == len(shifted)
    assert shifted[0] == plain[0] == ""
    for original, moved in zip(plain[1:], shifted[1:]):
        assert moved == " " * 4 + original


def test_nested_items_are_indented_deeper():
    lines = to_string({"a": {"b": 1}}).split("\n")[1:]
    depths = [len(line) - len(line.lstrip(" ")) for line in lines]
    assert depths[0] < depths[1] < depths[2]
    assert depths[-1] == depths[0]


def test_items_separated_by_commas():
    assert to_string([1, 2, 3]).count(",") == 2


def test_key_prefix():
    assert '"name": ' in to_string({"name": 1})


def test_bool_is_not_written_as_integer():
    assert parse(to_string(True)) is True
    assert parse(to_string([False])) == [False]


def test_unsupported_value_raises():
    with pytest.raises(TypeError):
        to_string({1, 2})


def test_non_string_key_raises():
    with pytest.raises(TypeError):
        to_string({1: 2})