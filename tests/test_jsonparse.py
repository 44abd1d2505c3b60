import pytest

from nbfc.jsonparse import JsonError, JsonErrorKind, parse


def test_object_with_all_value_types():
    text = (
        '{"s": "x", "i": -7, "d": 2.5, "t": true, "f": false, '
        '"n": null, "a": [1, [2]], "o": {}}'
    )
    assert parse(text) == {
        "s": "x",
        "i": -7,
        "d": 2.5,
        "t": True,
        "f": False,
        "n": None,
        "a": [1, [2]],
        "o": {},
    }


def test_integer_and_double_types():
    assert type(parse("42")) is int
    assert type(parse("4.0")) is float
    assert parse("1e3") == 1e3
    assert parse("-2.25") == -2.25


def test_integer_prefixes_follow_c_literals():
    assert parse("0x1F") == 0x1F
    assert parse("017") == 0o17
    assert parse("-0x10") == -0x10


def test_leading_zero_stops_octal_number():
    assert parse("[08]") == [0, 8]


def test_hex_float():
    assert parse("0x1.8p1") == float.fromhex("0x1.8p1")


def test_commas_are_optional_and_repeatable():
    assert parse("[1 2,,3]") == [1, 2, 3]
    assert parse('{"a": 1 "b": 2,}') == {"a": 1, "b": 2}


def test_comments_are_skipped():
    text = '// leading\n{/* block */ "a": /* inner */ 1, // tail\n "b": [2 /**/]}'
    assert parse(text) == {"a": 1, "b": [2]}


def test_duplicate_keys_keep_first_value():
    assert parse('{"a": 1, "a": 2}') == {"a": 1}


def test_trailing_text_is_ignored():
    assert parse("1 garbage") == 1


def test_bytes_input():
    assert parse(b'{"k": [true]}') == {"k": [True]}


def test_standard_escapes():
    assert parse(r'"a\"b\\c\/d\b\f\n\r\t"') == 'a"b\\c/d\b\f\n\r\t'


def test_unicode_escape():
    assert parse(r'"\u00e9"') == "\u00e9"


def test_surrogate_pair():
    assert parse(r'"\ud83d\ude00"') == "\N{GRINNING FACE}"


def test_unknown_escape_keeps_backslash():
    assert parse(r'"\q"') == "\\q"


def test_nul_ends_the_text():
    with pytest.raises(JsonError) as excinfo:
        parse('"ab\0c"')
    assert excinfo.value.kind is JsonErrorKind.MISSING_DOUBLE_QUOTE


@pytest.mark.parametrize(
    "text, kind",
    [
        ("", JsonErrorKind.UNEXPECTED_EOT),
        ("   ", JsonErrorKind.UNEXPECTED_EOT),
        ("[1, 2", JsonErrorKind.UNEXPECTED_EOT),
        ('"abc', JsonErrorKind.MISSING_DOUBLE_QUOTE),
        (r'"\u12G4"', JsonErrorKind.INVALID_UNICODE_ESCAPE),
        (r'"\ud800x"', JsonErrorKind.INVALID_UNICODE_SURROGATE),
        (r'"\ud800\u0041"', JsonErrorKind.INVALID_UNICODE_SURROGATE),
        (r'"\udc00"', JsonErrorKind.INVALID_CODEPOINT),
        ("/* open", JsonErrorKind.ENDLESS_COMMENT),
        ("// open", JsonErrorKind.ENDLESS_COMMENT),
        ('{"a": 1 /*', JsonErrorKind.ENDLESS_COMMENT),
        ("tru", JsonErrorKind.UNEXPECTED_CHARS),
        ("{1: 2}", JsonErrorKind.UNEXPECTED_CHARS),
        ('{"a" 1}', JsonErrorKind.UNEXPECTED_CHARS),
        ('{"a": ]}', JsonErrorKind.UNEXPECTED_CHARS),
        ('{"a": 1', JsonErrorKind.UNEXPECTED_CHARS),
        ("[1}", JsonErrorKind.UNEXPECTED_CHARS),
        ("]", JsonErrorKind.UNEXPECTED_CHARS),
        ("-", JsonErrorKind.INVALID_NUMBER),
        ("99999999999999999999", JsonErrorKind.INVALID_NUMBER),
        ("1e999", JsonErrorKind.INVALID_NUMBER),
    ],
)
def test_errors(text, kind):
    with pytest.raises(JsonError) as excinfo:
        parse(text)
    assert excinfo.value.kind is kind


def test_error_position_points_at_offending_char():
    text = "[1, x]"
    with pytest.raises(JsonError) as excinfo:
        parse(text)
    assert excinfo.value.position == text.index("x")


def test_error_message():
    assert JsonErrorKind.UNEXPECTED_EOT.message == "Unexpected end of text"
    with pytest.raises(JsonError, match="Unexpected end of text"):
        parse("")


def test_error_is_value_error():
    with pytest.raises(ValueError):
        parse("{")