import pytest

from sealeye.parser.utils import INT_MAX, INT_MIN, parse_bool, parse_int


@pytest.mark.parametrize("value", ["1", "t", "T", "true", "TRUE", "True"])
def test_parse_bool_true(value):
    assert parse_bool(value) is True


@pytest.mark.parametrize("value", ["0", "f", "F", "false", "FALSE", "False"])
def test_parse_bool_false(value):
    assert parse_bool(value) is False


@pytest.mark.parametrize(
    "value",
    ["", "maybe", "2", "truthy", "yes", "no", "on", "off", "y", "n", "tRUE", " TRUE ", "true\n"],
)
def test_parse_bool_invalid(value):
    with pytest.raises(ValueError):
        parse_bool(value)


@pytest.mark.parametrize(
    "value, expected",
    [
        ("0", 0),
        ("42", 42),
        ("-7", -7),
        ("+3", 3),
        ("007", 7),
        ("9223372036854775807", INT_MAX),
        ("-9223372036854775808", INT_MIN),
    ],
)
def test_parse_int(value, expected):
    assert parse_int(value) == expected


@pytest.mark.parametrize(
    "value",
    [
        "",
        "1.5",
        "0x10",
        "1_000",
        " 4",
        "four",
        "-",
        "9223372036854775808",
        "-9223372036854775809",
    ],
)
def test_parse_int_invalid(value):
    with pytest.raises(ValueError):
        parse_int(value)
