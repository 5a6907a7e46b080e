import io

import pytest

from sealeye import Command, Option
from sealeye.context import RenderContext
from sealeye.exceptions import DefaultValueError, RequirementError, SchemaError
from sealeye.parser import OptionKind, extract_options
from sealeye.parser.defaults import (
    EnvDefault,
    LiteralDefault,
    TerminalDefault,
    parse_default_spec,
    resolve_default,
)


class Defaults(Command):
    count = Option("c,count", int, help="Count.", default="env:COUNT,1")
    debug = Option("debug", bool, help="Debug.", default="env:DEBUG")
    color = Option("color", bool, help="Color.", default="terminal")
    prefix = Option("prefix", str, help="Prefix.", default="## ")
    plain = Option("plain", int, help="No default.")


def make_context(terminal=False):
    return RenderContext(stdout=io.StringIO(), stderr=io.StringIO(), terminal=terminal)


def resolve_all(command, context=None):
    context = context or make_context()
    for descriptor in extract_options(command):
        resolve_default(descriptor, context)
    return command


def test_parse_default_spec():
    assert parse_default_spec(None, OptionKind.INT) == ()
    assert parse_default_spec("", OptionKind.INT) == ()
    assert parse_default_spec("env:A,,env:B,5", OptionKind.INT) == (
        EnvDefault("A"),
        EnvDefault("B"),
        LiteralDefault("5", 5),
    )
    assert parse_default_spec("terminal,false", OptionKind.BOOL) == (
        TerminalDefault(),
        LiteralDefault("false", False),
    )


def test_parse_default_spec_errors():
    with pytest.raises(SchemaError):
        parse_default_spec("env:", OptionKind.STRING)
    with pytest.raises(SchemaError):
        parse_default_spec("terminal", OptionKind.INT)
    with pytest.raises(SchemaError):
        parse_default_spec("1.5", OptionKind.INT)


def test_literal_default_applies_when_env_unset(monkeypatch):
    monkeypatch.delenv("COUNT", raising=False)
    command = resolve_all(Defaults())
    assert command.count == 1
    assert command.prefix == "## "


def test_env_default_wins_over_literal(monkeypatch):
    monkeypatch.setenv("COUNT", "5")
    assert resolve_all(Defaults()).count == 5


def test_env_bool_default(monkeypatch):
    monkeypatch.setenv("DEBUG", "true")
    assert resolve_all(Defaults()).debug is True
    monkeypatch.setenv("DEBUG", "0")
    assert resolve_all(Defaults()).debug is False


def test_missing_sources_leave_value_untouched(monkeypatch):
    monkeypatch.delenv("DEBUG", raising=False)
    command = Defaults()
    command.debug = True
    command.plain = 9
    resolve_all(command)
    assert command.debug is True
    assert command.plain == 9


def test_invalid_env_integer(monkeypatch):
    monkeypatch.setenv("COUNT", "five")
    with pytest.raises(DefaultValueError) as excinfo:
        resolve_all(Defaults())
    message = str(excinfo.value)
    assert "invalid integer" in message
    assert "--count" in message
    assert "$COUNT" in message


def test_invalid_env_boolean(monkeypatch):
    monkeypatch.setenv("DEBUG", "maybe")
    with pytest.raises(DefaultValueError, match="invalid boolean"):
        resolve_all(Defaults())


def test_terminal_default_uses_context():
    assert resolve_all(Defaults(), make_context(terminal=True)).color is True
    assert resolve_all(Defaults(), make_context(terminal=False)).color is False


def test_terminal_detection_is_memoized():
    class TwoColors(Command):
        color = Option("color", bool, default="terminal")
        colour = Option("colour", bool, default="terminal")

    context = RenderContext(stdout=io.StringIO(), stderr=io.StringIO())
    assert context.terminal is None
    command = resolve_all(TwoColors(), context)
    assert context.terminal is False
    assert command.color is False
    assert command.colour is False


def test_string_env_default_is_validated(monkeypatch, tmp_path):
    class Input(Command):
        input = Option("input", str, default="env:INPUT_FILE", required="file")

    monkeypatch.setenv("INPUT_FILE", str(tmp_path / "missing.txt"))
    with pytest.raises(RequirementError, match="is not a file"):
        resolve_all(Input())

    existing = tmp_path / "present.txt"
    existing.write_text("present")
    monkeypatch.setenv("INPUT_FILE", str(existing))
    assert resolve_all(Input()).input == str(existing)


def test_string_literal_default_is_validated(tmp_path):
    class Output(Command):
        output = Option("output", str, default=str(tmp_path / "nope"), required="dir")

    with pytest.raises(RequirementError, match="is not a directory"):
        resolve_all(Output())
