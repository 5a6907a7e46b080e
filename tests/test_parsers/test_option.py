import pytest

from sealeye import Command, Option, OptionGroup
from sealeye.exceptions import SchemaError
from sealeye.parser import OptionDescriptor, OptionKind, Requirement
from sealeye.parser.defaults import EnvDefault, LiteralDefault, TerminalDefault


class Sample(OptionGroup):
    verbose = Option("v,verbose", bool, help="Verbose output.")
    count = Option("c,count", int, help="How many.", default="env:COUNT,3")
    name = Option("name", str, help="A name.")


def test_option_reads_zero_value_until_set():
    sample = Sample()
    assert sample.verbose is False
    assert sample.count == 0
    assert sample.name == ""
    sample.count = 7
    assert sample.count == 7
    assert Sample().count == 0


def test_option_class_access_returns_declaration():
    assert isinstance(Sample.count, Option)
    assert Sample.count.dest == "count"
    assert Sample.count.kind is OptionKind.INT
    assert Sample.count.flags == ("c", "count")


def test_option_flags_accept_sequences_and_dashes():
    option = Option(["-x", "--extra"], bool)
    assert option.flags == ("x", "extra")


def test_option_requires_a_flag():
    with pytest.raises(SchemaError):
        Option(",", bool)


def test_option_rejects_unsupported_kind():
    with pytest.raises(SchemaError, match="cannot handle"):
        Option("ratio", float)


def test_option_parses_default_chain():
    option = Option("c,count", int, default="env:COUNT,1")
    assert option.defaults == (EnvDefault("COUNT"), LiteralDefault("1", 1))


def test_option_terminal_default_only_for_bool():
    assert Option("color", bool, default="terminal").defaults == (TerminalDefault(),)
    with pytest.raises(SchemaError):
        Option("color", str, default="terminal")


def test_option_bad_literal_default():
    with pytest.raises(SchemaError, match="cannot handle default specification"):
        Option("count", int, default="many")
    with pytest.raises(SchemaError):
        Option("debug", bool, default="sometimes")


def test_option_requirement_only_for_strings():
    assert Option("input", str, required="file").requirements == (Requirement.FILE,)
    with pytest.raises(SchemaError):
        Option("count", int, required="file")
    with pytest.raises(SchemaError):
        Option("input", str, required="pipe")


def test_descriptor_binding():
    sample = Sample()
    descriptor = OptionDescriptor(Sample.count, sample)
    assert descriptor.dest == "count"
    assert descriptor.flags == ("-c", "--count")
    assert descriptor.long_flags == ("--count",)
    assert descriptor.name == "--count"
    assert descriptor.help_names == ("-c n", "--count n")
    descriptor.set(12)
    assert sample.count == 12
    assert descriptor.get() == 12


def test_descriptor_name_falls_back_to_short_flag():
    class Short(Command):
        quiet = Option("q", bool)

    descriptor = OptionDescriptor(Short.quiet, Short())
    assert descriptor.name == "-q"
    assert descriptor.help_names == ("-q",)


def test_descriptor_help_text_lists_requirements_and_defaults():
    option = Option(
        "config", str, help="Config file.", default="env:CONFIG,app.toml", required="file"
    )

    class Holder(OptionGroup):
        config = option

    descriptor = OptionDescriptor(option, Holder())
    assert descriptor.get_help_text() == (
        "Config file. Requirements: must be a file Default: $CONFIG, app.toml"
    )


def test_descriptor_help_text_terminal_default():
    class Holder(OptionGroup):
        color = Option("color", bool, help="Color output.", default="terminal")

    descriptor = OptionDescriptor(Holder.color, Holder())
    assert descriptor.get_help_text() == "Color output. Default: if terminal"
