"""
Example program showing the Sealeye feature set.

    python examples/sealeye_example.py --help
    python examples/sealeye_example.py --all-help
    python examples/sealeye_example.py cat -f README.md
    COUNT=2 python examples/sealeye_example.py cat README.md
    python examples/sealeye_example.py version only
    python examples/sealeye_example.py version hidden
"""
import sys

from sealeye import Command, Embed, Option, OptionGroup, logger, run, setup_logging

VERSION = "1.2.3"


class CommonOptions(OptionGroup):
    common_one = Option("one", str, help="First common option.")
    common_two = Option("two", bool, help="Second common option.")


class SprinkleOptions(OptionGroup):
    sprinkle_type = Option("sprinkle-type", int, help="The type of sprinkles to output.")
    sprinkle_count = Option(
        "sprinkle-count", int, help="The number of sprinkles to output.", default="10"
    )

    def sprinkle(self) -> None:
        if self.sprinkle_type == 1:
            print("* + x " * self.sprinkle_count + "*")


class RootCommand(Command):
    help = """
Usage: {{Command}} [options] subcommand [subcommand] ...

This example program offers two simple subcommands, "cat" and "version". It
shows the feature set of Sealeye.

The help text is rendered as *Markdown*, so it is rewrapped to fit the
terminal, colorized when appropriate, and can even hold simple tables:

| Heading One | Heading Two |
| ---: | --- |
| Blah | Yadda yadda |
| Test Link | https://example.com/ |
"""
    help_option = Option("?,h,help", bool, help="Outputs this help text.")
    all_help_option = Option(
        "all-help",
        bool,
        help="Outputs this help text and the help text for all subcommands.",
    )
    color = Option(
        "color",
        bool,
        help="Controls color output; use --no-color to disable.",
        default="terminal",
    )
    version = Option("V,version", bool, help="Output version information.")
    debug = Option("v,debug", bool, help="Output debug information.", default="env:DEBUG")

    def run(self) -> int:
        if self.version:
            print(f"Version {VERSION}")
            return 0
        if self.debug:
            print("No subcommands were given; outputting help text.")
        return 1


class CatCommand(Command):
    help = """
Usage: {{Command}} [options] filename [filename] ...

Outputs the content of the filename or filenames.
"""
    quick_help = "Output the content of a file or files."

    common = Embed(CommonOptions)
    sprinkles = Embed(SprinkleOptions)

    help_option = Option("?,h,help", bool, help="Outputs this help text.")
    filenames = Option("f,filenames", bool, help="Outputs filenames before each file.")
    prefix = Option(
        "p,prefix", str, help="Prefix to output before each filename, if any.", default="## "
    )
    count = Option(
        "c,count", int, help="The number of times to output each file.", default="env:COUNT,1"
    )
    sprinkle_type = Option(
        "sprinkle-type",
        int,
        help="The type of sprinkles to output (overridden).",
        default="1",
    )

    def run(self) -> int:
        self.sprinkles.sprinkle_type = self.sprinkle_type
        if not self.args:
            return 1
        self.sprinkles.sprinkle()
        if self.parent is not None and self.parent.debug:
            print(f"We have {len(self.args)} files to output")
        for filename in self.args:
            if self.filenames:
                print(f"{self.prefix}{filename}")
            for _ in range(self.count):
                try:
                    with open(filename, encoding="UTF-8") as file:
                        sys.stdout.write(file.read())
                except OSError as error:
                    logger.debug("Could not read %s: %s", filename, error)
                    print(error, file=sys.stderr)
                    return 2
        self.sprinkles.sprinkle()
        return 0


class VersionCommand(Command):
    help = """
Usage: {{Command}}

Outputs the program's version.
"""
    quick_help = "Output the version of the program."

    common = Embed(CommonOptions)
    sprinkles = Embed(SprinkleOptions)
    help_option = Option("?,h,help", bool, help="Outputs this help text.")
    all_help_option = Option(
        "all-help",
        bool,
        help="Outputs this help text and the help text for all subcommands.",
    )

    def run(self) -> int:
        if self.args:
            return 1
        print(f"Version {VERSION}")
        return 0


class VersionNumberCommand(Command):
    common = Embed(CommonOptions)
    help_option = Option("?,h,help", bool, help="Outputs this help text.")

    def run(self) -> int:
        if self.args:
            return 1
        print(VERSION)
        return 0


version_only = VersionNumberCommand(
    help="""
Usage: {{Command}}

Outputs the program's version number, and only the version number.
""",
    quick_help="Output the version number of the program, and only the version number.",
)

version_hidden = VersionNumberCommand(
    help="""
Usage: {{Command}}

Mostly just an example of a hidden subcommand.
""",
    quick_help="Mostly just an example of a hidden subcommand.",
)

version = VersionCommand(
    subcommands={"only": version_only},
    hidden_subcommands={"hidden": version_hidden},
)

root = RootCommand(subcommands={"cat": CatCommand(), "version": version})


if __name__ == "__main__":
    setup_logging()
    run(root)
