from dataclasses import dataclass

import pytest

from tagflag.parser import FlagParser, flag
from tagflag.signals import HelpSignal


@dataclass
class Args:
    name: str = flag("mandatory,description='Full name'")
    verbose: bool = flag("description='Verbose output'", default=False)
    notify: list[str] | None = flag("short=N,description='Channels'")
    employee_id: str = flag("positional,mandatory,description='Unique employee ID'")
    department: str = flag("positional,default-value=Design,description='Department'")


def test_get_usage():
    parser = FlagParser(program="onboard")
    registry = parser.build_registry(Args)
    assert (
        parser.get_usage(registry)
        == "onboard [OPTIONS] --name <name> <employee_id> [department]"
    )


def test_get_usage_list_and_short_only():
    @dataclass
    class Tags:
        tag: list[str] | None = flag("mandatory,long=")
        paths: list[str] | None = flag("positional")

    parser = FlagParser(program="tagger")
    assert (
        parser.get_usage(parser.build_registry(Tags))
        == "tagger [OPTIONS] -t <tag> ... [paths] ..."
    )


def test_render_help(capsys):
    parser = FlagParser(program="onboard")
    parser.render_help(parser.build_registry(Args))

    out = capsys.readouterr().out
    assert out.splitlines() == [
        "Usage:",
        "  onboard [OPTIONS] --name <name> <employee_id> [department]",
        "",
        "Required options:",
        "  -n, --name <name>      Full name",
        "",
        "Options:",
        "  -v, --verbose          Verbose output",
        "  -N, --notify <notify>  Channels (can be specified multiple times)",
        "  -h, --help             Show this help message and exit",
        "",
        "Positional arguments:",
        "  employee_id            Unique employee ID (required)",
        "  department             Department",
        "",
    ]


def test_render_help_text_and_epilog(capsys):
    parser = FlagParser(program="onboard", help_text="Onboard a new employee.", help_epilog="See the wiki.")
    parser.render_help(parser.build_registry(Args))

    out = capsys.readouterr().out
    assert "Onboard a new employee." in out
    assert out.rstrip().endswith("See the wiki.")


@pytest.mark.parametrize("token", ["--help", "-h", "-vh"])
def test_help_skips_validation(capsys, token):
    with pytest.raises(HelpSignal):
        FlagParser(program="onboard").parse_args(Args(), [token])

    out = capsys.readouterr().out
    assert "Usage:" in out
    assert "Required options:" in out


def test_help_stops_scanning(capsys):
    dest = Args()
    with pytest.raises(HelpSignal):
        FlagParser().parse_args(dest, ["--help", "--name", "Alice", "extra", "more", "args"])
    assert dest.name is None
    assert dest.department is None


def test_help_as_flag_value_is_not_help():
    args = FlagParser().parse_args(Args(), ["--name", "--help", "E1"])
    assert args.name == "--help"


def test_long_positional_name_does_not_widen_options(capsys):
    @dataclass
    class Upload:
        quiet: bool = flag("description='Quiet'", default=False)
        destination_directory: str = flag("positional,description='Target'")

    parser = FlagParser(program="upload")
    parser.render_help(parser.build_registry(Upload))

    lines = capsys.readouterr().out.splitlines()
    assert "  -q, --quiet  Quiet" in lines
    assert "  -h, --help   Show this help message and exit" in lines
    assert "  destination_directory  Target" in lines
