from dataclasses import dataclass

import pytest

from tagflag.exceptions import FlagConfigError
from tagflag.parser import FlagRegistry, build_flags, flag


def make_registry(dest_type) -> FlagRegistry:
    return FlagRegistry(build_flags(dest_type))


def test_implicit_help_flag():
    @dataclass
    class Args:
        name: str = ""

    registry = make_registry(Args)
    assert registry.flags[-1] is registry.help_flag
    assert registry.get_by_long("help") is registry.help_flag
    assert registry.get_by_short("h") is registry.help_flag
    assert str(registry) == "FlagRegistry(flags=2, long=2, short=2, positional=0)"


def test_short_name_collision():
    @dataclass
    class Args:
        name: str = ""
        number: int = 0

    with pytest.raises(FlagConfigError) as excinfo:
        make_registry(Args)
    assert "flag name collision" in str(excinfo.value)


def test_collision_with_implicit_help():
    @dataclass
    class Args:
        host: str = ""

    with pytest.raises(FlagConfigError):
        make_registry(Args)


def test_collision_resolved_by_override():
    @dataclass
    class Args:
        host: str = flag("short=H")
        name: str = ""
        number: int = flag("short=", default=0)

    registry = make_registry(Args)
    assert registry.get_by_short("H").name == "host"
    assert registry.get_by_long("number").name == "number"


def test_long_name_collision():
    @dataclass
    class Args:
        alpha: str = flag("long=same")
        beta: str = flag("long=same")

    with pytest.raises(FlagConfigError):
        make_registry(Args)


def test_positional_fields_exempt_from_collisions():
    @dataclass
    class Args:
        employee_id: str = flag("positional")
        email: str = flag("positional")

    registry = make_registry(Args)
    assert [f.name for f in registry.positional] == ["employee_id", "email"]


def test_conflict_with_unknown_field():
    @dataclass
    class Args:
        full_time: bool = flag("conflicts-with=PartTime", default=False)

    with pytest.raises(FlagConfigError):
        make_registry(Args)


def test_positional_list_must_be_last():
    @dataclass
    class Args:
        departments: list[str] = flag("positional")
        employee_id: str = flag("positional")

    with pytest.raises(FlagConfigError):
        make_registry(Args)


def test_option_groups():
    @dataclass
    class Args:
        name: str = flag("mandatory")
        email: str = ""
        employee_id: str = flag("positional,mandatory")

    registry = make_registry(Args)
    assert [f.name for f in registry.required_options] == ["name"]
    assert [f.name for f in registry.optional_options] == ["email", "help"]
    assert len(registry) == 4
