from dataclasses import dataclass, field
from datetime import timedelta
from typing import List, Optional

import pytest

from tagflag.exceptions import FlagConfigError
from tagflag.parser import FlagKind, build_flags, flag


def test_naming_defaults():
    @dataclass
    class Args:
        full_time: bool = False
        Email: str = ""

    full_time, email = build_flags(Args)
    assert full_time.long == "full-time"
    assert full_time.short == "f"
    assert email.long == "email"
    assert email.short == "e"
    assert not full_time.mandatory and not full_time.positional


def test_directives_applied_in_order():
    @dataclass
    class Args:
        position: str = flag(
            "long=title,short=t,description='Job title (e.g., Backend Engineer)'"
        )
        salary: int = flag("default-value=9999,description=Starting salary")

    position, salary = build_flags(Args)
    assert position.long == "title"
    assert position.short == "t"
    assert position.description == "Job title (e.g., Backend Engineer)"
    assert salary.default_value == "9999"
    assert salary.kind is FlagKind.INTEGER


def test_later_directive_wins():
    @dataclass
    class Args:
        name: str = flag("short=a,short=b")

    (name,) = build_flags(Args)
    assert name.short == "b"


@pytest.mark.parametrize(
    "annotation, kind",
    [
        (bool, FlagKind.BOOL),
        (str, FlagKind.STRING),
        (int, FlagKind.INTEGER),
        (float, FlagKind.FLOAT),
        (timedelta, FlagKind.DURATION),
        (list[str], FlagKind.STRING_LIST),
        (List[int], FlagKind.INTEGER_LIST),
        (list[float] | None, FlagKind.FLOAT_LIST),
        (Optional[str], FlagKind.STRING),
    ],
)
def test_kind_from_annotation(annotation, kind):
    assert FlagKind.from_annotation(annotation) is kind


def test_unsupported_annotation():
    @dataclass
    class Args:
        ratio: complex = 0j

    with pytest.raises(FlagConfigError):
        build_flags(Args)


def test_unknown_directive():
    @dataclass
    class Args:
        name: str = flag("mandatory,required")

    with pytest.raises(FlagConfigError) as excinfo:
        build_flags(Args)
    assert "unknown tag value: required" in str(excinfo.value)


def test_keywords_tolerate_surrounding_spaces():
    @dataclass
    class Args:
        name: str = flag("mandatory, short=x")

    (name,) = build_flags(Args)
    assert name.mandatory
    assert name.short == "x"


def test_empty_names_suppressed():
    @dataclass
    class Args:
        name: str = flag("short=")

    (name,) = build_flags(Args)
    assert name.short == ""
    assert name.long == "name"


def test_mandatory_without_any_name():
    @dataclass
    class Args:
        name: str = flag("mandatory,short=,long=")

    with pytest.raises(FlagConfigError):
        build_flags(Args)


def test_short_name_too_long():
    @dataclass
    class Args:
        name: str = flag("short=nm")

    with pytest.raises(FlagConfigError):
        build_flags(Args)


def test_positional_has_no_names():
    @dataclass
    class Args:
        employee_id: str = flag("positional,mandatory")

    (employee_id,) = build_flags(Args)
    assert employee_id.positional
    assert employee_id.short == "" and employee_id.long == ""


def test_positional_bool_rejected():
    @dataclass
    class Args:
        force: bool = flag("positional", default=False)

    with pytest.raises(FlagConfigError):
        build_flags(Args)


def test_command_directive():
    @dataclass
    class Args:
        command: str = flag("command")

    (command,) = build_flags(Args)
    assert command.positional and command.mandatory and command.command


def test_conflicts_with_extends():
    @dataclass
    class Args:
        full_time: bool = flag(
            "conflicts-with='part_time,contractor',conflicts-with=intern", default=False
        )
        part_time: bool = False
        contractor: bool = False
        intern: bool = False

    full_time = build_flags(Args)[0]
    assert full_time.conflicts_with == {"part_time", "contractor", "intern"}


def test_default_value_keeps_equals_sign():
    @dataclass
    class Args:
        query: str = flag("default-value=a=b")

    (query,) = build_flags(Args)
    assert query.default_value == "a=b"


def test_invalid_default_value():
    @dataclass
    class Args:
        salary: int = flag("default-value=lots")

    with pytest.raises(FlagConfigError):
        build_flags(Args)


def test_out_of_range_duration_default():
    @dataclass
    class Args:
        timeout: timedelta = flag("default-value=99999999999h")

    with pytest.raises(FlagConfigError):
        build_flags(Args)


def test_flag_helper_metadata_and_default():
    @dataclass
    class Args:
        notify: list[str] = flag("short=N", default_factory=list)
        name: str = flag("mandatory", metadata={"other": 1})

    args = Args()
    assert args.notify == []
    assert args.name is None
    name_field = [f for f in Args.__dataclass_fields__.values() if f.name == "name"][0]
    assert name_field.metadata == {"other": 1, "flag": "mandatory"}


def test_build_flags_requires_dataclass_type():
    class Args:
        name: str = ""

    with pytest.raises(FlagConfigError):
        build_flags(Args)


def test_plain_field_metadata_is_read():
    @dataclass
    class Args:
        name: str = field(default="", metadata={"flag": "short=x"})

    (name,) = build_flags(Args)
    assert name.short == "x"
