# Tagflag CLI Framework — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Builds `Flag` descriptors from the fields of a destination dataclass.

Each field becomes one descriptor. Names default to the field name: the long name
is the lowercased field name with underscores turned into dashes, the short name
is its first character. The field's tag (stored in the field metadata under
`TAG_KEY`, usually through the `flag()` helper) then applies directives in order:

- `short=X` / `long=X`: Override a name; an empty value suppresses it.
- `mandatory`: Must be supplied or defaulted.
- `positional`: Matched by position in declaration order.
- `command`: Positional and mandatory; the value is a dispatch key.
- `conflicts-with=A` or `conflicts-with='A,B'`: Fields that cannot be supplied
  together with this one. Repeating the directive extends the set.
- `default-value=X`: Raw default, coerced like a supplied value.
- `description=X`: Help text.

Example:
    @dataclass
    class Args:
        name: str = flag("mandatory,description='Full name of the new employee'")
        full_time: bool = flag("short=F,conflicts-with=part_time", default=False)
        notify: list[str] | None = flag("short=N,long=notify")
        employee_id: str = flag("positional,mandatory", default="")

Any malformed declaration raises `FlagConfigError`.
"""
from __future__ import annotations

import dataclasses
import typing
from typing import Any

from tagflag.exceptions import FlagConfigError
from tagflag.parser.descriptor import Flag
from tagflag.parser.flag_kind import FlagKind
from tagflag.parser.tag import tokenize_tag
from tagflag.parser.utils import coerce_value

TAG_KEY = "flag"


def flag(
    tag: str = "",
    *,
    default: Any = dataclasses.MISSING,
    default_factory: Any = dataclasses.MISSING,
    **kwargs: Any,
) -> Any:
    """
    Declare a dataclass field carrying a tagflag tag.

    Wraps `dataclasses.field()`. When neither `default` nor `default_factory` is
    given the field defaults to `None`, so the dataclass can be instantiated
    without arguments before parsing.

    Args:
        tag (str): Comma-separated directives, e.g. `"short=F,long=full-time"`.
        default (Any): Field default.
        default_factory (Any): Field default factory.
        **kwargs: Passed through to `dataclasses.field()`.
    """
    if default is dataclasses.MISSING and default_factory is dataclasses.MISSING:
        default = None
    metadata = dict(kwargs.pop("metadata", None) or {})
    metadata[TAG_KEY] = tag
    return dataclasses.field(
        default=default,
        default_factory=default_factory,
        metadata=metadata,
        **kwargs,
    )


def _resolve_kind(field_name: str, annotation: Any) -> FlagKind:
    try:
        return FlagKind.from_annotation(annotation)
    except ValueError as error:
        raise FlagConfigError(f"Field '{field_name}': {error}") from error


def _split_names(value: str) -> list[str]:
    return [name.strip() for name in value.split(",") if name.strip()]


def build_flag(field: dataclasses.Field, annotation: Any) -> Flag:
    """
    Build the descriptor for one dataclass field.

    Args:
        field (dataclasses.Field): The destination field.
        annotation (Any): The field's resolved type annotation.

    Returns:
        Flag: The immutable descriptor.

    Raises:
        FlagConfigError: On unknown directives or inconsistent declarations.
    """
    name = field.name
    kind = _resolve_kind(name, annotation)
    long = name.lower().replace("_", "-")
    short = name[0].lower()
    mandatory = False
    positional = False
    command = False
    conflicts_with: list[str] = []
    default_value = ""
    description = ""

    for directive in tokenize_tag(field.metadata.get(TAG_KEY, "")):
        keyword, has_value, value = directive.partition("=")
        keyword = keyword.strip()
        if has_value:
            if keyword == "short":
                short = value
            elif keyword == "long":
                long = value
            elif keyword == "conflicts-with":
                conflicts_with.extend(_split_names(value))
            elif keyword == "default-value":
                default_value = value
            elif keyword == "description":
                description = value
            else:
                raise FlagConfigError(
                    f"Field '{name}': unknown tag value: {directive}"
                )
        elif keyword == "mandatory":
            mandatory = True
        elif keyword == "positional":
            positional = True
        elif keyword == "command":
            positional = True
            mandatory = True
            command = True
        else:
            raise FlagConfigError(f"Field '{name}': unknown tag value: {directive}")

    if positional:
        short = ""
        long = ""
        if kind is FlagKind.BOOL:
            raise FlagConfigError(f"Field '{name}': positional fields cannot be bool")
    else:
        if len(short) > 1:
            raise FlagConfigError(
                f"Field '{name}': short name '{short}' must be a single character"
            )
        if long.startswith("-") or short == "-":
            raise FlagConfigError(
                f"Field '{name}': names are declared without leading dashes"
            )
        if mandatory and not short and not long:
            raise FlagConfigError(
                f"Field '{name}': mandatory flag needs a short or long name"
            )
    if command and kind is not FlagKind.STRING:
        raise FlagConfigError(f"Field '{name}': command fields must be str")

    if default_value:
        try:
            coerce_value(default_value, kind)
        except ValueError as error:
            raise FlagConfigError(
                f"Field '{name}': default value {default_value!r} is invalid: {error}"
            ) from error

    return Flag(
        name=name,
        kind=kind,
        short=short,
        long=long,
        mandatory=mandatory,
        positional=positional,
        command=command,
        conflicts_with=frozenset(conflicts_with),
        default_value=default_value,
        description=description,
    )


def build_flags(dest_type: type) -> list[Flag]:
    """
    Build descriptors for every field of a dataclass type, in declaration order.

    Raises:
        FlagConfigError: If `dest_type` is not a dataclass or a field is invalid.
    """
    if not (isinstance(dest_type, type) and dataclasses.is_dataclass(dest_type)):
        raise FlagConfigError(f"Expected a dataclass type, got {dest_type!r}")
    try:
        hints = typing.get_type_hints(dest_type)
    except NameError as error:
        raise FlagConfigError(
            f"Cannot resolve annotations of {dest_type.__name__}: {error}"
        ) from error
    return [build_flag(field, hints[field.name]) for field in dataclasses.fields(dest_type)]
