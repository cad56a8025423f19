# Tagflag CLI Framework — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines `FlagKind`, the closed set of semantic types a destination field may have.

Every descriptor carries exactly one `FlagKind`. The kind decides how many tokens a
flag consumes (booleans consume none), how raw strings are coerced, and whether a
flag may be supplied more than once (list kinds only).

Example:
    FlagKind.from_annotation(int)                → FlagKind.INTEGER
    FlagKind.from_annotation(list[float] | None) → FlagKind.FLOAT_LIST
"""
from __future__ import annotations

import types
from datetime import timedelta
from enum import Enum
from typing import Any, Union, get_args, get_origin


class FlagKind(Enum):
    """
    Semantic type of a destination field.

    Members:
        BOOL: Set to True by presence alone.
        STRING: Raw token passthrough.
        INTEGER: Base-10 integer.
        FLOAT: Decimal or exponent float.
        DURATION: Unit-suffixed duration such as `01h12m02s`.
        STRING_LIST / INTEGER_LIST / FLOAT_LIST: One item appended per occurrence.
    """

    BOOL = "bool"
    STRING = "string"
    INTEGER = "integer"
    FLOAT = "float"
    DURATION = "duration"
    STRING_LIST = "list[string]"
    INTEGER_LIST = "list[integer]"
    FLOAT_LIST = "list[float]"

    @classmethod
    def from_annotation(cls, annotation: Any) -> FlagKind:
        """
        Map a resolved field annotation to its `FlagKind`.

        `X | None` and `Optional[X]` unwrap to `X`.

        Raises:
            ValueError: If the annotation is not one of the supported types.
        """
        origin = get_origin(annotation)
        if isinstance(annotation, types.UnionType) or origin is Union:
            members = [arg for arg in get_args(annotation) if arg is not type(None)]
            if len(members) != 1:
                raise ValueError(f"Unsupported union annotation: {annotation}")
            return cls.from_annotation(members[0])

        if origin is list:
            item_args = get_args(annotation)
            if len(item_args) != 1:
                raise ValueError(f"List annotation needs an item type: {annotation}")
            item_kind = cls.from_annotation(item_args[0])
            for kind in (cls.STRING_LIST, cls.INTEGER_LIST, cls.FLOAT_LIST):
                if kind.item_kind is item_kind:
                    return kind
            raise ValueError(f"Unsupported list item type: {item_args[0]}")

        scalar_types = {
            bool: cls.BOOL,
            str: cls.STRING,
            int: cls.INTEGER,
            float: cls.FLOAT,
            timedelta: cls.DURATION,
        }
        if annotation in scalar_types:
            return scalar_types[annotation]
        raise ValueError(f"Unsupported field type: {annotation}")

    @property
    def is_list(self) -> bool:
        return self in (FlagKind.STRING_LIST, FlagKind.INTEGER_LIST, FlagKind.FLOAT_LIST)

    @property
    def item_kind(self) -> FlagKind:
        """Kind of a single value: the element kind for lists, itself otherwise."""
        return {
            FlagKind.STRING_LIST: FlagKind.STRING,
            FlagKind.INTEGER_LIST: FlagKind.INTEGER,
            FlagKind.FLOAT_LIST: FlagKind.FLOAT,
        }.get(self, self)

    @property
    def python_type(self) -> type:
        """Python type of one coerced value of this kind."""
        return {
            FlagKind.BOOL: bool,
            FlagKind.STRING: str,
            FlagKind.INTEGER: int,
            FlagKind.FLOAT: float,
            FlagKind.DURATION: timedelta,
        }[self.item_kind]

    def __str__(self) -> str:
        """Return the string representation of the flag kind."""
        return self.value
