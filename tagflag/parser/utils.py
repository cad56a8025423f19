# Tagflag CLI Framework — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Contains value coercion utilities for tagflag argument parsing.

This module converts raw string tokens into the Python value of a `FlagKind`.
All failures raise `ValueError`; the parser turns them into user-facing
`FlagInputError`s naming the offending flag.

Functions:
- coerce_bool: Convert a string to a boolean.
- coerce_int: Strict base-10 integer parsing.
- coerce_float: Decimal/exponent float parsing.
- parse_duration: Parse unit-suffixed durations such as `01h12m02s`.
- format_duration: Render a `timedelta` canonically, e.g. `1h12m2s`.
- coerce_value: Convert one token to the item type of a `FlagKind`.
"""
import math
import re
from datetime import timedelta
from decimal import Decimal, InvalidOperation
from typing import Any

from tagflag.parser.flag_kind import FlagKind

_INTEGER_PATTERN = re.compile(r"[+-]?[0-9]+")
_INFINITY_WORDS = {"inf", "infinity"}
_DURATION_PART = re.compile(r"([0-9]*(?:\.[0-9]*)?)(ns|us|µs|μs|ms|h|m|s)")
_DURATION_UNITS = {
    "ns": Decimal("0.001"),
    "us": Decimal(1),
    "µs": Decimal(1),
    "μs": Decimal(1),
    "ms": Decimal(1_000),
    "s": Decimal(1_000_000),
    "m": Decimal(60_000_000),
    "h": Decimal(3_600_000_000),
}


def coerce_bool(value: str) -> bool:
    """
    Convert a string to a boolean.

    Accepts various truthy and falsy representations such as 'true', 'yes', '0', 'off', etc.

    Args:
        value (str): The input string or boolean.

    Returns:
        bool: Parsed boolean result.

    Raises:
        ValueError: If the value is not a recognized boolean word.
    """
    if isinstance(value, bool):
        return value
    normalized = value.strip().lower()
    if normalized in {"true", "t", "1", "yes", "on"}:
        return True
    elif normalized in {"false", "f", "0", "no", "off"}:
        return False
    raise ValueError(f"value is not a bool: {value}")


def coerce_int(value: str) -> int:
    """Parse a base-10 integer with an optional sign."""
    if not _INTEGER_PATTERN.fullmatch(value):
        raise ValueError(f"value is not an int: {value}")
    return int(value)


def coerce_float(value: str) -> float:
    """Parse a decimal or exponent float; surrounding whitespace is rejected."""
    if not value or value != value.strip() or "_" in value:
        raise ValueError(f"value is not a float: {value}")
    try:
        result = float(value)
    except ValueError:
        raise ValueError(f"value is not a float: {value}") from None
    # out-of-range literals overflow to inf; only an explicit spelling may produce it
    if math.isinf(result) and value.lstrip("+-").lower() not in _INFINITY_WORDS:
        raise ValueError(f"value is not a float: {value}")
    return result


def parse_duration(value: str) -> timedelta:
    """
    Parse a unit-suffixed duration.

    A duration is an optional sign followed by one or more `<number><unit>` pairs,
    e.g. `1h30m`, `01h12m02s`, `1.5s`, `300ms`, `-2m`. Valid units are `h`, `m`,
    `s`, `ms`, `us` (or `µs`) and `ns`. A bare `0` is also accepted.

    Args:
        value (str): The raw duration text.

    Returns:
        timedelta: The total elapsed time, rounded to microseconds.

    Raises:
        ValueError: If the text is not a valid duration.
    """
    text = value
    negative = False
    if text[:1] in ("+", "-"):
        negative = text[0] == "-"
        text = text[1:]

    if text == "0":
        return timedelta(0)
    if not text:
        raise ValueError(f"invalid duration: {value}")

    total = Decimal(0)
    position = 0
    while position < len(text):
        match = _DURATION_PART.match(text, position)
        if not match or match.group(1) in ("", "."):
            raise ValueError(f"invalid duration: {value}")
        number, unit = match.groups()
        try:
            total += Decimal(number) * _DURATION_UNITS[unit]
        except InvalidOperation:
            raise ValueError(f"invalid duration: {value}") from None
        position = match.end()

    microseconds = int(total.to_integral_value())
    try:
        return timedelta(microseconds=-microseconds if negative else microseconds)
    except OverflowError:
        raise ValueError(f"invalid duration: {value}") from None


def _format_fraction(amount: int, scale: int) -> str:
    whole, fraction = divmod(amount, scale)
    if not fraction:
        return str(whole)
    width = len(str(scale)) - 1
    return f"{whole}.{str(fraction).rjust(width, '0').rstrip('0')}"


def format_duration(value: timedelta) -> str:
    """
    Render a duration in its canonical unit-suffixed form.

    Leading zeros are dropped and only the units needed are shown:
    `1h12m2s`, `2m0s`, `1.5s`, `250ms`, `0s`.
    """
    total = value // timedelta(microseconds=1)
    if total == 0:
        return "0s"

    sign = "-" if total < 0 else ""
    total = abs(total)
    if total < 1_000:
        return f"{sign}{total}µs"
    if total < 1_000_000:
        return f"{sign}{_format_fraction(total, 1_000)}ms"

    hours, remainder = divmod(total, 3_600_000_000)
    minutes, remainder = divmod(remainder, 60_000_000)
    text = sign
    if hours:
        text += f"{hours}h"
    if hours or minutes:
        text += f"{minutes}m"
    return f"{text}{_format_fraction(remainder, 1_000_000)}s"


def coerce_value(value: str, kind: FlagKind) -> Any:
    """
    Convert one raw token to the item type of `kind`.

    For list kinds this returns a single element; appending is the binder's job.

    Args:
        value (str): The raw token.
        kind (FlagKind): The destination kind.

    Returns:
        Any: The coerced value.

    Raises:
        ValueError: If the token is malformed for the kind.
    """
    item_kind = kind.item_kind
    if item_kind is FlagKind.BOOL:
        return coerce_bool(value)
    if item_kind is FlagKind.STRING:
        return value
    if item_kind is FlagKind.INTEGER:
        return coerce_int(value)
    if item_kind is FlagKind.FLOAT:
        return coerce_float(value)
    if item_kind is FlagKind.DURATION:
        return parse_duration(value)
    raise ValueError(f"Unsupported flag kind: {kind}")
