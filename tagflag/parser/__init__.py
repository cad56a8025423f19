"""
Tagflag CLI Framework

Copyright (c) 2025 rtj.dev LLC.
Licensed under the MIT License. See LICENSE file for details.
"""

from .builder import TAG_KEY, build_flag, build_flags, flag
from .descriptor import Flag
from .flag_kind import FlagKind
from .flag_parser import FlagParser, parse, parse_into
from .registry import FlagRegistry
from .tag import tokenize_tag
from .utils import coerce_value, format_duration, parse_duration

__all__ = [
    "Flag",
    "FlagKind",
    "FlagParser",
    "FlagRegistry",
    "TAG_KEY",
    "build_flag",
    "build_flags",
    "coerce_value",
    "flag",
    "format_duration",
    "parse",
    "parse_duration",
    "parse_into",
    "tokenize_tag",
]
