"""
Tagflag CLI Framework

Copyright (c) 2025 rtj.dev LLC.
Licensed under the MIT License. See LICENSE file for details.
"""

import logging

from .exceptions import FlagConfigError, FlagInputError, TagflagError
from .parser import Flag, FlagKind, FlagParser, flag, format_duration, parse, parse_into
from .signals import HelpSignal

logger = logging.getLogger("tagflag")


__all__ = [
    "Flag",
    "FlagConfigError",
    "FlagInputError",
    "FlagKind",
    "FlagParser",
    "HelpSignal",
    "TagflagError",
    "flag",
    "format_duration",
    "parse",
    "parse_into",
]
