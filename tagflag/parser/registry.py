# Tagflag CLI Framework — (c) 2025 rtj.dev LLC — MIT Licensed
"""
The ordered set of descriptors used by one parse call.

`FlagRegistry` appends the implicit `-h|--help` descriptor to the declared flags,
rejects name collisions and dangling `conflicts-with` references, and indexes the
non-positional flags by short and long name for the scanner.
"""
from __future__ import annotations

from tagflag.exceptions import FlagConfigError
from tagflag.logger import logger
from tagflag.parser.descriptor import Flag, make_help_flag


class FlagRegistry:
    """
    Descriptors for one parse call, in declaration order.

    Attributes:
        flags (list[Flag]): Declared flags followed by the implicit help flag.
        help_flag (Flag): The implicit help descriptor.
        positional (list[Flag]): Positional descriptors in declaration order.
    """

    def __init__(self, declared: list[Flag]) -> None:
        self.help_flag: Flag = make_help_flag()
        self.declared: list[Flag] = list(declared)
        self.flags: list[Flag] = self.declared + [self.help_flag]
        self.positional: list[Flag] = [flag for flag in self.flags if flag.positional]
        self._long: dict[str, Flag] = {}
        self._short: dict[str, Flag] = {}
        self._check_for_name_collisions()
        self._check_conflict_references()
        self._check_positional_order()
        logger.debug(
            "Registered %d flags (%d positional)", len(self.flags), len(self.positional)
        )

    def _check_for_name_collisions(self) -> None:
        names: set[str] = set()
        for flag in self.declared:
            if flag.name in names:
                raise FlagConfigError(f"Duplicate field name: {flag.name}")
            names.add(flag.name)

        for flag in self.flags:
            if flag.positional:
                continue
            if flag.long:
                existing = self._long.get(flag.long)
                if existing is not None:
                    raise FlagConfigError(
                        f"flag name collision: {flag.name} (--{flag.long}) "
                        f"with {existing.name} (--{existing.long})"
                    )
                self._long[flag.long] = flag
            if flag.short:
                existing = self._short.get(flag.short)
                if existing is not None:
                    raise FlagConfigError(
                        f"flag name collision: {flag.name} (-{flag.short}) "
                        f"with {existing.name} (-{existing.short})"
                    )
                self._short[flag.short] = flag

    def _check_conflict_references(self) -> None:
        names = {flag.name for flag in self.declared}
        for flag in self.declared:
            for other in sorted(flag.conflicts_with):
                if other not in names:
                    raise FlagConfigError(
                        f"Field '{flag.name}' conflicts with unknown field '{other}'"
                    )
                if other == flag.name:
                    raise FlagConfigError(
                        f"Field '{flag.name}' cannot conflict with itself"
                    )

    def _check_positional_order(self) -> None:
        for flag in self.positional[:-1]:
            if flag.kind.is_list:
                raise FlagConfigError(
                    f"Positional list '{flag.name}' must be the last positional field"
                )

    def get_by_long(self, long: str) -> Flag | None:
        return self._long.get(long)

    def get_by_short(self, short: str) -> Flag | None:
        return self._short.get(short)

    @property
    def required_options(self) -> list[Flag]:
        return [flag for flag in self.flags if not flag.positional and flag.mandatory]

    @property
    def optional_options(self) -> list[Flag]:
        return [
            flag for flag in self.flags if not flag.positional and not flag.mandatory
        ]

    def __iter__(self):
        return iter(self.flags)

    def __len__(self) -> int:
        return len(self.flags)

    def __str__(self) -> str:
        return (
            f"FlagRegistry(flags={len(self.flags)}, long={len(self._long)}, "
            f"short={len(self._short)}, positional={len(self.positional)})"
        )

    def __repr__(self) -> str:
        return str(self)
