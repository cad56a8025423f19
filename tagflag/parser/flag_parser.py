# Tagflag CLI Framework — (c) 2025 rtj.dev LLC — MIT Licensed
"""
This module implements `FlagParser`, which fills a caller-owned dataclass from a
command-line argument list according to the tags declared on its fields.

A parse call runs in four stages:

1. Descriptors are built from the dataclass fields and collected into a
   `FlagRegistry` (with the implicit `-h|--help` flag).
2. The token scanner walks the arguments once, left to right:
   - `--` switches every remaining token to positional.
   - `--name` references a flag by long name.
   - `-abc` is a cluster of short names, each handled as its own `-x`.
   - Anything else fills the next unfilled positional field.
   Non-boolean flags consume the following token as their value. `--help` or
   `-h` renders help and raises `HelpSignal` before any validation runs.
3. Validation passes run in order: conflicts, missing mandatory flags, multiple
   use of single-valued flags.
4. Default values are bound for every field that was not supplied.

Public Interface:
- `FlagParser.parse_args(dest, args)`: Fill `dest`, raising on any failure.
- `FlagParser.render_help(registry)`: Print the help screen with Rich.
- `parse(dest, args=None)`: Process-level entry point that exits on help (0) and
  on user input errors (1).

Example Usage:
    @dataclass
    class Args:
        name: str = flag("mandatory,description='Full name'")
        verbose: bool = flag(default=False)

    args = parse(Args())
"""
from __future__ import annotations

import dataclasses
import sys
from typing import Any, Sequence, TypeVar

from rich.console import Console

from tagflag.console import console, error_console
from tagflag.exceptions import FlagConfigError, FlagInputError
from tagflag.logger import logger
from tagflag.parser.binder import Binder
from tagflag.parser.builder import build_flags
from tagflag.parser.descriptor import Flag
from tagflag.parser.parser_types import ScanState, SuppliedFlag
from tagflag.parser.registry import FlagRegistry
from tagflag.parser.utils import coerce_value
from tagflag.signals import HelpSignal
from tagflag.utils import get_program_name

T = TypeVar("T")


class FlagParser:
    """
    Declarative argument parser driven by dataclass field tags.

    The parser keeps no state between calls: every `parse_args` builds its own
    registry from the destination's fields.

    Features:
    - Short, long and grouped short flags (`-F`, `--full-time`, `-abc`).
    - Positional fields filled in declaration order, `--` terminator.
    - Mandatory flags, default values, conflicting flags.
    - Repeatable list flags.
    - Help rendering using Rich.
    """

    def __init__(
        self,
        program: str | None = None,
        help_text: str = "",
        help_epilog: str = "",
        console: Console = console,
        error_console: Console = error_console,
    ) -> None:
        """Initialize the FlagParser."""
        self.program: str | None = program
        self.help_text: str = help_text
        self.help_epilog: str = help_epilog
        self.console: Console = console
        self.error_console: Console = error_console

    def build_registry(self, dest_type: type) -> FlagRegistry:
        """Build the descriptor registry for a dataclass type."""
        return FlagRegistry(build_flags(dest_type))

    def parse_args(self, dest: T, args: Sequence[str] | None = None) -> T:
        """
        Fill the fields of `dest` from `args`.

        Args:
            dest: A dataclass instance owned by the caller; modified in place.
            args (Sequence[str] | None): Arguments without the program name.
                Defaults to `sys.argv[1:]`.

        Returns:
            The same `dest` instance.

        Raises:
            FlagConfigError: If the dataclass declaration is invalid.
            FlagInputError: If the arguments are invalid.
            HelpSignal: If help was requested and rendered.
        """
        if not dataclasses.is_dataclass(dest) or isinstance(dest, type):
            raise FlagConfigError(
                f"expected a dataclass instance, got {type(dest).__name__}"
            )
        if args is None:
            args = sys.argv[1:]
        args = list(args)

        registry = self.build_registry(type(dest))
        binder = Binder(dest, registry.declared)
        state = ScanState()

        index = 0
        while index < len(args):
            index = self._handle_token(args, index, registry, binder, state) + 1

        self._check_for_conflicts(state)
        self._check_for_missing_mandatory(registry, state)
        self._check_for_multiple_use(state)
        self._apply_defaults(registry, binder, state)
        return dest

    def _handle_token(
        self,
        args: list[str],
        index: int,
        registry: FlagRegistry,
        binder: Binder,
        state: ScanState,
    ) -> int:
        """Process the token at `index`; return the index of the last token consumed."""
        token = args[index]

        if state.positional_only:
            self._bind_positional(token, index, registry, binder, state)
        elif token == "--":
            state.positional_only = True
        elif token.startswith("--"):
            flag = registry.get_by_long(token[2:])
            if flag is None:
                raise FlagInputError(f"unknown flag: {token}")
            if flag is registry.help_flag:
                self._show_help(registry)
            index = self._consume_flag(flag, args, index, binder, state)
        elif token.startswith("-") and len(token) > 1:
            for short in token[1:]:
                flag = registry.get_by_short(short)
                if flag is None:
                    raise FlagInputError(f"unknown flag: -{short}")
                if flag is registry.help_flag:
                    self._show_help(registry)
                index = self._consume_flag(flag, args, index, binder, state)
        else:
            self._bind_positional(token, index, registry, binder, state)
        return index

    def _consume_flag(
        self,
        flag: Flag,
        args: list[str],
        index: int,
        binder: Binder,
        state: ScanState,
    ) -> int:
        state.non_positional.append(SuppliedFlag(flag, index))
        if not flag.takes_value:
            binder.bind(flag.name, True)
            return index
        if index + 1 >= len(args):
            raise FlagInputError(f"missing value for: {flag.get_display_name()}")
        self._bind_value(flag, args[index + 1], binder)
        return index + 1

    def _bind_positional(
        self,
        token: str,
        index: int,
        registry: FlagRegistry,
        binder: Binder,
        state: ScanState,
    ) -> None:
        if state.positional_index >= len(registry.positional):
            raise FlagInputError(f"too many arguments: {token}")
        flag = registry.positional[state.positional_index]
        state.positional.append(SuppliedFlag(flag, index))
        self._bind_value(flag, token, binder)
        # a positional list absorbs every remaining positional token
        if not flag.kind.is_list:
            state.positional_index += 1

    def _bind_value(self, flag: Flag, raw: str, binder: Binder) -> None:
        try:
            value = coerce_value(raw, flag.kind)
        except ValueError as error:
            raise FlagInputError(
                f"invalid value for {flag.get_display_name()}: {error}"
            ) from error
        binder.bind(flag.name, value)

    def _check_for_conflicts(self, state: ScanState) -> None:
        """
        Reject pairs of supplied flags where one lists the other in `conflicts-with`.

        Every supplied flag is checked against every other supplied flag, so
        declaring the relation on one side is enough to catch both orders.
        """
        supplied = {item.flag.name: item.flag for item in state.non_positional}
        for item in state.non_positional:
            for name in sorted(item.flag.conflicts_with):
                other = supplied.get(name)
                if other is not None:
                    raise FlagInputError(
                        f"conflicting flags: {item.flag.get_display_name()}, "
                        f"{other.get_display_name()}"
                    )

    def _check_for_missing_mandatory(
        self, registry: FlagRegistry, state: ScanState
    ) -> None:
        supplied = state.supplied_names()
        for flag in registry.flags:
            if not flag.mandatory or flag.name in supplied or flag.default_value:
                continue
            if flag.positional:
                raise FlagInputError(f"missing mandatory positional argument: {flag.name}")
            raise FlagInputError(f"missing mandatory flag: {flag.get_display_name()}")

    def _check_for_multiple_use(self, state: ScanState) -> None:
        seen: set[str] = set()
        for item in state.non_positional:
            if item.flag.name in seen and not item.flag.kind.is_list:
                raise FlagInputError(
                    f"multiple use of flag: {item.flag.get_display_name()}"
                )
            seen.add(item.flag.name)

    def _apply_defaults(
        self, registry: FlagRegistry, binder: Binder, state: ScanState
    ) -> None:
        supplied = state.supplied_names()
        for flag in registry.declared:
            if not flag.default_value or flag.name in supplied:
                continue
            logger.debug("[%s] Applying default value %r", flag.name, flag.default_value)
            self._bind_value(flag, flag.default_value, binder)

    def _show_help(self, registry: FlagRegistry) -> None:
        self.render_help(registry)
        raise HelpSignal()

    def get_usage(self, registry: FlagRegistry) -> str:
        """
        Render the usage line: program name, `[OPTIONS]` when any optional flag
        exists, required flags inline, then positional fields in order.
        """
        parts = [self.program or get_program_name()]
        if registry.optional_options:
            parts.append("[OPTIONS]")
        parts.extend(flag.get_usage_text() for flag in registry.required_options)
        parts.extend(flag.get_usage_text() for flag in registry.positional)
        return " ".join(parts)

    def _print_line(self, text: str = "", style: str | None = None) -> None:
        self.console.print(
            text,
            style=style,
            markup=False,
            emoji=False,
            highlight=False,
            soft_wrap=True,
        )

    def render_help(self, registry: FlagRegistry) -> None:
        """
        Print the help screen using Rich output.

        Includes the usage block, optional description, the required options,
        options and positional arguments sections, and the optional epilog.
        """
        self._print_line("Usage:", style="bold")
        self._print_line(f"  {self.get_usage(registry)}")
        self._print_line()

        if self.help_text:
            self._print_line(self.help_text)
            self._print_line()

        options = registry.required_options + registry.optional_options
        width = max(len(flag.get_label()) for flag in options)
        sections = (
            ("Required options:", registry.required_options),
            ("Options:", registry.optional_options),
            ("Positional arguments:", registry.positional),
        )
        for title, flags in sections:
            if not flags:
                continue
            self._print_line(title, style="bold")
            for flag in flags:
                row = f"  {flag.get_label():<{width}}  {flag.get_help_text()}"
                self._print_line(row.rstrip())
            self._print_line()

        if self.help_epilog:
            self._print_line(self.help_epilog, style="dim")

    def __str__(self) -> str:
        return f"FlagParser(program={self.program!r})"

    def __repr__(self) -> str:
        return str(self)


def parse(dest: T, args: Sequence[str] | None = None, *, program: str | None = None) -> T:
    """
    Fill `dest` from the process arguments, exiting on help or bad input.

    Help exits with status 0. A user input error prints its message to standard
    error and exits with status 1. `FlagConfigError` is not caught: a broken
    declaration halts the program with a traceback.

    Args:
        dest: A dataclass instance owned by the caller; modified in place.
        args (Sequence[str] | None): Defaults to `sys.argv[1:]`.
        program (str | None): Name for the usage line; defaults to argv[0]'s basename.

    Returns:
        The same `dest` instance.
    """
    parser = FlagParser(program=program)
    try:
        return parser.parse_args(dest, args)
    except HelpSignal:
        sys.exit(0)
    except FlagInputError as error:
        parser.error_console.print(
            str(error), style="red", markup=False, emoji=False, highlight=False
        )
        sys.exit(1)


def parse_into(dest_type: type[T], args: Sequence[str] | None = None, **kwargs: Any) -> T:
    """Instantiate `dest_type` with no arguments and fill it with `parse`."""
    return parse(dest_type(), args, **kwargs)
