# Tagflag CLI Framework — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines the `Flag` dataclass, the immutable descriptor tagflag builds for every
field of a destination dataclass.

A `Flag` carries everything the scanner, the validation passes and the help
renderer need to know about one field: its names, its semantic kind and the rules
declared in its tag. Descriptors are created fresh for every parse call and are
never mutated afterwards.

Key Attributes:
- `name`: Destination field name (unique within one parse call)
- `kind`: `FlagKind` describing the semantic type
- `short` / `long`: Option names without leading dashes (empty when suppressed)
- `mandatory`, `positional`, `command`: Declared rules
- `conflicts_with`: Names of other fields that may not be supplied together
- `default_value`: Raw default string, coerced only when the flag is not supplied
- `description`: Help text only
"""
from __future__ import annotations

from dataclasses import dataclass, field

from tagflag.parser.flag_kind import FlagKind

HELP_FLAG_NAME = "help"


@dataclass(frozen=True)
class Flag:
    """
    Represents one declared command-line flag or positional argument.

    Attributes:
        name (str): Destination field name.
        kind (FlagKind): Semantic type of the field.
        short (str): Single-character short name, empty if suppressed.
        long (str): Long name, empty if suppressed.
        mandatory (bool): Must be supplied or defaulted before parsing succeeds.
        positional (bool): Matched by position instead of by name.
        command (bool): Positional dispatch key for subcommand-style programs.
        conflicts_with (frozenset[str]): Field names that cannot be supplied alongside.
        default_value (str): Raw default, empty for none.
        description (str): Help text.
    """

    name: str
    kind: FlagKind
    short: str = ""
    long: str = ""
    mandatory: bool = False
    positional: bool = False
    command: bool = False
    conflicts_with: frozenset[str] = field(default_factory=frozenset)
    default_value: str = ""
    description: str = ""

    @property
    def takes_value(self) -> bool:
        """True if matching this flag consumes the following token."""
        return self.kind is not FlagKind.BOOL

    def get_display_name(self) -> str:
        """Name used in error messages, e.g. `-n|--name` or `employee_id`."""
        if self.positional:
            return self.name
        names = []
        if self.short:
            names.append(f"-{self.short}")
        if self.long:
            names.append(f"--{self.long}")
        return "|".join(names) or self.name

    def get_label(self) -> str:
        """Left column of a help row, e.g. `-n, --name <name>`."""
        if self.positional:
            return self.name
        names = []
        if self.short:
            names.append(f"-{self.short}")
        if self.long:
            names.append(f"--{self.long}")
        label = ", ".join(names)
        if self.takes_value:
            label += f" <{self.name}>"
        return label

    def get_usage_text(self) -> str:
        """Fragment of the usage line for this flag."""
        if self.positional:
            text = f"<{self.name}>" if self.mandatory else f"[{self.name}]"
            if self.kind.is_list:
                text += " ..."
            return text
        syntax = f"--{self.long}" if self.long else f"-{self.short}"
        if self.takes_value:
            syntax += f" <{self.name}>"
        if self.kind.is_list:
            syntax += " ..."
        return syntax

    def get_help_text(self) -> str:
        """Right column of a help row."""
        text = self.description
        if self.kind.is_list and not self.positional:
            text += " (can be specified multiple times)"
        if self.positional and self.mandatory:
            text += " (required)"
        return text


def make_help_flag() -> Flag:
    """Return the implicit `-h|--help` descriptor added to every registry."""
    return Flag(
        name=HELP_FLAG_NAME,
        kind=FlagKind.BOOL,
        short="h",
        long="help",
        description="Show this help message and exit",
    )
