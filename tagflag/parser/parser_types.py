# Tagflag CLI Framework — (c) 2025 rtj.dev LLC — MIT Licensed
"""
State models used while a single parse call is running.

- `SuppliedFlag`: One occurrence of a flag or positional found by the scanner.
- `ScanState`: Everything the scanner collects for the validation passes.

Both live only for the duration of one `FlagParser.parse_args` call.
"""
from dataclasses import dataclass, field

from tagflag.parser.descriptor import Flag


@dataclass(frozen=True)
class SuppliedFlag:
    """A flag together with the index of the token that supplied it."""

    flag: Flag
    position: int


@dataclass
class ScanState:
    """Tracks what the scanner has matched so far."""

    non_positional: list[SuppliedFlag] = field(default_factory=list)
    positional: list[SuppliedFlag] = field(default_factory=list)
    positional_index: int = 0
    positional_only: bool = False

    def supplied_names(self) -> set[str]:
        """Names of every flag supplied by either kind of matching."""
        return {
            supplied.flag.name for supplied in self.non_positional + self.positional
        }
