# Tagflag CLI Framework — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines all custom exception classes used by tagflag.

Two kinds of failure are kept apart and never conflated:

- `FlagConfigError` signals that the CLI author declared an invalid schema
  (unknown tag directive, name collision, unusable type, ...). It halts program
  startup and is never caught by `tagflag.parse`.
- `FlagInputError` signals that the end user supplied invalid arguments
  (unknown flag, missing value, malformed number, ...). `tagflag.parse` reports
  it on standard error and exits with status 1.

Exception Hierarchy:
- TagflagError
    ├── FlagConfigError
    └── FlagInputError
"""


class TagflagError(Exception):
    """Base exception for tagflag."""


class FlagConfigError(TagflagError):
    """Exception raised when a destination dataclass is declared incorrectly."""


class FlagInputError(TagflagError):
    """Exception raised when the supplied command-line arguments are invalid."""
