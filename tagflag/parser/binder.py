# Tagflag CLI Framework — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Binds coerced values into the caller-owned destination dataclass.

The `Binder` builds one setter per descriptor when it is created, so matching a
token never looks fields up by name again. Scalar setters overwrite the field;
list setters append, creating the list on first use when the field still holds
`None`.

Binding failures are developer-facing: they mean the descriptors and the
destination disagree, never that the user typed something wrong.
"""
from typing import Any, Callable

from tagflag.exceptions import FlagConfigError
from tagflag.logger import logger
from tagflag.parser.descriptor import Flag

Setter = Callable[[Any], None]


class Binder:
    """Writes coerced values into the fields of one destination instance."""

    def __init__(self, dest: Any, flags: list[Flag]) -> None:
        self.dest = dest
        self._flags: dict[str, Flag] = {}
        self._setters: dict[str, Setter] = {}
        for flag in flags:
            self._flags[flag.name] = flag
            self._setters[flag.name] = self._make_setter(flag)

    def _make_setter(self, flag: Flag) -> Setter:
        if not hasattr(self.dest, flag.name):
            raise FlagConfigError(
                f"{type(self.dest).__name__} has no field '{flag.name}' to bind"
            )
        dest = self.dest
        name = flag.name

        if flag.kind.is_list:

            def append(value: Any) -> None:
                values = getattr(dest, name)
                if values is None:
                    values = []
                    setattr(dest, name, values)
                values.append(value)

            return append

        def assign(value: Any) -> None:
            setattr(dest, name, value)

        return assign

    def bind(self, name: str, value: Any) -> None:
        """
        Store `value` in the field `name`.

        Raises:
            FlagConfigError: If `name` is unknown or `value` does not match the
                field's kind.
        """
        flag = self._flags.get(name)
        if flag is None:
            raise FlagConfigError(f"No field registered for '{name}'")
        expected = flag.kind.python_type
        if type(value) is not expected:
            raise FlagConfigError(
                f"Cannot bind {type(value).__name__} to '{name}' ({flag.kind})"
            )
        logger.debug("[%s] Binding %r", name, value)
        self._setters[name](value)
