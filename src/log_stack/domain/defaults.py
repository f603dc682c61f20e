"""Default field values merged into every buffered entry.

Purpose
-------
Let callers attach fields such as timestamps or correlation ids to all
entries without repeating them on each ``log`` call.

Contents
--------
* :class:`Constant` / :class:`Computed` - the two kinds of default value.
* :func:`as_default` - wrap a raw value into one of the two variants.
* :class:`DefaultRegistry` - the mutable name -> default mapping.

System Role
-----------
The registry belongs to a single :class:`log_stack.LogStack` and is not part
of its resettable lifecycle state: throwing or flushing keeps the defaults.
"""

from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import Any, Callable, Iterator, Mapping, Union

DefaultFactory = Callable[[Any, Any], Any]


@dataclass(slots=True, frozen=True)
class Constant:
    """Default used verbatim."""

    value: Any

    def resolve(self, level: Any, message: Any) -> Any:
        return self.value

    @property
    def raw(self) -> Any:
        return self.value


@dataclass(slots=True, frozen=True)
class Computed:
    """Default computed per ``log`` call as ``factory(level, message)``."""

    factory: DefaultFactory

    def resolve(self, level: Any, message: Any) -> Any:
        return self.factory(level, message)

    @property
    def raw(self) -> Any:
        return self.factory


DefaultValue = Union[Constant, Computed]


def as_default(value: Any) -> DefaultValue:
    """Classify ``value``: callables become :class:`Computed`, all else :class:`Constant`.

    Already wrapped values pass through unchanged, which allows storing a
    callable as a constant via ``Constant(fn)``.

    Examples
    --------
    >>> as_default(7)
    Constant(value=7)
    >>> isinstance(as_default(lambda level, message: level), Computed)
    True
    """
    if isinstance(value, (Constant, Computed)):
        return value
    if callable(value):
        return Computed(value)
    return Constant(value)


class DefaultRegistry:
    """Mutable mapping of field names to :data:`DefaultValue` variants."""

    def __init__(self, values: Mapping[str, Any] | None = None) -> None:
        self._values: dict[str, DefaultValue] = {}
        if values:
            self.update(values)

    def update(self, values: Mapping[str, Any]) -> None:
        """Insert or overwrite defaults; effective for later entries only."""
        for name, value in values.items():
            self._values[name] = as_default(value)

    def remove(self, *names: str) -> None:
        """Forget the given defaults; unknown names are ignored."""
        for name in names:
            self._values.pop(name, None)

    def resolve(self, level: Any, message: Any, fields: Mapping[str, Any]) -> dict[str, Any]:
        """Return ``fields`` completed with every default it does not set.

        Computed defaults are invoked once per call and never for a field the
        caller supplied explicitly.

        Examples
        --------
        >>> registry = DefaultRegistry({"id": 1, "lvl": lambda level, message: level.upper()})
        >>> sorted(registry.resolve("warn", "disk low", {"id": 7}).items())
        [('id', 7), ('lvl', 'WARN')]
        """
        merged = dict(fields)
        for name, default in self._values.items():
            if name in merged:
                continue
            merged[name] = default.resolve(level, message)
        return merged

    def view(self) -> Mapping[str, Any]:
        """Return a read-only mapping of the raw (unresolved) default values."""

        return MappingProxyType({name: default.raw for name, default in self._values.items()})

    def __contains__(self, name: object) -> bool:
        return name in self._values

    def __iter__(self) -> Iterator[str]:
        return iter(self._values)

    def __len__(self) -> int:
        return len(self._values)


__all__ = ["Computed", "Constant", "DefaultFactory", "DefaultRegistry", "DefaultValue", "as_default"]
