from __future__ import annotations

from collections.abc import Callable, Iterator, Mapping
from dataclasses import dataclass, field, replace
from types import MappingProxyType
from typing import Any

from fluent_schema.core.utils import FluentSchemaError, clone


class NamedEntries:
    """Insertion-ordered ``name -> attributes`` map of sub-schemas.

    Re-declaring a name replaces its attributes but keeps its original position;
    the map also remembers which name was declared last, which is what attribute
    targeting and the bare ``required()`` call resolve against.
    """

    __slots__ = ("_entries", "_last")

    def __init__(self, entries: Mapping[str, dict[str, Any]] | None = None, last: str | None = None):
        self._entries: dict[str, dict[str, Any]] = dict(entries or {})
        if last is None and self._entries:
            last = next(reversed(self._entries))
        self._last = last

    @classmethod
    def from_mapping(cls, mapping: Any, *, keyword: str = "properties") -> NamedEntries:
        if not mapping:
            return cls()
        if not isinstance(mapping, Mapping):
            raise FluentSchemaError(f"'{keyword}' must be a JSON object")
        entries: dict[str, dict[str, Any]] = {}
        for name, value in mapping.items():
            if not isinstance(value, Mapping):
                raise FluentSchemaError(f"'{keyword}.{name}' must be a JSON object")
            entries[name] = clone(dict(value))
        return cls(entries)

    @property
    def last(self) -> tuple[str, dict[str, Any]] | None:
        if self._last is None:
            return None
        return self._last, self._entries[self._last]

    def with_entry(self, name: str, attributes: dict[str, Any]) -> NamedEntries:
        entries = dict(self._entries)
        entries[name] = attributes
        return NamedEntries(entries, last=name)

    def filter(self, predicate: Callable[[str], bool]) -> NamedEntries:
        entries = {name: value for name, value in self._entries.items() if predicate(name)}
        return NamedEntries(entries)

    def merge(self, incoming: NamedEntries, merge_attributes: Callable[[Any, Any], Any]) -> NamedEntries:
        entries = dict(self._entries)
        for name, attributes in incoming.items():
            if name in entries:
                entries[name] = merge_attributes(entries[name], attributes)
            else:
                entries[name] = clone(attributes)
        return NamedEntries(entries)

    def flatten(self) -> dict[str, Any]:
        return clone(self._entries)

    def items(self) -> Iterator[tuple[str, dict[str, Any]]]:
        return iter(self._entries.items())

    def __contains__(self, name: object) -> bool:
        return name in self._entries

    def __iter__(self) -> Iterator[str]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __bool__(self) -> bool:
        return bool(self._entries)

    def __repr__(self) -> str:
        return f"NamedEntries({self._entries!r})"


@dataclass(frozen=True)
class SchemaState:
    attributes: Mapping[str, Any] = field(default_factory=dict)
    properties: NamedEntries = field(default_factory=NamedEntries)
    definitions: NamedEntries = field(default_factory=NamedEntries)
    required: tuple[Any, ...] = ()

    def __post_init__(self) -> None:
        # read-only view, writes go through with_attributes()
        object.__setattr__(self, "attributes", MappingProxyType(dict(self.attributes)))

    def with_attributes(self, updates: Mapping[str, Any]) -> SchemaState:
        return replace(self, attributes={**self.attributes, **updates})

    def without_attributes(self, *keys: str) -> SchemaState:
        return replace(
            self,
            attributes={key: value for key, value in self.attributes.items() if key not in keys},
        )

    def with_required(self, required: tuple[Any, ...]) -> SchemaState:
        return replace(self, required=required)

    def with_entry(self, target: str, name: str, attributes: dict[str, Any]) -> SchemaState:
        entries: NamedEntries = getattr(self, target)
        return self.with_entries(target, entries.with_entry(name, attributes))

    def with_entries(self, target: str, entries: NamedEntries) -> SchemaState:
        if target not in ("properties", "definitions"):
            raise ValueError(f"Unknown entry list: {target}")
        return replace(self, **{target: entries})
