from __future__ import annotations

from functools import lru_cache
from typing import Any

from fluent_schema.config.model import SchemaOptions
from fluent_schema.core.state import SchemaState
from fluent_schema.core.utils import (
    ARRAY,
    INTEGER,
    NULL,
    NUMBER,
    OBJECT,
    STRING,
    TYPES,
    FluentSchemaError,
    is_sequence,
)

from .array import ArraySchema
from .base import BaseSchema
from .number import NumberSchema
from .object import ObjectSchema
from .scalar import NullSchema
from .string import StringSchema

# ObjectSchema comes first so its root-bound ``id`` wins over the base one.
_KEYWORD_SETS: tuple[tuple[str, type[BaseSchema]], ...] = (
    (OBJECT, ObjectSchema),
    (STRING, StringSchema),
    (NUMBER, NumberSchema),
    (INTEGER, NumberSchema),
    (ARRAY, ArraySchema),
    (NULL, NullSchema),
)


class MixedSchema(BaseSchema):
    """A union of kinds, e.g. ``["string", "integer"]``.

    Concrete instances are built by :func:`mixed_schema`, which overlays the
    keyword set of every listed kind onto one class.
    """

    KINDS: tuple[str, ...] = ()

    def __init__(self, state: SchemaState | None = None, options: SchemaOptions | None = None):
        if state is None:
            state = SchemaState(attributes={"type": list(self.KINDS)})
        super().__init__(state, options)


def mixed_schema(
    types: Any,
    state: SchemaState | None = None,
    options: SchemaOptions | None = None,
) -> MixedSchema:
    if not is_sequence(types) or any(kind not in TYPES for kind in types):
        raise FluentSchemaError(
            f"Invalid 'types'. It must be an array of types. Valid types are {' | '.join(TYPES)}"
        )
    kinds = tuple(types)
    cls = _mixed_class(kinds)
    if state is not None:
        state = state.with_attributes({"type": list(kinds)})
    return cls(state, options)


@lru_cache(maxsize=None)
def _mixed_class(kinds: tuple[str, ...]) -> type[MixedSchema]:
    bases: list[type[BaseSchema]] = []
    for kind, keyword_set in _KEYWORD_SETS:
        if kind in kinds and keyword_set not in bases:
            bases.append(keyword_set)
    name = "MixedSchema[" + ",".join(kinds) + "]"
    return type(name, (MixedSchema, *bases), {"KINDS": kinds})

