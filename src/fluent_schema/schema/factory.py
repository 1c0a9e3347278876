from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from fluent_schema.config.load import load_options
from fluent_schema.config.model import SchemaOptions
from fluent_schema.core.state import SchemaState
from fluent_schema.core.utils import (
    ARRAY,
    BOOLEAN,
    DRAFT_07,
    FORMATS,
    INTEGER,
    NUMBER,
    OBJECT,
    STRING,
    TYPES,
    FluentSchemaError,
)

from .array import ArraySchema
from .base import BaseSchema
from .mixed import MixedSchema, mixed_schema
from .number import IntegerSchema, NumberSchema
from .object import ObjectSchema
from .raw import raw_schema
from .scalar import BooleanSchema, NullSchema
from .string import StringSchema


class RootSchema(BaseSchema):
    """Entry point of the fluent API, usually used through the ``S`` instance.

    Calling a base keyword on the root (``S.ref(...)``, ``S.any_of(...)``) yields a
    plain :class:`BaseSchema`; the kind selectors yield the matching builder.
    """

    FORMATS = FORMATS
    TYPES = TYPES
    FluentSchemaError = FluentSchemaError

    def __init__(self, state: SchemaState | None = None, options: SchemaOptions | None = None):
        if state is None:
            state = SchemaState(attributes={"$schema": DRAFT_07})
        super().__init__(state, options)

    def _derive(self, state: SchemaState) -> BaseSchema:  # type: ignore[override]
        return BaseSchema(state, self._options)

    def with_options(self, options: SchemaOptions | Mapping[str, Any] | None = None, **overrides: Any) -> RootSchema:
        return RootSchema(self._state, load_options(options, **overrides))

    def string(self) -> StringSchema:
        return StringSchema(self._typed(STRING), self._options)

    def number(self) -> NumberSchema:
        return NumberSchema(self._typed(NUMBER), self._options)

    def integer(self) -> IntegerSchema:
        return IntegerSchema(self._typed(INTEGER), self._options)

    def boolean(self) -> BooleanSchema:
        return BooleanSchema(self._typed(BOOLEAN), self._options)

    def array(self) -> ArraySchema:
        return ArraySchema(self._typed(ARRAY), self._options)

    def object(self) -> ObjectSchema:
        return ObjectSchema(self._typed(OBJECT), self._options)

    def null(self) -> NullSchema:
        return NullSchema(self._state, self._options).null()

    def mixed(self, types: list[str]) -> MixedSchema:
        return mixed_schema(types, self._state, self._options)

    def raw(self, fragment: Mapping[str, Any]) -> BaseSchema:  # type: ignore[override]
        return raw_schema(fragment, self._options)

    def _typed(self, schema_type: str) -> SchemaState:
        return self._state.with_attributes({"type": schema_type})


S = RootSchema()
