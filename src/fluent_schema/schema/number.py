from __future__ import annotations

from typing import Any

from fluent_schema.core.utils import INTEGER, NUMBER, FluentSchemaError, is_integer, is_number

from .base import BaseSchema, SchemaT


class NumberSchema(BaseSchema):
    TYPE = NUMBER

    def minimum(self: SchemaT, value: float) -> SchemaT:
        return self._set_numeric("minimum", value)

    def exclusive_minimum(self: SchemaT, value: float) -> SchemaT:
        return self._set_numeric("exclusiveMinimum", value)

    def maximum(self: SchemaT, value: float) -> SchemaT:
        return self._set_numeric("maximum", value)

    def exclusive_maximum(self: SchemaT, value: float) -> SchemaT:
        return self._set_numeric("exclusiveMaximum", value)

    def multiple_of(self: SchemaT, value: float) -> SchemaT:
        return self._set_numeric("multipleOf", value)

    def _set_numeric(self: SchemaT, keyword: str, value: Any) -> SchemaT:
        if not is_number(value):
            raise FluentSchemaError(f"'{keyword}' must be a Number")
        if self._state.attributes.get("type") == INTEGER and not is_integer(value):
            raise FluentSchemaError(f"'{keyword}' must be an Integer")
        return self._set_attribute(keyword, value)


class IntegerSchema(NumberSchema):
    TYPE = INTEGER
