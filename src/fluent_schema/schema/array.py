from __future__ import annotations

from typing import Any

from fluent_schema.core.utils import ARRAY, FluentSchemaError, is_integer, is_sequence, omit

from .base import BaseSchema, SchemaT, is_fluent_schema


class ArraySchema(BaseSchema):
    TYPE = ARRAY

    def items(self: SchemaT, items: BaseSchema | list[BaseSchema]) -> SchemaT:
        """A single schema applies to every element, a list applies positionally."""
        if is_fluent_schema(items):
            return self._set_attribute("items", _embedded(items))
        if is_sequence(items) and items and all(is_fluent_schema(item) for item in items):
            return self._set_attribute("items", [_embedded(item) for item in items])
        raise FluentSchemaError("'items' must be a S or an array of S")

    def additional_items(self: SchemaT, items: bool | BaseSchema) -> SchemaT:
        if isinstance(items, bool):
            return self._set_attribute("additionalItems", items)
        if is_fluent_schema(items):
            return self._set_attribute("additionalItems", _embedded(items))
        raise FluentSchemaError("'additionalItems' must be a boolean or a S")

    def contains(self: SchemaT, value: BaseSchema) -> SchemaT:
        if not is_fluent_schema(value):
            raise FluentSchemaError("'contains' must be a S")
        contained = omit(value.value_of(), ("$schema", "definitions", "properties", "required"))
        return self._set_attribute("contains", contained)

    def unique_items(self: SchemaT, value: bool) -> SchemaT:
        if not isinstance(value, bool):
            raise FluentSchemaError("'uniqueItems' must be a boolean")
        return self._set_attribute("uniqueItems", value)

    def min_items(self: SchemaT, value: int) -> SchemaT:
        if not is_integer(value):
            raise FluentSchemaError("'minItems' must be a integer")
        return self._set_attribute("minItems", value)

    def max_items(self: SchemaT, value: int) -> SchemaT:
        if not is_integer(value):
            raise FluentSchemaError("'maxItems' must be a integer")
        return self._set_attribute("maxItems", value)


def _embedded(schema: Any) -> dict[str, Any]:
    return omit(schema.value_of(), ("$schema",))
