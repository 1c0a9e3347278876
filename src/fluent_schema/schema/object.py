from __future__ import annotations

from collections.abc import Mapping
from dataclasses import replace
from typing import Any

from fluent_schema.core.utils import (
    OBJECT,
    FluentSchemaError,
    deep_merge,
    is_integer,
    is_string_sequence,
    is_unique,
    merge_lists,
    omit,
)

from .base import _DEFINITIONS, _PROPERTIES, BaseSchema, SchemaT, _check_id, is_fluent_schema

_DEPENDENCY_KEYS = ("$schema", "type", "definitions")


class ObjectSchema(BaseSchema):
    TYPE = OBJECT

    def id(self: SchemaT, value: str) -> SchemaT:
        # binds to the object itself, never to its last property
        _check_id(value)
        return self._derive(self._state.with_attributes({"$id": value}))

    def prop(self: SchemaT, name: str, schema: BaseSchema | Mapping[str, Any] | None = None) -> SchemaT:
        """Declare a property.

        ``schema`` can be another builder, a plain JSON Schema mapping or nothing
        at all (``{}``). A ``required()`` left dangling inside ``schema`` marks
        ``name`` as required on this object.
        """
        return self._add_entry(name, schema, target=_PROPERTIES)

    def definition(self: SchemaT, name: str, schema: BaseSchema | Mapping[str, Any] | None = None) -> SchemaT:
        return self._add_entry(name, schema, target=_DEFINITIONS)

    def additional_properties(self: SchemaT, value: bool | BaseSchema) -> SchemaT:
        if isinstance(value, bool):
            return self._set_attribute("additionalProperties", value)
        if is_fluent_schema(value):
            return self._set_attribute(
                "additionalProperties",
                omit(value.value_of(is_root=False), ("$schema",)),
            )
        raise FluentSchemaError("'additionalProperties' must be a boolean or a S")

    def max_properties(self: SchemaT, value: int) -> SchemaT:
        if not is_integer(value):
            raise FluentSchemaError("'maxProperties' must be a Integer")
        return self._set_attribute("maxProperties", value)

    def min_properties(self: SchemaT, value: int) -> SchemaT:
        if not is_integer(value):
            raise FluentSchemaError("'minProperties' must be a Integer")
        return self._set_attribute("minProperties", value)

    def pattern_properties(self: SchemaT, options: Mapping[str, BaseSchema]) -> SchemaT:
        message = "'patternProperties' invalid options. Provide a valid map e.g. { '^fo.*$': S.string() }"
        if not isinstance(options, Mapping):
            raise FluentSchemaError(message)
        values: dict[str, Any] = {}
        for pattern, schema in options.items():
            if not is_fluent_schema(schema):
                raise FluentSchemaError(message)
            values[pattern] = omit(schema.value_of(is_root=False), ("$schema",))
        return self._set_attribute("patternProperties", values)

    def dependencies(self: SchemaT, options: Mapping[str, BaseSchema | list[str]]) -> SchemaT:
        message = (
            "'dependencies' invalid options. Provide a valid map e.g. "
            "{ 'foo': ['bar'] } or { 'foo': S.string() }"
        )
        if not isinstance(options, Mapping):
            raise FluentSchemaError(message)
        values: dict[str, Any] = {}
        for name, schema in options.items():
            if is_string_sequence(schema):
                values[name] = list(schema)
            elif is_fluent_schema(schema):
                values[name] = omit(schema.value_of(is_root=False), _DEPENDENCY_KEYS)
            else:
                raise FluentSchemaError(message)
        return self._set_attribute("dependencies", values)

    def dependent_required(self: SchemaT, options: Mapping[str, list[str]]) -> SchemaT:
        message = "'dependentRequired' invalid options. Provide a valid array e.g. { 'foo': ['bar'] }"
        if not isinstance(options, Mapping):
            raise FluentSchemaError(message)
        values: dict[str, Any] = {}
        for name, names in options.items():
            if not is_string_sequence(names):
                raise FluentSchemaError(message)
            values[name] = list(names)
        return self._set_attribute("dependentRequired", values)

    def dependent_schemas(self: SchemaT, options: Mapping[str, BaseSchema]) -> SchemaT:
        message = "'dependentSchemas' invalid options. Provide a valid schema e.g. { 'foo': S.string() }"
        if not isinstance(options, Mapping):
            raise FluentSchemaError(message)
        values: dict[str, Any] = {}
        for name, schema in options.items():
            if not is_fluent_schema(schema):
                raise FluentSchemaError(message)
            values[name] = omit(schema.value_of(is_root=False), _DEPENDENCY_KEYS)
        return self._set_attribute("dependentSchemas", values)

    def property_names(self: SchemaT, value: BaseSchema) -> SchemaT:
        if not is_fluent_schema(value):
            raise FluentSchemaError("'propertyNames' must be a S")
        return self._set_attribute("propertyNames", omit(value.value_of(is_root=False), ("$schema",)))

    def extend(self: SchemaT, base: ObjectSchema) -> SchemaT:
        """Deep merge ``base`` underneath this schema.

        Keywords set here win over ``base``. Properties and definitions with the
        same name are merged key by key, new ones are appended after the
        inherited ones, and ``required`` becomes the union of both lists.
        """
        if base is None:
            raise FluentSchemaError("Schema can't be null or undefined")
        if not isinstance(base, ObjectSchema):
            raise FluentSchemaError("Schema isn't FluentSchema type")

        inherited = base.state
        own = self._state
        required = tuple(merge_lists(list(inherited.required), list(own.required)))
        if not is_unique(required):
            raise FluentSchemaError("'required' has repeated keys, check your calls to .required()")

        extended = replace(
            own,
            attributes=deep_merge(dict(inherited.attributes), dict(own.attributes)),
            properties=inherited.properties.merge(own.properties, deep_merge),
            definitions=inherited.definitions.merge(own.definitions, deep_merge),
            required=required,
        )
        return self._derive(extended)

    def only(self: SchemaT, names: list[str]) -> SchemaT:
        """Keep only the given properties; the result is a new schema without ``$id``."""
        return self._subset(names, keep=True)

    def without(self: SchemaT, names: list[str]) -> SchemaT:
        """Drop the given properties; the result is a new schema without ``$id``."""
        return self._subset(names, keep=False)

    def _subset(self: SchemaT, names: list[str], *, keep: bool) -> SchemaT:
        if not is_string_sequence(names):
            raise FluentSchemaError("Provide an array of property names e.g. ['foo', 'bar']")
        selected = set(names)
        state = self._state.without_attributes("$id")
        state = replace(
            state,
            properties=state.properties.filter(lambda name: (name in selected) is keep),
            required=tuple(
                item for item in state.required if isinstance(item, str) and (item in selected) is keep
            ),
        )
        return self._derive(state)
