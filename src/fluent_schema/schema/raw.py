from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from fluent_schema.config.model import SchemaOptions
from fluent_schema.core.state import NamedEntries, SchemaState
from fluent_schema.core.utils import (
    ARRAY,
    BOOLEAN,
    INTEGER,
    NUMBER,
    OBJECT,
    STRING,
    FluentSchemaError,
    clone,
    is_string_sequence,
    omit,
)

from .array import ArraySchema
from .base import BaseSchema
from .number import IntegerSchema, NumberSchema
from .object import ObjectSchema
from .scalar import BooleanSchema
from .string import StringSchema

logger = logging.getLogger(__name__)

_KINDS: dict[str, type[BaseSchema]] = {
    STRING: StringSchema,
    INTEGER: IntegerSchema,
    NUMBER: NumberSchema,
    BOOLEAN: BooleanSchema,
    OBJECT: ObjectSchema,
    ARRAY: ArraySchema,
}


def raw_schema(fragment: Mapping[str, Any], options: SchemaOptions | None = None) -> BaseSchema:
    """Rebuild a builder from an already serialized JSON Schema fragment."""
    if not isinstance(fragment, Mapping):
        raise FluentSchemaError("A fragment must be a JSON object")
    fragment = clone(dict(fragment))
    schema_type = fragment.get("type")

    if schema_type == OBJECT:
        required = fragment.get("required") or []
        if not is_string_sequence(required):
            raise FluentSchemaError("'required' must be an array of property names e.g. ['foo', 'bar']")
        state = SchemaState(
            attributes=omit(fragment, ("properties", "definitions", "required")),
            properties=NamedEntries.from_mapping(fragment.get("properties"), keyword="properties"),
            definitions=NamedEntries.from_mapping(fragment.get("definitions"), keyword="definitions"),
            required=tuple(required),
        )
        return ObjectSchema(state, options)

    kind = _KINDS.get(schema_type) if isinstance(schema_type, str) else None
    if kind is None:
        logger.debug("No builder for type %r, keeping the fragment as a base schema", schema_type)
        kind = BaseSchema
    return kind(SchemaState(attributes=fragment), options)
