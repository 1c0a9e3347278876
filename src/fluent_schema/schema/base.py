from __future__ import annotations

from collections.abc import Mapping
from typing import Any, TypeVar

from fluent_schema.config.load import DEFAULT_OPTIONS
from fluent_schema.config.model import SchemaOptions
from fluent_schema.core.state import NamedEntries, SchemaState
from fluent_schema.core.utils import (
    REQUIRED,
    FluentSchemaError,
    append_required,
    clone,
    has_combining_keywords,
    is_sequence,
    is_string_sequence,
    is_unique,
    omit,
    patch_ids_with_parent_id,
)

SchemaT = TypeVar("SchemaT", bound="BaseSchema")

_PROPERTIES = "properties"
_DEFINITIONS = "definitions"


def is_fluent_schema(value: Any) -> bool:
    return isinstance(value, BaseSchema)


class BaseSchema:
    """Keywords shared by every schema kind plus serialization.

    Builders are immutable: every keyword call returns a new builder and leaves
    the receiver untouched.
    """

    TYPE: str | None = None

    def __init__(self, state: SchemaState | None = None, options: SchemaOptions | None = None):
        if state is None:
            state = SchemaState(attributes={"type": self.TYPE} if self.TYPE else {})
        self._state = state
        self._options = options or DEFAULT_OPTIONS

    @property
    def options(self) -> SchemaOptions:
        return self._options

    @property
    def state(self) -> SchemaState:
        return self._state

    def _derive(self: SchemaT, state: SchemaState) -> SchemaT:
        return type(self)(state, self._options)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.value_of(is_root=False)!r})"

    def id(self: SchemaT, value: str) -> SchemaT:
        _check_id(value)
        return self._set_attribute("$id", value)

    def title(self: SchemaT, value: str) -> SchemaT:
        return self._set_attribute("title", value)

    def description(self: SchemaT, value: str) -> SchemaT:
        return self._set_attribute("description", value)

    def examples(self: SchemaT, values: list[Any]) -> SchemaT:
        if not is_sequence(values):
            raise FluentSchemaError("'examples' must be an array e.g. ['1', 'one', 'foo']")
        return self._set_attribute("examples", list(values))

    def ref(self: SchemaT, value: str) -> SchemaT:
        return self._set_attribute("$ref", value)

    def enum(self: SchemaT, values: list[Any]) -> SchemaT:
        if not is_sequence(values):
            raise FluentSchemaError(
                "'enum' must be an array with at least an element e.g. ['1', 'one', 'foo']"
            )
        return self._set_attribute("enum", list(values))

    def const(self: SchemaT, value: Any) -> SchemaT:
        return self._set_attribute("const", value)

    def default(self: SchemaT, value: Any) -> SchemaT:
        return self._set_attribute("default", value)

    def read_only(self: SchemaT, flag: bool | None = None) -> SchemaT:
        return self._set_attribute("readOnly", True if flag is None else flag)

    def write_only(self: SchemaT, flag: bool | None = None) -> SchemaT:
        return self._set_attribute("writeOnly", True if flag is None else flag)

    def deprecated(self: SchemaT, flag: bool | None = None) -> SchemaT:
        if flag is not None and not isinstance(flag, bool):
            raise FluentSchemaError("'deprecated' must be a boolean value")
        return self._set_attribute("deprecated", True if flag is None else flag)

    def required(self: SchemaT, names: list[str] | None = None) -> SchemaT:
        """Mark properties as required.

        ``required(["a", "b"])`` appends the given names. A bare ``required()``
        marks the property declared just before it, or, when there is none,
        leaves a marker that the enclosing ``prop()`` turns into its own name.
        """
        state = self._state
        if names is not None:
            if not is_string_sequence(names):
                raise FluentSchemaError("'required' must be an array of property names e.g. ['foo', 'bar']")
            required = (*state.required, *names)
        elif state.properties.last is not None:
            name, _ = state.properties.last
            required = (*state.required, name)
        else:
            required = (*state.required, REQUIRED)

        if not is_unique(required):
            raise FluentSchemaError("'required' has repeated keys, check your calls to .required()")
        return self._derive(state.with_required(required))

    def not_(self: SchemaT, schema: BaseSchema) -> SchemaT:
        if not is_fluent_schema(schema):
            raise FluentSchemaError("'not' must be a BaseSchema")
        not_schema = omit(schema.value_of(), ("$schema", "definitions"))
        return self._derive(
            self._state.with_attributes(
                {
                    "not": patch_ids_with_parent_id(
                        not_schema,
                        parent_id="#not",
                        generate_ids=self._options.generate_ids,
                    )
                }
            )
        )

    def any_of(self: SchemaT, schemas: list[BaseSchema]) -> SchemaT:
        return self._set_compose_type("anyOf", schemas)

    def all_of(self: SchemaT, schemas: list[BaseSchema]) -> SchemaT:
        return self._set_compose_type("allOf", schemas)

    def one_of(self: SchemaT, schemas: list[BaseSchema]) -> SchemaT:
        return self._set_compose_type("oneOf", schemas)

    def if_then(self: SchemaT, if_clause: BaseSchema, then_clause: BaseSchema) -> SchemaT:
        clauses = {
            "if": _clause("ifClause", if_clause),
            "then": _clause("thenClause", then_clause),
        }
        return self._set_conditionals(clauses)

    def if_then_else(
        self: SchemaT,
        if_clause: BaseSchema,
        then_clause: BaseSchema,
        else_clause: BaseSchema,
    ) -> SchemaT:
        clauses = {
            "if": _clause("ifClause", if_clause),
            "then": _clause("thenClause", then_clause),
            "else": _clause("elseClause", else_clause),
        }
        return self._set_conditionals(clauses)

    def raw(self: SchemaT, fragment: Mapping[str, Any]) -> SchemaT:
        """Inject an arbitrary JSON Schema fragment, e.g. OpenAPI's ``nullable``."""
        if not isinstance(fragment, Mapping):
            raise FluentSchemaError("A fragment must be a JSON object")
        fragment = clone(dict(fragment))
        last = self._state.properties.last
        if last is not None:
            name, attributes = last
            return self._put_entry(name, {**attributes, **fragment})
        return self._derive(_absorb(self._state, fragment))

    def value_of(self, *, is_root: bool = True) -> dict[str, Any]:
        state = self._state
        if is_root and not all(isinstance(item, str) for item in state.required):
            raise FluentSchemaError(
                "'required' has called on root-level schema, check your calls to .required()"
            )

        attributes = dict(state.attributes)
        schema_uri = attributes.pop("$schema", None)
        conditionals = {key: attributes.pop(key) for key in ("if", "then", "else") if key in attributes}

        document: dict[str, Any] = {}
        if schema_uri is not None and is_root:
            document["$schema"] = schema_uri
        if state.definitions:
            document["definitions"] = state.definitions.flatten()
        document.update(attributes)
        if state.properties:
            document["properties"] = state.properties.flatten()
        if state.required:
            document["required"] = list(state.required)
        document.update(conditionals)
        return clone(document)

    def _set_attribute(self: SchemaT, key: str, value: Any) -> SchemaT:
        value = clone(value)
        last = self._state.properties.last
        if last is not None:
            name, attributes = last
            return self._put_entry(name, {**attributes, key: value})
        return self._derive(self._state.with_attributes({key: value}))

    def _set_compose_type(self: SchemaT, keyword: str, schemas: Any) -> SchemaT:
        if not (is_sequence(schemas) and all(is_fluent_schema(schema) for schema in schemas)):
            raise FluentSchemaError(
                f"'{keyword}' must be a an array of FluentSchema rather than a '{type(schemas).__name__}'"
            )
        values = [omit(schema.value_of(is_root=False), ("$schema",)) for schema in schemas]
        return self._derive(self._state.with_attributes({keyword: values}))

    def _set_conditionals(self: SchemaT, clauses: dict[str, dict[str, Any]]) -> SchemaT:
        patched = {
            keyword: patch_ids_with_parent_id(
                clause,
                parent_id=f"#{keyword}",
                generate_ids=self._options.generate_ids,
            )
            for keyword, clause in clauses.items()
        }
        return self._derive(self._state.with_attributes(patched))

    def _add_entry(self: SchemaT, name: str, schema: Any, *, target: str) -> SchemaT:
        if not isinstance(name, str) or not name:
            raise FluentSchemaError(f"Property names must be non-empty strings, got {name!r}")
        if schema is None:
            return self._put_entry(name, {}, target=target)
        if is_fluent_schema(schema):
            return self._embed_schema(name, schema, target=target)
        if isinstance(schema, Mapping):
            return self._put_entry(name, clone(dict(schema)), target=target)
        raise FluentSchemaError(f"'{name}' doesn't support value '{schema!r}'. Pass a FluentSchema object")

    def _embed_schema(self: SchemaT, name: str, schema: BaseSchema, *, target: str) -> SchemaT:
        attributes = omit(schema.value_of(is_root=False), ("$schema",))
        state = self._state
        schema_id = attributes.get("$id") or self._generated_id(name, target)

        if target == _PROPERTIES:
            attributes = patch_ids_with_parent_id(
                attributes,
                parent_id=schema_id,
                generate_ids=self._options.generate_ids,
            )
            required, attributes = append_required(state.required, name, attributes)
            state = state.with_required(required)
        elif any(item is REQUIRED for item in attributes.get("required") or []):
            raise FluentSchemaError(
                f"Definition '{name}' has a dangling .required(), chain it after a .prop() call"
            )
        return self._derive(state)._put_entry(name, attributes, target=target)

    def _put_entry(self: SchemaT, name: str, attributes: dict[str, Any], *, target: str = _PROPERTIES) -> SchemaT:
        attributes = omit(attributes, ("$schema",))
        if "$ref" in attributes:
            entry = {"$ref": attributes["$ref"]}
        else:
            if has_combining_keywords(attributes):
                attributes.pop("type", None)
            schema_id = attributes.get("$id") or self._generated_id(name, target)
            if schema_id:
                attributes["$id"] = schema_id
            entry = {
                key: value
                for key, value in attributes.items()
                if not (isinstance(value, list) and not value and key != "default")
            }
        return self._derive(self._state.with_entry(target, name, entry))

    def _generated_id(self, name: str, target: str) -> str | None:
        if not self._options.generate_ids:
            return None
        return f"#{target}/{name}"


def _check_id(value: Any) -> None:
    if not isinstance(value, str) or not value or value == "#":
        raise FluentSchemaError(
            "id should not be an empty fragment <#> or an empty string <> (e.g. #myId)"
        )


def _clause(label: str, schema: Any) -> dict[str, Any]:
    if not is_fluent_schema(schema):
        raise FluentSchemaError(f"'{label}' must be a BaseSchema")
    return omit(schema.value_of(), ("$schema", "definitions", "type"))


def _absorb(state: SchemaState, fragment: dict[str, Any]) -> SchemaState:
    """Merge a raw fragment into the root of ``state``.

    ``properties``/``definitions`` mappings and the ``required`` list are folded
    into the builder's own structures so later keyword calls keep working.
    """
    properties = fragment.pop("properties", None)
    definitions = fragment.pop("definitions", None)
    required = fragment.pop("required", None)

    state = state.with_attributes(fragment)
    for target, entries in ((_PROPERTIES, properties), (_DEFINITIONS, definitions)):
        if entries is not None:
            incoming = NamedEntries.from_mapping(entries, keyword=target)
            state = state.with_entries(target, getattr(state, target).merge(incoming, _replace_entry))
    if required is not None:
        if not is_string_sequence(required):
            raise FluentSchemaError("'required' must be an array of property names e.g. ['foo', 'bar']")
        state = state.with_required(tuple(required))
    return state


def _replace_entry(_: dict[str, Any], incoming: dict[str, Any]) -> dict[str, Any]:
    return clone(incoming)
