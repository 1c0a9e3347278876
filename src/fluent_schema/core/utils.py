from __future__ import annotations

import copy
from collections.abc import Mapping
from typing import Any

DRAFT_07 = "http://json-schema.org/draft-07/schema#"

RELATIVE_JSON_POINTER = "relative-json-pointer"
JSON_POINTER = "json-pointer"
UUID = "uuid"
REGEX = "regex"
IPV6 = "ipv6"
IPV4 = "ipv4"
HOSTNAME = "hostname"
EMAIL = "email"
URL = "url"
URI_TEMPLATE = "uri-template"
URI_REFERENCE = "uri-reference"
URI = "uri"
TIME = "time"
DATE = "date"
DATE_TIME = "date-time"

FORMATS = frozenset(
    {
        RELATIVE_JSON_POINTER,
        JSON_POINTER,
        UUID,
        REGEX,
        IPV6,
        IPV4,
        HOSTNAME,
        EMAIL,
        URL,
        URI_TEMPLATE,
        URI_REFERENCE,
        URI,
        TIME,
        DATE,
        DATE_TIME,
    }
)

STRING = "string"
NUMBER = "number"
BOOLEAN = "boolean"
INTEGER = "integer"
OBJECT = "object"
ARRAY = "array"
NULL = "null"

TYPES = (STRING, NUMBER, BOOLEAN, INTEGER, OBJECT, ARRAY, NULL)

_COMBINING_KEYWORDS = ("allOf", "anyOf", "oneOf", "not")


class FluentSchemaError(ValueError):
    pass


class _RequiredMarker:
    """Stands for "the most recently declared property" inside a required list."""

    __slots__ = ()

    def __repr__(self) -> str:
        return "REQUIRED"

    def __copy__(self) -> _RequiredMarker:
        return self

    def __deepcopy__(self, memo: dict[int, Any]) -> _RequiredMarker:
        return self

    def __reduce__(self) -> str:
        return "REQUIRED"


REQUIRED = _RequiredMarker()


def is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def is_integer(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def is_sequence(value: Any) -> bool:
    return isinstance(value, (list, tuple))


def is_string_sequence(value: Any) -> bool:
    return is_sequence(value) and all(isinstance(item, str) for item in value)


def is_unique(values: Any) -> bool:
    seen: list[Any] = []
    for value in values:
        if value in seen:
            return False
        seen.append(value)
    return True


def has_combining_keywords(attributes: Mapping[str, Any]) -> bool:
    return any(attributes.get(key) for key in _COMBINING_KEYWORDS)


def omit(mapping: Mapping[str, Any], keys: tuple[str, ...]) -> dict[str, Any]:
    return {key: value for key, value in mapping.items() if key not in keys}


def clone(value: Any) -> Any:
    return copy.deepcopy(value)


def deep_merge(base: Any, incoming: Any) -> Any:
    if isinstance(base, dict) and isinstance(incoming, dict):
        merged = clone(base)
        for key, value in incoming.items():
            if key in merged:
                merged[key] = deep_merge(merged[key], value)
            else:
                merged[key] = clone(value)
        return merged
    if isinstance(base, list) and isinstance(incoming, list):
        return merge_lists(base, incoming)
    return clone(incoming)


def merge_lists(base: list[Any], incoming: list[Any]) -> list[Any]:
    """Merge two lists, matching dict items that carry a ``name`` by that name.

    Matching named items are deep merged in place, everything else from
    ``incoming`` is appended unless an equal item is already present.
    """
    merged = clone(base)
    for item in incoming:
        if isinstance(item, dict) and "name" in item:
            index = next(
                (
                    position
                    for position, existing in enumerate(merged)
                    if isinstance(existing, dict) and existing.get("name") == item["name"]
                ),
                None,
            )
            if index is not None:
                merged[index] = deep_merge(merged[index], item)
                continue
        if item not in merged:
            merged.append(clone(item))
    return merged


def patch_ids_with_parent_id(
    schema: dict[str, Any],
    *,
    parent_id: str | None,
    generate_ids: bool,
) -> dict[str, Any]:
    """Re-root the auto-generated ``$id`` of nested properties under ``parent_id``.

    Ids of the ``#properties/<name>`` form, or missing ids, become
    ``<parent_id>/properties/<name>``. Any other id was set explicitly and is
    kept together with its subtree.
    """
    properties = schema.get("properties")
    if not generate_ids or not parent_id or not isinstance(properties, dict) or not properties:
        return schema

    patched: dict[str, Any] = {}
    for key, child in properties.items():
        if not isinstance(child, dict) or "$ref" in child:
            patched[key] = child
            continue
        child_id = child.get("$id")
        if isinstance(child_id, str) and child_id and not child_id.startswith("#properties/"):
            patched[key] = child
            continue
        child_id = f"{parent_id}/properties/{key}"
        patched[key] = patch_ids_with_parent_id(
            {**child, "$id": child_id},
            parent_id=child_id,
            generate_ids=generate_ids,
        )
    return {**schema, "properties": patched}


def append_required(
    required: tuple[Any, ...],
    name: str,
    attributes: dict[str, Any],
) -> tuple[tuple[Any, ...], dict[str, Any]]:
    nested = attributes.get("required") or []
    promoted = [name for item in nested if item is REQUIRED]
    remaining = [item for item in nested if item is not REQUIRED]

    patched_required = (*required, *promoted)
    if not is_unique(patched_required):
        raise FluentSchemaError("'required' has repeated keys, check your calls to .required()")

    patched_attributes = omit(attributes, ("required",))
    if remaining:
        patched_attributes["required"] = remaining
    return patched_required, patched_attributes
