from __future__ import annotations

import pytest

from fluent_schema import DRAFT_07, ArraySchema, FluentSchemaError, S


def test_array_keywords() -> None:
    schema = (
        S.array()
        .items(S.string())
        .additional_items(False)
        .contains(S.string().const("x"))
        .unique_items(True)
        .min_items(1)
        .max_items(3)
    )
    assert isinstance(schema, ArraySchema)
    assert schema.value_of() == {
        "$schema": DRAFT_07,
        "type": "array",
        "items": {"type": "string"},
        "additionalItems": False,
        "contains": {"type": "string", "const": "x"},
        "uniqueItems": True,
        "minItems": 1,
        "maxItems": 3,
    }


def test_tuple_items() -> None:
    schema = S.array().items([S.string(), S.integer()]).additional_items(S.boolean())
    assert schema.value_of(is_root=False) == {
        "type": "array",
        "items": [{"type": "string"}, {"type": "integer"}],
        "additionalItems": {"type": "boolean"},
    }


@pytest.mark.parametrize("value", [[], "string", [{"type": "string"}], None])
def test_items_requires_builders(value: object) -> None:
    with pytest.raises(FluentSchemaError, match="'items' must be a S or an array of S"):
        S.array().items(value)  # type: ignore[arg-type]


def test_additional_items_and_contains_validation() -> None:
    with pytest.raises(FluentSchemaError, match="'additionalItems' must be a boolean or a S"):
        S.array().additional_items("no")  # type: ignore[arg-type]
    with pytest.raises(FluentSchemaError, match="'contains' must be a S"):
        S.array().contains({"type": "string"})  # type: ignore[arg-type]


def test_contains_drops_object_structure() -> None:
    schema = S.array().contains(
        S.object().definition("d", S.string()).prop("a", S.string()).required()
    )
    assert schema.value_of()["contains"] == {"type": "object"}


def test_unique_and_bounds_validation() -> None:
    with pytest.raises(FluentSchemaError, match="'uniqueItems' must be a boolean"):
        S.array().unique_items("true")  # type: ignore[arg-type]
    with pytest.raises(FluentSchemaError, match="'minItems' must be a integer"):
        S.array().min_items(1.5)  # type: ignore[arg-type]
    with pytest.raises(FluentSchemaError, match="'maxItems' must be a integer"):
        S.array().max_items("3")  # type: ignore[arg-type]


def test_array_of_objects_keeps_nested_required() -> None:
    item = S.object().prop("id", S.integer()).required()
    schema = S.object().prop("rows", S.array().items(item))
    assert schema.value_of()["properties"]["rows"] == {
        "type": "array",
        "items": {
            "type": "object",
            "properties": {"id": {"type": "integer"}},
            "required": ["id"],
        },
    }
