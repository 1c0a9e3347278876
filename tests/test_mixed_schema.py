from __future__ import annotations

import pytest

from fluent_schema import (
    DRAFT_07,
    ArraySchema,
    FluentSchemaError,
    MixedSchema,
    NumberSchema,
    ObjectSchema,
    S,
    StringSchema,
)


def test_mixed_combines_keyword_sets() -> None:
    schema = S.mixed(["string", "number"]).min_length(1).minimum(0)
    assert isinstance(schema, MixedSchema)
    assert isinstance(schema, StringSchema)
    assert isinstance(schema, NumberSchema)
    assert not isinstance(schema, ObjectSchema)
    assert schema.value_of() == {
        "$schema": DRAFT_07,
        "type": ["string", "number"],
        "minLength": 1,
        "minimum": 0,
    }


def test_mixed_object_keeps_object_keywords() -> None:
    schema = S.mixed(["object", "null"]).prop("a", S.string()).required().id("#nullable")
    assert isinstance(schema, ObjectSchema)
    assert schema.value_of() == {
        "$schema": DRAFT_07,
        "type": ["object", "null"],
        "$id": "#nullable",
        "properties": {"a": {"type": "string"}},
        "required": ["a"],
    }


def test_mixed_only_exposes_listed_keywords() -> None:
    schema = S.mixed(["string", "null"])
    assert hasattr(schema, "null")
    assert not hasattr(schema, "prop")
    assert not hasattr(schema, "items")
    assert isinstance(S.mixed(["array", "boolean"]), ArraySchema)


def test_mixed_classes_are_reused() -> None:
    assert type(S.mixed(["string", "null"])) is type(S.mixed(["string", "null"]))
    assert type(S.mixed(["string", "null"])) is not type(S.mixed(["null", "string"]))


def test_mixed_integer_does_not_enforce_integers() -> None:
    assert S.mixed(["integer", "string"]).minimum(1.5).value_of()["minimum"] == 1.5


def test_mixed_as_property() -> None:
    schema = S.object().prop("value", S.mixed(["string", "integer"]).max_length(3))
    assert schema.value_of()["properties"] == {
        "value": {"type": ["string", "integer"], "maxLength": 3},
    }


@pytest.mark.parametrize("types", ["string", ["string", "date"], None, [1]])
def test_mixed_rejects_invalid_types(types: object) -> None:
    with pytest.raises(FluentSchemaError, match="Invalid 'types'"):
        S.mixed(types)  # type: ignore[arg-type]
