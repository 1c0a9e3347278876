from __future__ import annotations

from fluent_schema import S


def test_object_with_required_fields(validator_for) -> None:
    schema = (
        S.object()
        .prop("email", S.string().format("email"))
        .required()
        .prop("age", S.integer().minimum(0))
        .additional_properties(False)
    )
    validator = validator_for(schema.value_of())

    assert validator.is_valid({"email": "a@example.com", "age": 3})
    assert not validator.is_valid({"age": 3})
    assert not validator.is_valid({"email": "a@example.com", "age": -1})


def test_additional_properties_on_the_root(validator_for) -> None:
    schema = S.object().additional_properties(False).prop("a", S.string())
    validator = validator_for(schema.value_of())

    assert validator.is_valid({"a": "x"})
    assert not validator.is_valid({"a": "x", "b": 1})


def test_if_then(validator_for) -> None:
    schema = (
        S.object()
        .prop("prop", S.string())
        .if_then(
            S.object().prop("prop", S.string().max_length(5)),
            S.object().prop("extraProp", S.string()).required(),
        )
    )
    validator = validator_for(schema.value_of())

    assert validator.is_valid({"prop": "toolongvalue"})
    assert validator.is_valid({"prop": "abc", "extraProp": "x"})
    assert not validator.is_valid({"prop": "abc"})


def test_if_then_else(validator_for) -> None:
    schema = S.object().if_then_else(
        S.object().prop("kind", S.string().const("a")),
        S.object().prop("a", S.string()).required(),
        S.object().prop("b", S.string()).required(),
    )
    validator = validator_for(schema.value_of())

    assert validator.is_valid({"kind": "a", "a": "x"})
    assert not validator.is_valid({"kind": "a"})
    assert validator.is_valid({"kind": "z", "b": "y"})
    assert not validator.is_valid({"kind": "z"})


def test_composition_keywords(validator_for) -> None:
    any_of = validator_for(S.object().prop("v", S.any_of([S.string(), S.integer()])).value_of())
    assert any_of.is_valid({"v": "x"})
    assert any_of.is_valid({"v": 1})
    assert not any_of.is_valid({"v": 1.5})

    one_of = validator_for(S.one_of([S.integer(), S.number()]).value_of())
    assert one_of.is_valid(1.5)
    assert not one_of.is_valid(1)

    all_of = validator_for(S.all_of([S.string().min_length(2), S.string().max_length(3)]).value_of())
    assert all_of.is_valid("abc")
    assert not all_of.is_valid("abcd")

    not_ = validator_for(S.not_(S.string()).value_of())
    assert not_.is_valid(1)
    assert not not_.is_valid("x")


def test_definitions_and_refs(validator_for) -> None:
    schema = (
        S.object()
        .definition("address", S.object().prop("city", S.string()).required())
        .prop("home", S.ref("#/definitions/address"))
        .prop("work", S.ref("#/definitions/address"))
        .required()
    )
    validator = validator_for(schema.value_of())

    assert validator.is_valid({"home": {"city": "Rome"}, "work": {"city": "Milan"}})
    assert not validator.is_valid({"home": {}, "work": {"city": "Milan"}})
    assert not validator.is_valid({"home": {"city": "Rome"}})


def test_extended_schema(validator_for) -> None:
    base = S.object().prop("id", S.integer()).required()
    schema = S.object().prop("name", S.string()).required().extend(base)
    validator = validator_for(schema.value_of())

    assert validator.is_valid({"id": 1, "name": "x"})
    assert not validator.is_valid({"name": "x"})
    assert not validator.is_valid({"id": "1", "name": "x"})


def test_arrays_and_mixed(validator_for) -> None:
    schema = S.object().prop(
        "values",
        S.array().items(S.mixed(["string", "null"])).min_items(1).unique_items(True),
    )
    validator = validator_for(schema.value_of())

    assert validator.is_valid({"values": ["a", None]})
    assert not validator.is_valid({"values": []})
    assert not validator.is_valid({"values": ["a", "a"]})
    assert not validator.is_valid({"values": [1]})
