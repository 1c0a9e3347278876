from __future__ import annotations

import io
import json
import logging
from pathlib import Path
from typing import Any

from jsonschema import Draft7Validator
from jsonschema.exceptions import SchemaError
from ruamel.yaml import YAML
from ruamel.yaml.error import YAMLError

from fluent_schema.config.model import SchemaOptions
from fluent_schema.core.utils import FluentSchemaError

from .base import BaseSchema, is_fluent_schema
from .raw import raw_schema

logger = logging.getLogger(__name__)

_YAML_SUFFIXES = {".yaml", ".yml"}

_yaml = YAML(typ="safe")


class SchemaLoadError(FluentSchemaError):
    pass


def check_schema(schema: BaseSchema | dict[str, Any]) -> dict[str, Any]:
    document = _as_document(schema)
    try:
        Draft7Validator.check_schema(document)
    except SchemaError as exc:
        raise SchemaLoadError(f"Schema is not valid: {exc.message}") from exc
    return document


def schema_to_json(schema: BaseSchema | dict[str, Any]) -> str:
    payload = json.dumps(_as_document(schema), indent=2, ensure_ascii=False)
    return f"{payload}\n"


def load_schema(path: Path, *, options: SchemaOptions | None = None) -> BaseSchema:
    if not path.exists():
        raise SchemaLoadError(f"Schema not found: {path}")
    document = _read_document(path)
    check_schema(document)
    logger.debug("Loaded schema document %s", path)
    return raw_schema(document, options)


def dump_schema(schema: BaseSchema | dict[str, Any], path: Path) -> Path:
    document = check_schema(schema)
    path.parent.mkdir(parents=True, exist_ok=True)
    if path.suffix.lower() in _YAML_SUFFIXES:
        buffer = io.StringIO()
        _dump_yaml().dump(document, buffer)
        path.write_text(buffer.getvalue(), encoding="utf-8")
    else:
        path.write_text(schema_to_json(document), encoding="utf-8")
    logger.debug("Wrote schema document %s", path)
    return path


def _as_document(schema: Any) -> dict[str, Any]:
    if is_fluent_schema(schema):
        return schema.value_of()
    if isinstance(schema, dict):
        return schema
    raise SchemaLoadError("Schema must be a FluentSchema or a JSON object.")


def _dump_yaml() -> YAML:
    # round-trip dumper keeps keyword order
    yaml = YAML()
    yaml.default_flow_style = False
    return yaml


def _read_document(path: Path) -> dict[str, Any]:
    fmt = "YAML" if path.suffix.lower() in _YAML_SUFFIXES else "JSON"
    text = path.read_text(encoding="utf-8")
    try:
        parsed = _yaml.load(text) if fmt == "YAML" else json.loads(text)
    except (YAMLError, json.JSONDecodeError) as exc:
        raise SchemaLoadError(f"Schema document {path} is not valid {fmt}: {exc}") from exc
    if not isinstance(parsed, dict):
        raise SchemaLoadError(
            f"Schema document {path} must hold a JSON Schema object, got {type(parsed).__name__}"
        )
    return parsed
