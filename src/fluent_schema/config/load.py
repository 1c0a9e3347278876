from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from pydantic import ValidationError

from fluent_schema.core.utils import FluentSchemaError

from .model import SchemaOptions

DEFAULT_OPTIONS = SchemaOptions()


def load_options(options: SchemaOptions | Mapping[str, Any] | None = None, **overrides: Any) -> SchemaOptions:
    if isinstance(options, SchemaOptions) and not overrides:
        return options
    if options is None:
        data: dict[str, Any] = {}
    elif isinstance(options, SchemaOptions):
        data = options.model_dump()
    elif isinstance(options, Mapping):
        data = dict(options)
    else:
        raise FluentSchemaError("Options must be a mapping e.g. {'generateIds': True}")
    data.update(overrides)
    if not data:
        return DEFAULT_OPTIONS
    try:
        return SchemaOptions.model_validate(data)
    except ValidationError as exc:
        raise FluentSchemaError(f"Invalid options: {exc}") from exc
