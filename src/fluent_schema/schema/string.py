from __future__ import annotations

import re
from typing import Any

from fluent_schema.core.utils import FORMATS, STRING, FluentSchemaError, is_integer

from .base import BaseSchema, SchemaT


class StringSchema(BaseSchema):
    TYPE = STRING

    def min_length(self: SchemaT, value: int) -> SchemaT:
        if not is_integer(value):
            raise FluentSchemaError("'minLength' must be an Integer")
        return self._set_attribute("minLength", value)

    def max_length(self: SchemaT, value: int) -> SchemaT:
        if not is_integer(value):
            raise FluentSchemaError("'maxLength' must be an Integer")
        return self._set_attribute("maxLength", value)

    def format(self: SchemaT, value: str) -> SchemaT:
        if not isinstance(value, str) or value not in FORMATS:
            allowed = ", ".join(sorted(FORMATS))
            raise FluentSchemaError(f"'format' must be one of {allowed}")
        return self._set_attribute("format", value)

    def pattern(self: SchemaT, value: str | re.Pattern[str]) -> SchemaT:
        # compiled patterns carry no delimiters, only the source and flags
        if isinstance(value, re.Pattern) and isinstance(value.pattern, str):
            value = value.pattern
        if not isinstance(value, str):
            raise FluentSchemaError("'pattern' must be a string or a RegEx (e.g. re.compile('.*'))")
        return self._set_attribute("pattern", value)

    def content_encoding(self: SchemaT, value: str) -> SchemaT:
        return self._set_attribute("contentEncoding", _require_str("contentEncoding", value))

    def content_media_type(self: SchemaT, value: str) -> SchemaT:
        return self._set_attribute("contentMediaType", _require_str("contentMediaType", value))


def _require_str(keyword: str, value: Any) -> str:
    if not isinstance(value, str):
        raise FluentSchemaError(f"'{keyword}' must be a string")
    return value
