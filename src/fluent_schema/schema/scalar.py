from __future__ import annotations

from fluent_schema.core.utils import BOOLEAN, NULL

from .base import BaseSchema, SchemaT


class BooleanSchema(BaseSchema):
    TYPE = BOOLEAN


class NullSchema(BaseSchema):
    TYPE = NULL

    def null(self: SchemaT) -> SchemaT:
        return self._set_attribute("type", NULL)
