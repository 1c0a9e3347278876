from .array import ArraySchema
from .base import BaseSchema, is_fluent_schema
from .document import SchemaLoadError, check_schema, dump_schema, load_schema, schema_to_json
from .factory import RootSchema, S
from .mixed import MixedSchema, mixed_schema
from .number import IntegerSchema, NumberSchema
from .object import ObjectSchema
from .raw import raw_schema
from .scalar import BooleanSchema, NullSchema
from .string import StringSchema

__all__ = [
    "ArraySchema",
    "BaseSchema",
    "BooleanSchema",
    "IntegerSchema",
    "MixedSchema",
    "NullSchema",
    "NumberSchema",
    "ObjectSchema",
    "RootSchema",
    "S",
    "SchemaLoadError",
    "StringSchema",
    "check_schema",
    "dump_schema",
    "is_fluent_schema",
    "load_schema",
    "mixed_schema",
    "raw_schema",
    "schema_to_json",
]
