from fluent_schema.config.load import load_options
from fluent_schema.config.model import SchemaOptions
from fluent_schema.core.utils import DRAFT_07, FORMATS, REQUIRED, TYPES, FluentSchemaError
from fluent_schema.schema import (
    ArraySchema,
    BaseSchema,
    BooleanSchema,
    IntegerSchema,
    MixedSchema,
    NullSchema,
    NumberSchema,
    ObjectSchema,
    RootSchema,
    S,
    SchemaLoadError,
    StringSchema,
    check_schema,
    dump_schema,
    is_fluent_schema,
    load_schema,
    raw_schema,
    schema_to_json,
)

__version__ = "0.1.0"

__all__ = [
    "DRAFT_07",
    "FORMATS",
    "REQUIRED",
    "TYPES",
    "ArraySchema",
    "BaseSchema",
    "BooleanSchema",
    "FluentSchemaError",
    "IntegerSchema",
    "MixedSchema",
    "NullSchema",
    "NumberSchema",
    "ObjectSchema",
    "RootSchema",
    "S",
    "SchemaLoadError",
    "SchemaOptions",
    "StringSchema",
    "check_schema",
    "dump_schema",
    "is_fluent_schema",
    "load_options",
    "load_schema",
    "raw_schema",
    "schema_to_json",
    "__version__",
]
