from .config import GeneratorSettings, load_settings
from .core import (
    FieldKind,
    InverseRelation,
    Language,
    Model,
    PlatformPair,
    RealmGenError,
    Schema,
    SchemaConfigurationError,
    SchemaValidationError,
    ToManyRelation,
    ToOneRelation,
    TypedField,
    realm_schema,
)
from .generators import render_schema, write_schema, write_schema_file

__all__ = [
    "FieldKind",
    "GeneratorSettings",
    "InverseRelation",
    "Language",
    "Model",
    "PlatformPair",
    "RealmGenError",
    "Schema",
    "SchemaConfigurationError",
    "SchemaValidationError",
    "ToManyRelation",
    "ToOneRelation",
    "TypedField",
    "load_settings",
    "realm_schema",
    "render_schema",
    "write_schema",
    "write_schema_file",
]
