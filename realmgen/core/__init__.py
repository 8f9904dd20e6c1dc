from .errors import RealmGenError, SchemaConfigurationError, SchemaIssue, SchemaValidationError
from .field_types import FieldKind, FieldTypeSpec, Language, PlatformPair, lookup
from .properties import InverseRelation, Property, ToManyRelation, ToOneRelation, TypedField
from .schema import CommaPair, Model, Schema, realm_schema, with_commas
from .validation import collect_schema_issues, validate_schema

__all__ = [
    "CommaPair",
    "FieldKind",
    "FieldTypeSpec",
    "InverseRelation",
    "Language",
    "Model",
    "PlatformPair",
    "Property",
    "RealmGenError",
    "Schema",
    "SchemaConfigurationError",
    "SchemaIssue",
    "SchemaValidationError",
    "ToManyRelation",
    "ToOneRelation",
    "TypedField",
    "collect_schema_issues",
    "lookup",
    "realm_schema",
    "validate_schema",
    "with_commas",
]
