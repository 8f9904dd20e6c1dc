"""Field kinds and the per-platform type catalog.

Every abstract field kind maps to a (Swift, Kotlin) type name and a
(Swift, Kotlin) default literal. The table is closed: `lookup()` never fails
for a `FieldKind` member.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Dict, Generic, List, TypeVar

from pydantic import BaseModel

T = TypeVar("T")


@dataclass(frozen=True)
class PlatformPair(Generic[T]):
    ios: T
    android: T

    @classmethod
    def both(cls, value: T) -> "PlatformPair[T]":
        return cls(ios=value, android=value)

    def for_language(self, language: "Language") -> T:
        return self.ios if language.is_ios else self.android


class Language(str, Enum):
    SWIFT = "swift"
    KOTLIN = "kotlin"

    @property
    def file_name(self) -> str:
        return _TEMPLATE_FILES[self]

    @property
    def is_ios(self) -> bool:
        return self is Language.SWIFT


_TEMPLATE_FILES: Dict[Language, str] = {
    Language.SWIFT: "swift.j2",
    Language.KOTLIN: "kotlin.j2",
}


class FieldKind(str, Enum):
    STRING = "string"
    INT32 = "int32"
    INT64 = "int64"
    BOOL = "bool"
    FLOAT32 = "float32"
    FLOAT64 = "float64"
    DATE = "date"
    BINARY = "binary"


# Null literal per platform, used for optional object-like fields.
NULL_LITERAL: PlatformPair[str] = PlatformPair(ios="nil", android="null")


class FieldTypeSpec(BaseModel):
    kind: FieldKind
    ios_type: str
    android_type: str
    ios_default: str
    android_default: str
    # String/Date/Binary are stored as nullable objects on both platforms;
    # numbers and bools need a wrapper on iOS to become optional.
    nullable_object: bool = False

    model_config = {"frozen": True}

    @property
    def type_name(self) -> PlatformPair[str]:
        return PlatformPair(ios=self.ios_type, android=self.android_type)

    @property
    def default_value(self) -> PlatformPair[str]:
        return PlatformPair(ios=self.ios_default, android=self.android_default)


def builtin_field_types() -> List[FieldTypeSpec]:
    return [
        FieldTypeSpec(
            kind=FieldKind.STRING,
            ios_type="String",
            android_type="String",
            ios_default='""',
            android_default='""',
            nullable_object=True,
        ),
        FieldTypeSpec(
            kind=FieldKind.INT32,
            ios_type="Int32",
            android_type="Int",
            ios_default="0",
            android_default="0",
        ),
        FieldTypeSpec(
            kind=FieldKind.INT64,
            ios_type="Int64",
            android_type="Long",
            ios_default="0",
            android_default="0L",
        ),
        FieldTypeSpec(
            kind=FieldKind.BOOL,
            ios_type="Bool",
            android_type="Boolean",
            ios_default="false",
            android_default="false",
        ),
        FieldTypeSpec(
            kind=FieldKind.FLOAT32,
            ios_type="Float",
            android_type="Float",
            ios_default="0.0",
            android_default="0.0f",
        ),
        FieldTypeSpec(
            kind=FieldKind.FLOAT64,
            ios_type="Double",
            android_type="Double",
            ios_default="0.0",
            android_default="0.0",
        ),
        FieldTypeSpec(
            kind=FieldKind.DATE,
            ios_type="Date",
            android_type="Date",
            ios_default="Date()",
            android_default="Date()",
            nullable_object=True,
        ),
        FieldTypeSpec(
            kind=FieldKind.BINARY,
            ios_type="Data",
            android_type="ByteArray",
            ios_default="Data()",
            android_default="byteArrayOf()",
            nullable_object=True,
        ),
    ]


_CATALOG: Dict[FieldKind, FieldTypeSpec] = {spec.kind: spec for spec in builtin_field_types()}


def lookup(kind: FieldKind) -> FieldTypeSpec:
    return _CATALOG[FieldKind(kind)]
