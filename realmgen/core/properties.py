from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Union

from .field_types import NULL_LITERAL, FieldKind, Language, PlatformPair, lookup

if TYPE_CHECKING:
    from .schema import Model


PRIMARY_KEY_ANNOTATION = "@PrimaryKey "


class BaseProperty(ABC):
    """Shared capability flags; each variant overrides what applies to it."""

    is_relation = False
    is_list_relation = False
    is_linking_objects = False
    indexed = False

    @property
    def primary_key_annotation(self) -> str:
        return ""

    @abstractmethod
    def rendered_declaration(self) -> PlatformPair[str]:
        ...

    def declaration(self, language: Language) -> str:
        return self.rendered_declaration().for_language(Language(language))


@dataclass(eq=False)
class TypedField(BaseProperty):
    model: "Model" = field(repr=False)
    name: str
    kind: FieldKind
    required: bool = False
    indexed: bool = False

    @property
    def is_primary_key(self) -> bool:
        return self.model.primary_key is self

    @property
    def primary_key_annotation(self) -> str:
        return PRIMARY_KEY_ANNOTATION if self.is_primary_key else ""

    def rendered_declaration(self) -> PlatformPair[str]:
        spec = lookup(self.kind)
        type_name = spec.type_name
        optional_marker = "" if self.required else "?"

        if spec.nullable_object:
            default = spec.default_value if self.required else NULL_LITERAL
            ios = f"@objc dynamic var {self.name}: {type_name.ios}{optional_marker} = {default.ios}"
            android = f"var {self.name}: {type_name.android}{optional_marker} = {default.android}"
        elif self.required:
            default = spec.default_value
            ios = f"@objc dynamic var {self.name}: {type_name.ios} = {default.ios}"
            android = f"var {self.name}: {type_name.android} = {default.android}"
        else:
            # iOS has no optional primitives on Realm objects; wrap them.
            ios = f"let {self.name} = RealmOptional<{type_name.ios}>()"
            android = f"var {self.name}: {type_name.android}? = {NULL_LITERAL.android}"

        return PlatformPair(ios=ios, android=f"{self.primary_key_annotation}{android}")


@dataclass(eq=False)
class ToOneRelation(BaseProperty):
    model: "Model" = field(repr=False)
    name: str
    target: "Model" = field(repr=False)

    is_relation = True

    def rendered_declaration(self) -> PlatformPair[str]:
        target = self.target.name
        return PlatformPair(
            ios=f"@objc dynamic var {self.name}: {target}? = {NULL_LITERAL.ios}",
            android=f"var {self.name}: {target}? = {NULL_LITERAL.android}",
        )


@dataclass(eq=False)
class ToManyRelation(BaseProperty):
    model: "Model" = field(repr=False)
    name: str
    target: "Model" = field(repr=False)

    is_relation = True
    is_list_relation = True

    def rendered_declaration(self) -> PlatformPair[str]:
        target = self.target.name
        return PlatformPair(
            ios=f"let {self.name} = List<{target}>()",
            android=f"val {self.name}: RealmList<{target}> = RealmList()",
        )


@dataclass(eq=False)
class InverseRelation(BaseProperty):
    """Read-only backlink living on the model a forward relation points to.

    `model` owns this property, `target` is the model that declares the
    forward relation and `property` is that forward relation.
    """

    model: "Model" = field(repr=False)
    name: str
    target: "Model" = field(repr=False)
    property: Union[ToOneRelation, ToManyRelation] = field(repr=False)
    is_private: bool = False

    is_linking_objects = True

    def rendered_declaration(self) -> PlatformPair[str]:
        private_modifier = "private " if self.is_private else ""
        target = self.target.name
        forward = self.property.name
        return PlatformPair(
            ios=f'{private_modifier}let {self.name} = LinkingObjects(fromType: {target}.self, property: "{forward}")',
            android=f'@LinkingObjects("{forward}") {private_modifier}val {self.name}: RealmResults<{target}>? = null',
        )


Property = Union[TypedField, ToOneRelation, ToManyRelation, InverseRelation]
