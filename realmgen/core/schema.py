from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import IO, Callable, Dict, Generic, Iterable, List, Optional, Type, TypeVar, Union

from .errors import SchemaConfigurationError
from .field_types import FieldKind, Language
from .properties import InverseRelation, Property, ToManyRelation, ToOneRelation, TypedField

_log = logging.getLogger("realmgen.schema")

T = TypeVar("T")
R = TypeVar("R", ToOneRelation, ToManyRelation)


@dataclass(frozen=True)
class CommaPair(Generic[T]):
    data: T
    comma: Optional[str] = None


def with_commas(items: Iterable[T]) -> List[CommaPair[T]]:
    """Pair every item with "," except the last one."""
    items = list(items)
    last = len(items) - 1
    return [CommaPair(item, "," if i != last else None) for i, item in enumerate(items)]


class Model:
    def __init__(self, schema: "Schema", name: str):
        self.schema = schema
        self.name = name
        self.properties: List[Property] = []
        self.primary_key: Optional[TypedField] = None

    def __repr__(self) -> str:
        return f"Model(name={self.name!r}, properties={[p.name for p in self.properties]!r})"

    # --- typed fields ---

    def field(
        self,
        name: str,
        kind: FieldKind,
        *,
        required: bool = False,
        indexed: bool = False,
        primary_key: bool = False,
    ) -> TypedField:
        prop = TypedField(model=self, name=name, kind=FieldKind(kind), required=required, indexed=indexed)
        self.properties.append(prop)
        if primary_key:
            self.primary_key = prop
        return prop

    def string(self, name: str, **options) -> TypedField:
        return self.field(name, FieldKind.STRING, **options)

    def int(self, name: str, **options) -> TypedField:
        return self.field(name, FieldKind.INT32, **options)

    def long(self, name: str, **options) -> TypedField:
        return self.field(name, FieldKind.INT64, **options)

    def bool(self, name: str, **options) -> TypedField:
        return self.field(name, FieldKind.BOOL, **options)

    def float(self, name: str, **options) -> TypedField:
        return self.field(name, FieldKind.FLOAT32, **options)

    def double(self, name: str, **options) -> TypedField:
        # Generated code has always used Float here; use field(..., FLOAT64) for Double.
        return self.field(name, FieldKind.FLOAT32, **options)

    def date(self, name: str, **options) -> TypedField:
        return self.field(name, FieldKind.DATE, **options)

    def data(self, name: str, **options) -> TypedField:
        return self.field(name, FieldKind.BINARY, **options)

    # --- relations ---

    def obj(
        self,
        name: str,
        target: "Model",
        *,
        create_linking_objects: bool = False,
        linking_objects_name: Optional[str] = None,
        linking_objects_is_private: bool = False,
    ) -> ToOneRelation:
        return self._add_relation(
            ToOneRelation,
            name,
            target,
            create_linking_objects=create_linking_objects,
            linking_objects_name=linking_objects_name,
            linking_objects_is_private=linking_objects_is_private,
        )

    def list(
        self,
        name: str,
        target: "Model",
        *,
        create_linking_objects: bool = False,
        linking_objects_name: Optional[str] = None,
        linking_objects_is_private: bool = False,
    ) -> ToManyRelation:
        return self._add_relation(
            ToManyRelation,
            name,
            target,
            create_linking_objects=create_linking_objects,
            linking_objects_name=linking_objects_name,
            linking_objects_is_private=linking_objects_is_private,
        )

    def linking_objects(
        self,
        name: str,
        source: "Model",
        property: Union[ToOneRelation, ToManyRelation],
        *,
        is_private: bool = False,
    ) -> InverseRelation:
        """Declare a backlink on this model for `property`, which lives on `source`."""
        inverse = InverseRelation(model=self, name=name, target=source, property=property, is_private=is_private)
        self.properties.append(inverse)
        return inverse

    def _add_relation(
        self,
        relation_cls: Type[R],
        name: str,
        target: "Model",
        *,
        create_linking_objects: bool,
        linking_objects_name: Optional[str],
        linking_objects_is_private: bool,
    ) -> R:
        if create_linking_objects and not linking_objects_name:
            raise SchemaConfigurationError(
                f"{self.name}.{name}: linking_objects_name is required when create_linking_objects is set"
            )

        relation = relation_cls(model=self, name=name, target=target)
        self.properties.append(relation)

        if create_linking_objects:
            target.linking_objects(
                linking_objects_name,
                self,
                relation,
                is_private=linking_objects_is_private,
            )
            _log.debug(
                "linking objects %s.%s -> %s.%s",
                target.name,
                linking_objects_name,
                self.name,
                name,
            )
        return relation

    # --- template views ---

    @property
    def property_and_comma(self) -> List[CommaPair[Property]]:
        return with_commas(self.properties)

    @property
    def indexed_property_names(self) -> List[str]:
        return [p.name for p in self.properties if p.indexed]

    @property
    def has_indexed_properties(self) -> bool:
        return any(p.indexed for p in self.properties)

    @property
    def indexed_property_and_comma(self) -> List[CommaPair[str]]:
        return with_commas(self.indexed_property_names)

    @property
    def has_linking_objects(self) -> bool:
        return any(p.is_linking_objects for p in self.properties)

    @property
    def has_list_relations(self) -> bool:
        return any(p.is_list_relation for p in self.properties)

    def uses_kind(self, kind: FieldKind) -> bool:
        kind = FieldKind(kind)
        return any(isinstance(p, TypedField) and p.kind is kind for p in self.properties)

    def property(self, name: str) -> Optional[Property]:
        for p in self.properties:
            if p.name == name:
                return p
        return None


class Schema:
    def __init__(self, package_name: str = "", module_name: Optional[str] = None):
        self.package_name = package_name
        self.module_name = module_name
        self.models: List[Model] = []

    def __repr__(self) -> str:
        return f"Schema(package_name={self.package_name!r}, models={[m.name for m in self.models]!r})"

    def model(self, name: str, build: Optional[Callable[[Model], None]] = None) -> Model:
        model = Model(self, name)
        self.models.append(model)
        if build is not None:
            build(model)
        return model

    def get_model(self, name: str) -> Optional[Model]:
        for m in self.models:
            if m.name == name:
                return m
        return None

    @property
    def model_and_comma(self) -> List[CommaPair[Model]]:
        return with_commas(self.models)

    def uses_kind(self, kind: FieldKind) -> bool:
        return any(m.uses_kind(kind) for m in self.models)

    @property
    def has_linking_objects(self) -> bool:
        return any(m.has_linking_objects for m in self.models)

    @property
    def has_list_relations(self) -> bool:
        return any(m.has_list_relations for m in self.models)

    @property
    def has_indexed_properties(self) -> bool:
        return any(m.has_indexed_properties for m in self.models)

    @property
    def has_primary_keys(self) -> bool:
        return any(m.primary_key is not None for m in self.models)

    def validate(self) -> None:
        from .validation import validate_schema

        validate_schema(self)

    def render(
        self,
        language: Language,
        template: Optional[str] = None,
        helpers: Optional[Dict[str, Callable[[str], str]]] = None,
        settings=None,
    ) -> str:
        from realmgen.generators.renderer import render_schema

        return render_schema(self, language, template=template, helpers=helpers, settings=settings)

    def write_to(
        self,
        writer: IO[str],
        language: Language,
        template: Optional[str] = None,
        helpers: Optional[Dict[str, Callable[[str], str]]] = None,
        settings=None,
    ) -> None:
        from realmgen.generators.renderer import write_schema

        write_schema(self, writer, language, template=template, helpers=helpers, settings=settings)


def realm_schema(
    package_name: str = "",
    *,
    module_name: Optional[str] = None,
    build: Optional[Callable[[Schema], None]] = None,
) -> Schema:
    schema = Schema(package_name=package_name, module_name=module_name)
    if build is not None:
        build(schema)
    return schema
