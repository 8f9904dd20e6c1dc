from __future__ import annotations

import logging
from collections import Counter
from typing import TYPE_CHECKING, List

from .errors import SchemaIssue, SchemaValidationError
from .properties import InverseRelation, ToManyRelation, ToOneRelation, TypedField

if TYPE_CHECKING:
    from .schema import Model, Schema

_log = logging.getLogger("realmgen.schema")


def _model_issues(model: "Model", schema: "Schema") -> List[SchemaIssue]:
    issues: List[SchemaIssue] = []

    counts = Counter(p.name for p in model.properties)
    for name in sorted(n for n, c in counts.items() if c > 1):
        issues.append(
            SchemaIssue(
                code="property.duplicate",
                message=f"{model.name} declares property {name!r} {counts[name]} times",
                model=model.name,
                property=name,
            )
        )

    for p in model.properties:
        if p.model is not model:
            issues.append(
                SchemaIssue(
                    code="property.orphan",
                    message=f"{model.name}.{p.name} belongs to another model ({p.model.name})",
                    model=model.name,
                    property=p.name,
                )
            )

        if isinstance(p, (ToOneRelation, ToManyRelation, InverseRelation)):
            if not any(m is p.target for m in schema.models):
                issues.append(
                    SchemaIssue(
                        code="relation.unknown_target",
                        message=f"{model.name}.{p.name} targets {p.target.name}, which is not in this schema",
                        model=model.name,
                        property=p.name,
                    )
                )

        if isinstance(p, InverseRelation):
            if not any(q is p.property for q in p.target.properties):
                issues.append(
                    SchemaIssue(
                        code="linking_objects.missing_property",
                        message=(
                            f"{model.name}.{p.name} links to {p.target.name}.{p.property.name}, "
                            f"which {p.target.name} does not declare"
                        ),
                        model=model.name,
                        property=p.name,
                    )
                )

    pk = model.primary_key
    if pk is not None:
        if not isinstance(pk, TypedField):
            issues.append(
                SchemaIssue(
                    code="primary_key.not_typed_field",
                    message=f"{model.name} primary key {pk.name!r} is not a typed field",
                    model=model.name,
                    property=pk.name,
                )
            )
        elif not any(p is pk for p in model.properties):
            issues.append(
                SchemaIssue(
                    code="primary_key.foreign",
                    message=f"{model.name} primary key {pk.name!r} is not one of its own properties",
                    model=model.name,
                    property=pk.name,
                )
            )

    return issues


def collect_schema_issues(schema: "Schema") -> List[SchemaIssue]:
    issues: List[SchemaIssue] = []

    counts = Counter(m.name for m in schema.models)
    for name in sorted(n for n, c in counts.items() if c > 1):
        issues.append(
            SchemaIssue(
                code="model.duplicate",
                message=f"schema declares model {name!r} {counts[name]} times",
                model=name,
            )
        )

    for model in schema.models:
        issues.extend(_model_issues(model, schema))
    return issues


def validate_schema(schema: "Schema") -> None:
    issues = collect_schema_issues(schema)
    if issues:
        _log.debug("schema %r has %d issue(s)", schema.package_name, len(issues))
        raise SchemaValidationError(issues)
