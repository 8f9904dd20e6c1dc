from __future__ import annotations

import logging
from pathlib import Path
from typing import IO, Any, Dict, Optional

from jinja2 import ChoiceLoader, Environment, FileSystemLoader, StrictUndefined, select_autoescape

from realmgen.config.settings import GeneratorSettings, load_settings
from realmgen.core.field_types import FieldKind, Language
from realmgen.core.schema import Schema

from .helpers import TextHelper, merge_helpers

_log = logging.getLogger("realmgen.render")

PACKAGE_ROOT = Path(__file__).resolve().parents[1]
TEMPLATES_DIR = PACKAGE_ROOT / "templates"


def build_environment(settings: GeneratorSettings, helpers: Optional[Dict[str, TextHelper]] = None) -> Environment:
    search = []
    if settings.templates_dir is not None:
        search.append(FileSystemLoader(str(settings.templates_dir)))
    search.append(FileSystemLoader(str(TEMPLATES_DIR)))

    env = Environment(
        loader=ChoiceLoader(search),
        # Generated source must come out verbatim, never HTML-escaped.
        autoescape=select_autoescape(enabled_extensions=(), default_for_string=False, default=False),
        undefined=StrictUndefined,
        trim_blocks=settings.trim_blocks,
        lstrip_blocks=settings.lstrip_blocks,
        keep_trailing_newline=settings.keep_trailing_newline,
    )
    env.filters.update(helpers or {})
    return env


def template_name_for(language: Language, override: Optional[str] = None) -> str:
    if override:
        return override
    return Language(language).file_name


def build_context(schema: Schema, language: Language, helpers: Dict[str, TextHelper]) -> Dict[str, Any]:
    return {
        "schema": schema,
        "models": schema.models,
        "language": Language(language),
        "field_kind": FieldKind,
        "helpers": helpers,
    }


def render_schema(
    schema: Schema,
    language: Language,
    *,
    template: Optional[str] = None,
    helpers: Optional[Dict[str, TextHelper]] = None,
    settings: Optional[GeneratorSettings] = None,
) -> str:
    """
    Render `schema` for one platform and return the generated source.

    Template engine errors (missing template, syntax error, undefined
    attribute) are raised as-is.
    """
    settings = settings or load_settings()
    language = Language(language)

    if settings.validate_before_render:
        schema.validate()

    table = merge_helpers(helpers)
    env = build_environment(settings, table)
    name = template_name_for(language, template)

    _log.debug(
        "render schema=%r language=%s template=%s models=%d",
        schema.package_name,
        language.value,
        name,
        len(schema.models),
    )
    return env.get_template(name).render(**build_context(schema, language, table))


def write_schema(
    schema: Schema,
    writer: IO[str],
    language: Language,
    *,
    template: Optional[str] = None,
    helpers: Optional[Dict[str, TextHelper]] = None,
    settings: Optional[GeneratorSettings] = None,
) -> None:
    """Render fully, then write to the caller's sink; nothing is written on failure."""
    text = render_schema(schema, language, template=template, helpers=helpers, settings=settings)
    writer.write(text)
    writer.flush()


def write_schema_file(
    schema: Schema,
    path: Path,
    language: Language,
    *,
    template: Optional[str] = None,
    helpers: Optional[Dict[str, TextHelper]] = None,
    settings: Optional[GeneratorSettings] = None,
) -> Path:
    path = Path(path)
    text = render_schema(schema, language, template=template, helpers=helpers, settings=settings)
    # The target is only ever replaced by a complete file.
    tmp = path.with_suffix(path.suffix + ".tmp")
    try:
        tmp.write_text(text, encoding="utf-8")
        tmp.replace(path)
    except OSError:
        tmp.unlink(missing_ok=True)
        raise
    _log.info("Wrote %s model source for %r to %s", Language(language).value, schema.package_name, path)
    return path
