from .helpers import default_helpers, merge_helpers
from .renderer import build_environment, render_schema, template_name_for, write_schema, write_schema_file

__all__ = [
    "build_environment",
    "default_helpers",
    "merge_helpers",
    "render_schema",
    "template_name_for",
    "write_schema",
    "write_schema_file",
]
