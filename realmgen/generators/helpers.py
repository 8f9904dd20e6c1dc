from __future__ import annotations

import re
from typing import Callable, Dict, List, Optional

TextHelper = Callable[[str], str]

_WORD_RE = re.compile(r"[A-Z]+(?=[A-Z][a-z]|\d|\b|_)|[A-Z]?[a-z]+|[A-Z]+|\d+")


def _words(value: str) -> List[str]:
    return _WORD_RE.findall(str(value))


def upper_first(value: str) -> str:
    value = str(value)
    return value[:1].upper() + value[1:]


def lower_first(value: str) -> str:
    value = str(value)
    return value[:1].lower() + value[1:]


def snake_case(value: str) -> str:
    return "_".join(w.lower() for w in _words(value))


def screaming_snake_case(value: str) -> str:
    return "_".join(w.upper() for w in _words(value))


def pascal_case(value: str) -> str:
    return "".join(w[:1].upper() + w[1:].lower() for w in _words(value))


def camel_case(value: str) -> str:
    return lower_first(pascal_case(value))


def default_helpers() -> Dict[str, TextHelper]:
    return {
        "upper_first": upper_first,
        "lower_first": lower_first,
        "snake_case": snake_case,
        "screaming_snake_case": screaming_snake_case,
        "pascal_case": pascal_case,
        "camel_case": camel_case,
    }


def merge_helpers(overrides: Optional[Dict[str, TextHelper]] = None) -> Dict[str, TextHelper]:
    helpers = default_helpers()
    for name, fn in sorted((overrides or {}).items()):
        if not callable(fn):
            raise TypeError(f"helper {name!r} must be callable, got {type(fn).__name__}")
        helpers[str(name)] = fn
    return helpers
