from __future__ import annotations

from dataclasses import dataclass
from typing import List, Sequence


class RealmGenError(Exception):
    pass


class SchemaConfigurationError(RealmGenError, ValueError):
    """Raised when a builder call is missing something it needs."""


@dataclass(frozen=True)
class SchemaIssue:
    code: str
    message: str
    model: str | None = None
    property: str | None = None


class SchemaValidationError(RealmGenError):
    def __init__(self, issues: Sequence[SchemaIssue]):
        self.issues: List[SchemaIssue] = list(issues)
        lines = "; ".join(f"[{i.code}] {i.message}" for i in self.issues)
        super().__init__(f"Schema validation failed ({len(self.issues)} issue(s)): {lines}")
