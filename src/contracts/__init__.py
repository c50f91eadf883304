"""Error types and report contracts shared by the pouring solver."""

from __future__ import annotations

from .errors import InvalidValue, ReportValidationError
from .jsoncanon import jcs_dump, jcs_sha256
from .schema_validator import load_schema, validate_report

__all__ = [
    "InvalidValue",
    "ReportValidationError",
    "jcs_dump",
    "jcs_sha256",
    "load_schema",
    "validate_report",
]
