"""JSON Schema validation for structured solve reports."""

from __future__ import annotations

import json
from functools import lru_cache
from pathlib import Path
from typing import Any, Dict, Mapping

import jsonschema

from .errors import ReportValidationError

_SCHEMA_ROOT = Path(__file__).resolve().parent / "schemas"
_REPORT_SCHEMA = "solve_report.schema.json"


@lru_cache(maxsize=None)
def load_schema(schema_name: str = _REPORT_SCHEMA) -> Dict[str, Any]:
    """Load a schema shipped next to this module."""

    path = _SCHEMA_ROOT / schema_name
    try:
        return json.loads(path.read_text("utf-8"))
    except FileNotFoundError as exc:
        raise ReportValidationError("schema-not-found", detail=schema_name) from exc


def _json_path(exc: jsonschema.ValidationError) -> str:
    parts = ["$"]
    for part in exc.absolute_path:
        parts.append(f"[{part}]" if isinstance(part, int) else f".{part}")
    return "".join(parts)


def _check_invariants(report: Mapping[str, Any]) -> None:
    steps = report["steps"]
    if report["solved"]:
        if report["moves"] is None or report["moves"] != len(steps) - 1:
            raise ReportValidationError("moves-mismatch", "$.moves", "moves must equal len(steps) - 1")
        if steps and steps[0]["move"] is not None:
            raise ReportValidationError("invariant-violation", "$.steps[0].move", "first step has no move")
    elif report["moves"] is not None or steps:
        raise ReportValidationError("invariant-violation", "$", "unsolved reports carry no moves or steps")

    for index, step in enumerate(steps):
        if step["step"] != index:
            raise ReportValidationError("invariant-violation", f"$.steps[{index}].step", "steps must be numbered from 0")
        for position, container in enumerate(step["containers"]):
            if container["level"] > container["capacity"]:
                raise ReportValidationError(
                    "invariant-violation",
                    f"$.steps[{index}].containers[{position}].level",
                    "level exceeds capacity",
                )


def validate_report(report: Mapping[str, Any]) -> None:
    """Validate ``report`` against the solve report schema and its invariants."""

    schema = load_schema()
    validator_cls = jsonschema.validators.validator_for(schema)
    validator_cls.check_schema(schema)
    try:
        validator_cls(schema).validate(report)
    except jsonschema.ValidationError as exc:
        raise ReportValidationError("schema-violation", _json_path(exc), exc.message) from exc

    # Schema cannot express the cross-field rules.
    _check_invariants(report)


__all__ = ["load_schema", "validate_report"]
