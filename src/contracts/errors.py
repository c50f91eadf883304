"""Shared error types for the pouring solver."""

from __future__ import annotations

from typing import Optional


class InvalidValue(ValueError):
    """Raised when a container, configuration or puzzle request is malformed."""

    def __init__(self, code: str, detail: Optional[str] = None) -> None:
        self.code = code
        self.detail = detail
        message = code if detail is None else f"{code}:{detail}"
        super().__init__(message)


class ReportValidationError(ValueError):
    """Raised when a structured report does not satisfy the report contract."""

    def __init__(self, code: str, path: str = "$", detail: Optional[str] = None) -> None:
        self.code = code
        self.path = path
        self.detail = detail
        message = f"{code} at {path}" if detail is None else f"{code} at {path}: {detail}"
        super().__init__(message)


def require_int(value: object, label: str) -> int:
    """Return ``value`` when it is a plain integer, else raise :class:`InvalidValue`."""

    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidValue("not-an-integer", f"{label}={value!r}")
    return value


__all__ = ["InvalidValue", "ReportValidationError", "require_int"]
