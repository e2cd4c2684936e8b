"""Error taxonomy for the triage core.

Error codes:
    * ``VALIDATION_ERROR`` -- mandatory input missing or blank.
    * ``MISSING_FIELD`` -- a required incident field is absent (FIR drafts).
    * ``INTERNAL_COMPOSITION_ERROR`` -- unexpected fault while composing a
      coach reply. Never leaves the safety coach; it is converted into the
      safe fallback reply at that boundary.
"""

from __future__ import annotations

from typing import Any

__all__ = [
    "InternalCompositionError",
    "MissingFieldError",
    "TriageError",
    "ValidationError",
]


class TriageError(Exception):
    """Base class for all triage errors.

    Carries a stable ``code``, a human-readable ``message`` and a
    ``details`` mapping so the transport layer can serialise it as-is.
    """

    code: str = "TRIAGE_ERROR"

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.details = details if details is not None else {}

    def to_dict(self) -> dict[str, Any]:
        return {"code": self.code, "message": self.message, "details": self.details}

    def __repr__(self) -> str:
        return f"{type(self).__name__}(code={self.code!r}, message={self.message!r})"


class ValidationError(TriageError):
    """Mandatory input is missing or empty."""

    code = "VALIDATION_ERROR"

    def __init__(self, field: str, message: str | None = None, details: dict[str, Any] | None = None) -> None:
        self.field = field
        merged = {"field": field, **(details or {})}
        super().__init__(message or f"{field} is required", merged)


class MissingFieldError(ValidationError):
    """A required incident-report field is absent."""

    code = "MISSING_FIELD"

    def __init__(self, field: str) -> None:
        super().__init__(field, f"Missing required field: {field}")


class InternalCompositionError(TriageError):
    code = "INTERNAL_COMPOSITION_ERROR"
