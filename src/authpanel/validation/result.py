"""Validation results — immutable outcomes for a single field."""

from dataclasses import dataclass
from enum import StrEnum


class ErrorKind(StrEnum):
    """Why a field failed validation."""

    REQUIRED = "required"
    TOO_SHORT = "too_short"
    TOO_LONG = "too_long"
    INVALID_FORMAT = "invalid_format"
    MISSING_CLASSES = "missing_classes"
    MISMATCH = "mismatch"
    PASSWORD_NOT_YET_ENTERED = "password_not_yet_entered"


@dataclass(frozen=True, slots=True)
class ValidationResult:
    """The outcome of validating one field value.

    ``error`` and ``kind`` are set if and only if the value is invalid.
    The result is falsy when invalid, so you can write::

        result = validate_email(value)
        if not result:
            errors["email"] = result.error

    Build instances with ``ValidationResult.ok()`` and
    ``ValidationResult.fail()`` rather than the constructor.
    """

    is_valid: bool
    error: str | None = None
    kind: ErrorKind | None = None

    def __post_init__(self) -> None:
        if self.is_valid != (self.error is None):
            msg = "error must be set if and only if the result is invalid"
            raise ValueError(msg)
        if (self.kind is None) != (self.error is None):
            msg = "kind must accompany error"
            raise ValueError(msg)

    @classmethod
    def ok(cls) -> "ValidationResult":
        return _VALID

    @classmethod
    def fail(cls, kind: ErrorKind, error: str) -> "ValidationResult":
        return cls(is_valid=False, error=error, kind=kind)

    def __bool__(self) -> bool:
        """Falsy when invalid — enables ``if not result:`` pattern."""
        return self.is_valid


_VALID = ValidationResult(is_valid=True)
