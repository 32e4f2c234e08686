"""Field validation — pure rules, clean results.

Usage::

    from authpanel.validation import check_password_strength, validate_email

    result = validate_email(form["email"])
    if not result:
        errors["email"] = result.error

    strength = check_password_strength(form["password"])
    # strength.score == 4, strength.strength == "strong", strength.feedback == (...)

No validator raises for bad input — every failure is returned as a
``ValidationResult`` carrying an ``ErrorKind`` and a display message.
"""

from authpanel.validation.fields import Field, validate_field
from authpanel.validation.result import ErrorKind, ValidationResult
from authpanel.validation.rules import (
    validate_confirm_password,
    validate_email,
    validate_name,
    validate_password,
)
from authpanel.validation.strength import (
    PasswordStrength,
    Strength,
    StrengthMeter,
    check_password_strength,
    strength_meter,
)

__all__ = [
    "ErrorKind",
    "Field",
    "PasswordStrength",
    "Strength",
    "StrengthMeter",
    "ValidationResult",
    "check_password_strength",
    "strength_meter",
    "validate_confirm_password",
    "validate_email",
    "validate_field",
    "validate_name",
    "validate_password",
]
