"""Field validators for the login and register forms.

Each validator is a pure function with the signature::

    def validate_x(value: str) -> ValidationResult

Checks run in a fixed order and the first failing check wins, except for
the password's character classes, which are all checked and reported
together.
"""

import re

from authpanel.validation.result import ErrorKind, ValidationResult

# ---------------------------------------------------------------------------
# Character classes
# ---------------------------------------------------------------------------

# Shared with the strength scorer
UPPERCASE_RE = re.compile(r"[A-Z]")
LOWERCASE_RE = re.compile(r"[a-z]")
DIGIT_RE = re.compile(r"[0-9]")
SPECIAL_RE = re.compile(r'[!@#$%^&*(),.?":{}|<>]')

PASSWORD_MIN_LENGTH = 8
NAME_MIN_LENGTH = 2
NAME_MAX_LENGTH = 50


def has_uppercase(value: str) -> bool:
    return UPPERCASE_RE.search(value) is not None


def has_lowercase(value: str) -> bool:
    return LOWERCASE_RE.search(value) is not None


def has_digit(value: str) -> bool:
    return DIGIT_RE.search(value) is not None


def has_special(value: str) -> bool:
    return SPECIAL_RE.search(value) is not None


# ---------------------------------------------------------------------------
# Email
# ---------------------------------------------------------------------------

# Minimal local@domain.tld shape — not RFC 5322
_EMAIL_RE = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")


def validate_email(value: str) -> ValidationResult:
    """Email must be present and look like ``local@domain.tld``."""
    if not value.strip():
        return ValidationResult.fail(ErrorKind.REQUIRED, "Email is required")
    if not _EMAIL_RE.match(value):
        return ValidationResult.fail(
            ErrorKind.INVALID_FORMAT, "Please enter a valid email address",
        )
    return ValidationResult.ok()


# ---------------------------------------------------------------------------
# Name
# ---------------------------------------------------------------------------


def validate_name(value: str) -> ValidationResult:
    """Trimmed name must be between 2 and 50 characters."""
    length = len(value.strip())
    if length == 0:
        return ValidationResult.fail(ErrorKind.REQUIRED, "Name is required")
    if length < NAME_MIN_LENGTH:
        return ValidationResult.fail(
            ErrorKind.TOO_SHORT,
            f"Name must be at least {NAME_MIN_LENGTH} characters long",
        )
    if length > NAME_MAX_LENGTH:
        return ValidationResult.fail(
            ErrorKind.TOO_LONG,
            f"Name must be less than {NAME_MAX_LENGTH} characters",
        )
    return ValidationResult.ok()


# ---------------------------------------------------------------------------
# Password
# ---------------------------------------------------------------------------

# Order matters: it is the order the missing classes are reported in
_PASSWORD_CLASSES = (
    ("uppercase letter", has_uppercase),
    ("lowercase letter", has_lowercase),
    ("number", has_digit),
    ("special character", has_special),
)


def validate_password(value: str) -> ValidationResult:
    """Password must be 8+ characters and contain every character class.

    A length failure is reported on its own. Otherwise every missing
    class is named in a single message::

        Password must contain at least one uppercase letter, number
    """
    if not value:
        return ValidationResult.fail(ErrorKind.REQUIRED, "Password is required")
    if len(value) < PASSWORD_MIN_LENGTH:
        return ValidationResult.fail(
            ErrorKind.TOO_SHORT,
            f"Password must be at least {PASSWORD_MIN_LENGTH} characters long",
        )

    missing = [label for label, present in _PASSWORD_CLASSES if not present(value)]
    if missing:
        return ValidationResult.fail(
            ErrorKind.MISSING_CLASSES,
            f"Password must contain at least one {', '.join(missing)}",
        )
    return ValidationResult.ok()


def validate_confirm_password(password: str, confirm: str) -> ValidationResult:
    """Confirmation must be present and equal *password* exactly."""
    if not confirm:
        return ValidationResult.fail(ErrorKind.REQUIRED, "Please confirm your password")
    if confirm != password:
        return ValidationResult.fail(ErrorKind.MISMATCH, "Passwords do not match")
    return ValidationResult.ok()
