"""Field kinds and the validator each one routes to.

``Field`` values are the field names forms use for their data and error
maps, so a ``Field`` can be used anywhere a field name is expected.
"""

from enum import StrEnum

from authpanel.errors import UnknownFieldError
from authpanel.validation.result import ErrorKind, ValidationResult
from authpanel.validation.rules import (
    validate_confirm_password,
    validate_email,
    validate_name,
    validate_password,
)


class Field(StrEnum):
    NAME = "name"
    EMAIL = "email"
    PASSWORD = "password"
    CONFIRM_PASSWORD = "confirmPassword"

    @classmethod
    def parse(cls, name: "str | Field") -> "Field":
        """Return the member for *name*, or raise ``UnknownFieldError``."""
        try:
            return cls(name)
        except ValueError:
            raise UnknownFieldError(str(name)) from None

    @property
    def depends_on_password(self) -> bool:
        return self is Field.CONFIRM_PASSWORD

    def validate(self, value: str, password: str | None = None) -> ValidationResult:
        """Validate *value* for this field.

        *password* is only consulted for ``CONFIRM_PASSWORD``. When it is
        missing or empty the confirmation is not compared at all.
        """
        if self is Field.CONFIRM_PASSWORD:
            if not password:
                return ValidationResult.fail(
                    ErrorKind.PASSWORD_NOT_YET_ENTERED, "Please enter password first",
                )
            return validate_confirm_password(password, value)
        return _SINGLE_VALUE_VALIDATORS[self](value)


_SINGLE_VALUE_VALIDATORS = {
    Field.NAME: validate_name,
    Field.EMAIL: validate_email,
    Field.PASSWORD: validate_password,
}


def validate_field(
    field: Field | str,
    value: str,
    password: str | None = None,
) -> ValidationResult:
    """Validate *value* for *field* (a ``Field`` or its name)."""
    return Field.parse(field).validate(value, password)
