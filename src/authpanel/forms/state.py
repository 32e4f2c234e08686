"""Form state and the pure transition function behind both forms.

A form is a ``FormState`` value plus events applied to it::

    state = FormState.empty(FormKind.REGISTER)
    state = transition(state, Change("email", "ada@example"))
    state = transition(state, Blur("email"))
    state.errors  # {"email": "Please enter a valid email address"}

Nothing here touches the UI, the clock, or the submission handler. Those
live in ``authpanel.forms.session``.
"""

from collections.abc import Mapping
from dataclasses import dataclass, replace
from enum import StrEnum
from types import MappingProxyType

from authpanel.errors import UnknownFieldError
from authpanel.validation.fields import Field
from authpanel.validation.result import ValidationResult
from authpanel.validation.rules import validate_confirm_password
from authpanel.validation.strength import (
    EMPTY_STRENGTH,
    PasswordStrength,
    check_password_strength,
)


class FormKind(StrEnum):
    LOGIN = "login"
    REGISTER = "register"

    @property
    def fields(self) -> tuple[Field, ...]:
        return _FORM_FIELDS[self]


_FORM_FIELDS = {
    FormKind.LOGIN: (Field.EMAIL, Field.PASSWORD),
    FormKind.REGISTER: (Field.NAME, Field.EMAIL, Field.PASSWORD, Field.CONFIRM_PASSWORD),
}


# ---------------------------------------------------------------------------
# Events
# ---------------------------------------------------------------------------


@dataclass(frozen=True, slots=True)
class Change:
    """The user typed into *field*; *value* is the full new value."""

    field: Field | str
    value: str


@dataclass(frozen=True, slots=True)
class Blur:
    """*field* lost focus."""

    field: Field | str


@dataclass(frozen=True, slots=True)
class Submit:
    """The user submitted the form."""


type Event = Change | Blur | Submit


# ---------------------------------------------------------------------------
# State
# ---------------------------------------------------------------------------


def _frozen(mapping: Mapping[str, str]) -> Mapping[str, str]:
    return MappingProxyType(dict(mapping))


@dataclass(frozen=True, slots=True)
class FormState:
    """Everything a form renders from, as one immutable value.

    ``data`` maps every field of the form to its current value.
    ``errors`` only holds fields that currently fail validation.
    ``strength`` tracks the password on the register form and stays
    empty on the login form. ``form_error`` is a submission failure,
    kept apart from per-field errors.
    """

    kind: FormKind
    data: Mapping[str, str]
    errors: Mapping[str, str]
    strength: PasswordStrength = EMPTY_STRENGTH
    is_submitting: bool = False
    form_error: str | None = None

    @classmethod
    def empty(cls, kind: FormKind) -> "FormState":
        return cls(
            kind=kind,
            data=_frozen(dict.fromkeys(kind.fields, "")),
            errors=_frozen({}),
        )

    @property
    def is_valid(self) -> bool:
        """True when no field currently shows an error."""
        return not self.errors

    def field(self, name: Field | str) -> Field:
        """Resolve *name* to a field of this form."""
        try:
            field = Field.parse(name)
        except UnknownFieldError:
            raise UnknownFieldError(str(name), form=self.kind) from None
        if field not in self.kind.fields:
            raise UnknownFieldError(str(name), form=self.kind)
        return field

    def value(self, name: Field | str) -> str:
        return self.data[self.field(name)]

    def error(self, name: Field | str) -> str | None:
        return self.errors.get(self.field(name))

    def evolve(self, **changes: object) -> "FormState":
        """Return a copy with *changes* applied; mappings are re-frozen."""
        for key in ("data", "errors"):
            if key in changes:
                changes[key] = _frozen(changes[key])  # type: ignore[arg-type]
        return replace(self, **changes)  # type: ignore[arg-type]


# ---------------------------------------------------------------------------
# Transitions
# ---------------------------------------------------------------------------


def check_field(data: Mapping[str, str], field: Field) -> ValidationResult:
    """Validate *field* against the rest of the form's current values.

    The confirmation is compared against whatever the password currently
    holds, even when that is empty.
    """
    if field is Field.CONFIRM_PASSWORD:
        return validate_confirm_password(data[Field.PASSWORD], data[field])
    return field.validate(data[field])


def _record(errors: dict[str, str], field: Field, result: ValidationResult) -> None:
    if result:
        errors.pop(field, None)
    else:
        errors[field] = result.error  # type: ignore[assignment]


def validate_all(state: FormState) -> dict[str, str]:
    """Return a fresh error map covering every field of the form."""
    errors: dict[str, str] = {}
    for field in state.kind.fields:
        _record(errors, field, check_field(state.data, field))
    return errors


def transition(state: FormState, event: Event) -> FormState:
    """Apply one user event to *state* and return the new state.

    - ``Change`` stores the value, and re-validates the field only if it
      already shows an error. On the register form a password change also
      rescores strength and re-checks a non-empty confirmation.
    - ``Blur`` always validates the field.
    - ``Submit`` validates every field and replaces the error map.

    Raises ``UnknownFieldError`` for a field the form does not have.
    """
    match event:
        case Change(field=name, value=value):
            field = state.field(name)
            data = {**state.data, field: value}
            errors = dict(state.errors)
            if field in errors:
                _record(errors, field, check_field(data, field))

            strength = state.strength
            if state.kind is FormKind.REGISTER and field is Field.PASSWORD:
                strength = check_password_strength(value)
                if data[Field.CONFIRM_PASSWORD]:
                    _record(
                        errors,
                        Field.CONFIRM_PASSWORD,
                        check_field(data, Field.CONFIRM_PASSWORD),
                    )
            return state.evolve(data=data, errors=errors, strength=strength)

        case Blur(field=name):
            field = state.field(name)
            errors = dict(state.errors)
            _record(errors, field, check_field(state.data, field))
            return state.evolve(errors=errors)

        case Submit():
            return state.evolve(errors=validate_all(state), form_error=None)

    msg = f"Unsupported form event: {event!r}"
    raise TypeError(msg)
