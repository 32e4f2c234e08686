"""authpanel exception hierarchy.

Validation failures are *data* (``ValidationResult``), never exceptions.
The types here cover programming and configuration mistakes, plus the
one failure a submission handler may report back to its form.
"""


class AuthPanelError(Exception):
    """Base for all authpanel-specific errors."""


class ConfigurationError(AuthPanelError):
    """Raised when a ``PanelConfig`` is invalid.

    Raised eagerly from ``PanelConfig.__post_init__`` so a bad value never
    reaches a running form.
    """


class UnknownFieldError(AuthPanelError, KeyError):
    """Raised when an event or lookup names a field the form does not have."""

    def __init__(self, field_name: str, form: str | None = None) -> None:
        self.field_name = field_name
        self.form = form
        super().__init__(field_name)

    def __str__(self) -> str:
        if self.form:
            return f"Unknown field {self.field_name!r} for {self.form} form"
        return f"Unknown field {self.field_name!r}"


class SubmissionError(AuthPanelError):
    """Raised by a submission handler to report a failed submission.

    The message is shown as the form-level error. It never populates a
    per-field entry in the error map.
    """

    def __init__(self, detail: str = "Submission failed. Please try again.") -> None:
        self.detail = detail
        super().__init__(detail)
